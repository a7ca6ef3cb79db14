"""
Bounded contexts of the medcore domain.
"""
