"""
Billing Bounded Context

Customers and the charges made against them.
"""
