"""
medcore - clinic and billing domain core.

Self-validating identifiers, value objects and entities for patients,
organizations, doctors, appointments, medical records, customers and charges.
"""

__version__ = "0.1.0"
