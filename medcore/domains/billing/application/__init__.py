"""
Billing Application Layer

Ports that the service layer implements to persist billing aggregates.
"""
