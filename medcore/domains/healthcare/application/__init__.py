"""
Healthcare Application Layer

Ports that the service layer implements to persist healthcare aggregates.
"""
