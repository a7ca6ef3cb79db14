"""
Core Module

Domain building blocks and shared utilities used by every bounded context.
"""
