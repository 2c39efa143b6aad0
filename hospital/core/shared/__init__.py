"""
Shared utilities module

Domain-agnostic helpers used across the application: logging setup and
field validators.
"""
