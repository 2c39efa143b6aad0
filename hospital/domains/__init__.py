"""Bounded contexts."""
