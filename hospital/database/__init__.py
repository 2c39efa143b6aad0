"""
Database package: declarative base, async engine and session handling.
"""

from hospital.database.async_db import (
    create_async_database_engine,
    create_session_factory,
    dispose_engine,
    get_async_engine,
    get_session_factory,
    transactional_session,
)
from hospital.database.base import Base, TimestampMixin

__all__ = [
    "Base",
    "TimestampMixin",
    "create_async_database_engine",
    "create_session_factory",
    "dispose_engine",
    "get_async_engine",
    "get_session_factory",
    "transactional_session",
]
