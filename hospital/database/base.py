"""
Base models and mixins for the database
"""

from datetime import datetime

from sqlalchemy import Column, DateTime
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class TimestampMixin:
    """Mixin adding created/updated timestamps."""

    # Naive local time, consistent with appointment timestamps
    created_at = Column(
        DateTime,
        default=datetime.now,
        nullable=False,
    )
    updated_at = Column(
        DateTime,
        default=datetime.now,
        onupdate=datetime.now,
        nullable=False,
    )
