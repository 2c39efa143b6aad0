"""
Integrity error translation.

Unique indexes are the source of truth for natural keys and for the doctor
slot rule; a violation surfacing at flush time becomes the matching domain
error. Messages differ per backend, so each rule lists every marker that
identifies it (PostgreSQL names the index, SQLite names the columns).
"""

import logging
from collections.abc import Callable

from sqlalchemy.exc import IntegrityError

from hospital.core.domain import DomainException

logger = logging.getLogger(__name__)

ErrorFactory = Callable[[], DomainException]


def translate_integrity_error(
    error: IntegrityError,
    rules: list[tuple[tuple[str, ...], ErrorFactory]],
) -> DomainException | None:
    """
    Map an IntegrityError to a domain error.

    Args:
        error: Error raised by the flush
        rules: ``(markers, factory)`` pairs; the first rule with any marker
            found in the driver message wins

    Returns:
        The domain error, or None when no rule matches
    """
    message = str(error.orig).lower()
    for markers, factory in rules:
        if any(marker.lower() in message for marker in markers):
            domain_error = factory()
            logger.debug(f"Translated integrity error to {domain_error.code}: {message}")
            return domain_error
    return None
