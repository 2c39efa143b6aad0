"""Healthcare domain services."""

from hospital.domains.healthcare.domain.services.scheduling_service import Clock, SchedulingService

__all__ = ["Clock", "SchedulingService"]
