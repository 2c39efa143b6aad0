"""
Doctor Repository Port

Interface for doctor data access following Clean Architecture.
"""

from datetime import datetime
from typing import Protocol, runtime_checkable

from hospital.domains.healthcare.domain.entities.doctor import Doctor
from hospital.domains.healthcare.domain.value_objects.appointment_status import DoctorSpecialty


@runtime_checkable
class IDoctorRepository(Protocol):
    """
    Doctor repository interface.

    Defines the contract for doctor data access operations.
    """

    async def find_by_id(self, doctor_id: int) -> Doctor | None:
        """
        Find doctor by ID.

        Args:
            doctor_id: Unique doctor identifier

        Returns:
            Doctor if found, None otherwise
        """
        ...

    async def find_by_license_number(self, license_number: str) -> Doctor | None:
        """
        Find doctor by license number (natural key).

        Args:
            license_number: Trimmed professional license number

        Returns:
            Doctor if found, None otherwise
        """
        ...

    async def exists_by_license_number(self, license_number: str) -> bool:
        ...

    async def list_all(self) -> list[Doctor]:
        ...

    async def find_by_specialty(self, specialty: DoctorSpecialty) -> list[Doctor]:
        """Doctors practising ``specialty``, ordered by name."""
        ...

    async def find_with_appointments_from(self, moment: datetime) -> list[Doctor]:
        """
        Doctors with at least one appointment at or after ``moment``.

        Args:
            moment: Lower bound (inclusive) on the appointment timestamp

        Returns:
            Distinct doctors ordered by name
        """
        ...

    async def save(self, doctor: Doctor) -> Doctor:
        """
        Insert a new doctor or update an existing one.

        Raises:
            DuplicateKeyError: The license number is already registered
            NotFoundError: Updating a doctor that no longer exists
        """
        ...

    async def delete(self, doctor_id: int) -> bool:
        """
        Delete a doctor row.

        Returns:
            True if deleted, False if not found
        """
        ...
