"""
Patient Repository Port

Interface for patient data access following Clean Architecture.
"""

from typing import Protocol, runtime_checkable

from hospital.domains.healthcare.domain.entities.patient import Patient


@runtime_checkable
class IPatientRepository(Protocol):
    """
    Patient repository interface.

    Implementations flush but never commit; the caller owns the transaction.
    """

    async def find_by_id(self, patient_id: int) -> Patient | None:
        """
        Find patient by ID.

        Args:
            patient_id: Unique patient identifier

        Returns:
            Patient if found, None otherwise
        """
        ...

    async def find_by_national_id(self, national_id: str) -> Patient | None:
        """
        Find patient by national ID (natural key).

        Args:
            national_id: Trimmed national identity document number

        Returns:
            Patient if found, None otherwise
        """
        ...

    async def exists_by_national_id(self, national_id: str) -> bool:
        ...

    async def list_all(self) -> list[Patient]:
        """All patients ordered by name."""
        ...

    async def save(self, patient: Patient) -> Patient:
        """
        Insert a new patient or update an existing one.

        Args:
            patient: Patient to persist

        Returns:
            The patient with its id assigned

        Raises:
            DuplicateKeyError: The national ID is already registered
            NotFoundError: Updating a patient that no longer exists
        """
        ...

    async def delete(self, patient_id: int) -> bool:
        """
        Delete a patient row.

        Returns:
            True if deleted, False if not found
        """
        ...
