"""
Medical History Repository Port
"""

from typing import Protocol, runtime_checkable

from hospital.domains.healthcare.domain.entities.medical_history import MedicalHistory


@runtime_checkable
class IMedicalHistoryRepository(Protocol):
    """
    Medical history repository interface.

    Histories are keyed by their patient's id.
    """

    async def find_by_patient_id(self, patient_id: int) -> MedicalHistory | None:
        ...

    async def exists(self, patient_id: int) -> bool:
        ...

    async def save(self, history: MedicalHistory) -> MedicalHistory:
        """
        Insert or update the history of ``history.id``.

        Raises:
            NotFoundError: The owning patient does not exist
        """
        ...

    async def delete(self, patient_id: int) -> bool:
        """
        Delete the history of a patient.

        Returns:
            True if deleted, False if the patient had none
        """
        ...
