"""
Medical History Entity

At most one history exists per patient and it shares the patient's id.
"""

from dataclasses import dataclass
from typing import Any

from hospital.core.domain import Entity, InvalidArgumentError
from hospital.core.shared.validators import Validator

ALLERGIES_MAX = 500
BACKGROUND_MAX = 1000
OBSERVATIONS_MAX = 1000


@dataclass(eq=False)
class MedicalHistory(Entity[int]):
    """
    Free-text clinical notes owned by a patient.

    ``id`` is always the owning patient's id; the history is deleted
    together with its patient.
    """

    allergies: str | None = None
    background: str | None = None
    observations: str | None = None

    def __post_init__(self):
        if self.id is None:
            raise InvalidArgumentError("patient_id", "A medical history must belong to a patient")
        self._apply(self.allergies, self.background, self.observations)

    def _apply(self, allergies: str | None, background: str | None, observations: str | None) -> None:
        values = (
            Validator.optional_text(allergies, ALLERGIES_MAX, "allergies"),
            Validator.optional_text(background, BACKGROUND_MAX, "background"),
            Validator.optional_text(observations, OBSERVATIONS_MAX, "observations"),
        )
        self.allergies, self.background, self.observations = values

    @property
    def patient_id(self) -> int:
        assert self.id is not None
        return self.id

    def update_notes(self, allergies: str | None, background: str | None, observations: str | None) -> None:
        """Overwrite all three notes."""
        self._apply(allergies, background, observations)
        self.touch()

    def is_empty(self) -> bool:
        return not (self.allergies or self.background or self.observations)

    def to_summary_dict(self) -> dict[str, Any]:
        return {
            "patient_id": self.id,
            "allergies": self.allergies,
            "background": self.background,
            "observations": self.observations,
        }
