"""
Doctor Entity for Healthcare Domain
"""

from dataclasses import dataclass
from typing import Any

from hospital.core.domain import AggregateRoot, Email, ValidationError
from hospital.core.shared.validators import Validator

from ..value_objects.appointment_status import DoctorSpecialty

FULL_NAME_MAX = 100
LICENSE_NUMBER_MAX = 20


@dataclass(eq=False)
class Doctor(AggregateRoot[int]):
    """
    Doctor aggregate root.

    Doctors are referenced by appointments but never own them; the license
    number is the natural key.
    """

    full_name: str = ""
    license_number: str = ""
    specialty: DoctorSpecialty | str | None = None
    email: Email | str | None = None

    def __post_init__(self):
        self._apply(self.full_name, self.license_number, self.specialty, self.email)

    def _apply(
        self,
        full_name: str | None,
        license_number: str | None,
        specialty: DoctorSpecialty | str | None,
        email: Email | str | None,
    ) -> None:
        name = Validator.required_text(full_name, FULL_NAME_MAX, "full_name")
        license_key = Validator.required_text(license_number, LICENSE_NUMBER_MAX, "license_number")
        parsed_specialty = self._parse_specialty(specialty)
        address = email if isinstance(email, Email) else Email(Validator.required(email, "email"))

        self.full_name = name
        self.license_number = license_key
        self.specialty = parsed_specialty
        self.email = address

    @staticmethod
    def _parse_specialty(value: DoctorSpecialty | str | None) -> DoctorSpecialty:
        Validator.required(value, "specialty")
        if isinstance(value, DoctorSpecialty):
            return value
        try:
            return DoctorSpecialty.from_string(str(value))
        except ValueError:
            raise ValidationError(
                f"Unknown specialty '{value}'",
                field="specialty",
                details={"allowed": DoctorSpecialty.values()},
            ) from None

    def update_details(
        self,
        full_name: str | None,
        license_number: str | None,
        specialty: DoctorSpecialty | str | None,
        email: Email | str | None,
    ) -> None:
        """Replace every editable field, re-validating all of them."""
        self._apply(full_name, license_number, specialty, email)
        self.touch()

    @property
    def email_address(self) -> str:
        return str(self.email)

    def to_summary_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "full_name": self.full_name,
            "license_number": self.license_number,
            "specialty": self.specialty.value if isinstance(self.specialty, DoctorSpecialty) else self.specialty,
            "email": self.email_address,
        }

    def __str__(self) -> str:
        return f"Dr. {self.full_name} ({self.license_number})"
