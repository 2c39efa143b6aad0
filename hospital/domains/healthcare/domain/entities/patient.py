"""
Patient Entity for Healthcare Domain

Represents a registered patient. A patient owns its medical history and its
appointments; both are referenced by ``patient_id`` only.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any

from hospital.core.domain import AggregateRoot, Email
from hospital.core.shared.validators import Validator

FULL_NAME_MAX = 100
NATIONAL_ID_MAX = 20
PHONE_MAX = 15


@dataclass(eq=False)
class Patient(AggregateRoot[int]):
    """
    Patient aggregate root for healthcare domain.

    The national ID is the natural key; uniqueness is checked by the
    registration use case and enforced by a unique index.

    Example:
        ```python
        patient = Patient(
            full_name="María García",
            national_id="1234567890101",
            date_of_birth=date(1990, 5, 15),
            email="maria@example.com",
        )
        ```
    """

    full_name: str = ""
    national_id: str = ""
    date_of_birth: date | None = None
    phone: str | None = None
    email: Email | str | None = None

    def __post_init__(self):
        """Validate patient after initialization."""
        self._apply(self.full_name, self.national_id, self.date_of_birth, self.phone, self.email)

    def _apply(
        self,
        full_name: str | None,
        national_id: str | None,
        date_of_birth: date | None,
        phone: str | None,
        email: Email | str | None,
    ) -> None:
        # Validate everything before assigning so a failure leaves the entity untouched
        name = Validator.required_text(full_name, FULL_NAME_MAX, "full_name")
        key = Validator.required_text(national_id, NATIONAL_ID_MAX, "national_id")
        dob = Validator.not_in_future(date_of_birth, "date_of_birth")
        phone_number = Validator.optional_text(phone, PHONE_MAX, "phone")
        address = email if isinstance(email, Email) else Email(Validator.required(email, "email"))

        self.full_name = name
        self.national_id = key
        self.date_of_birth = dob
        self.phone = phone_number
        self.email = address

    def update_details(
        self,
        full_name: str | None,
        national_id: str | None,
        date_of_birth: date | None,
        phone: str | None,
        email: Email | str | None,
    ) -> None:
        """Replace every editable field, re-validating all of them."""
        self._apply(full_name, national_id, date_of_birth, phone, email)
        self.touch()

    @property
    def email_address(self) -> str:
        return str(self.email)

    @property
    def age(self) -> int:
        """Age in whole years."""
        assert self.date_of_birth is not None
        today = date.today()
        age = today.year - self.date_of_birth.year
        if (today.month, today.day) < (self.date_of_birth.month, self.date_of_birth.day):
            age -= 1
        return age

    def to_summary_dict(self) -> dict[str, Any]:
        """Convert to summary dictionary."""
        return {
            "id": self.id,
            "full_name": self.full_name,
            "national_id": self.national_id,
            "date_of_birth": self.date_of_birth.isoformat() if self.date_of_birth else None,
            "age": self.age,
            "phone": self.phone,
            "email": self.email_address,
        }

    def __str__(self) -> str:
        return f"{self.full_name} ({self.national_id})"
