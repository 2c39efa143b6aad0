"""
Unit tests for shared validators and core value objects.
"""

from datetime import date, datetime, timedelta

import pytest

from hospital.core.domain import Email, StatusEnum, ValidationError
from hospital.core.shared.validators import EMAIL_PATTERN, Validator


@pytest.mark.unit
@pytest.mark.parametrize(
    "address",
    ["user@example.com", "first.last+tag@sub.domain.org", "a_b-c@x.io"],
)
def test_valid_emails(address):
    assert EMAIL_PATTERN.match(address)
    assert Validator.is_valid_email(address)
    assert str(Email(address)) == address


@pytest.mark.unit
@pytest.mark.parametrize(
    "address",
    ["", "plain", "@example.com", "user@", "user@example", "user@example.c", "us er@example.com"],
)
def test_invalid_emails(address):
    assert not Validator.is_valid_email(address)
    with pytest.raises(ValidationError) as exc_info:
        Email(address)
    assert exc_info.value.field == "email"


@pytest.mark.unit
def test_email_is_trimmed_and_bounded():
    assert Email("  user@example.com ").address == "user@example.com"
    assert Email("user@example.com").get_domain() == "example.com"

    too_long = "u" * 90 + "@example.com"
    with pytest.raises(ValidationError):
        Email(too_long)


@pytest.mark.unit
def test_required_text_trims_and_checks_length():
    assert Validator.required_text("  abc ", 3, "name") == "abc"

    with pytest.raises(ValidationError) as exc_info:
        Validator.required_text("abcd", 3, "name")
    assert exc_info.value.details["max_length"] == 3

    with pytest.raises(ValidationError):
        Validator.required_text("   ", 3, "name")


@pytest.mark.unit
def test_optional_text_turns_blank_into_none():
    assert Validator.optional_text(None, 5) is None
    assert Validator.optional_text("   ", 5) is None
    assert Validator.optional_text(" ok ", 5) == "ok"


@pytest.mark.unit
def test_not_in_future():
    today = date.today()

    assert Validator.not_in_future(today, "dob") == today
    with pytest.raises(ValidationError) as exc_info:
        Validator.not_in_future(today + timedelta(days=1), "dob")
    assert exc_info.value.field == "dob"


@pytest.mark.unit
def test_not_in_future_accepts_datetime_values():
    now = datetime.now()

    assert Validator.not_in_future(now, "dob") == now.date()
    with pytest.raises(ValidationError, match="cannot be in the future"):
        Validator.not_in_future(now + timedelta(days=2), "dob")
    with pytest.raises(ValidationError, match="must be a date"):
        Validator.not_in_future("1990-05-15", "dob")


class Color(StatusEnum):
    RED = "red"
    DARK_BLUE = "dark_blue"


@pytest.mark.unit
def test_status_enum_from_string():
    assert Color.from_string(" RED ") is Color.RED
    assert Color.from_string("Dark_Blue") is Color.DARK_BLUE
    assert Color.values() == ["red", "dark_blue"]

    with pytest.raises(ValueError):
        Color.from_string("green")
