"""Field validators for account records.

Each validator takes a value and returns a human-readable reason when the
value is rejected, or None when it passes. Rules for a record are a mapping
of field name to an ordered list of validators; validate_record() runs all
of them in one pass and reports at most one reason per field.
"""
import re
from typing import Any, Callable

from email_validator import EmailNotValidError, validate_email

from printbooth.errors import FieldError

Validator = Callable[[Any], str | None]

EMAIL_MAX_LENGTH = 254


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def required(message: str) -> Validator:
    def check(value: Any) -> str | None:
        return message if _is_blank(value) else None
    return check


def max_length(limit: int, message: str) -> Validator:
    def check(value: Any) -> str | None:
        if isinstance(value, str) and len(value) > limit:
            return message
        return None
    return check


def min_length(limit: int, message: str) -> Validator:
    def check(value: Any) -> str | None:
        if isinstance(value, str) and len(value) < limit:
            return message
        return None
    return check


def matches(pattern: str, message: str) -> Validator:
    compiled = re.compile(pattern, re.ASCII)

    def check(value: Any) -> str | None:
        if _is_blank(value):
            return None
        if not isinstance(value, str) or not compiled.fullmatch(value):
            return message
        return None
    return check


def email_address(message: str) -> Validator:
    """Syntax check only; no DNS lookup."""
    def check(value: Any) -> str | None:
        if _is_blank(value):
            return None
        if not isinstance(value, str):
            return message
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError:
            return message
        return None
    return check


def integer(message: str) -> Validator:
    def check(value: Any) -> str | None:
        if value is None:
            return None
        if isinstance(value, bool) or not isinstance(value, int):
            return message
        return None
    return check


def min_value(floor: int, message: str) -> Validator:
    def check(value: Any) -> str | None:
        if isinstance(value, int) and not isinstance(value, bool) and value < floor:
            return message
        return None
    return check


def normalize_verification_code(value: Any) -> str:
    """Codes arrive as int or str depending on the client; store and compare as trimmed text."""
    if value is None:
        return ""
    return str(value).strip()


def validate_record(values: dict[str, Any], rules: dict[str, list[Validator]]) -> list[FieldError]:
    errors: list[FieldError] = []
    for field, validators in rules.items():
        value = values.get(field)
        for validator in validators:
            reason = validator(value)
            if reason:
                errors.append(FieldError(field, reason))
                break
    return errors


PASSWORD_RULES: list[Validator] = [
    required("Please provide a password"),
    min_length(6, "Password must be at least 6 characters"),
]

PENDING_ACCOUNT_RULES: dict[str, list[Validator]] = {
    "name": [
        required("Please provide a name"),
        max_length(50, "Name cannot be more than 50 characters"),
    ],
    "student_id": [
        required("Please provide a student ID"),
        matches(r"^\d{7}$", "Student ID must be 7 digits"),
    ],
    "rfid_card_number": [
        required("Please provide your RFID Card Number"),
        matches(r"^0\d{9}$", "RFID Card Number must be a 10-digit number starting with 0"),
    ],
    "email": [
        required("Please provide an email"),
        max_length(EMAIL_MAX_LENGTH, "Email cannot be more than 254 characters"),
        email_address("Please provide a valid email"),
    ],
    "phone": [
        required("Please provide a phone number"),
        matches(r"^\d{11}$", "Phone number must be 11 digits"),
    ],
    "points": [integer("Points must be a whole number")],
    "verification_code": [required("Please provide a verification code")],
    "verification_code_expires": [required("Please provide a verification code expiry")],
}

BOOTH_MANAGER_RULES: dict[str, list[Validator]] = {
    "name": [
        required("Please provide a name"),
        max_length(50, "Name cannot be more than 50 characters"),
    ],
    "email": [
        required("Please provide an email"),
        max_length(EMAIL_MAX_LENGTH, "Email cannot be more than 254 characters"),
        email_address("Please provide a valid email"),
    ],
    "booth_name": [required("Please provide a booth name")],
    "booth_location": [required("Please provide a booth location")],
    "booth_number": [required("Please provide a booth number")],
    "paper_capacity": [
        required("Please provide paper capacity"),
        integer("Paper capacity must be a whole number"),
        min_value(0, "Paper capacity cannot be negative"),
    ],
    "loaded_paper": [
        required("Please provide loaded paper count"),
        integer("Loaded paper must be a whole number"),
        min_value(0, "Loaded paper cannot be negative"),
    ],
    "printer_name": [required("Please provide a printer name")],
    "printer_model": [required("Please provide a printer model")],
}
