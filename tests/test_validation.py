"""Tests for field validators and record-level validation."""
import time

import pytest

from printbooth.errors import FieldError
from printbooth.services.validation import (
    BOOTH_MANAGER_RULES,
    PENDING_ACCOUNT_RULES,
    email_address,
    matches,
    max_length,
    normalize_verification_code,
    required,
    validate_record,
)


def _pending(**overrides):
    values = {
        "name": "A",
        "student_id": "1234567",
        "rfid_card_number": "0123456789",
        "email": "a@b.co",
        "phone": "01234567890",
        "points": 10,
        "verification_code": "123456",
        "verification_code_expires": "2030-01-01T00:00:00Z",
    }
    values.update(overrides)
    return values


def test_valid_pending_account_has_no_errors():
    assert validate_record(_pending(), PENDING_ACCOUNT_RULES) == []


@pytest.mark.parametrize("field,value,message", [
    ("name", "", "Please provide a name"),
    ("name", "x" * 51, "Name cannot be more than 50 characters"),
    ("student_id", "123456", "Student ID must be 7 digits"),
    ("student_id", "12345678", "Student ID must be 7 digits"),
    ("rfid_card_number", "1123456789", "RFID Card Number must be a 10-digit number starting with 0"),
    ("rfid_card_number", "012345678", "RFID Card Number must be a 10-digit number starting with 0"),
    ("email", "not-an-email", "Please provide a valid email"),
    ("email", "a@" + "b" * 250 + ".co", "Email cannot be more than 254 characters"),
    ("phone", "0123456789", "Phone number must be 11 digits"),
    ("verification_code", None, "Please provide a verification code"),
])
def test_pending_account_field_errors(field, value, message):
    errors = validate_record(_pending(**{field: value}), PENDING_ACCOUNT_RULES)
    assert errors == [FieldError(field, message)]


def test_all_violations_reported_in_one_pass():
    errors = validate_record(_pending(student_id="12", phone="", email="x"), PENDING_ACCOUNT_RULES)
    assert [e.field for e in errors] == ["student_id", "email", "phone"]


def test_one_reason_per_field():
    errors = validate_record({"name": ""}, {"name": [required("missing"), max_length(0, "too long")]})
    assert errors == [FieldError("name", "missing")]


def test_digit_patterns_reject_non_ascii_digits():
    check = matches(r"^\d{7}$", "bad")
    assert check("١٢٣٤٥٦٧") == "bad"
    assert check("1234567") is None


def test_booth_manager_numeric_rules():
    values = {
        "name": "M",
        "email": "m@hub.edu",
        "booth_name": "Hub",
        "booth_location": "Library",
        "booth_number": "HUB-1",
        "paper_capacity": 500,
        "loaded_paper": -1,
        "printer_name": "HP",
        "printer_model": "M404dn",
    }
    assert validate_record(values, BOOTH_MANAGER_RULES) == [
        FieldError("loaded_paper", "Loaded paper cannot be negative")
    ]
    values.update(loaded_paper=0, paper_capacity="lots")
    assert validate_record(values, BOOTH_MANAGER_RULES) == [
        FieldError("paper_capacity", "Paper capacity must be a whole number")
    ]


@pytest.mark.parametrize("raw,expected", [
    (123456, "123456"),
    (" 123456 ", "123456"),
    ("042", "042"),
    (None, ""),
])
def test_normalize_verification_code(raw, expected):
    assert normalize_verification_code(raw) == expected


@pytest.mark.parametrize("email", ["a" * 40 + "!", "a" * 40 + "@" + "a." * 40 + "!", "a-" * 60 + "@b"])
def test_malformed_email_rejected_quickly(email):
    start = time.perf_counter()
    errors = validate_record(_pending(email=email), PENDING_ACCOUNT_RULES)
    elapsed = time.perf_counter() - start
    assert errors == [FieldError("email", "Please provide a valid email")]
    assert elapsed < 1.0


def test_email_address_accepts_common_shapes():
    check = email_address("bad")
    for value in ("a@b.co", "first.last@campus.edu", "booth-1@print-ify.com", "x_y@sub.hub.edu"):
        assert check(value) is None
    assert check("no-at-sign.com") == "bad"
    assert check("") is None
