"""Exceptions raised by the account storage layer."""
from dataclasses import dataclass


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str

    def as_dict(self) -> dict:
        return {"field": self.field, "message": self.message}


class AccountValidationError(Exception):
    """One or more fields failed validation; nothing was written."""

    def __init__(self, errors: list[FieldError]):
        self.errors = list(errors)
        super().__init__("; ".join(f"{e.field}: {e.message}" for e in self.errors))


class DuplicateAccountError(Exception):
    """The store rejected the write because a unique field is already taken."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"{field} already exists")


class CredentialHashError(Exception):
    """Password hashing failed; the write was aborted."""
