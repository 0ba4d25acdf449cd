"""Storage access for pending accounts and booth managers.

Every write goes through save_pending_account() / save_booth_manager():
normalize, validate, hash the password only when the caller passes a new one,
then commit. Callers that do not pass a password leave the stored hash as is.
"""
import logging
import secrets
import string
from datetime import datetime, timedelta, timezone
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, undefer

from printbooth.config import get_settings
from printbooth.errors import AccountValidationError, DuplicateAccountError, FieldError
from printbooth.models.booth_manager import BoothManager, BOOTH_MANAGER_ROLE
from printbooth.models.pending_account import PendingAccount
from printbooth.services.auth import get_password_hash, verify_password
from printbooth.services.validation import (
    BOOTH_MANAGER_RULES,
    PASSWORD_RULES,
    PENDING_ACCOUNT_RULES,
    normalize_verification_code,
    validate_record,
)

settings = get_settings()
log = logging.getLogger("uvicorn.error")

VERIFICATION_CODE_LENGTH = 6
PAPER_OPERATIONS = ("add", "set")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; everything is stored in UTC.
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value


def _clean(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


def _clean_email(value: Any) -> Any:
    return value.strip().lower() if isinstance(value, str) else value


def _field_values(record: Any, rules: dict) -> dict[str, Any]:
    return {field: getattr(record, field, None) for field in rules}


def _password_errors(record: Any, password: str | None) -> list[FieldError]:
    if password is None:
        if not record.hashed_password:
            return [FieldError("password", "Please provide a password")]
        return []
    if not isinstance(password, str):
        return [FieldError("password", "Please provide a password")]
    return validate_record({"password": password}, {"password": PASSWORD_RULES})


def _duplicate_field(exc: IntegrityError) -> str | None:
    msg = str(getattr(exc, "orig", None) or exc).lower()
    if "booth_number" in msg:
        return "booth_number"
    if "email" in msg:
        return "email"
    return None


def _store(db: Session, record: Any, rules: dict, password: str | None):
    errors = validate_record(_field_values(record, rules), rules)
    errors.extend(_password_errors(record, password))
    if errors:
        db.rollback()
        raise AccountValidationError(errors)

    if password is not None:
        try:
            record.hashed_password = get_password_hash(password)
        except Exception:
            db.rollback()
            raise

    db.add(record)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        field = _duplicate_field(e)
        if field is None:
            raise
        raise DuplicateAccountError(field) from e
    db.refresh(record)
    return record


# --- Pending accounts ---


def save_pending_account(db: Session, account: PendingAccount, password: str | None = None) -> PendingAccount:
    account.name = _clean(account.name)
    account.student_id = _clean(account.student_id)
    account.rfid_card_number = _clean(account.rfid_card_number)
    account.email = _clean_email(account.email)
    account.phone = _clean(account.phone)
    account.verification_code = normalize_verification_code(account.verification_code)
    if account.points is None:
        account.points = 10
    return _store(db, account, PENDING_ACCOUNT_RULES, password)


def generate_verification_code() -> str:
    return "".join(secrets.choice(string.digits) for _ in range(VERIFICATION_CODE_LENGTH))


def _ttl_threshold(now: datetime | None = None) -> datetime:
    return (now or _utcnow()) - timedelta(hours=settings.pending_account_ttl_hours)


def get_pending_account_by_email(db: Session, email: str, now: datetime | None = None) -> PendingAccount | None:
    """Latest pending signup for this email that has not outlived its TTL."""
    return (
        db.query(PendingAccount)
        .filter(
            PendingAccount.email == _clean_email(email or ""),
            PendingAccount.created_at >= _ttl_threshold(now),
        )
        .order_by(PendingAccount.created_at.desc(), PendingAccount.id.desc())
        .first()
    )


def register_pending_account(
    db: Session,
    *,
    name: str,
    student_id: str,
    rfid_card_number: str,
    email: str,
    phone: str,
    password: str,
    now: datetime | None = None,
) -> PendingAccount:
    """Create a pending signup, or refresh the live one for the same email with a new code."""
    now = now or _utcnow()
    pending = get_pending_account_by_email(db, email, now)
    if pending is None:
        pending = PendingAccount()
    pending.name = name
    pending.student_id = student_id
    pending.rfid_card_number = rfid_card_number
    pending.email = email
    pending.phone = phone
    pending.verification_code = generate_verification_code()
    pending.verification_code_expires = now + timedelta(minutes=settings.verification_code_expire_minutes)
    return save_pending_account(db, pending, password=password)


def check_verification_code(account: PendingAccount | None, supplied: Any, now: datetime | None = None) -> bool:
    if account is None:
        return False
    stored = normalize_verification_code(account.verification_code)
    if not stored or stored != normalize_verification_code(supplied):
        return False
    if account.verification_code_expires is None:
        return False
    return _as_utc(account.verification_code_expires) > (now or _utcnow())


# --- Booth managers ---


def save_booth_manager(db: Session, manager: BoothManager, password: str | None = None) -> BoothManager:
    manager.name = _clean(manager.name)
    manager.email = _clean_email(manager.email)
    manager.booth_name = _clean(manager.booth_name)
    manager.booth_location = _clean(manager.booth_location)
    manager.booth_number = _clean(manager.booth_number)
    manager.printer_name = _clean(manager.printer_name)
    manager.printer_model = _clean(manager.printer_model)
    if manager.paper_capacity is None:
        manager.paper_capacity = 500
    if manager.loaded_paper is None:
        manager.loaded_paper = 0
    if manager.is_active is None:
        manager.is_active = True
    manager.role = BOOTH_MANAGER_ROLE
    return _store(db, manager, BOOTH_MANAGER_RULES, password)


def get_booth_manager(db: Session, manager_id: Any) -> BoothManager | None:
    try:
        manager_id = int(manager_id)
    except (TypeError, ValueError):
        return None
    return db.query(BoothManager).filter(BoothManager.id == manager_id).first()


def get_booth_manager_by_email(db: Session, email: str) -> BoothManager | None:
    return db.query(BoothManager).filter(BoothManager.email == _clean_email(email or "")).first()


def authenticate_booth_manager(db: Session, email: str, password: str) -> BoothManager | None:
    """Return the manager when the password matches, else None. Does not check is_active."""
    manager = (
        db.query(BoothManager)
        .options(undefer(BoothManager.hashed_password))
        .filter(BoothManager.email == _clean_email(email or ""))
        .first()
    )
    if manager is None or not verify_password(password, manager.hashed_password):
        return None
    return manager


def update_paper_count(db: Session, manager: BoothManager, amount: int, operation: str) -> BoothManager:
    if operation not in PAPER_OPERATIONS:
        raise AccountValidationError([FieldError("operation", "Operation must be 'add' or 'set'")])
    new_count = manager.loaded_paper + amount if operation == "add" else amount
    if new_count > manager.paper_capacity:
        raise AccountValidationError(
            [FieldError("loaded_paper", f"Paper count exceeds capacity of {manager.paper_capacity} sheets")]
        )
    manager.loaded_paper = new_count
    saved = save_booth_manager(db, manager)
    log.info("Booth %s paper count now %d/%d", saved.booth_number, saved.loaded_paper, saved.paper_capacity)
    return saved
