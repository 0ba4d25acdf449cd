"""Tests for purging pending accounts older than the TTL."""
from datetime import datetime, timedelta, timezone

from printbooth.models import PendingAccount
from printbooth.services.accounts import get_pending_account_by_email, save_pending_account
from printbooth.services.pending_cleanup import purge_expired_pending_accounts


def _signup(db, fields, email, created_at):
    account = save_pending_account(db, PendingAccount(**{**fields, "email": email}), password="secret")
    account.created_at = created_at
    db.commit()
    return account


def test_purge_removes_only_expired_signups(db, pending_fields):
    now = datetime.now(timezone.utc)
    _signup(db, pending_fields, "old@b.co", now - timedelta(hours=25))
    _signup(db, pending_fields, "fresh@b.co", now - timedelta(hours=1))

    assert purge_expired_pending_accounts(db, now=now) == 1

    emails = [a.email for a in db.query(PendingAccount).all()]
    assert emails == ["fresh@b.co"]


def test_expired_signup_unreachable_before_purge_runs(db, pending_fields):
    now = datetime.now(timezone.utc)
    _signup(db, pending_fields, "old@b.co", now - timedelta(hours=24, minutes=1))

    assert db.query(PendingAccount).count() == 1
    assert get_pending_account_by_email(db, "old@b.co", now=now) is None


def test_purge_with_nothing_expired(db, pending_fields):
    now = datetime.now(timezone.utc)
    _signup(db, pending_fields, "fresh@b.co", now)
    assert purge_expired_pending_accounts(db, now=now) == 0
