"""Delete pending accounts that were not confirmed within the TTL (24 hours)."""
import logging
from datetime import datetime, timezone, timedelta
from sqlalchemy.orm import Session
from printbooth.config import get_settings
from printbooth.database import SessionLocal
from printbooth.models.pending_account import PendingAccount

log = logging.getLogger("uvicorn.error")


def purge_expired_pending_accounts(db: Session, now: datetime | None = None) -> int:
    hours = get_settings().pending_account_ttl_hours
    threshold = (now or datetime.now(timezone.utc)) - timedelta(hours=hours)
    deleted = db.query(PendingAccount).filter(
        PendingAccount.created_at < threshold,
    ).delete(synchronize_session=False)
    db.commit()
    return deleted


def run_pending_cleanup_job() -> None:
    db: Session = SessionLocal()
    try:
        deleted = purge_expired_pending_accounts(db)
        if deleted:
            log.info("Pending account cleanup: deleted %d expired signup(s).", deleted)
    finally:
        db.close()
