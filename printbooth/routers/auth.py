"""Student signup: holds the account as pending until the email is confirmed."""
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from printbooth.config import get_settings
from printbooth.database import get_db
from printbooth.schemas.accounts import SignupRequest
from printbooth.services.accounts import register_pending_account
from printbooth.utils.responses import respond_success

router = APIRouter(prefix="/auth", tags=["auth"])
log = logging.getLogger("uvicorn.error")


@router.post("/signup")
def signup(data: SignupRequest, db: Session = Depends(get_db)):
    pending = register_pending_account(db, **data.model_dump())
    if not get_settings().is_production:
        # Email delivery is not wired up; surface the code for local testing.
        log.info("[DEV MODE] Verification code for %s: %s", pending.email, pending.verification_code)
    return respond_success(
        201,
        "Verification code sent. Please check your email.",
        {"email": pending.email, "verification_code_expires": pending.verification_code_expires},
    )
