"""Shared dependencies: bearer-token authentication, current booth manager."""
import logging

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from printbooth.config import get_settings
from printbooth.database import get_db
from printbooth.models.booth_manager import BoothManager, BOOTH_MANAGER_ROLE
from printbooth.services.accounts import get_booth_manager
from printbooth.services.auth import decode_token_with_error

log = logging.getLogger("uvicorn.error")

security = HTTPBearer(auto_error=False)


class TokenAuthenticator:
    """Verifies `Authorization: Bearer <token>` and puts the claims on request.state.user.

    The scheme is matched case-insensitively (RFC 7235); any other scheme
    counts as no token.

    No token -> 401. A token that fails verification (expired, malformed,
    bad signature) -> 403; the reason is logged, never returned.
    """

    def __init__(self, secret: str, algorithm: str = "HS256"):
        self.secret = secret
        self.algorithm = algorithm

    def __call__(
        self,
        request: Request,
        credentials: HTTPAuthorizationCredentials | None = Depends(security),
    ) -> dict:
        token = (credentials.credentials or "").strip() if credentials else ""
        if not token:
            raise HTTPException(status_code=401, detail="Access denied. No token provided.")
        payload, error = decode_token_with_error(token, self.secret, self.algorithm)
        if payload is None:
            log.warning("JWT verification error: %s", error)
            raise HTTPException(status_code=403, detail="Invalid token.")
        request.state.user = payload
        return payload


_settings = get_settings()
authenticate_token = TokenAuthenticator(_settings.jwt_secret_key, _settings.jwt_algorithm)


def require_booth_manager(
    claims: dict = Depends(authenticate_token),
    db: Session = Depends(get_db),
) -> BoothManager:
    manager = get_booth_manager(db, claims.get("id"))
    if not manager:
        raise HTTPException(status_code=404, detail="Booth manager not found")
    if manager.role != BOOTH_MANAGER_ROLE or not manager.is_active:
        raise HTTPException(status_code=403, detail="Not authorized as booth manager")
    return manager
