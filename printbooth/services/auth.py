"""Password hashing and access tokens."""
from datetime import datetime, timedelta, timezone
import bcrypt
import jwt
from printbooth.config import get_settings
from printbooth.errors import CredentialHashError

settings = get_settings()


def _pwd_bytes(password: str, max_len: int = 72) -> bytes:
    return password.encode("utf-8")[:max_len]


def verify_password(plain: str, hashed: str) -> bool:
    if not plain or not hashed:
        return False
    try:
        return bcrypt.checkpw(_pwd_bytes(plain), hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def get_password_hash(password: str, rounds: int | None = None) -> str:
    """Salted bcrypt hash. Raises CredentialHashError if hashing fails."""
    try:
        salt = bcrypt.gensalt(rounds=rounds or settings.bcrypt_rounds)
        return bcrypt.hashpw(_pwd_bytes(password), salt).decode("utf-8")
    except Exception as e:
        raise CredentialHashError(str(e)) from e


def create_access_token(manager_id: int, expires_delta: timedelta | None = None) -> str:
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.jwt_access_token_expire_minutes)
    )
    payload = {"id": manager_id, "exp": expire}
    raw = jwt.encode(
        payload,
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
    )
    return raw if isinstance(raw, str) else raw.decode("utf-8")


def decode_token_with_error(token: str, secret: str, algorithm: str = "HS256") -> tuple[dict | None, str | None]:
    """Decode JWT; returns (payload, error_message)."""
    if not token or not isinstance(token, str):
        return None, "empty token"
    token = token.strip()
    try:
        payload = jwt.decode(token, secret, algorithms=[algorithm])
        return payload, None
    except jwt.ExpiredSignatureError as e:
        return None, str(e)
    except jwt.PyJWTError as e:
        return None, str(e)
