"""Application configuration from environment."""
from pathlib import Path

from dotenv import load_dotenv
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings
from functools import lru_cache

# Load .env from project root (parent of printbooth/) so env vars are available everywhere
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=_env_path)


class Settings(BaseSettings):
    app_name: str = "Print Booth API"
    app_env: str = Field("development", validation_alias=AliasChoices("APP_ENV", "NODE_ENV"))
    debug: bool = False
    port: int = 8080

    # Older deployments only set MONGODB_URI / MONGO_URI; any SQLAlchemy URL is accepted.
    database_url: str = Field(
        "sqlite:///./printbooth.db",
        validation_alias=AliasChoices("DATABASE_URL", "MONGODB_URI", "MONGO_URI"),
    )

    jwt_secret_key: str = Field(
        "jwt-secret-change-me",
        validation_alias=AliasChoices("JWT_SECRET", "JWT_SECRET_KEY"),
    )
    jwt_algorithm: str = "HS256"
    jwt_access_token_expire_minutes: int = 60 * 24 * 30

    @field_validator("jwt_secret_key")
    @classmethod
    def strip_jwt_secret(cls, v: str) -> str:
        return (v or "").strip()

    bcrypt_rounds: int = 10

    pending_account_ttl_hours: int = 24
    verification_code_expire_minutes: int = 30
    pending_cleanup_enabled: bool = True

    seed_booth_manager_email: str = "booth1@printify.com"
    seed_booth_manager_password: str = ""

    worker_memory_limit_mb: int = 1024

    @property
    def is_production(self) -> bool:
        return (self.app_env or "").strip().lower() == "production"

    class Config:
        env_file = str(_env_path)
        extra = "ignore"
        populate_by_name = True


@lru_cache
def get_settings() -> Settings:
    return Settings()
