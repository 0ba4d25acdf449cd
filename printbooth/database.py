"""
Database connection and session.

Schema source of truth: printbooth.models. On startup, Base.metadata.create_all(bind=engine)
creates the pending_accounts and booth_managers tables, including the unique
constraints on booth manager email and booth number.
"""
from dataclasses import dataclass

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from printbooth.config import get_settings

settings = get_settings()
engine = create_engine(
    settings.database_url,
    pool_pre_ping=True,
    connect_args={"check_same_thread": False} if settings.database_url.startswith("sqlite") else {},
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@dataclass
class ConnectionReport:
    dialect: str
    host: str | None
    database: str | None


def check_connection(bind: Engine | None = None) -> ConnectionReport:
    """Run a trivial query. Connection errors propagate to the caller."""
    bind = bind or engine
    with bind.connect() as conn:
        conn.execute(text("SELECT 1"))
    return ConnectionReport(
        dialect=bind.dialect.name,
        host=bind.url.host,
        database=bind.url.database,
    )
