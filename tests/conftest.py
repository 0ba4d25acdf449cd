import os

# Must be set before printbooth.config is imported anywhere.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret-for-print-booth"
os.environ["APP_ENV"] = "development"
os.environ["PENDING_CLEANUP_ENABLED"] = "false"

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from printbooth.database import Base, get_db
from printbooth.main import app
from printbooth.models import BoothManager, PendingAccount  # noqa: F401
from printbooth.services.accounts import save_booth_manager


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def pending_fields():
    return {
        "name": "A",
        "student_id": "1234567",
        "rfid_card_number": "0123456789",
        "email": "a@b.co",
        "phone": "01234567890",
        "verification_code": 123456,
        "verification_code_expires": datetime.now(timezone.utc) + timedelta(minutes=10),
    }


@pytest.fixture
def make_manager(db):
    def _make(password="hub-secret", **overrides):
        fields = {
            "name": "Print Hub Manager",
            "email": "booth1@printify.com",
            "booth_name": "Main Print Hub",
            "booth_location": "Library - Ground Floor",
            "booth_number": "HUB-001",
            "paper_capacity": 500,
            "loaded_paper": 250,
            "printer_name": "HP LaserJet Pro",
            "printer_model": "M404dn",
        }
        fields.update(overrides)
        return save_booth_manager(db, BoothManager(**fields), password=password)

    return _make
