"""
Create the default booth manager if it does not exist yet. Safe to run repeatedly.

Run from project root:
  SEED_BOOTH_MANAGER_PASSWORD=... python scripts/seed_booth_manager.py

Exits 1 if the database is unreachable, a password is needed but not configured,
or the seed record is rejected (validation failure or uniqueness conflict).
"""
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from sqlalchemy.exc import SQLAlchemyError

from printbooth.config import get_settings
from printbooth.database import Base, SessionLocal, check_connection, engine
from printbooth.errors import AccountValidationError, DuplicateAccountError
from printbooth.models.booth_manager import BoothManager
from printbooth.seed import SeedPasswordMissing, ensure_default_booth_manager


def main():
    settings = get_settings()
    try:
        report = check_connection(engine)
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError as e:
        print(f"Database connection error: {e}")
        sys.exit(1)
    print(f"Database connected: {report.dialect} {report.host or ''} {report.database or ''}".rstrip())

    db = SessionLocal()
    try:
        try:
            manager, created = ensure_default_booth_manager(
                db,
                settings.seed_booth_manager_email,
                settings.seed_booth_manager_password,
            )
        except SeedPasswordMissing as e:
            print(f"Cannot create booth manager: {e}")
            sys.exit(1)
        except AccountValidationError as e:
            print("Cannot create booth manager, validation failed:")
            for err in e.errors:
                print(f"  {err.field}: {err.message}")
            sys.exit(1)
        except DuplicateAccountError as e:
            print(f"Cannot create booth manager: {e}")
            sys.exit(1)

        if created:
            print("Booth manager created successfully!")
        else:
            print("Booth manager already exists:")
        print(f"  Email:    {manager.email}")
        print(f"  Name:     {manager.name}")
        print(f"  Booth:    {manager.booth_name}")
        print(f"  Location: {manager.booth_location}")
        print(f"  Active:   {manager.is_active}")

        print("\nAll booth managers in database:")
        for i, m in enumerate(db.query(BoothManager).order_by(BoothManager.id).all(), start=1):
            print(f"{i}. {m.name} ({m.email}) - {m.booth_name} - Active: {m.is_active}")
    finally:
        db.close()
        print("\nDatabase connection closed.")


if __name__ == "__main__":
    main()
