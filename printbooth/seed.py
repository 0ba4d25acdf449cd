"""Seed the default booth manager for the main print hub."""
from sqlalchemy.orm import Session

from printbooth.models.booth_manager import BoothManager
from printbooth.services.accounts import get_booth_manager_by_email, save_booth_manager

DEFAULT_BOOTH_MANAGER = {
    "name": "Print Hub Manager",
    "booth_name": "Main Print Hub",
    "booth_location": "Library - Ground Floor",
    "booth_number": "HUB-001",
    "paper_capacity": 500,
    "loaded_paper": 250,
    "printer_name": "HP LaserJet Pro",
    "printer_model": "M404dn",
    "is_active": True,
}


class SeedPasswordMissing(Exception):
    """No password configured for a booth manager that has to be created."""


def ensure_default_booth_manager(db: Session, email: str, password: str | None) -> tuple[BoothManager, bool]:
    """Return (manager, created). An existing record is returned untouched."""
    existing = get_booth_manager_by_email(db, email)
    if existing:
        return existing, False
    if not password:
        raise SeedPasswordMissing(f"No password configured for {email}; set SEED_BOOTH_MANAGER_PASSWORD")
    manager = BoothManager(email=email, **DEFAULT_BOOTH_MANAGER)
    return save_booth_manager(db, manager, password=password), True
