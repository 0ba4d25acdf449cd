"""
All SQLAlchemy models. Schema is the source of truth for new DBs.
Base.metadata.create_all() creates every table.
"""
from printbooth.models.pending_account import PendingAccount
from printbooth.models.booth_manager import BoothManager, BOOTH_MANAGER_ROLE

__all__ = [
    "PendingAccount",
    "BoothManager",
    "BOOTH_MANAGER_ROLE",
]
