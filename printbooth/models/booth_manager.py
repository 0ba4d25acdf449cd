"""Operator account for a single print booth."""
from sqlalchemy import Column, Integer, String, DateTime, Boolean
from sqlalchemy.orm import deferred
from sqlalchemy.sql import func

from printbooth.database import Base

BOOTH_MANAGER_ROLE = "boothManager"


class BoothManager(Base):
    __tablename__ = "booth_managers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(50), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    # Not loaded unless asked for (undefer / load_only)
    hashed_password = deferred(Column(String(255), nullable=False))

    booth_name = Column(String(255), nullable=False)
    booth_location = Column(String(255), nullable=False)
    booth_number = Column(String(50), unique=True, index=True, nullable=False)
    paper_capacity = Column(Integer, nullable=False, default=500)
    loaded_paper = Column(Integer, nullable=False, default=0)
    printer_name = Column(String(255), nullable=False)
    printer_model = Column(String(255), nullable=False)

    role = Column(String(32), nullable=False, default=BOOTH_MANAGER_ROLE)
    is_active = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    def to_public_dict(self) -> dict:
        """Profile fields safe to return to clients."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "booth_name": self.booth_name,
            "booth_location": self.booth_location,
            "booth_number": self.booth_number,
            "paper_capacity": self.paper_capacity,
            "loaded_paper": self.loaded_paper,
            "printer_name": self.printer_name,
            "printer_model": self.printer_model,
            "role": self.role,
            "is_active": self.is_active,
        }
