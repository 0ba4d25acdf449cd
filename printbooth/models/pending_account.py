"""Signup data held until the student confirms their email."""
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func

from printbooth.database import Base


class PendingAccount(Base):
    __tablename__ = "pending_accounts"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(50), nullable=False)
    student_id = Column(String(7), nullable=False)
    rfid_card_number = Column(String(10), nullable=False)
    email = Column(String(255), nullable=False, index=True)
    phone = Column(String(11), nullable=False)
    hashed_password = Column(String(255), nullable=False)
    points = Column(Integer, nullable=False, default=10)

    verification_code = Column(String(16), nullable=False)
    verification_code_expires = Column(DateTime(timezone=True), nullable=False)

    # Rows older than pending_account_ttl_hours are purged by services.pending_cleanup
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
