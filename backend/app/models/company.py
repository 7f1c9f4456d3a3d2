from uuid import uuid4

from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship

from app.db.base import Base, utcnow


class Company(Base):
    """Tenant root. Every user and position belongs to exactly one company."""

    __tablename__ = "companies"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    phone = Column(String)
    address = Column(String, default="-")

    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    # Relationships
    users = relationship("User", back_populates="company")
    positions = relationship("Position", back_populates="company")
