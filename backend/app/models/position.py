from uuid import uuid4

from sqlalchemy import Column, String, Text, DateTime, Enum, ForeignKey
from sqlalchemy.orm import relationship

from app.db.base import Base, utcnow
from app.models.enums import PositionType


class Position(Base):
    """Job opening owned by a company."""

    __tablename__ = "positions"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    company_id = Column(String(36), ForeignKey("companies.id"), nullable=False, index=True)

    title = Column(String, nullable=False)
    location = Column(String, nullable=False)
    type = Column(Enum(PositionType, native_enum=False, length=16), nullable=False)
    description = Column(Text, nullable=False)
    salary = Column(String, nullable=False)  # Free-form, e.g. "5-7M / month"

    created_by = Column(String(36), ForeignKey("users.id", ondelete="SET NULL"), nullable=True)

    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    # Relationships
    company = relationship("Company", back_populates="positions")
    applicants = relationship("Applicant", back_populates="position", passive_deletes=True)
