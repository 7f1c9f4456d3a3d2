from uuid import uuid4

from sqlalchemy import Column, String, Text, Float, DateTime, Enum, ForeignKey
from sqlalchemy.orm import relationship

from app.db.base import Base, utcnow
from app.models.enums import ApplicantStatus


class Applicant(Base):
    """
    Public job application.

    Has no company column of its own: the owning tenant is the company of
    the referenced position.
    """

    __tablename__ = "applicants"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    position_id = Column(
        String(36),
        ForeignKey("positions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    full_name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    education = Column(String)
    experience = Column(Float)  # Years
    resume_url = Column(String)

    status = Column(
        Enum(ApplicantStatus, native_enum=False, length=16),
        nullable=False,
        default=ApplicantStatus.PENDING,
    )
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    # Relationships
    position = relationship("Position", back_populates="applicants")
