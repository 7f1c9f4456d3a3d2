from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import AnyHttpUrl, Field, field_validator

from app.models.enums import ApplicantStatus
from app.schemas.base import CamelModel, normalize_email


class ApplicantIn(CamelModel):
    """Public application form. Status, notes and id are never accepted from it."""

    position_id: UUID
    full_name: str = Field(min_length=1)
    email: str
    phone: str = Field(min_length=1)
    education: str = Field(min_length=1)
    experience: float = Field(ge=0)
    resume_url: AnyHttpUrl

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return normalize_email(v)


class StatusIn(CamelModel):
    status: ApplicantStatus


class NotesIn(CamelModel):
    notes: str = Field(min_length=1)


class PositionTitle(CamelModel):
    id: str
    title: str


class ApplicantOut(CamelModel):
    id: str
    position_id: str
    full_name: str
    email: str
    phone: str
    education: Optional[str] = None
    experience: Optional[float] = None
    resume_url: Optional[str] = None
    status: ApplicantStatus
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ApplicantDetail(ApplicantOut):
    position: Optional[PositionTitle] = None
