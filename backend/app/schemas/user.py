from datetime import datetime
from typing import Optional

from app.models.enums import Role
from app.schemas.base import CamelModel


class UserPublic(CamelModel):
    """
    Outward projection of a user.

    The password hash has no field here, so it cannot leak through any
    endpoint that returns users through this schema.
    """

    id: str
    full_name: str
    email: str
    role: Role
    company_id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CompanySummary(CamelModel):
    name: str


class UserProfile(UserPublic):
    """Current user plus the owning company's name."""

    company: Optional[CompanySummary] = None


def to_public_user(user) -> UserPublic:
    return UserPublic.model_validate(user)
