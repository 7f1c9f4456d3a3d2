from datetime import datetime
from typing import Optional

from pydantic import Field

from app.models.enums import PositionType
from app.schemas.base import CamelModel


class PositionIn(CamelModel):
    """Create/replace payload. Tenant and creator always come from the caller's token."""

    title: str = Field(min_length=1)
    location: str = Field(min_length=1)
    type: PositionType
    description: str = Field(min_length=1)
    salary: str = Field(min_length=1)


class PositionOut(CamelModel):
    id: str
    company_id: str
    title: str
    location: str
    type: PositionType
    description: str
    salary: str
    created_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
