from app.models.enums import Role, PositionType, ApplicantStatus
from app.models.company import Company
from app.models.user import User
from app.models.position import Position
from app.models.applicant import Applicant

__all__ = [
    "Role",
    "PositionType",
    "ApplicantStatus",
    "Company",
    "User",
    "Position",
    "Applicant",
]
