"""
Data access that runs before any tenant context exists.

Login and the email uniqueness check look users up across all companies;
public job applications are written against a position id and inherit the
position's company.
"""

from typing import Any, Optional

from sqlalchemy.orm import Session

from app.core.errors import NotFound
from app.models import Applicant, ApplicantStatus, Position, User
from app.repositories.scoped import store_guard

APPLICANT_FIELDS = (
    "position_id",
    "full_name",
    "email",
    "phone",
    "education",
    "experience",
    "resume_url",
)


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    """Get a user by email address, in any company."""
    with store_guard(db):
        return db.query(User).filter(User.email == email.lower()).first()


def email_in_use(db: Session, email: str) -> bool:
    return get_user_by_email(db, email) is not None


def create_applicant(db: Session, data: dict[str, Any]) -> Applicant:
    """
    Store a public job application.

    Only the form fields are taken from `data`; status always starts at
    PENDING and notes start empty.
    """
    values = {key: data[key] for key in APPLICANT_FIELDS if key in data}
    values["position_id"] = str(values["position_id"])

    with store_guard(db):
        position_exists = (
            db.query(Position.id).filter(Position.id == values["position_id"]).first()
        )
        if position_exists is None:
            raise NotFound.for_entity("Position")

        applicant = Applicant(**values, status=ApplicantStatus.PENDING, notes=None)
        db.add(applicant)
        db.commit()
        db.refresh(applicant)
    return applicant
