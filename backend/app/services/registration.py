"""
Company registration.

Creates a tenant and its first administrator as one unit: either both rows
are committed or neither is. This is the only path that creates a user
without an authenticated admin of the same company.
"""

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from app.core.errors import InternalError
from app.core.security import PasswordHasher
from app.models import Company, Role, User

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegistrationResult:
    company_id: str
    user_id: str
    role: Role


def _create_company(db: Session, name: str, email: str, phone: str) -> Company:
    company = Company(name=name, email=email, phone=phone, address="-")
    db.add(company)
    db.flush()
    return company


def _create_admin(
    db: Session, company: Company, full_name: str, email: str, password_hash: str
) -> User:
    user = User(
        company_id=company.id,
        full_name=full_name,
        email=email,
        password=password_hash,
        role=Role.ADMIN,
    )
    db.add(user)
    db.flush()
    return user


def register_company(
    db: Session,
    hasher: PasswordHasher,
    *,
    company_name: str,
    email: str,
    password: str,
    full_name: str,
    phone: str,
) -> RegistrationResult:
    """
    Register a company and its ADMIN user atomically.

    The email is expected to have been checked for uniqueness already; a
    concurrent registration that wins the unique constraint makes this one
    fail as a whole.

    Raises:
        InternalError: anything failed; nothing was persisted
    """
    password_hash = hasher.hash(password)

    try:
        company = _create_company(db, company_name, email, phone)
        user = _create_admin(db, company, full_name, email, password_hash)
        db.commit()
    except Exception as exc:
        db.rollback()
        logger.exception("Registration of company %r failed, rolled back", company_name)
        raise InternalError() from exc

    logger.info("Registered company %s with admin %s", company.id, user.id)
    return RegistrationResult(company_id=company.id, user_id=user.id, role=user.role)
