"""
Tenant-scoped data access.

Every query issued through TenantScope is filtered by the caller's company,
directly (users, positions) or through the owning position (applicants).
A row that exists in another company is reported exactly like a missing
row: NotFound, never Forbidden.

Updates and deletes are single conditional statements carrying the tenant
filter, so ownership is checked and the write applied atomically. A zero
row count means "not found or not yours".
"""

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session, joinedload

from app.core.errors import AppError, InternalError, NotFound
from app.models import Applicant, ApplicantStatus, Position, Role, User

logger = logging.getLogger(__name__)

POSITION_FIELDS = ("title", "location", "type", "description", "salary")


@contextmanager
def store_guard(db: Session) -> Iterator[None]:
    """Roll back and convert any store fault into InternalError."""
    try:
        yield
    except AppError:
        raise
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Store operation failed")
        raise InternalError() from exc


class TenantScope:
    """Repository facade bound to one company (and the acting user)."""

    def __init__(self, db: Session, company_id: str, user_id: Optional[str] = None):
        self.db = db
        self.company_id = company_id
        self.user_id = user_id

    # ============== Users ==============

    def _users(self) -> Query:
        return self.db.query(User).filter(User.company_id == self.company_id)

    def list_users(self) -> list[User]:
        with store_guard(self.db):
            return self._users().order_by(User.created_at).all()

    def get_user(self, user_id: str) -> User:
        with store_guard(self.db):
            user = self._users().filter(User.id == user_id).first()
        if user is None:
            raise NotFound.for_entity("User")
        return user

    def create_user(self, full_name: str, email: str, password_hash: str, role: Role) -> User:
        """Create a staff user in this company. The company is never caller-supplied."""
        with store_guard(self.db):
            user = User(
                company_id=self.company_id,
                full_name=full_name,
                email=email,
                password=password_hash,
                role=Role(role),
            )
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
        logger.info("User %s (%s) created in company %s", user.id, user.role.value, self.company_id)
        return user

    def delete_user(self, user_id: str) -> None:
        with store_guard(self.db):
            deleted = self._users().filter(User.id == user_id).delete(synchronize_session=False)
            if not deleted:
                self.db.rollback()
                raise NotFound.for_entity("User")
            self.db.commit()
        logger.info("User %s deleted from company %s", user_id, self.company_id)

    # ============== Positions ==============

    def _positions(self) -> Query:
        return self.db.query(Position).filter(Position.company_id == self.company_id)

    def list_positions(self) -> list[Position]:
        with store_guard(self.db):
            return self._positions().order_by(Position.created_at.desc()).all()

    def get_position(self, position_id: str) -> Position:
        with store_guard(self.db):
            position = self._positions().filter(Position.id == position_id).first()
        if position is None:
            raise NotFound.for_entity("Position")
        return position

    def create_position(self, data: dict[str, Any]) -> Position:
        """Create a position stamped with this company and the acting user."""
        values = {key: data[key] for key in POSITION_FIELDS}
        with store_guard(self.db):
            position = Position(
                **values,
                company_id=self.company_id,
                created_by=self.user_id,
            )
            self.db.add(position)
            self.db.commit()
            self.db.refresh(position)
        return position

    def update_position(self, position_id: str, data: dict[str, Any]) -> Position:
        values = {key: data[key] for key in POSITION_FIELDS if key in data}
        with store_guard(self.db):
            updated = self._positions().filter(Position.id == position_id).update(
                values, synchronize_session=False
            )
            if not updated:
                self.db.rollback()
                raise NotFound.for_entity("Position")
            self.db.commit()
        return self.get_position(position_id)

    def delete_position(self, position_id: str) -> None:
        """Delete a position; its applicants go with it (FK cascade)."""
        with store_guard(self.db):
            deleted = self._positions().filter(Position.id == position_id).delete(
                synchronize_session=False
            )
            if not deleted:
                self.db.rollback()
                raise NotFound.for_entity("Position")
            self.db.commit()
        logger.info("Position %s deleted from company %s", position_id, self.company_id)

    # ============== Applicants ==============

    def _owned_position_ids(self):
        return select(Position.id).where(Position.company_id == self.company_id)

    def _applicants(self) -> Query:
        return self.db.query(Applicant).filter(
            Applicant.position_id.in_(self._owned_position_ids())
        )

    def list_applicants(self, position_id: Optional[str] = None) -> list[Applicant]:
        query = self._applicants().options(joinedload(Applicant.position))
        if position_id:
            query = query.filter(Applicant.position_id == position_id)
        with store_guard(self.db):
            return query.order_by(Applicant.created_at.desc()).all()

    def get_applicant(self, applicant_id: str) -> Applicant:
        with store_guard(self.db):
            applicant = (
                self._applicants()
                .options(joinedload(Applicant.position))
                .filter(Applicant.id == applicant_id)
                .first()
            )
        if applicant is None:
            raise NotFound.for_entity("Applicant")
        return applicant

    def _update_applicant(self, applicant_id: str, values: dict[str, Any]) -> None:
        with store_guard(self.db):
            updated = self._applicants().filter(Applicant.id == applicant_id).update(
                values, synchronize_session=False
            )
            if not updated:
                self.db.rollback()
                raise NotFound.for_entity("Applicant")
            self.db.commit()

    def update_applicant_status(self, applicant_id: str, status: ApplicantStatus) -> None:
        self._update_applicant(applicant_id, {"status": ApplicantStatus(status)})

    def update_applicant_notes(self, applicant_id: str, notes: str) -> None:
        self._update_applicant(applicant_id, {"notes": notes})

    def delete_applicant(self, applicant_id: str) -> None:
        with store_guard(self.db):
            deleted = self._applicants().filter(Applicant.id == applicant_id).delete(
                synchronize_session=False
            )
            if not deleted:
                self.db.rollback()
                raise NotFound.for_entity("Applicant")
            self.db.commit()
