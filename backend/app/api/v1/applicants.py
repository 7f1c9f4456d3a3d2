"""
Applicant API endpoints.

Submitting an application is public. Everything else requires an
authenticated user of the company that owns the applicant's position.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.deps import get_tenant_scope
from app.db.session import get_db
from app.repositories import TenantScope, create_applicant
from app.schemas import envelope
from app.schemas.applicant import ApplicantDetail, ApplicantIn, ApplicantOut, NotesIn, StatusIn

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
def apply(payload: ApplicantIn, db: Session = Depends(get_db)):
    """Public job application. No token needed; the tenant follows from the position."""
    data = payload.model_dump()
    data["resume_url"] = str(payload.resume_url)

    applicant = create_applicant(db, data)
    logger.info("Application %s received for position %s", applicant.id, applicant.position_id)
    return envelope(data=ApplicantOut.model_validate(applicant))


@router.get("")
def list_applicants(
    position_id: Optional[str] = Query(None, alias="positionId"),
    scope: TenantScope = Depends(get_tenant_scope),
):
    applicants = scope.list_applicants(position_id=position_id)
    return envelope(data=[ApplicantDetail.model_validate(a) for a in applicants])


@router.get("/{applicant_id}")
def get_applicant(applicant_id: str, scope: TenantScope = Depends(get_tenant_scope)):
    return envelope(data=ApplicantDetail.model_validate(scope.get_applicant(applicant_id)))


@router.patch("/{applicant_id}/status")
def update_status(
    applicant_id: str,
    payload: StatusIn,
    scope: TenantScope = Depends(get_tenant_scope),
):
    scope.update_applicant_status(applicant_id, payload.status)
    return envelope(message="Status updated")


@router.patch("/{applicant_id}/notes")
def update_notes(
    applicant_id: str,
    payload: NotesIn,
    scope: TenantScope = Depends(get_tenant_scope),
):
    scope.update_applicant_notes(applicant_id, payload.notes)
    return envelope(message="Notes updated")


@router.delete("/{applicant_id}")
def delete_applicant(applicant_id: str, scope: TenantScope = Depends(get_tenant_scope)):
    scope.delete_applicant(applicant_id)
    return envelope(message="Applicant deleted")
