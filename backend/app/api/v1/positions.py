"""
Position API endpoints.

ADMIN and RECRUITER. Every lookup is confined to the caller's company; a
position of another company answers 404 like a missing one.
"""

from fastapi import APIRouter, Depends, status

from app.api.deps import get_tenant_scope, require_roles
from app.models import Role
from app.repositories import TenantScope
from app.schemas import envelope
from app.schemas.position import PositionIn, PositionOut

router = APIRouter(dependencies=[Depends(require_roles(Role.ADMIN, Role.RECRUITER))])


@router.post("", status_code=status.HTTP_201_CREATED)
def create_position(payload: PositionIn, scope: TenantScope = Depends(get_tenant_scope)):
    position = scope.create_position(payload.model_dump())
    return envelope(data=PositionOut.model_validate(position))


@router.get("")
def list_positions(scope: TenantScope = Depends(get_tenant_scope)):
    return envelope(
        data=[PositionOut.model_validate(position) for position in scope.list_positions()]
    )


@router.get("/{position_id}")
def get_position(position_id: str, scope: TenantScope = Depends(get_tenant_scope)):
    return envelope(data=PositionOut.model_validate(scope.get_position(position_id)))


@router.put("/{position_id}")
def update_position(
    position_id: str,
    payload: PositionIn,
    scope: TenantScope = Depends(get_tenant_scope),
):
    position = scope.update_position(position_id, payload.model_dump())
    return envelope(data=PositionOut.model_validate(position))


@router.delete("/{position_id}")
def delete_position(position_id: str, scope: TenantScope = Depends(get_tenant_scope)):
    scope.delete_position(position_id)
    return envelope(message="Position deleted successfully")
