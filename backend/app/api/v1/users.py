"""
User management API endpoints.

ADMIN only. Users are always created in, listed from and deleted within the
caller's own company.
"""

from fastapi import APIRouter, Depends, status
from pydantic import Field, field_validator

from app.api.deps import get_tenant_scope, require_roles
from app.api.v1.auth import ensure_email_available
from app.core.security import PasswordHasher, get_password_hasher
from app.models import Role
from app.repositories import TenantScope
from app.schemas import envelope, to_public_user
from app.schemas.base import CamelModel, normalize_email

router = APIRouter(dependencies=[Depends(require_roles(Role.ADMIN))])


# ============== Pydantic Schemas ==============


class UserCreate(CamelModel):
    """Schema for creating a staff user. The company comes from the caller's token."""

    full_name: str = Field(min_length=1)
    email: str
    password: str = Field(min_length=6)
    role: Role

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return normalize_email(v)


# ============== API Endpoints ==============


@router.post("", status_code=status.HTTP_201_CREATED)
def create_user(
    payload: UserCreate,
    scope: TenantScope = Depends(get_tenant_scope),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    ensure_email_available(scope.db, payload.email)

    user = scope.create_user(
        full_name=payload.full_name,
        email=payload.email,
        password_hash=hasher.hash(payload.password),
        role=payload.role,
    )
    return envelope(data=to_public_user(user))


@router.get("")
def list_users(scope: TenantScope = Depends(get_tenant_scope)):
    return envelope(data=[to_public_user(user) for user in scope.list_users()])


@router.get("/{user_id}")
def get_user(user_id: str, scope: TenantScope = Depends(get_tenant_scope)):
    return envelope(data=to_public_user(scope.get_user(user_id)))


@router.delete("/{user_id}")
def delete_user(user_id: str, scope: TenantScope = Depends(get_tenant_scope)):
    scope.delete_user(user_id)
    return envelope(message="User deleted successfully")
