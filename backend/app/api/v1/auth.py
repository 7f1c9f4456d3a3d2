"""
Authentication API endpoints.

Handles company registration, login with JWT token generation, the current
user's profile and logout.
"""

from fastapi import APIRouter, Depends, status
from pydantic import Field, field_validator
from sqlalchemy.orm import Session

from app.api.deps import Principal, get_current_principal, get_tenant_scope
from app.core.errors import ValidationFailed
from app.core.security import (
    PasswordHasher,
    TokenCodec,
    get_password_hasher,
    get_token_codec,
)
from app.db.session import get_db
from app.repositories import TenantScope, email_in_use
from app.schemas import UserProfile, envelope, to_public_user
from app.schemas.base import CamelModel, normalize_email
from app.services import login as login_user
from app.services import register_company

router = APIRouter()


# ============== Pydantic Schemas ==============


class CompanyRegister(CamelModel):
    """Schema for company + first admin registration."""

    company_name: str = Field(min_length=1)
    full_name: str = Field(min_length=1)
    email: str
    password: str = Field(min_length=6)
    phone: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return normalize_email(v)


class LoginRequest(CamelModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


def ensure_email_available(db: Session, email: str) -> None:
    """Reject an email already used by any user, in any company."""
    if email_in_use(db, email):
        raise ValidationFailed(
            [{"msg": "Email already exists", "field": "email", "type": "value_error"}]
        )


# ============== API Endpoints ==============


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(
    payload: CompanyRegister,
    db: Session = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    Register a new company and its administrator.

    Both records are created in one transaction.
    """
    ensure_email_available(db, payload.email)

    result = register_company(
        db,
        hasher,
        company_name=payload.company_name,
        email=payload.email,
        password=payload.password,
        full_name=payload.full_name,
        phone=payload.phone,
    )

    return envelope(
        message="Company and Admin registered successfully",
        data={
            "userId": result.user_id,
            "companyId": result.company_id,
            "role": result.role.value,
        },
    )


@router.post("/login")
def login(
    payload: LoginRequest,
    db: Session = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
    codec: TokenCodec = Depends(get_token_codec),
):
    """Login and get a JWT access token valid for 24 hours."""
    result = login_user(db, hasher, codec, payload.email, payload.password)

    return envelope(
        message="Login successfully",
        data={"token": result.token, "user": to_public_user(result.user)},
    )


@router.get("/me")
def get_me(scope: TenantScope = Depends(get_tenant_scope)):
    """
    Get current authenticated user profile.

    Requires valid JWT token in Authorization header.
    """
    user = scope.get_user(scope.user_id)
    return envelope(data=UserProfile.model_validate(user))


@router.post("/logout")
def logout(principal: Principal = Depends(get_current_principal)):
    """Acknowledge logout. Tokens are stateless, so nothing is revoked server-side."""
    return envelope(message="Logout successfully")
