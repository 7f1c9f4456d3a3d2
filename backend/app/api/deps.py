"""
Request authentication and authorization dependencies.

Pipeline: get_current_principal (token -> Principal) then require_roles
(role gate). Data access afterwards goes through TenantScope bound to the
principal's company.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.errors import Forbidden, InvalidToken, Unauthenticated
from app.core.security import TokenCodec, TokenVerificationError, get_token_codec
from app.db.session import get_db
from app.models.enums import Role
from app.repositories.scoped import TenantScope

logger = logging.getLogger(__name__)

# auto_error=False: missing header, non-Bearer scheme and empty token all
# arrive here as None so they share one "Unauthenticated." response.
bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class Principal:
    """Authenticated caller for the lifetime of one request."""

    id: str
    company_id: str
    role: Role


def get_current_principal(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    codec: TokenCodec = Depends(get_token_codec),
) -> Principal:
    """
    Authenticate the request from its `Authorization: Bearer <token>` header.

    Stateless: the token is verified cryptographically, the store is not
    consulted.

    Raises:
        Unauthenticated: header absent, not Bearer, or empty token
        InvalidToken: signature or expiry check failed
    """
    if credentials is None or not credentials.credentials.strip():
        raise Unauthenticated()

    try:
        claims = codec.verify(credentials.credentials.strip())
    except TokenVerificationError as exc:
        raise InvalidToken(exc.message) from exc

    principal = Principal(id=claims.id, company_id=claims.company_id, role=claims.role)
    request.state.principal = principal
    return principal


def authorize(principal: Principal, allowed_roles: Iterable[Role]) -> None:
    """
    Permit the principal only if its role is in `allowed_roles`.

    An empty role set denies every role.
    """
    allowed = frozenset(Role(role) for role in allowed_roles)
    if principal.role not in allowed:
        logger.info(
            "Denied user %s (role %s); requires one of %s",
            principal.id,
            principal.role.value,
            sorted(role.value for role in allowed),
        )
        raise Forbidden()


def require_roles(*roles: Role):
    """Dependency factory: authenticate, then gate on role membership."""
    allowed_roles = frozenset(roles)

    def dependency(principal: Principal = Depends(get_current_principal)) -> Principal:
        authorize(principal, allowed_roles)
        return principal

    return dependency


def get_tenant_scope(
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
) -> TenantScope:
    """Repository facade bound to the caller's company."""
    return TenantScope(db, company_id=principal.company_id, user_id=principal.id)
