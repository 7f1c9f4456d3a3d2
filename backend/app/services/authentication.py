"""Login: global user lookup by email, password check, token issue."""

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from app.core.errors import InvalidCredentials, NotFound
from app.core.security import PasswordHasher, TokenClaims, TokenCodec
from app.models import User
from app.repositories.public import get_user_by_email

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginResult:
    token: str
    user: User


def login(
    db: Session,
    hasher: PasswordHasher,
    codec: TokenCodec,
    email: str,
    password: str,
) -> LoginResult:
    """
    Authenticate by email and password.

    Raises:
        NotFound: no user with this email
        InvalidCredentials: password does not match
    """
    user = get_user_by_email(db, email)
    if user is None:
        logger.info("Login failed: unknown email")
        raise NotFound.for_entity("User")

    if not hasher.verify(password, user.password):
        logger.info("Login failed: wrong password for user %s", user.id)
        raise InvalidCredentials()

    token = codec.issue(TokenClaims(id=user.id, company_id=user.company_id, role=user.role))
    logger.info("User %s logged in", user.id)
    return LoginResult(token=token, user=user)
