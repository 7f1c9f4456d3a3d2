"""
Security utilities for authentication.

Provides password hashing (bcrypt) and the signed, time-limited access token
codec (JWT). Both are built from an explicit configuration value at startup
and never read the environment at call time.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Optional

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError
from passlib.context import CryptContext

from app.core.config import settings
from app.models.enums import Role


# ============== Configuration ==============


@dataclass(frozen=True)
class TokenConfig:
    """Signing material and lifetime for access tokens."""

    secret_key: str
    algorithm: str = "HS256"
    ttl: timedelta = timedelta(hours=24)


@dataclass(frozen=True)
class HashConfig:
    """Password hashing cost factor."""

    bcrypt_rounds: int = 10


# ============== Password Hashing ==============


class PasswordHasher:
    """bcrypt password hashing with a fixed, process-wide cost factor."""

    def __init__(self, config: HashConfig):
        self.config = config
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=config.bcrypt_rounds,
        )

    def hash(self, password: str) -> str:
        """
        Hash a password using bcrypt.

        Args:
            password: The plain text password to hash

        Returns:
            The hashed password string
        """
        return self._context.hash(password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify a plain password against a hashed password.

        Args:
            plain_password: The plain text password to verify
            hashed_password: The hashed password to compare against

        Returns:
            True if password matches, False otherwise
        """
        return self._context.verify(plain_password, hashed_password)


# ============== Access Tokens ==============


class TokenVerificationError(Exception):
    """Token could not be verified."""

    message = "Invalid token"


class TokenExpired(TokenVerificationError):
    pass


class TokenInvalid(TokenVerificationError):
    pass


@dataclass(frozen=True)
class TokenClaims:
    """Identity claims embedded in an access token."""

    id: str
    company_id: str
    role: Role
    expires_at: Optional[datetime] = None


class TokenCodec:
    """Issues and verifies HMAC-signed JWT access tokens."""

    def __init__(self, config: TokenConfig):
        self.config = config

    def issue(
        self,
        claims: TokenClaims,
        ttl: Optional[timedelta] = None,
        now: Optional[datetime] = None,
    ) -> str:
        """
        Create a signed access token.

        Args:
            claims: Identity to embed (user id, company id, role)
            ttl: Optional custom lifetime, defaults to the configured one
            now: Issue time, defaults to the current UTC time

        Returns:
            The encoded JWT token string
        """
        issued_at = now or datetime.now(timezone.utc)
        expire = issued_at + (ttl if ttl is not None else self.config.ttl)

        payload = {
            "id": claims.id,
            "companyId": claims.company_id,
            "role": Role(claims.role).value,
            "iat": issued_at,
            "exp": expire,
        }

        return jwt.encode(
            payload,
            self.config.secret_key,
            algorithm=self.config.algorithm,
        )

    def verify(self, token: str) -> TokenClaims:
        """
        Decode and validate an access token.

        Args:
            token: The JWT token string to decode

        Returns:
            The decoded claims

        Raises:
            TokenExpired: The token's expiry has passed
            TokenInvalid: Bad signature, malformed token or missing claims
        """
        try:
            payload = jwt.decode(
                token,
                self.config.secret_key,
                algorithms=[self.config.algorithm],
                options={"require": ["exp"]},
            )
        except ExpiredSignatureError as exc:
            raise TokenExpired() from exc
        except InvalidTokenError as exc:
            raise TokenInvalid() from exc

        user_id = payload.get("id")
        company_id = payload.get("companyId")
        if not user_id or not company_id:
            raise TokenInvalid()

        try:
            role = Role(payload.get("role"))
        except ValueError as exc:
            raise TokenInvalid() from exc

        return TokenClaims(
            id=str(user_id),
            company_id=str(company_id),
            role=role,
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )


# ============== Dependencies ==============


@lru_cache
def get_token_codec() -> TokenCodec:
    """Process-wide token codec built from settings."""
    return TokenCodec(
        TokenConfig(
            secret_key=settings.SECRET_KEY,
            algorithm=settings.ALGORITHM,
            ttl=timedelta(hours=settings.ACCESS_TOKEN_EXPIRE_HOURS),
        )
    )


@lru_cache
def get_password_hasher() -> PasswordHasher:
    """Process-wide password hasher built from settings."""
    return PasswordHasher(HashConfig(bcrypt_rounds=settings.BCRYPT_ROUNDS))
