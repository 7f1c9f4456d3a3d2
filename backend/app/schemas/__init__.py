from app.schemas.common import envelope, error_envelope
from app.schemas.user import UserPublic, UserProfile, to_public_user

__all__ = ["envelope", "error_envelope", "UserPublic", "UserProfile", "to_public_user"]
