from app.repositories.scoped import TenantScope, store_guard
from app.repositories.public import create_applicant, email_in_use, get_user_by_email

__all__ = [
    "TenantScope",
    "store_guard",
    "create_applicant",
    "email_in_use",
    "get_user_by_email",
]
