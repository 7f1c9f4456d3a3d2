from app.services.registration import RegistrationResult, register_company
from app.services.authentication import LoginResult, login

__all__ = [
    "RegistrationResult",
    "register_company",
    "LoginResult",
    "login",
]
