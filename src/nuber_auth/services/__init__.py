"""Authentication services.

Provides password hashing, JWT token management and verification codes.
"""

from nuber_auth.services.jwt_service import JWTService
from nuber_auth.services.password_service import PasswordHashingService
from nuber_auth.services.verification_code_service import VerificationCodeGenerator

__all__ = [
    "JWTService",
    "PasswordHashingService",
    "VerificationCodeGenerator",
]
