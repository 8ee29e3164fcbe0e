"""Authentication services.

Provides password hashing and JWT token management.
"""

from budgetbook_auth.services.jwt_service import JWTService
from budgetbook_auth.services.password_service import PasswordHashingService

__all__ = [
    "JWTService",
    "PasswordHashingService",
]
