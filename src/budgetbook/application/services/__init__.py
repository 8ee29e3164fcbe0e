"""Application services."""

from budgetbook.application.services.authentication_service import (
    AuthenticationService,
)

__all__ = ["AuthenticationService"]
