"""JWT token service.

Provides JWT token creation and verification for authentication.
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt

from budgetbook_auth.exceptions import InvalidTokenError
from budgetbook_auth.schemas import TokenPayload


class JWTService:
    """Service for JWT token creation and verification.

    Handles access tokens (short-lived) and refresh tokens (long-lived).

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key")
    >>> token = service.create_access_token(user_id, "user@example.com")
    >>> payload = service.verify_token(token)
    >>> print(payload.user_id)
    """

    DEFAULT_ACCESS_EXPIRE_HOURS = 24
    DEFAULT_REFRESH_EXPIRE_DAYS = 30
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        access_token_expire_hours: int = DEFAULT_ACCESS_EXPIRE_HOURS,
        refresh_token_expire_days: int = DEFAULT_REFRESH_EXPIRE_DAYS,
    ):
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._access_expire = timedelta(hours=access_token_expire_hours)
        self._refresh_expire = timedelta(days=refresh_token_expire_days)

    @property
    def access_token_lifetime(self) -> timedelta:
        return self._access_expire

    def create_access_token(
        self,
        user_id: UUID,
        email: str,
        expires_delta: timedelta | None = None,
    ) -> str:
        return self._create_token(
            user_id=user_id,
            email=email,
            token_type="access",
            expires_delta=expires_delta or self._access_expire,
        )

    def create_refresh_token(
        self,
        user_id: UUID,
        email: str,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Create a long-lived refresh token.

        Refresh tokens are used to obtain new access tokens without
        requiring the user to sign in again.
        """
        return self._create_token(
            user_id=user_id,
            email=email,
            token_type="refresh",
            expires_delta=expires_delta or self._refresh_expire,
        )

    def verify_token(self, token: str) -> TokenPayload:
        """Verify and decode a JWT token.

        Raises
        ------
        InvalidTokenError
            If token is invalid, expired, or malformed
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
            )

            user_id = UUID(payload["sub"])
            email = payload["email"]
            exp = datetime.fromtimestamp(payload["exp"], tz=timezone.utc)
            token_type = payload.get("type", "access")

            return TokenPayload(
                user_id=user_id,
                email=email,
                exp=exp,
                token_type=token_type,
            )

        except jwt.ExpiredSignatureError as e:
            msg = "Token has expired"
            raise InvalidTokenError(msg) from e
        except jwt.InvalidTokenError as e:
            msg = f"Invalid token: {e}"
            raise InvalidTokenError(msg) from e
        except (KeyError, ValueError) as e:
            msg = f"Malformed token payload: {e}"
            raise InvalidTokenError(msg) from e

    def _create_token(
        self,
        user_id: UUID,
        email: str,
        token_type: str,
        expires_delta: timedelta,
    ) -> str:
        now = datetime.now(tz=timezone.utc)
        expire = now + expires_delta

        payload = {
            "sub": str(user_id),
            "email": email,
            "type": token_type,
            "iat": now,
            "exp": expire,
        }

        return jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)
