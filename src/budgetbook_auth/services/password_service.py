"""Password hashing service using bcrypt."""

import bcrypt

from budgetbook_auth.exceptions import WeakPasswordError


class PasswordHashingService:
    """Service for secure password hashing and verification.

    Examples
    --------
    >>> service = PasswordHashingService()
    >>> hash = service.hash("my_secure_password")
    >>> service.verify("my_secure_password", hash)
    True
    >>> service.verify("wrong_password", hash)
    False
    """

    MIN_LENGTH = 8
    # bcrypt only looks at the first 72 bytes of the input
    MAX_BYTES = 72

    def __init__(self, rounds: int = 12):
        """Initialize the password hashing service.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations).
        """
        self._rounds = rounds

    def hash(self, password: str) -> str:
        """Hash a plaintext password.

        Raises
        ------
        WeakPasswordError
            If password doesn't meet requirements
        """
        self.validate_strength(password)
        salt = bcrypt.gensalt(rounds=self._rounds)
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"),
                password_hash.encode("utf-8"),
            )
        except (ValueError, TypeError):
            # Invalid hash format or oversized input
            return False

    def validate_strength(self, password: str) -> None:
        if not password:
            msg = "Password cannot be empty"
            raise WeakPasswordError(msg)

        if len(password) < self.MIN_LENGTH:
            msg = f"Password must be at least {self.MIN_LENGTH} characters"
            raise WeakPasswordError(msg)

        if len(password.encode("utf-8")) > self.MAX_BYTES:
            msg = f"Password cannot exceed {self.MAX_BYTES} bytes"
            raise WeakPasswordError(msg)
