"""User aggregate."""

from datetime import datetime
from typing import Optional, Union
from uuid import UUID, uuid4

from budgetbook.domain.shared.time import utc_now
from budgetbook.domain.user.value_objects import Email


class User:
    """
    User aggregate root.

    Owns the namespace every account, transaction and budget lives in. The
    password hash is opaque here; hashing happens in the auth package.
    """

    def __init__(
        self,
        email: Union[str, Email],
        password_hash: str,
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
    ):
        self._email = email if isinstance(email, Email) else Email(email)
        self._password_hash = password_hash
        self._id = id if id is not None else uuid4()
        self._created_at = created_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self.email!r})"
