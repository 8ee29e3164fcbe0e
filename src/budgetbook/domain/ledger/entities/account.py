"""Account entity."""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from budgetbook.domain.ledger.exceptions import EmptyAccountNameError
from budgetbook.domain.ledger.value_objects.amount import to_amount
from budgetbook.domain.shared.time import utc_now

DEFAULT_ACCOUNT_TYPE = "Bank"


class Account:
    """
    A named money container owned by one user.

    The balance is the running sum of the opening balance and every posted
    transaction that touched the account. Outside the ledger unit of work it
    is read-only; ``apply_delta`` is the only mutator.
    """

    def __init__(  # NOQA: PLR0913
        self,
        name: str,
        user_id: UUID,
        account_type: str = DEFAULT_ACCOUNT_TYPE,
        balance: Decimal = Decimal("0"),
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
        version: int = 0,
    ):
        """
        Initialize a new account.

        Parameters
        ----------
        name
            Display name, must not be blank
        user_id
            Owner user ID
        account_type
            Free-text type tag (e.g. "Bank", "Cash", "Savings", "Credit")
        balance
            Opening balance, may be negative
        id
            Account ID (generated if not provided, used for reconstitution)
        created_at
            Creation timestamp (defaults to now, used for reconstitution)
        version
            Persistence version counter used for optimistic concurrency
        """
        if not name or not name.strip():
            raise EmptyAccountNameError

        self._id = id if id is not None else uuid4()
        self._user_id = user_id
        self._name = name.strip()
        self._account_type = (account_type or DEFAULT_ACCOUNT_TYPE).strip()
        self._balance = to_amount(balance, "balance")
        self._created_at = created_at or utc_now()
        self._version = version

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        user_id: UUID,
        name: str,
        account_type: str,
        balance: Decimal,
        created_at: datetime,
        version: int = 0,
    ) -> "Account":
        return cls(
            id=id,
            user_id=user_id,
            name=name,
            account_type=account_type,
            balance=balance,
            created_at=created_at,
            version=version,
        )

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def user_id(self) -> UUID:
        return self._user_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def account_type(self) -> str:
        return self._account_type

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def version(self) -> int:
        return self._version

    def apply_delta(self, delta: Decimal) -> None:
        """Shift the balance by a signed delta computed by the posting service."""
        self._balance = self._balance + delta

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Account):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return (
            f"Account(id={self._id}, name={self._name!r}, "
            f"type={self._account_type!r}, balance={self._balance})"
        )
