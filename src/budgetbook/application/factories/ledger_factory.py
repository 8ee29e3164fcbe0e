"""Ledger factory protocol for the application layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from budgetbook.application.context import UserContext
    from budgetbook.application.ports import ChangeFeed, LedgerUnitOfWork


class LedgerFactory(Protocol):
    """Protocol for creating user-scoped units of work."""

    @property
    def user_context(self) -> UserContext:
        """The user every unit of work is scoped to."""
        ...

    @property
    def change_feed(self) -> Optional[ChangeFeed]:
        """Where committed changes are announced, if anywhere."""
        ...

    def unit_of_work(self) -> LedgerUnitOfWork:
        """Open a new, independent unit of work.

        Each call returns a fresh instance; retries must not reuse one.
        """
        ...
