"""Entities for the ledger domain."""

from budgetbook.domain.ledger.entities.account import DEFAULT_ACCOUNT_TYPE, Account
from budgetbook.domain.ledger.entities.budget import Budget

__all__ = ["DEFAULT_ACCOUNT_TYPE", "Account", "Budget"]
