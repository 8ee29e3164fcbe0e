"""Aggregates for the ledger domain."""

from budgetbook.domain.ledger.aggregates.transaction import Transaction

__all__ = ["Transaction"]
