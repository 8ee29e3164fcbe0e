"""Application factories."""

from budgetbook.application.factories.ledger_factory import LedgerFactory

__all__ = ["LedgerFactory"]
