"""Balance arithmetic for posting and reversing transactions."""

from __future__ import annotations

from collections import defaultdict
from decimal import Decimal
from typing import TYPE_CHECKING, Dict
from uuid import UUID

from budgetbook.domain.ledger.value_objects import TransactionKind

if TYPE_CHECKING:
    from budgetbook.domain.ledger.aggregates import Transaction
    from budgetbook.domain.ledger.value_objects import TransactionIntent


class LedgerPostingService:
    """
    Pure rules that turn a transaction into per-account balance deltas.

    - income: source ``+amount``
    - expense: source ``-amount``
    - transfer: source ``-(amount + service_fee)``, destination ``+amount``

    The service fee leaves the ledger; it is not credited anywhere. There is
    no overdraft check, balances may go negative.
    """

    @staticmethod
    def balance_deltas(intent: TransactionIntent) -> Dict[UUID, Decimal]:
        deltas: Dict[UUID, Decimal] = defaultdict(Decimal)

        if intent.kind == TransactionKind.INCOME:
            deltas[intent.account_id] += intent.amount
        elif intent.kind == TransactionKind.EXPENSE:
            deltas[intent.account_id] -= intent.amount
        else:
            deltas[intent.account_id] -= intent.total_debit
            # to_account_id is guaranteed by the intent for transfers
            deltas[intent.to_account_id] += intent.amount  # type: ignore[index]

        return dict(deltas)

    @staticmethod
    def reversal_deltas(transaction: Transaction) -> Dict[UUID, Decimal]:
        """Inverse of ``balance_deltas`` for an already posted transaction."""
        forward = LedgerPostingService.balance_deltas(transaction.as_intent())
        return {account_id: -delta for account_id, delta in forward.items()}

