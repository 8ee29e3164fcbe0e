"""Ledger commands."""

from budgetbook.application.commands.ledger.create_account_command import (
    CreateAccountCommand,
)
from budgetbook.application.commands.ledger.delete_account_command import (
    DeleteAccountCommand,
)
from budgetbook.application.commands.ledger.delete_budget_command import (
    DeleteBudgetCommand,
)
from budgetbook.application.commands.ledger.delete_transaction_command import (
    DeleteTransactionCommand,
)
from budgetbook.application.commands.ledger.post_transaction_command import (
    PostTransactionCommand,
)
from budgetbook.application.commands.ledger.posting_policy import (
    PostingDeadline,
    PostingPolicy,
)
from budgetbook.application.commands.ledger.save_budget_command import (
    SaveBudgetCommand,
)

__all__ = [
    "CreateAccountCommand",
    "DeleteAccountCommand",
    "DeleteBudgetCommand",
    "DeleteTransactionCommand",
    "PostTransactionCommand",
    "PostingDeadline",
    "PostingPolicy",
    "SaveBudgetCommand",
]
