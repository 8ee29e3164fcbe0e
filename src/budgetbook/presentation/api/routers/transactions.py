"""Transactions router: the posting entry point of the ledger."""

import logging
from typing import Annotated, Optional
from uuid import UUID

from fastapi import APIRouter, Query, status

from budgetbook.application.commands.ledger import (
    DeleteTransactionCommand,
    PostTransactionCommand,
)
from budgetbook.application.queries.ledger import ListTransactionsQuery
from budgetbook.domain.ledger.aggregates import Transaction
from budgetbook.domain.ledger.value_objects import TransactionIntent
from budgetbook.domain.shared.month import Month
from budgetbook.presentation.api.dependencies import (
    LedgerFactoryDep,
    PostingPolicyDep,
)
from budgetbook.presentation.api.schemas.transactions import (
    TransactionCreateRequest,
    TransactionListResponse,
    TransactionResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

# Type aliases for query parameters using Annotated (modern FastAPI pattern)
MonthFilter = Annotated[
    str | None,
    Query(pattern=r"^\d{4}-\d{2}$", description="Month in YYYY-MM format"),
]
LimitFilter = Annotated[
    int | None,
    Query(ge=1, le=1000, description="Maximum number of transactions"),
]
ReverseBalance = Annotated[
    bool,
    Query(description="Undo the transaction's effect on account balances"),
]


def transaction_to_response(
    transaction: Transaction,
    account_names: Optional[dict[UUID, str]] = None,
) -> TransactionResponse:
    """Convert a transaction, resolving account names where known."""
    names = account_names or {}
    to_account_id = transaction.to_account_id
    return TransactionResponse(
        id=transaction.id,
        amount=transaction.amount,
        type=transaction.kind.value,
        category=transaction.category.value,
        account_id=transaction.account_id,
        account_name=names.get(transaction.account_id),
        to_account_id=to_account_id,
        to_account_name=names.get(to_account_id) if to_account_id else None,
        date=transaction.date,
        description=transaction.description,
        service_fee=transaction.service_fee,
        created_at=transaction.created_at,
    )


@router.get(
    "",
    summary="List transactions",
    responses={
        200: {"description": "Transactions, newest first"},
    },
)
async def list_transactions(
    factory: LedgerFactoryDep,
    month: MonthFilter = None,
    limit: LimitFilter = None,
) -> TransactionListResponse:
    query = ListTransactionsQuery.from_factory(factory)
    result = await query.execute(
        month=Month.parse(month) if month else None,
        limit=limit,
    )

    return TransactionListResponse(
        transactions=[
            transaction_to_response(t, result.account_names) for t in result.transactions
        ],
        total=len(result.transactions),
    )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Post transaction",
    responses={
        201: {"description": "Transaction posted and balances updated"},
        400: {"description": "Invalid transaction"},
        404: {"description": "Source or destination account not found"},
        409: {"description": "Concurrent updates kept conflicting"},
        504: {"description": "Posting timed out"},
    },
)
async def post_transaction(
    request: TransactionCreateRequest,
    factory: LedgerFactoryDep,
    policy: PostingPolicyDep,
) -> TransactionResponse:
    """
    Post an income, expense or transfer.

    The transaction record and the balance changes of every affected account
    are stored together or not at all. For transfers the service fee is
    charged to the source account and not credited to the destination.
    """
    intent = TransactionIntent.create(
        amount=request.amount,
        kind=request.type,
        account_id=request.account_id,
        category=request.category,
        to_account_id=request.to_account_id,
        date=request.date,
        description=request.description,
        service_fee=request.service_fee,
    )
    command = PostTransactionCommand.from_factory(factory, policy=policy)
    transaction = await command.execute(intent)
    return transaction_to_response(transaction)


@router.delete(
    "/{transaction_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete transaction",
    responses={
        204: {"description": "Transaction deleted"},
        404: {"description": "Transaction not found"},
    },
)
async def delete_transaction(
    transaction_id: UUID,
    factory: LedgerFactoryDep,
    policy: PostingPolicyDep,
    reverse_balance: ReverseBalance = False,
) -> None:
    """
    Delete a transaction.

    Balances stay as they are unless ``reverse_balance`` is set, in which
    case the effect is undone on every account that still exists.
    """
    command = DeleteTransactionCommand.from_factory(factory, policy=policy)
    await command.execute(transaction_id, reverse_balance=reverse_balance)
