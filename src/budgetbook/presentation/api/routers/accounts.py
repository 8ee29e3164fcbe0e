"""Accounts router for account management endpoints."""

import logging
from uuid import UUID

from fastapi import APIRouter, status

from budgetbook.application.commands.ledger import (
    CreateAccountCommand,
    DeleteAccountCommand,
)
from budgetbook.application.queries.ledger import ListAccountsQuery
from budgetbook.domain.ledger.entities import Account
from budgetbook.presentation.api.dependencies import LedgerFactoryDep, SettingsDep
from budgetbook.presentation.api.schemas.accounts import (
    AccountCreateRequest,
    AccountListResponse,
    AccountResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _account_to_response(account: Account) -> AccountResponse:
    return AccountResponse(
        id=account.id,
        name=account.name,
        type=account.account_type,
        balance=account.balance,
        created_at=account.created_at,
    )


@router.get(
    "",
    summary="List accounts",
    responses={
        200: {"description": "Accounts ordered by creation, with net worth"},
    },
)
async def list_accounts(
    factory: LedgerFactoryDep,
    settings: SettingsDep,
) -> AccountListResponse:
    result = await ListAccountsQuery.from_factory(factory).execute()

    return AccountListResponse(
        accounts=[_account_to_response(a) for a in result.accounts],
        total=result.total_count,
        net_worth=result.net_worth,
        currency=settings.currency,
    )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create account",
    responses={
        201: {"description": "Account created"},
        400: {"description": "Invalid input"},
    },
)
async def create_account(
    request: AccountCreateRequest,
    factory: LedgerFactoryDep,
    settings: SettingsDep,
) -> AccountResponse:
    """
    Create an account with an initial balance.

    The type is a free-text tag (Bank, Cash, Savings, Credit, ...).
    """
    command = CreateAccountCommand.from_factory(
        factory,
        max_amount=settings.ledger_max_amount,
    )
    account = await command.execute(
        name=request.name,
        account_type=request.type,
        balance=request.balance,
    )
    return _account_to_response(account)


@router.delete(
    "/{account_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete account",
    responses={
        204: {"description": "Account deleted"},
        404: {"description": "Account not found"},
    },
)
async def delete_account(
    account_id: UUID,
    factory: LedgerFactoryDep,
) -> None:
    """
    Delete an account.

    Transactions that reference it are kept unchanged.
    """
    await DeleteAccountCommand.from_factory(factory).execute(account_id)
