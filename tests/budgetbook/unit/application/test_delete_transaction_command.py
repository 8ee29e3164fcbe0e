"""Unit tests for DeleteTransactionCommand."""

from decimal import Decimal
from uuid import uuid4

import pytest

from budgetbook.application.commands.ledger import (
    CreateAccountCommand,
    DeleteAccountCommand,
    DeleteTransactionCommand,
    PostTransactionCommand,
)
from budgetbook.application.ports import ChangeAction, ChangeCollection
from budgetbook.domain.ledger.exceptions import TransactionNotFoundError
from budgetbook.domain.ledger.value_objects import TransactionIntent


@pytest.fixture
async def accounts(ledger_factory):
    create = CreateAccountCommand.from_factory(ledger_factory)
    checking = await create.execute(name="Checking", balance=Decimal("1000"))
    savings = await create.execute(name="Savings", balance=Decimal("500"))
    return checking, savings


@pytest.fixture
async def transfer(ledger_factory, accounts):
    checking, savings = accounts
    intent = TransactionIntent.create(
        amount="300",
        kind="transfer",
        account_id=checking.id,
        to_account_id=savings.id,
        service_fee="25",
    )
    return await PostTransactionCommand.from_factory(ledger_factory).execute(intent)


async def _balances(factory, *account_ids) -> list[Decimal]:
    async with factory.unit_of_work() as uow:
        return [(await uow.accounts.find_by_id(i)).balance for i in account_ids]


async def _exists(factory, transaction_id) -> bool:
    async with factory.unit_of_work() as uow:
        return await uow.transactions.find_by_id(transaction_id) is not None


class TestDeleteTransaction:
    async def test_delete_keeps_balances_by_default(self, ledger_factory, accounts, transfer):
        checking, savings = accounts

        await DeleteTransactionCommand.from_factory(ledger_factory).execute(transfer.id)

        assert not await _exists(ledger_factory, transfer.id)
        assert await _balances(ledger_factory, checking.id, savings.id) == [
            Decimal("675"),
            Decimal("800"),
        ]

    async def test_delete_with_reversal_restores_balances(
        self,
        ledger_factory,
        accounts,
        transfer,
    ):
        checking, savings = accounts

        await DeleteTransactionCommand.from_factory(ledger_factory).execute(
            transfer.id,
            reverse_balance=True,
        )

        assert not await _exists(ledger_factory, transfer.id)
        assert await _balances(ledger_factory, checking.id, savings.id) == [
            Decimal("1000"),
            Decimal("500"),
        ]

    async def test_reversal_skips_deleted_accounts(self, ledger_factory, accounts, transfer):
        checking, savings = accounts
        await DeleteAccountCommand.from_factory(ledger_factory).execute(savings.id)

        await DeleteTransactionCommand.from_factory(ledger_factory).execute(
            transfer.id,
            reverse_balance=True,
        )

        assert not await _exists(ledger_factory, transfer.id)
        assert await _balances(ledger_factory, checking.id) == [Decimal("1000")]

    async def test_unknown_transaction(self, ledger_factory):
        with pytest.raises(TransactionNotFoundError):
            await DeleteTransactionCommand.from_factory(ledger_factory).execute(uuid4())

    async def test_publishes_deletion_and_reversed_accounts(
        self,
        ledger_factory,
        change_feed,
        accounts,
        transfer,
    ):
        checking, savings = accounts
        received = []
        change_feed.subscribe(ledger_factory.user_context.user_id, received.append)

        await DeleteTransactionCommand.from_factory(ledger_factory).execute(
            transfer.id,
            reverse_balance=True,
        )

        assert [(e.collection, e.action) for e in received] == [
            (ChangeCollection.TRANSACTIONS, ChangeAction.DELETED),
            (ChangeCollection.ACCOUNTS, ChangeAction.UPDATED),
            (ChangeCollection.ACCOUNTS, ChangeAction.UPDATED),
        ]
        assert {e.entity_id for e in received[1:]} == {checking.id, savings.id}
