"""Unit tests for PostTransactionCommand against the in-memory ledger."""

from datetime import date
from decimal import Decimal
from uuid import uuid4

import pytest

from budgetbook.application.commands.ledger import (
    CreateAccountCommand,
    PostingPolicy,
    PostTransactionCommand,
)
from budgetbook.application.ports import ChangeAction, ChangeCollection
from budgetbook.application.queries.ledger import ListTransactionsQuery
from budgetbook.domain.ledger.exceptions import AccountNotFoundError
from budgetbook.domain.ledger.value_objects import TransactionIntent, TransactionKind
from budgetbook.domain.shared.exceptions import ErrorCode, ValidationError
from tests.shared.fixtures.memory import InMemoryLedgerFactory


async def _create_account(factory, name: str, balance: str):
    return await CreateAccountCommand.from_factory(factory).execute(
        name=name,
        balance=Decimal(balance),
    )


async def _balance(factory, account_id) -> Decimal:
    async with factory.unit_of_work() as uow:
        account = await uow.accounts.find_by_id(account_id)
    return account.balance


async def _transaction_count(factory) -> int:
    result = await ListTransactionsQuery.from_factory(factory).execute()
    return len(result.transactions)


class TestPosting:
    async def test_expense_debits_source_and_records_transaction(self, ledger_factory):
        checking = await _create_account(ledger_factory, "Checking", "1000")
        intent = TransactionIntent.create(
            amount="200",
            kind="expense",
            account_id=checking.id,
            category="Food",
        )

        transaction = await PostTransactionCommand.from_factory(ledger_factory).execute(intent)

        assert await _balance(ledger_factory, checking.id) == Decimal("800")
        result = await ListTransactionsQuery.from_factory(ledger_factory).execute()
        assert [t.id for t in result.transactions] == [transaction.id]
        assert result.transactions[0].kind == TransactionKind.EXPENSE
        assert result.transactions[0].amount == Decimal("200")

    async def test_income_credits_source(self, ledger_factory):
        checking = await _create_account(ledger_factory, "Checking", "1000")
        intent = TransactionIntent.create(
            amount="2500.50",
            kind="income",
            account_id=checking.id,
            category="Salary",
        )

        await PostTransactionCommand.from_factory(ledger_factory).execute(intent)

        assert await _balance(ledger_factory, checking.id) == Decimal("3500.50")

    async def test_transfer_with_fee(self, ledger_factory):
        checking = await _create_account(ledger_factory, "Checking", "1000")
        savings = await _create_account(ledger_factory, "Savings", "500")
        intent = TransactionIntent.create(
            amount="300",
            kind="transfer",
            account_id=checking.id,
            to_account_id=savings.id,
            service_fee="25",
        )

        transaction = await PostTransactionCommand.from_factory(ledger_factory).execute(intent)

        assert await _balance(ledger_factory, checking.id) == Decimal("675")
        assert await _balance(ledger_factory, savings.id) == Decimal("800")
        assert transaction.service_fee == Decimal("25")
        assert transaction.to_account_id == savings.id

    async def test_overdraft_is_allowed(self, ledger_factory):
        cash = await _create_account(ledger_factory, "Cash", "10")
        intent = TransactionIntent.create(
            amount="25",
            kind="expense",
            account_id=cash.id,
            category="Food",
        )

        await PostTransactionCommand.from_factory(ledger_factory).execute(intent)

        assert await _balance(ledger_factory, cash.id) == Decimal("-15")

    async def test_posted_date_is_kept(self, ledger_factory):
        cash = await _create_account(ledger_factory, "Cash", "10")
        intent = TransactionIntent.create(
            amount="1",
            kind="expense",
            account_id=cash.id,
            category="Food",
            date=date(2023, 12, 24),
        )

        transaction = await PostTransactionCommand.from_factory(ledger_factory).execute(intent)

        assert transaction.date == date(2023, 12, 24)


class TestRejection:
    async def test_missing_destination_leaves_no_trace(self, ledger_factory):
        checking = await _create_account(ledger_factory, "Checking", "1000")
        intent = TransactionIntent.create(
            amount="300",
            kind="transfer",
            account_id=checking.id,
            to_account_id=uuid4(),
        )

        with pytest.raises(AccountNotFoundError) as exc_info:
            await PostTransactionCommand.from_factory(ledger_factory).execute(intent)

        assert exc_info.value.code == ErrorCode.ACCOUNT_NOT_FOUND
        assert exc_info.value.details["role"] == "destination"
        assert await _balance(ledger_factory, checking.id) == Decimal("1000")
        assert await _transaction_count(ledger_factory) == 0

    async def test_missing_source(self, ledger_factory):
        intent = TransactionIntent.create(
            amount="10",
            kind="expense",
            account_id=uuid4(),
            category="Food",
        )

        with pytest.raises(AccountNotFoundError):
            await PostTransactionCommand.from_factory(ledger_factory).execute(intent)

        assert await _transaction_count(ledger_factory) == 0

    async def test_other_users_account_is_not_found(
        self,
        memory_store,
        alice_context,
        bob_context,
    ):
        alice = InMemoryLedgerFactory(memory_store, alice_context)
        bob = InMemoryLedgerFactory(memory_store, bob_context)
        alices_account = await _create_account(alice, "Alice Checking", "100")
        intent = TransactionIntent.create(
            amount="10",
            kind="expense",
            account_id=alices_account.id,
            category="Food",
        )

        with pytest.raises(AccountNotFoundError):
            await PostTransactionCommand.from_factory(bob).execute(intent)

        assert await _balance(alice, alices_account.id) == Decimal("100")

    async def test_amount_above_maximum_is_rejected_before_store_access(self, ledger_factory):
        checking = await _create_account(ledger_factory, "Checking", "0")
        intent = TransactionIntent.create(
            amount="1000",
            kind="income",
            account_id=checking.id,
            category="Salary",
        )
        policy = PostingPolicy(max_amount=Decimal("999.99"))

        with pytest.raises(ValidationError) as exc_info:
            await PostTransactionCommand.from_factory(ledger_factory, policy).execute(intent)

        assert exc_info.value.code == ErrorCode.INVALID_AMOUNT
        assert await _balance(ledger_factory, checking.id) == Decimal("0")


class TestNotifications:
    async def test_changes_are_published_after_commit(self, ledger_factory, change_feed):
        checking = await _create_account(ledger_factory, "Checking", "1000")
        savings = await _create_account(ledger_factory, "Savings", "0")
        received = []
        change_feed.subscribe(ledger_factory.user_context.user_id, received.append)
        intent = TransactionIntent.create(
            amount="5",
            kind="transfer",
            account_id=checking.id,
            to_account_id=savings.id,
        )

        transaction = await PostTransactionCommand.from_factory(ledger_factory).execute(intent)

        assert [(e.collection, e.action, e.entity_id) for e in received] == [
            (ChangeCollection.TRANSACTIONS, ChangeAction.CREATED, transaction.id),
            (ChangeCollection.ACCOUNTS, ChangeAction.UPDATED, checking.id),
            (ChangeCollection.ACCOUNTS, ChangeAction.UPDATED, savings.id),
        ]

    async def test_nothing_is_published_on_failure(self, ledger_factory, change_feed):
        received = []
        change_feed.subscribe(ledger_factory.user_context.user_id, received.append)
        intent = TransactionIntent.create(
            amount="5",
            kind="expense",
            account_id=uuid4(),
            category="Food",
        )

        with pytest.raises(AccountNotFoundError):
            await PostTransactionCommand.from_factory(ledger_factory).execute(intent)

        assert received == []
