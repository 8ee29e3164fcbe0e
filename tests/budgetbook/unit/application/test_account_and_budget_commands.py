"""Unit tests for the account and budget commands."""

from decimal import Decimal
from uuid import uuid4

import pytest

from budgetbook.application.commands.ledger import (
    CreateAccountCommand,
    DeleteAccountCommand,
    DeleteBudgetCommand,
    SaveBudgetCommand,
)
from budgetbook.application.ports import ChangeAction, ChangeCollection
from budgetbook.application.queries.ledger import ListAccountsQuery, ListBudgetsQuery
from budgetbook.domain.ledger.exceptions import (
    AccountNotFoundError,
    BudgetNotFoundError,
    EmptyAccountNameError,
    NonPositiveAmountError,
)
from budgetbook.domain.ledger.value_objects import Category
from budgetbook.domain.shared.exceptions import ErrorCode, ValidationError


class TestCreateAccount:
    async def test_create_and_list(self, ledger_factory):
        create = CreateAccountCommand.from_factory(ledger_factory)
        await create.execute(name="Checking", balance=Decimal("1000"))
        await create.execute(name="Credit Card", account_type="Credit", balance="-250.50")

        result = await ListAccountsQuery.from_factory(ledger_factory).execute()

        assert [a.name for a in result.accounts] == ["Checking", "Credit Card"]
        assert result.accounts[1].account_type == "Credit"
        assert result.net_worth == Decimal("749.50")
        assert result.total_count == 2

    async def test_empty_name_is_rejected(self, ledger_factory):
        with pytest.raises(EmptyAccountNameError):
            await CreateAccountCommand.from_factory(ledger_factory).execute(name="  ")

    async def test_balance_above_maximum(self, ledger_factory):
        command = CreateAccountCommand.from_factory(ledger_factory, max_amount=Decimal("100"))

        with pytest.raises(ValidationError) as exc_info:
            await command.execute(name="Cash", balance="100.01")

        assert exc_info.value.code == ErrorCode.INVALID_AMOUNT

    async def test_publishes_creation(self, ledger_factory, change_feed):
        received = []
        change_feed.subscribe(ledger_factory.user_context.user_id, received.append)

        account = await CreateAccountCommand.from_factory(ledger_factory).execute(name="Cash")

        assert len(received) == 1
        assert received[0].collection == ChangeCollection.ACCOUNTS
        assert received[0].action == ChangeAction.CREATED
        assert received[0].entity_id == account.id


class TestDeleteAccount:
    async def test_delete(self, ledger_factory):
        account = await CreateAccountCommand.from_factory(ledger_factory).execute(name="Cash")

        await DeleteAccountCommand.from_factory(ledger_factory).execute(account.id)

        result = await ListAccountsQuery.from_factory(ledger_factory).execute()
        assert result.accounts == []

    async def test_delete_unknown(self, ledger_factory):
        with pytest.raises(AccountNotFoundError):
            await DeleteAccountCommand.from_factory(ledger_factory).execute(uuid4())


class TestBudgets:
    async def test_save_allows_several_budgets_per_category(self, ledger_factory):
        save = SaveBudgetCommand.from_factory(ledger_factory)
        await save.execute(category="food", limit="300")
        await save.execute(category=Category.FOOD, limit="150")

        budgets = await ListBudgetsQuery.from_factory(ledger_factory).execute()

        assert len(budgets) == 2
        assert {b.category for b in budgets} == {Category.FOOD}
        assert sorted(b.limit for b in budgets) == [Decimal("150"), Decimal("300")]

    async def test_limit_must_be_positive(self, ledger_factory):
        with pytest.raises(NonPositiveAmountError):
            await SaveBudgetCommand.from_factory(ledger_factory).execute(
                category="Food",
                limit="0",
            )

    async def test_unknown_category(self, ledger_factory):
        with pytest.raises(ValidationError) as exc_info:
            await SaveBudgetCommand.from_factory(ledger_factory).execute(
                category="Crypto",
                limit="10",
            )

        assert exc_info.value.code == ErrorCode.INVALID_CATEGORY

    async def test_delete(self, ledger_factory):
        budget = await SaveBudgetCommand.from_factory(ledger_factory).execute(
            category="Food",
            limit="300",
        )

        await DeleteBudgetCommand.from_factory(ledger_factory).execute(budget.id)

        assert await ListBudgetsQuery.from_factory(ledger_factory).execute() == []

    async def test_delete_unknown(self, ledger_factory):
        with pytest.raises(BudgetNotFoundError):
            await DeleteBudgetCommand.from_factory(ledger_factory).execute(uuid4())
