"""Monthly aggregations behind the dashboard and calendar views."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING, Dict, Iterable, List

from budgetbook.domain.ledger.value_objects import Category

if TYPE_CHECKING:
    from budgetbook.domain.ledger.aggregates import Transaction
    from budgetbook.domain.ledger.entities import Account
    from budgetbook.domain.shared.month import Month

ZERO = Decimal("0")
HUNDRED = Decimal("100")


@dataclass(frozen=True)
class DailyTotals:
    day: date
    income: Decimal = ZERO
    expense: Decimal = ZERO


@dataclass(frozen=True)
class CalendarDay:
    day: date
    transactions: List[Transaction] = field(default_factory=list)

    @property
    def net(self) -> Decimal:
        """Income minus expense for the day; transfers do not count."""
        return sum((t.net_effect for t in self.transactions), ZERO)


@dataclass(frozen=True)
class MonthlySummary:
    month: Month
    net_worth: Decimal
    income: Decimal
    expense: Decimal
    expense_by_category: Dict[Category, Decimal]
    daily: List[DailyTotals]

    @property
    def expense_ratio(self) -> Decimal:
        """Expense as a whole percentage of income, capped at 100.

        Zero income is treated as 1 so a month with expenses and no income
        shows as fully spent instead of failing.
        """
        income = self.income if self.income else Decimal("1")
        ratio = self.expense / income * HUNDRED
        return min(ratio, HUNDRED).quantize(Decimal("1"), rounding=ROUND_HALF_UP)


class LedgerReportService:
    """Pure functions over accounts and transactions."""

    @staticmethod
    def net_worth(accounts: Iterable[Account]) -> Decimal:
        return sum((a.balance for a in accounts), ZERO)

    @staticmethod
    def in_month(transactions: Iterable[Transaction], month: Month) -> List[Transaction]:
        return [t for t in transactions if month.contains(t.date)]

    @staticmethod
    def summarize(
        accounts: Iterable[Account],
        transactions: Iterable[Transaction],
        month: Month,
    ) -> MonthlySummary:
        monthly = LedgerReportService.in_month(transactions, month)

        income = sum((t.amount for t in monthly if t.is_income), ZERO)
        expense = sum((t.amount for t in monthly if t.is_expense), ZERO)

        by_category: Dict[Category, Decimal] = defaultdict(Decimal)
        for t in monthly:
            if t.is_expense:
                by_category[t.category] += t.amount

        daily: List[DailyTotals] = []
        for day in month.days():
            on_day = [t for t in monthly if t.date == day]
            daily.append(
                DailyTotals(
                    day=day,
                    income=sum((t.amount for t in on_day if t.is_income), ZERO),
                    expense=sum((t.amount for t in on_day if t.is_expense), ZERO),
                ),
            )

        return MonthlySummary(
            month=month,
            net_worth=LedgerReportService.net_worth(accounts),
            income=income,
            expense=expense,
            expense_by_category=dict(
                sorted(by_category.items(), key=lambda item: item[1], reverse=True),
            ),
            daily=daily,
        )

    @staticmethod
    def calendar(transactions: Iterable[Transaction], month: Month) -> List[CalendarDay]:
        by_day: Dict[date, List[Transaction]] = defaultdict(list)
        for t in LedgerReportService.in_month(transactions, month):
            by_day[t.date].append(t)
        return [CalendarDay(day=day, transactions=by_day.get(day, [])) for day in month.days()]
