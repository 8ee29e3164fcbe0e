"""Category catalogue with display metadata."""

from __future__ import annotations

from dataclasses import dataclass

from budgetbook.domain.ledger.value_objects import Category, TransactionKind


@dataclass(frozen=True)
class CategoryInfo:
    name: str
    color: str
    icon: str
    kinds: tuple[TransactionKind, ...]


class CategoriesQuery:
    """Static list of categories; needs no store access."""

    def execute(self) -> list[CategoryInfo]:
        return [
            CategoryInfo(
                name=category.value,
                color=category.color,
                icon=category.icon,
                kinds=_kinds_for(category),
            )
            for category in Category
        ]


def _kinds_for(category: Category) -> tuple[TransactionKind, ...]:
    if category is Category.TRANSFER:
        return (TransactionKind.TRANSFER,)
    return (TransactionKind.INCOME, TransactionKind.EXPENSE)
