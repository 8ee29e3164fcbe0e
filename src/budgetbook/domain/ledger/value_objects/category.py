"""Closed category enumeration with its display metadata.

Colors and icon names are presentation metadata only; no business rule
depends on them.
"""

from enum import Enum

from budgetbook.domain.shared.exceptions import ErrorCode, ValidationError


class Category(str, Enum):
    """Categories shared by transactions and budgets."""

    SALARY = "Salary"
    FOOD = "Food"
    TRANSPORT = "Transport"
    SHOPPING = "Shopping"
    HOUSING = "Housing"
    UTILITIES = "Utilities"
    ENTERTAINMENT = "Entertainment"
    HEALTH = "Health"
    TRANSFER = "Transfer"
    OTHER = "Other"

    @classmethod
    def parse(cls, value: "str | Category") -> "Category":
        """Resolve a category from its label, case-insensitively."""
        if isinstance(value, Category):
            return value
        label = str(value).strip().lower()
        for category in cls:
            if category.value.lower() == label or category.name.lower() == label:
                return category
        valid = ", ".join(c.value for c in cls)
        msg = f"Invalid category '{value}'. Valid categories: {valid}"
        raise ValidationError(
            msg,
            code=ErrorCode.INVALID_CATEGORY,
            details={"category": str(value)},
        )

    @property
    def color(self) -> str:
        return CATEGORY_COLORS[self]

    @property
    def icon(self) -> str:
        return CATEGORY_ICONS[self]


CATEGORY_COLORS: dict[Category, str] = {
    Category.SALARY: "#10b981",
    Category.FOOD: "#ef4444",
    Category.TRANSPORT: "#f59e0b",
    Category.SHOPPING: "#eab308",
    Category.HOUSING: "#3b82f6",
    Category.UTILITIES: "#6366f1",
    Category.ENTERTAINMENT: "#8b5cf6",
    Category.HEALTH: "#ec4899",
    Category.TRANSFER: "#a855f7",
    Category.OTHER: "#64748b",
}

CATEGORY_ICONS: dict[Category, str] = {
    Category.SALARY: "banknote",
    Category.FOOD: "utensils",
    Category.TRANSPORT: "car",
    Category.SHOPPING: "shopping-bag",
    Category.HOUSING: "home",
    Category.UTILITIES: "zap",
    Category.ENTERTAINMENT: "film",
    Category.HEALTH: "heart-pulse",
    Category.TRANSFER: "arrow-right-left",
    Category.OTHER: "more-horizontal",
}
