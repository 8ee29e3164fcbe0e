"""Calendar month value object used by the monthly read models."""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, timedelta

from budgetbook.domain.shared.exceptions import ErrorCode, ValidationError
from budgetbook.domain.shared.time import today_utc


@dataclass(frozen=True, order=True)
class Month:
    """A calendar month, e.g. ``Month(2024, 3)`` for March 2024."""

    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:  # NOQA: PLR2004
            msg = f"Month must be between 1 and 12, got {self.month}"
            raise ValidationError(msg, code=ErrorCode.INVALID_DATE)
        if not 1 <= self.year <= 9999:  # NOQA: PLR2004
            msg = f"Year out of range: {self.year}"
            raise ValidationError(msg, code=ErrorCode.INVALID_DATE)

    @classmethod
    def parse(cls, value: str) -> Month:
        """Parse a ``YYYY-MM`` string."""
        try:
            year, mon = map(int, value.split("-"))
        except (ValueError, AttributeError) as e:
            msg = "Invalid month format. Use YYYY-MM"
            raise ValidationError(msg, code=ErrorCode.INVALID_DATE) from e
        return cls(year, mon)

    @classmethod
    def current(cls) -> Month:
        today = today_utc()
        return cls(today.year, today.month)

    @classmethod
    def of(cls, day: date) -> Month:
        return cls(day.year, day.month)

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def last_day(self) -> date:
        return date(self.year, self.month, self.days_in_month)

    @property
    def days_in_month(self) -> int:
        return calendar.monthrange(self.year, self.month)[1]

    @property
    def label(self) -> str:
        return self.first_day.strftime("%B %Y")

    def contains(self, day: date) -> bool:
        return day.year == self.year and day.month == self.month

    def days(self) -> list[date]:
        first = self.first_day
        return [first + timedelta(days=i) for i in range(self.days_in_month)]

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"
