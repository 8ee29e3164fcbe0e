"""Unit tests for the Month value object."""

from datetime import date

import pytest

from budgetbook.domain.shared.exceptions import ErrorCode, ValidationError
from budgetbook.domain.shared.month import Month


def test_parse_and_format():
    month = Month.parse("2024-02")

    assert month == Month(2024, 2)
    assert str(month) == "2024-02"
    assert month.label == "February 2024"


@pytest.mark.parametrize("value", ["2024", "2024-13", "march", "2024-00", ""])
def test_parse_rejects_invalid_input(value):
    with pytest.raises(ValidationError) as exc_info:
        Month.parse(value)

    assert exc_info.value.code == ErrorCode.INVALID_DATE


def test_leap_year_days():
    month = Month(2024, 2)

    days = month.days()

    assert month.days_in_month == 29
    assert days[0] == date(2024, 2, 1)
    assert days[-1] == date(2024, 2, 29)
    assert month.last_day == date(2024, 2, 29)


def test_contains_matches_year_and_month():
    month = Month(2024, 3)

    assert month.contains(date(2024, 3, 31))
    assert not month.contains(date(2023, 3, 15))
    assert not month.contains(date(2024, 4, 1))


def test_of_day():
    assert Month.of(date(2025, 12, 31)) == Month(2025, 12)
