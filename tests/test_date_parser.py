"""Tests for date parsing and calendar-month helpers."""

import pytest
from datetime import date, timedelta
from pennywise.utils.date_parser import (
    add_months,
    get_date_range,
    last_n_months,
    month_range,
    parse_date,
)


def test_parse_absolute_date():
    """Test parsing absolute dates."""
    assert parse_date("2024-01-15") == date(2024, 1, 15)
    assert parse_date("January 15, 2024") == date(2024, 1, 15)


def test_parse_relative_days():
    """Test parsing 'today', 'yesterday' and 'tomorrow'."""
    today = date.today()
    assert parse_date("today") == today
    assert parse_date(" Yesterday ") == today - timedelta(days=1)
    assert parse_date("tomorrow") == today + timedelta(days=1)


def test_parse_relative_months():
    """Relative months resolve to the first day of the month."""
    first = date.today().replace(day=1)
    assert parse_date("this month") == first
    assert parse_date("last month") == add_months(first, -1)
    assert parse_date("next month") == add_months(first, 1)
    assert parse_date("last month").day == 1


def test_parse_invalid_date():
    """Test that garbage input raises ValueError."""
    with pytest.raises(ValueError, match="Could not parse date"):
        parse_date("not a date at all")


def test_add_months_clamps_day():
    """Month arithmetic keeps the last day valid."""
    assert add_months(date(2025, 1, 31), 1) == date(2025, 2, 28)
    assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
    assert add_months(date(2025, 3, 31), 1) == date(2025, 4, 30)


def test_add_months_crosses_years():
    assert add_months(date(2025, 11, 15), 3) == date(2026, 2, 15)
    assert add_months(date(2025, 1, 15), -1) == date(2024, 12, 15)


def test_month_range():
    assert month_range(2024, 2) == (date(2024, 2, 1), date(2024, 2, 29))
    assert month_range(2025, 12) == (date(2025, 12, 1), date(2025, 12, 31))


def test_last_n_months():
    assert last_n_months(date(2025, 2, 14), 3) == [(2024, 12), (2025, 1), (2025, 2)]
    assert last_n_months(date(2025, 2, 14), 1) == [(2025, 2)]


def test_get_date_range_this_month():
    """Test this-month period."""
    start, end = get_date_range("this-month", today=date(2025, 2, 14))
    assert start == date(2025, 2, 1)
    assert end == date(2025, 2, 28)


def test_get_date_range_last_month():
    """Test last-month period, including the January rollover."""
    assert get_date_range("last-month", today=date(2025, 3, 31)) == (
        date(2025, 2, 1),
        date(2025, 2, 28),
    )
    assert get_date_range("last-month", today=date(2025, 1, 10)) == (
        date(2024, 12, 1),
        date(2024, 12, 31),
    )


def test_get_date_range_this_year():
    """Test this-year period."""
    assert get_date_range("this-year", today=date(2025, 6, 1)) == (
        date(2025, 1, 1),
        date(2025, 12, 31),
    )


def test_get_date_range_last_6_months():
    """The window covers the current month and the five before it."""
    assert get_date_range("last-6-months", today=date(2025, 3, 10)) == (
        date(2024, 10, 1),
        date(2025, 3, 31),
    )


def test_get_date_range_defaults_to_today():
    start, end = get_date_range("this-month")
    assert start <= date.today() <= end


def test_get_date_range_unknown_period():
    """Test invalid period raises error."""
    with pytest.raises(ValueError, match="Unknown period"):
        get_date_range("next-decade")
