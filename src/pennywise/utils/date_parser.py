"""Date parsing and calendar-month utilities."""

from datetime import date, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

PERIODS = ("this-month", "last-month", "this-year", "last-6-months")


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports absolute dates ("2024-01-15", "January 15, 2024", ...) and a few
    relative forms: "today", "yesterday", "tomorrow" and "last/this/next
    month" (first day of that month).

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
        "last month": add_months(today.replace(day=1), -1),
        "this month": today.replace(day=1),
        "next month": add_months(today.replace(day=1), 1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def add_months(start: date, months: int) -> date:
    """Shift a date by whole calendar months.

    The day of month is clamped to the last day of the target month, so
    January 31 plus one month is the end of February.
    """
    return start + relativedelta(months=months)


def month_range(year: int, month: int) -> tuple[date, date]:
    """Return the first and last day of a calendar month."""
    first = date(year, month, 1)
    last = add_months(first, 1) - timedelta(days=1)
    return first, last


def last_n_months(as_of: date, count: int) -> list[tuple[int, int]]:
    """Return (year, month) pairs for the ``count`` months ending at ``as_of``.

    Oldest month first.
    """
    first = as_of.replace(day=1)
    months = []
    for offset in range(count - 1, -1, -1):
        shifted = add_months(first, -offset)
        months.append((shifted.year, shifted.month))
    return months


def get_date_range(period: str, today: date | None = None) -> tuple[date, date]:
    """Get start and end dates for a named period.

    Args:
        period: One of this-month, last-month, this-year, last-6-months
        today: Reference date (defaults to the current date)

    Returns:
        Tuple of (start_date, end_date) for the specified period

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    if today is None:
        today = date.today()

    if period == "this-month":
        return month_range(today.year, today.month)

    elif period == "last-month":
        previous = add_months(today.replace(day=1), -1)
        return month_range(previous.year, previous.month)

    elif period == "this-year":
        return (date(today.year, 1, 1), date(today.year, 12, 31))

    elif period == "last-6-months":
        start = add_months(today.replace(day=1), -5)
        return (start, month_range(today.year, today.month)[1])

    else:
        raise ValueError(
            f"Unknown period: '{period}'. Supported periods: {', '.join(PERIODS)}"
        )
