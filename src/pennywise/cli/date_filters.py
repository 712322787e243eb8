"""CLI helpers for date range resolution."""

from datetime import date

import click

from pennywise.utils.date_parser import get_date_range, parse_date


def period_options(command):
    """Attach the period flags shared by listing commands."""
    options = [
        click.option("--last-6-months", "last_6_months", is_flag=True, help="Filter to the last six months"),
        click.option("--this-year", is_flag=True, help="Filter to current year"),
        click.option("--last-month", is_flag=True, help="Filter to previous month"),
        click.option("--this-month", is_flag=True, help="Filter to current month"),
        click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today')"),
        click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'last month')"),
    ]
    for option in options:
        command = option(command)
    return command


def resolve_cli_date_range(
    ctx,
    *,
    start_date: str | None,
    end_date: str | None,
    period_flags: dict[str, bool],
    default_range: tuple[date, date] | None = None,
) -> tuple[date | None, date | None]:
    """Resolve CLI date range from period flags or explicit dates."""
    period_count = sum(1 for is_set in period_flags.values() if is_set)

    if period_count > 1:
        click.echo(
            "Error: Only one period option (--this-month, --last-month, --this-year, --last-6-months) can be specified at a time.",
            err=True,
        )
        ctx.exit(1)

    if period_count > 0 and (start_date or end_date):
        click.echo(
            "Error: Period options cannot be combined with --start-date or --end-date.",
            err=True,
        )
        ctx.exit(1)

    start = None
    end = None

    if period_count == 1:
        for period, is_set in period_flags.items():
            if is_set:
                start, end = get_date_range(period)
                break
    else:
        if start_date:
            try:
                start = parse_date(start_date)
            except ValueError as e:
                click.echo(f"Error: Invalid start date: {e}", err=True)
                ctx.exit(1)

        if end_date:
            try:
                end = parse_date(end_date)
            except ValueError as e:
                click.echo(f"Error: Invalid end date: {e}", err=True)
                ctx.exit(1)

        if start is None and end is None and default_range is not None:
            start, end = default_range

    return start, end


def period_flags_from(
    this_month: bool, last_month: bool, this_year: bool, last_6_months: bool
) -> dict[str, bool]:
    """Map flag values to the period names understood by get_date_range."""
    return {
        "this-month": this_month,
        "last-month": last_month,
        "this-year": this_year,
        "last-6-months": last_6_months,
    }
