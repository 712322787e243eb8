"""Transaction history command."""

import click
from pennywise.cli.date_filters import (
    period_flags_from,
    period_options,
    resolve_cli_date_range,
)
from pennywise.cli.display import FREQUENCY_LABELS, signed_money
from pennywise.domain.aggregation import contribution_value
from pennywise.domain.entities import Frequency, TransactionKind
from pennywise.domain.summary import SummaryService
from pennywise.utils.date_parser import parse_date


@click.command("history")
@period_options
@click.option("--search", "-s", help="Text to look for in description or category")
@click.option("--kind", type=click.Choice([k.value for k in TransactionKind]), help="Only income or only expenses")
@click.option("--frequency", type=click.Choice([f.value for f in Frequency]), help="Only one frequency")
@click.option("--category", help="Exact category name")
@click.option("--as-of", help="Reference date; installments after it are hidden (default today)")
@click.pass_context
def history(
    ctx,
    start_date: str | None,
    end_date: str | None,
    this_month: bool,
    last_month: bool,
    this_year: bool,
    last_6_months: bool,
    search: str | None,
    kind: str | None,
    frequency: str | None,
    category: str | None,
    as_of: str | None,
):
    """Show transaction history.

    Installments that are not due yet are left out, and each installment is
    labelled with its position in the series ("Installment 3 of 12").
    """
    db = ctx.obj["db"]
    service = SummaryService(db)

    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags=period_flags_from(this_month, last_month, this_year, last_6_months),
    )

    reference = None
    if as_of:
        try:
            reference = parse_date(as_of)
        except ValueError as e:
            click.echo(f"Error: Invalid as-of date: {e}", err=True)
            ctx.exit(1)

    transactions = service.history(
        as_of=reference,
        search=search,
        kind=kind,
        frequency=frequency,
        category=category,
        start_date=start,
        end_date=end,
    )

    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo(f"{'Date':<12} {'Amount':>14} {'Frequency':<12} {'Category':<14} Description")
    click.echo("-" * 90)
    for txn in transactions:
        click.echo(
            f"{str(txn.date):<12} {signed_money(txn, contribution_value(txn)):>14} "
            f"{FREQUENCY_LABELS[txn.frequency]:<12} {txn.category[:14]:<14} {txn.description}"
        )


def register_commands(cli):
    """Register history command with main CLI."""
    cli.add_command(history)
