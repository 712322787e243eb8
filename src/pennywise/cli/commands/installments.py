"""Installment purchase overview command."""

import click
from pennywise.cli.display import format_money
from pennywise.domain.installments import series_key
from pennywise.domain.summary import SummaryService
from pennywise.utils.date_parser import parse_date


@click.command("installments")
@click.option("--as-of", help="Reference date for paid installments (default today)")
@click.pass_context
def installments(ctx, as_of: str | None):
    """List installment purchases, one line per series.

    Examples:
        pennywise installments
        pennywise installments --as-of 2025-06-30
    """
    db = ctx.obj["db"]
    service = SummaryService(db)

    reference = None
    if as_of:
        try:
            reference = parse_date(as_of)
        except ValueError as e:
            click.echo(f"Error: Invalid as-of date: {e}", err=True)
            ctx.exit(1)

    overview = service.installment_overview(reference)
    if not overview:
        click.echo("No installment purchases found.")
        return

    for txn, progress in overview:
        click.echo(f"{series_key(txn.description)} [{txn.category}]")
        click.echo(f"  {progress.paid}/{progress.total} installments paid")
        click.echo(
            f"  Total value: {format_money(progress.total_value)} in "
            f"{progress.total}x of {format_money(progress.installment_value)}"
        )


def register_commands(cli):
    """Register installments command with main CLI."""
    cli.add_command(installments)
