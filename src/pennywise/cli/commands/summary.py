"""Dashboard summary command."""

import click
from pennywise.cli.display import format_money
from pennywise.domain.entities import DashboardFigures
from pennywise.domain.summary import SummaryService
from pennywise.utils.date_parser import parse_date


def _display_figures(figures: DashboardFigures) -> None:
    """Print dashboard figures."""
    click.echo(f"Summary as of {figures.as_of}")
    click.echo("=" * 60)
    click.echo(f"{'Total balance':<40} {format_money(figures.total_balance):>19}")
    click.echo(f"{'Income this month':<40} {format_money(figures.monthly_income):>19}")
    click.echo(f"{'Expenses this month':<40} {format_money(figures.monthly_expenses):>19}")
    click.echo(f"{'  of which installments':<40} {format_money(figures.bills_total):>19}")
    pending = figures.pending_installments
    click.echo(
        f"{f'Pending installments ({pending.count})':<40} {format_money(pending.total):>19}"
    )

    click.echo()
    click.echo("Expenses by category (this month)")
    click.echo("-" * 60)
    for category, total in figures.category_totals.items():
        click.echo(f"{category:<40} {format_money(total):>19}")

    click.echo()
    click.echo("Monthly expenses")
    click.echo("-" * 60)
    for point in figures.expense_trend:
        click.echo(f"{point.label:<40} {format_money(point.total):>19}")

    if figures.installment_bills:
        click.echo()
        click.echo("Installments due this month")
        click.echo("-" * 60)
        for bill in figures.installment_bills:
            label = f"{bill.description} [{bill.installment_index}/{bill.installment_count}]"
            click.echo(f"{label[:40]:<40} {format_money(bill.value):>19}")


@click.command("summary")
@click.option("--as-of", help="Reference date (YYYY-MM-DD or relative like 'today'; default today)")
@click.pass_context
def summary(ctx, as_of: str | None):
    """Show balance, monthly totals, category spending and installments."""
    db = ctx.obj["db"]
    service = SummaryService(db)

    reference = None
    if as_of:
        try:
            reference = parse_date(as_of)
        except ValueError as e:
            click.echo(f"Error: Invalid as-of date: {e}", err=True)
            ctx.exit(1)

    _display_figures(service.dashboard(reference))


def register_commands(cli):
    """Register summary command with main CLI."""
    cli.add_command(summary)
