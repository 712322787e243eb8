"""Add transaction command."""

import click
from datetime import date
from pennywise.cli.display import format_money
from pennywise.cli.error_handling import handle_domain_error
from pennywise.domain.cache import TransactionCache
from pennywise.domain.entities import Frequency, InstallmentPurchase, TransactionKind
from pennywise.domain.errors import DomainError
from pennywise.domain.installments import expand_installments
from pennywise.domain.transaction import TransactionService
from pennywise.utils.date_parser import parse_date
from pennywise.utils.amount_parser import parse_amount


@click.command("add")
@click.option(
    "--kind",
    type=click.Choice([k.value for k in TransactionKind]),
    default=TransactionKind.EXPENSE.value,
    show_default=True,
    help="Income or expense",
)
@click.option(
    "--frequency",
    type=click.Choice([f.value for f in Frequency]),
    default=Frequency.VARIABLE.value,
    show_default=True,
    help="Fixed, variable, or installment",
)
@click.option("--description", required=True, help="Transaction description")
@click.option(
    "--amount",
    required=True,
    help="Amount (e.g., 123.45 or 1.234,56); the purchase total for installments",
)
@click.option("--category", default="Other", show_default=True, help="Category name")
@click.option(
    "--date",
    "date_str",
    default="today",
    show_default=True,
    help="Transaction date, or first installment date (YYYY-MM-DD or 'today')",
)
@click.option(
    "--installments",
    type=int,
    help="Number of monthly installments (required with --frequency installment)",
)
@click.pass_context
def add_transaction(
    ctx,
    kind: str,
    frequency: str,
    description: str,
    amount: str,
    category: str,
    date_str: str,
    installments: int | None,
):
    """Add a transaction, or split a purchase into monthly installments.

    Examples:
        pennywise add --kind income --frequency fixed --description "Salary" --amount 5000 --category Salary
        pennywise add --description "Laptop" --amount 4800 --category Education --frequency installment --installments 12
    """
    db = ctx.obj["db"]
    cache = TransactionCache(TransactionService(db))

    try:
        txn_date = parse_date(date_str)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        txn_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    if frequency == Frequency.INSTALLMENT.value:
        if installments is None:
            click.echo("Error: --installments is required for installment purchases", err=True)
            ctx.exit(1)
        _add_installments(ctx, cache, kind, description, txn_amount, category, txn_date, installments)
        return

    if installments is not None:
        click.echo("Error: --installments only applies to --frequency installment", err=True)
        ctx.exit(1)

    try:
        txn = cache.add(
            kind=kind,
            frequency=frequency,
            description=description,
            amount=txn_amount,
            category=category,
            date=txn_date,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Created transaction {txn.id}")
    click.echo(f"  Kind: {txn.kind.value}")
    click.echo(f"  Date: {txn.date}")
    click.echo(f"  Amount: {format_money(txn.amount)}")
    click.echo(f"  Description: {txn.description}")
    click.echo(f"  Category: {txn.category}")


def _add_installments(
    ctx,
    cache: TransactionCache,
    kind: str,
    description: str,
    total_amount,
    category: str,
    start_date: date,
    installment_count: int,
) -> None:
    purchase = InstallmentPurchase(
        description=description,
        total_amount=total_amount,
        category=category,
        kind=TransactionKind(kind),
        start_date=start_date,
    )
    try:
        series = expand_installments(purchase, installment_count)
        cache.add_many(series)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    first, last = series[0], series[-1]
    click.echo(f"Created {len(series)} installments for '{description}'")
    click.echo(
        f"  {format_money(total_amount)} in {len(series)}x of "
        f"{format_money(first.installment_amount)}"
    )
    click.echo(f"  From {first.date} to {last.date}")

    pending = cache.figures(as_of=date.today()).pending_installments
    click.echo(
        f"  Pending installments overall: {pending.count} totalling {format_money(pending.total)}"
    )


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
