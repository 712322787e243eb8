"""Transaction management commands."""

import click
from pennywise.cli.date_filters import (
    period_flags_from,
    period_options,
    resolve_cli_date_range,
)
from pennywise.cli.display import (
    echo_transaction_detail,
    echo_transaction_table,
    format_money,
)
from pennywise.cli.error_handling import handle_domain_error
from pennywise.domain.aggregation import contribution_value
from pennywise.domain.entities import Frequency, TransactionKind
from pennywise.domain.errors import DomainError
from pennywise.domain.transaction import TransactionService
from pennywise.utils.amount_parser import parse_amount
from pennywise.utils.date_parser import parse_date
from pennywise.utils.transaction_resolver import resolve_transaction_id


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("list")
@period_options
@click.option("--kind", type=click.Choice([k.value for k in TransactionKind]), help="Only income or only expenses")
@click.option("--frequency", type=click.Choice([f.value for f in Frequency]), help="Only one frequency")
@click.option("--category", help="Exact category name")
@click.option("--verbose", "-v", is_flag=True, help="Show every field of each transaction")
@click.pass_context
def list_transactions(
    ctx,
    start_date: str | None,
    end_date: str | None,
    this_month: bool,
    last_month: bool,
    this_year: bool,
    last_6_months: bool,
    kind: str | None,
    frequency: str | None,
    category: str | None,
    verbose: bool,
):
    """List stored transactions, every installment individually."""
    db = ctx.obj["db"]
    service = TransactionService(db)

    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags=period_flags_from(this_month, last_month, this_year, last_6_months),
    )

    transactions = service.list_transactions(
        start_date=start, end_date=end, kind=kind, frequency=frequency, category=category
    )

    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo(f"\nFound {len(transactions)} transaction(s):")
    if verbose:
        for txn in transactions:
            click.echo("-" * 110)
            echo_transaction_detail(txn)
        click.echo("-" * 110)
    else:
        echo_transaction_table(transactions)
        click.echo("-" * 110)

    total_income = sum(contribution_value(t) for t in transactions if t.is_income)
    total_expenses = sum(contribution_value(t) for t in transactions if not t.is_income)
    click.echo(
        f"TOTAL  Income: {format_money(total_income)} | "
        f"Expenses: {format_money(total_expenses)} | Count: {len(transactions)}"
    )


@transaction_group.command("show")
@click.argument("transaction_ref")
@click.pass_context
def show_transaction(ctx, transaction_ref: str) -> None:
    """Show one transaction by ID or unique ID prefix."""
    db = ctx.obj["db"]
    service = TransactionService(db)

    try:
        transaction_id = resolve_transaction_id(service, transaction_ref)
        txn = service.require_transaction(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    echo_transaction_detail(txn)


@transaction_group.command("update")
@click.argument("transaction_ref")
@click.option("--kind", type=click.Choice([k.value for k in TransactionKind]), help="Income or expense")
@click.option("--frequency", type=click.Choice([f.value for f in Frequency]), help="Fixed, variable, or installment")
@click.option("--description", help="Transaction description")
@click.option("--amount", help="Transaction amount")
@click.option("--category", help="Category name")
@click.option("--date", "date_str", help="Transaction date (YYYY-MM-DD or relative like 'today')")
@click.option("--installment-amount", help="Per-installment value")
@click.option("--installment-count", type=int, help="Number of installments in the series")
@click.option("--installment-index", type=int, help="Position of this installment")
@click.pass_context
def update_transaction(
    ctx,
    transaction_ref: str,
    kind: str | None,
    frequency: str | None,
    description: str | None,
    amount: str | None,
    category: str | None,
    date_str: str | None,
    installment_amount: str | None,
    installment_count: int | None,
    installment_index: int | None,
) -> None:
    """Update a transaction.

    Updates only the fields that are provided. Sibling installments of the
    same purchase are left alone.

    Examples:
        pennywise transaction update 3f2a --amount 75.00
        pennywise transaction update 3f2a --category Food --date 2024-02-01
    """
    db = ctx.obj["db"]
    service = TransactionService(db)

    changes = {}
    if kind is not None:
        changes["kind"] = kind
    if frequency is not None:
        changes["frequency"] = frequency
    if description is not None:
        changes["description"] = description
    if category is not None:
        changes["category"] = category
    if installment_count is not None:
        changes["installment_count"] = installment_count
    if installment_index is not None:
        changes["installment_index"] = installment_index

    if date_str is not None:
        try:
            changes["date"] = parse_date(date_str)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    for field_name, raw in (("amount", amount), ("installment_amount", installment_amount)):
        if raw is None:
            continue
        try:
            changes[field_name] = parse_amount(raw)
        except ValueError as e:
            click.echo(f"Error: Invalid amount format: {e}", err=True)
            ctx.exit(1)

    if not changes:
        click.echo("Error: Nothing to update; pass at least one field option.", err=True)
        ctx.exit(1)

    try:
        transaction_id = resolve_transaction_id(service, transaction_ref)
        service.update_transaction(transaction_id, **changes)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Updated transaction {transaction_id}")


@transaction_group.command("delete")
@click.argument("transaction_ref")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_transaction(ctx, transaction_ref: str, yes: bool) -> None:
    """Delete a single transaction.

    Deleting one installment keeps the rest of its series.

    Examples:
        pennywise transaction delete 3f2a
    """
    db = ctx.obj["db"]
    service = TransactionService(db)

    try:
        transaction_id = resolve_transaction_id(service, transaction_ref)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    if not yes and not click.confirm(
        f"Are you sure you want to delete transaction {transaction_id}?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_transaction(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Deleted transaction {transaction_id}")


def register_commands(cli: click.Group) -> None:
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
