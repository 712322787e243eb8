"""Shared text formatting for CLI output."""

from decimal import Decimal

import click

from pennywise.domain.aggregation import contribution_value
from pennywise.domain.entities import Frequency, Transaction

FREQUENCY_LABELS = {
    Frequency.FIXED: "Fixed",
    Frequency.VARIABLE: "Variable",
    Frequency.INSTALLMENT: "Installment",
}


def format_money(value: Decimal | float) -> str:
    return f"${value:,.2f}"


def signed_money(txn: Transaction, value: Decimal) -> str:
    sign = "+" if txn.is_income else "-"
    return f"{sign}{format_money(value)}"


def echo_transaction_table(transactions: list[Transaction]) -> None:
    """Print transactions as a compact table."""
    click.echo("-" * 110)
    click.echo(
        f"{'ID':<36} {'Date':<12} {'Amount':>14} {'Frequency':<12} {'Category':<12} {'Description':<20}"
    )
    click.echo("-" * 110)
    for txn in transactions:
        click.echo(
            f"{txn.id:<36} {str(txn.date):<12} {signed_money(txn, contribution_value(txn)):>14} "
            f"{FREQUENCY_LABELS[txn.frequency]:<12} {txn.category[:12]:<12} {txn.description[:40]}"
        )


def echo_transaction_detail(txn: Transaction) -> None:
    """Print every field of a transaction."""
    click.echo(f"Transaction ID: {txn.id}")
    click.echo(f"  Kind: {txn.kind.value}")
    click.echo(f"  Frequency: {txn.frequency.value}")
    click.echo(f"  Date: {txn.date}")
    click.echo(f"  Amount: {format_money(txn.amount)}")
    click.echo(f"  Category: {txn.category}")
    click.echo(f"  Description: {txn.description}")
    if txn.is_installment:
        click.echo(
            f"  Installment: {txn.installment_index} of {txn.installment_count} "
            f"({format_money(txn.installment_amount)} each)"
        )
