"""Suggested category listing."""

import click
from pennywise.domain.entities import EXPENSE_CATEGORIES, INCOME_CATEGORIES


@click.command("categories")
def categories():
    """Show the suggested expense and income categories.

    Any category name is accepted; these are the ones the summary breaks
    expenses down by.
    """
    click.echo("Expense categories:")
    for name in EXPENSE_CATEGORIES:
        click.echo(f"  {name}")
    click.echo("Income categories:")
    for name in INCOME_CATEGORIES:
        click.echo(f"  {name}")


def register_commands(cli):
    """Register categories command with main CLI."""
    cli.add_command(categories)
