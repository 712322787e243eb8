"""Main CLI entry point."""

import click
from pennywise.database.factories import create_sqlite_database

# Import and register all commands at module level
from pennywise.cli.commands import (
    add,
    categories,
    history,
    installments,
    serve,
    summary,
    transaction,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides PENNYWISE_DB_PATH environment variable)",
    envvar="PENNYWISE_DB_PATH",
)
@click.pass_context
def cli(ctx, db_path: str | None):
    """Pennywise - personal finance tracker.

    Record fixed, variable and installment income and expenses, and see
    where the month stands.
    """
    ctx.ensure_object(dict)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
add.register_commands(cli)
transaction.register_commands(cli)
history.register_commands(cli)
installments.register_commands(cli)
summary.register_commands(cli)
categories.register_commands(cli)
serve.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
