"""Main CLI entry point."""

import click

from fintrack.database.factories import create_sqlite_database
from fintrack.logging_setup import configure_logging

# Import and register all commands at module level
from fintrack.cli.commands import add, chart, summary, transaction


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides FINTRACK_DB_PATH environment variable)",
    envvar="FINTRACK_DB_PATH",
)
@click.option(
    "--log-level",
    help="Logging level, e.g. DEBUG or INFO (overrides FINTRACK_LOG_LEVEL)",
    envvar="FINTRACK_LOG_LEVEL",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str | None):
    """Fintrack - Personal finance tracker.

    Record income (positive amounts) and expenses (negative amounts), then
    review your balance and a month-by-month chart for any year.
    """
    ctx.ensure_object(dict)
    configure_logging(log_level)

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
summary.register_commands(cli)
chart.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
