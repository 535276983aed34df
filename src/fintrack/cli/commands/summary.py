"""Balance summary command."""

import json

import click

from fintrack.cli.date_filters import (
    period_flags_from,
    period_options,
    resolve_cli_date_range,
)
from fintrack.cli.formatting import format_currency
from fintrack.domain.summary import SummaryService


@click.command("summary")
@click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'last month', 'this year')")
@click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today')")
@period_options
@click.option("--json", "as_json", is_flag=True, help="Print the summary as JSON")
@click.pass_context
def summary(
    ctx,
    start_date: str | None,
    end_date: str | None,
    this_month: bool,
    this_year: bool,
    last_month: bool,
    last_year: bool,
    as_json: bool,
):
    """Show current balance, total income and total expenses."""
    db = ctx.obj["db"]
    service = SummaryService(db)

    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags=period_flags_from(this_month, this_year, last_month, last_year),
    )

    result = service.get_balance_summary(start_date=start, end_date=end)

    if as_json:
        click.echo(json.dumps(result.to_dict()))
        return

    if start or end:
        click.echo(f"\nBalance Summary ({start or 'beginning'} to {end or 'latest'})")
    else:
        click.echo("\nBalance Summary")
    click.echo("=" * 40)
    click.echo(f"{'Current Balance':<20} {format_currency(result.balance):>19}")
    click.echo(f"{'Total Income':<20} {format_currency(result.income):>19}")
    click.echo(f"{'Total Expenses':<20} {format_currency(result.expenses):>19}")
    if result.excluded:
        click.echo(f"\n{result.excluded} transaction(s) with invalid amounts were excluded.")


def register_commands(cli):
    """Register summary command with main CLI."""
    cli.add_command(summary)
