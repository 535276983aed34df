"""Monthly income/expense chart command."""

import json

import click

from fintrack.cli.formatting import format_currency
from fintrack.domain.summary import SummaryService
from fintrack.domain.timeseries import series_totals

BAR_WIDTH = 30


def _bar(value, scale, char: str) -> str:
    if not scale or not value:
        return ""
    return char * max(1, round(float(value / scale) * BAR_WIDTH))


@click.command("chart")
@click.option("--year", type=int, help="Year to chart (defaults to the current year, or the most recent year with data)")
@click.option("--json", "as_json", is_flag=True, help="Print the monthly series as JSON")
@click.pass_context
def chart(ctx, year: int | None, as_json: bool):
    """Show monthly income and expenses for a year."""
    db = ctx.obj["db"]
    service = SummaryService(db)
    report = service.get_monthly_report(year=year)

    if as_json:
        click.echo(json.dumps(report.to_dict()))
        return

    if report.years:
        click.echo(f"Available years: {', '.join(str(y) for y in report.years)}")

    click.echo(f"\nMonthly Income & Expenses - {report.year}")
    click.echo("=" * 72)

    scale = max(
        [month.income for month in report.months]
        + [month.expenses for month in report.months]
    )
    if not scale:
        click.echo("No data available for the selected year")
        return

    for month in report.months:
        click.echo(
            f"{month.label:<4} {format_currency(month.income, 0):>10} "
            f"{_bar(month.income, scale, '+'):<{BAR_WIDTH}}"
        )
        click.echo(
            f"{'':<4} {format_currency(-month.expenses, 0):>10} "
            f"{_bar(month.expenses, scale, '-'):<{BAR_WIDTH}}"
        )

    income, expenses = series_totals(report.months)
    click.echo("-" * 72)
    click.echo(
        f"Total income: {format_currency(income)} | "
        f"Total expenses: {format_currency(expenses)}"
    )


def register_commands(cli):
    """Register chart command with main CLI."""
    cli.add_command(chart)
