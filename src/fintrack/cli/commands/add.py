"""Add transaction command."""

import click

from fintrack.cli.error_handling import handle_domain_error
from fintrack.cli.formatting import flow_label, format_currency
from fintrack.domain.errors import DomainError
from fintrack.domain.transaction import TransactionService
from fintrack.utils.amount_parser import parse_amount
from fintrack.utils.date_parser import parse_date


@click.command("add")
@click.option(
    "--amount",
    required=True,
    help="Transaction amount; positive for income, negative for expenses (e.g., 1200 or -45.50)",
)
@click.option(
    "--date",
    default="today",
    show_default=True,
    help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option("--description", required=True, help="Transaction description")
@click.pass_context
def add_transaction(ctx, amount: str, date: str, description: str):
    """Add a transaction.

    Examples:
        fintrack add --amount -50.00 --date 2024-01-15 --description "Groceries"
        fintrack add --amount 2500 --description "Salary"
    """
    db = ctx.obj["db"]
    transaction_service = TransactionService(db)

    try:
        txn_date = parse_date(date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        txn_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    try:
        transaction_id = transaction_service.create_transaction(
            amount=txn_amount,
            date=txn_date,
            description=description,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created transaction {transaction_id}")
    click.echo(f"  Date: {txn_date}")
    click.echo(f"  Amount: {format_currency(txn_amount)} ({flow_label(txn_amount)})")
    click.echo(f"  Description: {description.strip()}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
