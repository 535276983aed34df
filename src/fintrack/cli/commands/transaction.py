"""Transaction management commands."""

import click

from fintrack.cli.date_filters import (
    period_flags_from,
    period_options,
    resolve_cli_date_range,
)
from fintrack.cli.error_handling import handle_domain_error
from fintrack.cli.formatting import flow_label, format_currency
from fintrack.domain.errors import DomainError
from fintrack.domain.summary import summarize
from fintrack.domain.transaction import TransactionService
from fintrack.utils.amount_parser import parse_amount
from fintrack.utils.date_parser import parse_date


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("list")
@click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'last month', 'this year')")
@click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today')")
@period_options
@click.pass_context
def list_transactions(
    ctx,
    start_date: str | None,
    end_date: str | None,
    this_month: bool,
    this_year: bool,
    last_month: bool,
    last_year: bool,
):
    """View transactions, most recent first."""
    db = ctx.obj["db"]
    service = TransactionService(db)

    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags=period_flags_from(this_month, this_year, last_month, last_year),
    )

    transactions = service.list_transactions(start_date=start, end_date=end)
    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo(f"\nFound {len(transactions)} transaction(s):")
    click.echo("-" * 80)
    click.echo(f"{'ID':<6} {'Date':<12} {'Amount':>14} {'Type':<8} {'Description':<36}")
    click.echo("-" * 80)

    for txn in transactions:
        click.echo(
            f"{txn.id:<6} {txn.date:%Y-%m-%d}   {format_currency(txn.amount):>14} "
            f"{flow_label(txn.amount):<8} {txn.description[:36]:<36}"
        )

    totals = summarize(transactions)
    click.echo("-" * 80)
    click.echo(
        f"{'TOTAL':<6} Income: {format_currency(totals.income)} | "
        f"Expenses: {format_currency(totals.expenses)} | "
        f"Balance: {format_currency(totals.balance)}"
    )


@transaction_group.command("show")
@click.argument("transaction_id", type=int)
@click.pass_context
def show_transaction(ctx, transaction_id: int) -> None:
    """Show a single transaction."""
    db = ctx.obj["db"]
    service = TransactionService(db)

    try:
        txn = service.require_transaction(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Transaction ID: {txn.id}")
    click.echo(f"  Date: {txn.date:%Y-%m-%d}")
    click.echo(f"  Amount: {format_currency(txn.amount)} ({flow_label(txn.amount)})")
    click.echo(f"  Description: {txn.description}")
    click.echo(f"  Created: {txn.created_at}")
    click.echo(f"  Updated: {txn.updated_at}")


@transaction_group.command("update")
@click.argument("transaction_id", type=int)
@click.option("--amount", help="Transaction amount (e.g., 123.45 or -123.45)")
@click.option("--date", help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday')")
@click.option("--description", help="Transaction description")
@click.pass_context
def update_transaction(
    ctx,
    transaction_id: int,
    amount: str | None,
    date: str | None,
    description: str | None,
) -> None:
    """Update a transaction.

    Updates only the fields that are provided.

    Examples:
        fintrack transaction update 1 --amount -75.00
        fintrack transaction update 1 --description "Weekly groceries"
    """
    db = ctx.obj["db"]
    transaction_service = TransactionService(db)

    if amount is None and date is None and description is None:
        click.echo("Error: Provide at least one of --amount, --date or --description", err=True)
        ctx.exit(1)

    txn_date = None
    if date is not None:
        try:
            txn_date = parse_date(date)
        except ValueError as e:
            click.echo(f"Error: Invalid date format: {e}", err=True)
            ctx.exit(1)

    txn_amount = None
    if amount is not None:
        try:
            txn_amount = parse_amount(amount)
        except ValueError as e:
            click.echo(f"Error: Invalid amount format: {e}", err=True)
            ctx.exit(1)

    try:
        transaction_service.update_transaction(
            transaction_id=transaction_id,
            amount=txn_amount,
            date=txn_date,
            description=description,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated transaction {transaction_id}")


@transaction_group.command("delete")
@click.argument("transaction_id", type=int)
@click.option("--yes", "-y", is_flag=True, help="Delete without asking for confirmation")
@click.pass_context
def delete_transaction(ctx, transaction_id: int, yes: bool) -> None:
    """Delete a transaction.

    Examples:
        fintrack transaction delete 1
    """
    db = ctx.obj["db"]
    transaction_service = TransactionService(db)

    txn = transaction_service.get_transaction(transaction_id)
    if txn is None:
        click.echo(f"Error: Transaction {transaction_id} not found", err=True)
        ctx.exit(1)

    if not yes and not click.confirm(
        f"Delete transaction {transaction_id} ({format_currency(txn.amount)}, {txn.description})?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        transaction_service.delete_transaction(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deleted transaction {transaction_id}")


def register_commands(cli: click.Group) -> None:
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
