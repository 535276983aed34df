"""CLI error handling helpers."""

import click

from fintrack.domain.errors import DomainError, ValidationError


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure.

    Validation failures list each offending field on its own line.
    """
    if isinstance(error, ValidationError) and error.result.errors:
        click.echo("Error: Invalid transaction", err=True)
        for field_error in error.result.errors:
            click.echo(f"  {field_error.field}: {field_error.message}", err=True)
    else:
        click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
