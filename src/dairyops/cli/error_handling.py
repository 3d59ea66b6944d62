"""CLI error handling helpers."""

from typing import Mapping

import click

from dairyops.domain.errors import DomainError
from dairyops.domain.schema import EntitySchema


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def handle_validation_errors(
    ctx: click.Context, schema: EntitySchema, errors: Mapping[str, str]
) -> None:
    """Render per-field validation messages and exit with failure."""
    click.echo(f"Error: {schema.title} was not saved.", err=True)
    for name, message in errors.items():
        field = schema.get_field(name)
        option = f"--{field.option_name}" if field is not None else name
        click.echo(f"  {option}: {message}", err=True)
    ctx.exit(1)
