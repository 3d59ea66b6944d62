"""Dashboard overview command."""

import click

from dairyops.cli.error_handling import handle_domain_error
from dairyops.cli.formatting import render_statistics
from dairyops.domain.errors import DomainError


@click.command("overview")
@click.pass_context
def overview(ctx):
    """Show the statistics of every record type."""
    dashboard = ctx.obj["dashboard"]
    try:
        summary = dashboard.overview()
    except DomainError as e:
        handle_domain_error(ctx, e)

    for title, stats in summary.items():
        click.echo(f"\n{title}")
        click.echo("-" * len(title))
        for line in render_statistics(stats):
            click.echo(f"  {line}")


def register_commands(cli):
    """Register overview command with main CLI."""
    cli.add_command(overview)
