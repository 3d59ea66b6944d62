"""Main CLI entry point."""

import click

from dairyops.database.factories import STORE_BACKENDS
from dairyops.domain.dashboard import Dashboard
from dairyops.logging_config import LOG_LEVELS, setup_logging

# Import and register all commands at module level
from dairyops.cli import shell
from dairyops.cli.commands import overview, records, session


@click.group()
@click.option(
    "--store",
    type=click.Choice(STORE_BACKENDS, case_sensitive=False),
    help="Record store backend (overrides DAIRYOPS_STORE environment variable)",
    envvar="DAIRYOPS_STORE",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging level (overrides DAIRYOPS_LOG_LEVEL environment variable)",
    envvar="DAIRYOPS_LOG_LEVEL",
)
@click.option(
    "--user",
    default="admin",
    show_default=True,
    help="User logged in at start; pass an empty value to start logged out "
    "(overrides DAIRYOPS_USER environment variable)",
    envvar="DAIRYOPS_USER",
)
@click.pass_context
def cli(ctx, store: str | None, log_level: str, user: str):
    """DairyOps - Dairy operations dashboard.

    Manage farmers, milk collection, inventory, investments, payments and
    settings. Records last for one session: use 'shell' or 'run' to work
    with several commands against the same records.
    """
    ctx.ensure_object(dict)

    # Open the dashboard only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        setup_logging(log_level)
        dashboard = Dashboard(backend=store)
        if user and user.strip():
            dashboard.login(user)
        ctx.call_on_close(dashboard.close)
        ctx.obj["dashboard"] = dashboard


# Register all commands
session.register_commands(cli)
overview.register_commands(cli)
records.register_commands(cli)
shell.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
