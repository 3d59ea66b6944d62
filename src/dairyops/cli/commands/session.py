"""Login session commands."""

import click


@click.command("login")
@click.argument("username")
@click.pass_context
def login(ctx, username: str):
    """Log in to the dashboard as USERNAME.

    Logging in again switches user and keeps the current records.

    Examples:
        dairyops login Ravi
    """
    dashboard = ctx.obj["dashboard"]
    try:
        dashboard.login(username)
        click.echo(f"Logged in as {dashboard.username}")
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)


@click.command("logout")
@click.pass_context
def logout(ctx):
    """Log out and discard every record of the session."""
    dashboard = ctx.obj["dashboard"]
    if not dashboard.is_authenticated:
        click.echo("Not logged in.")
        return

    username = dashboard.username
    dashboard.logout()
    click.echo(f"Logged out {username}. All records were cleared.")


@click.command("whoami")
@click.pass_context
def whoami(ctx):
    """Show the logged-in user."""
    dashboard = ctx.obj["dashboard"]
    click.echo(dashboard.username if dashboard.is_authenticated else "Not logged in.")


def register_commands(cli):
    """Register session commands with main CLI."""
    cli.add_command(login)
    cli.add_command(logout)
    cli.add_command(whoami)
