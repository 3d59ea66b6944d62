"""Interactive shell and command scripts.

Records only live for the length of one dashboard session, so ``shell`` and
``run`` execute many commands against the same session. Each line is parsed
with shell quoting rules and dispatched to the same commands the top-level
CLI offers.
"""

import shlex

import click

from dairyops.cli.commands import overview, records, session

EXIT_COMMANDS = ("exit", "quit")


@click.group(name="dairyops")
def session_commands():
    """Commands available inside a dashboard session.

    Type 'exit' or 'quit' to leave the shell.
    """
    pass


session.register_commands(session_commands)
overview.register_commands(session_commands)
records.register_commands(session_commands)


def execute_line(line: str, obj: dict) -> int:
    """Run one command line against the session in ``obj``.

    Returns:
        The command's exit code (0 on success)
    """
    try:
        args = shlex.split(line, comments=True)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        return 1
    if not args:
        return 0
    if args[0] == "help":
        args = [*args[1:], "--help"]

    try:
        result = session_commands.main(
            args, prog_name="dairyops", standalone_mode=False, obj=obj
        )
    except click.ClickException as e:
        e.show()
        return e.exit_code
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1
    return result if isinstance(result, int) else 0


def _prompt(obj: dict) -> str:
    dashboard = obj["dashboard"]
    if dashboard.is_authenticated:
        return f"dairyops ({dashboard.username})> "
    return "dairyops> "


@click.command("shell")
@click.pass_context
def shell(ctx):
    """Start an interactive dashboard session.

    Examples:
        dairyops shell
        dairyops --store sqlalchemy --user Ravi shell
    """
    click.echo("DairyOps dashboard. Type 'help' for commands, 'exit' to quit.")
    while True:
        try:
            line = click.prompt(
                _prompt(ctx.obj), default="", show_default=False, prompt_suffix=""
            )
        except click.Abort:
            # End of input
            click.echo()
            break

        if line.strip() in EXIT_COMMANDS:
            break
        execute_line(line, ctx.obj)


@click.command("run")
@click.argument("script", type=click.File("r"))
@click.option("--echo", "echo_commands", is_flag=True, help="Print each command before running it")
@click.option("--stop-on-error", is_flag=True, help="Stop at the first failing command")
@click.pass_context
def run_script(ctx, script, echo_commands: bool, stop_on_error: bool):
    """Run the commands in SCRIPT, one per line, in a single session.

    Blank lines and lines starting with '#' are skipped. Exits with status 1
    if any command failed.

    Examples:
        dairyops run daily-entries.txt
        dairyops run - --echo < daily-entries.txt
    """
    failures = 0
    for number, line in enumerate(script, start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if line in EXIT_COMMANDS:
            break
        if echo_commands:
            click.echo(f"> {line}")

        if execute_line(line, ctx.obj) != 0:
            failures += 1
            if stop_on_error:
                click.echo(f"Error: Stopped at line {number}", err=True)
                ctx.exit(1)

    if failures:
        click.echo(f"Error: {failures} command(s) failed", err=True)
        ctx.exit(1)


def register_commands(cli):
    """Register shell and run commands with main CLI."""
    cli.add_command(shell)
    cli.add_command(run_script)
