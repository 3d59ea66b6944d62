"""Record management commands, one command group per entity."""

import click

from dairyops.cli.error_handling import handle_domain_error, handle_validation_errors
from dairyops.cli.formatting import render_chart, render_statistics, render_table
from dairyops.domain.dashboard import SCHEMAS
from dairyops.domain.errors import DomainError, record_not_found
from dairyops.domain.records import RecordManager
from dairyops.domain.schema import EntitySchema, Field


def _get_manager(ctx: click.Context, schema: EntitySchema) -> RecordManager:
    try:
        return ctx.obj["dashboard"].manager(schema.name)
    except DomainError as e:
        handle_domain_error(ctx, e)


def _check_row(ctx: click.Context, manager: RecordManager, row: int) -> None:
    count = manager.store.count()
    if row > count:
        click.echo(
            f"Error: No {manager.schema.title.lower()} at row {row} ({count} record(s))", err=True
        )
        ctx.exit(1)


def _field_help(field: Field) -> str:
    help_text = f"{field.label} ({field.kind.value})"
    if field.choices:
        help_text += f"; one of: {', '.join(field.choices)}"
    return help_text


def field_options(schema: EntitySchema):
    """Decorator adding one --option per input field of the schema."""

    def decorator(f):
        for field in reversed(schema.input_fields):
            f = click.option(
                f"--{field.option_name}", field.name, default=None, help=_field_help(field)
            )(f)
        return f

    return decorator


def _fill_and_submit(ctx: click.Context, manager: RecordManager, values: dict):
    """Copy given option values into the draft and submit it."""
    try:
        for name, value in values.items():
            if value is not None:
                manager.set_field(name, value)
    except DomainError as e:
        manager.cancel()
        handle_domain_error(ctx, e)

    record = manager.submit()
    if record is None:
        errors = manager.errors
        manager.cancel()
        handle_validation_errors(ctx, manager.schema, errors)
    return record


def entity_group(schema: EntitySchema) -> click.Group:
    """Build the command group managing one entity's records."""

    @click.group(name=schema.command_name, help=f"Manage {schema.title.lower()} records.")
    def group():
        pass

    @group.command("add")
    @field_options(schema)
    @click.pass_context
    def add_record(ctx, **values):
        """Add a record from the given field options.

        Values are validated together; every invalid field is reported.
        """
        manager = _get_manager(ctx, schema)
        manager.cancel()
        record = _fill_and_submit(ctx, manager, values)
        click.echo(f"Added {schema.title.lower()} (ID: {record.id})")

    @group.command("edit")
    @click.argument("row", type=click.IntRange(min=1))
    @field_options(schema)
    @click.pass_context
    def edit_record(ctx, row: int, **values):
        """Edit the record at list position ROW.

        Only the given options change; other fields keep their values.
        """
        manager = _get_manager(ctx, schema)
        _check_row(ctx, manager, row)
        try:
            manager.start_edit(row - 1)
        except DomainError as e:
            handle_domain_error(ctx, e)

        record = _fill_and_submit(ctx, manager, values)
        click.echo(f"Updated {schema.title.lower()} (ID: {record.id})")

    @group.command("list")
    @click.option("--search", default="", help="Case-insensitive text to search for")
    @click.pass_context
    def list_records(ctx, search: str):
        """List records, optionally filtered by a search text."""
        manager = _get_manager(ctx, schema)
        positions = {record.id: row for row, record in enumerate(manager.records(), start=1)}
        records = manager.search(search)

        if not records:
            click.echo(f"No {schema.title.lower()} records found.")
            return

        columns = schema.columns
        headers = ["Row", "ID", *(f.label for f in columns)]
        rows = [
            [str(positions[r.id]), str(r.id), *(f.format(r.get(f.name)) for f in columns)]
            for r in records
        ]
        click.echo(f"\nFound {len(records)} {schema.title.lower()} record(s):")
        for line in render_table(headers, rows):
            click.echo(line)

    @group.command("view")
    @click.argument("row", type=click.IntRange(min=1))
    @click.pass_context
    def view_record(ctx, row: int):
        """Show every field of the record at list position ROW."""
        manager = _get_manager(ctx, schema)
        _check_row(ctx, manager, row)
        try:
            pairs = manager.view(row - 1)
        except DomainError as e:
            handle_domain_error(ctx, e)

        width = max(len(label) for label, _ in pairs)
        for label, value in pairs:
            click.echo(f"{label:<{width}} : {value}")

    @group.command("delete")
    @click.argument("record_id", type=int)
    @click.option("--yes", is_flag=True, help="Skip the confirmation prompt")
    @click.pass_context
    def delete_record(ctx, record_id: int, yes: bool):
        """Delete the record with ID RECORD_ID."""
        manager = _get_manager(ctx, schema)
        if manager.get(record_id) is None:
            click.echo(f"Error: {record_not_found(schema.title, record_id)}", err=True)
            ctx.exit(1)

        if not yes and not click.confirm(
            f"Are you sure you want to delete {schema.title.lower()} {record_id}?"
        ):
            click.echo("Deletion cancelled.")
            return

        try:
            manager.delete(record_id)
            click.echo(f"Deleted {schema.title.lower()} {record_id}")
        except DomainError as e:
            handle_domain_error(ctx, e)

    @group.command("stats")
    @click.pass_context
    def show_statistics(ctx):
        """Show summary statistics."""
        manager = _get_manager(ctx, schema)
        click.echo(f"{schema.title} statistics")
        for line in render_statistics(manager.statistics()):
            click.echo(f"  {line}")

    @group.command("chart")
    @click.pass_context
    def show_chart(ctx):
        """Draw the chart as text bars."""
        manager = _get_manager(ctx, schema)
        series = manager.chart()
        if series is None:
            click.echo(f"{schema.title} has no chart.")
            return
        for line in render_chart(series):
            click.echo(line)

    @group.command("fields")
    def show_fields():
        """List the fields and their options."""
        rows = [
            [
                f.name if f.computed else f"--{f.option_name}",
                f.label,
                f"{f.kind.value} (computed)" if f.computed else f.kind.value,
                ", ".join(f.choices),
            ]
            for f in schema.fields
        ]
        for line in render_table(["Option", "Label", "Type", "Choices"], rows):
            click.echo(line)

    return group


ENTITY_GROUPS = [entity_group(schema) for schema in SCHEMAS]


def register_commands(cli):
    """Register entity command groups with main CLI."""
    for group in ENTITY_GROUPS:
        cli.add_command(group)
