"""Declarative entity schemas.

An ``EntitySchema`` describes one record type: its fields with their rules
and input normalizers, cross-field rules, computed fields, and the
statistics and chart functions computed over its records. A single
``RecordManager`` drives every entity from its schema.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Callable, Mapping, Optional, Sequence

from dairyops.domain.entities import ChartSeries, Record
from dairyops.domain.rules import Rule, RecordRule
from dairyops.utils.date_parser import parse_date
from dairyops.utils.number_parser import parse_integer, parse_number

Normalizer = Callable[[str], str]
ComputeFields = Callable[[dict[str, Any], int, Optional[Record]], dict[str, Any]]


class FieldKind(str, Enum):
    """Type of value a field holds once committed."""

    TEXT = "text"
    INTEGER = "integer"
    DECIMAL = "decimal"
    DATE = "date"


@dataclass(frozen=True)
class Field:
    """One field of an entity schema."""

    name: str
    label: str
    kind: FieldKind = FieldKind.TEXT
    rules: tuple[Rule, ...] = ()
    normalizers: tuple[Normalizer, ...] = ()
    choices: tuple[str, ...] = ()
    secret: bool = False
    computed: bool = False
    default: str = ""

    @property
    def option_name(self) -> str:
        """Command-line option spelling of the field name."""
        return self.name.replace("_", "-")

    def normalize(self, value: str) -> str:
        for normalizer in self.normalizers:
            value = normalizer(value)
        return value

    def clean(self, value: Any) -> str:
        """Return the draft string used for validation and parsing."""
        text = "" if value is None else str(value)
        return text if self.secret else text.strip()

    def validate(self, value: str) -> Optional[str]:
        """Return the first failing rule's message, or None."""
        for rule in self.rules:
            message = rule(value)
            if message is not None:
                return message
        return None

    def parse(self, value: str) -> Any:
        """Convert a validated draft string to the committed value.

        Blank text stays an empty string; other blank kinds become None.
        """
        value = self.clean(value)
        if self.kind == FieldKind.TEXT:
            return value
        if not value:
            return None
        if self.kind == FieldKind.INTEGER:
            return parse_integer(value)
        if self.kind == FieldKind.DECIMAL:
            return parse_number(value)
        return parse_date(value)

    def format(self, value: Any) -> str:
        """Render a committed value back to its draft string."""
        if value is None:
            return ""
        if isinstance(value, date):
            return value.isoformat()
        return str(value)


@dataclass(frozen=True)
class EntitySchema:
    """Configuration of one record type."""

    name: str
    title: str
    command_name: str
    fields: tuple[Field, ...]
    record_rules: tuple[RecordRule, ...] = ()
    compute: Optional[ComputeFields] = None
    statistics: Optional[Callable[[Sequence[Record]], Any]] = None
    chart: Optional[Callable[[Sequence[Record]], ChartSeries]] = None
    search_fields: tuple[str, ...] = ()
    list_fields: tuple[str, ...] = ()
    # Positions count from the most recently added record
    newest_first: bool = False
    _index: dict[str, Field] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "_index", {f.name: f for f in self.fields})

    @property
    def input_fields(self) -> tuple[Field, ...]:
        """Fields the user fills in (computed fields excluded)."""
        return tuple(f for f in self.fields if not f.computed)

    @property
    def columns(self) -> tuple[Field, ...]:
        """Fields shown as list columns."""
        if not self.list_fields:
            return tuple(f for f in self.fields if not f.secret)
        return tuple(self._index[name] for name in self.list_fields)

    def get_field(self, name: str) -> Optional[Field]:
        return self._index.get(name)

    def initial_draft(self) -> dict[str, str]:
        return {f.name: f.default for f in self.input_fields}

    def validate(
        self, draft: Mapping[str, Any], skip: tuple[str, ...] = ()
    ) -> dict[str, str]:
        """Validate a draft.

        Args:
            draft: Field name -> raw value
            skip: Field names whose rules are not applied

        Returns:
            Field name -> error message for every invalid field (empty if valid)
        """
        cleaned = {f.name: f.clean(draft.get(f.name, "")) for f in self.input_fields}

        errors: dict[str, str] = {}
        for f in self.input_fields:
            if f.name in skip:
                continue
            message = f.validate(cleaned[f.name])
            if message is not None:
                errors[f.name] = message

        for rule in self.record_rules:
            for name, message in rule(cleaned).items():
                errors.setdefault(name, message)

        return errors

    def parse_draft(self, draft: Mapping[str, Any]) -> dict[str, Any]:
        """Convert a validated draft to committed values."""
        return {f.name: f.parse(draft.get(f.name, "")) for f in self.input_fields}

    def to_draft(self, values: Mapping[str, Any]) -> dict[str, str]:
        """Render committed values as a draft, leaving secret fields blank."""
        return {
            f.name: "" if f.secret else f.format(values.get(f.name))
            for f in self.input_fields
        }
