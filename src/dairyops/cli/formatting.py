"""Plain-text rendering of records, statistics and charts."""

import dataclasses
from typing import Any, Sequence

from dairyops.domain.entities import ChartSeries

CHART_WIDTH = 40


def format_value(value: Any) -> str:
    if value is None:
        return ""
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)


def humanize(name: str) -> str:
    """Turn an attribute name into a label, e.g. total_milk_sold -> Total milk sold."""
    return name.replace("_", " ").capitalize()


def render_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> list[str]:
    """Render rows as left-aligned columns separated by ' | '."""
    widths = [len(header) for header in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    def line(cells: Sequence[str]) -> str:
        return " | ".join(f"{cell:<{width}}" for cell, width in zip(cells, widths)).rstrip()

    rule = "-" * (sum(widths) + 3 * (len(widths) - 1))
    return [line(headers), rule, *(line(row) for row in rows)]


def render_statistics(stats: Any) -> list[str]:
    """Render a statistics dataclass, one attribute per line.

    Mapping attributes (per-type totals, per-category counts) are listed
    underneath their label.
    """
    lines = []
    for attribute in dataclasses.fields(stats):
        value = getattr(stats, attribute.name)
        label = humanize(attribute.name)
        if isinstance(value, dict):
            lines.append(f"{label}:")
            if not value:
                lines.append("  (none)")
            for key, item in value.items():
                lines.append(f"  {format_value(key)}: {format_value(item)}")
        else:
            lines.append(f"{label}: {format_value(value)}")
    return lines


def render_chart(series: ChartSeries, width: int = CHART_WIDTH) -> list[str]:
    """Render a horizontal bar chart scaled to the largest value."""
    if not series.labels:
        return ["No data to chart."]

    label_width = max(len(label) for label in series.labels)
    peak = max(series.values)
    lines = []
    for label, value in zip(series.labels, series.values):
        bar = "#" * round(value / peak * width) if peak > 0 else ""
        lines.append(f"{label:<{label_width}} | {bar} {value:g}".rstrip())
    return lines
