"""Text rendering of statistic tables — fixed-width, left-aligned columns."""

from __future__ import annotations

from typing import Iterable

from .stats_types import CountRow, RegisterRow, ReportMode, StatRow, StatTable
from . import constants

_HEADERS: dict[ReportMode, tuple[str, ...]] = {
    ReportMode.FORMATS: constants.FORMAT_HEADERS,
    ReportMode.OPCODES: constants.OPCODE_HEADERS,
    ReportMode.REGISTERS: constants.REGISTER_HEADERS,
}


def format_percent(percent: float) -> str:
    return f"{percent:.2f}%"


def format_columns(values: Iterable[object]) -> str:
    """Pad every value to the column width, left-aligned, and join them."""
    width = constants.COLUMN_WIDTH
    return "".join(f"{str(v):<{width}}" for v in values)


def header_for(mode: ReportMode) -> str:
    return format_columns(_HEADERS[mode])


def format_row(row: StatRow) -> str:
    if isinstance(row, CountRow):
        return format_columns((row.label, row.count, format_percent(row.percent)))
    if isinstance(row, RegisterRow):
        return format_columns(
            (
                row.label,
                row.total,
                row.r_count,
                row.i_count,
                format_percent(row.percent),
            )
        )
    raise TypeError(f"Unexpected row type: {type(row).__name__}")


def render_table(table: StatTable, human_readable: bool = False) -> str:
    """Render a table as text, with a header line when human_readable.

    Returns:
        The lines joined by newlines, without a trailing newline.
    """
    lines: list[str] = []
    if human_readable:
        lines.append(header_for(table.mode))
    lines.extend(format_row(row) for row in table.rows)
    return "\n".join(lines)
