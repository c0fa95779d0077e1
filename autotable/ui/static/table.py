#!/usr/bin/env python3
# autotable/ui/static/table.py
from __future__ import annotations

"""
Auto-sizing table printer.

Layout of a rendered table (two columns, one row):

    +---------------+
    | Name | Detail |
    +---------------+
    | ab   | xyz    |
    +---------------+
    1 rows in the set.

Column widths are computed from the header and every row being rendered and
kept in a local list for the duration of the render, so one Table can be
rendered concurrently without the renders stepping on each other.
"""

import logging
from typing import IO, TYPE_CHECKING, Any, Callable, Iterable, Protocol, Sequence

from autotable.exceptions import UnknownAlignmentError
from autotable.helpers import zip_pairs, zip_with
from autotable.table import Alignment, Column, Predicate, Table
from autotable.ui.utils import print_line

if TYPE_CHECKING:
    from autotable.config import AppConfig

logger = logging.getLogger(__name__)

EMPTY_TABLE = "Table is empty..."
CELL_SEPARATOR = " | "
ROW_PREFIX = "| "
ROW_SUFFIX = " |"


# ---- Alignment strategies ----------------------------------------------------

def _align_start(text: str, width: int) -> str:
    return text + " " * (width - len(text))


def _align_end(text: str, width: int) -> str:
    return " " * (width - len(text)) + text


def _align_center(text: str, width: int) -> str:
    deficit = width - len(text)
    left = deficit // 2
    return " " * left + text + " " * (deficit - left)


ALIGNMENT_STRATEGY: dict[Alignment, Callable[[str, int], str]] = {
    Alignment.START: _align_start,
    Alignment.END: _align_end,
    Alignment.CENTER: _align_center,
}


def resolve_alignment(column: Column, *, strict: bool = False) -> Alignment:
    """
    Return the column's alignment as an Alignment member.

    Unrecognized values fall back to START, or raise UnknownAlignmentError
    when `strict` is set.
    """
    alignment = Alignment.coerce(column.alignment)
    if alignment is not None:
        return alignment
    if strict:
        raise UnknownAlignmentError(column.alignment, column.header)
    logger.warning(
        "Unknown alignment %r on column %r; using start alignment.",
        column.alignment, column.header,
    )
    return Alignment.START


def align_cell(text: str, width: int, alignment: Any, *, strict: bool = False) -> str:
    """Pad `text` to `width` according to `alignment`."""
    if not isinstance(alignment, Alignment):
        alignment = resolve_alignment(Column("", alignment=alignment), strict=strict)
    return ALIGNMENT_STRATEGY[alignment](text, width)


# ---- Sizing ------------------------------------------------------------------

def compute_widths(columns: Sequence[Column], rows: Iterable[Sequence[str]]) -> list[int]:
    """
    Width of each column: the longest of its header and all of its cells.

    Every row is consulted, so the result always fits the rows it was
    computed from.
    """
    widths = [len(column.header) for column in columns]
    for row in rows:
        for index, cell in enumerate(row[:len(widths)]):
            if len(cell) > widths[index]:
                widths[index] = len(cell)
    return widths


def _set_width(width: int, column: Column) -> None:
    column.width = width


def record_widths(table: Table, widths: Sequence[int]) -> None:
    """Write rendered widths back onto the table's columns."""
    with table.lock:
        zip_with(widths, table.columns, _set_width)


# ---- Printer -----------------------------------------------------------------

class TablePrinter(Protocol):
    """Anything that turns a Table into text."""

    def render(self, table: Table, where: Predicate | None = None) -> str:  # pragma: no cover - interface
        ...


class AutoSizeTablePrinter:
    """
    Renders a Table as a bordered block with columns sized to fit.

    Options:
        show_footer: append "<n> rows in the set." after the last border.
        strict_alignment: raise UnknownAlignmentError instead of falling back
            to start alignment when a column's alignment is not recognized.
        record_widths: also store the computed widths on the table's Column
            objects (under the table's lock).
    """

    def __init__(
        self,
        *,
        show_footer: bool = True,
        strict_alignment: bool = False,
        record_widths: bool = False,
    ) -> None:
        self.show_footer = show_footer
        self.strict_alignment = strict_alignment
        self.record_widths = record_widths

    @classmethod
    def from_config(cls, config: "AppConfig", **overrides: Any) -> "AutoSizeTablePrinter":
        options: dict[str, Any] = {
            "show_footer": config.show_footer,
            "strict_alignment": config.strict_alignment,
        }
        options.update(overrides)
        return cls(**options)

    # ---------------- Public API ----------------

    def render(self, table: Table, where: Predicate | None = None) -> str:
        """Return the text of `table`, keeping only records matching `where`."""
        rows = table.mapped_rows(where=where)
        columns = table.columns
        if not columns and not rows:
            return EMPTY_TABLE

        widths = compute_widths(columns, rows)
        if self.record_widths:
            record_widths(table, widths)
        alignments = [resolve_alignment(c, strict=self.strict_alignment) for c in columns]

        bar = self.bar(widths)
        lines = [
            bar,
            self.format_row(table.headers, widths, alignments),
            bar,
            *(self.format_row(row, widths, alignments) for row in rows),
            bar,
        ]
        if self.show_footer:
            lines.append(self.footer(len(rows)))

        logger.debug("Rendered %d of %d rows, widths=%s", len(rows), len(table), widths)
        return "\n".join(lines)

    # ---------------- Pieces ----------------

    @staticmethod
    def bar(widths: Sequence[int]) -> str:
        """Horizontal border: cell widths plus one padding space each side and the separators."""
        count = len(widths)
        dashes = sum(widths) + max(count - 1, 0) + 2 * count
        return "+" + "-" * dashes + "+"

    @staticmethod
    def footer(row_count: int) -> str:
        return f"{row_count} rows in the set."

    @staticmethod
    def format_row(
        cells: Sequence[str],
        widths: Sequence[int],
        alignments: Sequence[Alignment],
    ) -> str:
        """Pad each cell to its column and join them between the row borders."""
        parts = [
            ALIGNMENT_STRATEGY[alignment](cell, width)
            for cell, (width, alignment) in zip_pairs(cells, zip_pairs(widths, alignments))
        ]
        return ROW_PREFIX + CELL_SEPARATOR.join(parts) + ROW_SUFFIX


# ---- Convenience -------------------------------------------------------------

def format_table(table: Table, where: Predicate | None = None, **options: Any) -> str:
    """Render `table` with a one-off AutoSizeTablePrinter."""
    return AutoSizeTablePrinter(**options).render(table, where)


def print_table(
    table: Table,
    where: Predicate | None = None,
    *,
    file: IO[Any] | None = None,
    printer: TablePrinter | None = None,
    **options: Any,
) -> None:
    """Render `table` and print it through the shared console lock."""
    renderer = printer if printer is not None else AutoSizeTablePrinter(**options)
    print_line(renderer.render(table, where), file=file)
