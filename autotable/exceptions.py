#!/usr/bin/env python3
# autotable/exceptions.py
from __future__ import annotations

"""
autotable exception hierarchy.

All custom exceptions live here to avoid circular imports.
"""

from typing import Any


class TableError(Exception):
    """Base class for table construction and rendering errors."""


class ShapeMismatchError(TableError, ValueError):
    """A mapped row does not have one cell per column."""

    def __init__(self, row_index: int, expected: int, actual: int) -> None:
        self.row_index = row_index
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Row {row_index} maps to {actual} cell{'s' if actual != 1 else ''} "
            f"but the table has {expected} column{'s' if expected != 1 else ''}."
        )


class UnknownAlignmentError(TableError, LookupError):
    """Raised in strict mode when a column carries an unrecognized alignment."""

    def __init__(self, alignment: Any, header: str = "") -> None:
        self.alignment = alignment
        self.header = header
        where = f" on column {header!r}" if header else ""
        super().__init__(f"Unknown alignment {alignment!r}{where}.")


class ConfigError(ValueError):
    """Invalid configuration value."""
