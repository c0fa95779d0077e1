#!/usr/bin/env python3
# autotable/table/table_types.py
from __future__ import annotations

"""
Table data structures and protocols.

This module defines:
- Alignment: how text sits inside a padded cell.
- Column: a header plus render state (width) and alignment.
- RowMapper / IndexedRowMapper: the callable protocols turning a record into
  one display string per column.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable, Protocol, Sequence, TypeVar

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)


class Alignment(Enum):
    START = "start"
    END = "end"
    CENTER = "center"

    # Aliases
    LEFT = "start"
    RIGHT = "end"

    @classmethod
    def coerce(cls, value: Any) -> "Alignment | None":
        """
        Resolve an Alignment from a member or a name/value string.

        Returns None when the value is not recognized; callers decide whether
        that is an error.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            if key in cls.__members__:
                return cls.__members__[key]
        return None


@dataclass(slots=True)
class Column:
    """
    A table column.

    Attributes:
        header: Text shown in the header row.
        width: Last rendered width. Transient; the printer recomputes it on
            every render and only writes it back when asked to.
        alignment: Alignment of header and body cells. Anything that is not
            an Alignment (or its name) is resolved at render time.
    """

    header: str
    width: int = 0
    alignment: Alignment | str = Alignment.START

    def __post_init__(self) -> None:
        if self.width < 0:
            raise ValueError(f"Column width must be >= 0, got {self.width}")
        resolved = Alignment.coerce(self.alignment)
        if resolved is not None:
            self.alignment = resolved

    def copy(self) -> "Column":
        return replace(self)


class RowMapper(Protocol[T_contra]):
    """Protocol for a function mapping a record to its row cells."""

    def __call__(self, record: T_contra, /) -> Sequence[str]:  # pragma: no cover - signature only
        ...


class IndexedRowMapper(Protocol[T_contra]):
    """Protocol for a function mapping a record and its position to row cells."""

    def __call__(self, record: T_contra, index: int, /) -> Sequence[str]:  # pragma: no cover - signature only
        ...


def number_rows(row_mapper: Callable[[T], Sequence[str]], *, start: int = 1) -> Callable[[T, int], list[str]]:
    """
    Wrap a plain row mapper so it prepends the row number.

    The number shown is `index + start`, which makes the result a ready-made
    mapper for an IndexedTable whose first column is the index column.
    """

    def mapper(record: T, index: int) -> list[str]:
        return [str(index + start), *row_mapper(record)]

    return mapper
