#!/usr/bin/env python3
# autotable/table/table.py
from __future__ import annotations

"""
Tables of records and the builder that validates them.

A Table holds:
- records: the entries in insertion order,
- columns: one Column per cell the row mapper produces,
- row_mapper: the function turning a record into display strings.

Tables are only created through TableBuilder.build(), which checks that every
record maps to exactly one cell per column. The built table exposes records
and columns as tuples, so nothing done to the builder afterwards can change it.
"""

import logging
import threading
from typing import Callable, Generic, Iterable, Iterator, Sequence, TypeVar

from autotable.exceptions import ShapeMismatchError
from autotable.table.table_types import Column

T = TypeVar("T")

Predicate = Callable[[T], bool]

logger = logging.getLogger(__name__)


class Table(Generic[T]):
    """An immutable-shape table of records rendered through a row mapper."""

    __slots__ = ("_records", "_columns", "_row_mapper", "lock")

    def __init__(
        self,
        records: Iterable[T],
        columns: Iterable[Column],
        row_mapper: Callable[..., Sequence[str]],
    ) -> None:
        self._records: tuple[T, ...] = tuple(records)
        self._columns: tuple[Column, ...] = tuple(columns)
        self._row_mapper = row_mapper
        # Guards writes of rendered widths back onto the columns.
        self.lock = threading.Lock()

    # ---------------- Accessors ----------------

    @property
    def records(self) -> tuple[T, ...]:
        return self._records

    @property
    def columns(self) -> tuple[Column, ...]:
        return self._columns

    @property
    def row_mapper(self) -> Callable[..., Sequence[str]]:
        return self._row_mapper

    @property
    def headers(self) -> list[str]:
        return [column.header for column in self._columns]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[T]:
        return iter(self._records)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(records={len(self._records)}, "
            f"columns={self.headers!r})"
        )

    # ---------------- Mapping ----------------

    def mapped_rows(
        self,
        records: Sequence[T] | None = None,
        where: Predicate[T] | None = None,
    ) -> list[list[str]]:
        """
        Map records to their rows of display strings.

        Without arguments every stored record is mapped. `records` maps an
        explicit sequence instead; `where` keeps only the records for which
        the predicate is true, preserving their relative order.
        """
        source = self._records if records is None else records
        return [
            list(self._row_mapper(record))
            for record in source
            if where is None or where(record)
        ]

    def iter_indexed(
        self,
        records: Sequence[T] | None = None,
        where: Predicate[T] | None = None,
    ) -> Iterator[tuple[int, T]]:
        """Yield (position, record) pairs surviving `where`, positions taken before filtering."""
        source = self._records if records is None else records
        for index, record in enumerate(source):
            if where is None or where(record):
                yield index, record

    # ---------------- Derivation ----------------

    def to_builder(self) -> "TableBuilder[T]":
        """Return a builder pre-loaded with this table's records and column copies."""
        builder: TableBuilder[T] = TableBuilder(self._row_mapper)
        builder.add_columns(self._columns)
        builder.add_records(self._records)
        return builder


class TableBuilder(Generic[T]):
    """
    Staging area for a Table.

    Accumulation methods return the builder so calls can be chained:

        table = (
            TableBuilder(lambda user: [user.name, user.email])
            .add_columns([Column("Name"), Column("Email")])
            .add_records(users)
            .build()
        )

    Positions passed to add_record/add_column are 0-based and follow
    list.insert semantics.
    """

    table_class: type[Table] = Table

    def __init__(self, row_mapper: Callable[..., Sequence[str]]) -> None:
        self._row_mapper = row_mapper
        self._records: list[T] = []
        self._columns: list[Column] = []

    @property
    def records(self) -> list[T]:
        return self._records

    @property
    def columns(self) -> list[Column]:
        return self._columns

    # ---------------- Records ----------------

    def add_record(self, record: T, index: int | None = None) -> "TableBuilder[T]":
        """Append a record, or insert it at the 0-based `index`."""
        if index is None:
            self._records.append(record)
        else:
            self._records.insert(index, record)
        return self

    def add_records(self, records: Iterable[T]) -> "TableBuilder[T]":
        self._records.extend(records)
        return self

    # ---------------- Columns ----------------

    def add_column(self, column: Column, index: int | None = None) -> "TableBuilder[T]":
        """Append a column, or insert it at the 0-based `index`."""
        if index is None:
            self._columns.append(column)
        else:
            self._columns.insert(index, column)
        return self

    def add_columns(self, columns: Iterable[Column]) -> "TableBuilder[T]":
        self._columns.extend(columns)
        return self

    # ---------------- Build ----------------

    def _rows_for_validation(self) -> Iterator[Sequence[str]]:
        for record in self._records:
            yield self._row_mapper(record)

    def build(self) -> Table[T]:
        """
        Validate the staged data and return the finished table.

        Every record is mapped once; the first row whose length differs from
        the column count raises ShapeMismatchError and no table is returned.
        """
        expected = len(self._columns)
        for row_index, row in enumerate(self._rows_for_validation()):
            if len(row) != expected:
                raise ShapeMismatchError(row_index, expected, len(row))

        table = self.table_class(
            self._records,
            [column.copy() for column in self._columns],
            self._row_mapper,
        )
        logger.debug("Built %r", table)
        return table
