#!/usr/bin/env python3
# autotable/table/indexed.py
from __future__ import annotations

"""
Tables whose rows depend on each record's position.

The row mapper of an IndexedTable is called as `mapper(record, index)`.
When rows are filtered the index is still the record's position in the full
table, so a numbered listing keeps its original numbers:

    records [A, B, C], where=lambda r: r is not A  ->  mapper(B, 1), mapper(C, 2)
"""

from typing import Any, Callable, Iterator, Sequence, TypeVar

from autotable.table.table import Predicate, Table, TableBuilder
from autotable.table.table_types import Alignment, Column

T = TypeVar("T")

DEFAULT_INDEX_HEADER = "#"

# Sentinel: "no index_column argument given", distinct from an explicit None.
_DEFAULT_INDEX_COLUMN: Any = object()


def default_index_column(header: str = DEFAULT_INDEX_HEADER) -> Column:
    return Column(header, alignment=Alignment.END)


class IndexedTable(Table[T]):
    """A Table mapped with an IndexedRowMapper."""

    __slots__ = ()

    def mapped_rows(
        self,
        records: Sequence[T] | None = None,
        where: Predicate[T] | None = None,
    ) -> list[list[str]]:
        """
        Map records to rows, passing each record's position to the mapper.

        Positions are counted in the stored records, or in `records` when an
        explicit sequence is given, before `where` is applied.
        """
        return [
            list(self._row_mapper(record, index))
            for index, record in self.iter_indexed(records, where)
        ]

    def to_builder(self) -> "IndexedTableBuilder[T]":
        """Return a builder pre-loaded with this table; the index column is carried over as-is."""
        builder: IndexedTableBuilder[T] = IndexedTableBuilder(self._row_mapper, index_column=None)
        builder.add_columns(self._columns)
        builder.add_records(self._records)
        return builder


class IndexedTableBuilder(TableBuilder[T]):
    """
    Builder for IndexedTable.

    The builder starts with one index column already in place, so the row
    mapper is expected to return the index cell first, followed by one cell
    per column added afterwards. Pass `index_column=None` to manage the
    columns entirely by hand.
    """

    table_class = IndexedTable

    def __init__(
        self,
        row_mapper: Callable[[T, int], Sequence[str]],
        index_column: Column | None = _DEFAULT_INDEX_COLUMN,
    ) -> None:
        super().__init__(row_mapper)
        if index_column is _DEFAULT_INDEX_COLUMN:
            index_column = default_index_column()
        if index_column is not None:
            self.add_column(index_column)

    def _rows_for_validation(self) -> Iterator[Sequence[str]]:
        for index, record in enumerate(self._records):
            yield self._row_mapper(record, index)

    def build(self) -> IndexedTable[T]:
        return super().build()  # type: ignore[return-value]
