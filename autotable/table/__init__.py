#!/usr/bin/env python3
# autotable/table/__init__.py
from __future__ import annotations

"""
Package for the table data model.

Provides:
- Column descriptors, alignments and row-mapper protocols (`table_types`).
- Tables of records and their validating builder (`table`).
- Position-aware tables for numbered listings (`indexed`).
"""


from .table_types import (
    Alignment,
    Column,
    IndexedRowMapper,
    RowMapper,
    number_rows,
)
from .table import Predicate, Table, TableBuilder
from .indexed import (
    DEFAULT_INDEX_HEADER,
    IndexedTable,
    IndexedTableBuilder,
    default_index_column,
)

__all__ = [
    "Alignment",
    "Column",
    "IndexedRowMapper",
    "RowMapper",
    "number_rows",
    "Predicate",
    "Table",
    "TableBuilder",
    "DEFAULT_INDEX_HEADER",
    "IndexedTable",
    "IndexedTableBuilder",
    "default_index_column",
]
