#!/usr/bin/env python3
# autotable/__init__.py
from __future__ import annotations
"""
autotable: render collections of records as auto-sized, bordered text tables.

    from autotable import Column, TableBuilder, format_table

    table = (
        TableBuilder(lambda p: [p.name, str(p.qty)])
        .add_columns([Column("Name"), Column("Qty", alignment="end")])
        .add_records(products)
        .build()
    )
    print(format_table(table))
"""

from autotable.exceptions import (
    ConfigError,
    ShapeMismatchError,
    TableError,
    UnknownAlignmentError,
)
from autotable.helpers import Pair, zip_pairs, zip_with
from autotable.table import (
    Alignment,
    Column,
    IndexedRowMapper,
    IndexedTable,
    IndexedTableBuilder,
    RowMapper,
    Table,
    TableBuilder,
    default_index_column,
    number_rows,
)
from autotable.ui import (
    EMPTY_TABLE,
    AutoSizeTablePrinter,
    TablePrinter,
    align_cell,
    compute_widths,
    format_table,
    init_logger,
    print_table,
)
from autotable.config import AppConfig, load_config

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "ConfigError",
    "ShapeMismatchError",
    "TableError",
    "UnknownAlignmentError",
    "Pair",
    "zip_pairs",
    "zip_with",
    "Alignment",
    "Column",
    "IndexedRowMapper",
    "IndexedTable",
    "IndexedTableBuilder",
    "RowMapper",
    "Table",
    "TableBuilder",
    "default_index_column",
    "number_rows",
    "EMPTY_TABLE",
    "AutoSizeTablePrinter",
    "TablePrinter",
    "align_cell",
    "compute_widths",
    "format_table",
    "init_logger",
    "print_table",
    "AppConfig",
    "load_config",
]
