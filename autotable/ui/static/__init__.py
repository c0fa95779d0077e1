#!/usr/bin/env python3
# autotable/ui/static/__init__.py
from __future__ import annotations
from .table import (
    ALIGNMENT_STRATEGY,
    EMPTY_TABLE,
    AutoSizeTablePrinter,
    TablePrinter,
    align_cell,
    compute_widths,
    format_table,
    print_table,
    record_widths,
    resolve_alignment,
)
from .logging import (
    init_logger,
    ColorizingStreamHandler,
    PlainFormatter,
)

__all__ = [
    "ALIGNMENT_STRATEGY",
    "EMPTY_TABLE",
    "AutoSizeTablePrinter",
    "TablePrinter",
    "align_cell",
    "compute_widths",
    "format_table",
    "print_table",
    "record_widths",
    "resolve_alignment",
    "init_logger",
    "ColorizingStreamHandler",
    "PlainFormatter",
]
