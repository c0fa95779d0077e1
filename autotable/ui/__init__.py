#!/usr/bin/env python3
# autotable/ui/__init__.py
from __future__ import annotations
# Re-export convenient top-level API
from .utils import (
    ANSI,
    strip_ansi,
    supports_color,
    colorize,
    PRINT_MUTEX,
    print_line,
    print_styled,
)
from .static import (
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
    init_logger,
    ColorizingStreamHandler,
    PlainFormatter,
)

__all__ = [
    "ANSI",
    "strip_ansi",
    "supports_color",
    "colorize",
    "PRINT_MUTEX",
    "print_line",
    "print_styled",
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
