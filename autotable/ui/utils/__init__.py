#!/usr/bin/env python3
# autotable/ui/utils/__init__.py
from __future__ import annotations
from .ansi import (
    ANSI,
    strip_ansi,
    supports_color,
    colorize,
)
from .console import PRINT_MUTEX, print_line, print_styled

__all__ = [
    "ANSI",
    "strip_ansi",
    "supports_color",
    "colorize",
    "PRINT_MUTEX",
    "print_line",
    "print_styled",
]
