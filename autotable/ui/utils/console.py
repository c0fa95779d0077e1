#!/usr/bin/env python3
# autotable/ui/utils/console.py
from __future__ import annotations

import sys
import threading
from typing import IO, Any

from .ansi import colorize, strip_ansi, supports_color

# Single shared print mutex for all console output (tables, menus, logging).
PRINT_MUTEX = threading.Lock()


def print_line(text: str = "", *, file: IO[Any] | None = None, flush: bool = False) -> None:
    """Thread-safe print of one block of text followed by a newline."""
    out = sys.stdout if file is None else file
    with PRINT_MUTEX:
        out.write(f"{text}\n")
        if flush:
            out.flush()


def print_styled(text: str, *styles: str, file: IO[Any] | None = None) -> None:
    """Like print_line, colouring the text only when the target is a terminal."""
    out = sys.stdout if file is None else file
    rendered = colorize(text, *styles) if supports_color(out) else strip_ansi(text)
    print_line(rendered, file=out, flush=True)
