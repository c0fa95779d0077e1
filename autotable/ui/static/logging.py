#!/usr/bin/env python3
# autotable/ui/static/logging.py
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from os import PathLike
from typing import Optional

from autotable.ui.utils import ANSI, PRINT_MUTEX, strip_ansi, supports_color


class ColorizingStreamHandler(logging.StreamHandler):
    """
    StreamHandler that colours records by level on terminals and writes plain
    text everywhere else. Writes hold PRINT_MUTEX so log lines never split a
    table or menu being printed from another thread.
    """

    _LEVEL_COLORS = {
        logging.DEBUG: ANSI["bright_black"],
        logging.INFO: "",
        logging.WARNING: ANSI["yellow"],
        logging.ERROR: ANSI["red"],
        logging.CRITICAL: ANSI["magenta"],
    }

    def __init__(self, stream=None) -> None:
        super().__init__(stream)
        self._use_ansi = supports_color(self.stream)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            if self._use_ansi:
                ansi = self._LEVEL_COLORS.get(record.levelno, "")
                if ansi:
                    message = f"{ansi}{message}{ANSI['reset']}"
            else:
                message = strip_ansi(message)
            with PRINT_MUTEX:
                self.stream.write(message + self.terminator)
                self.flush()
        except Exception:
            self.handleError(record)


class PlainFormatter(logging.Formatter):
    """Formatter that strips ANSI (good for log files)."""

    def format(self, record: logging.LogRecord) -> str:
        return strip_ansi(super().format(record))


def init_logger(
    name: str = "autotable",
    level: int | str = logging.INFO,
    logfile: Optional[str | PathLike[str]] = None,
) -> logging.Logger:
    """
    Initialize the package logger.

    Console: coloured on terminals, plain otherwise (stderr).
    File (optional): rotating, plain text, UTF-8, everything from DEBUG up.
    Calling it again only adjusts the console level; handlers are not
    duplicated and an attached log file keeps receiving DEBUG records.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False

    console_handler = next(
        (h for h in logger.handlers if isinstance(h, ColorizingStreamHandler)), None)
    if console_handler is None:
        console_handler = ColorizingStreamHandler(stream=sys.stderr)
        console_handler.setFormatter(
            logging.Formatter("[%(levelname)s] %(message)s"))
        logger.addHandler(console_handler)
    console_handler.setLevel(level)

    if logfile and not any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        file_handler = RotatingFileHandler(
            logfile, maxBytes=2_000_000, backupCount=3, encoding="utf-8"
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            PlainFormatter(
                "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(file_handler)

    if any(isinstance(h, RotatingFileHandler) for h in logger.handlers):
        # File gets DEBUG even when the console is quieter.
        logger.setLevel(logging.DEBUG)

    return logger
