#!/usr/bin/env python3
# autotable/interface/parsing.py
from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")

_BOOL_TRUE = {"1", "true", "yes", "y", "on"}
_BOOL_FALSE = {"0", "false", "no", "n", "off"}


def _parse_bool(text: str) -> bool:
    lowered = text.strip().lower()
    if lowered in _BOOL_TRUE:
        return True
    if lowered in _BOOL_FALSE:
        return False
    raise ValueError(f"Expected boolean, got: {text!r}")


class TryParse(Generic[T]):
    """
    Parse text without raising.

    `parse` returns the converted value, or None when the wrapped converter
    rejects the text with ValueError, TypeError or ArithmeticError.
    """

    def __init__(self, parser: Callable[[str], T]) -> None:
        self._parser = parser

    def parse(self, text: str) -> T | None:
        try:
            return self._parser(text)
        except (ValueError, TypeError, ArithmeticError):
            return None

    __call__ = parse

    @classmethod
    def for_int(cls) -> "TryParse[int]":
        return cls(int)  # type: ignore[arg-type]

    @classmethod
    def for_float(cls) -> "TryParse[float]":
        return cls(float)  # type: ignore[arg-type]

    @classmethod
    def for_bool(cls) -> "TryParse[bool]":
        return cls(_parse_bool)  # type: ignore[arg-type]
