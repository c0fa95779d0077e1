#!/usr/bin/env python3
# autotable/interface/input.py
from __future__ import annotations

"""
Request, parse and validate user input.

A value is accepted when the parser returns something other than None and
every Rule's predicate holds. Otherwise the matching error handler is called
with the raw input and the user is asked again.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Generic, Optional, Protocol, Sequence, TypeVar

from autotable.interface.parsing import TryParse

T = TypeVar("T")

InputErrorHandler = Callable[[str], None]

logger = logging.getLogger(__name__)


class LineReader(Protocol):
    """Anything able to show a prompt and return one line of input."""

    def get_line(self, prompt: str = "") -> str:  # pragma: no cover - interface
        ...


@dataclass(frozen=True, slots=True)
class Rule(Generic[T]):
    """A validation rule: `predicate` must hold, else `on_error(raw_input)` runs."""

    predicate: Callable[[T], bool]
    on_error: InputErrorHandler


def first_failed_rule(value: T, rules: Sequence[Rule[T]]) -> Optional[Rule[T]]:
    """Return the first rule `value` does not satisfy, or None."""
    for rule in rules:
        if not rule.predicate(value):
            return rule
    return None


def _check(
    raw: str,
    parser: TryParse[T],
    on_parse_error: InputErrorHandler,
    rules: Sequence[Rule[T]],
) -> tuple[bool, T | None]:
    value = parser.parse(raw)
    if value is None:
        logger.debug("Could not parse input %r", raw)
        on_parse_error(raw)
        return False, None
    failed = first_failed_rule(value, rules)
    if failed is not None:
        logger.debug("Input %r rejected by a rule", raw)
        failed.on_error(raw)
        return False, None
    return True, value


def request_valid_input(
    reader: LineReader,
    prompt: str,
    on_parse_error: InputErrorHandler,
    parser: TryParse[T],
    *rules: Rule[T],
) -> T:
    """Prompt until the input parses and passes every rule; return the parsed value."""
    while True:
        raw = reader.get_line(prompt).strip()
        ok, value = _check(raw, parser, on_parse_error, rules)
        if ok:
            return value  # type: ignore[return-value]


def request_valid_inputs(
    reader: LineReader,
    prompt: str,
    on_parse_error: InputErrorHandler,
    parser: TryParse[T],
    sentinel: Callable[[str], bool],
    *rules: Rule[T],
) -> list[T]:
    """
    Collect valid values until `sentinel(raw_input)` is true.

    Invalid entries are reported through their handlers and skipped; the
    sentinel line itself is not parsed.
    """
    results: list[T] = []
    while True:
        raw = reader.get_line(prompt).strip()
        if sentinel(raw):
            return results
        ok, value = _check(raw, parser, on_parse_error, rules)
        if ok:
            results.append(value)  # type: ignore[arg-type]
