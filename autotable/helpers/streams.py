#!/usr/bin/env python3
# autotable/helpers/streams.py
from __future__ import annotations

"""
Pairing helpers for walking two sequences in lockstep.

Both helpers stop as soon as either input runs out; a length mismatch is
normal and never an error.
"""

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Iterator, TypeVar

A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True, slots=True)
class Pair(Generic[A, B]):
    """Immutable two-element value produced by `zip_pairs`."""

    first: A
    second: B

    def __iter__(self) -> Iterator[object]:
        # Lets callers unpack a pair like a tuple: `a, b = pair`
        yield self.first
        yield self.second


def _next_pair(iter_a: Iterator[A], iter_b: Iterator[B]) -> Pair[A, B] | None:
    # Pull from `a` first; if `b` is exhausted the element taken from `a` is dropped.
    try:
        first = next(iter_a)
        second = next(iter_b)
    except StopIteration:
        return None
    return Pair(first, second)


def zip_pairs(seq_a: Iterable[A], seq_b: Iterable[B]) -> Iterator[Pair[A, B]]:
    """
    Lazily pair up the elements of two iterables.

    The result is single-pass and ends with the shorter input, e.g. zipping
    three items with five yields three pairs and consumes only the first
    three of the longer one.
    """
    iter_a = iter(seq_a)
    iter_b = iter(seq_b)
    while True:
        pair = _next_pair(iter_a, iter_b)
        if pair is None:
            return
        yield pair


def zip_with(
    seq_a: Iterable[A],
    seq_b: Iterable[B],
    action: Callable[[A, B], object],
) -> None:
    """Apply `action(a, b)` to each pair in order without building Pair objects."""
    iter_a = iter(seq_a)
    iter_b = iter(seq_b)
    while True:
        try:
            first = next(iter_a)
            second = next(iter_b)
        except StopIteration:
            return
        action(first, second)
