#!/usr/bin/env python3
# autotable/helpers/__init__.py
from __future__ import annotations

from .streams import Pair, zip_pairs, zip_with

__all__ = [
    "Pair",
    "zip_pairs",
    "zip_with",
]
