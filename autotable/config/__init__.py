#!/usr/bin/env python3
# autotable/config/__init__.py
from __future__ import annotations

"""
Package for runtime configuration.

Provides:
- `AppConfig`, the frozen settings object.
- `load_config`, merging defaults, config files in the CWD and AUTOTABLE_*
  environment variables.
"""


from .config import AppConfig, DEFAULTS, ENV_PREFIX, load_config

__all__ = [
    "AppConfig",
    "DEFAULTS",
    "ENV_PREFIX",
    "load_config",
]
