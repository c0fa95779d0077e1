#!/usr/bin/env python3
# autotable/interface/__init__.py
from __future__ import annotations

"""
Package for the interactive console interface.

Provides:
- CLI frontends (prompt_toolkit on terminals, plain streams otherwise).
- Non-raising parsers (`TryParse`).
- Validated input requests built from parsers and rules.
- Numbered menus that run an action per choice.
"""


# Parsing FIRST (input depends on it)
from .parsing import TryParse

from .input import (
    InputErrorHandler,
    LineReader,
    Rule,
    first_failed_rule,
    request_valid_input,
    request_valid_inputs,
)

from .cli import BaseCLI, PromptToolkitCLI, StreamCLI, make_cli

from .menu import (
    Menu,
    MenuBuilder,
    MenuItem,
    MenuItemFormatter,
    default_item_formatter,
)

__all__ = [
    # parsing
    "TryParse",
    # input
    "InputErrorHandler",
    "LineReader",
    "Rule",
    "first_failed_rule",
    "request_valid_input",
    "request_valid_inputs",
    # cli
    "BaseCLI",
    "PromptToolkitCLI",
    "StreamCLI",
    "make_cli",
    # menu
    "Menu",
    "MenuBuilder",
    "MenuItem",
    "MenuItemFormatter",
    "default_item_formatter",
]
