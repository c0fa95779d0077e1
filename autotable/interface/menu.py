#!/usr/bin/env python3
# autotable/interface/menu.py
from __future__ import annotations

"""
Numbered line menus.

    Welcome to the menu!
    	1. Show all rows
    	2. Exit
    Enter your choice:

Menus are built with MenuBuilder; the exit item is always appended last.
Choices are 1-based, matching the numbers shown to the user.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from autotable.interface.input import (
    InputErrorHandler,
    LineReader,
    Rule,
    request_valid_input,
)
from autotable.interface.parsing import TryParse
from autotable.ui import print_line, print_styled

logger = logging.getLogger(__name__)

MenuItemFormatter = Callable[[int, str, str], str]


@dataclass(frozen=True, slots=True)
class MenuItem:
    """A menu entry: the text shown and the action run when it is chosen."""

    description: str
    action: Callable[[], object]

    def __str__(self) -> str:
        return self.description


def default_item_formatter(ordinal: int, delimiter: str, description: str) -> str:
    return f"\t{ordinal}{delimiter} {description}\n"


def _say_goodbye() -> None:
    print_line("Exiting the menu...")


class Menu:
    """A built menu. Use MenuBuilder to create one."""

    def __init__(
        self,
        *,
        items: list[MenuItem],
        exit_item: MenuItem,
        welcome: str,
        prompt: str,
        delimiter: str,
        formatter: MenuItemFormatter,
        invalid_choice_handler: InputErrorHandler,
        out_of_bounds_handler: InputErrorHandler,
    ) -> None:
        self.items = tuple(items)
        self.exit_item = exit_item
        self.welcome = welcome
        self.prompt = prompt
        self.delimiter = delimiter
        self.formatter = formatter
        self.invalid_choice_handler = invalid_choice_handler
        self.out_of_bounds_handler = out_of_bounds_handler

    def formatted(self) -> str:
        """Welcome line, one line per item, then the prompt."""
        lines = [
            self.formatter(ordinal, self.delimiter, str(item))
            for ordinal, item in enumerate(self.items, start=1)
        ]
        return f"{self.welcome}\n{''.join(lines)}{self.prompt}"

    def _is_valid_choice(self, choice: int) -> bool:
        return 1 <= choice <= len(self.items)

    def choose_ordinal(self, reader: LineReader) -> int:
        """Ask until the user picks a listed item and return its 1-based number."""
        rule = Rule(self._is_valid_choice, self.out_of_bounds_handler)
        return request_valid_input(
            reader,
            self.formatted(),
            self.invalid_choice_handler,
            TryParse.for_int(),
            rule,
        )

    def choose(self, reader: LineReader) -> MenuItem:
        """Ask until the user picks a listed item and return it."""
        return self.items[self.choose_ordinal(reader) - 1]

    def run(self, reader: LineReader) -> None:
        """
        Show the menu and run chosen actions until the exit item has run.

        The exit item is always the last entry, so the loop ends once the
        highest number has been chosen. Running out of input, at the menu
        prompt or inside an action, also ends the loop.
        """
        exit_ordinal = len(self.items)
        while True:
            try:
                ordinal = self.choose_ordinal(reader)
                item = self.items[ordinal - 1]
                logger.debug("Menu choice: %s", item.description)
                item.action()
            except EOFError:
                logger.info("Input closed; leaving the menu.")
                return
            if ordinal == exit_ordinal:
                return


class MenuBuilder:
    """
    Configures a Menu.

        menu = (
            MenuBuilder()
            .welcome("Catalogue")
            .add_item("Show all", show_all)
            .build()
        )
    """

    def __init__(self) -> None:
        self._items: list[MenuItem] = []
        self._welcome = "Welcome to the menu!"
        self._prompt = "Enter your choice: "
        self._delimiter = "."
        self._exit_item = MenuItem("Exit", _say_goodbye)
        self._formatter: MenuItemFormatter = default_item_formatter
        self._invalid_choice_handler: Optional[InputErrorHandler] = None
        self._out_of_bounds_handler: Optional[InputErrorHandler] = None

    def welcome(self, welcome: str) -> "MenuBuilder":
        self._welcome = welcome
        return self

    def prompt(self, prompt: str) -> "MenuBuilder":
        self._prompt = prompt
        return self

    def delimiter(self, delimiter: str) -> "MenuBuilder":
        self._delimiter = delimiter
        return self

    def add_item(self, item: MenuItem | str, action: Callable[[], object] | None = None) -> "MenuBuilder":
        """Append a MenuItem, or build one from a description and an action."""
        self._items.append(_as_item(item, action))
        return self

    def insert_item(self, ordinal: int, item: MenuItem | str, action: Callable[[], object] | None = None) -> "MenuBuilder":
        """Insert an item so it is shown as number `ordinal` (1-based)."""
        if ordinal < 1:
            raise ValueError(f"Menu ordinals start at 1, got {ordinal}")
        self._items.insert(ordinal - 1, _as_item(item, action))
        return self

    def add_items(self, items: Iterable[MenuItem]) -> "MenuBuilder":
        self._items.extend(items)
        return self

    def exit_item(self, item: MenuItem) -> "MenuBuilder":
        """Set the item that ends the menu loop once its action has run."""
        self._exit_item = item
        return self

    def formatter(self, formatter: MenuItemFormatter) -> "MenuBuilder":
        self._formatter = formatter
        return self

    def invalid_choice_handler(self, handler: InputErrorHandler) -> "MenuBuilder":
        """Called with the raw input when it is not a whole number."""
        self._invalid_choice_handler = handler
        return self

    def out_of_bounds_handler(self, handler: InputErrorHandler) -> "MenuBuilder":
        """Called with the raw input when the number is not on the menu."""
        self._out_of_bounds_handler = handler
        return self

    def build(self) -> Menu:
        items = [*self._items, self._exit_item]
        count = len(items)

        def _invalid(raw: str) -> None:
            print_styled("Failed to parse input, please try again.", "yellow")

        def _out_of_bounds(raw: str) -> None:
            print_styled(
                f"Failed to run choice {raw}, please enter a number between 1 and {count}",
                "yellow",
            )

        return Menu(
            items=items,
            exit_item=self._exit_item,
            welcome=self._welcome,
            prompt=self._prompt,
            delimiter=self._delimiter,
            formatter=self._formatter,
            invalid_choice_handler=self._invalid_choice_handler or _invalid,
            out_of_bounds_handler=self._out_of_bounds_handler or _out_of_bounds,
        )


def _as_item(item: MenuItem | str, action: Callable[[], object] | None) -> MenuItem:
    if isinstance(item, MenuItem):
        return item
    if action is None:
        raise TypeError(f"Menu item {item!r} needs an action")
    return MenuItem(item, action)
