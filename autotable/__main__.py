#!/usr/bin/env python3
# autotable/__main__.py
from __future__ import annotations
"""
Interactive demo: browse a small catalogue through a numbered menu.

    python -m autotable
"""

import logging
import sys
from dataclasses import dataclass
from typing import IO, Any, Iterable, Optional

from autotable.config import AppConfig, load_config
from autotable.exceptions import ConfigError
from autotable.interface import (
    LineReader,
    MenuBuilder,
    make_cli,
)
from autotable.table import (
    Alignment,
    Column,
    IndexedTableBuilder,
    Table,
    TableBuilder,
    default_index_column,
    number_rows,
)
from autotable.ui import AutoSizeTablePrinter, init_logger, print_line, print_styled


@dataclass(frozen=True, slots=True)
class Product:
    sku: str
    name: str
    price: float
    stock: int


SAMPLE_PRODUCTS: tuple[Product, ...] = (
    Product("HW-001", "Claw hammer", 12.5, 40),
    Product("HW-014", "Box of nails", 3.25, 310),
    Product("EL-220", "Cordless drill", 89.0, 7),
    Product("GD-102", "Watering can", 9.99, 0),
    Product("GD-150", "Pruning shears", 17.45, 22),
)


def _product_cells(product: Product) -> list[str]:
    return [product.sku, product.name, f"{product.price:.2f}", str(product.stock)]


def _catalogue_columns() -> list[Column]:
    return [
        Column("SKU"),
        Column("Name"),
        Column("Price", alignment=Alignment.END),
        Column("Stock", alignment=Alignment.CENTER),
    ]


def build_catalogue(
    config: AppConfig,
    products: Iterable[Product] = SAMPLE_PRODUCTS,
    *,
    numbered: bool = True,
) -> Table[Product]:
    """Product table; when `numbered`, an index column comes first."""
    builder: TableBuilder[Product]
    if numbered:
        builder = IndexedTableBuilder(
            number_rows(_product_cells),
            default_index_column(config.index_header),
        )
    else:
        builder = TableBuilder(_product_cells)
    return builder.add_columns(_catalogue_columns()).add_records(products).build()


def run_demo(
    config: AppConfig,
    reader: LineReader,
    out: Optional[IO[Any]] = None,
) -> None:
    """Build the catalogue and run the menu until the user exits."""
    views = {
        True: build_catalogue(config, numbered=True),
        False: build_catalogue(config, numbered=False),
    }
    printer = AutoSizeTablePrinter.from_config(config)
    state = {"numbered": True}

    def show(where=None) -> None:
        print_line(printer.render(views[state["numbered"]], where=where), file=out)

    def show_all() -> None:
        show()

    def show_in_stock() -> None:
        show(lambda p: p.stock > 0)

    def search() -> None:
        needle = reader.get_line("Name contains: ").strip().lower()
        show(lambda p: needle in p.name.lower())

    def toggle_numbers() -> None:
        state["numbered"] = not state["numbered"]
        print_line(f"Numbered view {'on' if state['numbered'] else 'off'}.", file=out)

    menu = (
        MenuBuilder()
        .welcome("Catalogue")
        .delimiter(config.menu_delimiter)
        .add_item("Show all products", show_all)
        .add_item("Show products in stock", show_in_stock)
        .add_item("Search by name", search)
        .add_item("Toggle numbered view", toggle_numbers)
        .build()
    )
    menu.run(reader)


def main() -> int:
    try:
        config = load_config()
    except ConfigError as exc:
        print_styled(f"[ERROR] Invalid configuration: {exc}", "red", file=sys.stderr)
        return 2

    logger = init_logger(
        "autotable",
        level=config.log_level or logging.WARNING,
        logfile=config.log_file_path,
    )
    logger.debug("Loaded configuration: %s", config)

    cli = make_cli()
    try:
        with cli:
            run_demo(config, cli)
    except KeyboardInterrupt:
        print_line()
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
