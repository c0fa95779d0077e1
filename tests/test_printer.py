"""Tests for ui/static/table.py: auto-size printer, alignment, widths."""

import io
import logging
import threading

import pytest

from autotable import UnknownAlignmentError
from autotable.config import AppConfig
from autotable.table import (
    Alignment,
    Column,
    IndexedTableBuilder,
    TableBuilder,
)
from autotable.ui import (
    EMPTY_TABLE,
    AutoSizeTablePrinter,
    align_cell,
    compute_widths,
    format_table,
    print_table,
)


def pair_table(rows, columns=None):
    builder = TableBuilder(list)
    builder.add_columns(columns or [Column("Name"), Column("Detail")])
    return builder.add_records(rows).build()


# ---------------------------------------------------------------------------
# align_cell
# ---------------------------------------------------------------------------

class TestAlignCell:
    def test_start(self):
        assert align_cell("ab", 5, Alignment.START) == "ab   "

    def test_end(self):
        assert align_cell("ab", 5, Alignment.END) == "   ab"

    def test_center_puts_odd_space_on_the_right(self):
        assert align_cell("ab", 5, Alignment.CENTER) == " ab  "

    def test_center_even_deficit(self):
        assert align_cell("ab", 6, Alignment.CENTER) == "  ab  "

    def test_exact_width_unchanged(self):
        for alignment in Alignment:
            assert align_cell("abc", 3, alignment) == "abc"

    def test_string_alignment(self):
        assert align_cell("ab", 4, "right") == "  ab"

    def test_unknown_alignment_falls_back_to_start(self):
        assert align_cell("ab", 4, "justify") == "ab  "

    def test_unknown_alignment_strict(self):
        with pytest.raises(UnknownAlignmentError):
            align_cell("ab", 4, "justify", strict=True)


# ---------------------------------------------------------------------------
# compute_widths
# ---------------------------------------------------------------------------

class TestComputeWidths:
    def test_header_wins_when_longer(self):
        assert compute_widths([Column("Name"), Column("Detail")], [["ab", "xyz"]]) == [4, 6]

    def test_cell_wins_when_longer(self):
        widths = compute_widths([Column("N"), Column("D")], [["a", "bb"], ["cccc", "d"]])
        assert widths == [4, 2]

    def test_no_rows_uses_headers(self):
        assert compute_widths([Column("Name"), Column("")], []) == [4, 0]

    def test_no_columns(self):
        assert compute_widths([], [[]]) == []


# ---------------------------------------------------------------------------
# AutoSizeTablePrinter.render
# ---------------------------------------------------------------------------

class TestRender:
    def test_end_to_end_two_columns(self):
        text = AutoSizeTablePrinter().render(pair_table([["ab", "xyz"]]))
        assert text.split("\n") == [
            "+---------------+",
            "| Name | Detail |",
            "+---------------+",
            "| ab   | xyz    |",
            "+---------------+",
            "1 rows in the set.",
        ]

    def test_border_length_formula(self):
        table = pair_table([["longer cell", "x"]])
        bar = AutoSizeTablePrinter().render(table).split("\n")[0]
        widths = [11, 6]
        assert bar == "+" + "-" * (sum(widths) + 1 + 4) + "+"

    def test_every_line_has_the_same_width(self):
        table = pair_table([["a", "b"], ["ccccccc", "dd"]])
        lines = AutoSizeTablePrinter(show_footer=False).render(table).split("\n")
        assert len({len(line) for line in lines}) == 1

    @pytest.mark.parametrize("count", [0, 1, 4])
    def test_n_rows_give_n_body_lines(self, count):
        table = pair_table([[str(i), "x"] for i in range(count)])
        lines = AutoSizeTablePrinter(show_footer=False).render(table).split("\n")
        borders = [i for i, line in enumerate(lines) if line.startswith("+")]
        assert len(borders) == 3
        assert borders[2] - borders[1] - 1 == count

    def test_footer_counts_rendered_rows(self):
        table = pair_table([["a", "1"], ["b", "2"], ["c", "3"]])
        text = AutoSizeTablePrinter().render(table, where=lambda r: r[0] != "b")
        assert text.endswith("\n2 rows in the set.")

    def test_footer_can_be_disabled(self):
        text = AutoSizeTablePrinter(show_footer=False).render(pair_table([["a", "b"]]))
        assert text.endswith("+")
        assert "rows in the set" not in text

    def test_empty_table_sentinel(self):
        table = TableBuilder(list).build()
        assert AutoSizeTablePrinter().render(table) == EMPTY_TABLE
        assert EMPTY_TABLE == "Table is empty..."

    def test_columns_without_rows_still_render(self):
        text = AutoSizeTablePrinter().render(pair_table([]))
        assert text.split("\n") == [
            "+---------------+",
            "| Name | Detail |",
            "+---------------+",
            "+---------------+",
            "0 rows in the set.",
        ]

    def test_alignment_applies_to_header_and_body(self):
        columns = [
            Column("Qty", alignment=Alignment.END),
            Column("Item", alignment=Alignment.CENTER),
        ]
        lines = AutoSizeTablePrinter().render(pair_table([["12345", "ab"]], columns)).split("\n")
        assert lines[1] == "|   Qty | Item |"
        assert lines[3] == "| 12345 |  ab  |"

    def test_width_fits_filtered_rows_only(self):
        table = pair_table([["short", "a"], ["much longer", "b"]])
        lines = AutoSizeTablePrinter().render(table, where=lambda r: r[1] == "a").split("\n")
        assert lines[3] == "| short | a      |"

    def test_unknown_alignment_logs_and_falls_back(self, caplog):
        columns = [Column("Name", alignment="justify"), Column("Detail")]
        with caplog.at_level(logging.WARNING, logger="autotable"):
            text = AutoSizeTablePrinter().render(pair_table([["ab", "xyz"]], columns))
        assert "| ab   | xyz    |" in text
        assert "Unknown alignment 'justify'" in caplog.text

    def test_unknown_alignment_strict_raises(self):
        columns = [Column("Name", alignment="justify"), Column("Detail")]
        printer = AutoSizeTablePrinter(strict_alignment=True)
        with pytest.raises(UnknownAlignmentError) as excinfo:
            printer.render(pair_table([["ab", "xyz"]], columns))
        assert excinfo.value.header == "Name"

    def test_indexed_table_keeps_numbers_when_filtered(self):
        table = (
            IndexedTableBuilder(lambda letter, i: [str(i + 1), letter])
            .add_column(Column("Letter"))
            .add_records("ABC")
            .build()
        )
        text = AutoSizeTablePrinter(show_footer=False).render(table, where=lambda l: l != "A")
        assert text.split("\n")[3:5] == [
            "| 2 | B      |",
            "| 3 | C      |",
        ]


# ---------------------------------------------------------------------------
# Column widths are render-local
# ---------------------------------------------------------------------------

class TestWidthState:
    def test_render_does_not_touch_columns_by_default(self):
        table = pair_table([["ab", "xyz"]])
        AutoSizeTablePrinter().render(table)
        assert [c.width for c in table.columns] == [0, 0]

    def test_record_widths_writes_back(self):
        table = pair_table([["ab", "xyz"]])
        AutoSizeTablePrinter(record_widths=True).render(table)
        assert [c.width for c in table.columns] == [4, 6]

    def test_caller_columns_never_mutated(self):
        name = Column("Name")
        table = pair_table([["a much longer name", "x"]], [name, Column("Detail")])
        AutoSizeTablePrinter(record_widths=True).render(table)
        assert name.width == 0
        assert table.columns[0].width == len("a much longer name")

    def test_concurrent_renders_agree(self):
        table = pair_table([[str(i) * (i % 7 + 1), "x"] for i in range(50)])
        printer = AutoSizeTablePrinter(record_widths=True)
        expected = printer.render(table)
        results = []

        def render():
            results.append(printer.render(table))

        threads = [threading.Thread(target=render) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert results == [expected] * 8


# ---------------------------------------------------------------------------
# Convenience helpers
# ---------------------------------------------------------------------------

class TestHelpers:
    def test_format_table_passes_options(self):
        text = format_table(pair_table([["a", "b"]]), show_footer=False)
        assert "rows in the set" not in text

    def test_print_table_writes_to_file(self):
        buf = io.StringIO()
        print_table(pair_table([["ab", "xyz"]]), file=buf)
        assert buf.getvalue().endswith("1 rows in the set.\n")

    def test_from_config(self):
        printer = AutoSizeTablePrinter.from_config(AppConfig(show_footer=False, strict_alignment=True))
        assert printer.show_footer is False
        assert printer.strict_alignment is True

    def test_from_config_overrides(self):
        printer = AutoSizeTablePrinter.from_config(AppConfig(), record_widths=True)
        assert printer.record_widths is True
