"""Tests for interface/menu.py: MenuBuilder and Menu.run."""

import pytest

from autotable.interface import MenuBuilder, MenuItem


def noop():
    return None


class TestFormatting:
    def test_default_layout(self):
        menu = MenuBuilder().welcome("W").prompt("> ").add_item("A", noop).build()
        assert menu.formatted() == "W\n\t1. A\n\t2. Exit\n> "

    def test_custom_delimiter_and_formatter(self):
        menu = (
            MenuBuilder()
            .welcome("W")
            .prompt("?")
            .delimiter(")")
            .formatter(lambda n, d, text: f"[{n}{d}{text}]")
            .add_item("A", noop)
            .build()
        )
        assert menu.formatted() == "W\n[1)A][2)Exit]?"

    def test_insert_item_is_one_based(self):
        menu = (
            MenuBuilder()
            .add_item("B", noop)
            .insert_item(1, "A", noop)
            .build()
        )
        assert [str(item) for item in menu.items] == ["A", "B", "Exit"]

    def test_insert_item_rejects_zero(self):
        with pytest.raises(ValueError):
            MenuBuilder().insert_item(0, "A", noop)

    def test_description_needs_action(self):
        with pytest.raises(TypeError):
            MenuBuilder().add_item("A")

    def test_build_twice_does_not_duplicate_exit(self):
        builder = MenuBuilder().add_items([MenuItem("A", noop)])
        builder.build()
        assert len(builder.build().items) == 2


class TestRun:
    def test_runs_actions_until_exit(self, reader_for):
        ran = []
        menu = (
            MenuBuilder()
            .add_item("One", lambda: ran.append("one"))
            .add_item("Two", lambda: ran.append("two"))
            .exit_item(MenuItem("Quit", lambda: ran.append("quit")))
            .build()
        )
        menu.run(reader_for("2", "1", "3", "1"))
        assert ran == ["two", "one", "quit"]

    def test_default_exit_message(self, reader_for, capsys):
        MenuBuilder().build().run(reader_for("1"))
        assert "Exiting the menu..." in capsys.readouterr().out

    def test_default_error_handlers(self, reader_for, capsys):
        ran = []
        menu = MenuBuilder().add_item("One", lambda: ran.append(1)).build()
        menu.run(reader_for("x", "7", "1", "2"))
        out = capsys.readouterr().out
        assert "Failed to parse input, please try again." in out
        assert "Failed to run choice 7, please enter a number between 1 and 2" in out
        assert ran == [1]

    def test_custom_error_handlers(self, reader_for):
        bad, oob = [], []
        menu = (
            MenuBuilder()
            .invalid_choice_handler(bad.append)
            .out_of_bounds_handler(oob.append)
            .exit_item(MenuItem("Quit", noop))
            .build()
        )
        menu.run(reader_for("nope", "0", "1"))
        assert bad == ["nope"]
        assert oob == ["0"]

    def test_end_of_input_stops_loop(self, reader_for):
        ran = []
        menu = MenuBuilder().add_item("One", lambda: ran.append(1)).build()
        menu.run(reader_for("1"))
        assert ran == [1]

    def test_end_of_input_inside_action_stops_loop(self, reader_for):
        seen = []

        def ask_more(reader):
            seen.append(reader.get_line("More: "))

        reader = reader_for("1")
        menu = MenuBuilder().add_item("Ask", lambda: ask_more(reader)).build()
        menu.run(reader)
        assert seen == []

    def test_exit_item_listed_twice_only_last_number_exits(self, reader_for):
        ran = []
        quit_item = MenuItem("Quit", lambda: ran.append("quit"))
        menu = MenuBuilder().add_item(quit_item).exit_item(quit_item).build()
        menu.run(reader_for("1", "1", "2", "1"))
        assert ran == ["quit", "quit", "quit"]

    def test_prompt_shows_full_menu(self, reader_for):
        shown = []

        class Reader:
            def get_line(self, prompt=""):
                shown.append(prompt)
                return "1"

        MenuBuilder().welcome("Hi").exit_item(MenuItem("Bye", noop)).build().run(Reader())
        assert shown == ["Hi\n\t1. Bye\nEnter your choice: "]
