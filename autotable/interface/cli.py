#!/usr/bin/env python3
# autotable/interface/cli.py
from __future__ import annotations

"""
Interactive input frontends.

Selection order:
    1) prompt_toolkit (line editing + in-session history) on a terminal
    2) plain line reading from a stream (pipes, files, tests)
"""

import sys
from typing import IO, Any, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory

from autotable.ui import PRINT_MUTEX


class BaseCLI:
    """
    Base interface for CLI frontends.

    Subclasses should implement:
        - setup()
        - get_line(prompt)
        - teardown()

    get_line raises EOFError when no more input is available.
    This base also provides context manager support to guarantee teardown.
    """

    def setup(self) -> None:  # pragma: no cover - interface
        ...

    def get_line(self, prompt: str = "") -> str:  # pragma: no cover - interface
        raise EOFError

    def teardown(self) -> None:  # pragma: no cover - interface
        ...

    # Context manager helpers
    def __enter__(self) -> "BaseCLI":
        self.setup()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.teardown()


# ===== Preferred: prompt_toolkit =====
class PromptToolkitCLI(BaseCLI):
    """Line editor with history for interactive terminals."""

    def __init__(self) -> None:
        self._session: PromptSession[str] = PromptSession(history=InMemoryHistory())

    def get_line(self, prompt: str = "") -> str:
        # Ctrl-D raises EOFError, Ctrl-C KeyboardInterrupt; both propagate.
        return self._session.prompt(prompt)


# ===== Fallback: plain stream =====
class StreamCLI(BaseCLI):
    """
    Reads lines from a text stream, echoing prompts to `output`.

    Used for non-interactive stdin and in tests.
    """

    def __init__(self, stream: IO[str], output: Optional[IO[Any]] = None) -> None:
        self.stream = stream
        self.output = output

    def get_line(self, prompt: str = "") -> str:
        if prompt and self.output is not None:
            with PRINT_MUTEX:
                self.output.write(prompt)
                self.output.flush()
        line = self.stream.readline()
        if line == "":
            raise EOFError("end of input")
        return line.rstrip("\r\n")


def make_cli(stdin: Optional[IO[str]] = None, stdout: Optional[IO[Any]] = None) -> BaseCLI:
    """
    Factory to select the best CLI frontend for the current streams.
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    if stdin.isatty() and stdout.isatty():
        return PromptToolkitCLI()
    return StreamCLI(stdin, stdout)
