"""
Shared test fixtures for autotable tests.
Keeps every test away from the developer's real config files and terminal.
"""

import io
import os

import pytest

from autotable.interface import StreamCLI


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch, tmp_path):
    """Run each test in an empty directory with no AUTOTABLE_* variables and no colour."""
    for key in list(os.environ):
        if key.startswith("AUTOTABLE_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def reader_for():
    """Build a StreamCLI fed with the given lines."""

    def make(*lines):
        text = "".join(f"{line}\n" for line in lines)
        return StreamCLI(io.StringIO(text))

    return make
