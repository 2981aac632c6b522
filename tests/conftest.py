"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Allow running the suite from a checkout without installing the package
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from dictsub.table import Entry, build_dictionary


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep DICTSUB_* settings from the developer's shell out of the tests."""
    for name in ("DICTSUB_LOG_FILE", "DICTSUB_READ_SIZE", "DICTSUB_VERBOSE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_dictionary():
    """Build a Dictionary from ``word:translation`` strings."""

    def _make(*pairs):
        entries = []
        for pair in pairs:
            word, translation = pair.split(":", 1)
            entries.append(Entry(word, translation))
        return build_dictionary(entries)

    return _make


@pytest.fixture
def write_dictionary(tmp_path):
    """Write dictionary lines to a file and return its path."""

    def _write(lines, name="words.txt", newline="\n"):
        path = tmp_path / name
        path.write_bytes("".join(line + newline for line in lines).encode("utf-8"))
        return path

    return _write
