from __future__ import annotations

import re
from pathlib import Path
from typing import BinaryIO, Iterable, Iterator, List

from .errors import DictionaryFileError, MalformedLineError
from .table import Dictionary, Entry, build_dictionary

WORD_PATTERN = re.compile(r"[a-z]+")


def parse_line(line: str, line_number: int) -> Entry:
    """Split one ``word:translation`` line (terminator already removed)."""

    if ":" not in line:
        raise MalformedLineError(line_number, "missing ':' separator")
    word, translation = line.split(":", 1)
    if not word:
        raise MalformedLineError(line_number, "empty word")
    if not WORD_PATTERN.fullmatch(word):
        raise MalformedLineError(line_number, f"word {word!r} is not lowercase a-z")
    if ":" in translation:
        raise MalformedLineError(line_number, "more than one ':'")
    if not translation:
        raise MalformedLineError(line_number, "empty translation")
    if not translation.isprintable():
        raise MalformedLineError(line_number, "translation contains non-printable characters")
    return Entry(word=word, translation=translation)


def parse_entries(lines: Iterable[str]) -> List[Entry]:
    """Parse dictionary lines into entries, keeping file order.

    Each line may still carry its ``\\n`` or ``\\r\\n`` terminator; a missing
    terminator on the last line is fine.
    """

    return [
        parse_line(line.rstrip("\r\n"), line_number)
        for line_number, line in enumerate(lines, start=1)
    ]


def _decoded_lines(handle: BinaryIO) -> Iterator[str]:
    for line_number, raw in enumerate(handle, start=1):
        try:
            yield raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedLineError(line_number, "not valid UTF-8") from exc


def load_entries(path: Path) -> List[Entry]:
    try:
        with path.open("rb") as handle:
            return parse_entries(_decoded_lines(handle))
    except OSError as exc:
        raise DictionaryFileError(path, exc.strerror or str(exc)) from exc


def load_dictionary(path: Path) -> Dictionary:
    """Load a ``word:translation`` file into a hash table, rejecting duplicates."""

    return build_dictionary(load_entries(path))
