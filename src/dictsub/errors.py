"""Exception hierarchy for fatal dictsub faults.

Every exception here terminates the program with exit status 2. An
unmatched word is not an error; it is reported through the exit status of
a successful run.
"""

from __future__ import annotations

from pathlib import Path


class DictsubError(Exception):
    """Base class for fatal faults."""

    exit_code = 2


class UsageError(DictsubError):
    """Invalid command line or configuration."""


class ConfigError(UsageError):
    """A configuration value from the CLI or environment is invalid."""


class LoadError(DictsubError):
    """The dictionary file could not be turned into a dictionary."""


class DictionaryFileError(LoadError):
    def __init__(self, path: Path, reason: str = "could not be opened") -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Error opening file {path}: {reason}")


class MalformedLineError(LoadError):
    def __init__(self, line_number: int, reason: str) -> None:
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"wrong dictionary format in line {line_number}: {reason}")


class DuplicateKeyError(LoadError):
    def __init__(self, word: str) -> None:
        self.word = word
        super().__init__(f"wrong dictionary format, found duplicate: <{word}>")


class OutOfMemoryError(DictsubError):
    """An allocation for the table or a token buffer failed."""


class InvalidInputError(DictsubError):
    def __init__(self, offset: int, value: int) -> None:
        self.offset = offset
        self.value = value
        super().__init__(
            f"wrong input format due to non valid character 0x{value:02x} at byte {offset}"
        )


class CorruptTableError(DictsubError):
    """Probing visited every slot without resolving; the sizing invariant is broken."""
