"""Streaming word substitution over a byte stream.

Input is split into maximal runs of ASCII letters (tokens) and everything
else (separators). Separators are copied through unchanged. Each token is
looked up in lowercase; a hit is replaced by its translation, with the
first letter uppercased when the token started uppercase, and a miss is
echoed as ``<token>``.

Only newline and printable ASCII may appear in the input. Any other byte
flushes the pending token and then aborts with :class:`InvalidInputError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO

from .errors import InvalidInputError, OutOfMemoryError
from .table import Dictionary

DEFAULT_READ_SIZE = 64 * 1024
INITIAL_TOKEN_CAPACITY = 1024

UPPERCASE = frozenset(range(ord("A"), ord("Z") + 1))
LOWERCASE = frozenset(range(ord("a"), ord("z") + 1))
LETTERS = UPPERCASE | LOWERCASE
VALID_BYTES = frozenset(range(0x20, 0x7F)) | {ord("\n")}


def is_letter(byte: int) -> bool:
    return byte in LETTERS


def is_uppercase(byte: int) -> bool:
    return byte in UPPERCASE


def is_valid(byte: int) -> bool:
    return byte in VALID_BYTES


def capitalize_first(text: str) -> str:
    """Uppercase the first character if it is ``a``-``z``; leave the rest alone."""

    if text and "a" <= text[0] <= "z":
        return text[0].upper() + text[1:]
    return text


class TokenBuffer:
    """Byte buffer for the token being scanned.

    Storage starts at ``initial_capacity`` bytes and doubles whenever a push
    finds it full, so tokens of any length fit.
    """

    def __init__(self, initial_capacity: int = INITIAL_TOKEN_CAPACITY) -> None:
        if initial_capacity < 1:
            raise ValueError("initial_capacity must be positive")
        self._data = bytearray(initial_capacity)
        self._length = 0

    @property
    def capacity(self) -> int:
        return len(self._data)

    def __len__(self) -> int:
        return self._length

    def __bytes__(self) -> bytes:
        return bytes(self._data[: self._length])

    def push(self, byte: int) -> None:
        if self._length == len(self._data):
            self._grow()
        self._data[self._length] = byte
        self._length += 1

    def clear(self) -> None:
        self._length = 0

    def _grow(self) -> None:
        try:
            self._data.extend(bytes(len(self._data)))
        except MemoryError as exc:
            raise OutOfMemoryError(
                f"could not grow token buffer beyond {len(self._data)} bytes"
            ) from exc


@dataclass(slots=True)
class SubstitutionResult:
    matched: int = 0
    unmatched: int = 0
    bytes_read: int = 0

    @property
    def had_unmatched(self) -> bool:
        return self.unmatched > 0

    def to_dict(self) -> dict:
        return {
            "matched": self.matched,
            "unmatched": self.unmatched,
            "bytes_read": self.bytes_read,
        }


class SubstitutionEngine:
    """Incremental tokenizer; feed it blocks and call :meth:`finish` at end of input."""

    def __init__(self, dictionary: Dictionary, sink: BinaryIO) -> None:
        self.dictionary = dictionary
        self.sink = sink
        self.token = TokenBuffer()
        self.result = SubstitutionResult()

    def feed(self, block: bytes) -> None:
        out = bytearray()
        try:
            for byte in block:
                if is_letter(byte):
                    self.token.push(byte)
                elif is_valid(byte):
                    if self.token:
                        self._flush_token(out)
                    out.append(byte)
                else:
                    if self.token:
                        self._flush_token(out)
                    raise InvalidInputError(self.result.bytes_read, byte)
                self.result.bytes_read += 1
        finally:
            if out:
                self.sink.write(out)

    def finish(self) -> SubstitutionResult:
        if self.token:
            out = bytearray()
            self._flush_token(out)
            self.sink.write(out)
        return self.result

    def _flush_token(self, out: bytearray) -> None:
        word = bytes(self.token)
        self.token.clear()
        translation = self.dictionary.lookup(word.lower().decode("ascii"))
        if translation is None:
            self.result.unmatched += 1
            out += b"<" + word + b">"
            return
        self.result.matched += 1
        if is_uppercase(word[0]):
            translation = capitalize_first(translation)
        out += translation.encode("utf-8")


def substitute(
    source: BinaryIO,
    sink: BinaryIO,
    dictionary: Dictionary,
    *,
    read_size: int = DEFAULT_READ_SIZE,
) -> SubstitutionResult:
    """Copy ``source`` to ``sink``, translating every word found in ``dictionary``."""

    engine = SubstitutionEngine(dictionary, sink)
    while True:
        block = source.read(read_size)
        if not block:
            break
        engine.feed(block)
    return engine.finish()
