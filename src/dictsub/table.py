"""Open-addressing hash table holding the loaded dictionary.

Buckets are chosen with DJB2 plus a probe salt: the first probe uses salt 0
and each retry recomputes the full hash with the next salt. The table is
sized once to a prime above ``n + n // 2`` entries and never resized.

Entries are never removed, so an empty slot always ends a search. Adding
deletion would require tombstones.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence

from .errors import CorruptTableError, DuplicateKeyError, OutOfMemoryError

DJB2_SEED = 5381
_MASK64 = (1 << 64) - 1


@dataclass(frozen=True, slots=True)
class Entry:
    """A single ``word -> translation`` pair read from the dictionary file."""

    word: str
    translation: str


def djb2(word: str) -> int:
    """Return the 64-bit DJB2 hash of ``word`` (``h = h * 33 + c``, wrapping)."""

    value = DJB2_SEED
    for byte in word.encode("utf-8"):
        value = (value * 33 + byte) & _MASK64
    return value


def is_prime(n: int) -> bool:
    if n < 2:
        return False
    divisor = 2
    while divisor <= n // 2:
        if n % divisor == 0:
            return False
        divisor += 1
    return True


def next_prime_above(n: int) -> int:
    """Smallest prime strictly greater than ``n``.

    Plain trial division over odd candidates; it runs once per process.
    """

    if n < 2:
        return 2
    candidate = n + 1
    if candidate % 2 == 0:
        candidate += 1
    while not is_prime(candidate):
        candidate += 2
    return candidate


def capacity_for(entry_count: int) -> int:
    """Table size for ``entry_count`` entries: next prime above 1.5x the count."""

    return next_prime_above(entry_count + entry_count // 2)


class Dictionary:
    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        try:
            self._slots: List[Optional[Entry]] = [None] * capacity
        except MemoryError as exc:
            raise OutOfMemoryError(f"could not create dictionary of {capacity} slots") from exc
        self._capacity = capacity
        self._size = 0

    @classmethod
    def for_entry_count(cls, entry_count: int) -> "Dictionary":
        return cls(capacity_for(entry_count))

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def load_factor(self) -> float:
        return self._size / self._capacity

    def __len__(self) -> int:
        return self._size

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.lookup(word) is not None

    def __iter__(self) -> Iterator[Entry]:
        return (entry for entry in self._slots if entry is not None)

    def bucket(self, word: str, salt: int = 0) -> int:
        return ((djb2(word) + salt) & _MASK64) % self._capacity

    def _exhausted(self, word: str) -> CorruptTableError:
        return CorruptTableError(
            f"no free or matching slot for {word!r} after {self._capacity} probes"
        )

    def insert(self, entry: Entry) -> int:
        """Store ``entry`` in the first empty probed slot and return its index.

        The caller guarantees ``entry.word`` is not present yet; a second copy
        would be stored silently.
        """

        for salt in range(self._capacity):
            index = self.bucket(entry.word, salt)
            if self._slots[index] is None:
                self._slots[index] = entry
                self._size += 1
                return index
        raise self._exhausted(entry.word)

    def lookup(self, word: str) -> Optional[str]:
        for salt in range(self._capacity):
            entry = self._slots[self.bucket(word, salt)]
            if entry is None:
                return None
            if entry.word == word:
                return entry.translation
        raise self._exhausted(word)

    def load(self, entries: Iterable[Entry]) -> None:
        """Insert ``entries`` in order, rejecting the second copy of any word."""

        for entry in entries:
            if self.lookup(entry.word) is not None:
                raise DuplicateKeyError(entry.word)
            self.insert(entry)


def build_dictionary(entries: Sequence[Entry]) -> Dictionary:
    table = Dictionary.for_entry_count(len(entries))
    table.load(entries)
    return table
