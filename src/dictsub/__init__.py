"""dictsub - word-for-word dictionary substitution for text streams.

Usage:
    cat input.txt | dictsub words.txt

``words.txt`` holds one ``word:translation`` pair per line.
"""

from .dictionary import load_dictionary, load_entries, parse_entries
from .engine import SubstitutionResult, substitute
from .table import Dictionary, Entry, build_dictionary, next_prime_above

__version__ = "0.1.0"

__all__ = [
    "Dictionary",
    "Entry",
    "SubstitutionResult",
    "build_dictionary",
    "load_dictionary",
    "load_entries",
    "next_prime_above",
    "parse_entries",
    "substitute",
]
