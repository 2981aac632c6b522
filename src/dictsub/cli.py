from __future__ import annotations

import argparse
from typing import Sequence


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dictsub",
        usage="cat input | %(prog)s [options] dictionary",
        description=(
            "Replace every word read from standard input with its translation from a "
            "word:translation dictionary. Unknown words are printed as <word>."
        ),
        epilog="Exit status: 0 all words translated, 1 some words unknown, 2 error.",
    )
    parser.add_argument(
        "dictionary",
        help="Path to the dictionary file, one word:translation pair per line.",
    )
    parser.add_argument(
        "--log-file",
        help="Append diagnostics to this file (default: $DICTSUB_LOG_FILE, if set).",
    )
    parser.add_argument(
        "--read-size",
        type=int,
        help="Number of bytes read from standard input at a time.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print a summary of the loaded dictionary and the substitution to stderr.",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only report fatal errors on stderr.",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    return parser.parse_args(argv)
