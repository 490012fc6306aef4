"""
CLI subcommand for listing the keywords of a deck.

Usage::

    pydeckcore tokenize <deck> [--single-record KEYWORD ...] [--records]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path


def add_tokenize_parser(
    subparsers: argparse._SubParsersAction,  # type: ignore[type-arg]
    parents: list[argparse.ArgumentParser] | None = None,
) -> None:
    """Register the ``pydeckcore tokenize`` subcommand."""
    p = subparsers.add_parser(
        "tokenize",
        help="List the keywords of a deck with their record counts",
        parents=parents or [],
    )
    p.add_argument("deck", type=str, help="Deck file")
    p.add_argument(
        "--single-record",
        action="append",
        default=[],
        metavar="KEYWORD",
        help="Treat every data line of KEYWORD as one record (repeatable)",
    )
    p.add_argument(
        "--records",
        action="store_true",
        default=False,
        help="Also print the fields of every record",
    )
    p.set_defaults(func=run_tokenize)


def run_tokenize(args: argparse.Namespace) -> int:
    """Tokenize a deck and print its keywords."""
    from pydeckcore.core.exceptions import DeckError
    from pydeckcore.io.config import TokenizerConfig
    from pydeckcore.io.deck_reader import read_deck_lines
    from pydeckcore.io.raw_keyword import tokenize

    deck_path = Path(args.deck)
    if not deck_path.exists():
        print(f"Error: deck not found: {deck_path}", file=sys.stderr)
        return 1

    config = TokenizerConfig(single_record_keywords=frozenset(args.single_record))
    try:
        keywords = tokenize(read_deck_lines(deck_path), config)
    except DeckError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for keyword in keywords:
        print(f"{keyword.name:<8s}  line {keyword.line_number}  {len(keyword)} records")
        if args.records:
            for record in keyword:
                suffix = "" if record.complete else "  (unterminated)"
                print(f"    {' '.join(record.fields)}{suffix}")
    print(f"{len(keywords)} keywords")
    return 0
