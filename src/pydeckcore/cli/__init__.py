"""
pydeckcore command-line interface.

Usage:
    pydeckcore timeline <deck> [options]    Print the report-step timeline
    pydeckcore tokenize <deck> [options]    List keywords and record counts
    python -m pydeckcore <command>          Same as above
"""

from __future__ import annotations

import argparse
import logging


def _common_parser() -> argparse.ArgumentParser:
    """Options accepted both before and after the subcommand name."""
    common = argparse.ArgumentParser(add_help=False)
    # SUPPRESS keeps a subcommand default from overwriting a -v given earlier
    common.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS,
        help="Enable verbose logging",
    )
    return common


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    common = _common_parser()
    parser = argparse.ArgumentParser(
        prog="pydeckcore",
        description="Keyword tokenizer and report-step timeline for simulation decks.",
        parents=[common],
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Register subcommands
    from pydeckcore.cli.keywords import add_tokenize_parser
    from pydeckcore.cli.timeline import add_timeline_parser

    add_timeline_parser(subparsers, parents=[common])
    add_tokenize_parser(subparsers, parents=[common])

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    verbose = getattr(args, "verbose", False)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Dispatch to the subcommand handler
    result: int = args.func(args)
    return result


__all__ = ["main"]
