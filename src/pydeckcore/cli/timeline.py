"""
CLI subcommand for printing the report-step timeline of a deck.

Usage::

    pydeckcore timeline <deck> [--months | --years] [--frequency N]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path


def add_timeline_parser(
    subparsers: argparse._SubParsersAction,  # type: ignore[type-arg]
    parents: list[argparse.ArgumentParser] | None = None,
) -> None:
    """Register the ``pydeckcore timeline`` subcommand."""
    p = subparsers.add_parser(
        "timeline",
        help="Print the report steps defined by START, DATES and TSTEP",
        parents=parents or [],
    )
    p.add_argument("deck", type=str, help="Deck file")
    group = p.add_mutually_exclusive_group()
    group.add_argument(
        "--months",
        action="store_true",
        help="Only print steps that start a reporting period of calendar months",
    )
    group.add_argument(
        "--years",
        action="store_true",
        help="Only print steps that start a reporting period of calendar years",
    )
    p.add_argument(
        "--frequency",
        type=int,
        default=1,
        help="Months or years per reporting period (default: 1)",
    )
    p.add_argument(
        "--start-step",
        type=int,
        default=0,
        help="Report step the period counting is anchored near (default: 0)",
    )
    p.set_defaults(func=run_timeline)


def run_timeline(args: argparse.Namespace) -> int:
    """Build and print the timeline of a deck."""
    from pydeckcore.core.dates import SECONDS_PER_DAY, to_datetime
    from pydeckcore.core.exceptions import DeckError
    from pydeckcore.io.schedule import read_timeline

    deck_path = Path(args.deck)
    if not deck_path.exists():
        print(f"Error: deck not found: {deck_path}", file=sys.stderr)
        return 1

    try:
        timeline = read_timeline(deck_path)
    except DeckError as exc:
        line = getattr(exc, "line_number", None)
        where = f" (line {line})" if line is not None else ""
        print(f"Error: {exc}{where}", file=sys.stderr)
        return 1

    periodic = args.months or args.years
    months = set(timeline.first_timestep_months)
    years = set(timeline.first_timestep_years)

    for step, t in enumerate(timeline):
        if periodic and not timeline.is_first_of_period(
            step, years=args.years, start_timestep=args.start_step, frequency=args.frequency
        ):
            continue
        if step < timeline.n_timesteps:
            length = f"{timeline.get_timestep_length(step) / SECONDS_PER_DAY:10.4f}"
        else:
            length = " " * 10
        markers = ("M" if step in months else " ") + ("Y" if step in years else " ")
        print(f"{step:6d}  {to_datetime(t):%Y-%m-%d %H:%M:%S}  {length}  {markers}")

    total_days = timeline.total_time / SECONDS_PER_DAY
    print(f"{timeline.n_timesteps} report steps, {total_days:.4f} days")
    return 0
