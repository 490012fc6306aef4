"""
Reader for the temporal keywords of a deck.

Interprets the raw records of ``START``, ``DATES`` and ``TSTEP`` and
builds a :class:`~pydeckcore.core.timeline.Timeline` from them. All
other keywords are skipped.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator

from pydeckcore.core.exceptions import DeckFormatError
from pydeckcore.core.timeline import (
    DATES_KEYWORD,
    START_KEYWORD,
    TSTEP_KEYWORD,
    DateRecord,
    DurationRecord,
    KeywordOccurrence,
    Timeline,
)
from pydeckcore.io.config import TokenizerConfig
from pydeckcore.io.deck_reader import expand_repeats, parse_float, parse_int, read_deck_lines
from pydeckcore.io.raw_keyword import RawKeyword, RawRecord, tokenize

logger = logging.getLogger(__name__)

TIMELINE_KEYWORDS = frozenset({START_KEYWORD, DATES_KEYWORD, TSTEP_KEYWORD})


def _is_defaulted(value: str) -> bool:
    return value.endswith("*") and value[:-1].isdigit()


def date_record_from_raw(record: RawRecord, keyword: str = DATES_KEYWORD) -> DateRecord:
    """
    Interpret a raw ``START``/``DATES`` record.

    Only the day, month, year and optional time fields are read; any
    further fields are ignored.

    Raises:
        DeckFormatError: If the record has fewer than three fields or
            the day or year is not an integer.
    """
    line = record.line_number
    if len(record) < 3:
        raise DeckFormatError(
            f"{keyword} record needs day, month and year, got {list(record.fields)}",
            line_number=line,
        )
    day = parse_int(record[0], f"{keyword} day", line)
    year = parse_int(record[2], f"{keyword} year", line)
    time = None
    if len(record) > 3 and not _is_defaulted(record[3]):
        time = record[3]
    return DateRecord(day=day, month=record[1], year=year, time=time)


def duration_record_from_raw(record: RawRecord, keyword: str = TSTEP_KEYWORD) -> DurationRecord:
    """Interpret a raw ``TSTEP`` record; ``N*value`` repeats are expanded."""
    line = record.line_number
    values = expand_repeats(list(record.fields), line_number=line)
    days = tuple(parse_float(v, f"{keyword} step length", line) for v in values)
    return DurationRecord(days=days)


def keyword_occurrence(keyword: RawKeyword) -> KeywordOccurrence | None:
    """Interpret a raw keyword, or return ``None`` if it is not temporal."""
    if keyword.name not in TIMELINE_KEYWORDS:
        return None
    if keyword.name == TSTEP_KEYWORD:
        records = tuple(duration_record_from_raw(r, keyword.name) for r in keyword.records)
    else:
        records = tuple(date_record_from_raw(r, keyword.name) for r in keyword.records)
    return KeywordOccurrence(name=keyword.name, records=records)


def iter_occurrences(keywords: Iterable[RawKeyword]) -> Iterator[KeywordOccurrence]:
    """Yield the interpreted temporal keywords of *keywords* in deck order."""
    for keyword in keywords:
        occurrence = keyword_occurrence(keyword)
        if occurrence is not None:
            yield occurrence


def timeline_from_lines(lines: Iterable[str], config: TokenizerConfig | None = None) -> Timeline:
    """Tokenize deck lines and build their timeline."""
    keywords = tokenize(lines, config)
    logger.debug("Tokenized %d keywords", len(keywords))
    return Timeline.from_deck(iter_occurrences(keywords))


def read_timeline(filepath: Path | str, config: TokenizerConfig | None = None) -> Timeline:
    """Read a deck file and build its timeline.

    Args:
        filepath: Path to the deck
        config: Lexical rules for the tokenizer

    Returns:
        Timeline of the deck's report steps
    """
    logger.info("Reading timeline from %s", filepath)
    return timeline_from_lines(read_deck_lines(filepath), config)
