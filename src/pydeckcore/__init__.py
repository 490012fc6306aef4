"""
pydeckcore - low-level front end for keyword-based simulation decks.

This package provides tools for:
- Splitting deck text into keywords and raw records
- Building the report-step timeline from START, DATES and TSTEP
- Querying month and year reporting boundaries
"""

from __future__ import annotations

__version__ = "0.1.0"

from pydeckcore.core.exceptions import (
    DeckError,
    DeckFormatError,
    InvalidDateError,
    InvalidKeywordError,
    OrderingError,
    TimeIndexError,
    TimelineError,
    UnknownMonthError,
)
from pydeckcore.core.timeline import DateRecord, DurationRecord, KeywordOccurrence, Timeline
from pydeckcore.io.config import TokenizerConfig
from pydeckcore.io.raw_keyword import RawKeyword, RawRecord, RawTokenizer, tokenize
from pydeckcore.io.schedule import read_timeline, timeline_from_lines

__all__ = [
    "__version__",
    # Timeline
    "Timeline",
    "KeywordOccurrence",
    "DateRecord",
    "DurationRecord",
    # Tokenizer
    "TokenizerConfig",
    "RawKeyword",
    "RawRecord",
    "RawTokenizer",
    "tokenize",
    # Readers
    "read_timeline",
    "timeline_from_lines",
    # Exceptions
    "DeckError",
    "TimelineError",
    "OrderingError",
    "InvalidDateError",
    "TimeIndexError",
    "UnknownMonthError",
    "DeckFormatError",
    "InvalidKeywordError",
]
