"""Core data structures for pydeckcore."""

from __future__ import annotations

from pydeckcore.core.dates import (
    DEFAULT_START_DATE,
    MONTH_INDICES,
    make_date,
    make_datetime,
    month_index,
    to_datetime,
)
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
from pydeckcore.core.timeline import (
    DateRecord,
    DurationRecord,
    KeywordOccurrence,
    Timeline,
    is_in_frequency_sequence,
)

__all__ = [
    # Dates
    "DEFAULT_START_DATE",
    "MONTH_INDICES",
    "make_date",
    "make_datetime",
    "month_index",
    "to_datetime",
    # Timeline
    "Timeline",
    "KeywordOccurrence",
    "DateRecord",
    "DurationRecord",
    "is_in_frequency_sequence",
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
