"""
Calendar helpers for deck dates.

Deck times are integer seconds since 1970-01-01 00:00:00 UTC. All
calendar decomposition is done in UTC so that daylight-saving shifts
never move a time into a different day.
"""

from __future__ import annotations

import calendar
import logging
import re
from datetime import datetime, timedelta, timezone
from types import MappingProxyType
from typing import Mapping

from pydeckcore.core.exceptions import InvalidDateError, UnknownMonthError

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60

# Start date assumed when a deck has no START keyword (1 JAN 1983).
DEFAULT_START_DATE = (1983, 1, 1)

# Three-letter month tokens, including the historical synonyms
# MAI, JLY, OKT and DES.
MONTH_INDICES: Mapping[str, int] = MappingProxyType(
    {
        "JAN": 1,
        "FEB": 2,
        "MAR": 3,
        "APR": 4,
        "MAI": 5,
        "MAY": 5,
        "JUN": 6,
        "JUL": 7,
        "JLY": 7,
        "AUG": 8,
        "SEP": 9,
        "OCT": 10,
        "OKT": 10,
        "NOV": 11,
        "DEC": 12,
        "DES": 12,
    }
)

# timedelta arithmetic from a fixed epoch works for times before 1970
# on every platform, unlike datetime.utcfromtimestamp().
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Leading integer of each of the three fields; anything after the seconds
# (e.g. a fraction) is ignored.
_TIME_OF_DAY = re.compile(r"\s*([+-]?\d+):\s*([+-]?\d+):\s*([+-]?\d+)")


def month_index(name: str) -> int:
    """Return the month number (1-12) for a deck month token.

    Raises:
        UnknownMonthError: If *name* is not in :data:`MONTH_INDICES`.
    """
    key = name.strip().strip("'\"").upper()
    try:
        return MONTH_INDICES[key]
    except KeyError:
        raise UnknownMonthError(f"Unknown month name: {name!r}") from None


def to_datetime(t: int) -> datetime:
    """Convert deck seconds to a timezone-aware UTC datetime."""
    return _EPOCH + timedelta(seconds=t)


def date_values_utc(t: int) -> tuple[int, int, int]:
    """Return the UTC ``(day, month, year)`` of time *t*."""
    dt = to_datetime(t)
    return dt.day, dt.month, dt.year


def make_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
) -> int:
    """
    Compose a UTC time from calendar fields.

    ``calendar.timegm`` happily wraps dates like January 33 into the
    following month, so the result is decomposed again and rejected
    unless it reproduces the same day, month and year.

    Raises:
        InvalidDateError: If the fields do not name a real calendar date.
    """
    try:
        t = calendar.timegm((year, month, day, hour, minute, second, 0, 0, 0))
        out_day, out_month, out_year = date_values_utc(t)
    except (ValueError, OverflowError) as exc:
        raise InvalidDateError(
            f"Invalid input arguments for date: {year:04d}-{month:02d}-{day:02d}"
        ) from exc

    if (out_day, out_month, out_year) != (day, month, year):
        raise InvalidDateError(
            f"Invalid input arguments for date: {year:04d}-{month:02d}-{day:02d}"
        )
    return t


def make_date(year: int, month: int, day: int) -> int:
    """Compose a UTC time at midnight of the given date."""
    return make_datetime(year, month, day)


def parse_time_of_day(text: str | None) -> tuple[int, int, int]:
    """Parse an ``HH:MM:SS`` string into ``(hour, minute, second)``.

    Only the leading integer of each field is read, so ``12:30:15.5``
    gives ``(12, 30, 15)``. Text without three colon-separated integers
    yields midnight.
    """
    if text is None:
        return 0, 0, 0
    value = text.strip().strip("'\"")
    if not value:
        return 0, 0, 0
    match = _TIME_OF_DAY.match(value)
    if match is None:
        logger.warning("Could not parse time of day %r, using 00:00:00", text)
        return 0, 0, 0
    hour, minute, second = (int(g) for g in match.groups())
    return hour, minute, second


def forward(t: int, seconds: int) -> int:
    """Return *t* moved forward by *seconds*."""
    return t + seconds


def forward_hms(t: int, hours: int, minutes: int, seconds: int) -> int:
    """Return *t* moved forward by a number of hours, minutes and seconds."""
    return t + seconds + minutes * 60 + hours * 3600


def days_to_seconds(days: float) -> int:
    """Convert a (fractional) day count to whole seconds, truncating."""
    return int(days * SECONDS_PER_DAY)
