"""
Report-step timeline for simulation decks.

This module turns the temporal keywords of a deck (``START``, ``DATES``
and ``TSTEP``) into an ordered list of absolute times. Index 0 is the
start of the simulation and index *i* is the start of report step *i*,
so a timeline with *n* entries describes *n - 1* report steps.

Times are integer seconds since 1970-01-01 00:00:00 UTC.
"""

from __future__ import annotations

import logging
from bisect import bisect_left
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator, Sequence, Union

import numpy as np
from numpy.typing import NDArray

from pydeckcore.core.dates import (
    DEFAULT_START_DATE,
    date_values_utc,
    days_to_seconds,
    forward,
    make_date,
    make_datetime,
    month_index,
    parse_time_of_day,
    to_datetime,
)
from pydeckcore.core.exceptions import DeckFormatError, OrderingError, TimeIndexError

if TYPE_CHECKING:
    import pandas as pd

logger = logging.getLogger(__name__)

START_KEYWORD = "START"
DATES_KEYWORD = "DATES"
TSTEP_KEYWORD = "TSTEP"


@dataclass(frozen=True)
class DateRecord:
    """
    One date record of a ``START`` or ``DATES`` keyword.

    Attributes:
        day: Day of month
        month: Month token (e.g. ``JAN``, ``JLY``)
        year: Four-digit year
        time: Optional time of day as ``HH:MM:SS``
    """

    day: int
    month: str
    year: int
    time: str | None = None


@dataclass(frozen=True)
class DurationRecord:
    """Day counts of a ``TSTEP`` keyword, one per report step."""

    days: tuple[float, ...]


DeckRecord = Union[DateRecord, DurationRecord]


@dataclass(frozen=True)
class KeywordOccurrence:
    """A keyword of the deck together with its interpreted records."""

    name: str
    records: tuple[DeckRecord, ...] = ()


def time_from_record(record: DateRecord) -> int:
    """Convert a date record to deck seconds.

    Raises:
        UnknownMonthError: If the month token is not recognised.
        InvalidDateError: If the date does not exist.
    """
    hour, minute, second = parse_time_of_day(record.time)
    return make_datetime(
        record.year,
        month_index(record.month),
        record.day,
        hour,
        minute,
        second,
    )


def is_in_frequency_sequence(
    timesteps: Sequence[int],
    timestep: int,
    start_timestep: int,
    frequency: int,
) -> bool:
    """
    Check whether *timestep* is every *frequency*'th entry of *timesteps*.

    Counting starts at the entry for *start_timestep*; if that is not in
    *timesteps*, the first entry greater than it is used instead. When
    no such entry exists there is no anchor and the answer is ``False``.

    Args:
        timesteps: Sorted indices of first-of-month or first-of-year steps
        timestep: Index to test
        start_timestep: Index the period counting is anchored near
        frequency: Period length in months or years

    Returns:
        True if *timestep* falls on the requested period boundary
    """
    position = bisect_left(timesteps, timestep)
    if position == len(timesteps) or timesteps[position] != timestep:
        return False
    if frequency <= 1:
        return True

    anchor = bisect_left(timesteps, start_timestep)
    if anchor == len(timesteps) or position < anchor:
        return False
    return (position - anchor + 1) % frequency == 0


class Timeline:
    """
    Strictly increasing sequence of report-step times.

    Alongside the times, the indices at which a new calendar month or a
    new calendar year begins are recorded as times are added.

    Attributes:
        first_timestep_months: Indices whose month differs from the previous entry
        first_timestep_years: Indices whose year differs from the previous entry
    """

    def __init__(self, start_time: int) -> None:
        self._times: list[int] = [int(start_time)]
        self._first_timestep_months: list[int] = []
        self._first_timestep_years: list[int] = []

    @classmethod
    def from_deck(cls, keywords: Iterable[KeywordOccurrence]) -> Timeline:
        """
        Build a timeline from the keywords of a deck.

        The first ``START`` keyword gives the start date, 1 JAN 1983 if the
        deck has none. ``DATES`` and ``TSTEP`` keywords are then applied in
        deck order; all other keywords are ignored.

        Args:
            keywords: Keyword occurrences in deck order

        Returns:
            The populated Timeline
        """
        keywords = list(keywords)
        start = next((kw for kw in keywords if kw.name == START_KEYWORD), None)
        if start is None:
            timeline = cls(make_date(*DEFAULT_START_DATE))
        else:
            if not start.records or not isinstance(start.records[0], DateRecord):
                raise DeckFormatError("START keyword has no date record")
            timeline = cls(time_from_record(start.records[0]))

        for keyword in keywords:
            if keyword.name == TSTEP_KEYWORD:
                timeline.add_from_tstep_keyword(keyword)
            elif keyword.name == DATES_KEYWORD:
                timeline.add_from_dates_keyword(keyword)

        logger.info(
            "Built timeline with %d report steps (%s to %s)",
            timeline.n_timesteps,
            to_datetime(timeline.start_time).isoformat(),
            to_datetime(timeline.end_time).isoformat(),
        )
        return timeline

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def add_time(self, new_time: int) -> None:
        """
        Append a time to the timeline.

        Raises:
            OrderingError: If *new_time* is not after the last time. The
                timeline is left unchanged.
        """
        new_time = int(new_time)
        last_time = self._times[-1]
        if new_time <= last_time:
            raise OrderingError(
                "Times added must be in strictly increasing order.",
                new_time=new_time,
                last_time=last_time,
            )

        step = len(self._times)
        _, new_month, new_year = date_values_utc(new_time)
        _, last_month, last_year = date_values_utc(last_time)
        # A month start is any change of (month, year), so 15 JAN 2000 -> 10 JAN 2001
        # counts as one; comparing the month number alone would miss it.
        if new_month != last_month or new_year != last_year:
            self._first_timestep_months.append(step)
        if new_year != last_year:
            self._first_timestep_years.append(step)

        self._times.append(new_time)
        logger.debug("Report step %d starts at %s", step, to_datetime(new_time).isoformat())

    def add_timestep(self, seconds: int) -> None:
        """Append the last time moved forward by *seconds*."""
        self.add_time(forward(self._times[-1], seconds))

    def add_from_dates_keyword(self, keyword: KeywordOccurrence) -> None:
        """Append one time per record of a ``DATES`` keyword."""
        if keyword.name != DATES_KEYWORD:
            raise ValueError("Method requires DATES keyword input.")
        for record in keyword.records:
            if not isinstance(record, DateRecord):
                raise DeckFormatError(f"DATES keyword holds a non-date record: {record!r}")
            self.add_time(time_from_record(record))

    def add_from_tstep_keyword(self, keyword: KeywordOccurrence) -> None:
        """Append one time per day count of a ``TSTEP`` keyword."""
        if keyword.name != TSTEP_KEYWORD:
            raise ValueError("Method requires TSTEP keyword input.")
        for record in keyword.records:
            if not isinstance(record, DurationRecord):
                raise DeckFormatError(f"TSTEP keyword holds a non-duration record: {record!r}")
            for days in record.days:
                self.add_timestep(days_to_seconds(days))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def n_timesteps(self) -> int:
        """Return the number of report steps."""
        return len(self._times) - 1

    @property
    def last(self) -> int:
        """Return the index of the last report step boundary."""
        return self.n_timesteps

    @property
    def start_time(self) -> int:
        return self._times[0]

    @property
    def end_time(self) -> int:
        return self._times[-1]

    @property
    def total_time(self) -> float:
        """Return the seconds between the first and last time."""
        return float(self._times[-1] - self._times[0])

    @property
    def first_timestep_months(self) -> tuple[int, ...]:
        return tuple(self._first_timestep_months)

    @property
    def first_timestep_years(self) -> tuple[int, ...]:
        return tuple(self._first_timestep_years)

    def get_start_time(self, timestep: int) -> int:
        """Return the time at which report step *timestep* starts."""
        return self[timestep]

    def get_end_time(self) -> int:
        return self.end_time

    def get_timestep_length(self, timestep: int) -> float:
        """Return the length of report step *timestep* in seconds."""
        if not 0 <= timestep < self.n_timesteps:
            raise TimeIndexError(
                f"Report step {timestep} out of range (0-{self.n_timesteps - 1})",
                index=timestep,
            )
        return float(self._times[timestep + 1] - self._times[timestep])

    def get_time_passed_until(self, index: int) -> float:
        """Return the seconds elapsed from the start until entry *index*."""
        return float(self[index] - self._times[0])

    def is_first_of_period(
        self,
        timestep: int,
        years: bool = False,
        start_timestep: int = 0,
        frequency: int = 1,
    ) -> bool:
        """
        Check whether a report step starts a reporting period.

        Periods are calendar months (or years when *years* is set),
        taken every *frequency* periods counted from the period
        boundary at or after *start_timestep*.

        Args:
            timestep: Report step index to test
            years: Use calendar years instead of months
            start_timestep: Report step the counting is anchored near
            frequency: Number of months or years per reporting period

        Returns:
            True if *timestep* begins a reporting period
        """
        timesteps = self._first_timestep_years if years else self._first_timestep_months
        return is_in_frequency_sequence(timesteps, timestep, start_timestep, frequency)

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def to_datetime64(self) -> NDArray[np.datetime64]:
        """Return the times as a numpy ``datetime64[s]`` array."""
        return np.array(self._times, dtype=np.int64).astype("datetime64[s]")

    def to_dataframe(self) -> pd.DataFrame:
        """
        Convert to a pandas DataFrame.

        Returns:
            DataFrame indexed by report step with the start time, the
            elapsed days and first-of-month / first-of-year flags
        """
        import pandas as pd

        n = len(self._times)
        months = np.zeros(n, dtype=bool)
        months[self._first_timestep_months] = True
        years = np.zeros(n, dtype=bool)
        years[self._first_timestep_years] = True
        elapsed = (np.array(self._times, dtype=np.int64) - self._times[0]) / 86400.0

        df = pd.DataFrame(
            {
                "time": self.to_datetime64(),
                "elapsed_days": elapsed,
                "first_of_month": months,
                "first_of_year": years,
            }
        )
        df.index.name = "report_step"
        return df

    def __getitem__(self, index: int) -> int:
        if not 0 <= index < len(self._times):
            raise TimeIndexError("Index out of range", index=index)
        return self._times[index]

    def __len__(self) -> int:
        return len(self._times)

    def __iter__(self) -> Iterator[int]:
        return iter(self._times)

    def __repr__(self) -> str:
        return (
            f"Timeline(n_timesteps={self.n_timesteps}, "
            f"start={to_datetime(self.start_time).isoformat()}, "
            f"end={to_datetime(self.end_time).isoformat()})"
        )
