"""Custom exceptions for pydeckcore package."""

from __future__ import annotations


class DeckError(Exception):
    """Base exception for all pydeckcore errors."""

    pass


class TimelineError(DeckError):
    """Error related to timeline construction or queries."""

    pass


class OrderingError(TimelineError):
    """Error raised when a time is not strictly after the last one."""

    def __init__(
        self, message: str, new_time: int | None = None, last_time: int | None = None
    ) -> None:
        super().__init__(message)
        self.new_time = new_time
        self.last_time = last_time


class InvalidDateError(TimelineError):
    """Error raised when a calendar date does not exist (e.g. February 30)."""

    pass


class TimeIndexError(TimelineError):
    """Error raised when a timeline index is out of range."""

    def __init__(self, message: str, index: int | None = None) -> None:
        super().__init__(message)
        self.index = index


class UnknownMonthError(TimelineError):
    """Error raised when a month name is not in the month table."""

    pass


class DeckFormatError(DeckError):
    """Error raised when deck text is malformed."""

    def __init__(self, message: str, line_number: int | None = None) -> None:
        super().__init__(message)
        self.line_number = line_number


class InvalidKeywordError(DeckFormatError):
    """Error raised when a keyword name fails the lexical rule."""

    pass
