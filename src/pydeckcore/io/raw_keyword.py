"""
Raw keyword tokenizer for deck text.

A deck is a sequence of keywords, each a name in column 1 followed by
records of whitespace-separated fields terminated by ``/``::

    DATES
      1 JAN 2000 /
      1 'FEB' 2000 '12:00:00' /
    /

This module only groups text into keywords and records; the fields are
left as unparsed strings for the semantic layer above.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator

from pydeckcore.core.exceptions import DeckFormatError, InvalidKeywordError
from pydeckcore.io.config import DEFAULT_CONFIG, TokenizerConfig
from pydeckcore.io.deck_reader import (
    find_unquoted,
    is_comment_line,
    split_fields,
    strip_inline_comment,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RawRecord:
    """
    One record of a keyword as unparsed field strings.

    Attributes:
        fields: Field strings in record order, quotes removed
        line_number: Deck line on which the record starts
        complete: False if the record was cut off without a terminator
    """

    fields: tuple[str, ...]
    line_number: int | None = None
    complete: bool = True

    def __len__(self) -> int:
        return len(self.fields)

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)

    def __getitem__(self, index: int) -> str:
        return self.fields[index]


class RawKeyword:
    """
    A keyword name and the raw records that follow it.

    Record text is accumulated across physical lines until the record
    terminator is seen. A terminator on an empty record ends the keyword.
    """

    def __init__(
        self,
        name: str,
        config: TokenizerConfig = DEFAULT_CONFIG,
        line_number: int | None = None,
    ) -> None:
        name = name.strip()
        if not self.is_valid_keyword(name, config):
            raise InvalidKeywordError(f"Invalid keyword name: {name!r}", line_number=line_number)
        self._name = name
        self._config = config
        self._line_number = line_number
        self._records: list[RawRecord] = []
        self._partial = ""
        self._partial_line: int | None = None
        self._finished = False

    @staticmethod
    def is_valid_keyword(candidate: str, config: TokenizerConfig = DEFAULT_CONFIG) -> bool:
        """Check *candidate* against the keyword lexical rule."""
        return config.keyword_pattern.match(candidate) is not None

    @staticmethod
    def try_get_valid_keyword(line: str, config: TokenizerConfig = DEFAULT_CONFIG) -> str | None:
        """
        Return the keyword named on *line*, or ``None``.

        The name must start in column 1 and be the only token on the
        line apart from a trailing comment.
        """
        if not line or line[0].isspace():
            return None
        if is_comment_line(line, config.comment_prefix):
            return None
        candidate = strip_inline_comment(line, config.comment_prefix).strip()
        if RawKeyword.is_valid_keyword(candidate, config):
            return candidate
        return None

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def records(self) -> tuple[RawRecord, ...]:
        return tuple(self._records)

    @property
    def line_number(self) -> int | None:
        """Deck line of the keyword name."""
        return self._line_number

    @property
    def is_finished(self) -> bool:
        return self._finished

    @property
    def pending(self) -> str:
        """Record text seen but not yet terminated."""
        return self._partial

    # ------------------------------------------------------------------
    # Record assembly
    # ------------------------------------------------------------------

    def add_raw_record_string(self, text: str, line_number: int | None = None) -> None:
        """
        Add one physical line of record text.

        Every terminated record in the accumulated text is flushed into
        :attr:`records`. Text after the terminator of an empty record,
        which ends the keyword, is ignored.

        Raises:
            DeckFormatError: If the keyword is already finished.
        """
        if self._finished:
            raise DeckFormatError(
                f"Keyword {self._name} is finished, cannot add {text.strip()!r}",
                line_number=line_number,
            )

        content = strip_inline_comment(text, self._config.comment_prefix).strip()
        if not content:
            return

        if self._partial:
            self._partial = f"{self._partial} {content}"
        else:
            self._partial = content
            self._partial_line = line_number

        terminator = self._config.terminator
        while not self._finished:
            pos = find_unquoted(self._partial, terminator)
            if pos < 0:
                break
            record_text = self._partial[:pos].strip()
            rest = self._partial[pos + len(terminator) :].strip()
            self._partial = ""
            if record_text:
                self._flush(record_text, complete=True)
            else:
                self._finished = True
                if rest:
                    logger.debug("Ignoring text after end of %s: %r", self._name, rest)
                break
            self._partial = rest
            if rest:
                self._partial_line = line_number

        if self._partial and self._config.is_single_record(self._name):
            self._flush(self._partial, complete=True)
            self._partial = ""

    def finish(self) -> None:
        """
        Close the keyword.

        A pending unterminated record is kept as an incomplete record
        instead of being dropped.
        """
        if self._finished:
            return
        if self._partial.strip():
            logger.warning(
                "Keyword %s ends with an unterminated record: %r", self._name, self._partial
            )
            self._flush(self._partial, complete=False)
            self._partial = ""
        self._finished = True

    def _flush(self, record_text: str, complete: bool) -> None:
        record = RawRecord(
            fields=tuple(split_fields(record_text)),
            line_number=self._partial_line,
            complete=complete,
        )
        self._records.append(record)
        self._partial_line = None

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[RawRecord]:
        return iter(self._records)

    def __repr__(self) -> str:
        return f"RawKeyword(name='{self._name}', n_records={len(self._records)})"


class TokenizerState(Enum):
    """State of the raw tokenizer."""

    NO_GROUP = "no_group"
    IN_GROUP = "in_group"


class RawTokenizer:
    """
    Groups deck lines into :class:`RawKeyword` objects.

    Feed lines one at a time with :meth:`feed` and call :meth:`close` at
    end of input, or hand the whole line stream to :meth:`tokenize`.
    """

    def __init__(self, config: TokenizerConfig = DEFAULT_CONFIG) -> None:
        self.config = config
        self._current: RawKeyword | None = None
        self._line_number = 0

    @property
    def state(self) -> TokenizerState:
        return TokenizerState.NO_GROUP if self._current is None else TokenizerState.IN_GROUP

    @property
    def current(self) -> RawKeyword | None:
        """The keyword currently collecting records."""
        return self._current

    @property
    def line_number(self) -> int:
        """Number of lines fed so far."""
        return self._line_number

    def feed(self, line: str) -> RawKeyword | None:
        """
        Process one physical line.

        Returns:
            The keyword closed by this line (by a new keyword name or by
            its end terminator), otherwise ``None``
        """
        self._line_number += 1
        line = line.rstrip("\r\n")
        if is_comment_line(line, self.config.comment_prefix):
            return None

        name = RawKeyword.try_get_valid_keyword(line, self.config)
        if name is not None:
            closed = self.close()
            self._current = RawKeyword(name, self.config, line_number=self._line_number)
            logger.debug("Keyword %s opened at line %d", name, self._line_number)
            return closed

        if self._current is None:
            logger.warning(
                "Skipping line %d outside of any keyword: %r", self._line_number, line.strip()
            )
            return None

        self._current.add_raw_record_string(line, line_number=self._line_number)
        if self._current.is_finished:
            closed = self._current
            self._current = None
            logger.debug("Keyword %s closed with %d records", closed.name, len(closed))
            return closed
        return None

    def close(self) -> RawKeyword | None:
        """Finish and return the current keyword, if any."""
        if self._current is None:
            return None
        closed = self._current
        self._current = None
        closed.finish()
        logger.debug("Keyword %s closed with %d records", closed.name, len(closed))
        return closed

    def tokenize(self, lines: Iterable[str]) -> Iterator[RawKeyword]:
        """Yield every keyword of *lines* in deck order."""
        for line in lines:
            closed = self.feed(line)
            if closed is not None:
                yield closed
        closed = self.close()
        if closed is not None:
            yield closed


def tokenize(lines: Iterable[str], config: TokenizerConfig | None = None) -> list[RawKeyword]:
    """Split deck lines into raw keywords.

    Args:
        lines: Physical deck lines
        config: Lexical rules, defaults to :data:`DEFAULT_CONFIG`

    Returns:
        Keywords in deck order
    """
    return list(RawTokenizer(config or DEFAULT_CONFIG).tokenize(lines))
