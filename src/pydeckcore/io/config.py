"""
Tokenizer configuration for deck input.

These dataclasses define the lexical conventions the raw tokenizer
applies to deck text.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import cached_property
from typing import ClassVar


@dataclass(frozen=True)
class TokenizerConfig:
    """
    Lexical rules for splitting deck text into keywords and records.

    Attributes:
        max_keyword_length: Longest allowed keyword name
        comment_prefix: Marker starting a comment (whole line or inline)
        terminator: Record terminator; alone on an empty record it ends the keyword
        single_record_keywords: Keywords whose every data line is one record,
            with or without a terminator
    """

    max_keyword_length: int = 8
    comment_prefix: str = "--"
    terminator: str = "/"
    single_record_keywords: frozenset[str] = field(default_factory=frozenset)

    # First character a letter, the rest letters, digits, "_", "+" or "-"
    KEYWORD_FIRST_CHAR: ClassVar[str] = r"[A-Z]"
    KEYWORD_CHAR: ClassVar[str] = r"[A-Z0-9_+\-]"

    def __post_init__(self) -> None:
        if self.max_keyword_length < 1:
            raise ValueError("max_keyword_length must be at least 1")
        if not self.terminator:
            raise ValueError("terminator must not be empty")
        # Allow plain sets/lists from callers
        object.__setattr__(
            self,
            "single_record_keywords",
            frozenset(kw.upper() for kw in self.single_record_keywords),
        )

    @cached_property
    def keyword_pattern(self) -> re.Pattern[str]:
        """Compiled pattern matching a complete keyword name."""
        n_rest = self.max_keyword_length - 1
        return re.compile(f"^{self.KEYWORD_FIRST_CHAR}{self.KEYWORD_CHAR}{{0,{n_rest}}}$")

    def is_single_record(self, keyword: str) -> bool:
        return keyword in self.single_record_keywords


DEFAULT_CONFIG = TokenizerConfig()
