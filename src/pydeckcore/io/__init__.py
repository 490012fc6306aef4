"""I/O handlers for deck text."""

from __future__ import annotations

from pydeckcore.io.config import DEFAULT_CONFIG, TokenizerConfig
from pydeckcore.io.raw_keyword import (
    RawKeyword,
    RawRecord,
    RawTokenizer,
    TokenizerState,
    tokenize,
)
from pydeckcore.io.schedule import (
    iter_occurrences,
    keyword_occurrence,
    read_timeline,
    timeline_from_lines,
)

__all__ = [
    # Configuration
    "TokenizerConfig",
    "DEFAULT_CONFIG",
    # Raw tokenizer
    "RawKeyword",
    "RawRecord",
    "RawTokenizer",
    "TokenizerState",
    "tokenize",
    # Temporal keywords
    "keyword_occurrence",
    "iter_occurrences",
    "timeline_from_lines",
    "read_timeline",
]
