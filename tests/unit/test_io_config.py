"""Tests for tokenizer configuration."""

from __future__ import annotations

import pytest

from pydeckcore.io.config import DEFAULT_CONFIG, TokenizerConfig


class TestTokenizerConfig:
    def test_defaults(self) -> None:
        assert DEFAULT_CONFIG.max_keyword_length == 8
        assert DEFAULT_CONFIG.comment_prefix == "--"
        assert DEFAULT_CONFIG.terminator == "/"
        assert DEFAULT_CONFIG.single_record_keywords == frozenset()

    def test_keyword_pattern(self) -> None:
        pattern = DEFAULT_CONFIG.keyword_pattern
        assert pattern.match("ABCDEFGH")
        assert not pattern.match("ABCDEFGHI")
        assert not pattern.match("_ABC")

    def test_pattern_follows_length(self) -> None:
        config = TokenizerConfig(max_keyword_length=3)
        assert config.keyword_pattern.match("ABC")
        assert not config.keyword_pattern.match("ABCD")

    def test_single_record_keywords_normalized(self) -> None:
        config = TokenizerConfig(single_record_keywords={"title"})  # type: ignore[arg-type]
        assert config.single_record_keywords == frozenset({"TITLE"})
        assert config.is_single_record("TITLE")
        assert not config.is_single_record("DATES")

    def test_invalid_length(self) -> None:
        with pytest.raises(ValueError):
            TokenizerConfig(max_keyword_length=0)

    def test_empty_terminator(self) -> None:
        with pytest.raises(ValueError):
            TokenizerConfig(terminator="")

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            DEFAULT_CONFIG.terminator = ";"  # type: ignore[misc]
