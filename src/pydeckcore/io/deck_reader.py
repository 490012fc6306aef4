"""
Deck line-reading utilities.

Low-level helpers shared by the raw tokenizer and the schedule reader:
comment detection, quote-aware splitting of record text, and number
parsing with descriptive errors.
"""

from __future__ import annotations

from pathlib import Path

from pydeckcore.core.exceptions import DeckFormatError

COMMENT_PREFIX = "--"
QUOTE_CHARS = ("'", '"')


def is_comment_line(line: str, comment_prefix: str = COMMENT_PREFIX) -> bool:
    """Check if *line* is a full-line comment or blank.

    Leading whitespace before the comment marker is allowed.
    """
    stripped = line.strip()
    return not stripped or stripped.startswith(comment_prefix)


def find_unquoted(text: str, token: str) -> int:
    """Return the position of the first *token* outside quotes, or -1."""
    quote: str | None = None
    for i, ch in enumerate(text):
        if quote is not None:
            if ch == quote:
                quote = None
            continue
        if ch in QUOTE_CHARS:
            quote = ch
            continue
        if text.startswith(token, i):
            return i
    return -1


def strip_inline_comment(line: str, comment_prefix: str = COMMENT_PREFIX) -> str:
    """Remove a trailing comment that is not inside a quoted string."""
    pos = find_unquoted(line, comment_prefix)
    if pos < 0:
        return line.rstrip()
    return line[:pos].rstrip()


def split_fields(text: str) -> list[str]:
    """
    Split record text into fields on whitespace.

    Quoted strings are kept together as one field with the quotes
    removed, so ``'PROD 1'`` is a single field ``PROD 1``.
    """
    fields: list[str] = []
    current: list[str] = []
    quote: str | None = None
    quoted = False

    for ch in text:
        if quote is not None:
            if ch == quote:
                quote = None
            else:
                current.append(ch)
            continue
        if ch in QUOTE_CHARS:
            quote = ch
            quoted = True
            continue
        if ch.isspace():
            if current or quoted:
                fields.append("".join(current))
                current = []
                quoted = False
            continue
        current.append(ch)

    if current or quoted:
        fields.append("".join(current))
    return fields


def parse_int(value: str, context: str = "", line_number: int | None = None) -> int:
    """Parse a string as an integer with descriptive error on failure.

    Parameters
    ----------
    value : str
        The string to parse.
    context : str
        Description of what was being parsed (for error messages).
    line_number : int, optional
        Line number in the source deck (for error messages).
    """
    try:
        return int(value)
    except (ValueError, TypeError) as exc:
        msg = (
            f"Expected integer for {context}, got {value!r}"
            if context
            else f"Expected integer, got {value!r}"
        )
        raise DeckFormatError(msg, line_number=line_number) from exc


def parse_float(value: str, context: str = "", line_number: int | None = None) -> float:
    """Parse a string as a float with descriptive error on failure.

    Fortran-style exponents (``1.5D+02``) are accepted.
    """
    try:
        return float(value.replace("D", "E").replace("d", "e"))
    except (ValueError, TypeError, AttributeError) as exc:
        msg = (
            f"Expected number for {context}, got {value!r}"
            if context
            else f"Expected number, got {value!r}"
        )
        raise DeckFormatError(msg, line_number=line_number) from exc


def expand_repeats(fields: list[str], line_number: int | None = None) -> list[str]:
    """Expand ``N*value`` repeat fields into *N* copies of ``value``.

    A bare ``N*`` (defaulted values) is left untouched since it carries
    no value to repeat.
    """
    expanded: list[str] = []
    for item in fields:
        count, star, value = item.partition("*")
        if not star or not value or not count.isdigit():
            expanded.append(item)
            continue
        n = parse_int(count, "repeat count", line_number)
        expanded.extend([value] * n)
    return expanded


def read_deck_lines(filepath: Path | str) -> list[str]:
    """Read a deck file into a list of lines without line endings."""
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    with open(path, encoding="utf-8", errors="replace") as f:
        return f.read().splitlines()
