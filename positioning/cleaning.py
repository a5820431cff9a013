"""
Small, focused text cleaning utilities for outline parsing.
"""

import re
from typing import Callable


_ZERO_WIDTH = re.compile("[\u200b\u200c\u200d\u2060\ufeff]")
_NON_BREAKING_SPACES = re.compile("[\u00a0\u202f]")
_BULLET_PREFIX = re.compile(r"^\s*[-–—•·▪●‣*]+\s*")
_MARKDOWN_EMPHASIS = re.compile(r"^[#*_\s]+|[*_\s]+$")
_DASH_SEPARATOR = re.compile(r"\s+[-–—]\s+")
_QUOTE_PAIRS = (
    ('"', '"'),
    ("'", "'"),
    ("„", "“"),
    ("“", "”"),
    ("‚", "‘"),
    ("‘", "’"),
    ("»", "«"),
    ("«", "»"),
)


def normalize_whitespace(value: str) -> str:
    """Collapse unusual whitespace into single ASCII spaces.

    Example:
        >>> normalize_whitespace("a\\u00a0b\\u200bb")
        'a bb'
    """

    clean = _NON_BREAKING_SPACES.sub(" ", value)
    clean = _ZERO_WIDTH.sub("", clean)
    clean = re.sub(r"[ \t\r\f\v]+", " ", clean)
    return clean.strip()


def strip_markdown_emphasis(value: str) -> str:
    """Remove leading heading hashes and surrounding emphasis markers.

    Example:
        >>> strip_markdown_emphasis("**Typische Ziele:**")
        'Typische Ziele:'
    """

    return _MARKDOWN_EMPHASIS.sub("", value)


def strip_bullet(value: str) -> str:
    """Drop a leading bullet glyph or dash marker.

    Example:
        >>> strip_bullet("• Budget sprengen")
        'Budget sprengen'
    """

    return _BULLET_PREFIX.sub("", value, count=1)


def strip_quotes(value: str) -> str:
    """Remove one pair of wrapping quotation marks.

    Two separate quotes that merely open and close the text are kept.

    Example:
        >>> strip_quotes("„Zu teuer“")
        'Zu teuer'
    """

    text = value.strip()
    for opening, closing in _QUOTE_PAIRS:
        if len(text) >= 2 and text.startswith(opening) and text.endswith(closing):
            inner = text[len(opening) : -len(closing)]
            if closing in inner:
                return text
            return inner.strip()
    return text


def strip_title_prefix(value: str, title: str) -> str:
    """Remove a redundant ``"<title> – "`` prefix, ignoring case.

    Example:
        >>> strip_title_prefix("Kosten – zu hoch", "kosten")
        'zu hoch'
    """

    if not title:
        return value
    pattern = re.compile(
        re.escape(title.strip()) + r"\s*[-–—:]\s+", re.IGNORECASE
    )
    return pattern.sub("", value, count=1)


def split_dash_segments(value: str) -> list[str]:
    """Split on en-dashes or hyphens that are surrounded by spaces.

    Hyphenated words stay intact.

    Example:
        >>> split_dash_segments("Zeit sparen – schneller Start - weniger Stress")
        ['Zeit sparen', 'schneller Start', 'weniger Stress']
        >>> split_dash_segments("Know-how fehlt")
        ['Know-how fehlt']
    """

    return [part.strip() for part in _DASH_SEPARATOR.split(value) if part.strip()]


def has_dash_separator(value: str) -> bool:
    return bool(_DASH_SEPARATOR.search(value))


def clean_example(value: str, title: str) -> str:
    """Run all example cleaners in a stable order."""

    cleaners: tuple[Callable[[str], str], ...] = (
        normalize_whitespace,
        strip_bullet,
        strip_quotes,
    )
    result = value
    for cleaner in cleaners:
        result = cleaner(result)
    return strip_quotes(strip_title_prefix(result, title))
