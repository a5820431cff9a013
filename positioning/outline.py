"""
Outline parsing: recover category groups, numbered items and examples from
loosely formatted text.

The parser is tolerant by construction. Unknown lines are either folded into
the previous item title or dropped, and nothing in here raises for textual
input.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterable, List, Sequence

from .cleaning import (
    clean_example,
    has_dash_separator,
    normalize_whitespace,
    split_dash_segments,
    strip_bullet,
    strip_markdown_emphasis,
)
from .models import MAX_ITEMS_PER_GROUP, CategoryGroup, Item

HEADER = "header"
NUMBERED = "numbered"
BULLET = "bullet"
OTHER = "other"

DEGENERATE_MIN_LINES = 6

CATEGORY_SYNONYMS = {
    "fears": (
        "ängste",
        "angste",
        "aengste",
        "sorgen",
        "befürchtungen",
        "befuerchtungen",
        "fears",
        "concerns",
        "worries",
    ),
    "goals": ("ziele", "wünsche", "wuensche", "goals", "desires"),
    "objections": (
        "vorurteile",
        "einwände",
        "einwaende",
        "bedenken",
        "objections",
        "prejudices",
    ),
}

_NAME_TO_KEY = {
    name: key for key, names in CATEGORY_SYNONYMS.items() for name in names
}
_HEADER_RE = re.compile(
    r"^(?:typische|typical)?\s*(?P<name>"
    + "|".join(sorted(map(re.escape, _NAME_TO_KEY), key=len, reverse=True))
    + r")(?:\s*[-–—]\s*(?:beispiele|examples))?\s*(?::\s*(?P<rest>.*))?$",
    re.IGNORECASE,
)
_NUMBERED_RE = re.compile(r"^\d{1,2}\s*[.)](?!\d)\s*(?P<text>.*)$")
_BULLET_RE = re.compile(r"^[-–—•·▪●‣*]\s*\S")


@dataclass(frozen=True, slots=True)
class OutlineLine:
    """A classified, whitespace-normalized input line.

    Attributes:
        kind: One of ``header``, ``numbered``, ``bullet`` or ``other``.
        text: Line payload; the category key for headers, the text after the
            number for numbered lines, and the raw line otherwise.
    """

    kind: str
    text: str


@dataclass(frozen=True, slots=True)
class OutlineShape:
    """A named input shape: a pure predicate plus an item extractor."""

    name: str
    matches: Callable[[Sequence[OutlineLine]], bool]
    extract: Callable[[Sequence[OutlineLine]], List[Item]]


def match_category(line: str) -> tuple[str, str] | None:
    """Return ``(category_key, trailing_text)`` for a category header line.

    Example:
        >>> match_category("Typische Ängste – Beispiele:")
        ('fears', '')
        >>> match_category("**Typische Einwände:** 1. Zu teuer")
        ('objections', '1. Zu teuer')
        >>> match_category("Ziele erreichen wir gemeinsam") is None
        True
    """

    text = strip_markdown_emphasis(normalize_whitespace(line))
    match = _HEADER_RE.match(text)
    if match is None:
        return None
    key = _NAME_TO_KEY[match.group("name").lower()]
    rest = strip_markdown_emphasis(match.group("rest") or "")
    return key, rest


def classify_line(line: str) -> OutlineLine | None:
    """Classify a single line; blank lines return None.

    Example:
        >>> classify_line("3) Zeit sparen")
        OutlineLine(kind='numbered', text='Zeit sparen')
        >>> classify_line("  - Beispiel").kind
        'bullet'
    """

    text = normalize_whitespace(line)
    if not text:
        return None
    header = match_category(text)
    if header is not None:
        return OutlineLine(HEADER, header[0])
    numbered = _NUMBERED_RE.match(text)
    if numbered:
        return OutlineLine(NUMBERED, numbered.group("text").strip())
    if _BULLET_RE.match(text):
        return OutlineLine(BULLET, text)
    return OutlineLine(OTHER, text)


def classify_lines(raw_text: str) -> List[OutlineLine]:
    """Classify every line of a text block, expanding header trailers."""

    lines: List[OutlineLine] = []
    for raw in str(raw_text or "").splitlines():
        line = classify_line(raw)
        if line is None:
            continue
        lines.append(line)
        if line.kind == HEADER:
            _, rest = match_category(raw) or ("", "")
            trailer = classify_line(rest)
            if trailer is not None and trailer.kind != HEADER:
                lines.append(trailer)
    return lines


def split_groups(
    lines: Iterable[OutlineLine],
) -> List[tuple[str, List[OutlineLine]]]:
    """Group body lines under the category header that precedes them.

    Lines before the first header belong to no category and are dropped.
    """

    groups: List[tuple[str, List[OutlineLine]]] = []
    for line in lines:
        if line.kind == HEADER:
            groups.append((line.text, []))
        elif groups:
            groups[-1][1].append(line)
    return groups


def _append_to_title(items: List[Item], text: str) -> None:
    if not items:
        return
    current = items[-1]
    current.title = f"{current.title} {text}".strip()


def _add_example(item: Item, raw: str) -> None:
    item.add_example(clean_example(raw, item.title))


def merge_repeated_titles(items: Sequence[Item]) -> List[Item]:
    """Merge consecutive items that repeat the same title.

    Free-text generators sometimes emit one numbered line per example, each
    repeating the item title. Those lines collapse into a single item whose
    examples accumulate up to the cap. Non-adjacent repeats stay separate.

    Example:
        >>> merged = merge_repeated_titles([Item("A"), Item("a"), Item("B")])
        >>> [item.title for item in merged]
        ['A', 'B']
    """

    merged: List[Item] = []
    for item in items:
        previous = merged[-1] if merged else None
        if previous is not None and previous.title.casefold() == item.title.casefold():
            for example in item.examples:
                previous.add_example(example.text)
            continue
        merged.append(item)
    return merged


def _extract_flat(lines: Sequence[OutlineLine]) -> List[Item]:
    items: List[Item] = []
    for line in lines:
        if line.kind == NUMBERED:
            items.append(Item(line.text))
        elif line.kind == OTHER:
            _append_to_title(items, line.text)
    return [item for item in items if item.title]


def _extract_nested(lines: Sequence[OutlineLine]) -> List[Item]:
    items: List[Item] = []
    for line in lines:
        if line.kind == NUMBERED:
            segments = split_dash_segments(line.text) or [""]
            item = Item(segments[0])
            items.append(item)
            for segment in segments[1:]:
                _add_example(item, segment)
        elif line.kind == BULLET:
            if items:
                _add_example(items[-1], strip_bullet(line.text))
        else:
            _append_to_title(items, line.text)
    return merge_repeated_titles([item for item in items if item.title])


def _numbered_texts(lines: Sequence[OutlineLine]) -> List[str]:
    """Return non-empty numbered line texts with continuation lines folded in."""

    texts: List[str] = []
    for line in lines:
        if line.kind == NUMBERED:
            texts.append(line.text)
        elif line.kind == OTHER and texts:
            texts[-1] = f"{texts[-1]} {line.text}".strip()
    return [text for text in texts if text]


def _extract_pairs(lines: Sequence[OutlineLine]) -> List[Item]:
    texts = _numbered_texts(lines)
    items: List[Item] = []
    for first, second in zip(texts[0::2], texts[1::2]):
        head = split_dash_segments(first)
        if not head:
            continue
        item = Item(head[0])
        for segment in head[1:]:
            _add_example(item, segment)
        tail = split_dash_segments(second)
        for segment in tail[1:] if len(tail) > 1 else tail:
            _add_example(item, segment)
        items.append(item)
    return items


def _has_kind(lines: Sequence[OutlineLine], kind: str) -> bool:
    return any(line.kind == kind for line in lines)


def _is_degenerate(lines: Sequence[OutlineLine]) -> bool:
    numbered = len(_numbered_texts(lines))
    return not _has_kind(lines, BULLET) and numbered >= DEGENERATE_MIN_LINES


def _has_inline_examples(lines: Sequence[OutlineLine]) -> bool:
    return any(
        line.kind == NUMBERED and has_dash_separator(line.text) for line in lines
    )


DEGENERATE_PAIRS = OutlineShape("degenerate-pairs", _is_degenerate, _extract_pairs)
BULLETED = OutlineShape(
    "bulleted", lambda lines: _has_kind(lines, BULLET), _extract_nested
)
INLINE = OutlineShape("inline", _has_inline_examples, _extract_nested)
FLAT = OutlineShape("flat", lambda lines: True, _extract_flat)

# Priority order; the pair repair only fires when no bullets are present.
OUTLINE_SHAPES: tuple[OutlineShape, ...] = (DEGENERATE_PAIRS, BULLETED, INLINE, FLAT)


def detect_shape(
    lines: Sequence[OutlineLine], *, shapes: Sequence[OutlineShape] = OUTLINE_SHAPES
) -> OutlineShape:
    """Return the first shape whose predicate accepts the group lines."""

    for shape in shapes:
        if shape.matches(lines):
            return shape
    return FLAT


def parse_outline(raw_text: str, *, with_examples: bool = True) -> List[CategoryGroup]:
    """Parse a raw text block into category groups.

    Args:
        raw_text: Loosely formatted text with category headers and lists.
        with_examples: When False only flat numbered lists are recognized and
            item titles are kept verbatim.
    Returns:
        Category groups in header order, each with one to five items.

    Example:
        >>> groups = parse_outline("Typische Ängste:\\n1. Angst A\\n2. Angst B")
        >>> groups[0].label, [item.title for item in groups[0].items]
        ('Typische Ängste', ['Angst A', 'Angst B'])
    """

    shapes = OUTLINE_SHAPES if with_examples else (FLAT,)
    groups: List[CategoryGroup] = []
    for key, lines in split_groups(classify_lines(raw_text)):
        shape = detect_shape(lines, shapes=shapes)
        items = shape.extract(lines)[:MAX_ITEMS_PER_GROUP]
        if items:
            groups.append(CategoryGroup(key, items))
    return groups
