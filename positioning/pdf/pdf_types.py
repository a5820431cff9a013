"""Data structures for document blocks and rendered pages."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple, Union

from ..models import CategoryGroup
from .pdf_settings import LayoutSettings


@dataclass(frozen=True, slots=True)
class Headline:
    """Document title drawn once at the top of the generated content."""

    text: str


@dataclass(frozen=True, slots=True)
class SubHeadline:
    """Section heading."""

    text: str


@dataclass(frozen=True, slots=True)
class Label:
    """Category label above a list, e.g. 'Typische Ziele'."""

    text: str


@dataclass(frozen=True, slots=True)
class Paragraph:
    """Running text wrapped at the content width."""

    text: str


@dataclass(frozen=True, slots=True)
class NumberedList:
    """Numbered entries drawn with a hanging indent."""

    items: Tuple[str, ...]


@dataclass(frozen=True, slots=True)
class NestedList:
    """Category groups with numbered items and bulleted examples."""

    groups: Tuple[CategoryGroup, ...]


Block = Union[Headline, SubHeadline, Label, Paragraph, NumberedList, NestedList]


@dataclass(frozen=True, slots=True)
class Spacing:
    """Vertical gaps applied around a block, in points."""

    before: float = 0.0
    after: float = 0.0


def spacing_for(
    block: Block,
    *,
    previous: Block | None,
    following: Block | None,
    settings: LayoutSettings,
) -> Spacing:
    """Return the spacing policy for a block given its neighbours.

    Within a section blocks couple tightly; the section gap separates a
    finished body from the next heading. A numbered list followed by another
    category label only gets the group gap.

    Args:
        block: Block being laid out.
        previous: Block rendered before it, if any.
        following: Block rendered after it, if any.
        settings: Layout settings with the gap values.
    Returns:
        Spacing for the block.

    Example:
        >>> s = LayoutSettings()
        >>> spacing_for(NumberedList(("a",)), previous=None, following=Label("x"), settings=s).after
        14.0
    """

    if isinstance(block, Headline):
        return Spacing(after=settings.after_headline)
    if isinstance(block, SubHeadline):
        # A heading right after a heading means the section body was empty.
        before = settings.section_gap if isinstance(previous, SubHeadline) else 0.0
        return Spacing(before=before, after=settings.after_subheadline)
    if isinstance(block, Label):
        return Spacing(after=settings.after_label)
    if isinstance(block, NumberedList) and isinstance(following, Label):
        return Spacing(after=settings.group_gap)
    return Spacing(after=settings.section_gap)


@dataclass(frozen=True, slots=True)
class DrawnText:
    """One text run placed on a page at a baseline position."""

    text: str
    x: float
    y: float
    font_name: str
    size: float


@dataclass(slots=True)
class PageCanvas:
    """Fixed-size page surface collecting drawn text runs.

    Once finalized the page is immutable and further drawing raises.
    """

    number: int
    width: float
    height: float
    runs: List[DrawnText] = field(default_factory=list)
    finalized: bool = False

    def draw_text(
        self, text: str, *, x: float, y: float, font_name: str, size: float
    ) -> None:
        if self.finalized:
            raise RuntimeError(f"page {self.number} is finalized")
        self.runs.append(DrawnText(text, x, y, font_name, size))

    def finalize(self) -> None:
        self.finalized = True

    def texts(self) -> List[str]:
        return [run.text for run in self.runs]


def all_texts(pages: Sequence[PageCanvas]) -> List[str]:
    """Return drawn text runs across pages in drawing order."""

    return [text for page in pages for text in page.texts()]
