"""Block rendering onto fixed-size pages."""

from __future__ import annotations

import re
from enum import Enum
from typing import List, Sequence

from .pdf_constants import NUMBER_SUFFIX, _debug
from .pdf_cursor import PageCursor
from .pdf_settings import FontSet, LayoutSettings, TextStyle
from .pdf_text import wrap_lines
from .pdf_types import (
    Block,
    Headline,
    Label,
    NestedList,
    NumberedList,
    PageCanvas,
    Paragraph,
    SubHeadline,
    spacing_for,
)

_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")


class LayoutState(Enum):
    IDLE = "idle"
    HEADLINE = "headline"
    SUBHEADLINE = "subheadline"
    BODY = "body"
    FINALIZED = "finalized"


class BlockRenderer:
    """Place document blocks onto pages, one visual line at a time.

    A renderer performs exactly one render. Every line goes through
    ``PageCursor.ensure_space`` first, so paragraphs and list items split
    cleanly across page boundaries.

    Args:
        settings: Immutable layout settings.
        fonts: Fonts resolved once for this render; used for both wrapping
            and drawing.
    """

    def __init__(self, settings: LayoutSettings, fonts: FontSet) -> None:
        if settings is None:
            raise ValueError("BlockRenderer requires layout settings")
        if fonts is None or not fonts.regular or not fonts.bold:
            raise ValueError("BlockRenderer requires a regular and a bold font")
        self.settings = settings
        self.fonts = fonts
        self.state = LayoutState.IDLE
        self._cursor: PageCursor | None = None

    @property
    def cursor(self) -> PageCursor:
        if self._cursor is None:
            raise RuntimeError("render() has not started")
        return self._cursor

    def render(self, blocks: Sequence[Block]) -> List[PageCanvas]:
        """Render blocks in order and return the finalized pages.

        Args:
            blocks: Document blocks, typically headline first.
        Returns:
            Pages in order; at least one page even for empty input.
        """

        if self.state is not LayoutState.IDLE:
            raise RuntimeError("BlockRenderer instances render only once")
        self._cursor = PageCursor(self.settings)
        blocks = list(blocks)
        for index, block in enumerate(blocks):
            previous = blocks[index - 1] if index else None
            following = blocks[index + 1] if index + 1 < len(blocks) else None
            spacing = spacing_for(
                block, previous=previous, following=following, settings=self.settings
            )
            if spacing.before and not self.cursor.at_page_top:
                self.cursor.advance(spacing.before)
            self._draw_block(block, gap_after=spacing.after)
            self.cursor.advance(spacing.after)
            self._transition(block)
        pages = self.cursor.finish()
        self.state = LayoutState.FINALIZED
        _debug(msg=f"[render] finalized {len(pages)} page(s)")
        return pages

    def _transition(self, block: Block) -> None:
        if isinstance(block, Headline):
            target = LayoutState.HEADLINE
        elif isinstance(block, SubHeadline):
            target = LayoutState.SUBHEADLINE
        else:
            target = LayoutState.BODY
        if self.state is LayoutState.IDLE and target is not LayoutState.HEADLINE:
            _debug(msg=f"[render] {type(block).__name__} before any headline")
        self.state = target

    def _draw_block(self, block: Block, *, gap_after: float) -> None:
        settings = self.settings
        if isinstance(block, Headline):
            self._draw_heading(block.text, style=settings.headline, gap_after=gap_after)
        elif isinstance(block, SubHeadline):
            self._draw_heading(block.text, style=settings.subheadline, gap_after=gap_after)
        elif isinstance(block, Label):
            self._draw_heading(block.text, style=settings.label, gap_after=gap_after)
        elif isinstance(block, Paragraph):
            self._draw_paragraph(block.text)
        elif isinstance(block, NumberedList):
            self._draw_numbered(block.items, style=settings.list_item)
        elif isinstance(block, NestedList):
            self._draw_nested(block)
        else:
            raise TypeError(f"unsupported block: {block!r}")

    def _wrap(self, text: str, *, style: TextStyle, width: float) -> List[str]:
        return wrap_lines(
            text,
            font_name=self.fonts.name(bold=style.bold),
            size=style.size,
            max_width=max(width, 1.0),
        )

    def _draw_line(self, text: str, *, x: float, style: TextStyle) -> None:
        page = self.cursor.ensure_space(style.line_height)
        page.draw_text(
            text,
            x=x,
            y=self.cursor.current_offset,
            font_name=self.fonts.name(bold=style.bold),
            size=style.size,
        )
        self.cursor.advance(style.line_height)

    def _draw_heading(self, text: str, *, style: TextStyle, gap_after: float) -> None:
        """Draw a bold heading kept on the same page as the next body line."""

        lines = self._wrap(text, style=style, width=self.settings.content_width)
        if not lines:
            return
        needed = style.line_height * len(lines) + gap_after + self.settings.body.line_height
        self.cursor.ensure_space(needed)
        for line in lines:
            self._draw_line(line, x=self.settings.margin_left, style=style)

    def _draw_paragraph(self, text: str) -> None:
        style = self.settings.body
        chunks = [chunk for chunk in _PARAGRAPH_BREAK.split(text or "") if chunk.strip()]
        for index, chunk in enumerate(chunks):
            if index:
                self.cursor.advance(self.settings.paragraph_gap)
            for line in self._wrap(chunk, style=style, width=self.settings.content_width):
                self._draw_line(line, x=self.settings.margin_left, style=style)

    def _draw_hanging(self, prefix: str, text: str, *, x: float, style: TextStyle) -> None:
        """Draw ``prefix`` + text with continuation lines aligned to the text.

        Args:
            prefix: Marker such as ``"3. "`` or a bullet glyph plus space.
            text: Body text wrapped beside the marker.
            x: Left edge of the marker.
            style: Text style for marker and body.
        """

        prefix_width = self.fonts.measure(prefix, style.size, bold=style.bold)
        right_edge = self.settings.margin_left + self.settings.content_width
        lines = self._wrap(text, style=style, width=right_edge - x - prefix_width)
        for index, line in enumerate(lines):
            if index == 0:
                self._draw_line(f"{prefix}{line}", x=x, style=style)
            else:
                self._draw_line(line, x=x + prefix_width, style=style)

    def _draw_numbered(self, items: Sequence[str], *, style: TextStyle) -> None:
        for number, text in enumerate(items, start=1):
            if number > 1:
                self.cursor.advance(self.settings.item_gap)
            self._draw_hanging(
                f"{number}{NUMBER_SUFFIX}", text, x=self.settings.margin_left, style=style
            )

    def _draw_nested(self, block: NestedList) -> None:
        settings = self.settings
        bullet = f"{settings.bullet_glyph} "
        for group_index, group in enumerate(block.groups):
            if group_index:
                self.cursor.advance(settings.group_gap)
            self._draw_heading(group.label, style=settings.label, gap_after=settings.after_label)
            self.cursor.advance(settings.after_label)
            for number, item in enumerate(group.items, start=1):
                if number > 1:
                    self.cursor.advance(settings.item_gap)
                self._draw_hanging(
                    f"{number}{NUMBER_SUFFIX}",
                    item.title,
                    x=settings.margin_left,
                    style=settings.item_title,
                )
                for example in item.examples:
                    self._draw_hanging(
                        bullet,
                        example.text,
                        x=settings.margin_left + settings.bullet_indent,
                        style=settings.example,
                    )


def render_blocks(
    blocks: Sequence[Block], *, settings: LayoutSettings, fonts: FontSet
) -> List[PageCanvas]:
    """Render blocks with a fresh renderer and return the pages."""

    return BlockRenderer(settings, fonts).render(blocks)
