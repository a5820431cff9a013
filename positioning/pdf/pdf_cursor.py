"""Vertical position tracking and page allocation."""

from __future__ import annotations

from typing import List

from .pdf_constants import EPSILON, _debug
from .pdf_settings import LayoutSettings
from .pdf_types import PageCanvas


class PageCursor:
    """Track the current page and baseline offset for one render.

    Offsets are measured from the page bottom, matching PDF coordinates.
    The cursor owns its pages; each is finalized when the cursor moves on.

    Example:
        >>> cursor = PageCursor(LayoutSettings())
        >>> cursor.current_page.number, cursor.current_offset == LayoutSettings().top_offset
        (1, True)
    """

    def __init__(self, settings: LayoutSettings) -> None:
        if settings is None:
            raise ValueError("PageCursor requires layout settings")
        self.settings = settings
        self.pages: List[PageCanvas] = []
        self.current_page = self._new_page()
        self.current_offset = settings.top_offset

    def _new_page(self) -> PageCanvas:
        page = PageCanvas(
            number=len(self.pages) + 1,
            width=self.settings.page_width,
            height=self.settings.page_height,
        )
        self.pages.append(page)
        return page

    def fits(self, needed: float) -> bool:
        return self.current_offset - needed >= self.settings.margin_bottom - EPSILON

    def ensure_space(self, needed: float) -> PageCanvas:
        """Start a new page unless ``needed`` points fit above the bottom margin.

        A page that is still empty is kept even when the write overflows it.

        Args:
            needed: Height of the pending write in points.
        Returns:
            The page to draw on.
        """

        if not self.fits(needed) and (self.current_page.runs or not self.at_page_top):
            self.current_page.finalize()
            self.current_page = self._new_page()
            self.current_offset = self.settings.top_offset
            _debug(msg=f"[cursor] page break -> page {self.current_page.number}")
        return self.current_page

    def advance(self, amount: float) -> None:
        self.current_offset -= amount

    @property
    def at_page_top(self) -> bool:
        return self.current_offset >= self.settings.top_offset - EPSILON

    def finish(self) -> List[PageCanvas]:
        """Finalize the current page and return all pages in order."""

        self.current_page.finalize()
        return list(self.pages)
