"""Fonts and layout settings for PDF generation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from reportlab.lib.pagesizes import A4
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

from .pdf_constants import BULLET_GLYPH
from .pdf_text import measure_text

FALLBACK_REGULAR = "Helvetica"
FALLBACK_BOLD = "Helvetica-Bold"
REGULAR_FONT = ("Poppins", "Poppins-Regular.ttf")
BOLD_FONT = ("Poppins-SemiBold", "Poppins-SemiBold.ttf")


@dataclass(frozen=True, slots=True)
class TextStyle:
    """Font size plus extra leading for one kind of text line.

    Example:
        >>> TextStyle(size=12, leading=2).line_height
        14
    """

    size: float
    leading: float
    bold: bool = False

    @property
    def line_height(self) -> float:
        return self.size + self.leading


@dataclass(frozen=True, slots=True)
class LayoutSettings:
    """Geometry, type sizes and gaps used during layout.

    All values are points. Instances are immutable so one render can never
    leak styling into another.

    Example:
        >>> settings = LayoutSettings()
        >>> round(settings.content_width)
        483
    """

    page_width: float = A4[0]
    page_height: float = A4[1]
    margin_left: float = 56.0
    margin_right: float = 56.0
    margin_top: float = 56.0
    margin_bottom: float = 56.0
    headline: TextStyle = TextStyle(size=26, leading=6, bold=True)
    subheadline: TextStyle = TextStyle(size=16, leading=4, bold=True)
    label: TextStyle = TextStyle(size=13, leading=3, bold=True)
    body: TextStyle = TextStyle(size=12, leading=2)
    list_item: TextStyle = TextStyle(size=12, leading=2)
    item_title: TextStyle = TextStyle(size=12, leading=2, bold=True)
    example: TextStyle = TextStyle(size=11, leading=1)
    after_headline: float = 16.0
    after_subheadline: float = 8.0
    after_label: float = 4.0
    section_gap: float = 30.0
    paragraph_gap: float = 8.0
    item_gap: float = 6.0
    group_gap: float = 14.0
    bullet_indent: float = 18.0
    bullet_glyph: str = BULLET_GLYPH

    @property
    def content_width(self) -> float:
        """Return the width available for content inside margins.

        Returns:
            Width in points.
        """

        return self.page_width - self.margin_left - self.margin_right

    @property
    def top_offset(self) -> float:
        """Return the baseline offset of the first line on a fresh page."""

        return self.page_height - self.margin_top


@dataclass(frozen=True, slots=True)
class FontSet:
    """Registered regular and bold font names used for one render.

    Wrap decisions and drawing must share the same instance so measured
    widths match the rendered glyphs.
    """

    regular: str
    bold: str

    def name(self, *, bold: bool = False) -> str:
        return self.bold if bold else self.regular

    def measure(self, text: str, size: float, *, bold: bool = False) -> float:
        """Return the rendered width of ``text`` at ``size``.

        Example:
            >>> FontSet("Helvetica", "Helvetica-Bold").measure("", 12)
            0.0
        """

        return measure_text(text, font_name=self.name(bold=bold), size=size)


def _register(name: str, path: Path) -> bool:
    """Register a TrueType font once; return False when the file is unusable."""

    if name in pdfmetrics.getRegisteredFontNames():
        return True
    if not path.exists():
        return False
    try:
        pdfmetrics.registerFont(TTFont(name, str(path)))
    except Exception:
        return False
    return True


def resolve_fonts(font_dir: Path | None = None) -> FontSet:
    """Register the Poppins pair from ``font_dir`` with Helvetica fallbacks.

    Each variant falls back independently, so a missing bold file still
    keeps the custom regular face.

    Args:
        font_dir: Directory holding ``Poppins-Regular.ttf`` and
            ``Poppins-SemiBold.ttf``; None selects the fallbacks.
    Returns:
        FontSet with registered font names.

    Example:
        >>> resolve_fonts(None)
        FontSet(regular='Helvetica', bold='Helvetica-Bold')
    """

    regular, bold = FALLBACK_REGULAR, FALLBACK_BOLD
    if font_dir is not None:
        base = Path(font_dir)
        if _register(REGULAR_FONT[0], base / REGULAR_FONT[1]):
            regular = REGULAR_FONT[0]
        if _register(BOLD_FONT[0], base / BOLD_FONT[1]):
            bold = BOLD_FONT[0]
    return FontSet(regular=regular, bold=bold)
