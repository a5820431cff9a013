"""Text measurement and greedy line wrapping."""

from __future__ import annotations

from typing import List

from reportlab.pdfbase import pdfmetrics


def measure_text(text: str, *, font_name: str, size: float) -> float:
    """Return the rendered width of text for a registered font.

    Args:
        text: Plain text to measure.
        font_name: Registered ReportLab font name.
        size: Font size in points.
    Returns:
        Width in points.

    Example:
        >>> measure_text("ab", font_name="Helvetica", size=10) > 0
        True
    """

    if not font_name:
        raise ValueError("measure_text requires a registered font name")
    return float(pdfmetrics.stringWidth(text, font_name, size))


def wrap_lines(
    text: str, *, font_name: str, size: float, max_width: float
) -> List[str]:
    """Greedily wrap text into lines no wider than ``max_width``.

    Tokens are split on whitespace and never broken, so a single word wider
    than ``max_width`` overflows on its own line.

    Args:
        text: Source text; newlines count as plain whitespace.
        font_name: Registered font used for the final drawing.
        size: Font size in points.
        max_width: Available width in points.
    Returns:
        Wrapped lines; empty input yields no lines.

    Example:
        >>> wrap_lines("  ", font_name="Helvetica", size=12, max_width=100)
        []
        >>> wrap_lines("a b", font_name="Helvetica", size=12, max_width=500)
        ['a b']
    """

    if max_width <= 0:
        raise ValueError(f"max_width must be positive, got {max_width!r}")
    lines: List[str] = []
    buffer = ""
    for token in str(text or "").split():
        candidate = f"{buffer} {token}" if buffer else token
        too_wide = measure_text(candidate, font_name=font_name, size=size) > max_width
        if too_wide and buffer:
            lines.append(buffer)
            buffer = token
        else:
            buffer = candidate
    if buffer:
        lines.append(buffer)
    return lines
