"""Serialize rendered page canvases with ReportLab."""

from __future__ import annotations

import io
from typing import Sequence

from reportlab.pdfgen import canvas

from .pdf_constants import _debug
from .pdf_types import PageCanvas


def write_pages(pages: Sequence[PageCanvas], *, title: str | None = None) -> bytes:
    """Return PDF bytes containing one PDF page per canvas.

    Args:
        pages: Finalized pages from the renderer.
        title: Optional document title stored in the PDF metadata.
    Returns:
        The serialized PDF.
    """

    if not pages:
        raise ValueError("write_pages needs at least one page")
    buffer = io.BytesIO()
    pdf = canvas.Canvas(buffer, pagesize=(pages[0].width, pages[0].height))
    if title:
        pdf.setTitle(title)
    for page in pages:
        pdf.setPageSize((page.width, page.height))
        for run in page.runs:
            pdf.setFont(run.font_name, run.size)
            pdf.drawString(run.x, run.y, run.text)
        pdf.showPage()
    pdf.save()
    _debug(msg=f"[writer] serialized {len(pages)} page(s)")
    return buffer.getvalue()
