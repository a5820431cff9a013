"""Merge generated content with static template pages."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Sequence

from pypdf import PdfWriter

from .pdf_constants import _debug


def _template(path: Path) -> str:
    if not Path(path).is_file():
        raise FileNotFoundError(f"template PDF not found: {path}")
    return str(path)


def assemble_document(
    content: bytes,
    *,
    output_path: Path,
    cover: Path | None = None,
    trailers: Sequence[Path] = (),
) -> int:
    """Write cover, generated content and trailing pages into one PDF.

    Args:
        content: Serialized generated pages.
        output_path: Destination for the merged PDF.
        cover: Optional cover PDF placed first.
        trailers: Template PDFs appended after the content, in order.
    Returns:
        Total page count of the merged document.
    """

    templates = [_template(path) for path in trailers]
    writer = PdfWriter()
    if cover is not None:
        writer.append(_template(cover))
    writer.append(io.BytesIO(content))
    for path in templates:
        writer.append(path)
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("wb") as handle:
        writer.write(handle)
    page_count = len(writer.pages)
    _debug(msg=f"[assemble] wrote {page_count} page(s) to {output_path}")
    return page_count
