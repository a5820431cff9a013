"""PDF generation for positioning reports."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence

from ..models import ReportInput
from .pdf_assemble import assemble_document
from .pdf_blocks import build_blocks
from .pdf_render import render_blocks
from .pdf_settings import FontSet, LayoutSettings, resolve_fonts
from .pdf_types import PageCanvas
from .pdf_writer import write_pages

__all__ = [
    "BuildResult",
    "FontSet",
    "LayoutSettings",
    "build_pdf",
    "render_report",
    "resolve_fonts",
]


@dataclass(slots=True)
class BuildResult:
    """Summary of a finished build.

    Args:
        output_path: Merged PDF location.
        content_pages: Pages generated from the report.
        total_pages: Pages in the merged document, templates included.
    """

    output_path: Path
    content_pages: int
    total_pages: int


def render_report(
    report: ReportInput,
    *,
    settings: LayoutSettings | None = None,
    fonts: FontSet | None = None,
    font_dir: Path | None = None,
) -> List[PageCanvas]:
    """Render a report into page canvases.

    Fonts are resolved once here and reused for every measurement and draw.

    Args:
        report: Parsed report input.
        settings: Layout settings; defaults to A4 with standard spacing.
        fonts: Pre-resolved fonts; resolved from ``font_dir`` when omitted.
        font_dir: Directory with the Poppins font files.
    Returns:
        Finalized page canvases.
    """

    settings = settings or LayoutSettings()
    fonts = fonts or resolve_fonts(font_dir)
    return render_blocks(build_blocks(report), settings=settings, fonts=fonts)


def build_pdf(
    report: ReportInput,
    output_path: Path,
    *,
    settings: LayoutSettings | None = None,
    font_dir: Path | None = None,
    cover: Path | None = None,
    trailers: Sequence[Path] = (),
) -> BuildResult:
    """Render a report and merge it with optional template pages.

    Args:
        report: Parsed report input.
        output_path: Destination PDF path.
        settings: Layout settings.
        font_dir: Directory with the Poppins font files.
        cover: Optional cover PDF.
        trailers: Template PDFs appended after the content.
    Returns:
        BuildResult with page counts.
    """

    pages = render_report(report, settings=settings, font_dir=font_dir)
    content = write_pages(pages, title=report.title)
    total = assemble_document(
        content, output_path=Path(output_path), cover=cover, trailers=trailers
    )
    return BuildResult(
        output_path=Path(output_path), content_pages=len(pages), total_pages=total
    )
