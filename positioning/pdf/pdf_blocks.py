"""Convert report sections into document blocks."""

from __future__ import annotations

from typing import List

from ..ingest import SectionKind, classify_heading
from ..models import ReportInput, Section
from ..outline import parse_outline
from .pdf_constants import _debug
from .pdf_types import (
    Block,
    Headline,
    Label,
    NestedList,
    NumberedList,
    Paragraph,
    SubHeadline,
)


def section_blocks(section: Section) -> List[Block]:
    """Return the blocks for one section.

    Trigger sections become a label plus numbered list per category, benefit
    sections a nested list, everything else a paragraph. A routed section
    whose outline comes back empty falls back to a paragraph so its text is
    not lost.

    Args:
        section: Section with heading and raw body text.
    Returns:
        Blocks in drawing order.
    """

    blocks: List[Block] = [SubHeadline(section.heading)] if section.heading else []
    body: List[Block] = []
    kind = classify_heading(section.heading)
    if kind is SectionKind.TRIGGERS:
        for group in parse_outline(section.text, with_examples=False):
            body.append(Label(group.label))
            body.append(NumberedList(tuple(item.title for item in group.items)))
    elif kind is SectionKind.BENEFITS:
        groups = parse_outline(section.text)
        if groups:
            body.append(NestedList(tuple(groups)))
    if not body and section.text:
        if kind is not SectionKind.PROSE:
            _debug(msg=f"[blocks] no outline in {section.heading!r}; using paragraph")
        body.append(Paragraph(section.text))
    return blocks + body


def build_blocks(report: ReportInput) -> List[Block]:
    """Return the full block sequence for a report, headline first."""

    blocks: List[Block] = [Headline(report.title)]
    for section in report.sections:
        blocks.extend(section_blocks(section))
    return blocks
