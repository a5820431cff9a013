"""
Load report payloads and route section headings to their renderers.
"""

from __future__ import annotations

import json
import re
from enum import Enum
from pathlib import Path
from typing import Any, List, Mapping

from .models import ReportInput, Section

DEFAULT_TITLE = "Ergebnis"

_TRIGGER_HEADING = re.compile(r"^\s*(?:wichtige\s+)?trigger", re.IGNORECASE)
_BENEFITS_HEADING = re.compile(r"^\s*(?:vorteile|benefits|advantages)", re.IGNORECASE)

DEMO_PAYLOAD: dict[str, Any] = {
    "gpt": {
        "title": "Deine persönliche Positionierung",
        "sections": [
            {"heading": "Dein Angebot", "text": "Demo-Fließtext ..."},
            {"heading": "Deine Zielgruppe", "text": "Demo-Fließtext ..."},
            {
                "heading": "Wichtige Trigger für deine Entscheider",
                "text": (
                    "Typische Ängste:\n1. Sorge A\n2. Sorge B\n3. Sorge C\n4. Sorge D\n"
                    "5. Sorge E\n\nTypische Ziele:\n1. Ziel A\n2. Ziel B\n3. Ziel C\n"
                    "4. Ziel D\n5. Ziel E\n\nTypische Vorurteile:\n1. Vorurteil A\n"
                    "2. Vorurteil B\n3. Vorurteil C\n4. Vorurteil D\n5. Vorurteil E"
                ),
            },
            {
                "heading": "Vorteile deines Angebots",
                "text": (
                    "Typische Ängste – Beispiele:\n1. Ungeplante Kosten\n"
                    "- Beispiel 1 zur Kostenkontrolle\n- Beispiel 2 zur Kalkulation\n\n"
                    "Typische Ziele – Beispiele:\n1. Schneller Abschluss\n"
                    "- Beispiel 1 zur Beschleunigung\n- Beispiel 2 zu Prozessen"
                ),
            },
            {"heading": "Dein Positionierungs-Vorschlag", "text": "Demo Vorschlag ..."},
        ],
    }
}


class SectionKind(Enum):
    """How a section body is laid out."""

    TRIGGERS = "triggers"
    BENEFITS = "benefits"
    PROSE = "prose"


def classify_heading(heading: str) -> SectionKind:
    """Return the layout kind for a section heading.

    Example:
        >>> classify_heading("Wichtige Trigger für deine Entscheider")
        <SectionKind.TRIGGERS: 'triggers'>
        >>> classify_heading("Vorteile deines Angebots").value
        'benefits'
        >>> classify_heading("Dein Angebot").value
        'prose'
    """

    if _TRIGGER_HEADING.match(heading or ""):
        return SectionKind.TRIGGERS
    if _BENEFITS_HEADING.match(heading or ""):
        return SectionKind.BENEFITS
    return SectionKind.PROSE


def _text(value: object) -> str:
    return str(value).strip() if value is not None else ""


def load_report(data: Mapping[str, Any]) -> ReportInput:
    """Build a ReportInput from a decoded JSON payload.

    Accepts ``{"gpt": {...}}`` as well as the inner object directly.
    Malformed sections are skipped; a missing title becomes 'Ergebnis'.

    Example:
        >>> report = load_report({"gpt": {"sections": [{"heading": "A", "text": "b"}, 3]}})
        >>> report.title, [s.heading for s in report.sections]
        ('Ergebnis', ['A'])
    """

    if not isinstance(data, Mapping):
        raise TypeError(f"report payload must be a mapping, got {type(data).__name__}")
    body = data.get("gpt", data)
    if not isinstance(body, Mapping):
        body = {}
    raw_sections = body.get("sections")
    sections: List[Section] = []
    if isinstance(raw_sections, list):
        for entry in raw_sections:
            if not isinstance(entry, Mapping):
                continue
            sections.append(Section(_text(entry.get("heading")), _text(entry.get("text"))))
    return ReportInput(title=_text(body.get("title")) or DEFAULT_TITLE, sections=sections)


def load_report_file(path: Path) -> ReportInput:
    """Load a ReportInput from a JSON file."""

    return load_report(json.loads(Path(path).read_text(encoding="utf-8")))
