"""Shared constants for PDF layout and text processing."""

from __future__ import annotations

import os

BULLET_GLYPH = "–"
NUMBER_SUFFIX = ". "
EPSILON = 1e-4
DEBUG_LAYOUT = os.getenv("DEBUG_LAYOUT", "0") not in {
    "",
    "0",
    "false",
    "False",
}


def _debug(*, msg: str) -> None:
    """Print layout debug output when enabled.

    Args:
        msg: Message to print.
    Returns:
        None.
    """

    if DEBUG_LAYOUT:
        print(msg)
