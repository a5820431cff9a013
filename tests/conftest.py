"""Shared fixtures for layout tests."""

import pytest

from positioning.pdf.pdf_settings import FontSet, LayoutSettings, resolve_fonts


@pytest.fixture()
def settings() -> LayoutSettings:
    return LayoutSettings()


@pytest.fixture()
def fonts() -> FontSet:
    return resolve_fonts(None)
