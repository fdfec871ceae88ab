"""
Integration tests for real PDF rasterization with headless Chromium.

Skipped unless Playwright's Chromium is installed (`playwright install chromium`).
"""

import asyncio
import os
from pathlib import Path

import pytest

from press.contexts.delivery.service import GenerateRequest, generate_resume_pdf
from press.contexts.rendering.rasterizer import PlaywrightRasterizer

BROWSERS_PATH = Path(
    os.getenv("PLAYWRIGHT_BROWSERS_PATH", Path.home() / ".cache" / "ms-playwright")
)
CHROMIUM_AVAILABLE = BROWSERS_PATH.is_dir() and any(BROWSERS_PATH.glob("chromium*"))
skip_if_no_chromium = pytest.mark.skipif(
    not CHROMIUM_AVAILABLE,
    reason="Playwright Chromium not installed - run `playwright install chromium`",
)


@pytest.mark.integration
@pytest.mark.browser
@skip_if_no_chromium
def test_rasterize_minimal_document():
    """Test that Chromium prints a minimal document to a PDF."""
    rasterizer = PlaywrightRasterizer(mode="local")

    pdf_bytes = asyncio.run(rasterizer.rasterize("<!DOCTYPE html><html><body>Hello</body></html>"))

    assert pdf_bytes.startswith(b"%PDF")


@pytest.mark.integration
@pytest.mark.browser
@skip_if_no_chromium
@pytest.mark.parametrize("template", ["default", "classic"])
def test_generate_real_pdf(profile_store, layout_registry, sample_content_text, template):
    """Test the full pipeline end to end with a real browser."""
    request = GenerateRequest(
        profile="jane_doe",
        jd=sample_content_text,
        company="Acme",
        role="Engineer",
        template=template,
    )

    rendered = asyncio.run(
        generate_resume_pdf(request, profile_store, layout_registry, PlaywrightRasterizer(mode="local"))
    )

    assert rendered.filename == "Jane_Doe_Acme_Engineer.pdf"
    assert rendered.content.startswith(b"%PDF")
    assert len(rendered.content) > 1000
