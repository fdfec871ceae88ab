"""
Rendering Context

Responsibilities:
- Applies a compiled layout to a merged document to produce HTML
- Rasterizes HTML to PDF with headless Chromium (Playwright)
- Releases the browser on every exit path
- Reports template and browser failures as RenderError

Owns: Markup generation, PDF rasterization, page settings
Never: Modifies document content or layout definitions
"""

from press.contexts.rendering.exceptions import RenderError
from press.contexts.rendering.pipeline import render_markup, render_pdf
from press.contexts.rendering.rasterizer import (
    PdfSettings,
    PlaywrightRasterizer,
    Rasterizer,
    detect_chromium_mode,
)

__all__ = [
    "render_markup",
    "render_pdf",
    "Rasterizer",
    "PlaywrightRasterizer",
    "PdfSettings",
    "detect_chromium_mode",
    "RenderError",
]
