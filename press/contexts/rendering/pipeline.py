"""
Render Pipeline

Two steps: apply a layout to a merged document to get HTML, then hand the HTML
to a rasterizer for PDF bytes. Failures in either step surface as RenderError.
"""

from press.contexts.rendering.exceptions import RenderError
from press.contexts.rendering.logger import _log_debug, _log_info, log_render_failure
from press.contexts.rendering.rasterizer import Rasterizer
from press.contexts.templating.document_data_structure import MergedDocument
from press.contexts.templating.registries import Layout


def render_markup(document: MergedDocument, layout: Layout) -> str:
    """
    Apply a layout to a merged document.

    Args:
        document: Render-ready document
        layout: Compiled layout

    Returns:
        Complete HTML document

    Raises:
        RenderError: If the layout cannot be applied (e.g., skills is not a mapping)
    """
    try:
        markup = layout.render(document.to_context())
    except Exception as e:
        # Jinja2 surfaces bad data shapes as UndefinedError, TypeError, AttributeError...
        error = RenderError("Layout could not be applied", "markup", layout.layout_id, e)
        log_render_failure(error)
        raise error from e

    _log_info(f"HTML rendered from layout: {layout.layout_id}")
    _log_debug(f"  Markup length: {len(markup)}")
    return markup


async def render_pdf(document: MergedDocument, layout: Layout, rasterizer: Rasterizer) -> bytes:
    """
    Render a merged document to PDF bytes.

    Args:
        document: Render-ready document
        layout: Compiled layout
        rasterizer: Engine that prints HTML to PDF

    Returns:
        PDF bytes

    Raises:
        RenderError: If markup generation or rasterization fails
    """
    markup = render_markup(document, layout)

    try:
        return await rasterizer.rasterize(markup)
    except Exception as e:
        error = RenderError("PDF rasterization failed", "rasterize", layout.layout_id, e)
        log_render_failure(error)
        raise error from e
