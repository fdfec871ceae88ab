"""Custom exceptions for rendering context."""

from typing import Optional

from press.utils.errors import PressError


class RenderError(PressError):
    """
    Exception raised when a document cannot be turned into a PDF.

    Attributes:
        message: Error description
        stage: Pipeline stage that failed ("markup" or "rasterize")
        layout_id: Layout being rendered, if known
        original_error: The underlying Jinja2 or browser error
    """

    def __init__(
        self,
        message: str,
        stage: str,
        layout_id: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.stage = stage
        self.layout_id = layout_id
        self.original_error = original_error

        parts = [message]
        if layout_id:
            parts.append(f"(layout: {layout_id})")
        if original_error:
            parts.append(f"{type(original_error).__name__}: {original_error}")

        super().__init__(" ".join(parts))
