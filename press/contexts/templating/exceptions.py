"""Custom exceptions for the templating context."""

from pathlib import Path
from typing import Iterable, List, Optional

from press.utils.errors import PressError


class MalformedInputError(PressError):
    """
    Raised when submitted content does not contain a parseable JSON object.

    Attributes:
        message: Error description
        parser_message: Message from the first (strict) JSON parse, if one was attempted
        snippet: Leading part of the text that failed to parse
    """

    def __init__(
        self,
        message: str,
        parser_message: Optional[str] = None,
        snippet: Optional[str] = None,
    ):
        self.parser_message = parser_message
        self.snippet = snippet

        if parser_message:
            message = f"{message}: {parser_message}. Please check your JSON syntax."
        super().__init__(message)


class MissingFieldsError(PressError):
    """
    Raised when submitted content lacks one of the required top-level fields.

    Attributes:
        missing: Required fields that are absent or null
        present: Top-level keys the content does have
        required: Every required field, in canonical order
    """

    def __init__(self, missing: Iterable[str], present: Iterable[str], required: Iterable[str]):
        self.missing: List[str] = list(missing)
        self.present: List[str] = list(present)
        self.required: List[str] = list(required)

        message = (
            f"JSON missing required fields ({', '.join(self.missing)}). "
            f"Required: {', '.join(self.required)}; "
            f"present: {', '.join(self.present) or 'none'}"
        )
        super().__init__(message)


class LayoutUnavailableError(PressError):
    """
    Raised when the default layout itself cannot be compiled.

    Other layouts fall back to the default, so this always means the layout
    directory or catalog is misconfigured.

    Attributes:
        layout_id: Identifier that could not be compiled
        template_path: Path to the template file that was expected
        original_error: The original Jinja2 error
    """

    def __init__(
        self,
        layout_id: str,
        template_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.layout_id = layout_id
        self.template_path = template_path
        self.original_error = original_error

        parts = [f"Default layout '{layout_id}' is unavailable"]
        if template_path:
            parts.append(f"Template: {template_path}")
        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))
