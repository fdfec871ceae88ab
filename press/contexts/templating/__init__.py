"""
Templating Context

Responsibilities:
- Extracts and validates submitted resume content from loosely formatted JSON text
- Merges submitted content with a stored profile into a render-ready document
- Manages the HTML layout system (press/contexts/templating/layouts/)

Owns: Submitted content parsing, document merging, layout catalog and compilation
Never: Launches the rasterizer or decides transport details
"""

from press.contexts.templating.document_data_structure import (
    MergedDocument,
    MergedExperience,
    SubmittedContent,
    SubmittedExperience,
)
from press.contexts.templating.exceptions import (
    LayoutUnavailableError,
    MalformedInputError,
    MissingFieldsError,
)
from press.contexts.templating.merger import merge_document
from press.contexts.templating.normalizer import normalize_content
from press.contexts.templating.registries import DEFAULT_LAYOUT, Layout, LayoutRegistry

__all__ = [
    # Normalization and merging
    "normalize_content",
    "merge_document",
    # Layouts
    "Layout",
    "LayoutRegistry",
    "DEFAULT_LAYOUT",
    # Data structure classes
    "SubmittedContent",
    "SubmittedExperience",
    "MergedDocument",
    "MergedExperience",
    # Errors
    "MalformedInputError",
    "MissingFieldsError",
    "LayoutUnavailableError",
]
