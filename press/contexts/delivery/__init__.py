"""
Delivery Context

Responsibilities:
- Validates incoming generate requests
- Orchestrates profile lookup, normalization, merging and rendering per request
- Derives filesystem-safe download filenames
- Serves the HTTP API (FastAPI) and maps errors to transport statuses

Owns: Request/response shape, filenames, orchestration
Never: Parses content or renders layouts itself
"""

from press.contexts.delivery.exceptions import MissingRequestFieldError
from press.contexts.delivery.filenames import (
    content_disposition,
    derive_filename,
    sanitize_filename_part,
)
from press.contexts.delivery.service import GenerateRequest, RenderedPdf, generate_resume_pdf

__all__ = [
    "generate_resume_pdf",
    "GenerateRequest",
    "RenderedPdf",
    "derive_filename",
    "sanitize_filename_part",
    "content_disposition",
    "MissingRequestFieldError",
]
