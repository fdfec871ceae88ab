"""
Resume generation orchestration.

Runs one request through every context: profile lookup, content normalization,
document merge, layout selection, rendering and filename derivation.
"""

import time
from dataclasses import dataclass
from typing import Optional

from press.contexts.delivery.exceptions import MissingRequestFieldError
from press.contexts.delivery.filenames import content_disposition, derive_filename
from press.contexts.delivery.logger import (
    log_request_failure,
    log_request_result,
    log_request_start,
)
from press.contexts.profiles.profile_store import ProfileStore
from press.contexts.rendering.pipeline import render_pdf
from press.contexts.rendering.rasterizer import Rasterizer
from press.contexts.templating.merger import merge_document
from press.contexts.templating.normalizer import normalize_content
from press.contexts.templating.registries import DEFAULT_LAYOUT, LayoutRegistry
from press.utils.errors import PressError

# Checked in this order; the first missing field is reported
REQUIRED_REQUEST_FIELDS = (
    ("profile", "Profile required"),
    ("jd", "Completed resume JSON required"),
    ("company", "Company name required"),
    ("role", "Role name required"),
)


@dataclass
class GenerateRequest:
    """
    One request to turn submitted content into a PDF.

    Attributes:
        profile: Profile identifier
        jd: Completed resume JSON text (may be wrapped in fences or prose)
        company: Target company, used in the filename
        role: Target role, used in the filename
        template: Layout identifier; unknown values use the default layout
    """

    profile: Optional[str] = None
    jd: Optional[str] = None
    company: Optional[str] = None
    role: Optional[str] = None
    template: Optional[str] = DEFAULT_LAYOUT

    def validate(self) -> None:
        """
        Raise MissingRequestFieldError for the first missing or empty required field.
        """
        for field_name, message in REQUIRED_REQUEST_FIELDS:
            if not getattr(self, field_name):
                raise MissingRequestFieldError(field_name, message)


@dataclass
class RenderedPdf:
    """Generated resume: PDF bytes plus the filename clients should save it under."""

    content: bytes
    filename: str

    @property
    def content_disposition(self) -> str:
        return content_disposition(self.filename)


async def generate_resume_pdf(
    request: GenerateRequest,
    store: ProfileStore,
    registry: LayoutRegistry,
    rasterizer: Rasterizer,
) -> RenderedPdf:
    """
    Generate a resume PDF for one request.

    Args:
        request: Request fields as received from the client
        store: Profile store to load the profile from
        registry: Layout registry to select the layout from
        rasterizer: Engine that prints the rendered HTML to PDF

    Returns:
        RenderedPdf with the PDF bytes and derived filename

    Raises:
        MissingRequestFieldError: A required request field is missing (400)
        ProfileNotFoundError: No profile has the requested identifier (404)
        MalformedInputError, MissingFieldsError: Content cannot be used (500)
        RenderError: Layout or rasterization failed (500)
    """
    start_time = time.time()
    try:
        request.validate()
        log_request_start(request.profile, request.company, request.role, request.template)

        profile = store.load(request.profile)
        content = normalize_content(request.jd)
        document = merge_document(profile, content)
        layout = registry.get(request.template)

        pdf_bytes = await render_pdf(document, layout, rasterizer)
        filename = derive_filename(profile.display_name, request.company, request.role)
    except PressError as e:
        log_request_failure(e, time.time() - start_time)
        raise

    log_request_result(filename, len(pdf_bytes), time.time() - start_time)
    return RenderedPdf(content=pdf_bytes, filename=filename)
