"""
HTTP API for resume generation.

Endpoints:
    POST /api/generate   - Render a resume PDF (attachment download)
    GET  /api/profiles   - List stored profiles for selection
    GET  /api/templates  - List available layouts
    GET  /health         - Liveness check

Errors are returned as plain text with the status carried by the PressError:
400 for a missing request field, 404 for an unknown profile, 500 otherwise.
"""

from functools import lru_cache
from typing import Dict, List, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.responses import PlainTextResponse, Response
from pydantic import BaseModel

from press import __version__
from press.contexts.delivery.service import GenerateRequest, generate_resume_pdf
from press.contexts.profiles.profile_store import ProfileStore
from press.contexts.rendering.rasterizer import PlaywrightRasterizer, Rasterizer
from press.contexts.templating.registries import DEFAULT_LAYOUT, LayoutRegistry
from press.utils.errors import PressError

app = FastAPI(title="PRESS", version=__version__)


class GenerateBody(BaseModel):
    """Request body for /api/generate; required fields are checked by the service."""

    profile: Optional[str] = None
    jd: Optional[str] = None
    company: Optional[str] = None
    role: Optional[str] = None
    template: Optional[str] = DEFAULT_LAYOUT


@lru_cache(maxsize=None)
def get_profile_store() -> ProfileStore:
    return ProfileStore()


@lru_cache(maxsize=None)
def get_layout_registry() -> LayoutRegistry:
    return LayoutRegistry()


def get_rasterizer() -> Rasterizer:
    return PlaywrightRasterizer()


@app.exception_handler(PressError)
async def press_error_handler(request: Request, exc: PressError) -> PlainTextResponse:
    if exc.status_code >= 500:
        return PlainTextResponse(f"PDF generation failed: {exc.message}", status_code=exc.status_code)
    return PlainTextResponse(exc.message, status_code=exc.status_code)


@app.post("/api/generate")
async def generate(
    body: GenerateBody,
    store: ProfileStore = Depends(get_profile_store),
    registry: LayoutRegistry = Depends(get_layout_registry),
    rasterizer: Rasterizer = Depends(get_rasterizer),
) -> Response:
    rendered = await generate_resume_pdf(
        GenerateRequest(**body.model_dump()), store, registry, rasterizer
    )
    return Response(
        content=rendered.content,
        media_type="application/pdf",
        headers={"Content-Disposition": rendered.content_disposition},
    )


@app.get("/api/profiles")
def list_profiles(store: ProfileStore = Depends(get_profile_store)) -> List[Dict[str, str]]:
    return [{"id": summary.id, "name": summary.name} for summary in store.list_profiles()]


@app.get("/api/templates")
def list_templates(registry: LayoutRegistry = Depends(get_layout_registry)) -> List[Dict[str, str]]:
    return [{"id": layout_id, "label": label} for layout_id, label in registry.available_layouts()]


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}
