"""Shared fixtures for PRESS tests."""

import json
from pathlib import Path

import pytest

from press.contexts.profiles.profile_store import ProfileStore
from press.contexts.templating.registries import LayoutRegistry

FIXTURES_PATH = Path(__file__).parent / "fixtures"
PROFILES_FIXTURES_PATH = FIXTURES_PATH / "profiles"

FAKE_PDF = b"%PDF-1.4\n% press test document\n%%EOF\n"

SAMPLE_CONTENT = {
    "title": "Senior Backend Engineer",
    "summary": "Builds reliable data services.",
    "skills": {"Languages": ["Python", "Go"], "Cloud": ["AWS", "Kubernetes"]},
    "experience": [
        {"title": "Staff Engineer", "details": ["Led the billing rewrite", "Mentored four engineers"]},
        {"details": ["Shipped the reporting API"]},
    ],
}


class FakeRasterizer:
    """Rasterizer double that records markup and returns a fixed PDF."""

    def __init__(self, result: bytes = FAKE_PDF, error: Exception = None):
        self.result = result
        self.error = error
        self.calls = []

    async def rasterize(self, markup: str) -> bytes:
        self.calls.append(markup)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def profile_store():
    return ProfileStore(PROFILES_FIXTURES_PATH)


@pytest.fixture
def layout_registry():
    return LayoutRegistry()


@pytest.fixture
def fake_rasterizer():
    return FakeRasterizer()


@pytest.fixture
def sample_content_text():
    return json.dumps(SAMPLE_CONTENT, indent=2)
