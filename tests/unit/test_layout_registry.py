"""Unit tests for LayoutRegistry class."""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest

from press.contexts.profiles.profile_data_structure import Job, Profile
from press.contexts.rendering.pipeline import render_markup
from press.contexts.templating.document_data_structure import SubmittedContent, SubmittedExperience
from press.contexts.templating.exceptions import LayoutUnavailableError
from press.contexts.templating.merger import merge_document
from press.contexts.templating.registries import (
    DEFAULT_LAYOUT,
    Layout,
    LayoutRegistry,
    format_key,
    join,
)


@pytest.fixture
def document():
    profile = Profile(
        profile_id="tester",
        name="Test Person",
        email="t@example.com",
        experience=(Job(title="Engineer", company="Acme", start_date="2020", end_date="Now"),),
    )
    content = SubmittedContent(
        title="Backend Engineer",
        summary="Builds <fast> services",
        skills={"Languages": ["Python", "Go"]},
        experience=[SubmittedExperience(details=["Cut latency by 40%"])],
    )
    return merge_document(profile, content)


def _write_layouts(path: Path, catalog: str, templates: dict) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    (path / "catalog.yaml").write_text(catalog)
    for filename, source in templates.items():
        (path / filename).write_text(source)
    return path


@pytest.mark.unit
def test_layout_registry_init(layout_registry):
    """Test LayoutRegistry initialization."""
    assert layout_registry.layouts_path.exists()
    assert DEFAULT_LAYOUT in layout_registry.catalog
    assert layout_registry._cache == {}


@pytest.mark.unit
def test_available_layouts(layout_registry):
    """Test that every bundled layout is listed with a label."""
    layouts = dict(layout_registry.available_layouts())

    assert set(layouts) == {"default", "modern", "classic", "contemporary", "compact", "elegant"}
    assert all(layouts.values())


@pytest.mark.unit
@pytest.mark.parametrize("layout_id", ["default", "modern", "classic", "contemporary", "compact", "elegant"])
def test_every_layout_renders(layout_registry, document, layout_id):
    """Test that each bundled layout compiles and renders the document."""
    layout = layout_registry.get(layout_id)
    html = render_markup(document, layout)

    assert isinstance(layout, Layout)
    assert layout.layout_id == layout_id
    assert html.lstrip().startswith("<!DOCTYPE html>")
    assert "Test Person" in html
    assert "Backend Engineer" in html
    assert "Python, Go" in html
    assert "Cut latency by 40%" in html
    assert "Acme" in html


@pytest.mark.unit
def test_markup_is_escaped(layout_registry, document):
    """Test that submitted text is HTML-escaped."""
    html = render_markup(document, layout_registry.get("default"))

    assert "Builds &lt;fast&gt; services" in html
    assert "<fast>" not in html


@pytest.mark.unit
def test_layout_caching(layout_registry):
    """Test that layouts are cached after first load."""
    first = layout_registry.get("modern")
    assert layout_registry.is_cached("modern")

    second = layout_registry.get("modern")
    assert first is second


@pytest.mark.unit
@pytest.mark.parametrize("layout_id", ["nonexistent", "", None, "DEFAULT"])
def test_unknown_layout_falls_back_to_default(layout_registry, document, layout_id):
    """Test that unknown or blank identifiers render exactly like the default."""
    fallback = layout_registry.get(layout_id)
    default = layout_registry.get(DEFAULT_LAYOUT)

    assert fallback is default
    assert render_markup(document, fallback) == render_markup(document, default)


@pytest.mark.unit
def test_missing_template_falls_back_to_default(tmp_path):
    """Test that a catalog entry without a template file uses the default."""
    layouts_path = _write_layouts(
        tmp_path / "layouts",
        "default:\n  file: default.html.jinja\nghost:\n  file: ghost.html.jinja\n",
        {"default.html.jinja": "<p>{{ name }}</p>"},
    )
    registry = LayoutRegistry(layouts_path)

    layout = registry.get("ghost")

    assert layout.layout_id == DEFAULT_LAYOUT
    assert registry.is_cached("ghost")


@pytest.mark.unit
def test_syntax_error_falls_back_to_default(tmp_path):
    """Test that a template that fails to compile uses the default."""
    layouts_path = _write_layouts(
        tmp_path / "layouts",
        "default:\n  file: default.html.jinja\nbroken:\n  file: broken.html.jinja\n",
        {"default.html.jinja": "<p>{{ name }}</p>", "broken.html.jinja": "{% for %}"},
    )
    registry = LayoutRegistry(layouts_path)

    assert registry.get("broken").layout_id == DEFAULT_LAYOUT


@pytest.mark.unit
def test_missing_default_is_fatal(tmp_path):
    """Test that an uncompilable default layout raises."""
    layouts_path = _write_layouts(
        tmp_path / "layouts", "default:\n  file: default.html.jinja\n", {}
    )
    registry = LayoutRegistry(layouts_path)

    with pytest.raises(LayoutUnavailableError):
        registry.get("anything")


@pytest.mark.unit
def test_catalog_without_default_is_fatal(tmp_path):
    """Test that a catalog lacking the default entry is rejected at startup."""
    layouts_path = _write_layouts(tmp_path / "layouts", "modern:\n  file: m.html.jinja\n", {})

    with pytest.raises(LayoutUnavailableError):
        LayoutRegistry(layouts_path)


@pytest.mark.unit
def test_concurrent_first_use(document):
    """Test that concurrent first requests for one layout produce identical markup."""
    registry = LayoutRegistry()

    def render(_):
        return render_markup(document, registry.get("elegant"))

    with ThreadPoolExecutor(max_workers=2) as pool:
        first, second = pool.map(render, range(2))

    assert first == second
    assert registry.is_cached("elegant")


@pytest.mark.unit
def test_get_template_path(layout_registry):
    """Test getting a layout's template file path."""
    path = layout_registry.get_template_path("modern")

    assert path.name == "modern.html.jinja"
    assert path.exists()


@pytest.mark.unit
def test_clear_cache(layout_registry):
    """Test cache clearing."""
    layout_registry.get("default")
    assert len(layout_registry._cache) == 1

    layout_registry.clear_cache()
    assert len(layout_registry._cache) == 0


@pytest.mark.unit
def test_join_helper():
    """Test the join helper used by layouts."""
    assert join(["a", "b", 3], " | ") == "a | b | 3"
    assert join(("x",), ", ") == "x"
    assert join("not a list", ", ") == ""
    assert join(None, ", ") == ""
    assert join({"a": 1}, ", ") == ""


@pytest.mark.unit
def test_format_key_helper():
    """Test that format_key passes keys through unchanged."""
    assert format_key("Cloud & DevOps") == "Cloud & DevOps"
