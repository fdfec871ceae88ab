"""
Templating Registries

Registry for loading, compiling and caching the HTML layouts resumes are
rendered through.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

from dotenv import load_dotenv
from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateNotFound,
    TemplateSyntaxError,
)
from omegaconf import OmegaConf

from press.contexts.templating.exceptions import LayoutUnavailableError
from press.contexts.templating.logger import _log_debug, _log_info, _log_warning

load_dotenv()
LAYOUTS_PATH = Path(os.getenv("PRESS_LAYOUTS_PATH", Path(__file__).resolve().parent / "layouts"))

DEFAULT_LAYOUT = "default"
CATALOG_FILENAME = "catalog.yaml"


def format_key(key: Any) -> Any:
    """Layout helper for skill category labels; currently the identity."""
    return key


def join(items: Any, separator: str = ", ") -> str:
    """Layout helper joining list items with separator ("" for non-lists)."""
    if isinstance(items, (list, tuple)):
        return separator.join(str(item) for item in items)
    return ""


@dataclass(frozen=True)
class Layout:
    """
    A compiled, named layout.

    Attributes:
        layout_id: Catalog identifier (e.g., 'modern')
        label: Human-readable name for selection lists
        template: Compiled Jinja2 template producing HTML
    """

    layout_id: str
    label: str
    template: Template

    def render(self, context: Mapping[str, Any]) -> str:
        """Render the layout with a document context (see MergedDocument.to_context())."""
        return self.template.render(context)


class LayoutRegistry:
    """
    Registry for loading and caching resume layouts.

    Layouts are HTML Jinja2 templates listed in {layouts_path}/catalog.yaml:

        modern:
          file: modern.html.jinja
          label: Modern Minimalist

    Unknown or blank identifiers resolve to the default layout, as does any
    layout whose template is missing or fails to compile. Only a broken default
    is an error.
    """

    def __init__(self, layouts_path: Path = None):
        """
        Initialize the layout registry.

        Args:
            layouts_path: Directory with catalog.yaml and layout templates.
                          Defaults to PRESS_LAYOUTS_PATH from environment
        """
        if layouts_path is None:
            layouts_path = LAYOUTS_PATH

        self.layouts_path = Path(layouts_path)
        self.catalog: Dict[str, Dict[str, str]] = self._load_catalog()
        self._cache: Dict[str, Layout] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.layouts_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.globals["format_key"] = format_key
        self.env.globals["join"] = join

    def _load_catalog(self) -> Dict[str, Dict[str, str]]:
        catalog_path = self.layouts_path / CATALOG_FILENAME
        if not catalog_path.exists():
            raise LayoutUnavailableError(DEFAULT_LAYOUT, template_path=catalog_path)

        catalog = OmegaConf.to_container(OmegaConf.load(catalog_path), resolve=True)
        if DEFAULT_LAYOUT not in catalog:
            raise LayoutUnavailableError(DEFAULT_LAYOUT, template_path=catalog_path)
        return catalog

    def resolve_id(self, layout_id: Optional[str]) -> str:
        """Map a requested identifier to a catalog identifier (default if unknown)."""
        if layout_id and layout_id in self.catalog:
            return layout_id
        if layout_id:
            _log_debug(f"Unknown layout '{layout_id}', using '{DEFAULT_LAYOUT}'")
        return DEFAULT_LAYOUT

    def _compile(self, layout_id: str) -> Layout:
        entry = self.catalog[layout_id]
        template = self.env.get_template(entry["file"])
        return Layout(layout_id=layout_id, label=entry.get("label", layout_id), template=template)

    def get(self, layout_id: Optional[str] = DEFAULT_LAYOUT) -> Layout:
        """
        Get a layout by identifier, compiling and caching it if necessary.

        Args:
            layout_id: Catalog identifier (e.g., 'modern'); None, blank or
                       unknown identifiers resolve to the default

        Returns:
            Compiled Layout

        Raises:
            LayoutUnavailableError: If the default layout cannot be compiled
        """
        layout_id = self.resolve_id(layout_id)

        # Check cache first
        if layout_id in self._cache:
            return self._cache[layout_id]

        try:
            layout = self._compile(layout_id)
        except (TemplateNotFound, TemplateSyntaxError) as e:
            if layout_id == DEFAULT_LAYOUT:
                raise LayoutUnavailableError(
                    DEFAULT_LAYOUT, self.get_template_path(DEFAULT_LAYOUT), e
                ) from e
            # Cached under the requested id so the broken template is tried only once
            _log_warning(f"Layout '{layout_id}' could not be compiled ({e}), using default")
            layout = self.get(DEFAULT_LAYOUT)
        else:
            _log_info(f"Compiled layout: {layout_id}")

        self._cache[layout_id] = layout
        return layout

    def get_template_path(self, layout_id: str) -> Path:
        """
        Get the file path for a layout's template.

        Args:
            layout_id: Catalog identifier

        Returns:
            Path to template file
        """
        return self.layouts_path / self.catalog[self.resolve_id(layout_id)]["file"]

    def available_layouts(self) -> List[Tuple[str, str]]:
        """List (identifier, label) pairs in catalog order."""
        return [(layout_id, entry.get("label", layout_id)) for layout_id, entry in self.catalog.items()]

    def clear_cache(self):
        """Clear the layout cache."""
        self._cache.clear()

    def is_cached(self, layout_id: str) -> bool:
        """
        Check if a layout is in the cache.

        Args:
            layout_id: Catalog identifier

        Returns:
            True if cached, False otherwise
        """
        return layout_id in self._cache
