"""
PDF Rasterization Module

Turns HTML markup into PDF bytes with headless Chromium driven by Playwright.
The pipeline only depends on the Rasterizer protocol; PlaywrightRasterizer is
the production implementation.
"""

import os
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol

from dotenv import load_dotenv
from omegaconf import OmegaConf
from playwright.async_api import async_playwright

from press.contexts.rendering.logger import (
    _log_debug,
    log_rasterize_result,
    log_rasterize_start,
)

load_dotenv()
PDF_SETTINGS_PATH = Path(
    os.getenv("PRESS_PDF_SETTINGS_PATH", Path(__file__).resolve().parent / "pdf_settings.yaml")
)
CHROMIUM_MODE = os.getenv("PRESS_CHROMIUM_MODE")
CHROMIUM_EXECUTABLE = os.getenv("PRESS_CHROMIUM_EXECUTABLE")

CHROMIUM_MODES = ("local", "serverless")

# Environment variables set by serverless platforms
SERVERLESS_MARKERS = ("VERCEL", "VERCEL_ENV", "AWS_LAMBDA_FUNCTION_NAME")


class Rasterizer(Protocol):
    """Anything that can turn a complete HTML document into PDF bytes."""

    async def rasterize(self, markup: str) -> bytes: ...


@dataclass
class PdfSettings:
    """
    Page and browser settings for rasterization.

    Attributes:
        format: Paper format (e.g., "A4")
        print_background: Print background colors and images
        prefer_css_page_size: Let layout CSS @page size override format
        margin: Page margins keyed by top/bottom/left/right
        wait_until: Page load event to wait for before printing
        headless: Launch Chromium without a window
        chromium_args: Extra Chromium command-line flags per mode
    """

    format: str = "A4"
    print_background: bool = True
    prefer_css_page_size: bool = False
    margin: Dict[str, str] = field(
        default_factory=lambda: {"top": "15mm", "bottom": "15mm", "left": "0mm", "right": "0mm"}
    )
    wait_until: str = "load"
    headless: bool = True
    chromium_args: Dict[str, List[str]] = field(default_factory=dict)

    @classmethod
    def from_config(cls, config_path: Path = None) -> "PdfSettings":
        """
        Load settings from pdf_settings.yaml.

        Args:
            config_path: Optional path (defaults to PRESS_PDF_SETTINGS_PATH)
        """
        if config_path is None:
            config_path = PDF_SETTINGS_PATH

        config = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)
        page = config.get("page", {})
        chromium = config.get("chromium", {})

        return cls(
            format=page.get("format", "A4"),
            print_background=page.get("print_background", True),
            prefer_css_page_size=page.get("prefer_css_page_size", False),
            margin=page.get("margin", {}),
            wait_until=config.get("wait_until", "load"),
            headless=chromium.get("headless", True),
            chromium_args=chromium.get("args", {}),
        )

    def pdf_options(self) -> Dict[str, Any]:
        """Keyword arguments for Playwright's page.pdf()."""
        return {
            "format": self.format,
            "print_background": self.print_background,
            "margin": dict(self.margin),
            "prefer_css_page_size": self.prefer_css_page_size,
        }


def detect_chromium_mode() -> str:
    """
    Choose "serverless" or "local" Chromium settings.

    PRESS_CHROMIUM_MODE wins when set; otherwise serverless platforms are
    recognised by their environment markers.

    Raises:
        ValueError: If PRESS_CHROMIUM_MODE names an unknown mode
    """
    if CHROMIUM_MODE:
        if CHROMIUM_MODE not in CHROMIUM_MODES:
            raise ValueError(
                f"PRESS_CHROMIUM_MODE must be one of {CHROMIUM_MODES}, got '{CHROMIUM_MODE}'"
            )
        return CHROMIUM_MODE

    if any(os.getenv(marker) for marker in SERVERLESS_MARKERS):
        return "serverless"
    return "local"


class PlaywrightRasterizer:
    """
    Rasterizer backed by a fresh headless Chromium per call.

    Nothing is shared between calls: each rasterize() starts Playwright, launches
    a browser, prints one page and closes the browser again, whether printing
    succeeded or raised.
    """

    def __init__(
        self,
        settings: Optional[PdfSettings] = None,
        mode: Optional[str] = None,
        executable_path: Optional[str] = CHROMIUM_EXECUTABLE,
    ):
        self.settings = settings or PdfSettings.from_config()
        self.mode = mode or detect_chromium_mode()
        self.executable_path = executable_path

    def launch_options(self) -> Dict[str, Any]:
        """Keyword arguments for chromium.launch() in the configured mode."""
        options: Dict[str, Any] = {
            "headless": self.settings.headless,
            "args": list(self.settings.chromium_args.get(self.mode, [])),
        }
        if self.executable_path:
            options["executable_path"] = self.executable_path
        return options

    async def rasterize(self, markup: str) -> bytes:
        """
        Print an HTML document to PDF.

        Args:
            markup: Complete HTML document with no external resources

        Returns:
            PDF bytes

        Raises:
            playwright.async_api.Error: On launch, navigation or print failure
        """
        launch_options = self.launch_options()
        log_rasterize_start(self.mode, len(markup), launch_options)
        start_time = time.time()

        async with async_playwright() as playwright:
            browser = await playwright.chromium.launch(**launch_options)
            try:
                page = await browser.new_page()
                await page.set_content(markup, wait_until=self.settings.wait_until)
                pdf_bytes = await page.pdf(**self.settings.pdf_options())
            finally:
                await browser.close()
                _log_debug("Browser closed")

        log_rasterize_result(len(pdf_bytes), time.time() - start_time)
        return pdf_bytes
