"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[render]"


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_rasterize_start(mode: str, markup_length: int, launch_options: dict) -> None:
    """Log start of rasterization with browser context."""
    _log_info(f"Rasterizing {markup_length} chars of markup (chromium mode: {mode})")
    _log_debug(f"  Launch options: {launch_options}")


def log_rasterize_result(pdf_size: int, elapsed_time: float) -> None:
    """Log a successful rasterization."""
    _log_success(f"PDF generated: {pdf_size} bytes ({elapsed_time:.2f}s)")


def log_render_failure(error) -> None:
    """
    Log a render failure with its stage and cause.

    Args:
        error: RenderError raised by the pipeline
    """
    _log_error(f"Render failed at {error.stage} stage")
    _log_error(f"  Error: {error.message}")
    if error.original_error is not None:
        logger.opt(exception=error.original_error).debug(f"{CONTEXT_PREFIX} Traceback")
