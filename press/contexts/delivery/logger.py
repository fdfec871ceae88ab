"""
Delivery context logger.

Provides logging interface for delivery context with automatic [deliver] prefix.
All delivery modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[deliver]"


def _log_info(message: str) -> None:
    """Log info message with [deliver] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [deliver] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [deliver] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [deliver] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def log_request_start(profile_id: str, company: str, role: str, layout_id: str) -> None:
    """Log start of a generate request."""
    _log_info(f"Generating resume: profile={profile_id}, layout={layout_id}")
    _log_info(f"  Target: {role} at {company}")


def log_request_result(filename: str, pdf_size: int, elapsed_time: float) -> None:
    """Log a completed generate request."""
    _log_success(f"{filename}: {pdf_size} bytes ({elapsed_time:.2f}s)")


def log_request_failure(error, elapsed_time: float) -> None:
    """
    Log a failed generate request.

    Args:
        error: PressError that ended the request
        elapsed_time: Time spent before failing
    """
    log = _log_warning if error.status_code < 500 else _log_error
    log(f"Request failed with {error.status_code} ({elapsed_time:.2f}s): {error.message}")
