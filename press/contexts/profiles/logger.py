"""
Profiles context logger.

Provides logging interface for profiles context with automatic [profile] prefix.
All profile modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[profile]"


def _log_info(message: str) -> None:
    """Log info message with [profile] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [profile] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [profile] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
