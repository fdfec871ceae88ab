"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[template]"


# Wrapper functions with automatic [template] prefix


def _log_info(message: str) -> None:
    """Log info message with [template] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [template] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [template] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [template] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level templating-specific logging helpers


def log_parse_failure(error_message: str, content: str, excerpt_length: int = 500) -> None:
    """
    Log a strict JSON parse failure with an excerpt of the offending text.

    Uses opt(raw=True) so the excerpt keeps its own line breaks.
    """
    _log_error("JSON parse error on submitted content")
    _log_error(f"  Parse error: {error_message}")
    _log_debug(f"  Content length: {len(content)}")
    logger.opt(raw=True).debug(
        f"\n{'=' * 80}\nFIRST {excerpt_length} CHARS:\n{'=' * 80}\n{content[:excerpt_length]}\n"
    )


def log_content_diagnostics(content) -> None:
    """
    Log observability counts for normalized content.

    Args:
        content: SubmittedContent from normalize_content()
    """
    skills = content.skills
    skill_count = len(skills) if hasattr(skills, "__len__") else 0
    _log_success("Resume JSON parsed successfully")
    _log_info(f"Skills categories: {skill_count}")
    _log_info(f"Experience entries: {len(content.experience)}")

    for idx, entry in enumerate(content.experience, 1):
        _log_debug(f"Experience {idx}: {entry.title or 'NO TITLE'} - Details count: {len(entry.details)}")
        if not entry.details:
            _log_warning(f"Experience entry {idx} has no details")
