"""
Shared utilities for PRESS.

Common functionality used across contexts:
- Logger setup with provenance tracking
- Base error type carrying a transport status code
- Timestamps for log directory naming
"""

from press.utils.errors import PressError
from press.utils.timestamp import now, now_exact

__all__ = ["PressError", "now", "now_exact"]
