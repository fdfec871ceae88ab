"""Custom exceptions for the profiles context."""

from pathlib import Path
from typing import Optional

from press.utils.errors import PressError


class ProfileNotFoundError(PressError):
    """
    Raised when no stored record matches a profile identifier.

    Attributes:
        profile_id: The identifier that was requested
    """

    status_code = 404

    def __init__(self, profile_id: str):
        self.profile_id = profile_id
        super().__init__(f'Profile "{profile_id}" not found')


class ProfileFormatError(PressError):
    """
    Raised when a profile record exists but cannot be decoded.

    Attributes:
        profile_id: Identifier of the broken record
        record_path: Path to the record file
        original_error: The underlying decoding error
    """

    def __init__(
        self,
        profile_id: str,
        record_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.profile_id = profile_id
        self.record_path = record_path
        self.original_error = original_error

        parts = [f'Profile "{profile_id}" could not be read']
        if record_path:
            parts.append(f"Record: {record_path}")
        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))
