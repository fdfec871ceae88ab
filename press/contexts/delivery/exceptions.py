"""Custom exceptions for the delivery context."""

from press.utils.errors import PressError


class MissingRequestFieldError(PressError):
    """
    Raised when a generate request lacks a required field.

    Attributes:
        field_name: Name of the missing request field
    """

    status_code = 400

    def __init__(self, field_name: str, message: str):
        self.field_name = field_name
        super().__init__(message)
