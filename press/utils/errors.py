"""Base exception shared by every PRESS context."""


class PressError(Exception):
    """
    Root of the PRESS error taxonomy.

    Every failure that can end a request derives from this class. Subclasses set
    ``status_code`` to the HTTP status the delivery context reports for them.

    Attributes:
        message: Human-readable description, safe to return to the caller
        status_code: Transport status for this failure
    """

    status_code: int = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
