"""
Custom exception classes for the carhub analytics app.

The rollup engine itself never raises on bad records; these cover the
configuration, persistence and HTTP boundaries around it.
"""


class ConfigurationError(Exception):
    """Raised when the application is configured with an invalid value."""

    def __init__(self, message: str = "Error: invalid configuration") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class InvalidReferenceTimeError(Exception):
    """Raised when a requested reference instant cannot be parsed."""

    def __init__(self, message: str = "Error: invalid reference time") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class StoreError(Exception):
    """Raised when the document store cannot be persisted."""

    def __init__(self, message: str = "Error: store could not be saved") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message
