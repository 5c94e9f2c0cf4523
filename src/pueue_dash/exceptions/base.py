from __future__ import annotations


class PueueDashError(Exception):
    """Base exception class for all pueue-dash errors.

    Catch this at the CLI boundary to report dashboard failures while letting
    system exceptions propagate naturally.

    Attributes:
        message: Human-readable error message describing what went wrong.
    """

    def __init__(self, message: str) -> None:
        """Initialize the PueueDashError.

        Args:
            message: Human-readable error message.
        """
        self.message = message
        super().__init__(message)
