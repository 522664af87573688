from __future__ import annotations


class ValidationError(ValueError):
    """Raised when form input is missing or malformed. Nothing is mutated."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
