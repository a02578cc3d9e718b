"""Base error type shared by every objtasks component."""
from __future__ import annotations


class ObjtasksError(Exception):
    """Base error for all objtasks errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class UnknownFactoryError(ObjtasksError, KeyError):
    """No factory is registered under the requested tag."""

    def __init__(self, tag: str) -> None:
        super().__init__(f"No factory registered for {tag!r}")
        self.tag = tag

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return self.args[0]
