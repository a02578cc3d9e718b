"""Selector construction error types."""
from __future__ import annotations

from objtasks.errors import ObjtasksError


class SelectorConstructionError(ObjtasksError):
    """Raised when a fragment cannot be added to a selector."""

    def __init__(self, message: str, *, part: str = "", value: str = "") -> None:
        super().__init__(message)
        self.part = part
        self.value = value


class DuplicateSelectorPartError(SelectorConstructionError):
    """Element, id or pseudo-element was set a second time."""

    MESSAGE = (
        "Element, id and pseudo-element should not occur more then one time "
        "inside the selector"
    )

    def __init__(self, *, part: str = "", value: str = "") -> None:
        super().__init__(self.MESSAGE, part=part, value=value)


class SelectorOrderError(SelectorConstructionError):
    """A fragment was added after a fragment of a later category."""

    MESSAGE = (
        "Selector parts should be arranged in the following order: element, "
        "id, class, attribute, pseudo-class, pseudo-element"
    )

    def __init__(self, *, part: str = "", value: str = "") -> None:
        super().__init__(self.MESSAGE, part=part, value=value)
