"""Rectangle shape with a live area computation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rectangle:
    """A width x height rectangle.

    Fields stay mutable; :meth:`get_area` always uses the current values.
    """

    width: float
    height: float

    def get_area(self) -> float:
        return self.width * self.height

    @property
    def area(self) -> float:
        return self.get_area()


def make_rectangle(width: float, height: float) -> Rectangle:
    """Create a :class:`Rectangle`, e.g. ``make_rectangle(10, 20).get_area() == 200``."""
    return Rectangle(width, height)
