"""objtasks: rectangle shapes, JSON helpers and a fluent CSS selector builder."""
from __future__ import annotations

__version__ = "0.1.0"

from objtasks.errors import ObjtasksError, UnknownFactoryError
from objtasks.jsonio import FactoryRegistry, from_json, register_factory, to_json
from objtasks.selector import (
    DuplicateSelectorPartError,
    SelectorBuilder,
    SelectorConstructionError,
    SelectorOrderError,
    css_selector_builder,
)
from objtasks.shapes import Rectangle, make_rectangle

__all__ = [
    "__version__",
    # Shapes
    "Rectangle",
    "make_rectangle",
    # JSON
    "to_json",
    "from_json",
    "register_factory",
    "FactoryRegistry",
    # Selectors
    "css_selector_builder",
    "SelectorBuilder",
    # Errors
    "ObjtasksError",
    "UnknownFactoryError",
    "SelectorConstructionError",
    "DuplicateSelectorPartError",
    "SelectorOrderError",
]
