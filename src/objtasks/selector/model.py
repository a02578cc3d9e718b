"""SelectorBuilder: a mutable accumulator of CSS selector fragments."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import NoReturn

from objtasks.selector.errors import DuplicateSelectorPartError, SelectorOrderError

logger = logging.getLogger(__name__)


@dataclass
class SelectorBuilder:
    """Collects selector fragments and renders them as a CSS selector.

    Fragments must be added in the order element, id, class, attribute,
    pseudo-class, pseudo-element.  Element, id and pseudo-element may each
    be set once.  Every operation mutates the builder and returns it, so
    calls can be chained::

        SelectorBuilder().set_element("a").add_class("nav").render()  # "a.nav"

    A builder produced by :meth:`combine` renders only the combined
    expression; any fragments set on it are ignored.
    """

    tag: str | None = None
    element_id: str | None = None
    classes: list[str] = field(default_factory=list)
    attributes: list[str] = field(default_factory=list)
    pseudo_classes: list[str] = field(default_factory=list)
    pseudo_element_name: str | None = None
    combined: str | None = None

    # --- fragments ------------------------------------------------------------

    def set_element(self, tag: str) -> SelectorBuilder:
        if self.tag:
            self._reject_duplicate("element", tag)
        if (
            self.element_id
            or self.classes
            or self.attributes
            or self.pseudo_classes
            or self.pseudo_element_name
        ):
            self._reject_order("element", tag)
        self.tag = tag
        return self

    def set_id(self, value: str) -> SelectorBuilder:
        if self.element_id:
            self._reject_duplicate("id", value)
        if (
            self.classes
            or self.attributes
            or self.pseudo_classes
            or self.pseudo_element_name
        ):
            self._reject_order("id", value)
        self.element_id = value
        return self

    def add_class(self, name: str) -> SelectorBuilder:
        if self.attributes or self.pseudo_classes or self.pseudo_element_name:
            self._reject_order("class", name)
        self.classes.append(name)
        return self

    def add_attribute(self, expr: str) -> SelectorBuilder:
        if self.pseudo_classes or self.pseudo_element_name:
            self._reject_order("attribute", expr)
        self.attributes.append(expr)
        return self

    def add_pseudo_class(self, name: str) -> SelectorBuilder:
        if self.pseudo_element_name:
            self._reject_order("pseudo-class", name)
        self.pseudo_classes.append(name)
        return self

    def set_pseudo_element(self, name: str) -> SelectorBuilder:
        if self.pseudo_element_name:
            self._reject_duplicate("pseudo-element", name)
        self.pseudo_element_name = name
        return self

    # Short names so chains read like the façade: element("a").id("x").
    element = set_element
    id = set_id
    class_ = add_class
    attr = add_attribute
    pseudo_class = add_pseudo_class
    pseudo_element = set_pseudo_element

    # --- composition ----------------------------------------------------------

    def combine(
        self, left: SelectorBuilder, combinator: str, right: SelectorBuilder
    ) -> SelectorBuilder:
        """Join two selectors with *combinator* (" ", "+", "~" or ">").

        The combinator is not validated and is interpolated verbatim.
        """
        self.combined = f"{left.render()} {combinator} {right.render()}"
        return self

    # --- rendering ------------------------------------------------------------

    def render(self) -> str:
        """Return the selector string; empty if nothing was set."""
        if self.combined is not None:
            return self.combined

        parts: list[str] = []
        if self.tag:
            parts.append(self.tag)
        if self.element_id:
            parts.append(f"#{self.element_id}")
        parts.extend(f".{name}" for name in self.classes)
        parts.extend(f"[{expr}]" for expr in self.attributes)
        parts.extend(f":{name}" for name in self.pseudo_classes)
        if self.pseudo_element_name:
            parts.append(f"::{self.pseudo_element_name}")
        return "".join(parts)

    stringify = render

    def __str__(self) -> str:
        return self.render()

    # --- internals ------------------------------------------------------------

    def _reject_duplicate(self, part: str, value: str) -> NoReturn:
        logger.debug("Rejected duplicate %s %r", part, value)
        raise DuplicateSelectorPartError(part=part, value=value)

    def _reject_order(self, part: str, value: str) -> NoReturn:
        logger.debug("Rejected out-of-order %s %r", part, value)
        raise SelectorOrderError(part=part, value=value)
