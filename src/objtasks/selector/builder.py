"""Entry points that start a new selector from a single fragment.

Each function creates a fresh :class:`SelectorBuilder`, applies one
fragment and returns the builder for further chaining::

    element("a").attr('href$=".png"').pseudo_class("focus").render()
    # 'a[href$=".png"]:focus'
"""

from __future__ import annotations

from types import SimpleNamespace

from objtasks.selector.model import SelectorBuilder

__all__ = [
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
    "css_selector_builder",
]


def element(value: str) -> SelectorBuilder:
    return SelectorBuilder().set_element(value)


def id(value: str) -> SelectorBuilder:  # noqa: A001
    return SelectorBuilder().set_id(value)


def class_(value: str) -> SelectorBuilder:
    return SelectorBuilder().add_class(value)


def attr(value: str) -> SelectorBuilder:
    return SelectorBuilder().add_attribute(value)


def pseudo_class(value: str) -> SelectorBuilder:
    return SelectorBuilder().add_pseudo_class(value)


def pseudo_element(value: str) -> SelectorBuilder:
    return SelectorBuilder().set_pseudo_element(value)


def combine(left: SelectorBuilder, combinator: str, right: SelectorBuilder) -> SelectorBuilder:
    """Join two built selectors, e.g. ``combine(element("div"), ">", element("p"))``."""
    return SelectorBuilder().combine(left, combinator, right)


css_selector_builder = SimpleNamespace(
    element=element,
    id=id,
    class_=class_,
    attr=attr,
    pseudo_class=pseudo_class,
    pseudo_element=pseudo_element,
    combine=combine,
)
