from objtasks.selector.builder import (
    attr,
    class_,
    combine,
    css_selector_builder,
    element,
    id,
    pseudo_class,
    pseudo_element,
)
from objtasks.selector.errors import (
    DuplicateSelectorPartError,
    SelectorConstructionError,
    SelectorOrderError,
)
from objtasks.selector.model import SelectorBuilder

__all__ = [
    "css_selector_builder",
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
    "SelectorBuilder",
    "SelectorConstructionError",
    "DuplicateSelectorPartError",
    "SelectorOrderError",
]
