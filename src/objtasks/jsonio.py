"""JSON helpers: serialise values and rebuild objects from JSON text.

:func:`from_json` passes the parsed values to the target constructor
*positionally*, in the order the keys appear in the document.  Callers must
write keys in constructor-parameter order; nothing here checks that.
"""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, Callable

from objtasks.config import JsonOptions
from objtasks.errors import UnknownFactoryError
from objtasks.shapes import Rectangle

__all__ = [
    "FactoryRegistry",
    "default_registry",
    "register_factory",
    "to_json",
    "from_json",
]

logger = logging.getLogger(__name__)

Factory = Callable[..., Any]


class FactoryRegistry:
    """Maps type tags to constructors for :func:`from_json`.

    Latest-wins on tag collision. Insertion-order stable.
    """

    def __init__(self) -> None:
        self._factories: dict[str, Factory] = {}

    def register(self, tag: str, factory: Factory) -> None:
        """Register *factory* under *tag*, replacing any existing entry."""
        self._factories[tag] = factory

    def unregister(self, tag: str) -> None:
        """Remove a factory by tag. No-op if not found."""
        self._factories.pop(tag, None)

    def get(self, tag: str) -> Factory:
        """Look up a factory, raising :class:`UnknownFactoryError` if missing."""
        try:
            return self._factories[tag]
        except KeyError:
            raise UnknownFactoryError(tag) from None

    def names(self) -> list[str]:
        """Return all registered tags in registration order."""
        return list(self._factories.keys())

    def __contains__(self, tag: object) -> bool:
        return tag in self._factories


default_registry = FactoryRegistry()
default_registry.register("rectangle", Rectangle)


def register_factory(tag: str, factory: Factory) -> None:
    """Register *factory* under *tag* in the default registry."""
    default_registry.register(tag, factory)


# ---------------------------------------------------------------------------
# Serialisation
# ---------------------------------------------------------------------------


def _encode_object(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    if hasattr(value, "__dict__") and not callable(value):
        return {k: v for k, v in vars(value).items() if not k.startswith("_")}
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(value: Any, options: JsonOptions | None = None) -> str:
    """Serialise *value* to a JSON string.

    Keys keep their insertion order. Dataclasses and plain objects are
    written as their public fields.
    """
    opts = options or JsonOptions()
    return json.dumps(
        value,
        indent=opts.indent,
        separators=opts.separators,
        ensure_ascii=opts.ensure_ascii,
        default=_encode_object,
    )


# ---------------------------------------------------------------------------
# Deserialisation
# ---------------------------------------------------------------------------


def _resolve_factory(proto: Any, registry: FactoryRegistry) -> Factory:
    if isinstance(proto, str):
        return registry.get(proto)
    if isinstance(proto, type):
        return proto
    if callable(proto):
        return proto
    # An instance stands in for its own class.
    return type(proto)


def _positional_args(parsed: Any) -> list[Any]:
    if isinstance(parsed, dict):
        return list(parsed.values())
    if isinstance(parsed, list):
        return parsed
    if isinstance(parsed, str):
        return list(parsed)
    if parsed is None:
        raise TypeError("Cannot construct an object from JSON null")
    return []


def from_json(
    proto: Any,
    text: str,
    *,
    registry: FactoryRegistry | None = None,
) -> Any:
    """Parse *text* and construct a new object from its values.

    *proto* is a class, an instance of the target class, or a tag in
    *registry* (the default registry when omitted).  The text is parsed
    before *proto* is resolved, so malformed JSON always raises
    :class:`json.JSONDecodeError` unchanged.

    An object supplies its values, an array its items and a string its
    characters.  Numbers and booleans supply no arguments; ``null`` raises
    :class:`TypeError`.
    """
    parsed = json.loads(text)
    factory = _resolve_factory(proto, registry or default_registry)
    args = _positional_args(parsed)
    logger.debug(
        "Constructing %s from %d positional value(s)",
        getattr(factory, "__name__", repr(factory)),
        len(args),
    )
    return factory(*args)
