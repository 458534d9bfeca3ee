"""Normalization of raw type annotations onto the canonical type vocabulary.

The mapping is a fixed, ordered list of case-insensitive substring tests.
Specific shapes come first so that, for example, ``string[]`` maps to
``array`` and ``(value: string) => void`` maps to ``function`` instead of
both collapsing to ``text``.
"""

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from uischema.schema import CanonicalType

__all__ = [
    "TYPE_RULES",
    "map_type",
    "map_runtime_type",
]

# Ordered (canonical type, substrings) pairs. First match wins.
TYPE_RULES: tuple[tuple[CanonicalType, tuple[str, ...]], ...] = (
    (CanonicalType.ARRAY, ("[]", "array")),
    (CanonicalType.FUNCTION, ("=>", "function", "handler", "callback")),
    (
        CanonicalType.ELEMENT,
        (
            "reactnode",
            "react.node",
            "reactelement",
            "jsx.element",
            "element",
            "vnode",
            "templateref",
            "snippet",
        ),
    ),
    (CanonicalType.COLOR, ("colorvalue", "color")),
    (CanonicalType.DIMENSION, ("dimensionvalue", "dimension")),
    (CanonicalType.RESOURCE, ("imagesource", "resource", "uri")),
    (
        CanonicalType.OBJECT,
        (
            "styleprop",
            "viewstyle",
            "textstyle",
            "cssproperties",
            "record<",
            "map<",
            "object",
            "{",
        ),
    ),
    (CanonicalType.BOOLEAN, ("boolean",)),
    (CanonicalType.NUMBER, ("number", "bigint")),
    (CanonicalType.TEXT, ("string",)),
)

# Framework runtime type markers ("String", "Number", ...) keyed by lowercase name
_RUNTIME_NAMES: dict[str, CanonicalType] = {
    "string": CanonicalType.TEXT,
    "str": CanonicalType.TEXT,
    "number": CanonicalType.NUMBER,
    "int": CanonicalType.NUMBER,
    "float": CanonicalType.NUMBER,
    "bigint": CanonicalType.NUMBER,
    "boolean": CanonicalType.BOOLEAN,
    "bool": CanonicalType.BOOLEAN,
    "array": CanonicalType.ARRAY,
    "list": CanonicalType.ARRAY,
    "tuple": CanonicalType.ARRAY,
    "object": CanonicalType.OBJECT,
    "dict": CanonicalType.OBJECT,
    "function": CanonicalType.FUNCTION,
    "func": CanonicalType.FUNCTION,
    "node": CanonicalType.ELEMENT,
    "element": CanonicalType.ELEMENT,
}


def _is_signature(text: str) -> bool:
    """True if ``=>`` appears outside every bracket, as in a function type.

    ``(items: string[]) => Element`` is a signature; ``(() => void)[]`` is an
    array of them.
    """
    depth = 0
    i = 0
    while i < len(text):
        if text.startswith("=>", i):
            if depth == 0:
                return True
            i += 2
            continue
        char = text[i]
        if char in "([{<":
            depth += 1
        elif char in ")]}>":
            depth = max(depth - 1, 0)
        i += 1
    return False


def map_type(raw: str | None) -> CanonicalType:
    """Map raw type-annotation text to a canonical type.

    Args:
        raw: Annotation text as written, e.g. ``"string[]"`` or
            ``"(e: MouseEvent) => void"``. None or empty means unannotated.

    Returns:
        The first matching canonical type, or TEXT when nothing matches.

    Example:
        >>> map_type("Array<string>")
        <CanonicalType.ARRAY: 'array'>
        >>> map_type("ViewStyle")
        <CanonicalType.OBJECT: 'object'>
    """
    if not raw:
        return CanonicalType.TEXT

    cleaned = raw.strip().lower()
    if _is_signature(cleaned):
        return CanonicalType.FUNCTION
    for canonical, needles in TYPE_RULES:
        if any(needle in cleaned for needle in needles):
            return canonical
    return CanonicalType.TEXT


def map_runtime_type(value: Any) -> CanonicalType:
    """Map a runtime type marker to a canonical type.

    Accepts Python types (``str``, ``int``, ``bool``, ``list``, ``dict``),
    framework constructor names (``"String"``, ``"Number"``, ``"Array"``),
    PropTypes-style names (``"func"``, ``"node"``) or any raw annotation
    string, which falls through to map_type.

    Args:
        value: Type marker taken from a runtime component descriptor.

    Returns:
        Canonical type, TEXT when the marker is unrecognized.
    """
    if value is None:
        return CanonicalType.TEXT

    # bool is an int subclass, check it first
    if value is bool:
        return CanonicalType.BOOLEAN
    if isinstance(value, type):
        if issubclass(value, str):
            return CanonicalType.TEXT
        if issubclass(value, (int, float)):
            return CanonicalType.NUMBER
        if issubclass(value, Mapping):
            return CanonicalType.OBJECT
        if issubclass(value, Sequence):
            return CanonicalType.ARRAY
        return _RUNTIME_NAMES.get(value.__name__.lower(), CanonicalType.TEXT)

    if isinstance(value, str):
        named = _RUNTIME_NAMES.get(value.strip().lower())
        return named if named is not None else map_type(value)

    if isinstance(value, (list, tuple)):
        # Vue-style union of constructors: first recognized member wins
        for member in value:
            mapped = map_runtime_type(member)
            if mapped is not CanonicalType.TEXT:
                return mapped
        return CanonicalType.TEXT

    if isinstance(value, Callable):
        name = getattr(value, "__name__", "")
        return _RUNTIME_NAMES.get(name.lower(), CanonicalType.FUNCTION)

    return CanonicalType.TEXT
