"""Representative sample prop values for analyzed components.

Values are chosen per canonical type and refined by hints in the prop
name, so a ``placeholder`` gets placeholder text and an ``options`` array
gets option records. Declared defaults always win. Function-typed props
and events are never generated.
"""

import copy
from typing import Any

from uischema.schema import CanonicalType, ComponentSchema, PropertyDefinition

__all__ = [
    "generate_sample_props",
    "default_sample_props",
    "sample_value",
]

# (name substrings, value) pairs per type. First match wins.
_TEXT_HINTS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("placeholder",), "Enter text..."),
    (("label",), "Label"),
    (("title",), "Title"),
    (("content",), "Content"),
    (("text",), "Sample text"),
    (("src", "source"), "https://example.com/sample.png"),
    (("alt",), "Sample image"),
    (("href", "url", "link"), "#"),
    (("email",), "user@example.com"),
    (("name",), "sample-name"),
    (("id",), "sample-id"),
    (("class",), "sample-class"),
)

_NUMBER_HINTS: tuple[tuple[tuple[str, ...], int], ...] = (
    (("min",), 0),
    (("max",), 100),
    (("value",), 50),
    (("progress",), 65),
    (("width",), 300),
    (("height",), 200),
    (("size",), 16),
    (("count",), 5),
    (("limit",), 10),
    (("step",), 1),
    (("delay",), 1000),
    (("duration",), 300),
)

_ARRAY_HINTS: tuple[tuple[tuple[str, ...], list[Any]], ...] = (
    (
        ("options", "choices"),
        [
            {"value": "option1", "label": "Option 1"},
            {"value": "option2", "label": "Option 2"},
            {"value": "option3", "label": "Option 3"},
        ],
    ),
    (
        ("items", "list"),
        [
            {"id": "1", "text": "Item 1", "title": "First Item"},
            {"id": "2", "text": "Item 2", "title": "Second Item"},
            {"id": "3", "text": "Item 3", "title": "Third Item"},
        ],
    ),
    (
        ("data", "rows"),
        [
            {"id": 1, "name": "Row 1", "value": "Value 1", "status": "Active"},
            {"id": 2, "name": "Row 2", "value": "Value 2", "status": "Inactive"},
        ],
    ),
    (
        ("tabs", "sections"),
        [
            {"id": "tab1", "label": "Tab 1", "content": "Content for tab 1"},
            {"id": "tab2", "label": "Tab 2", "content": "Content for tab 2"},
        ],
    ),
    (
        ("fields", "inputs"),
        [
            {"id": "field1", "label": "Field 1", "type": "text"},
            {"id": "field2", "label": "Field 2", "type": "select"},
        ],
    ),
)

_GENERIC_ARRAY = [
    {"id": "1", "name": "Item 1", "value": "Value 1"},
    {"id": "2", "name": "Item 2", "value": "Value 2"},
]


def _hinted(name: str, hints: tuple[tuple[tuple[str, ...], Any], ...], default: Any) -> Any:
    lowered = name.lower()
    for needles, value in hints:
        if any(needle in lowered for needle in needles):
            return copy.deepcopy(value)
    return copy.deepcopy(default)


def sample_value(prop: PropertyDefinition) -> Any:
    """Representative value for one prop, None for function props.

    Args:
        prop: Prop definition from a schema.

    Returns:
        The declared default if any, otherwise a generated value.
    """
    if prop.default_value is not None:
        return copy.deepcopy(prop.default_value)

    kind = CanonicalType(prop.type)
    if kind is CanonicalType.FUNCTION:
        return None
    if kind is CanonicalType.TEXT:
        return _hinted(prop.name, _TEXT_HINTS, "Sample text")
    if kind is CanonicalType.NUMBER:
        return _hinted(prop.name, _NUMBER_HINTS, 42)
    if kind is CanonicalType.BOOLEAN:
        return False
    if kind is CanonicalType.ARRAY:
        return _hinted(prop.name, _ARRAY_HINTS, _GENERIC_ARRAY)
    if kind is CanonicalType.OBJECT:
        return {}
    if kind is CanonicalType.COLOR:
        return "#3366ff"
    if kind is CanonicalType.DIMENSION:
        return _hinted(prop.name, _NUMBER_HINTS, "100%")
    if kind is CanonicalType.RESOURCE:
        return "https://example.com/sample.png"
    # ELEMENT
    return "Sample content"


def generate_sample_props(schema: ComponentSchema) -> dict[str, Any]:
    """Generate a sample instance for a schema.

    Args:
        schema: Analyzed component schema.

    Returns:
        Prop name -> value for every non-function prop, in schema order.
        A degraded schema yields default_sample_props(schema.name).

    Example:
        >>> generate_sample_props(analyze("Input", source))
        {'placeholder': 'Enter text...', 'maxLength': 100}
    """
    if schema.degraded:
        return default_sample_props(schema.name)
    samples: dict[str, Any] = {}
    for prop in schema.props:
        value = sample_value(prop)
        if value is not None:
            samples[prop.name] = value
    return samples


def default_sample_props(name: str) -> dict[str, Any]:
    """Generic props used when a component could not be analyzed."""
    return {
        "id": f"{name.lower()}-demo",
        "className": "demo-component",
        "style": {"margin": "8px"},
    }
