"""Authoritative schema definitions for analyzed UI components.

This module is the single source of truth for the component schema produced
by the analyzer and consumed by the registry, validator and sample generator.
It provides:
- The platform and canonical-type vocabularies
- Immutable pydantic models for props, events and the component schema
- The fallback schema returned when analysis cannot complete
- JSON Schema export of the wire format
"""

import re
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, model_validator


class Platform(str, Enum):
    """UI ecosystem a component was authored for.

    The enumeration is closed for a given release: detection always resolves
    to one of these members, never to None.
    - UNIVERSAL: no platform markers found (and the fallback value)
    - VANILLA: plain source text with no framework idioms
    """

    REACT = "react"
    REACT_NATIVE = "react-native"
    VUE = "vue"
    ANGULAR = "angular"
    SVELTE = "svelte"
    VANILLA = "vanilla"
    UNIVERSAL = "universal"


class CanonicalType(str, Enum):
    """Platform-independent value shape of a prop.

    Base shapes: text, number, boolean, array, object
    Platform shapes: function, element
    UI shapes: color, dimension, resource
    """

    TEXT = "text"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"
    FUNCTION = "function"
    ELEMENT = "element"
    COLOR = "color"
    DIMENSION = "dimension"
    RESOURCE = "resource"


PLATFORM_LABELS: dict[Platform, str] = {
    Platform.REACT: "React",
    Platform.REACT_NATIVE: "React Native",
    Platform.VUE: "Vue",
    Platform.ANGULAR: "Angular",
    Platform.SVELTE: "Svelte",
    Platform.VANILLA: "Vanilla JS",
    Platform.UNIVERSAL: "Universal",
}

FALLBACK_DESCRIPTION = "fallback"

EVENT_NAME_PATTERN = re.compile(r"^on[A-Z]")


class PropertyDefinition(BaseModel):
    """A single prop accepted by a component."""

    name: str = Field(..., min_length=1, description="Prop name as written")
    type: CanonicalType = Field(
        default=CanonicalType.TEXT,
        description="Canonical value shape",
    )
    required: bool = Field(default=False, description="True if the prop must be set")
    description: str | None = Field(default=None, description="Doc comment text")
    default_value: Any = Field(
        default=None,
        alias="defaultValue",
        description="Declared default value, if any",
    )

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "use_enum_values": True,
        "validate_default": True,
    }


class EventDefinition(BaseModel):
    """A single event a component emits (canonical ``onName`` form)."""

    name: str = Field(..., min_length=1, description="Canonical event name")
    parameters: tuple[str, ...] = Field(
        default_factory=tuple,
        description="Parameter hints as written in the source",
    )
    description: str | None = Field(default=None, description="Doc comment text")

    model_config = {"frozen": True, "populate_by_name": True}


class ComponentSchema(BaseModel):
    """Normalized structural description of a UI component.

    Attributes:
        name: Component name supplied by the caller.
        platform: Detected authoring platform.
        props: Unique, ordered prop definitions.
        events: Unique, ordered event definitions.
        supports_children: True if the component renders nested markup.
        description: Human-readable summary.
        degraded: True when this is the fallback schema.
    """

    name: str = Field(..., description="Component name")
    platform: Platform = Field(
        default=Platform.UNIVERSAL,
        description="Authoring platform",
    )
    props: tuple[PropertyDefinition, ...] = Field(default_factory=tuple)
    events: tuple[EventDefinition, ...] = Field(default_factory=tuple)
    supports_children: bool = Field(
        default=False,
        alias="supportsChildren",
        description="Whether the component renders nested markup",
    )
    description: str = Field(default="", description="Human-readable summary")
    degraded: bool = Field(
        default=False,
        description="True when analysis failed and this is the fallback",
    )

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "use_enum_values": True,
        "validate_default": True,
    }

    @model_validator(mode="after")
    def check_names(self) -> "ComponentSchema":
        prop_names = [p.name for p in self.props]
        if len(prop_names) != len(set(prop_names)):
            raise ValueError(f"Duplicate prop names in schema '{self.name}'")
        event_names = [e.name for e in self.events]
        if len(event_names) != len(set(event_names)):
            raise ValueError(f"Duplicate event names in schema '{self.name}'")
        for prop_name in prop_names:
            if EVENT_NAME_PATTERN.match(prop_name):
                raise ValueError(
                    f"Event-shaped name '{prop_name}' cannot be a prop "
                    f"in schema '{self.name}'"
                )
        return self

    def get_prop(self, name: str) -> PropertyDefinition | None:
        """Look up a prop by exact name."""
        for prop in self.props:
            if prop.name == name:
                return prop
        return None

    def get_event(self, name: str) -> EventDefinition | None:
        """Look up an event by exact name."""
        for event in self.events:
            if event.name == name:
                return event
        return None

    @property
    def required_props(self) -> list[PropertyDefinition]:
        """Props that must be supplied by an instance."""
        return [p for p in self.props if p.required]

    def to_wire(self) -> dict[str, Any]:
        """Serialize to the JSON wire shape (camelCase keys)."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")

    @classmethod
    def from_wire(cls, data: dict[str, Any]) -> "ComponentSchema":
        """Build a schema from its wire shape."""
        return cls.model_validate(data)


def fallback_schema(name: str) -> ComponentSchema:
    """Build the minimal valid schema returned when analysis fails.

    Args:
        name: Component name to keep on the fallback.

    Returns:
        Degraded schema with no props, events or children support.
    """
    return ComponentSchema(
        name=name,
        platform=Platform.UNIVERSAL,
        props=(),
        events=(),
        supports_children=False,
        description=FALLBACK_DESCRIPTION,
        degraded=True,
    )


def describe_component(name: str, platform: Platform | str, origin: str) -> str:
    """Build the default description for an analyzed component.

    Args:
        name: Component name.
        platform: Detected platform.
        origin: What was analyzed ("source text" or "runtime reference").

    Returns:
        Description such as "React component Button (analyzed from source text)".
    """
    label = PLATFORM_LABELS.get(Platform(platform), str(platform))
    return f"{label} component {name} (analyzed from {origin})"


def export_json_schema() -> dict[str, Any]:
    """Export the JSON Schema of the component schema wire format.

    Returns:
        JSON Schema dict suitable for validating exported schemas.
    """
    return ComponentSchema.model_json_schema(by_alias=True)


def list_platforms() -> list[str]:
    """List platform values in declaration order."""
    return [p.value for p in Platform]


def list_canonical_types() -> list[str]:
    """List canonical type values in declaration order."""
    return [t.value for t in CanonicalType]


__all__ = [
    # Enums
    "Platform",
    "CanonicalType",
    "PLATFORM_LABELS",
    "EVENT_NAME_PATTERN",
    "FALLBACK_DESCRIPTION",
    # Models
    "PropertyDefinition",
    "EventDefinition",
    "ComponentSchema",
    # Construction helpers
    "fallback_schema",
    "describe_component",
    # Schema export
    "export_json_schema",
    "list_platforms",
    "list_canonical_types",
]
