"""Schema module - authoritative source for component schema definitions.

This module provides:
- Platform and canonical type vocabularies
- Immutable component schema models and their wire format
- Call-scoped candidate records collected during analysis
- The fallback schema used when analysis fails

Example usage:
    >>> from uischema.schema import ComponentSchema, fallback_schema
    >>> schema = fallback_schema("Button")
    >>> schema.to_wire()["platform"]
    'universal'
"""

from .candidates import ORIGIN_PRECEDENCE, EventCandidate, Origin, PropertyCandidate
from .lib import (
    EVENT_NAME_PATTERN,
    FALLBACK_DESCRIPTION,
    PLATFORM_LABELS,
    CanonicalType,
    ComponentSchema,
    EventDefinition,
    Platform,
    PropertyDefinition,
    describe_component,
    export_json_schema,
    fallback_schema,
    list_canonical_types,
    list_platforms,
)

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
    # Candidates
    "Origin",
    "ORIGIN_PRECEDENCE",
    "PropertyCandidate",
    "EventCandidate",
    # Construction helpers
    "fallback_schema",
    "describe_component",
    # Schema export
    "export_json_schema",
    "list_platforms",
    "list_canonical_types",
]
