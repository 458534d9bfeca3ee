"""Runtime inspector: candidates from runtime component descriptors."""

from .lib import (
    DECLARATION_FIELDS,
    RuntimeFindings,
    declared_event_name,
    descriptor_fields,
    inspect_runtime,
)

__all__ = [
    "RuntimeFindings",
    "DECLARATION_FIELDS",
    "declared_event_name",
    "descriptor_fields",
    "inspect_runtime",
]
