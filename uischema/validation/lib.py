"""Instance validation against a component schema.

This module checks a concrete set of prop values (a component instance)
against an analyzed ComponentSchema before it is handed to a renderer.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from uischema.events import is_event_name
from uischema.schema import CanonicalType, ComponentSchema, PropertyDefinition

__all__ = [
    "Severity",
    "ValidationIssue",
    "validate_instance",
    "is_valid_instance",
    "check_value_type",
]


class Severity(str, Enum):
    """How serious a validation issue is."""

    ERROR = "error"
    WARNING = "warning"


@dataclass
class ValidationIssue:
    """Represents one problem found in a component instance.

    Attributes:
        field: Prop or event name the issue refers to.
        message: Human-readable issue description.
        issue_type: Category of the issue.
        severity: ERROR fails validation, WARNING does not.
    """

    field: str
    message: str
    issue_type: str
    severity: Severity = Severity.ERROR


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


_TYPE_CHECKS: dict[CanonicalType, Callable[[Any], bool]] = {
    CanonicalType.TEXT: lambda v: isinstance(v, str),
    CanonicalType.COLOR: lambda v: isinstance(v, str),
    CanonicalType.NUMBER: _is_number,
    CanonicalType.BOOLEAN: lambda v: isinstance(v, bool),
    CanonicalType.ARRAY: lambda v: isinstance(v, (list, tuple)),
    CanonicalType.OBJECT: lambda v: isinstance(v, Mapping),
    CanonicalType.FUNCTION: callable,
    CanonicalType.DIMENSION: lambda v: _is_number(v) or isinstance(v, str),
    CanonicalType.RESOURCE: lambda v: isinstance(v, (str, Mapping)),
    CanonicalType.ELEMENT: lambda v: True,
}


def check_value_type(value: Any, expected: CanonicalType | str) -> bool:
    """Check a value against a canonical type.

    Args:
        value: Supplied prop value.
        expected: Canonical type of the prop.

    Returns:
        bool: True if the value has an acceptable shape.
    """
    return _TYPE_CHECKS[CanonicalType(expected)](value)


def validate_instance(
    data: Mapping[str, Any], schema: ComponentSchema
) -> list[ValidationIssue]:
    """Validate prop values and event handlers against a schema.

    Performs the following checks:
        - Required props are present and not None
        - Supplied values match their canonical type
        - Unknown props and events are reported as warnings

    Events may be supplied as top-level ``onName`` keys or under an
    ``events`` mapping.

    Args:
        data: Instance prop values.
        schema: Schema of the component.

    Returns:
        list[ValidationIssue]: Issues found (empty if valid).

    Example:
        >>> issues = validate_instance({"label": 3}, schema)
        >>> [i.issue_type for i in issues]
        ['type_mismatch']
    """
    issues: list[ValidationIssue] = []
    props: dict[str, PropertyDefinition] = {p.name: p for p in schema.props}

    for prop in schema.props:
        value = data.get(prop.name)
        if value is None:
            if prop.required:
                issues.append(
                    ValidationIssue(
                        field=prop.name,
                        message=f"Required prop '{prop.name}' is missing",
                        issue_type="missing_required",
                    )
                )
            continue
        if not check_value_type(value, prop.type):
            issues.append(
                ValidationIssue(
                    field=prop.name,
                    message=(
                        f"Prop '{prop.name}' expects {prop.type}, "
                        f"got {type(value).__name__}"
                    ),
                    issue_type="type_mismatch",
                )
            )

    supplied_events: list[str] = [key for key in data if is_event_name(key)]
    nested = data.get("events") if "events" not in props else None
    if isinstance(nested, Mapping):
        supplied_events.extend(str(key) for key in nested)

    for name in supplied_events:
        if schema.get_event(name) is None:
            issues.append(
                ValidationIssue(
                    field=name,
                    message=f"Unknown event '{name}'",
                    issue_type="unknown_event",
                    severity=Severity.WARNING,
                )
            )

    for key in data:
        if key in props or is_event_name(key) or (key == "events" and nested is not None):
            continue
        issues.append(
            ValidationIssue(
                field=key,
                message=f"Unknown prop '{key}'",
                issue_type="unknown_prop",
                severity=Severity.WARNING,
            )
        )

    return issues


def is_valid_instance(data: Mapping[str, Any], schema: ComponentSchema) -> bool:
    """Check if an instance is valid.

    Convenience function that returns True if no ERROR issues exist;
    warnings do not fail validation.
    """
    return not any(
        issue.severity is Severity.ERROR for issue in validate_instance(data, schema)
    )
