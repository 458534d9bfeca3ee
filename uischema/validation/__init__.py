"""Instance validation against analyzed component schemas."""

from .lib import (
    Severity,
    ValidationIssue,
    check_value_type,
    is_valid_instance,
    validate_instance,
)

__all__ = [
    "Severity",
    "ValidationIssue",
    "validate_instance",
    "is_valid_instance",
    "check_value_type",
]
