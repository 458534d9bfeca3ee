"""uischema: component schema extraction for UI component sources."""

from uischema.analyzer import SchemaAnalyzer, SourceUnit, analyze
from uischema.config import AnalyzerSettings
from uischema.detection import detect_platform
from uischema.registry import ComponentRegistry
from uischema.sampling import generate_sample_props
from uischema.schema import (
    CanonicalType,
    ComponentSchema,
    EventDefinition,
    Platform,
    PropertyDefinition,
    export_json_schema,
    fallback_schema,
)
from uischema.validation import ValidationIssue, is_valid_instance, validate_instance

__all__ = [
    # Analysis
    "analyze",
    "SchemaAnalyzer",
    "SourceUnit",
    "AnalyzerSettings",
    "detect_platform",
    # Schema
    "ComponentSchema",
    "PropertyDefinition",
    "EventDefinition",
    "Platform",
    "CanonicalType",
    "fallback_schema",
    "export_json_schema",
    # Registry
    "ComponentRegistry",
    # Instances
    "validate_instance",
    "is_valid_instance",
    "ValidationIssue",
    "generate_sample_props",
]
