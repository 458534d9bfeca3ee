"""Unit tests for sample prop generation."""

import pytest

from uischema.schema import (
    CanonicalType,
    ComponentSchema,
    PropertyDefinition,
    fallback_schema,
)
from uischema.validation import is_valid_instance

from .lib import default_sample_props, generate_sample_props, sample_value


def prop(name, kind, **kwargs):
    return PropertyDefinition(name=name, type=kind, **kwargs)


class TestSampleValue:
    """Tests for per-prop values."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "name,kind,expected",
        [
            ("placeholder", CanonicalType.TEXT, "Enter text..."),
            ("buttonLabel", CanonicalType.TEXT, "Label"),
            ("whatever", CanonicalType.TEXT, "Sample text"),
            ("maxLength", CanonicalType.NUMBER, 100),
            ("count", CanonicalType.NUMBER, 5),
            ("amount", CanonicalType.NUMBER, 42),
            ("disabled", CanonicalType.BOOLEAN, False),
            ("style", CanonicalType.OBJECT, {}),
            ("tint", CanonicalType.COLOR, "#3366ff"),
            ("width", CanonicalType.DIMENSION, 300),
            ("gap", CanonicalType.DIMENSION, "100%"),
            ("icon", CanonicalType.ELEMENT, "Sample content"),
        ],
    )
    def test_hints(self, name, kind, expected):
        """Type and name hints pick the value."""
        assert sample_value(prop(name, kind)) == expected

    @pytest.mark.unit
    def test_array_hints(self):
        """Array names select record shapes."""
        options = sample_value(prop("options", CanonicalType.ARRAY))
        assert options[0] == {"value": "option1", "label": "Option 1"}
        generic = sample_value(prop("things", CanonicalType.ARRAY))
        assert generic[0]["name"] == "Item 1"

    @pytest.mark.unit
    def test_values_are_copies(self):
        """Mutating a sample does not affect later samples."""
        first = sample_value(prop("items", CanonicalType.ARRAY))
        first.clear()
        assert len(sample_value(prop("items", CanonicalType.ARRAY))) == 3

    @pytest.mark.unit
    def test_default_wins(self):
        """Declared defaults are used as-is."""
        assert sample_value(prop("size", CanonicalType.TEXT, default_value="md")) == "md"

    @pytest.mark.unit
    def test_function_not_generated(self):
        """Function props have no sample."""
        assert sample_value(prop("renderItem", CanonicalType.FUNCTION)) is None


class TestGenerateSampleProps:
    """Tests for whole-schema samples."""

    @pytest.mark.unit
    def test_samples_validate(self):
        """Generated samples satisfy the schema they came from."""
        schema = ComponentSchema(
            name="Form",
            props=(
                prop("title", CanonicalType.TEXT, required=True),
                prop("fields", CanonicalType.ARRAY, required=True),
                prop("width", CanonicalType.DIMENSION),
                prop("validate", CanonicalType.FUNCTION),
            ),
        )
        samples = generate_sample_props(schema)
        assert list(samples) == ["title", "fields", "width"]
        assert is_valid_instance(samples, schema) is True

    @pytest.mark.unit
    def test_degraded_schema_uses_defaults(self):
        """Fallback schemas get the generic default props."""
        assert generate_sample_props(fallback_schema("Card")) == default_sample_props("Card")
        assert default_sample_props("Card")["id"] == "card-demo"
