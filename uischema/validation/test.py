"""Unit tests for validation module."""

import pytest

from uischema.schema import CanonicalType, ComponentSchema, EventDefinition, PropertyDefinition
from uischema.validation import (
    Severity,
    check_value_type,
    is_valid_instance,
    validate_instance,
)


@pytest.fixture
def schema():
    return ComponentSchema(
        name="Slider",
        props=(
            PropertyDefinition(name="value", type=CanonicalType.NUMBER, required=True),
            PropertyDefinition(name="label", type=CanonicalType.TEXT),
            PropertyDefinition(name="width", type=CanonicalType.DIMENSION),
            PropertyDefinition(name="marks", type=CanonicalType.ARRAY),
        ),
        events=(EventDefinition(name="onChange", parameters=("value: number",)),),
    )


class TestValidateInstance:
    """Tests for validate_instance function."""

    @pytest.mark.unit
    def test_valid_instance(self, schema):
        """Well-formed instance passes validation."""
        data = {"value": 3, "label": "Volume", "width": "100%", "onChange": print}
        assert validate_instance(data, schema) == []

    @pytest.mark.unit
    def test_missing_required(self, schema):
        """Missing and None required props are reported."""
        for data in ({}, {"value": None}):
            issues = validate_instance(data, schema)
            assert [i.issue_type for i in issues] == ["missing_required"]
            assert issues[0].field == "value"

    @pytest.mark.unit
    def test_type_mismatch(self, schema):
        """Values of the wrong shape are errors."""
        issues = validate_instance({"value": "3", "marks": "1,2"}, schema)
        assert [(i.field, i.issue_type) for i in issues] == [
            ("value", "type_mismatch"),
            ("marks", "type_mismatch"),
        ]
        assert "expects number" in issues[0].message

    @pytest.mark.unit
    def test_unknown_event_is_warning(self, schema):
        """Unknown events warn without failing validation."""
        data = {"value": 1, "events": {"onDrag": print}}
        issues = validate_instance(data, schema)
        assert [(i.field, i.severity) for i in issues] == [("onDrag", Severity.WARNING)]
        assert is_valid_instance(data, schema) is True

    @pytest.mark.unit
    def test_unknown_prop_is_warning(self, schema):
        """Unknown props warn without failing validation."""
        issues = validate_instance({"value": 1, "color": "red"}, schema)
        assert [(i.field, i.issue_type) for i in issues] == [("color", "unknown_prop")]

    @pytest.mark.unit
    def test_is_valid_instance(self, schema):
        """Errors fail validation."""
        assert is_valid_instance({"value": 2}, schema) is True
        assert is_valid_instance({"value": True}, schema) is False


class TestCheckValueType:
    """Tests for canonical type checks."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value,expected,ok",
        [
            ("hi", "text", True),
            (1, "text", False),
            ("#fff", "color", True),
            (1.5, "number", True),
            (True, "number", False),
            (False, "boolean", True),
            ((1, 2), "array", True),
            ({"a": 1}, "object", True),
            ([], "object", False),
            (len, "function", True),
            ("fn", "function", False),
            (12, "dimension", True),
            ("12px", "dimension", True),
            ({"uri": "x"}, "resource", True),
            (3, "resource", False),
            (object(), "element", True),
        ],
    )
    def test_shapes(self, value, expected, ok):
        """Each canonical type accepts its documented shapes."""
        assert check_value_type(value, expected) is ok
