"""Unit tests for the Schema module."""

import pytest
from pydantic import ValidationError

from uischema.schema import (
    CanonicalType,
    ComponentSchema,
    EventCandidate,
    EventDefinition,
    Origin,
    Platform,
    PropertyCandidate,
    PropertyDefinition,
    describe_component,
    export_json_schema,
    fallback_schema,
    list_canonical_types,
    list_platforms,
)


class TestVocabularies:
    """Tests for the platform and canonical type enums."""

    @pytest.mark.unit
    def test_platform_values(self):
        """All expected platforms exist in declaration order."""
        assert list_platforms() == [
            "react",
            "react-native",
            "vue",
            "angular",
            "svelte",
            "vanilla",
            "universal",
        ]

    @pytest.mark.unit
    def test_canonical_type_count(self):
        """The canonical vocabulary has exactly ten members."""
        assert len(list_canonical_types()) == 10
        assert "dimension" in list_canonical_types()

    @pytest.mark.unit
    def test_str_enum_comparison(self):
        """Enum members compare equal to their wire values."""
        assert Platform.REACT_NATIVE == "react-native"
        assert CanonicalType.COLOR == "color"


class TestComponentSchema:
    """Tests for ComponentSchema construction and invariants."""

    @pytest.mark.unit
    def test_defaults(self):
        """A bare schema is universal, empty and not degraded."""
        schema = ComponentSchema(name="Empty")
        assert schema.platform == Platform.UNIVERSAL
        assert schema.props == ()
        assert schema.events == ()
        assert schema.supports_children is False
        assert schema.degraded is False

    @pytest.mark.unit
    def test_schema_is_frozen(self):
        """Schemas cannot be mutated after construction."""
        schema = ComponentSchema(name="Button")
        with pytest.raises(ValidationError):
            schema.name = "Other"

    @pytest.mark.unit
    def test_duplicate_prop_names_rejected(self):
        """Two props with the same name are invalid."""
        with pytest.raises(ValidationError, match="Duplicate prop"):
            ComponentSchema(
                name="Button",
                props=(
                    PropertyDefinition(name="label"),
                    PropertyDefinition(name="label", required=True),
                ),
            )

    @pytest.mark.unit
    def test_prop_names_are_case_sensitive(self):
        """Names differing only by case are distinct."""
        schema = ComponentSchema(
            name="Button",
            props=(PropertyDefinition(name="label"), PropertyDefinition(name="Label")),
        )
        assert len(schema.props) == 2

    @pytest.mark.unit
    def test_duplicate_event_names_rejected(self):
        """Two events with the same name are invalid."""
        with pytest.raises(ValidationError, match="Duplicate event"):
            ComponentSchema(
                name="Button",
                events=(EventDefinition(name="onClick"), EventDefinition(name="onClick")),
            )

    @pytest.mark.unit
    def test_event_shaped_prop_rejected(self):
        """An on-prefixed name can never be a prop."""
        with pytest.raises(ValidationError, match="Event-shaped"):
            ComponentSchema(name="Button", props=(PropertyDefinition(name="onClick"),))

    @pytest.mark.unit
    def test_lookup_helpers(self):
        """get_prop, get_event and required_props find the right entries."""
        schema = ComponentSchema(
            name="Input",
            props=(
                PropertyDefinition(name="value", required=True),
                PropertyDefinition(name="placeholder"),
            ),
            events=(EventDefinition(name="onChange", parameters=("value: string",)),),
        )
        assert schema.get_prop("value").required is True
        assert schema.get_prop("missing") is None
        assert schema.get_event("onChange").parameters == ("value: string",)
        assert [p.name for p in schema.required_props] == ["value"]


class TestWireFormat:
    """Tests for to_wire/from_wire."""

    @pytest.mark.unit
    def test_wire_keys_are_camel_case(self):
        """Wire output uses supportsChildren and defaultValue aliases."""
        schema = ComponentSchema(
            name="Badge",
            platform=Platform.REACT,
            props=(PropertyDefinition(name="size", default_value="md"),),
            supports_children=True,
        )
        wire = schema.to_wire()
        assert wire["supportsChildren"] is True
        assert wire["platform"] == "react"
        assert wire["props"][0] == {
            "name": "size",
            "type": "text",
            "required": False,
            "defaultValue": "md",
        }

    @pytest.mark.unit
    def test_optional_fields_omitted(self):
        """Absent descriptions and defaults do not appear on the wire."""
        schema = ComponentSchema(
            name="Badge",
            props=(PropertyDefinition(name="tone"),),
            events=(EventDefinition(name="onClose"),),
        )
        wire = schema.to_wire()
        assert "description" not in wire["props"][0]
        assert "defaultValue" not in wire["props"][0]
        assert wire["events"][0] == {"name": "onClose", "parameters": []}

    @pytest.mark.unit
    def test_round_trip(self):
        """from_wire(to_wire()) returns an equal schema."""
        schema = ComponentSchema(
            name="Card",
            platform=Platform.VUE,
            props=(
                PropertyDefinition(
                    name="title",
                    type=CanonicalType.TEXT,
                    required=True,
                    description="Card title",
                ),
                PropertyDefinition(name="items", type=CanonicalType.ARRAY),
            ),
            events=(EventDefinition(name="onSelect", parameters=("id: string",)),),
            supports_children=True,
            description="Vue component Card",
        )
        assert ComponentSchema.from_wire(schema.to_wire()) == schema


class TestFallbackSchema:
    """Tests for the fallback schema."""

    @pytest.mark.unit
    def test_fallback_shape(self):
        """Fallback is universal, empty, childless and degraded."""
        schema = fallback_schema("Broken")
        assert schema.name == "Broken"
        assert schema.platform == "universal"
        assert schema.props == ()
        assert schema.events == ()
        assert schema.supports_children is False
        assert schema.description == "fallback"
        assert schema.degraded is True


class TestDescriptions:
    """Tests for describe_component."""

    @pytest.mark.unit
    def test_describe_uses_platform_label(self):
        """Descriptions use the human-readable platform label."""
        text = describe_component("Button", "react-native", "source text")
        assert text == "React Native component Button (analyzed from source text)"


class TestJsonSchemaExport:
    """Tests for JSON Schema export."""

    @pytest.mark.unit
    def test_export_contains_wire_properties(self):
        """Exported JSON Schema describes the camelCase wire keys."""
        schema = export_json_schema()
        assert "properties" in schema
        assert "supportsChildren" in schema["properties"]
        assert "platform" in schema["properties"]


class TestCandidates:
    """Tests for candidate records."""

    @pytest.mark.unit
    def test_declarations_outrank_usage(self):
        """Interface, type-alias and runtime share the top rank."""
        interface = PropertyCandidate(name="a", origin=Origin.INTERFACE)
        alias = PropertyCandidate(name="a", origin=Origin.TYPE_ALIAS)
        runtime = PropertyCandidate(name="a", origin=Origin.RUNTIME)
        destructure = PropertyCandidate(name="a", origin=Origin.DESTRUCTURE)
        markup = EventCandidate(name="onA", origin=Origin.MARKUP_ATTRIBUTE)
        assert interface.rank == alias.rank == runtime.rank
        assert interface.rank < destructure.rank < markup.rank

    @pytest.mark.unit
    def test_component_file_origins(self):
        """Exported bindings declare; dispatched events rank as usage."""
        exported = PropertyCandidate(name="a", origin=Origin.EXPORTED_BINDING)
        dispatched = EventCandidate(name="onA", origin=Origin.DISPATCH)
        markup = EventCandidate(name="onA", origin=Origin.MARKUP_ATTRIBUTE)
        assert exported.rank == 0
        assert exported.rank < dispatched.rank < markup.rank

    @pytest.mark.unit
    def test_event_renamed_is_copy(self):
        """renamed returns a new candidate with other fields kept."""
        event = EventCandidate(
            name="on:click", origin=Origin.MARKUP_ATTRIBUTE, parameter_hints=("e",)
        )
        renamed = event.renamed("onClick")
        assert renamed.name == "onClick"
        assert renamed.parameter_hints == ("e",)
        assert event.name == "on:click"
