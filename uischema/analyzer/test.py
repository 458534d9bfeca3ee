"""Unit tests for the schema assembler."""

import logging

import pytest

from uischema.config import AnalyzerSettings
from uischema.core.errors import ExtractionFailure
from uischema.schema import EVENT_NAME_PATTERN, CanonicalType, ComponentSchema, Platform
from uischema.walker import DEFAULT_EXTRACTORS, SyntaxWalker

from .lib import SchemaAnalyzer, SourceUnit, analyze

BUTTON_SOURCE = """
import React from 'react';

interface Props {
  text: string;
  onClick?: () => void;
}

export function Button({ text, onClick }: Props) {
  return <button onClick={onClick}>{text}</button>;
}
"""


def assert_fallback(schema: ComponentSchema, name: str) -> None:
    assert schema.name == name
    assert schema.platform == Platform.UNIVERSAL
    assert schema.props == ()
    assert schema.events == ()
    assert schema.supports_children is False
    assert schema.description == "fallback"
    assert schema.degraded is True


class TestSourceUnit:
    """Tests for SourceUnit construction."""

    @pytest.mark.unit
    def test_from_mapping_camel_case(self):
        """Wire keys are accepted."""
        unit = SourceUnit.from_mapping(
            {"componentName": "Card", "sourceText": "x", "runtimeRef": {"a": 1}}
        )
        assert unit == SourceUnit(name="Card", source_text="x", runtime_ref={"a": 1})

    @pytest.mark.unit
    def test_from_mapping_snake_case(self):
        """Python keys are accepted."""
        unit = SourceUnit.from_mapping({"name": "Card", "source_text": "y"})
        assert unit.source_text == "y"
        assert unit.runtime_ref is None


class TestSourceAnalysis:
    """Tests for source text analysis."""

    @pytest.mark.unit
    def test_interface_and_destructure(self):
        """Declared and destructured names merge; events leave props."""
        schema = analyze("Button", BUTTON_SOURCE)
        assert schema.degraded is False
        assert schema.platform == Platform.REACT
        assert [(p.name, p.type, p.required) for p in schema.props] == [
            ("text", CanonicalType.TEXT, True)
        ]
        assert [e.name for e in schema.events] == ["onClick"]
        assert schema.supports_children is True
        assert schema.description == "React component Button (analyzed from source text)"

    @pytest.mark.unit
    def test_required_comes_from_interface(self):
        """An optional declared prop stays optional despite destructuring."""
        source = (
            "interface P { size?: string }\n"
            "export const Chip = ({ size }: P) => <span />;"
        )
        schema = analyze("Chip", source)
        assert schema.get_prop("size").required is False

    @pytest.mark.unit
    def test_no_event_shaped_props(self):
        """No final prop name is event-shaped."""
        source = """
        type Props = { onOpen: () => void; onClose?: (reason: string) => void; open: boolean };
        const Modal = ({ open, onOpen, onClose, onKey }: Props) => (
          <div onKeyDown={onKey}>{open ? 'open' : null}</div>
        );
        """
        schema = analyze("Modal", source)
        assert all(not EVENT_NAME_PATTERN.match(p.name) for p in schema.props)
        assert [p.name for p in schema.props] == ["open"]
        assert schema.get_prop("open").type == CanonicalType.BOOLEAN
        assert {e.name for e in schema.events} == {"onOpen", "onClose", "onKey", "onKeyDown"}
        assert schema.get_event("onClose").parameters == ("reason: string",)

    @pytest.mark.unit
    def test_angular_decorators(self):
        """Decorator markers select angular."""
        source = """
        @Component({ selector: 'app-badge', template: '<span></span>' })
        export class Badge {
          @Input() label: string;
        }
        """
        analyzer = SchemaAnalyzer(settings=AnalyzerSettings(strict_parse=False))
        assert analyzer.analyze(SourceUnit("Badge", source)).platform == Platform.ANGULAR

    @pytest.mark.unit
    def test_vanilla_default(self):
        """Sources without framework idioms are vanilla."""
        schema = analyze("add", "export function add({ a, b }) { return a + b; }")
        assert schema.platform == Platform.VANILLA
        assert [p.name for p in schema.props] == ["a", "b"]

    @pytest.mark.unit
    def test_no_children_without_markup_content(self):
        """Self-closing markup does not imply children."""
        schema = analyze("Icon", "export const Icon = ({ name }) => <i className={name} />;")
        assert schema.supports_children is False

    @pytest.mark.unit
    def test_wire_output(self):
        """The analyzed schema serializes to camelCase wire keys."""
        wire = analyze("Button", BUTTON_SOURCE).to_wire()
        assert wire["supportsChildren"] is True
        assert wire["props"] == [{"name": "text", "type": "text", "required": True}]


class TestFallback:
    """Tests for the never-raise contract."""

    @pytest.mark.unit
    def test_malformed_source(self, caplog):
        """Syntax errors give the fallback and a warning with the stage."""
        with caplog.at_level(logging.WARNING, logger="uischema.analyzer"):
            schema = analyze("Broken", "interface Props { text: string;\n  onClick?: (")
        assert_fallback(schema, "Broken")
        record = caplog.records[-1]
        assert record.component == "Broken"
        assert record.stage == "parse"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "unit",
        [
            SourceUnit(name="Empty"),
            SourceUnit(name="Empty", source_text=""),
            SourceUnit(name="Empty", source_text=42),
        ],
    )
    def test_bad_input(self, unit):
        """Missing or non-text input gives the fallback."""
        assert_fallback(SchemaAnalyzer().analyze(unit), "Empty")

    @pytest.mark.unit
    def test_non_unit_input(self):
        """Garbage in still returns a schema."""
        schema = SchemaAnalyzer().analyze(None)
        assert isinstance(schema, ComponentSchema)
        assert schema.degraded is True

    @pytest.mark.unit
    def test_oversize_source(self):
        """Sources over the byte limit fall back."""
        analyzer = SchemaAnalyzer(settings=AnalyzerSettings(max_source_bytes=10))
        assert analyzer.analyze(SourceUnit("Big", BUTTON_SOURCE)).degraded is True

    @pytest.mark.unit
    def test_lenient_parse_keeps_partial_results(self):
        """With strict parsing off, the recoverable part is still analyzed."""
        analyzer = SchemaAnalyzer(settings=AnalyzerSettings(strict_parse=False))
        source = "interface Props { label: string }\nconst x = (;"
        schema = analyzer.analyze(SourceUnit("Partial", source))
        assert schema.degraded is False
        assert schema.get_prop("label") is not None

    @pytest.mark.unit
    def test_strict_extraction_falls_back(self, caplog):
        """A strict walker failure is converted at the boundary."""

        def broken(node, ctx):
            raise ExtractionFailure("nope", node_kind=node.type)

        walker = SyntaxWalker(
            extractors={**DEFAULT_EXTRACTORS, "interface_declaration": broken},
            strict=True,
        )
        with caplog.at_level(logging.WARNING, logger="uischema.analyzer"):
            schema = SchemaAnalyzer(walker=walker).analyze(SourceUnit("Strict", BUTTON_SOURCE))
        assert_fallback(schema, "Strict")
        assert caplog.records[-1].stage == "walk"

    @pytest.mark.unit
    def test_lenient_extraction_keeps_going(self):
        """A recorded walker failure does not degrade the schema."""

        def broken(node, ctx):
            raise ValueError("nope")

        walker = SyntaxWalker(
            extractors={**DEFAULT_EXTRACTORS, "interface_declaration": broken}
        )
        schema = SchemaAnalyzer(walker=walker).analyze(SourceUnit("Lenient", BUTTON_SOURCE))
        assert schema.degraded is False
        assert [p.name for p in schema.props] == ["text"]

    @pytest.mark.unit
    def test_unknown_grammar(self):
        """A misconfigured grammar falls back instead of raising."""
        analyzer = SchemaAnalyzer(settings=AnalyzerSettings(grammar="cobol"))
        assert analyzer.analyze(SourceUnit("X", BUTTON_SOURCE)).degraded is True


VUE_SETUP_SOURCE = """\
<template>
  <button @click="go">{{ label }}</button>
</template>

<script setup lang="ts">
defineProps<{ label: string; size?: number }>()
</script>
"""

SVELTE_SOURCE = """\
<script>
  export let label;
  export let size = 2;
</script>

<button on:click>{label}</button>
"""


class TestSingleFileComponents:
    """Tests for Vue and Svelte single-file component sources."""

    @pytest.mark.unit
    def test_vue_script_setup(self):
        """Typed defineProps and template listeners are read from a .vue file."""
        schema = analyze("Action", VUE_SETUP_SOURCE)
        assert schema.degraded is False
        assert schema.platform == Platform.VUE
        assert [(p.name, p.type, p.required) for p in schema.props] == [
            ("label", CanonicalType.TEXT, True),
            ("size", CanonicalType.NUMBER, False),
        ]
        assert [e.name for e in schema.events] == ["onClick"]

    @pytest.mark.unit
    def test_svelte_exports(self):
        """Exported lets are props; a default makes them optional."""
        schema = analyze("Action", SVELTE_SOURCE)
        assert schema.degraded is False
        assert schema.platform == Platform.SVELTE
        assert [(p.name, p.required) for p in schema.props] == [
            ("label", True),
            ("size", False),
        ]
        assert schema.get_prop("size").default_value == 2
        assert [e.name for e in schema.events] == ["onClick"]

    @pytest.mark.unit
    def test_vue_options_and_slot(self):
        """An options object declares props and emits; a slot means children."""
        source = """\
<script>
export default {
  props: { title: { type: String, required: true }, count: Number },
  emits: ['close'],
}
</script>
<template><div class="card"><slot /></div></template>
"""
        schema = analyze("Card", source)
        assert schema.platform == Platform.VUE
        assert [(p.name, p.type, p.required) for p in schema.props] == [
            ("title", CanonicalType.TEXT, True),
            ("count", CanonicalType.NUMBER, False),
        ]
        assert [e.name for e in schema.events] == ["onClose"]
        assert schema.supports_children is True

    @pytest.mark.unit
    def test_typed_emits(self):
        """Call signatures in defineEmits name the event and its parameters."""
        source = """\
<script setup lang="ts">
const emit = defineEmits<{ (e: 'change', id: number): void }>()
</script>
<template><b /></template>
"""
        schema = analyze("Picker", source)
        assert schema.get_event("onChange").parameters == ("id: number",)
        assert schema.supports_children is False

    @pytest.mark.unit
    def test_svelte_dispatcher(self):
        """Dispatched events and template listeners are both events."""
        source = """\
<script>
  import { createEventDispatcher } from 'svelte';
  const dispatch = createEventDispatcher();
  function pick() { dispatch('select', 1); }
</script>
<button on:click={pick}>pick</button>
"""
        schema = analyze("Picker", source)
        assert schema.platform == Platform.SVELTE
        assert sorted(e.name for e in schema.events) == ["onClick", "onSelect"]
        assert schema.props == ()

    @pytest.mark.unit
    def test_markup_only(self):
        """A template without a script still yields its listeners."""
        schema = analyze("Plain", "<template><a @click.prevent=\"go\">x</a></template>")
        assert schema.degraded is False
        assert [e.name for e in schema.events] == ["onClick"]

    @pytest.mark.unit
    def test_broken_script_falls_back(self):
        """A script block with syntax errors still yields the fallback schema."""
        source = "<script setup lang=\"ts\">defineProps<{ label: </script><template></template>"
        assert_fallback(analyze("Broken", source), "Broken")

    @pytest.mark.unit
    def test_oversize_component_file(self):
        """The byte limit covers the markup as well as the script."""
        analyzer = SchemaAnalyzer(settings=AnalyzerSettings(max_source_bytes=40))
        assert analyzer.analyze(SourceUnit("Big", VUE_SETUP_SOURCE)).degraded is True


class TestRuntimeAnalysis:
    """Tests for runtime reference analysis."""

    @pytest.mark.unit
    def test_vue_descriptor(self):
        """Runtime descriptors produce a runtime-described schema."""
        ref = {
            "setup": None,
            "props": {"title": {"type": "String", "required": True}, "onSave": "Function"},
            "emits": ["close"],
            "slots": {},
        }
        schema = analyze("Dialog", runtime_ref=ref)
        assert schema.platform == Platform.VUE
        assert [p.name for p in schema.props] == ["title"]
        assert [e.name for e in schema.events] == ["onSave", "onClose"]
        assert schema.supports_children is True
        assert schema.description.endswith("(analyzed from runtime reference)")

    @pytest.mark.unit
    def test_unmarked_descriptor_is_universal(self):
        """Descriptors without platform markers are universal."""
        schema = analyze("Plain", runtime_ref={"props": ["value"]})
        assert schema.platform == Platform.UNIVERSAL
        assert schema.degraded is False

    @pytest.mark.unit
    def test_source_text_wins(self):
        """When both inputs are given the source text is analyzed."""
        schema = analyze("Both", BUTTON_SOURCE, runtime_ref={"selector": "x"})
        assert schema.platform == Platform.REACT

    @pytest.mark.unit
    def test_opaque_default_exports(self):
        """Defaults holding arbitrary objects still serialize to the wire."""
        ref = {"props": {"rows": {"type": "Array", "default": [object()]}}}
        wire = analyze("Table", runtime_ref=ref).to_wire()
        (value,) = wire["props"][0]["defaultValue"]
        assert value.startswith("<object object at ")


class TestDeterminism:
    """Tests for repeatability."""

    @pytest.mark.unit
    def test_same_input_same_schema(self):
        """Repeated analysis yields equal schemas."""
        analyzer = SchemaAnalyzer()
        unit = SourceUnit("Button", BUTTON_SOURCE)
        assert analyzer.analyze(unit) == analyzer.analyze(unit)
