"""Unit tests for the syntax walker and its extractors."""

import pytest

from uischema.core.errors import ExtractionFailure
from uischema.parsing import parse_source
from uischema.schema import CanonicalType, Origin

from .extractors import DEFAULT_EXTRACTORS, SCRIPT_EXTRACTORS
from .lib import SyntaxWalker


def walk(source: str, **kwargs):
    return SyntaxWalker(**kwargs).walk(parse_source(source), component="Test")


class TestDeclarations:
    """Tests for interface and type-alias extraction."""

    @pytest.mark.unit
    def test_interface_properties(self):
        """Property signatures keep annotation text and optional markers."""
        result = walk(
            """
            interface Props {
              /** Button label */
              text: string;
              size?: 'sm' | 'md';
              onClick?: () => void;
            }
            """
        )
        by_name = {c.name: c for c in result.properties}
        assert list(by_name) == ["text", "size", "onClick"]
        assert by_name["text"].raw_type == "string"
        assert by_name["text"].required is True
        assert by_name["text"].description == "Button label"
        assert by_name["text"].origin == Origin.INTERFACE
        assert by_name["size"].required is False
        assert by_name["onClick"].raw_type == "() => void"

    @pytest.mark.unit
    def test_type_alias_object(self):
        """Object type aliases are handled like interfaces."""
        result = walk("type CardProps = { title: string; count?: number };")
        assert [(c.name, c.origin) for c in result.properties] == [
            ("title", Origin.TYPE_ALIAS),
            ("count", Origin.TYPE_ALIAS),
        ]

    @pytest.mark.unit
    def test_non_object_alias_ignored(self):
        """Aliases of unions or primitives declare no props."""
        result = walk("type Size = 'sm' | 'md';")
        assert result.properties == ()

    @pytest.mark.unit
    def test_method_signatures(self):
        """Event-shaped methods become events; others become function props."""
        result = walk(
            """
            interface ListProps {
              onChange(value: string, id: number): void;
              renderItem(item: Item): ReactNode;
            }
            """
        )
        assert [e.name for e in result.events] == ["onChange"]
        assert result.events[0].parameter_hints == ("value: string", "id: number")
        assert [p.name for p in result.properties] == ["renderItem"]
        assert "=>" in result.properties[0].raw_type

    @pytest.mark.unit
    def test_trailing_comment_not_carried(self):
        """A comment after a member does not describe the next member."""
        result = walk(
            """
            interface P {
              a: string; // about a
              // about b
              b: number;
              c: boolean;
            }
            """
        )
        by_name = {c.name: c for c in result.properties}
        assert by_name["a"].description is None
        assert by_name["b"].description == "about b"
        assert by_name["c"].description is None


class TestDestructuring:
    """Tests for destructured component parameters."""

    @pytest.mark.unit
    def test_shorthand_bindings(self):
        """Bound names are required, untyped destructure candidates."""
        result = walk("export function Button({ text, onClick }) { return null; }")
        assert [c.name for c in result.properties] == ["text", "onClick"]
        for candidate in result.properties:
            assert candidate.origin == Origin.DESTRUCTURE
            assert candidate.raw_type == ""
            assert candidate.required is True

    @pytest.mark.unit
    def test_defaults_rest_and_renames(self):
        """Defaults are recorded, renames use the key and rest is optional."""
        result = walk(
            "function Tag({ size = 'md', active = true, count = 3, label: title, ...rest }) "
            "{ return null; }"
        )
        by_name = {c.name: c for c in result.properties}
        assert list(by_name) == ["size", "active", "count", "label", "rest"]
        assert by_name["size"].default_value == "md"
        assert by_name["size"].required is True
        assert by_name["active"].default_value is True
        assert by_name["count"].default_value == 3
        assert by_name["label"].default_value is None
        assert by_name["rest"].required is False

    @pytest.mark.unit
    def test_arrow_component(self):
        """Arrow function components are recognized."""
        result = walk("const Chip = ({ tone }) => <span>{tone}</span>;")
        assert [c.name for c in result.properties] == ["tone"]

    @pytest.mark.unit
    def test_nested_callbacks_ignored(self):
        """Destructuring inside a component body is not a signature."""
        result = walk(
            """
            const List = ({ items }) => (
              <ul>{items.map(({ id, label }) => <li key={id}>{label}</li>)}</ul>
            );
            """
        )
        assert [c.name for c in result.properties] == ["items"]

    @pytest.mark.unit
    def test_positional_parameters_ignored(self):
        """Functions without a destructured first parameter yield nothing."""
        result = walk("function add(a, b) { return a + b; }")
        assert result.properties == ()

    @pytest.mark.unit
    def test_inline_annotation_declares(self):
        """An inline object type on the parameter acts as a declaration."""
        result = walk("function Badge({ tone }: { tone?: string }) { return null; }")
        origins = [(c.name, c.origin, c.required) for c in result.properties]
        assert ("tone", Origin.DESTRUCTURE, True) in origins
        assert ("tone", Origin.INTERFACE, False) in origins


class TestMarkup:
    """Tests for JSX attribute and children handling."""

    @pytest.mark.unit
    def test_event_attributes_only(self):
        """Event-shaped attributes become events; others are ignored."""
        result = walk(
            "const A = () => <input value={v} onChange={handle} disabled />;"
        )
        assert [e.name for e in result.events] == ["onChange"]
        assert result.events[0].origin == Origin.MARKUP_ATTRIBUTE
        assert result.properties == ()

    @pytest.mark.unit
    def test_inline_handler_hints(self):
        """Inline arrow handlers contribute parameter hints."""
        result = walk("const A = () => <Pressable onPress={(e) => go(e)} />;")
        assert result.events[0].parameter_hints == ("e",)

    @pytest.mark.unit
    def test_children_detected(self):
        """Elements with content set has_children."""
        assert walk("const A = () => <div>hello</div>;").has_children is True
        assert walk("const A = () => <div><span /></div>;").has_children is True

    @pytest.mark.unit
    def test_no_children(self):
        """Empty or self-closing elements do not set has_children."""
        assert walk("const A = () => <img src={s} />;").has_children is False
        assert walk("const A = () => <div></div>;").has_children is False


def script_walk(source: str):
    walker = SyntaxWalker(extractors={**DEFAULT_EXTRACTORS, **SCRIPT_EXTRACTORS})
    return walker.walk(parse_source(source, grammar="typescript"), component="Test")


class TestScriptExtractors:
    """Tests for Vue macro and Svelte export extraction."""

    @pytest.mark.unit
    def test_runtime_props_object(self):
        """Prop options give type, required flag and literal defaults."""
        result = script_walk(
            """
            defineProps({
              label: { type: String, required: true },
              size: { type: Number, default: 2 },
              items: { type: Array, default: () => [] },
              tone: String,
            })
            """
        )
        by_name = {c.name: c for c in result.properties}
        assert list(by_name) == ["label", "size", "items", "tone"]
        assert all(c.origin == Origin.RUNTIME for c in result.properties)
        assert by_name["label"].required is True
        assert by_name["size"].default_value == 2
        assert by_name["size"].canonical == CanonicalType.NUMBER
        assert by_name["items"].default_value is None
        assert by_name["items"].canonical == CanonicalType.ARRAY
        assert by_name["tone"].required is False

    @pytest.mark.unit
    def test_runtime_props_array(self):
        """A list of names declares untyped props."""
        result = script_walk("defineProps(['a', \"b\"])")
        assert [c.name for c in result.properties] == ["a", "b"]

    @pytest.mark.unit
    def test_runtime_emits(self):
        """Emit validators supply parameter hints."""
        result = script_walk("defineEmits({ submit: (payload) => true, close: null })")
        assert [(e.name, e.parameter_hints) for e in result.events] == [
            ("onSubmit", ("payload",)),
            ("onClose", ()),
        ]

    @pytest.mark.unit
    def test_typed_emits_tuple_syntax(self):
        """Named tuple members become parameter hints."""
        result = script_walk("defineEmits<{ change: [id: number]; close: [] }>()")
        assert [(e.name, e.parameter_hints) for e in result.events] == [
            ("onChange", ("id: number",)),
            ("onClose", ()),
        ]

    @pytest.mark.unit
    def test_define_component_options(self):
        """defineComponent reads the props and emits options."""
        result = script_walk(
            "export default defineComponent({ props: ['title'], emits: ['open'] })"
        )
        assert [c.name for c in result.properties] == ["title"]
        assert [e.name for e in result.events] == ["onOpen"]

    @pytest.mark.unit
    def test_exported_lets(self):
        """Exported lets are props; constants and functions are not."""
        result = script_walk(
            """
            export let label: string;
            export let size = 'md';
            export const VERSION = 1;
            export function helper() {}
            """
        )
        assert [(c.name, c.required, c.default_value) for c in result.properties] == [
            ("label", True, None),
            ("size", False, "md"),
        ]
        assert result.properties[0].raw_type == "string"
        assert result.properties[0].origin == Origin.EXPORTED_BINDING

    @pytest.mark.unit
    def test_props_rune(self):
        """Destructuring $props() binds props."""
        result = script_walk("let { label, count = 0 } = $props();")
        assert [(c.name, c.default_value) for c in result.properties] == [
            ("label", None),
            ("count", 0),
        ]

    @pytest.mark.unit
    def test_dispatched_events(self):
        """dispatch and $emit calls with a literal name are events."""
        result = script_walk(
            """
            const dispatch = createEventDispatcher();
            function pick() { dispatch('select', 1); }
            const methods = { save() { this.$emit('save'); } };
            """
        )
        assert [(e.name, e.origin) for e in result.events] == [
            ("onSelect", Origin.DISPATCH),
            ("onSave", Origin.DISPATCH),
        ]

    @pytest.mark.unit
    def test_default_walker_ignores_macros(self):
        """Script extractors are opt-in."""
        assert walk("defineProps(['a'])").properties == ()


class TestResilience:
    """Tests for failure handling during the walk."""

    @staticmethod
    def _broken(node, ctx):
        raise RuntimeError("boom")

    @pytest.mark.unit
    def test_failure_recorded_and_walk_continues(self):
        """A failing extractor is recorded and other kinds still run."""
        extractors = dict(DEFAULT_EXTRACTORS)
        extractors["interface_declaration"] = self._broken
        result = walk(
            "interface P { a: string }\nconst C = ({ b }) => null;",
            extractors=extractors,
        )
        assert [c.name for c in result.properties] == ["b"]
        assert len(result.failures) == 1
        failure = result.failures[0]
        assert failure.node_kind == "interface_declaration"
        assert failure.component == "Test"
        assert isinstance(failure.cause, RuntimeError)

    @pytest.mark.unit
    def test_strict_raises(self):
        """Strict mode raises the first failure."""
        with pytest.raises(ExtractionFailure) as excinfo:
            walk(
                "interface P { a: string }",
                extractors={"interface_declaration": self._broken},
                strict=True,
            )
        assert excinfo.value.node_kind == "interface_declaration"

    @pytest.mark.unit
    def test_unknown_kinds_skipped(self):
        """Sources with no extractor kinds walk cleanly."""
        result = walk("let x = 1; x += 2;")
        assert result.properties == ()
        assert result.events == ()
        assert result.failures == ()
        assert result.nodes_visited > 1

    @pytest.mark.unit
    def test_deeply_nested_source(self):
        """Deep nesting does not hit a recursion limit."""
        source = "const v = " + "[" * 500 + "]" * 500 + ";"
        result = walk(source)
        assert result.nodes_visited > 500
