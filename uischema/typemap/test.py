"""Unit tests for the type mapper."""

import pytest

from uischema.schema import CanonicalType

from .lib import TYPE_RULES, map_runtime_type, map_type


class TestMapType:
    """Tests for annotation text mapping."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("string", CanonicalType.TEXT),
            ("number", CanonicalType.NUMBER),
            ("bigint", CanonicalType.NUMBER),
            ("boolean", CanonicalType.BOOLEAN),
            ("string[]", CanonicalType.ARRAY),
            ("Array<Item>", CanonicalType.ARRAY),
            ("(e: MouseEvent) => void", CanonicalType.FUNCTION),
            ("EventHandler<Event>", CanonicalType.FUNCTION),
            ("React.ReactNode", CanonicalType.ELEMENT),
            ("JSX.Element", CanonicalType.ELEMENT),
            ("VNode", CanonicalType.ELEMENT),
            ("ColorValue", CanonicalType.COLOR),
            ("DimensionValue", CanonicalType.DIMENSION),
            ("ImageSourcePropType", CanonicalType.RESOURCE),
            ("StyleProp<ViewStyle>", CanonicalType.OBJECT),
            ("Record<string, number>", CanonicalType.OBJECT),
            ("{ id: string; done: boolean }", CanonicalType.OBJECT),
        ],
    )
    def test_known_shapes(self, raw, expected):
        """Each representative annotation maps to its canonical type."""
        assert map_type(raw) == expected

    @pytest.mark.unit
    def test_case_insensitive(self):
        """Matching ignores case and surrounding whitespace."""
        assert map_type("  BOOLEAN ") == CanonicalType.BOOLEAN

    @pytest.mark.unit
    def test_array_beats_element_type(self):
        """Array markers win over the element type inside them."""
        assert map_type("ReactNode[]") == CanonicalType.ARRAY

    @pytest.mark.unit
    def test_function_beats_return_type(self):
        """A function returning a string is still a function."""
        assert map_type("() => string") == CanonicalType.FUNCTION

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "raw",
        [
            "(items: string[]) => JSX.Element",
            "<T>(rows: T[]) => void",
            "(value: Record<string, number>) => string",
        ],
    )
    def test_signature_beats_parameter_types(self, raw):
        """Array or object parameters do not hide a function type."""
        assert map_type(raw) == CanonicalType.FUNCTION

    @pytest.mark.unit
    def test_array_of_functions(self):
        """A bracketed signature followed by [] is an array."""
        assert map_type("(() => void)[]") == CanonicalType.ARRAY

    @pytest.mark.unit
    def test_union_takes_most_specific(self):
        """Number in a number|string union outranks text."""
        assert map_type("number | string") == CanonicalType.NUMBER

    @pytest.mark.unit
    @pytest.mark.parametrize("raw", [None, "", "   ", "Foo", "'primary' | 'ghost'"])
    def test_unmatched_is_text(self, raw):
        """Empty or unrecognized input defaults to text."""
        assert map_type(raw) == CanonicalType.TEXT

    @pytest.mark.unit
    def test_rules_cover_vocabulary(self):
        """Every canonical type has a rule."""
        assert {canonical for canonical, _ in TYPE_RULES} == set(CanonicalType)


class TestMapRuntimeType:
    """Tests for runtime type marker mapping."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "marker,expected",
        [
            (str, CanonicalType.TEXT),
            (int, CanonicalType.NUMBER),
            (float, CanonicalType.NUMBER),
            (bool, CanonicalType.BOOLEAN),
            (list, CanonicalType.ARRAY),
            (tuple, CanonicalType.ARRAY),
            (dict, CanonicalType.OBJECT),
            ("String", CanonicalType.TEXT),
            ("Number", CanonicalType.NUMBER),
            ("Boolean", CanonicalType.BOOLEAN),
            ("Array", CanonicalType.ARRAY),
            ("Object", CanonicalType.OBJECT),
            ("Function", CanonicalType.FUNCTION),
            ("func", CanonicalType.FUNCTION),
            ("node", CanonicalType.ELEMENT),
        ],
    )
    def test_markers(self, marker, expected):
        """Python types and framework names map onto the vocabulary."""
        assert map_runtime_type(marker) == expected

    @pytest.mark.unit
    def test_annotation_string_falls_through(self):
        """Unknown strings are treated as annotation text."""
        assert map_runtime_type("ColorValue") == CanonicalType.COLOR

    @pytest.mark.unit
    def test_union_list(self):
        """The first recognized member of a union list wins."""
        assert map_runtime_type([None, "Number", "String"]) == CanonicalType.NUMBER

    @pytest.mark.unit
    def test_callable_marker(self):
        """A plain callable marker is a function."""
        assert map_runtime_type(lambda: None) == CanonicalType.FUNCTION

    @pytest.mark.unit
    def test_none_is_text(self):
        """A missing marker is text."""
        assert map_runtime_type(None) == CanonicalType.TEXT
