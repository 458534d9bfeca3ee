"""Unit tests for the runtime inspector."""

from types import SimpleNamespace

import pytest

from uischema.schema import CanonicalType, Origin

from .lib import declared_event_name, inspect_runtime


def props_by_name(findings):
    return {c.name: c for c in findings.properties}


class TestDeclaredEventName:
    """Tests for emit/output name normalization."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("close", "onClose"),
            ("valueChange", "onValueChange"),
            ("update:modelValue", "onUpdate:modelValue"),
            ("onSelect", "onSelect"),
            ("@submit", "onSubmit"),
        ],
    )
    def test_names(self, raw, expected):
        """Declared names become onName events."""
        assert declared_event_name(raw) == expected


class TestReactDescriptors:
    """Tests for propTypes/defaultProps."""

    @pytest.mark.unit
    def test_prop_types_and_defaults(self):
        """defaultProps refine declared props and add missing ones."""
        findings = inspect_runtime(
            {
                "$$typeof": "react.memo",
                "propTypes": {
                    "label": {"type": "string", "isRequired": True},
                    "onPress": "func",
                },
                "defaultProps": {"label": "OK", "count": 3},
            }
        )
        props = props_by_name(findings)
        assert list(props) == ["label", "onPress", "count"]
        assert props["label"].required is True
        assert props["label"].default_value == "OK"
        assert props["label"].canonical == CanonicalType.TEXT
        assert props["onPress"].canonical == CanonicalType.FUNCTION
        assert props["count"].canonical == CanonicalType.NUMBER
        assert props["count"].required is False
        assert all(c.origin == Origin.RUNTIME for c in findings.properties)


class TestVueDescriptors:
    """Tests for Vue-style props and emits."""

    @pytest.mark.unit
    def test_object_props_and_emits(self):
        """Option objects carry type, required and default."""
        findings = inspect_runtime(
            {
                "props": {
                    "title": {"type": "String", "required": True},
                    "items": {"type": list, "default": lambda: []},
                    "size": "Number",
                },
                "emits": {"select": ["id: string"], "close": None},
                "setup": None,
            }
        )
        props = props_by_name(findings)
        assert props["title"].required is True
        assert props["items"].canonical == CanonicalType.ARRAY
        assert props["items"].default_value is None
        assert props["size"].canonical == CanonicalType.NUMBER
        assert [(e.name, e.parameter_hints) for e in findings.events] == [
            ("onSelect", ("id: string",)),
            ("onClose", ()),
        ]

    @pytest.mark.unit
    def test_array_props_and_emits(self):
        """Array syntax declares optional text props and bare events."""
        findings = inspect_runtime({"props": ["modelValue"], "emits": ["update:modelValue"]})
        assert props_by_name(findings)["modelValue"].canonical == CanonicalType.TEXT
        assert findings.events[0].name == "onUpdate:modelValue"

    @pytest.mark.unit
    def test_slots_imply_children(self):
        """A slots field marks children support."""
        assert inspect_runtime({"props": [], "slots": {}}).has_children is True


class TestAngularDescriptors:
    """Tests for inputs/outputs."""

    @pytest.mark.unit
    def test_inputs_and_outputs(self):
        """Inputs are props and outputs are events."""
        ref = SimpleNamespace(
            selector="app-rating", inputs=["value", "max"], outputs=["rate"]
        )
        findings = inspect_runtime(ref)
        assert [p.name for p in findings.properties] == ["value", "max"]
        assert [e.name for e in findings.events] == ["onRate"]


class TestGenericDescriptors:
    """Tests for children detection and callables."""

    @pytest.mark.unit
    def test_children_prop(self):
        """A declared children prop marks children support."""
        assert inspect_runtime({"props": ["children"]}).has_children is True
        assert inspect_runtime({"props": ["label"]}).has_children is False

    @pytest.mark.unit
    def test_callable_signature(self):
        """Plain callables are described by their parameters."""

        def badge(label: str, count: int = 0, *args, **kwargs):
            return label

        props = props_by_name(inspect_runtime(badge))
        assert list(props) == ["label", "count"]
        assert props["label"].required is True
        assert props["count"].required is False
        assert props["count"].default_value == 0
        assert props["count"].canonical == CanonicalType.NUMBER

    @pytest.mark.unit
    def test_non_serializable_default_stringified(self):
        """Defaults that are not plain data are kept as text."""
        findings = inspect_runtime({"defaultProps": {"ratio": complex(1, 2)}})
        assert props_by_name(findings)["ratio"].default_value == "(1+2j)"

    @pytest.mark.unit
    def test_nested_defaults_become_plain_data(self):
        """Containers are copied with their non-JSON members stringified."""
        marker = complex(0, 1)
        findings = inspect_runtime(
            {
                "props": {
                    "items": {"type": "Array", "default": [marker, (1, 2)]},
                    "style": {"type": "Object", "default": {1: marker}},
                }
            }
        )
        props = props_by_name(findings)
        assert props["items"].default_value == ["1j", [1, 2]]
        assert props["style"].default_value == {"1": "1j"}

    @pytest.mark.unit
    def test_self_containing_default(self):
        """A container holding itself is cut off instead of recursing."""
        loop = []
        loop.append(loop)
        findings = inspect_runtime({"defaultProps": {"loop": loop}})
        assert props_by_name(findings)["loop"].default_value == ["[[...]]"]

    @pytest.mark.unit
    def test_empty_descriptor(self):
        """A descriptor with no declarations yields nothing."""
        findings = inspect_runtime({})
        assert findings.properties == ()
        assert findings.events == ()
        assert findings.has_children is False
