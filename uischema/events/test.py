"""Unit tests for the event classifier."""

import pytest

from uischema.schema import EventCandidate, Origin, PropertyCandidate

from .lib import (
    canonical_event_name,
    is_event_candidate,
    is_event_name,
    parameter_hints_from_type,
    partition,
)


class TestCanonicalEventName:
    """Tests for ecosystem spelling normalization."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("on:click", "onClick"),
            ("on:click|preventDefault", "onClick"),
            ("v-on:click", "onClick"),
            ("v-on:submit.prevent", "onSubmit"),
            ("@click", "onClick"),
            ("@update:model-value", "onUpdate:model-value"),
            ("(click)", "onClick"),
            ("(valueChange)", "onValueChange"),
        ],
    )
    def test_framework_spellings(self, raw, expected):
        """Svelte, Vue and Angular spellings become onName."""
        assert canonical_event_name(raw) == expected

    @pytest.mark.unit
    @pytest.mark.parametrize("raw", ["onClick", "label", "online", "@", "()", "on:"])
    def test_other_names_unchanged(self, raw):
        """Names without a known event spelling are returned as-is."""
        assert canonical_event_name(raw) == raw


class TestIsEventName:
    """Tests for the event naming convention."""

    @pytest.mark.unit
    @pytest.mark.parametrize("name", ["onClick", "onChange", "on:click", "@input"])
    def test_event_names(self, name):
        """on + uppercase letter, in any spelling, is an event."""
        assert is_event_name(name) is True

    @pytest.mark.unit
    @pytest.mark.parametrize("name", ["online", "on", "one", "label", "Onclick", "on_click"])
    def test_non_event_names(self, name):
        """Lowercase continuation or other prefixes are not events."""
        assert is_event_name(name) is False


class TestIsEventCandidate:
    """Tests for candidate classification."""

    @pytest.mark.unit
    def test_event_shaped_property(self):
        """A property named onPress is an event candidate."""
        candidate = PropertyCandidate(name="onPress", origin=Origin.INTERFACE)
        assert is_event_candidate(candidate) is True

    @pytest.mark.unit
    def test_markup_attribute_origin(self):
        """Markup-attribute candidates are always events."""
        candidate = PropertyCandidate(name="@click", origin=Origin.MARKUP_ATTRIBUTE)
        assert is_event_candidate(candidate) is True

    @pytest.mark.unit
    def test_plain_property(self):
        """Ordinary props are not events."""
        candidate = PropertyCandidate(name="title", origin=Origin.DESTRUCTURE)
        assert is_event_candidate(candidate) is False


class TestParameterHints:
    """Tests for function-type parameter extraction."""

    @pytest.mark.unit
    def test_multiple_parameters(self):
        """Top-level parameters are split on commas."""
        hints = parameter_hints_from_type("(id: string, e: MouseEvent) => void")
        assert hints == ("id: string", "e: MouseEvent")

    @pytest.mark.unit
    def test_nested_generics_and_callbacks(self):
        """Commas and arrows nested inside brackets do not split."""
        hints = parameter_hints_from_type(
            "(map: Record<string, number>, cb: (a: A, b: B) => void) => void"
        )
        assert hints == ("map: Record<string, number>", "cb: (a: A, b: B) => void")

    @pytest.mark.unit
    def test_no_parameters(self):
        """An empty parameter list yields no hints."""
        assert parameter_hints_from_type("() => void") == ()

    @pytest.mark.unit
    def test_bare_parameter(self):
        """A parenthesis-free single parameter is kept."""
        assert parameter_hints_from_type("value => void") == ("value",)

    @pytest.mark.unit
    def test_non_function(self):
        """Non-function annotations yield no hints."""
        assert parameter_hints_from_type("EventHandler") == ()
        assert parameter_hints_from_type("") == ()


class TestPartition:
    """Tests for prop/event partitioning."""

    @pytest.mark.unit
    def test_moves_event_shaped_props(self):
        """Event-shaped props leave the props list with their hints."""
        props = [
            PropertyCandidate(name="text", origin=Origin.INTERFACE, raw_type="string"),
            PropertyCandidate(
                name="onClick",
                origin=Origin.INTERFACE,
                raw_type="(e: Event) => void",
                description="Fired on click",
                position=20,
            ),
        ]
        kept, events = partition(props, [])
        assert [p.name for p in kept] == ["text"]
        assert len(events) == 1
        assert events[0].name == "onClick"
        assert events[0].parameter_hints == ("e: Event",)
        assert events[0].description == "Fired on click"

    @pytest.mark.unit
    def test_events_are_canonicalized_and_ordered(self):
        """Events are renamed and sorted by discovery position."""
        props = [PropertyCandidate(name="onOpen", origin=Origin.INTERFACE, position=5)]
        events = [EventCandidate(name="on:close", origin=Origin.MARKUP_ATTRIBUTE, position=50)]
        kept, classified = partition(props, events)
        assert kept == []
        assert [e.name for e in classified] == ["onOpen", "onClose"]

    @pytest.mark.unit
    def test_no_name_in_both_lists(self):
        """After partitioning no prop name is event-shaped."""
        props = [
            PropertyCandidate(name=n, origin=Origin.DESTRUCTURE)
            for n in ("size", "onHover", "online", "onBlur")
        ]
        kept, events = partition(props, [])
        assert {p.name for p in kept} == {"size", "online"}
        assert {e.name for e in events} == {"onHover", "onBlur"}
