"""Unit tests for candidate deduplication."""

import pytest

from uischema.schema import (
    CanonicalType,
    EventCandidate,
    Origin,
    PropertyCandidate,
)

from .lib import deduplicate, merge_events, merge_properties, select_winners


class TestSelectWinners:
    """Tests for precedence selection."""

    @pytest.mark.unit
    def test_interface_beats_destructure(self):
        """The declaration wins regardless of order."""
        destructured = PropertyCandidate(name="text", origin=Origin.DESTRUCTURE, required=True)
        declared = PropertyCandidate(
            name="text", origin=Origin.INTERFACE, raw_type="string", required=False
        )
        winners = select_winners([destructured, declared])
        assert winners == [declared]

    @pytest.mark.unit
    def test_first_wins_on_tie(self):
        """Equal precedence keeps the first candidate."""
        first = PropertyCandidate(name="a", origin=Origin.INTERFACE, raw_type="number")
        second = PropertyCandidate(name="a", origin=Origin.TYPE_ALIAS, raw_type="string")
        assert select_winners([first, second]) == [first]

    @pytest.mark.unit
    def test_first_seen_order(self):
        """Output follows the first appearance of each name."""
        candidates = [
            PropertyCandidate(name="b", origin=Origin.DESTRUCTURE),
            PropertyCandidate(name="a", origin=Origin.DESTRUCTURE),
            PropertyCandidate(name="b", origin=Origin.INTERFACE),
        ]
        assert [c.name for c in select_winners(candidates)] == ["b", "a"]

    @pytest.mark.unit
    def test_case_sensitive_names(self):
        """Names differing by case are separate entries."""
        candidates = [
            PropertyCandidate(name="id", origin=Origin.DESTRUCTURE),
            PropertyCandidate(name="ID", origin=Origin.DESTRUCTURE),
        ]
        assert len(select_winners(candidates)) == 2


class TestMergeProperties:
    """Tests for property definitions."""

    @pytest.mark.unit
    def test_required_comes_from_declaration(self):
        """Lower precedence duplicates neither upgrade nor downgrade."""
        props = merge_properties(
            [
                PropertyCandidate(name="label", origin=Origin.INTERFACE, raw_type="string"),
                PropertyCandidate(
                    name="label", origin=Origin.DESTRUCTURE, required=True, default_value="x"
                ),
            ]
        )
        assert len(props) == 1
        assert props[0].required is False
        assert props[0].default_value is None
        assert props[0].type == CanonicalType.TEXT

    @pytest.mark.unit
    def test_types_are_mapped(self):
        """Raw annotations become canonical types."""
        props = merge_properties(
            [PropertyCandidate(name="items", origin=Origin.INTERFACE, raw_type="Item[]")]
        )
        assert props[0].type == CanonicalType.ARRAY

    @pytest.mark.unit
    def test_preresolved_canonical_type(self):
        """Runtime candidates keep their resolved type."""
        props = merge_properties(
            [
                PropertyCandidate(
                    name="count", origin=Origin.RUNTIME, canonical=CanonicalType.NUMBER
                )
            ]
        )
        assert props[0].type == CanonicalType.NUMBER

    @pytest.mark.unit
    def test_destructure_defaults_to_text(self):
        """Untyped destructured props are text."""
        props = merge_properties([PropertyCandidate(name="x", origin=Origin.DESTRUCTURE)])
        assert props[0].type == CanonicalType.TEXT


class TestMergeEvents:
    """Tests for event definitions."""

    @pytest.mark.unit
    def test_declared_hints_win(self):
        """Declared events outrank markup usage."""
        events = merge_events(
            [
                EventCandidate(name="onClick", origin=Origin.MARKUP_ATTRIBUTE),
                EventCandidate(
                    name="onClick", origin=Origin.INTERFACE, parameter_hints=("e: Event",)
                ),
            ]
        )
        assert len(events) == 1
        assert events[0].parameters == ("e: Event",)

    @pytest.mark.unit
    def test_deduplicate_returns_tuples(self):
        """deduplicate returns immutable sequences for the schema."""
        props, events = deduplicate(
            [PropertyCandidate(name="a", origin=Origin.DESTRUCTURE)],
            [EventCandidate(name="onA", origin=Origin.DESTRUCTURE)],
        )
        assert isinstance(props, tuple)
        assert isinstance(events, tuple)
        assert props[0].name == "a"
        assert events[0].name == "onA"
