"""Precedence-based collapse of candidates that share a name.

Declarations (interface, type alias, runtime descriptor) outrank
destructuring, which outranks markup attributes. The winning candidate
supplies every field; lower-ranked duplicates are discarded whole.
"""

from collections.abc import Iterable
from typing import TypeVar

from uischema.schema import (
    EventCandidate,
    EventDefinition,
    PropertyCandidate,
    PropertyDefinition,
)
from uischema.typemap import map_type

__all__ = [
    "select_winners",
    "merge_properties",
    "merge_events",
    "deduplicate",
]

C = TypeVar("C", PropertyCandidate, EventCandidate)


def select_winners(candidates: Iterable[C]) -> list[C]:
    """Keep one candidate per name.

    Args:
        candidates: Candidates in document order.

    Returns:
        Highest-precedence candidate per name (first seen on ties),
        ordered by first appearance of each name.
    """
    winners: dict[str, C] = {}
    for candidate in candidates:
        current = winners.get(candidate.name)
        if current is None or candidate.rank < current.rank:
            winners[candidate.name] = candidate
    return list(winners.values())


def merge_properties(candidates: Iterable[PropertyCandidate]) -> list[PropertyDefinition]:
    """Deduplicate property candidates and map their types."""
    return [
        PropertyDefinition(
            name=candidate.name,
            type=candidate.canonical or map_type(candidate.raw_type),
            required=candidate.required,
            description=candidate.description,
            default_value=candidate.default_value,
        )
        for candidate in select_winners(candidates)
    ]


def merge_events(candidates: Iterable[EventCandidate]) -> list[EventDefinition]:
    """Deduplicate event candidates."""
    return [
        EventDefinition(
            name=candidate.name,
            parameters=candidate.parameter_hints,
            description=candidate.description,
        )
        for candidate in select_winners(candidates)
    ]


def deduplicate(
    properties: Iterable[PropertyCandidate],
    events: Iterable[EventCandidate],
) -> tuple[tuple[PropertyDefinition, ...], tuple[EventDefinition, ...]]:
    """Merge already-partitioned props and events into schema entries."""
    return tuple(merge_properties(properties)), tuple(merge_events(events))
