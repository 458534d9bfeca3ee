"""Event classification by naming convention.

A name is an event when its canonical form is ``on`` followed by an
uppercase letter. Framework-specific spellings (Svelte ``on:click``, Vue
``v-on:click`` / ``@click``, Angular ``(click)``) are rewritten to that
canonical form before the test.
"""

from collections.abc import Iterable

from uischema.schema import (
    EVENT_NAME_PATTERN,
    EventCandidate,
    Origin,
    PropertyCandidate,
)

__all__ = [
    "canonical_event_name",
    "is_event_name",
    "is_event_candidate",
    "parameter_hints_from_type",
    "partition",
]

_OPENERS = {"(": ")", "<": ">", "{": "}", "[": "]"}
_CLOSERS = {v: k for k, v in _OPENERS.items()}


def _capitalize(name: str) -> str:
    return name[:1].upper() + name[1:]


def canonical_event_name(name: str) -> str:
    """Rewrite an ecosystem event spelling to the ``onName`` form.

    Args:
        name: Attribute, prop or declared event name.

    Returns:
        Canonical name, or the input unchanged when it uses no known
        event spelling.

    Example:
        >>> canonical_event_name("v-on:click.stop")
        'onClick'
        >>> canonical_event_name("@update:model-value")
        'onUpdate:model-value'
    """
    stripped = name.strip()
    if stripped.startswith("on:"):
        event = stripped[3:].split("|", 1)[0]
    elif stripped.startswith("v-on:"):
        event = stripped[5:].split(".", 1)[0]
    elif stripped.startswith("@"):
        event = stripped[1:].split(".", 1)[0]
    elif stripped.startswith("(") and stripped.endswith(")") and len(stripped) > 2:
        event = stripped[1:-1]
    else:
        return name
    if not event:
        return name
    return "on" + _capitalize(event)


def is_event_name(name: str) -> bool:
    """Return True if the canonical form of name matches ``^on[A-Z]``."""
    return bool(EVENT_NAME_PATTERN.match(canonical_event_name(name)))


def is_event_candidate(candidate: PropertyCandidate | EventCandidate) -> bool:
    """Return True if a candidate belongs in the events list."""
    if isinstance(candidate, EventCandidate):
        return True
    return is_event_name(candidate.name) or candidate.origin == Origin.MARKUP_ATTRIBUTE


def _split_top_level(text: str) -> list[str]:
    """Split on commas that are not nested inside brackets."""
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    previous = ""
    for char in text:
        if char in _OPENERS:
            depth += 1
        elif char in _CLOSERS and not (char == ">" and previous == "="):
            depth -= 1
        if char == "," and depth == 0:
            parts.append("".join(current).strip())
            current = []
        else:
            current.append(char)
        previous = char
    tail = "".join(current).strip()
    if tail:
        parts.append(tail)
    return [part for part in parts if part]


def parameter_hints_from_type(raw_type: str) -> tuple[str, ...]:
    """Extract parameter texts from a function type annotation.

    Args:
        raw_type: Annotation such as ``"(id: string, e: Event) => void"``.

    Returns:
        Parameter texts as written, empty for non-function annotations.
    """
    text = raw_type.strip()
    if "=>" not in text:
        return ()
    start = text.find("(")
    if start < 0 or start > text.find("=>"):
        # Single bare parameter: x => void
        head = text.split("=>", 1)[0].strip()
        return (head,) if head else ()

    depth = 0
    for index in range(start, len(text)):
        char = text[index]
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                return tuple(_split_top_level(text[start + 1 : index]))
    return ()


def partition(
    properties: Iterable[PropertyCandidate],
    events: Iterable[EventCandidate],
) -> tuple[list[PropertyCandidate], list[EventCandidate]]:
    """Split candidates into props and events.

    Event-shaped property candidates become EventCandidates whose hints
    come from their function-type annotation. Every event is renamed to
    its canonical form. Props keep their input order; events are ordered
    by discovery position (stable for equal positions).

    Args:
        properties: Property candidates in discovery order.
        events: Event candidates in discovery order.

    Returns:
        Tuple of (props, events).
    """
    kept: list[PropertyCandidate] = []
    classified: list[EventCandidate] = [
        event.renamed(canonical_event_name(event.name)) for event in events
    ]
    for candidate in properties:
        if is_event_candidate(candidate):
            classified.append(
                EventCandidate(
                    name=canonical_event_name(candidate.name),
                    origin=candidate.origin,
                    parameter_hints=parameter_hints_from_type(candidate.raw_type),
                    description=candidate.description,
                    position=candidate.position,
                )
            )
        else:
            kept.append(candidate)
    classified.sort(key=lambda event: event.position)
    return kept, classified
