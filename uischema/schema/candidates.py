"""Call-scoped candidate records collected before deduplication.

Candidates are what the walker and runtime inspector see; the merger
collapses them into the final PropertyDefinition / EventDefinition
entries of a ComponentSchema.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from .lib import CanonicalType

__all__ = [
    "Origin",
    "ORIGIN_PRECEDENCE",
    "PropertyCandidate",
    "EventCandidate",
]


class Origin(str, Enum):
    """Where a candidate was found."""

    INTERFACE = "interface"
    TYPE_ALIAS = "type-alias"
    RUNTIME = "runtime"
    EXPORTED_BINDING = "exported-binding"
    DESTRUCTURE = "destructure"
    DISPATCH = "dispatch"
    MARKUP_ATTRIBUTE = "markup-attribute"


# Lower rank wins. Declarations outrank usage.
ORIGIN_PRECEDENCE: dict[Origin, int] = {
    Origin.INTERFACE: 0,
    Origin.TYPE_ALIAS: 0,
    Origin.RUNTIME: 0,
    Origin.EXPORTED_BINDING: 0,
    Origin.DESTRUCTURE: 1,
    Origin.DISPATCH: 1,
    Origin.MARKUP_ATTRIBUTE: 2,
}


@dataclass(frozen=True)
class PropertyCandidate:
    """A prop seen once in the source or runtime descriptor.

    Attributes:
        name: Prop name as written.
        origin: Where the prop was declared.
        raw_type: Annotation text, empty when unannotated.
        required: True when no optional marker or default was present.
        description: Leading doc comment, if any.
        default_value: Declared default, if any.
        canonical: Pre-resolved type (runtime descriptors), bypassing raw_type.
        position: Discovery position (source byte offset or declaration index).
    """

    name: str
    origin: Origin
    raw_type: str = ""
    required: bool = False
    description: str | None = None
    default_value: Any = None
    canonical: CanonicalType | None = None
    position: int = 0

    @property
    def rank(self) -> int:
        return ORIGIN_PRECEDENCE[self.origin]


@dataclass(frozen=True)
class EventCandidate:
    """An event seen once in the source or runtime descriptor."""

    name: str
    origin: Origin
    parameter_hints: tuple[str, ...] = field(default_factory=tuple)
    description: str | None = None
    position: int = 0

    @property
    def rank(self) -> int:
        return ORIGIN_PRECEDENCE[self.origin]

    def renamed(self, name: str) -> "EventCandidate":
        return replace(self, name=name)
