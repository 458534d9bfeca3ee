"""Single-pass syntax walker over a tree-sitter tree.

The walker performs one pre-order depth-first traversal with an explicit
stack and dispatches each node to the extractor registered for its kind.
Candidates come back in document order; classification of event-shaped
props and deduplication happen downstream.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from tree_sitter import Node

from uischema.core.errors import AnalysisStage, ExtractionFailure
from uischema.parsing import ParsedSource
from uischema.schema import EventCandidate, PropertyCandidate

from .extractors import (
    DEFAULT_EXTRACTORS,
    FUNCTION_KINDS,
    Extractor,
    NodeContext,
    element_has_children,
)

__all__ = ["WalkResult", "SyntaxWalker"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WalkResult:
    """Everything one traversal found.

    Attributes:
        properties: Property candidates in document order.
        events: Event candidates in document order.
        has_children: True if a markup element with content was seen.
        failures: Extractor failures that were recorded and skipped.
        nodes_visited: Number of nodes popped from the traversal stack.
    """

    properties: tuple[PropertyCandidate, ...] = field(default_factory=tuple)
    events: tuple[EventCandidate, ...] = field(default_factory=tuple)
    has_children: bool = False
    failures: tuple[ExtractionFailure, ...] = field(default_factory=tuple)
    nodes_visited: int = 0


class SyntaxWalker:
    """Dispatch tree nodes to per-kind extractors in one traversal.

    Args:
        extractors: Node kind -> extractor. Defaults to DEFAULT_EXTRACTORS.
        strict: Raise the first ExtractionFailure instead of recording it.

    Example:
        >>> from uischema.parsing import parse_source
        >>> parsed = parse_source("interface P { label: string }")
        >>> [c.name for c in SyntaxWalker().walk(parsed).properties]
        ['label']
    """

    def __init__(
        self,
        extractors: Mapping[str, Extractor] | None = None,
        strict: bool = False,
    ):
        self._extractors = dict(DEFAULT_EXTRACTORS if extractors is None else extractors)
        self._strict = strict

    @property
    def strict(self) -> bool:
        return self._strict

    @property
    def extractors(self) -> Mapping[str, Extractor]:
        """Read-only view of the node kind -> extractor table."""
        return MappingProxyType(self._extractors)

    @property
    def node_kinds(self) -> frozenset[str]:
        """Node kinds that have an extractor."""
        return frozenset(self._extractors)

    def walk(self, parsed: ParsedSource, component: str | None = None) -> WalkResult:
        """Traverse a parsed source and collect candidates.

        Args:
            parsed: Parsed source from uischema.parsing.
            component: Component name used in failure logs.

        Returns:
            WalkResult with candidates, children flag and recorded failures.

        Raises:
            ExtractionFailure: In strict mode, on the first extractor error.
        """
        properties: list[PropertyCandidate] = []
        events: list[EventCandidate] = []
        failures: list[ExtractionFailure] = []
        has_children = False
        visited = 0

        # (node, inside_function)
        stack: list[tuple[Node, bool]] = [(parsed.root, False)]
        while stack:
            node, inside_function = stack.pop()
            visited += 1
            ctx = NodeContext(parsed=parsed, inside_function=inside_function)

            extractor = self._extractors.get(node.type)
            if extractor is not None:
                try:
                    found = list(extractor(node, ctx))
                except Exception as e:
                    failure = self._record_failure(node, component, e)
                    failures.append(failure)
                else:
                    for candidate in found:
                        if isinstance(candidate, EventCandidate):
                            events.append(candidate)
                        else:
                            properties.append(candidate)

            if not has_children and element_has_children(node, ctx):
                has_children = True

            child_inside = inside_function or node.type in FUNCTION_KINDS
            stack.extend((child, child_inside) for child in reversed(node.children))

        logger.debug(
            "Walked %d nodes: %d props, %d events, %d failures",
            visited,
            len(properties),
            len(events),
            len(failures),
        )
        return WalkResult(
            properties=tuple(properties),
            events=tuple(events),
            has_children=has_children,
            failures=tuple(failures),
            nodes_visited=visited,
        )

    def _record_failure(
        self, node: Node, component: str | None, error: Exception
    ) -> ExtractionFailure:
        """Wrap an extractor error; raise it in strict mode, log it otherwise."""
        failure = ExtractionFailure(
            f"Extractor for '{node.type}' failed: {error}",
            node_kind=node.type,
            component=component,
            cause=error,
        )
        if self._strict:
            raise failure from error
        logger.warning(
            "Extraction failed for %s at line %d: %s",
            node.type,
            node.start_point[0] + 1,
            error,
            extra={
                "component": component,
                "stage": AnalysisStage.WALK.value,
                "node_kind": node.type,
            },
        )
        return failure
