"""Syntax walker: one traversal, pluggable per-node-kind extractors.

Example:
    >>> from uischema.parsing import parse_source
    >>> from uischema.walker import SyntaxWalker
    >>> result = SyntaxWalker().walk(parse_source("const A = ({ text }) => <b>{text}</b>;"))
    >>> [c.name for c in result.properties], result.has_children
    (['text'], True)
"""

from .extractors import (
    DEFAULT_EXTRACTORS,
    EMIT_CALLS,
    FUNCTION_KINDS,
    SCRIPT_EXTRACTORS,
    Candidate,
    Extractor,
    NodeContext,
    element_has_children,
    extract_destructured_params,
    extract_exported_binding,
    extract_interface,
    extract_macro_call,
    extract_markup_events,
    extract_type_alias,
)
from .lib import SyntaxWalker, WalkResult

__all__ = [
    # Walker
    "SyntaxWalker",
    "WalkResult",
    # Extractors
    "Candidate",
    "Extractor",
    "NodeContext",
    "DEFAULT_EXTRACTORS",
    "FUNCTION_KINDS",
    "SCRIPT_EXTRACTORS",
    "EMIT_CALLS",
    "extract_interface",
    "extract_type_alias",
    "extract_destructured_params",
    "extract_markup_events",
    "element_has_children",
    "extract_macro_call",
    "extract_exported_binding",
]
