"""tree-sitter parsing of component source text.

Compiled grammars are immutable and cached per process. A fresh Parser is
created for every call, so concurrent analyses never share parser state.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache

import tree_sitter_typescript
from tree_sitter import Language, Node, Parser, Tree

from uischema.core.errors import AnalysisStage, ParseFailure

__all__ = [
    "GRAMMARS",
    "ParsedSource",
    "get_language",
    "parse_source",
    "first_syntax_error",
]

logger = logging.getLogger(__name__)

# Grammar name -> tree_sitter_typescript language function
GRAMMARS: dict[str, str] = {
    "tsx": "language_tsx",
    "typescript": "language_typescript",
}


@lru_cache(maxsize=None)
def get_language(grammar: str) -> Language:
    """Load (once) the compiled tree-sitter language for a grammar name.

    Args:
        grammar: "tsx" or "typescript".

    Returns:
        Compiled Language.

    Raises:
        ParseFailure: If the grammar name is unknown.
    """
    func_name = GRAMMARS.get(grammar)
    if func_name is None:
        raise ParseFailure(
            f"Unknown grammar '{grammar}'. Available: {', '.join(GRAMMARS)}"
        )
    return Language(getattr(tree_sitter_typescript, func_name)())


@dataclass(frozen=True)
class ParsedSource:
    """A parsed source text and the bytes its nodes index into."""

    source: bytes
    tree: Tree
    grammar: str

    @property
    def root(self) -> Node:
        return self.tree.root_node

    def text(self, node: Node | None) -> str:
        """Source text spanned by a node (empty for None)."""
        if node is None:
            return ""
        return self.source[node.start_byte : node.end_byte].decode("utf-8", "replace")


def first_syntax_error(root: Node) -> Node | None:
    """Find the first ERROR or MISSING node in document order.

    Subtrees without errors are skipped via ``has_error``.
    """
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            return node
        if node.has_error:
            stack.extend(reversed(node.children))
    return None


def parse_source(
    text: object,
    grammar: str = "tsx",
    strict: bool = True,
    max_bytes: int | None = None,
    component: str | None = None,
) -> ParsedSource:
    """Parse component source text into a syntax tree.

    Args:
        text: Source text. Anything other than a non-blank str is rejected.
        grammar: Grammar name from GRAMMARS.
        strict: Reject trees that contain syntax errors.
        max_bytes: Largest accepted UTF-8 size, None for no limit.
        component: Component name attached to raised failures.

    Returns:
        ParsedSource holding the tree and its source bytes.

    Raises:
        ParseFailure: If the input is missing, not text, too large, uses an
            unknown grammar, or (in strict mode) contains syntax errors.
    """
    if not isinstance(text, str):
        raise ParseFailure(
            f"Source text must be str, got {type(text).__name__}",
            component=component,
            stage=AnalysisStage.INPUT,
        )
    if not text.strip():
        raise ParseFailure(
            "Source text is empty", component=component, stage=AnalysisStage.INPUT
        )

    source = text.encode("utf-8")
    if max_bytes is not None and len(source) > max_bytes:
        raise ParseFailure(
            f"Source text is {len(source)} bytes, limit is {max_bytes}",
            component=component,
            stage=AnalysisStage.INPUT,
        )

    try:
        language = get_language(grammar)
    except ParseFailure as e:
        e.component = component
        raise

    parser = Parser(language)
    tree = parser.parse(source)
    logger.debug("Parsed %d bytes with %s grammar", len(source), grammar)

    if strict and tree.root_node.has_error:
        error = first_syntax_error(tree.root_node)
        line = column = None
        if error is not None:
            line = error.start_point[0] + 1
            column = error.start_point[1]
        raise ParseFailure(
            f"Syntax error at line {line}, column {column}",
            component=component,
            line=line,
            column=column,
        )

    return ParsedSource(source=source, tree=tree, grammar=grammar)
