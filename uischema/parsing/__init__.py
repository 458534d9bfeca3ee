"""Source parser: tree-sitter TSX/TypeScript trees for the syntax walker."""

from .lib import GRAMMARS, ParsedSource, first_syntax_error, get_language, parse_source

__all__ = [
    "GRAMMARS",
    "ParsedSource",
    "get_language",
    "parse_source",
    "first_syntax_error",
]
