"""Schema assembler: orchestrates detection, parsing, walking and merging.

Example:
    >>> from uischema.analyzer import analyze
    >>> analyze("Broken", "interface {").degraded
    True
"""

from .lib import SchemaAnalyzer, SourceUnit, analyze

__all__ = ["SourceUnit", "SchemaAnalyzer", "analyze"]
