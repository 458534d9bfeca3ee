"""Centralized environment configuration management for uischema.

Every setting the analyzer reads from the process environment is declared
once as an EnvVar member carrying its default and type. Values resolve as
explicit override, then environment, then default.

Example:
    >>> from uischema.config import EnvVar, get_environment
    >>>
    >>> # Values come back already converted
    >>> strict = get_environment(EnvVar.STRICT_PARSE)  # Returns bool
    >>> limit = get_environment(EnvVar.MAX_SOURCE_BYTES)  # Returns int
    >>>
    >>> # Override at runtime
    >>> grammar = get_environment(EnvVar.GRAMMAR, override="typescript")
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, overload

# =============================================================================
# Environment Variable Configuration
# =============================================================================


@dataclass(frozen=True)
class EnvConfig:
    """Declaration of one UISCHEMA_ variable.

    Attributes:
        name: Environment variable name (e.g., "UISCHEMA_GRAMMAR").
        default: Value used when the variable is unset or unparseable.
        var_type: str, int or bool.
        description: One-line help shown by `python . env`.
        category: Group name used for filtering.
    """

    name: str
    default: Any
    var_type: type
    description: str = ""
    category: str = "general"


class EnvVar(Enum):
    """All environment variables used by uischema.

    Members wrap an EnvConfig; read them through `get_environment()`.

    Categories:
        - analysis: Parser and extractor behavior
        - logging: Log output configuration
    """

    # -------------------------------------------------------------------------
    # Analysis
    # -------------------------------------------------------------------------
    GRAMMAR = EnvConfig(
        name="UISCHEMA_GRAMMAR",
        default="tsx",
        var_type=str,
        description="tree-sitter grammar for source text: 'tsx' or 'typescript'",
        category="analysis",
    )
    STRICT_PARSE = EnvConfig(
        name="UISCHEMA_STRICT_PARSE",
        default=True,
        var_type=bool,
        description="Treat any syntax error in the source as a parse failure",
        category="analysis",
    )
    STRICT_EXTRACTION = EnvConfig(
        name="UISCHEMA_STRICT_EXTRACTION",
        default=False,
        var_type=bool,
        description="Abort the walk on the first extractor failure",
        category="analysis",
    )
    MAX_SOURCE_BYTES = EnvConfig(
        name="UISCHEMA_MAX_SOURCE_BYTES",
        default=1_000_000,
        var_type=int,
        description="Largest source text (UTF-8 bytes) accepted for parsing",
        category="analysis",
    )

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    LOG_LEVEL = EnvConfig(
        name="UISCHEMA_LOG_LEVEL",
        default="INFO",
        var_type=str,
        description="Log level for the command line (DEBUG, INFO, WARNING, ...)",
        category="logging",
    )


# =============================================================================
# Type Conversion Helpers
# =============================================================================


def _parse_bool(value: str) -> bool | None:
    """true/1/yes or false/0/no, any case. None for anything else."""
    normalized = value.lower().strip()
    if normalized in ("true", "1", "yes"):
        return True
    if normalized in ("false", "0", "no"):
        return False
    return None


def _convert_value(value: str | None, var_type: type, default: Any) -> Any:
    """Convert a raw environment string, falling back to the default.

    Args:
        value: Raw text, None when the variable is unset.
        var_type: str, int or bool.
        default: Returned for None or unparseable text.
    """
    if value is None:
        return default

    if var_type is str:
        return value

    if var_type is int:
        try:
            return int(value)
        except ValueError:
            return default

    if var_type is bool:
        result = _parse_bool(value)
        return result if result is not None else default

    return value


# =============================================================================
# Main Interface
# =============================================================================


@overload
def get_environment(env_var: EnvVar, override: int) -> int: ...
@overload
def get_environment(env_var: EnvVar, override: str) -> str: ...
@overload
def get_environment(env_var: EnvVar, override: bool) -> bool: ...
@overload
def get_environment(env_var: EnvVar, override: None = None) -> Any: ...


def get_environment(env_var: EnvVar, override: Any = None) -> Any:
    """Resolve one setting: override, then environment, then default.

    Args:
        env_var: Setting to read.
        override: Value used as-is when not None.

    Returns:
        Value converted to the appropriate type (str, int or bool).

    Example:
        >>> get_environment(EnvVar.GRAMMAR)
        'tsx'
        >>> get_environment(EnvVar.GRAMMAR, override="typescript")
        'typescript'
    """
    config: EnvConfig = env_var.value

    if override is not None:
        return override

    raw_value = os.environ.get(config.name)
    return _convert_value(raw_value, config.var_type, config.default)


def get_environment_info(env_var: EnvVar) -> EnvConfig:
    """Declaration (name, default, type, help) of a setting."""
    return env_var.value


def list_environment_variables(category: str | None = None) -> list[EnvVar]:
    """Settings in declaration order, optionally limited to one category
    ("analysis" or "logging")."""
    if category is None:
        return list(EnvVar)

    return [var for var in EnvVar if var.value.category == category]


# =============================================================================
# Analyzer Settings
# =============================================================================


@dataclass(frozen=True)
class AnalyzerSettings:
    """Immutable analysis settings resolved once and shared by reference.

    Attributes:
        grammar: tree-sitter grammar name ("tsx" or "typescript").
        strict_parse: Raise ParseFailure when the tree contains syntax errors.
        strict_extraction: Raise the first ExtractionFailure instead of
            logging it and continuing the walk.
        max_source_bytes: Upper bound on the UTF-8 size of source text.
    """

    grammar: str = "tsx"
    strict_parse: bool = True
    strict_extraction: bool = False
    max_source_bytes: int = 1_000_000

    @classmethod
    def from_environment(cls, **overrides: Any) -> AnalyzerSettings:
        """Resolve settings from the environment.

        Args:
            **overrides: Field values that take precedence over the environment.

        Returns:
            AnalyzerSettings instance.
        """
        return cls(
            grammar=get_environment(EnvVar.GRAMMAR, overrides.get("grammar")),
            strict_parse=get_environment(
                EnvVar.STRICT_PARSE, overrides.get("strict_parse")
            ),
            strict_extraction=get_environment(
                EnvVar.STRICT_EXTRACTION, overrides.get("strict_extraction")
            ),
            max_source_bytes=get_environment(
                EnvVar.MAX_SOURCE_BYTES, overrides.get("max_source_bytes")
            ),
        )


__all__ = [
    # Core types
    "EnvConfig",
    "EnvVar",
    "AnalyzerSettings",
    # Main interface
    "get_environment",
    "get_environment_info",
    # Introspection
    "list_environment_variables",
]
