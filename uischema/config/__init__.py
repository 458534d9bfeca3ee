"""Centralized configuration management for uischema.

Provides unified access to all configuration via the `get_environment()` function.

Example:
    >>> from uischema.config import AnalyzerSettings, EnvVar, get_environment
    >>>
    >>> # Get any environment variable with automatic type conversion
    >>> strict = get_environment(EnvVar.STRICT_PARSE)  # Returns bool: True
    >>>
    >>> # Resolve all analysis settings at once
    >>> settings = AnalyzerSettings.from_environment(strict_parse=False)

Environment Variable Categories:
    analysis: Grammar, strictness and size limits for source analysis
    logging: Command-line log level
"""

from .lib import (
    AnalyzerSettings,
    EnvConfig,
    EnvVar,
    get_environment,
    get_environment_info,
    list_environment_variables,
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
