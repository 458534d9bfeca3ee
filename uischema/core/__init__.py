"""Core utilities shared across uischema packages."""

from .errors import AnalysisError, AnalysisStage, ExtractionFailure, ParseFailure
from .log import get_logger, setup_logging

__all__ = [
    # Logging
    "get_logger",
    "setup_logging",
    # Errors
    "AnalysisStage",
    "AnalysisError",
    "ParseFailure",
    "ExtractionFailure",
]
