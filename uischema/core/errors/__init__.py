"""Analysis exception hierarchy."""

from .lib import AnalysisError, AnalysisStage, ExtractionFailure, ParseFailure

__all__ = [
    "AnalysisStage",
    "AnalysisError",
    "ParseFailure",
    "ExtractionFailure",
]
