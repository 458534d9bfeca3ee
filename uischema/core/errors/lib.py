"""Exception hierarchy for component analysis.

Every failure raised inside the analysis pipeline derives from
AnalysisError so the analyzer boundary can convert it into the
fallback schema in one place.
"""

from enum import Enum

__all__ = [
    "AnalysisStage",
    "AnalysisError",
    "ParseFailure",
    "ExtractionFailure",
]


class AnalysisStage(str, Enum):
    """Pipeline stage in which a failure occurred."""

    INPUT = "input"
    DETECT = "detect"
    PARSE = "parse"
    WALK = "walk"
    DEDUPLICATE = "deduplicate"
    ASSEMBLE = "assemble"


class AnalysisError(Exception):
    """Base exception for analysis errors.

    Attributes:
        component: Name of the component being analyzed, if known.
        stage: Pipeline stage that failed.
        cause: Underlying exception, if any.
    """

    def __init__(
        self,
        message: str,
        component: str | None = None,
        stage: AnalysisStage = AnalysisStage.ASSEMBLE,
        cause: BaseException | None = None,
    ):
        super().__init__(message)
        self.component = component
        self.stage = AnalysisStage(stage)
        self.cause = cause


class ParseFailure(AnalysisError):
    """Raised when input cannot be turned into a traversable syntax tree.

    Attributes:
        line: 1-based line of the first syntax error, if known.
        column: 0-based column of the first syntax error, if known.
    """

    def __init__(
        self,
        message: str,
        component: str | None = None,
        cause: BaseException | None = None,
        line: int | None = None,
        column: int | None = None,
        stage: AnalysisStage = AnalysisStage.PARSE,
    ):
        super().__init__(message, component=component, stage=stage, cause=cause)
        self.line = line
        self.column = column


class ExtractionFailure(AnalysisError):
    """Raised when one extractor fails while processing one node.

    Attributes:
        node_kind: tree-sitter node type the extractor was handling.
    """

    def __init__(
        self,
        message: str,
        node_kind: str,
        component: str | None = None,
        cause: BaseException | None = None,
    ):
        super().__init__(
            message, component=component, stage=AnalysisStage.WALK, cause=cause
        )
        self.node_kind = node_kind
