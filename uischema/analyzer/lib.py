"""Schema assembler: the orchestration boundary of the analysis pipeline.

Stages run linearly for each call:

    Accept Input -> Detect Platform -> Parse -> Walk -> Deduplicate -> Assemble

Every failure, expected or not, is caught here, logged at WARNING with the
component name and failing stage, and turned into the fallback schema.
``SchemaAnalyzer.analyze`` therefore never raises and never returns None.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from uischema.config import AnalyzerSettings
from uischema.core.errors import AnalysisError, AnalysisStage, ParseFailure
from uischema.detection import PlatformDetector
from uischema.events import partition
from uischema.merge import deduplicate
from uischema.parsing import parse_source
from uischema.runtime import inspect_runtime
from uischema.schema import (
    ComponentSchema,
    Platform,
    describe_component,
    fallback_schema,
)
from uischema.sfc import is_single_file_component, split_component, template_events
from uischema.walker import SCRIPT_EXTRACTORS, SyntaxWalker, WalkResult

__all__ = ["SourceUnit", "SchemaAnalyzer", "analyze"]

logger = logging.getLogger(__name__)

# Platforms whose sources are scripts around markup, walked with SCRIPT_EXTRACTORS
SCRIPT_PLATFORMS = frozenset({Platform.VUE, Platform.SVELTE})

# <script lang="..."> -> grammar; any other lang parses as typescript
SCRIPT_GRAMMARS = {"tsx": "tsx", "jsx": "tsx"}


@dataclass(frozen=True)
class SourceUnit:
    """One analysis request.

    Attributes:
        name: Component name supplied by the caller.
        source_text: Component source code. Wins when both inputs are given.
        runtime_ref: Runtime component descriptor (mapping or object).
    """

    name: str
    source_text: str | None = None
    runtime_ref: Any = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "SourceUnit":
        """Build a unit from snake_case or camelCase keys.

        Example:
            >>> SourceUnit.from_mapping({"componentName": "A", "sourceText": "x"}).name
            'A'
        """
        name = data.get("name", data.get("componentName", ""))
        return cls(
            name=name if isinstance(name, str) else str(name),
            source_text=data.get("source_text", data.get("sourceText")),
            runtime_ref=data.get("runtime_ref", data.get("runtimeRef")),
        )


class SchemaAnalyzer:
    """Stateless schema extraction service.

    Holds only immutable collaborators, so one instance can be shared
    across threads. All working buffers are local to each call.

    Args:
        detector: Platform detector. Defaults to the standard rule set.
        walker: Syntax walker. Defaults to one honoring settings.strict_extraction.
        settings: Analysis settings. Defaults to the environment.
    """

    def __init__(
        self,
        detector: PlatformDetector | None = None,
        walker: SyntaxWalker | None = None,
        settings: AnalyzerSettings | None = None,
    ):
        self._settings = settings or AnalyzerSettings.from_environment()
        self._detector = detector or PlatformDetector()
        self._walker = walker or SyntaxWalker(strict=self._settings.strict_extraction)
        self._script_walker = SyntaxWalker(
            extractors={**self._walker.extractors, **SCRIPT_EXTRACTORS},
            strict=self._walker.strict,
        )

    @property
    def settings(self) -> AnalyzerSettings:
        return self._settings

    @property
    def detector(self) -> PlatformDetector:
        return self._detector

    def analyze(self, unit: SourceUnit | Mapping[str, Any]) -> ComponentSchema:
        """Extract the schema of one component.

        Args:
            unit: SourceUnit, or a mapping accepted by SourceUnit.from_mapping.

        Returns:
            The extracted schema, or the degraded fallback on any failure.
        """
        name = ""
        stage = AnalysisStage.INPUT
        try:
            if isinstance(unit, Mapping):
                unit = SourceUnit.from_mapping(unit)
            name = unit.name if isinstance(unit.name, str) else str(unit.name)

            if unit.source_text is not None:
                return self._analyze_source(name, unit.source_text)
            if unit.runtime_ref is not None:
                return self._analyze_runtime(name, unit.runtime_ref)
            raise ParseFailure(
                "Neither source text nor runtime reference was given",
                component=name,
                stage=AnalysisStage.INPUT,
            )
        except AnalysisError as e:
            return self._fallback(name, e.stage, e.cause or e)
        except Exception as e:
            return self._fallback(name, stage, e)

    def _analyze_source(self, name: str, text: Any) -> ComponentSchema:
        stage = AnalysisStage.INPUT
        try:
            if not isinstance(text, str):
                raise ParseFailure(
                    f"Source text must be str, got {type(text).__name__}",
                    component=name,
                    stage=AnalysisStage.INPUT,
                )

            stage = AnalysisStage.DETECT
            platform = self._detector.detect_source(text)
            logger.debug("%s: detected platform %s", name, platform.value)
            scripted = platform in SCRIPT_PLATFORMS
            component_file = None
            if scripted and is_single_file_component(text):
                component_file = split_component(text)

            stage = AnalysisStage.PARSE
            parsed = None
            if component_file is None:
                parsed = parse_source(
                    text,
                    grammar=self._settings.grammar,
                    strict=self._settings.strict_parse,
                    max_bytes=self._settings.max_source_bytes,
                    component=name,
                )
            else:
                self._check_size(name, text)
                if component_file.script.strip():
                    parsed = parse_source(
                        component_file.script,
                        grammar=SCRIPT_GRAMMARS.get(component_file.script_lang, "typescript"),
                        strict=self._settings.strict_parse,
                        component=name,
                    )

            stage = AnalysisStage.WALK
            walker = self._script_walker if scripted else self._walker
            walked = walker.walk(parsed, component=name) if parsed is not None else WalkResult()
            found_events = list(walked.events)
            has_children = walked.has_children
            if component_file is not None:
                offset = len(component_file.script.encode("utf-8"))
                found_events.extend(template_events(component_file.markup, offset))
                has_children = has_children or component_file.has_slot

            stage = AnalysisStage.DEDUPLICATE
            props, events = deduplicate(*partition(walked.properties, found_events))

            stage = AnalysisStage.ASSEMBLE
            return ComponentSchema(
                name=name,
                platform=platform,
                props=props,
                events=events,
                supports_children=has_children,
                description=describe_component(name, platform, "source text"),
            )
        except AnalysisError:
            raise
        except Exception as e:
            raise AnalysisError(str(e), component=name, stage=stage, cause=e) from e

    def _check_size(self, name: str, text: str) -> None:
        """Apply the source size limit to a whole single-file component."""
        limit = self._settings.max_source_bytes
        size = len(text.encode("utf-8"))
        if limit is not None and size > limit:
            raise ParseFailure(
                f"Source text is {size} bytes, limit is {limit}",
                component=name,
                stage=AnalysisStage.INPUT,
            )

    def _analyze_runtime(self, name: str, ref: Any) -> ComponentSchema:
        stage = AnalysisStage.DETECT
        try:
            platform = self._detector.detect_runtime(ref)
            logger.debug("%s: detected runtime platform %s", name, platform.value)

            stage = AnalysisStage.WALK
            findings = inspect_runtime(ref)

            stage = AnalysisStage.DEDUPLICATE
            props, events = deduplicate(*partition(findings.properties, findings.events))

            stage = AnalysisStage.ASSEMBLE
            return ComponentSchema(
                name=name,
                platform=platform,
                props=props,
                events=events,
                supports_children=findings.has_children,
                description=describe_component(name, platform, "runtime reference"),
            )
        except Exception as e:
            raise AnalysisError(str(e), component=name, stage=stage, cause=e) from e

    def _fallback(
        self, name: str, stage: AnalysisStage, error: BaseException
    ) -> ComponentSchema:
        logger.warning(
            "Analysis of '%s' failed at %s stage (%s: %s); returning fallback schema",
            name,
            stage.value,
            type(error).__name__,
            error,
            extra={"component": name, "stage": stage.value},
        )
        return fallback_schema(name)


def analyze(
    name: str,
    source_text: str | None = None,
    runtime_ref: Any = None,
    settings: AnalyzerSettings | None = None,
) -> ComponentSchema:
    """Extract a component schema with a default analyzer.

    Args:
        name: Component name.
        source_text: Component source code.
        runtime_ref: Runtime component descriptor.
        settings: Analysis settings. Defaults to the environment.

    Returns:
        ComponentSchema, degraded to the fallback on failure.

    Example:
        >>> schema = analyze("Button", "export const Button = ({ label }) => <b>{label}</b>;")
        >>> [p.name for p in schema.props]
        ['label']
    """
    unit = SourceUnit(name=name, source_text=source_text, runtime_ref=runtime_ref)
    return SchemaAnalyzer(settings=settings).analyze(unit)
