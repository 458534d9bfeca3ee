"""Platform detection over source text or runtime component shape.

Detection is an ordered, non-scoring list of rules: the first rule with a
matching pattern decides the platform. React Native is checked before
React because React Native sources also import React.
"""

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from uischema.schema import Platform

__all__ = [
    "DetectionRule",
    "RuntimeRule",
    "DEFAULT_SOURCE_RULES",
    "DEFAULT_RUNTIME_RULES",
    "PlatformDetector",
    "detect_platform",
    "detect_runtime_platform",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DetectionRule:
    """Source-text rule: any pattern match selects the platform."""

    platform: Platform
    patterns: tuple[re.Pattern[str], ...]

    @classmethod
    def compile(cls, platform: Platform, *patterns: str) -> "DetectionRule":
        return cls(platform, tuple(re.compile(p, re.MULTILINE) for p in patterns))

    def matches(self, text: str) -> bool:
        return any(pattern.search(text) for pattern in self.patterns)


@dataclass(frozen=True)
class RuntimeRule:
    """Runtime rule: any present field or attribute selects the platform."""

    platform: Platform
    markers: tuple[str, ...]

    def matches(self, ref: Any) -> bool:
        if isinstance(ref, Mapping):
            return any(marker in ref for marker in self.markers)
        return any(hasattr(ref, marker) for marker in self.markers)


DEFAULT_SOURCE_RULES: tuple[DetectionRule, ...] = (
    DetectionRule.compile(
        Platform.REACT_NATIVE,
        r"from\s+['\"]react-native['\"]",
        r"\bStyleSheet\.create\b",
        r"\bPlatform\.OS\b",
        r"<(View|ScrollView|TouchableOpacity|Pressable|FlatList|SafeAreaView)\b",
    ),
    DetectionRule.compile(
        Platform.REACT,
        r"\buse(State|Effect|Reducer|Memo|Callback|Ref|Context)\s*\(",
        r"\bReact\.(FC|FunctionComponent|Component|PureComponent)\b",
        r"\bJSX\.Element\b",
        r"from\s+['\"]react['\"]",
    ),
    DetectionRule.compile(
        Platform.VUE,
        r"\bdefineComponent\s*\(",
        r"\bsetup\s*\(",
        r"\bVue\.component\s*\(",
        r"\bdefine(Props|Emits)\b",
        r"<template[\s>]",
        r"from\s+['\"]vue['\"]",
    ),
    DetectionRule.compile(
        Platform.ANGULAR,
        r"@Component\s*\(",
        r"@Input\s*\(",
        r"@Output\s*\(",
        r"\bselector\s*:",
        r"from\s+['\"]@angular/",
    ),
    DetectionRule.compile(
        Platform.SVELTE,
        r"\$\$render",
        r"\bcreateEventDispatcher\b",
        r"from\s+['\"]svelte",
        r"\bexport\s+let\b",
        r"^\s*\$:",
    ),
)

DEFAULT_RUNTIME_RULES: tuple[RuntimeRule, ...] = (
    RuntimeRule(Platform.REACT, ("$$typeof",)),
    RuntimeRule(Platform.VUE, ("render", "template", "setup")),
    RuntimeRule(Platform.ANGULAR, ("selector", "templateUrl")),
    RuntimeRule(Platform.SVELTE, ("$$render", "fragment")),
)


class PlatformDetector:
    """Ordered first-match platform detector.

    Rules are immutable tuples injected at construction, so a new platform
    is added by passing a longer rule list rather than editing this class.

    Args:
        source_rules: Rules applied to source text, in priority order.
        runtime_rules: Rules applied to runtime references, in priority order.
        source_default: Platform when no source rule matches.
        runtime_default: Platform when no runtime rule matches.
    """

    def __init__(
        self,
        source_rules: tuple[DetectionRule, ...] = DEFAULT_SOURCE_RULES,
        runtime_rules: tuple[RuntimeRule, ...] = DEFAULT_RUNTIME_RULES,
        source_default: Platform = Platform.VANILLA,
        runtime_default: Platform = Platform.UNIVERSAL,
    ):
        self._source_rules = tuple(source_rules)
        self._runtime_rules = tuple(runtime_rules)
        self._source_default = source_default
        self._runtime_default = runtime_default

    @property
    def source_rules(self) -> tuple[DetectionRule, ...]:
        return self._source_rules

    @property
    def runtime_rules(self) -> tuple[RuntimeRule, ...]:
        return self._runtime_rules

    def detect_source(self, text: str) -> Platform:
        """Detect the platform of source text.

        Args:
            text: Component source text.

        Returns:
            Platform of the first matching rule, or the source default.
        """
        for rule in self._source_rules:
            if rule.matches(text):
                logger.debug("Source matched %s rule", rule.platform.value)
                return rule.platform
        return self._source_default

    def detect_runtime(self, ref: Any) -> Platform:
        """Detect the platform of a runtime component reference.

        Args:
            ref: Mapping (inspected by key) or object (inspected by attribute).

        Returns:
            Platform of the first matching rule, or the runtime default.
        """
        if ref is None:
            return self._runtime_default
        for rule in self._runtime_rules:
            if rule.matches(ref):
                logger.debug("Runtime reference matched %s rule", rule.platform.value)
                return rule.platform
        return self._runtime_default


def detect_platform(text: str) -> Platform:
    """Detect the platform of source text with the default rules."""
    return PlatformDetector().detect_source(text)


def detect_runtime_platform(ref: Any) -> Platform:
    """Detect the platform of a runtime reference with the default rules."""
    return PlatformDetector().detect_runtime(ref)
