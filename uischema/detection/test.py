"""Unit tests for platform detection."""

from types import SimpleNamespace

import pytest

from uischema.schema import Platform

from .lib import (
    DEFAULT_SOURCE_RULES,
    DetectionRule,
    PlatformDetector,
    RuntimeRule,
    detect_platform,
    detect_runtime_platform,
)


class TestSourceDetection:
    """Tests for source-text detection."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "source,expected",
        [
            ("import { View } from 'react-native';", Platform.REACT_NATIVE),
            ("const styles = StyleSheet.create({})", Platform.REACT_NATIVE),
            ("return <Pressable onPress={go} />", Platform.REACT_NATIVE),
            ("const [n, setN] = useState(0);", Platform.REACT),
            ("useEffect (() => {}, [])", Platform.REACT),
            ("const Button: React.FC<Props> = () => null", Platform.REACT),
            ('import React from "react";', Platform.REACT),
            ("export default defineComponent({})", Platform.VUE),
            ("const props = defineProps<Props>()", Platform.VUE),
            ("<template><div /></template>", Platform.VUE),
            ("@Component({ selector: 'app-x' })", Platform.ANGULAR),
            ("@Input() label: string;", Platform.ANGULAR),
            ("import { Component } from '@angular/core';", Platform.ANGULAR),
            ("export let name;", Platform.SVELTE),
            ("const dispatch = createEventDispatcher();", Platform.SVELTE),
            ("  $: doubled = count * 2;", Platform.SVELTE),
            ("function add(a, b) { return a + b; }", Platform.VANILLA),
            ("", Platform.VANILLA),
        ],
    )
    def test_rules(self, source, expected):
        """Representative idioms select their platform."""
        assert detect_platform(source) == expected

    @pytest.mark.unit
    def test_react_native_beats_react(self):
        """React Native sources that also import React are React Native."""
        source = "import React, { useState } from 'react';\nimport { View } from 'react-native';"
        assert detect_platform(source) == Platform.REACT_NATIVE

    @pytest.mark.unit
    def test_first_match_wins(self):
        """Hooks in an Angular-looking file still resolve to React first."""
        source = "useState(1); @Component({})"
        assert detect_platform(source) == Platform.REACT

    @pytest.mark.unit
    def test_deterministic(self):
        """Repeated detection returns the same platform."""
        source = "const x = useMemo(() => 1, []);"
        assert {detect_platform(source) for _ in range(5)} == {Platform.REACT}

    @pytest.mark.unit
    def test_identifier_lookalikes_do_not_match(self):
        """Names that merely contain a marker do not trigger a rule."""
        assert detect_platform("myuseState(1); resetup();") == Platform.VANILLA


class TestRuntimeDetection:
    """Tests for runtime reference detection."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "ref,expected",
        [
            ({"$$typeof": "react.forward_ref", "render": None}, Platform.REACT),
            ({"props": {}, "setup": None}, Platform.VUE),
            ({"template": "<div/>"}, Platform.VUE),
            ({"selector": "app-card"}, Platform.ANGULAR),
            ({"templateUrl": "./card.html"}, Platform.ANGULAR),
            ({"$$render": None}, Platform.SVELTE),
            ({"fragment": None}, Platform.SVELTE),
            ({"propTypes": {}}, Platform.UNIVERSAL),
            ({}, Platform.UNIVERSAL),
            (None, Platform.UNIVERSAL),
        ],
    )
    def test_mapping_markers(self, ref, expected):
        """Mapping keys select the platform in rule order."""
        assert detect_runtime_platform(ref) == expected

    @pytest.mark.unit
    def test_object_attributes(self):
        """Objects are inspected by attribute."""
        ref = SimpleNamespace(selector="app-x", inputs=["label"])
        assert detect_runtime_platform(ref) == Platform.ANGULAR

    @pytest.mark.unit
    def test_plain_object_is_universal(self):
        """Objects without markers are universal."""
        assert detect_runtime_platform(object()) == Platform.UNIVERSAL


class TestInjectedRules:
    """Tests for rule injection."""

    @pytest.mark.unit
    def test_custom_source_rule_prepended(self):
        """A new rule can be added without changing the detector."""
        solid = DetectionRule.compile(Platform.UNIVERSAL, r"from\s+['\"]solid-js['\"]")
        detector = PlatformDetector(source_rules=(solid, *DEFAULT_SOURCE_RULES))
        assert detector.detect_source("import { createSignal } from 'solid-js'") == (
            Platform.UNIVERSAL
        )
        assert detector.detect_source("useState(0)") == Platform.REACT

    @pytest.mark.unit
    def test_custom_runtime_rules(self):
        """Runtime rules are injectable too."""
        detector = PlatformDetector(
            runtime_rules=(RuntimeRule(Platform.SVELTE, ("$$slots",)),)
        )
        assert detector.detect_runtime({"$$slots": {}}) == Platform.SVELTE
        assert detector.detect_runtime({"$$typeof": 1}) == Platform.UNIVERSAL

    @pytest.mark.unit
    def test_rules_are_tuples(self):
        """Rule lists are exposed as immutable tuples."""
        detector = PlatformDetector()
        assert isinstance(detector.source_rules, tuple)
        assert isinstance(detector.runtime_rules, tuple)
