"""Unit tests for the component registry."""

import logging
import threading

import pytest

from uischema.analyzer import SchemaAnalyzer
from uischema.schema import ComponentSchema, Platform

from .lib import ComponentRegistry, fingerprint

TAG_SOURCE = "export const Tag = ({ text }) => <b>{text}</b>;"
HOOK_SOURCE = (
    "export function Toggle({ on }) { const [v] = useState(on); return <i>{v}</i>; }"
)


class CountingAnalyzer(SchemaAnalyzer):
    """Analyzer that counts its runs."""

    def __init__(self):
        super().__init__()
        self.calls = 0

    def analyze(self, unit):
        self.calls += 1
        return super().analyze(unit)


@pytest.fixture
def registry():
    return ComponentRegistry(analyzer=CountingAnalyzer())


class TestFingerprint:
    """Tests for input fingerprints."""

    @pytest.mark.unit
    def test_stable_and_distinct(self):
        """Equal inputs hash equally; different inputs do not."""
        assert fingerprint("A", "x") == fingerprint("A", "x")
        assert fingerprint("A", "x") != fingerprint("A", "y")
        assert fingerprint("A", "x") != fingerprint("B", "x")
        assert len(fingerprint("A", "x")) == 64

    @pytest.mark.unit
    def test_runtime_key_order_ignored(self):
        """Mapping key order does not change the fingerprint."""
        assert fingerprint("A", runtime_ref={"a": 1, "b": 2}) == fingerprint(
            "A", runtime_ref={"b": 2, "a": 1}
        )

    @pytest.mark.unit
    def test_mixed_key_types_not_fingerprintable(self):
        """Mappings that cannot be sorted yield no fingerprint."""
        assert fingerprint("A", runtime_ref={"props": {1: "String", "a": "Number"}}) is None

    @pytest.mark.unit
    def test_self_reference_not_fingerprintable(self):
        """Self-referencing descriptors yield no fingerprint."""
        ref = {"props": ["a"]}
        ref["self"] = ref
        assert fingerprint("A", runtime_ref=ref) is None

    @pytest.mark.unit
    def test_object_fields_change_fingerprint(self):
        """Objects are fingerprinted by their declaration fields."""

        class Widget:
            propTypes = {"a": "string"}

        before = fingerprint("W", runtime_ref=Widget)
        Widget.propTypes = {"a": "string", "b": "number"}
        assert fingerprint("W", runtime_ref=Widget) != before


class TestRegistration:
    """Tests for register/get/export."""

    @pytest.mark.unit
    def test_round_trip(self, registry):
        """register, get_schema and from_wire(export) agree."""
        schema = registry.register("Tag", TAG_SOURCE)
        assert registry.get_schema("Tag") == schema
        assert ComponentSchema.from_wire(registry.export_schema("Tag")) == schema

    @pytest.mark.unit
    def test_unchanged_input_skips_analysis(self, registry):
        """A second identical registration is a cache hit."""
        registry.register("Tag", TAG_SOURCE)
        registry.register("Tag", TAG_SOURCE)
        assert registry._analyzer.calls == 1
        stats = registry.stats()
        assert stats.analyses == 1
        assert stats.cache_hits == 1

    @pytest.mark.unit
    def test_changed_input_reanalyzes(self, registry):
        """New source text replaces the stored schema."""
        registry.register("Tag", TAG_SOURCE)
        schema = registry.register("Tag", HOOK_SOURCE)
        assert registry._analyzer.calls == 2
        assert registry.get_schema("Tag") == schema
        assert registry.get_entry("Tag").registered_at <= registry.get_entry("Tag").updated_at

    @pytest.mark.unit
    def test_unfingerprintable_descriptors_register(self, registry):
        """Descriptors that cannot be hashed are analyzed on every call."""
        mixed = {"props": {1: "String", "a": "Number"}}
        looped = {"props": ["value"]}
        looped["self"] = looped

        assert [p.name for p in registry.register("Mixed", runtime_ref=mixed).props] == [
            "1",
            "a",
        ]
        assert [p.name for p in registry.register("Looped", runtime_ref=looped).props] == [
            "value"
        ]
        registry.register("Looped", runtime_ref=looped)
        assert registry._analyzer.calls == 3
        assert registry.stats().cache_hits == 0

    @pytest.mark.unit
    def test_mutated_object_reanalyzes(self, registry):
        """Changing a class descriptor's declarations invalidates the cache."""

        class Comp:
            propTypes = {"a": "string"}

        registry.register("Comp", runtime_ref=Comp)
        Comp.propTypes = {"a": "string", "b": "number"}
        schema = registry.register("Comp", runtime_ref=Comp)
        assert [p.name for p in schema.props] == ["a", "b"]
        assert registry._analyzer.calls == 2

    @pytest.mark.unit
    def test_degraded_registration_logged(self, registry, caplog):
        """Failed analysis is stored as the fallback with a warning."""
        with caplog.at_level(logging.WARNING, logger="uischema.registry"):
            schema = registry.register("Broken", "interface {")
        assert schema.degraded is True
        assert "Broken" in registry
        assert any("degraded" in r.getMessage() for r in caplog.records)
        assert registry.stats().degraded_components == 1

    @pytest.mark.unit
    def test_unknown_names(self, registry):
        """Lookups of unknown names return None."""
        assert registry.get_schema("Nope") is None
        assert registry.export_schema("Nope") is None
        assert registry.get_entry("Nope") is None


class TestMaintenance:
    """Tests for update/remove/clear and queries."""

    @pytest.mark.unit
    def test_update_unknown_returns_none(self, registry):
        """update does not create entries."""
        assert registry.update("Ghost", TAG_SOURCE) is None
        assert "Ghost" not in registry

    @pytest.mark.unit
    def test_update_known(self, registry):
        """update re-analyzes a known component."""
        registry.register("Toggle", TAG_SOURCE)
        schema = registry.update("Toggle", HOOK_SOURCE)
        assert schema.platform == Platform.REACT

    @pytest.mark.unit
    def test_remove(self, registry):
        """remove reports whether something was removed."""
        registry.register("Tag", TAG_SOURCE)
        assert registry.remove("Tag") is True
        assert registry.remove("Tag") is False
        assert len(registry) == 0

    @pytest.mark.unit
    def test_listing_and_platform_filter(self, registry):
        """Names keep registration order; platform filter matches values."""
        registry.register("Tag", TAG_SOURCE)
        registry.register("Toggle", HOOK_SOURCE)
        registry.register("Dialog", runtime_ref={"setup": None, "props": ["title"]})
        assert registry.list_names() == ["Tag", "Toggle", "Dialog"]
        assert [s.name for s in registry.schemas_by_platform("react")] == ["Toggle"]
        assert [s.name for s in registry.schemas_by_platform(Platform.VUE)] == ["Dialog"]
        assert [w["name"] for w in registry.export_all()] == ["Tag", "Toggle", "Dialog"]
        assert registry.stats().platforms == {"vanilla": 1, "react": 1, "vue": 1}

    @pytest.mark.unit
    def test_clear(self, registry):
        """clear empties the registry and resets counters."""
        registry.register("Tag", TAG_SOURCE)
        registry.clear()
        stats = registry.stats()
        assert stats.total_components == 0
        assert stats.analyses == 0
        assert stats.last_update is not None


class TestConcurrency:
    """Tests for concurrent registration."""

    @pytest.mark.unit
    def test_parallel_registration(self):
        """Concurrent registrations all land without interference."""
        registry = ComponentRegistry()
        names = [f"Tag{i}" for i in range(16)]

        def work(name):
            registry.register(name, TAG_SOURCE.replace("Tag", name))

        threads = [threading.Thread(target=work, args=(n,)) for n in names]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert sorted(registry.list_names()) == sorted(names)
        for name in names:
            assert [p.name for p in registry.get_schema(name).props] == ["text"]
