"""End-to-end tests: analyze, register, export, validate and sample."""

import logging

import pytest

from uischema import (
    CanonicalType,
    ComponentSchema,
    generate_sample_props,
    is_valid_instance,
    validate_instance,
)


class TestSourcePipeline:
    """Source text through the full analysis pipeline."""

    @pytest.mark.integration
    def test_button_schema(self, analyzer, button_source):
        """Interface declarations win over destructured usage."""
        schema = analyzer.analyze({"componentName": "Button", "sourceText": button_source})

        assert schema.degraded is False
        assert schema.platform == "react"
        assert [(p.name, p.type, p.required) for p in schema.props] == [
            ("label", CanonicalType.TEXT, True),
            ("variant", CanonicalType.TEXT, False),
            ("disabled", CanonicalType.BOOLEAN, False),
        ]
        assert schema.get_prop("label").description == "Text shown on the button"
        assert [e.name for e in schema.events] == ["onClick"]
        assert schema.get_event("onClick").parameters == ("event: MouseEvent",)
        assert schema.supports_children is True

    @pytest.mark.integration
    def test_broken_source_is_fallback(self, analyzer, broken_source, caplog):
        """Parse failures degrade to the fallback and log one warning."""
        with caplog.at_level(logging.WARNING, logger="uischema"):
            schema = analyzer.analyze({"componentName": "Broken", "sourceText": broken_source})

        assert schema.degraded is True
        assert schema.description == "fallback"
        assert any(getattr(r, "component", None) == "Broken" for r in caplog.records)


class TestRegistryWorkflow:
    """Registry round trips over source and runtime inputs."""

    @pytest.mark.integration
    def test_register_export_reload(self, registry, button_source, vue_runtime):
        """Exported wire dicts rebuild equal schemas."""
        button = registry.register("Button", source_text=button_source)
        counter = registry.register("Counter", runtime_ref=vue_runtime)

        assert registry.list_names() == ["Button", "Counter"]
        assert ComponentSchema.from_wire(registry.export_schema("Button")) == button
        assert [ComponentSchema.from_wire(w) for w in registry.export_all()] == [
            button,
            counter,
        ]

    @pytest.mark.integration
    def test_runtime_descriptor(self, registry, vue_runtime):
        """Runtime descriptors produce typed props and canonical events."""
        schema = registry.register("Counter", runtime_ref=vue_runtime)

        assert schema.platform == "vue"
        assert [(p.name, p.type, p.required) for p in schema.props] == [
            ("start", CanonicalType.NUMBER, True),
            ("step", CanonicalType.NUMBER, False),
        ]
        assert schema.get_prop("step").default_value == 1
        assert [e.name for e in schema.events] == ["onChange"]
        assert registry.schemas_by_platform("vue") == [schema]

    @pytest.mark.integration
    def test_unchanged_input_is_cached(self, registry, button_source):
        """Re-registering identical input skips analysis."""
        registry.register("Button", source_text=button_source)
        registry.register("Button", source_text=button_source)
        stats = registry.stats()
        assert stats.analyses == 1
        assert stats.cache_hits == 1
        assert stats.total_components == 1

    @pytest.mark.integration
    def test_degraded_components_are_counted(self, registry, broken_source):
        """Fallback schemas are stored and counted."""
        registry.register("Broken", source_text=broken_source)
        stats = registry.stats()
        assert stats.degraded_components == 1
        assert stats.platforms == {"universal": 1}


class TestInstances:
    """Sample props validate against the schema they came from."""

    @pytest.mark.integration
    def test_samples_are_valid(self, analyzer, button_source):
        """Generated samples satisfy the schema."""
        schema = analyzer.analyze({"componentName": "Button", "sourceText": button_source})
        samples = generate_sample_props(schema)

        assert samples == {"label": "Label", "variant": "Sample text", "disabled": False}
        assert validate_instance(samples, schema) == []

    @pytest.mark.integration
    def test_invalid_instance(self, analyzer, button_source):
        """Missing required props and wrong types are errors."""
        schema = analyzer.analyze({"componentName": "Button", "sourceText": button_source})
        issues = validate_instance({"disabled": "yes", "onHover": print}, schema)

        assert {(i.field, i.issue_type) for i in issues} == {
            ("label", "missing_required"),
            ("disabled", "type_mismatch"),
            ("onHover", "unknown_event"),
        }
        assert is_valid_instance({"label": "Save", "onClick": print}, schema) is True
