"""Tests for configuration management."""

import pytest

from .lib import (
    AnalyzerSettings,
    EnvConfig,
    EnvVar,
    _convert_value,
    _parse_bool,
    get_environment,
    get_environment_info,
    list_environment_variables,
)

# =============================================================================
# Tests for get_environment (main interface)
# =============================================================================


class TestGetEnvironment:
    """Tests for the unified get_environment interface."""

    @pytest.mark.unit
    def test_returns_default_when_not_set(self, monkeypatch):
        """Returns default value when env var is not set."""
        monkeypatch.delenv("UISCHEMA_MAX_SOURCE_BYTES", raising=False)
        result = get_environment(EnvVar.MAX_SOURCE_BYTES)
        assert result == 1_000_000

    @pytest.mark.unit
    def test_override_takes_priority(self, monkeypatch):
        """Override parameter takes highest priority."""
        monkeypatch.setenv("UISCHEMA_GRAMMAR", "typescript")
        result = get_environment(EnvVar.GRAMMAR, override="tsx")
        assert result == "tsx"

    @pytest.mark.unit
    def test_false_override_is_honoured(self, monkeypatch):
        """A False override is not mistaken for a missing override."""
        monkeypatch.setenv("UISCHEMA_STRICT_PARSE", "true")
        assert get_environment(EnvVar.STRICT_PARSE, override=False) is False

    @pytest.mark.unit
    def test_env_var_overrides_default(self, monkeypatch):
        """Environment variable overrides default value."""
        monkeypatch.setenv("UISCHEMA_MAX_SOURCE_BYTES", "2048")
        result = get_environment(EnvVar.MAX_SOURCE_BYTES)
        assert result == 2048
        assert isinstance(result, int)

    @pytest.mark.unit
    def test_bool_type_conversion_true(self, monkeypatch):
        """Boolean type conversion for true values."""
        for value in ("true", "1", "yes", "TRUE", "Yes"):
            monkeypatch.setenv("UISCHEMA_STRICT_EXTRACTION", value)
            assert get_environment(EnvVar.STRICT_EXTRACTION) is True

    @pytest.mark.unit
    def test_bool_type_conversion_false(self, monkeypatch):
        """Boolean type conversion for false values."""
        for value in ("false", "0", "no", "FALSE", "No"):
            monkeypatch.setenv("UISCHEMA_STRICT_PARSE", value)
            assert get_environment(EnvVar.STRICT_PARSE) is False

    @pytest.mark.unit
    def test_invalid_int_returns_default(self, monkeypatch):
        """Invalid integer value returns default."""
        monkeypatch.setenv("UISCHEMA_MAX_SOURCE_BYTES", "lots")
        assert get_environment(EnvVar.MAX_SOURCE_BYTES) == 1_000_000

    @pytest.mark.unit
    def test_invalid_bool_returns_default(self, monkeypatch):
        """Unrecognized boolean text falls back to the default."""
        monkeypatch.setenv("UISCHEMA_STRICT_PARSE", "maybe")
        assert get_environment(EnvVar.STRICT_PARSE) is True


class TestConversionHelpers:
    """Tests for the private conversion helpers."""

    @pytest.mark.unit
    def test_parse_bool_unknown(self):
        """Unknown strings parse to None."""
        assert _parse_bool("perhaps") is None

    @pytest.mark.unit
    def test_convert_none_returns_default(self):
        """Missing values resolve to the default."""
        assert _convert_value(None, int, 7) == 7

    @pytest.mark.unit
    def test_convert_string_passthrough(self):
        """Strings are returned unchanged."""
        assert _convert_value("DEBUG", str, "INFO") == "DEBUG"


class TestGetEnvironmentInfo:
    """Tests for environment variable metadata."""

    @pytest.mark.unit
    def test_returns_env_config(self):
        """Returns EnvConfig dataclass."""
        info = get_environment_info(EnvVar.GRAMMAR)
        assert isinstance(info, EnvConfig)
        assert info.name == "UISCHEMA_GRAMMAR"
        assert info.default == "tsx"
        assert info.var_type is str
        assert info.category == "analysis"

    @pytest.mark.unit
    def test_all_names_are_prefixed(self):
        """Every variable lives in the UISCHEMA_ namespace."""
        for var in EnvVar:
            assert var.value.name.startswith("UISCHEMA_")
            assert var.value.description


class TestListEnvironmentVariables:
    """Tests for listing environment variables."""

    @pytest.mark.unit
    def test_list_all(self):
        """No category returns every variable."""
        assert len(list_environment_variables()) == len(EnvVar)

    @pytest.mark.unit
    def test_filter_by_category(self):
        """Category filter returns only matching variables."""
        logging_vars = list_environment_variables("logging")
        assert logging_vars == [EnvVar.LOG_LEVEL]

    @pytest.mark.unit
    def test_unknown_category_is_empty(self):
        """Unknown category returns an empty list."""
        assert list_environment_variables("nonexistent") == []


class TestAnalyzerSettings:
    """Tests for AnalyzerSettings resolution."""

    @pytest.mark.unit
    def test_defaults(self, monkeypatch):
        """Unset environment yields the documented defaults."""
        for var in EnvVar:
            monkeypatch.delenv(var.value.name, raising=False)
        settings = AnalyzerSettings.from_environment()
        assert settings == AnalyzerSettings()

    @pytest.mark.unit
    def test_environment_values(self, monkeypatch):
        """Environment variables flow into the settings."""
        monkeypatch.setenv("UISCHEMA_GRAMMAR", "typescript")
        monkeypatch.setenv("UISCHEMA_STRICT_EXTRACTION", "1")
        settings = AnalyzerSettings.from_environment()
        assert settings.grammar == "typescript"
        assert settings.strict_extraction is True

    @pytest.mark.unit
    def test_overrides_win(self, monkeypatch):
        """Keyword overrides beat the environment."""
        monkeypatch.setenv("UISCHEMA_STRICT_PARSE", "true")
        settings = AnalyzerSettings.from_environment(strict_parse=False)
        assert settings.strict_parse is False

    @pytest.mark.unit
    def test_settings_are_frozen(self):
        """Settings cannot be mutated once built."""
        settings = AnalyzerSettings()
        with pytest.raises(AttributeError):
            settings.grammar = "typescript"
