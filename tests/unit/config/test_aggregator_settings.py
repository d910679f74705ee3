"""Unit tests for AggregatorSettings and its environment loading."""

import dataclasses

import pytest

from aggregator.config import AggregatorSettings, SettingsError
from aggregator.kernel.errors import ApplicationError


class TestAggregatorSettings:
    def test_defaults(self) -> None:
        settings = AggregatorSettings()
        assert settings.log_level == "INFO"
        assert settings.log_json is True
        assert settings.log_level_number == 20

    def test_level_is_normalised(self) -> None:
        assert AggregatorSettings(log_level=" debug ").log_level == "DEBUG"

    def test_invalid_level_names_the_variable(self) -> None:
        with pytest.raises(SettingsError) as exc_info:
            AggregatorSettings(log_level="LOUD")
        assert exc_info.value.variable == "AGGREGATOR_LOG_LEVEL"
        assert exc_info.value.value == "LOUD"
        assert "AGGREGATOR_LOG_LEVEL" in str(exc_info.value)

    def test_is_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            AggregatorSettings().log_json = False  # type: ignore[misc]

    def test_settings_error_is_application_error(self) -> None:
        assert issubclass(SettingsError, ApplicationError)


class TestFromEnv:
    def test_defaults_when_unset(self) -> None:
        assert AggregatorSettings.from_env({}) == AggregatorSettings()

    def test_reads_prefixed_variables(self) -> None:
        settings = AggregatorSettings.from_env(
            {"AGGREGATOR_LOG_LEVEL": "warning", "AGGREGATOR_LOG_JSON": "off"}
        )
        assert settings.log_level == "WARNING"
        assert settings.log_json is False

    @pytest.mark.parametrize("raw", ["1", "true", "YES", "on"])
    def test_truthy_values(self, raw: str) -> None:
        assert AggregatorSettings.from_env({"AGGREGATOR_LOG_JSON": raw}).log_json is True

    def test_unparseable_bool_names_the_variable(self) -> None:
        with pytest.raises(SettingsError) as exc_info:
            AggregatorSettings.from_env({"AGGREGATOR_LOG_JSON": "maybe"})
        assert exc_info.value.variable == "AGGREGATOR_LOG_JSON"
        assert exc_info.value.log_fields() == {
            "error_code": "invalid_setting",
            "variable": "AGGREGATOR_LOG_JSON",
            "value": "maybe",
        }

    def test_invalid_level_from_env(self) -> None:
        with pytest.raises(SettingsError) as exc_info:
            AggregatorSettings.from_env({"AGGREGATOR_LOG_LEVEL": "LOUD"})
        assert exc_info.value.variable == "AGGREGATOR_LOG_LEVEL"

    def test_defaults_to_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AGGREGATOR_LOG_LEVEL", "error")
        monkeypatch.delenv("AGGREGATOR_LOG_JSON", raising=False)
        settings = AggregatorSettings.from_env()
        assert settings.log_level == "ERROR"
        assert settings.log_json is True
