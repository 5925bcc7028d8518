"""Unit tests for config settings, loaders and the settings factory."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

import pytest

from pagequery.config import (
    ConfigError,
    EnvSettingsLoader,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    QuerySettings,
    Settings,
    SettingsFactory,
    SettingsLoader,
)


@dataclass
class RequiredSettings(Settings):
    _prefix: ClassVar[str] = "REQ"
    api_key: str


class _FailingLoader(SettingsLoader):
    def load(self, settings_class):  # noqa: ANN001, ANN201
        raise ConfigError("source unavailable")


# ---------------------------------------------------------------------------
# QuerySettings
# ---------------------------------------------------------------------------


class TestQuerySettings:
    def test_defaults(self) -> None:
        s = QuerySettings()
        assert s.max_limit == 1000
        assert s.default_limit == 20
        assert s.default_sort_field == "created_at"
        assert s.default_sort_direction == "desc"
        assert s.tie_break_field == "id"
        assert s.log_queries is True

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"max_limit": 0},
            {"default_limit": 0},
            {"max_limit": 10, "default_limit": 20},
            {"default_sort_direction": "up"},
            {"default_sort_field": ""},
            {"tie_break_field": ""},
        ],
    )
    def test_invalid_values_raise(self, kwargs: dict) -> None:
        with pytest.raises(InvalidSettingValueError):
            QuerySettings(**kwargs)

    def test_invalid_value_error_details(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            QuerySettings(max_limit=0)
        assert exc_info.value.setting_name == "max_limit"
        assert exc_info.value.code == "invalid_setting_value"


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_reads_prefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PAGEQUERY_MAX_LIMIT", "100")
        monkeypatch.setenv("PAGEQUERY_DEFAULT_LIMIT", "25")
        monkeypatch.setenv("PAGEQUERY_DEFAULT_SORT_FIELD", "updated_at")
        monkeypatch.setenv("PAGEQUERY_LOG_QUERIES", "off")
        s = EnvSettingsLoader().load(QuerySettings)
        assert s.max_limit == 100
        assert s.default_limit == 25
        assert s.default_sort_field == "updated_at"
        assert s.log_queries is False

    def test_explicit_environ_mapping(self) -> None:
        s = EnvSettingsLoader({"PAGEQUERY_MAX_LIMIT": "50"}).load(QuerySettings)
        assert s.max_limit == 50

    def test_unparseable_int(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader({"PAGEQUERY_MAX_LIMIT": "lots"}).load(QuerySettings)

    def test_validation_failure_propagates(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader({"PAGEQUERY_DEFAULT_LIMIT": "5000"}).load(QuerySettings)

    def test_missing_required(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader({}).load(RequiredSettings)
        assert exc_info.value.setting_name == "REQ_API_KEY"


# ---------------------------------------------------------------------------
# SettingsFactory
# ---------------------------------------------------------------------------


class TestSettingsFactory:
    def test_later_loaders_and_overrides_win(self) -> None:
        s = SettingsFactory.create(
            QuerySettings,
            loaders=[
                EnvSettingsLoader({"PAGEQUERY_MAX_LIMIT": "500"}),
                EnvSettingsLoader({"PAGEQUERY_MAX_LIMIT": "200", "PAGEQUERY_DEFAULT_LIMIT": "10"}),
            ],
            overrides={"default_limit": 50},
        )
        assert s.max_limit == 200
        assert s.default_limit == 50

    def test_failing_loader_is_skipped(self) -> None:
        s = SettingsFactory.create(QuerySettings, loaders=[_FailingLoader()])
        assert s == QuerySettings()

    def test_missing_required_after_merge(self) -> None:
        with pytest.raises(MissingRequiredSettingError):
            SettingsFactory.create(RequiredSettings, loaders=[])

    def test_invalid_override_raises_setting_error(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            SettingsFactory.create(QuerySettings, overrides={"max_limit": -1})

    def test_unknown_override_wrapped_in_config_error(self) -> None:
        with pytest.raises(ConfigError):
            SettingsFactory.create(QuerySettings, overrides={"no_such_field": 1})
