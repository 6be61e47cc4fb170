"""Unit tests for config settings & validation."""

from dataclasses import dataclass, field
from typing import ClassVar

import pytest

from tx_executor.config.settings import (
    EnvSettingsLoader,
    Settings,
    SettingsFactory,
    SettingsLoader,
    TransactionSettings,
)
from tx_executor.config.validation import (
    ConfigurationError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)


@dataclass
class AppSettings(Settings):
    _prefix: ClassVar[str] = "APP"

    host: str = "localhost"
    port: int = 8080
    debug: bool = False
    allowed_origins: list[str] = field(default_factory=list)


@dataclass
class RequiredSettings(Settings):
    _prefix: ClassVar[str] = "REQ"

    dsn: str


class FailingLoader(SettingsLoader):
    def load(self, settings_class):
        raise ConfigurationError("source unavailable")


class TestEnvSettingsLoader:
    def test_loads_typed_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_HOST", "example.com")
        monkeypatch.setenv("APP_PORT", "9000")
        monkeypatch.setenv("APP_DEBUG", "yes")
        monkeypatch.setenv("APP_ALLOWED_ORIGINS", "a.com, b.com,")
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings.host == "example.com"
        assert settings.port == 9000
        assert settings.debug is True
        assert settings.allowed_origins == ["a.com", "b.com"]

    def test_explicit_environ_mapping(self) -> None:
        settings = EnvSettingsLoader({"APP_PORT": "1"}).load(AppSettings)
        assert settings.port == 1
        assert settings.host == "localhost"

    def test_missing_required_raises(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as info:
            EnvSettingsLoader({}).load(RequiredSettings)
        assert info.value.setting_name == "REQ_DSN"

    def test_bad_int_wrapped_in_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError):
            EnvSettingsLoader({"APP_PORT": "eighty"}).load(AppSettings)


class TestTransactionSettings:
    def test_defaults(self) -> None:
        settings = TransactionSettings()
        assert settings.rollback_exclusions == []
        assert settings.log_rollbacks is True

    def test_loads_from_env(self) -> None:
        settings = EnvSettingsLoader(
            {"TX_ROLLBACK_EXCLUSIONS": "ValidationError,conflict", "TX_LOG_ROLLBACKS": "false"}
        ).load(TransactionSettings)
        assert settings.rollback_exclusions == ["ValidationError", "conflict"]
        assert settings.log_rollbacks is False

    def test_blank_exclusion_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError) as info:
            TransactionSettings(rollback_exclusions=["ok", " "])
        assert info.value.setting_name == "rollback_exclusions"


    def test_bare_string_exclusions_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError) as info:
            TransactionSettings(rollback_exclusions="ValidationError")  # type: ignore[arg-type]
        assert info.value.setting_name == "rollback_exclusions"

    def test_bare_string_override_rejected_by_factory(self) -> None:
        with pytest.raises(ConfigurationError):
            SettingsFactory.create(TransactionSettings, overrides={"rollback_exclusions": "ValidationError"})


class TestSettingsFactory:
    def test_overrides_win(self) -> None:
        settings = SettingsFactory.create(
            AppSettings,
            loaders=[EnvSettingsLoader({"APP_PORT": "9000"})],
            overrides={"port": 1234},
        )
        assert settings.port == 1234

    def test_later_loader_wins(self) -> None:
        settings = SettingsFactory.create(
            AppSettings,
            loaders=[EnvSettingsLoader({"APP_HOST": "one"}), EnvSettingsLoader({"APP_HOST": "two"})],
        )
        assert settings.host == "two"

    def test_failing_loader_is_skipped(self) -> None:
        settings = SettingsFactory.create(
            AppSettings, loaders=[FailingLoader(), EnvSettingsLoader({"APP_PORT": "7"})]
        )
        assert settings.port == 7

    def test_missing_required_after_merge(self) -> None:
        with pytest.raises(MissingRequiredSettingError):
            SettingsFactory.create(RequiredSettings, loaders=[FailingLoader()])

    def test_required_from_overrides(self) -> None:
        settings = SettingsFactory.create(RequiredSettings, overrides={"dsn": "sqlite://"})
        assert settings.dsn == "sqlite://"
