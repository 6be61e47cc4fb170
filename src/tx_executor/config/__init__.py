"""Config – 12-factor settings and configuration errors."""

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
    UnknownDatabaseError,
)

__all__ = [
    "ConfigurationError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "TransactionSettings",
    "UnknownDatabaseError",
]
