"""Config settings – 12-factor env-based configuration."""
from tx_executor.config.settings.base import Settings, TransactionSettings
from tx_executor.config.settings.factory import SettingsFactory
from tx_executor.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "Settings", "SettingsFactory", "SettingsLoader", "TransactionSettings"]
