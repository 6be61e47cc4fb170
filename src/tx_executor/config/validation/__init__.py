"""Config validation errors."""
from tx_executor.config.validation.errors import (
    ConfigurationError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    UnknownDatabaseError,
)

__all__ = [
    "ConfigurationError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "UnknownDatabaseError",
]
