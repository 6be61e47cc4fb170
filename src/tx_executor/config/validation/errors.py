"""Config validation errors."""
from tx_executor.kernel.errors import ApplicationError


class ConfigurationError(ApplicationError):
    """Raised when configuration is invalid or loading failed."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigurationError):
    """A required environment variable / setting is absent."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Required setting '{setting_name}' is missing")
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigurationError):
    """A setting's value is present but semantically invalid."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}"
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


class UnknownDatabaseError(ConfigurationError):
    """No database handle is registered under the requested group name."""
    default_code = "unknown_database"

    def __init__(self, name: str) -> None:
        super().__init__(f"Database group '{name}' is not registered")
        self.name = name


__all__ = [
    "ConfigurationError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "UnknownDatabaseError",
]
