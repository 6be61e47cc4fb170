"""Config settings – Settings base class and TransactionSettings."""
from __future__ import annotations

import dataclasses

from tx_executor.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class TransactionSettings(Settings):
    """Defaults applied by :class:`~tx_executor.application.transaction.TransactionFactory`.

    Environment variables (via :class:`EnvSettingsLoader`)::

        TX_ROLLBACK_EXCLUSIONS=ValidationError,conflict
        TX_LOG_ROLLBACKS=false
    """

    _prefix: dataclasses.ClassVar[str] = "TX"

    rollback_exclusions: list[str] = dataclasses.field(default_factory=list)
    log_rollbacks: bool = True

    def _validate(self) -> None:
        if isinstance(self.rollback_exclusions, str):
            raise InvalidSettingValueError(
                "rollback_exclusions", self.rollback_exclusions, "expected a list of names, not a string"
            )
        for name in self.rollback_exclusions:
            if not isinstance(name, str) or not name.strip():
                raise InvalidSettingValueError(
                    "rollback_exclusions", self.rollback_exclusions, "entries must be non-empty names"
                )


__all__ = ["Settings", "TransactionSettings"]
