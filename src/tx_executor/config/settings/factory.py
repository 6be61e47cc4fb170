"""Config settings – SettingsFactory."""
from __future__ import annotations

import dataclasses
from typing import Any, Sequence, TypeVar

from tx_executor.config.settings.base import Settings
from tx_executor.config.settings.loaders import SettingsLoader
from tx_executor.config.validation import (
    ConfigurationError,
    MissingRequiredSettingError,
)
from tx_executor.observability.logging import get_logger

T = TypeVar("T", bound=Settings)

_log = get_logger(__name__)


class SettingsFactory:
    """Merge outputs from multiple loaders, apply overrides, and construct
    a settings dataclass in one step.

    Loaders are applied in order; later loaders override earlier ones for
    overlapping fields.  *overrides* (if provided) take the highest priority.
    A loader that raises :class:`ConfigurationError` is skipped (and logged)
    so that the remaining loaders may still contribute values.
    """

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        """
        Parameters
        ----------
        settings_cls:
            The :class:`~tx_executor.config.settings.base.Settings` subclass to
            construct.
        loaders:
            Ordered sequence of :class:`~tx_executor.config.settings.loaders.\
SettingsLoader` instances.  Later loaders win on field conflicts.
        overrides:
            Explicit key-value pairs applied after all loaders, useful for
            tests and local development.

        Raises
        ------
        MissingRequiredSettingError
            When a required field (no default) is absent after all sources
            have been merged.
        ConfigurationError
            On any other construction failure.
        """
        merged: dict[str, Any] = {}

        for loader in loaders or []:
            try:
                instance = loader.load(settings_cls)
            except ConfigurationError as exc:
                _log.warning("settings.loader_skipped", loader=type(loader).__name__, error=exc)
                continue
            for field in dataclasses.fields(instance):  # type: ignore[arg-type]
                merged[field.name] = getattr(instance, field.name)

        if overrides:
            merged.update(overrides)

        for field in dataclasses.fields(settings_cls):  # type: ignore[arg-type]
            if field.name in merged:
                continue
            if (
                field.default is dataclasses.MISSING
                and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
            ):
                raise MissingRequiredSettingError(field.name)

        try:
            return settings_cls(**merged)
        except ConfigurationError:
            raise
        except Exception as exc:
            raise ConfigurationError(f"Failed to construct {settings_cls.__name__}: {exc}") from exc


__all__ = ["SettingsFactory"]
