"""Transaction executor – TransactionFactory."""
from __future__ import annotations

from typing import Callable, TypeVar

from tx_executor.application.transaction.exclusion import RollbackExclusionPolicy
from tx_executor.application.transaction.executor import TransactionExecutor
from tx_executor.config.settings import TransactionSettings
from tx_executor.kernel.database import DatabaseHandle, DatabaseRegistry
from tx_executor.observability.logging import Logger

R = TypeVar("R")


class TransactionFactory:
    """Holds the injected collaborators shared by every executor it creates.

    Executors start with the default exclusions from *settings*; a later
    ``exclude_from_rollback`` replaces them.
    """

    def __init__(
        self,
        registry: DatabaseRegistry | None = None,
        logger: Logger | None = None,
        settings: TransactionSettings | None = None,
    ) -> None:
        self._registry = registry
        self._logger = logger
        self._settings = settings or TransactionSettings()
        self._default_exclusions = RollbackExclusionPolicy.from_names(self._settings.rollback_exclusions)

    @property
    def settings(self) -> TransactionSettings:
        return self._settings

    @property
    def default_exclusions(self) -> RollbackExclusionPolicy:
        return self._default_exclusions

    def create(
        self,
        database: DatabaseHandle | str | None,
        work: Callable[[], R] | None = None,
        *,
        label: str | None = None,
    ) -> TransactionExecutor[R]:
        executor = TransactionExecutor.create(
            database, work, registry=self._registry, logger=self._logger, label=label
        )
        if self._default_exclusions:
            executor = executor.exclude_from_rollback(self._default_exclusions)
        if not self._settings.log_rollbacks:
            executor = executor.log_rollbacks(False)
        return executor

    def run(self, database: DatabaseHandle | str, work: Callable[[], R]) -> R:
        """Shortcut for ``create(database, work).execute()``."""
        return self.create(database, work).execute()


__all__ = ["TransactionFactory"]
