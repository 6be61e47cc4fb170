"""Transactional unit-of-work executor.

Runs a zero-argument callable between ``begin`` and ``commit`` on a database
handle, rolling back when it fails::

    name = "World"

    result = (
        TransactionExecutor.create(database, lambda: f"Hello {name}")
        .exclude_from_rollback(ValidationError)
        .execute()
    )

Arguments may be bound at configuration time instead of by closure::

    TransactionExecutor.create("default", registry=registry).call(divide).with_args(10, 2)()

Every builder step returns a new executor.  An executor runs once; the
failure of a unit of work is always re-raised as the very same object, after
either ``rollback`` or, for kinds in the exclusion policy, ``commit``.
"""
from __future__ import annotations

import enum
import functools
from collections.abc import Callable, Iterable
from typing import Any, Generic, TypeVar

from tx_executor.application.transaction.exclusion import (
    FailureKind,
    RollbackExclusionPolicy,
    failure_kind,
)
from tx_executor.config.validation import ConfigurationError
from tx_executor.kernel.database import DatabaseHandle, DatabaseRegistry
from tx_executor.kernel.errors import InvalidCallableError, MisuseError
from tx_executor.observability.logging import Logger, get_logger

T = TypeVar("T")
R = TypeVar("R")

_log = get_logger(__name__)


class TransactionState(str, enum.Enum):
    NOT_STARTED = "not_started"
    BEGAN = "began"
    COMMITTED = "committed"
    ROLLED_BACK = "rolled_back"
    DONE = "done"


def describe_work(work: Any) -> str:
    """Human-readable identifier of a unit of work for log entries."""
    while isinstance(work, functools.partial):
        work = work.func
    name = getattr(work, "__qualname__", None) or getattr(work, "__name__", None)
    if name is None:
        return repr(work)
    module = getattr(work, "__module__", None)
    return f"{module}.{name}" if module else name


class TransactionExecutor(Generic[T]):
    """Execute one unit of work inside one database transaction."""

    def __init__(
        self,
        database: DatabaseHandle,
        work: Callable[[], T] | None = None,
        *,
        exclusions: RollbackExclusionPolicy | None = None,
        logger: Logger | None = None,
        label: str | None = None,
        log_rollbacks: bool = True,
    ) -> None:
        if database is None:
            raise ConfigurationError("database instance not set")
        self._database = database
        self._work = work
        self._exclusions = exclusions or RollbackExclusionPolicy()
        self._logger = logger if logger is not None else _log
        self._label = label
        self._log_rollbacks = log_rollbacks
        self._state = TransactionState.NOT_STARTED
        self._resolution: TransactionState | None = None

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def create(
        cls,
        database: DatabaseHandle | str | None,
        work: Callable[[], R] | None = None,
        *,
        registry: DatabaseRegistry | None = None,
        logger: Logger | None = None,
        label: str | None = None,
    ) -> "TransactionExecutor[R]":
        """Create an executor for *database*, a handle or a registered group name.

        Raises
        ------
        ConfigurationError
            When *database* is missing, or is a group name and no *registry*
            was supplied.
        UnknownDatabaseError
            When the group name is not registered.
        """
        if database is None or database == "":
            raise ConfigurationError("database instance not set")
        if isinstance(database, str):
            if registry is None:
                raise ConfigurationError(
                    f"Cannot resolve database group '{database}' without a registry"
                )
            database = registry.resolve(database)
        return cls(database, work, logger=logger, label=label)  # type: ignore[arg-type]

    def _derive(self, **changes: Any) -> "TransactionExecutor[Any]":
        self._ensure_not_started()
        params: dict[str, Any] = {
            "work": self._work,
            "exclusions": self._exclusions,
            "logger": self._logger,
            "label": self._label,
            "log_rollbacks": self._log_rollbacks,
        }
        params.update(changes)
        return type(self)(self._database, **params)

    def exclude_from_rollback(
        self, *kinds: FailureKind | Iterable[FailureKind] | RollbackExclusionPolicy
    ) -> "TransactionExecutor[T]":
        """Replace the rollback-exclusion policy.

        A failure of one of *kinds* (or of a subclass) is committed rather
        than rolled back, and still re-raised.
        """
        return self._derive(exclusions=RollbackExclusionPolicy.of(*kinds))

    def call(self, work: Callable[..., R]) -> "TransactionExecutor[R]":
        return self._derive(work=work)

    def with_args(self, *args: Any, **kwargs: Any) -> "TransactionExecutor[T]":
        """Bind arguments to the unit of work now; ``execute`` passes none."""
        if self._work is None:
            raise InvalidCallableError(None, "No unit of work to bind arguments to")
        return self._derive(work=functools.partial(self._work, *args, **kwargs))

    def labelled(self, label: str) -> "TransactionExecutor[T]":
        """Identify this transaction in log entries (e.g. ``"orders.py:42"``)."""
        return self._derive(label=label)

    def log_rollbacks(self, enabled: bool = True) -> "TransactionExecutor[T]":
        return self._derive(log_rollbacks=enabled)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def database(self) -> DatabaseHandle:
        return self._database

    @property
    def exclusions(self) -> RollbackExclusionPolicy:
        return self._exclusions

    @property
    def label(self) -> str:
        return self._label or describe_work(self._work)

    @property
    def state(self) -> TransactionState:
        return self._state

    @property
    def resolution(self) -> TransactionState | None:
        """``COMMITTED`` or ``ROLLED_BACK`` once the transaction was resolved."""
        return self._resolution

    def __repr__(self) -> str:
        return f"TransactionExecutor(work={self.label!r}, state={self._state.value!r})"

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def __call__(self) -> T:
        return self.execute()

    def execute(self) -> T:
        """Run the unit of work transactionally and return its result.

        Raises
        ------
        MisuseError
            When this executor already ran.
        InvalidCallableError
            When the unit of work is missing or not callable; no transaction
            is opened.
        """
        self._ensure_not_started()
        work = self._work
        if work is None or not callable(work):
            raise InvalidCallableError(work)

        self._state = TransactionState.BEGAN
        try:
            self._database.begin()
            try:
                result = work()
            except BaseException as exc:
                self._resolve_failure(exc)
                raise
            self._database.commit()
            self._state = self._resolution = TransactionState.COMMITTED
            return result
        finally:
            self._state = TransactionState.DONE

    def _resolve_failure(self, failure: BaseException) -> None:
        excluded_by = self._exclusions.match(failure)
        if excluded_by is None:
            self._database.rollback()
            self._state = self._resolution = TransactionState.ROLLED_BACK
            if self._log_rollbacks:
                self._logger.debug(
                    "transaction.rolled_back",
                    work=self.label,
                    failure_kind=failure_kind(failure),
                )
            return

        self._database.commit()
        self._state = self._resolution = TransactionState.COMMITTED
        self._logger.debug(
            "transaction.committed_on_excluded_failure",
            work=self.label,
            failure_kind=failure_kind(failure),
            excluded_by=excluded_by if isinstance(excluded_by, str) else excluded_by.__qualname__,
        )

    def _ensure_not_started(self) -> None:
        if self._state is not TransactionState.NOT_STARTED:
            raise MisuseError(
                f"Transaction for {self.label!r} already {self._state.value}; executors run once"
            )


__all__ = ["TransactionExecutor", "TransactionState", "describe_work"]
