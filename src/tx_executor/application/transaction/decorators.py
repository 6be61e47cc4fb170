"""Transaction executor – transactional decorator."""
from __future__ import annotations

import functools
from collections.abc import Iterable
from typing import Any, Callable, TypeVar

from tx_executor.application.transaction.exclusion import FailureKind, RollbackExclusionPolicy
from tx_executor.application.transaction.executor import TransactionExecutor, describe_work
from tx_executor.kernel.database import DatabaseHandle, DatabaseRegistry
from tx_executor.observability.logging import Logger

F = TypeVar("F", bound=Callable[..., Any])


def transactional(
    database: DatabaseHandle | str,
    *,
    exclude: FailureKind | Iterable[FailureKind] | RollbackExclusionPolicy = (),
    registry: DatabaseRegistry | None = None,
    logger: Logger | None = None,
    label: str | None = None,
) -> Callable[[F], F]:
    """Decorator: run every call of the wrapped function in its own transaction.

    A group name is resolved on each call, so the registry may be populated
    after decoration.
    """
    exclusions = RollbackExclusionPolicy.of(exclude)

    def decorator(func: F) -> F:
        work_label = label or describe_work(func)

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            executor = (
                TransactionExecutor.create(database, func, registry=registry, logger=logger, label=work_label)
                .with_args(*args, **kwargs)
            )
            if exclusions:
                executor = executor.exclude_from_rollback(exclusions)
            return executor.execute()

        return wrapper  # type: ignore[return-value]

    return decorator


__all__ = ["transactional"]
