"""Database port – the transaction-control surface a handle must expose."""

from __future__ import annotations

import abc


class DatabaseHandle(abc.ABC):
    """Port: a database connection able to demarcate one transaction.

    Each operation returns ``None`` or raises.  Implementations are expected
    to raise :class:`~tx_executor.kernel.errors.BeginFailure`,
    :class:`~tx_executor.kernel.errors.CommitFailure` or
    :class:`~tx_executor.kernel.errors.RollbackFailure`, but callers must not
    rely on it: whatever a handle raises is propagated untouched.
    """

    @abc.abstractmethod
    def begin(self) -> None: ...

    @abc.abstractmethod
    def commit(self) -> None: ...

    @abc.abstractmethod
    def rollback(self) -> None: ...


__all__ = ["DatabaseHandle"]
