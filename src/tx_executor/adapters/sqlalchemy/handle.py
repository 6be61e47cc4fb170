"""SQLAlchemy adapter – SqlAlchemyConnectionHandle."""
from __future__ import annotations

from typing import Any

from sqlalchemy.engine import Connection, Engine
from sqlalchemy.engine.base import RootTransaction
from sqlalchemy.exc import SQLAlchemyError

from tx_executor.kernel.database import DatabaseHandle
from tx_executor.kernel.errors import BeginFailure, CommitFailure, RollbackFailure


class SqlAlchemyConnectionHandle(DatabaseHandle):
    """Database handle over a synchronous SQLAlchemy :class:`Connection`.

    The unit of work issues its statements through :attr:`connection`; the
    handle only demarcates the transaction.  Driver errors are surfaced as
    :class:`BeginFailure` / :class:`CommitFailure` / :class:`RollbackFailure`
    with the original exception as ``cause``.
    """

    def __init__(self, connection: Connection, *, name: str | None = None) -> None:
        self._connection = connection
        self._name = name
        self._transaction: RootTransaction | None = None

    @classmethod
    def from_engine(cls, engine: Engine, *, name: str | None = None) -> "SqlAlchemyConnectionHandle":
        return cls(engine.connect(), name=name)

    @property
    def connection(self) -> Connection:
        return self._connection

    @property
    def in_transaction(self) -> bool:
        return self._transaction is not None and self._transaction.is_active

    def execute(self, statement: Any, parameters: Any = None) -> Any:
        return self._connection.execute(statement, parameters)

    def begin(self) -> None:
        try:
            self._transaction = self._connection.begin()
        except SQLAlchemyError as exc:
            raise BeginFailure(database=self._name, cause=exc) from exc

    def commit(self) -> None:
        transaction = self._take_transaction(CommitFailure)
        try:
            transaction.commit()
        except SQLAlchemyError as exc:
            raise CommitFailure(database=self._name, cause=exc) from exc

    def rollback(self) -> None:
        transaction = self._take_transaction(RollbackFailure)
        try:
            transaction.rollback()
        except SQLAlchemyError as exc:
            raise RollbackFailure(database=self._name, cause=exc) from exc

    def close(self) -> None:
        self._connection.close()

    def _take_transaction(self, failure: type[CommitFailure] | type[RollbackFailure]) -> RootTransaction:
        transaction, self._transaction = self._transaction, None
        if transaction is None:
            raise failure("No transaction in progress", database=self._name)
        return transaction


__all__ = ["SqlAlchemyConnectionHandle"]
