"""Unit tests for the SQLAlchemy adapter — SqlAlchemyConnectionHandle.

Uses an in-memory SQLite database — no running server needed.
"""
from __future__ import annotations

import pytest
from sqlalchemy import Column, Integer, MetaData, String, Table, create_engine, func, insert, select
from sqlalchemy.exc import InvalidRequestError

from tx_executor.adapters.sqlalchemy import SqlAlchemyConnectionHandle
from tx_executor.application.transaction import TransactionExecutor
from tx_executor.kernel.database import DatabaseRegistry
from tx_executor.kernel.errors import BeginFailure, CommitFailure, RollbackFailure, ValidationError

metadata = MetaData()

items = Table(
    "items",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(100), nullable=False),
)


@pytest.fixture
def handle():
    engine = create_engine("sqlite://")
    connection = engine.connect()
    metadata.create_all(connection)
    connection.commit()
    db = SqlAlchemyConnectionHandle(connection, name="main")
    yield db
    db.close()
    engine.dispose()


def _count(db: SqlAlchemyConnectionHandle) -> int:
    return db.execute(select(func.count()).select_from(items)).scalar_one()


class TestProtocolAgainstSqlite:
    def test_commit_persists_rows(self, handle: SqlAlchemyConnectionHandle) -> None:
        def work() -> int:
            handle.execute(insert(items), [{"name": "a"}, {"name": "b"}])
            return 2

        assert TransactionExecutor.create(handle, work).execute() == 2
        assert not handle.in_transaction
        assert _count(handle) == 2

    def test_rollback_discards_rows(self, handle: SqlAlchemyConnectionHandle) -> None:
        def work() -> None:
            handle.execute(insert(items), {"name": "a"})
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            TransactionExecutor.create(handle, work).execute()
        assert _count(handle) == 0

    def test_excluded_failure_keeps_rows(self, handle: SqlAlchemyConnectionHandle) -> None:
        def work() -> None:
            handle.execute(insert(items), {"name": "a"})
            raise ValidationError("late validation")

        with pytest.raises(ValidationError):
            TransactionExecutor.create(handle, work).exclude_from_rollback(ValidationError).execute()
        assert _count(handle) == 1

    def test_group_name_with_engine_factory(self) -> None:
        engine = create_engine("sqlite://")
        registry = DatabaseRegistry()
        registry.register_factory("main", lambda: SqlAlchemyConnectionHandle.from_engine(engine, name="main"))
        db = registry.resolve("main")
        assert isinstance(db, SqlAlchemyConnectionHandle)

        def work() -> int:
            metadata.create_all(db.connection)
            db.execute(insert(items), {"name": "a"})
            return _count(db)

        assert TransactionExecutor.create("main", work, registry=registry).execute() == 1
        db.close()
        engine.dispose()


class TestDriverFailures:
    def test_begin_inside_open_transaction_raises_begin_failure(
        self, handle: SqlAlchemyConnectionHandle
    ) -> None:
        handle.connection.begin()
        with pytest.raises(BeginFailure) as info:
            handle.begin()
        assert isinstance(info.value.cause, InvalidRequestError)
        assert info.value.database == "main"

    def test_commit_without_begin_raises(self, handle: SqlAlchemyConnectionHandle) -> None:
        with pytest.raises(CommitFailure, match="No transaction in progress"):
            handle.commit()

    def test_rollback_without_begin_raises(self, handle: SqlAlchemyConnectionHandle) -> None:
        with pytest.raises(RollbackFailure):
            handle.rollback()

    def test_handle_resets_after_commit(self, handle: SqlAlchemyConnectionHandle) -> None:
        handle.begin()
        assert handle.in_transaction
        handle.commit()
        assert not handle.in_transaction
        with pytest.raises(CommitFailure):
            handle.commit()
