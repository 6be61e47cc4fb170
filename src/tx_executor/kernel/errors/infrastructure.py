"""Infrastructure errors – failures surfaced by database handles."""

from __future__ import annotations

from typing import Any

from tx_executor.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class TransactionError(InfrastructureError):
    """A transaction control operation failed on the database handle."""

    default_code = "transaction_error"
    operation: str = "transaction"

    def __init__(
        self,
        message: str | None = None,
        *,
        database: str | None = None,
        **kwargs: Any,
    ) -> None:
        target = f" on '{database}'" if database else ""
        super().__init__(message or f"Failed to {self.operation} transaction{target}", **kwargs)
        self.database = database


class BeginFailure(TransactionError):
    """``begin`` failed; no transaction was opened."""

    default_code = "begin_failure"
    operation = "begin"


class CommitFailure(TransactionError):
    """``commit`` failed; the transaction state is left to the driver."""

    default_code = "commit_failure"
    operation = "commit"


class RollbackFailure(TransactionError):
    """``rollback`` failed."""

    default_code = "rollback_failure"
    operation = "roll back"


__all__ = [
    "BeginFailure",
    "CommitFailure",
    "InfrastructureError",
    "RollbackFailure",
    "TransactionError",
]
