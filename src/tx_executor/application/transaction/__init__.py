"""Transaction executor – run a unit of work inside a database transaction."""
from tx_executor.application.transaction.exclusion import (
    FailureKind,
    RollbackExclusionPolicy,
    failure_kind,
)
from tx_executor.application.transaction.executor import (
    TransactionExecutor,
    TransactionState,
    describe_work,
)
from tx_executor.application.transaction.decorators import transactional
from tx_executor.application.transaction.factory import TransactionFactory

__all__ = [
    "FailureKind",
    "RollbackExclusionPolicy",
    "TransactionExecutor",
    "TransactionFactory",
    "TransactionState",
    "describe_work",
    "failure_kind",
    "transactional",
]
