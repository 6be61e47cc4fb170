"""Application layer – the transactional executor and its conveniences."""
from tx_executor.application.transaction import (
    RollbackExclusionPolicy,
    TransactionExecutor,
    TransactionFactory,
    transactional,
)

__all__ = ["RollbackExclusionPolicy", "TransactionExecutor", "TransactionFactory", "transactional"]
