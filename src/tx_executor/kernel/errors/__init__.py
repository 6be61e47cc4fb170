"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── WorkFailure              (domain.py)
    │   ├── ValidationError
    │   └── ConflictError
    ├── ApplicationError         (application.py)
    │   ├── ConfigurationError   (tx_executor.config.validation)
    │   ├── InvalidCallableError
    │   └── MisuseError
    └── InfrastructureError      (infrastructure.py)
        └── TransactionError
            ├── BeginFailure
            ├── CommitFailure
            └── RollbackFailure
"""

from tx_executor.kernel.errors.application import (
    ApplicationError,
    InvalidCallableError,
    MisuseError,
)
from tx_executor.kernel.errors.base import BaseError
from tx_executor.kernel.errors.domain import ConflictError, ValidationError, WorkFailure
from tx_executor.kernel.errors.infrastructure import (
    BeginFailure,
    CommitFailure,
    InfrastructureError,
    RollbackFailure,
    TransactionError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "BeginFailure",
    "CommitFailure",
    "ConflictError",
    "InfrastructureError",
    "InvalidCallableError",
    "MisuseError",
    "RollbackFailure",
    "TransactionError",
    "ValidationError",
    "WorkFailure",
]
