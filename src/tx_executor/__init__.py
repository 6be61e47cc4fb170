"""
tx_executor – Transactional unit-of-work executor.

Import path convention::

    from tx_executor.application.transaction import TransactionExecutor
    from tx_executor.kernel.database import DatabaseHandle, DatabaseRegistry
    from tx_executor.kernel.errors import ValidationError
    from tx_executor.adapters.sqlalchemy import SqlAlchemyConnectionHandle
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
