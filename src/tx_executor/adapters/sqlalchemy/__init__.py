"""SQLAlchemy adapter – database handle over a SQLAlchemy connection.

Requires the ``sqlalchemy`` extra::

    pip install "tx-executor[sqlalchemy]"
"""
from tx_executor.adapters.sqlalchemy.handle import SqlAlchemyConnectionHandle

__all__ = ["SqlAlchemyConnectionHandle"]
