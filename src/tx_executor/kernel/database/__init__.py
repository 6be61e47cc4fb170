"""Kernel database – handle port and named-group registry."""
from tx_executor.kernel.database.port import DatabaseHandle
from tx_executor.kernel.database.registry import DatabaseRegistry, HandleFactory

__all__ = ["DatabaseHandle", "DatabaseRegistry", "HandleFactory"]
