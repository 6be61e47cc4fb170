"""Observability – structured logging ports and helpers."""
from tx_executor.observability.logging.protocol import Logger
from tx_executor.observability.logging.factory import JsonLoggerFactory
from tx_executor.observability.logging.processors import add_error_code, get_logger

__all__ = [
    "JsonLoggerFactory",
    "Logger",
    "add_error_code",
    "get_logger",
]
