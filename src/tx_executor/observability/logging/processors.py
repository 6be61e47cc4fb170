"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


def add_error_code(
    logger: Any,           # noqa: ARG001
    method_name: str,      # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """structlog processor: expand an ``error`` field carrying a ``BaseError``.

    Errors from the kernel hierarchy contribute ``error_code`` so log
    consumers can filter on the machine-readable slug.
    """
    error = event_dict.get("error")
    code = getattr(error, "code", None)
    if isinstance(code, str):
        event_dict.setdefault("error_code", code)
    return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["add_error_code", "get_logger"]
