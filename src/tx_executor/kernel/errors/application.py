"""Application-layer errors – misuse of the executor API."""

from __future__ import annotations

from typing import Any

from tx_executor.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class InvalidCallableError(ApplicationError):
    """The bound unit of work cannot be invoked."""

    default_code = "invalid_callable"

    def __init__(self, work: Any, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"Unit of work {work!r} is not callable", **kwargs)
        self.work = work


class MisuseError(ApplicationError):
    """An executor was used outside its single-use lifecycle."""

    default_code = "misuse"


__all__ = ["ApplicationError", "InvalidCallableError", "MisuseError"]
