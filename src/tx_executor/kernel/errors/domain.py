"""Work failures – errors raised by units of work themselves.

Any exception escaping a unit of work is a work failure; these classes are a
convenient root for application-defined failure kinds so that exclusion
policies can name a whole category at once.
"""

from __future__ import annotations

from typing import Any

from tx_executor.kernel.errors.base import BaseError


class WorkFailure(BaseError):
    """Raised by a unit of work to report a business-level failure."""

    default_code = "work_failure"


class ValidationError(WorkFailure):
    """Input data does not meet validation rules.

    Commonly excluded from rollback: writes done before the validation step
    remain valid on their own.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class ConflictError(WorkFailure):
    """The operation conflicts with existing state."""

    default_code = "conflict"


__all__ = ["ConflictError", "ValidationError", "WorkFailure"]
