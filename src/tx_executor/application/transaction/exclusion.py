"""Rollback-exclusion policy – decide whether a failure still commits.

A failure kind is either an exception class or a string.  Classes match by
``isinstance`` so a configured ancestor covers all of its subclasses.
Strings are matched against every class in the failure's MRO by simple
name, by ``module.QualName`` and by the ``default_code`` a
:class:`~tx_executor.kernel.errors.BaseError` subclass declares, which
gives settings files a way to name categories::

    policy = RollbackExclusionPolicy.of(ValidationError, "conflict")
    policy.is_excluded(ValidationError("bad input"))   # True
"""
from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from typing import Union

from tx_executor.config.validation import ConfigurationError

FailureKind = Union[type[BaseException], str]


def failure_kind(failure: BaseException) -> str:
    """Tag used in log entries: bare name for builtins, ``module.QualName`` otherwise."""
    cls = type(failure)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def _names_of(cls: type) -> set[str]:
    names = {cls.__name__, f"{cls.__module__}.{cls.__qualname__}"}
    code = vars(cls).get("default_code")
    if isinstance(code, str):
        names.add(code)
    return names


def _check_kind(kind: object) -> FailureKind:
    if isinstance(kind, type) and issubclass(kind, BaseException):
        return kind
    if isinstance(kind, str) and kind.strip():
        return kind.strip()
    raise ConfigurationError(
        f"Rollback exclusion entries must be exception classes or names, got {kind!r}"
    )


@dataclasses.dataclass(frozen=True)
class RollbackExclusionPolicy:
    """Ordered, immutable set of failure kinds that commit instead of rolling back."""

    kinds: tuple[FailureKind, ...] = ()

    def __post_init__(self) -> None:
        checked: list[FailureKind] = []
        for kind in self.kinds:
            kind = _check_kind(kind)
            if kind not in checked:
                checked.append(kind)
        object.__setattr__(self, "kinds", tuple(checked))

    @classmethod
    def of(
        cls, *kinds: "FailureKind | Iterable[FailureKind] | RollbackExclusionPolicy"
    ) -> "RollbackExclusionPolicy":
        """Build from positional kinds, a single iterable of kinds, or an existing policy."""
        if len(kinds) == 1 and isinstance(kinds[0], RollbackExclusionPolicy):
            return kinds[0]
        if len(kinds) == 1 and isinstance(kinds[0], Iterable) and not isinstance(kinds[0], (str, type)):
            return cls(tuple(kinds[0]))  # type: ignore[arg-type]
        return cls(tuple(kinds))  # type: ignore[arg-type]

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "RollbackExclusionPolicy":
        return cls(tuple(names))

    def match(self, failure: BaseException) -> FailureKind | None:
        """Return the first configured kind *failure* falls under, or ``None``."""
        mro_names: set[str] | None = None
        for kind in self.kinds:
            if isinstance(kind, str):
                if mro_names is None:
                    mro_names = set().union(*(_names_of(c) for c in type(failure).__mro__))
                if kind in mro_names:
                    return kind
            elif isinstance(failure, kind):
                return kind
        return None

    def is_excluded(self, failure: BaseException) -> bool:
        return self.match(failure) is not None

    def __bool__(self) -> bool:
        return bool(self.kinds)

    def __len__(self) -> int:
        return len(self.kinds)


__all__ = ["FailureKind", "RollbackExclusionPolicy", "failure_kind"]
