"""Database registry – resolve a named database group into a handle."""

from __future__ import annotations

from typing import Callable

from tx_executor.config.validation import ConfigurationError, UnknownDatabaseError
from tx_executor.kernel.database.port import DatabaseHandle

HandleFactory = Callable[[], DatabaseHandle]


class DatabaseRegistry:
    """Named database groups, registered up front and resolved on demand.

    A group is either a ready handle or a factory; a factory runs on the first
    :meth:`resolve` and its handle is cached for every later lookup.  The
    registry is populated at start-up and then only read.
    """

    def __init__(self) -> None:
        self._handles: dict[str, DatabaseHandle] = {}
        self._factories: dict[str, HandleFactory] = {}

    def register(self, name: str, handle: DatabaseHandle) -> None:
        self._check_name(name)
        self._factories.pop(name, None)
        self._handles[name] = handle

    def register_factory(self, name: str, factory: HandleFactory) -> None:
        self._check_name(name)
        self._handles.pop(name, None)
        self._factories[name] = factory

    def resolve(self, name: str) -> DatabaseHandle:
        """Return the handle for *name*.

        Raises
        ------
        UnknownDatabaseError
            When nothing is registered under *name*.
        """
        handle = self._handles.get(name)
        if handle is not None:
            return handle
        factory = self._factories.get(name)
        if factory is None:
            raise UnknownDatabaseError(name)
        # a failing factory stays registered so the next resolve retries it
        handle = factory()
        self._handles[name] = handle
        del self._factories[name]
        return handle

    def names(self) -> list[str]:
        return sorted({*self._handles, *self._factories})

    def __contains__(self, name: object) -> bool:
        return name in self._handles or name in self._factories

    @staticmethod
    def _check_name(name: str) -> None:
        if not isinstance(name, str) or not name:
            raise ConfigurationError(f"Database group name must be a non-empty string, got {name!r}")


__all__ = ["DatabaseRegistry", "HandleFactory"]
