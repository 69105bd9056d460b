"""A base class for objects that have at most one live instance per class."""

from __future__ import annotations

import threading
from typing import TypeVar

_S = TypeVar("_S", bound="Singleton")

_instances: dict[type, Singleton] = {}
_lock = threading.Lock()


class Singleton:
    """Registers each instance as the single live instance of its class.

    Creating a second instance while one is alive raises ``RuntimeError``.
    ``get`` returns the live instance and ``release`` gives up the slot so a
    new instance may be created.
    """

    def __init__(self) -> None:
        cls = type(self)
        with _lock:
            if cls in _instances:
                raise RuntimeError(f"an instance of {cls.__name__} already exists")
            _instances[cls] = self

    @classmethod
    def get(cls: type[_S]) -> _S:
        """Return the live instance of this class."""
        try:
            return _instances[cls]  # type: ignore[return-value]
        except KeyError:
            raise LookupError(f"no instance of {cls.__name__} exists") from None

    def release(self) -> None:
        """Stop being the live instance of this class."""
        cls = type(self)
        with _lock:
            if _instances.get(cls) is self:
                del _instances[cls]

    def __enter__(self: _S) -> _S:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()