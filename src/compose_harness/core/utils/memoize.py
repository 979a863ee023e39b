"""Thread-safe one-shot memoization."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class Memoized(Generic[T]):
    """Compute a value at most once and hand the same value to every caller.

    The supplier runs under a lock on first access, so concurrent first callers
    wait for the in-flight computation and then reuse its result. A supplier
    that raises leaves the value unresolved: the exception goes to the caller
    that triggered it and the next access runs the supplier again.

    Args:
        supplier: Zero-argument callable producing the value.

    Example:
        >>> ports = Memoized(lambda: compose.ports(name="db"))
        >>> ports.get() is ports.get()
        True
    """

    def __init__(self, supplier: Callable[[], T]) -> None:
        self._supplier = supplier
        self._lock = threading.Lock()
        self._resolved = False
        self._value: T | None = None

    @property
    def is_resolved(self) -> bool:
        """True once the supplier has returned successfully."""
        return self._resolved

    def get(self) -> T:
        """Return the memoized value, computing it on first access."""
        if not self._resolved:
            with self._lock:
                if not self._resolved:
                    self._value = self._supplier()
                    self._resolved = True
        return self._value  # type: ignore[return-value]


__all__ = ["Memoized"]
