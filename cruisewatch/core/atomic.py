"""Atomic reference — single-writer, many-reader publication of immutable values.

Readers calling ``get()`` observe either the value before or after a
``set()``, never a mix.  The lock guards only the reference itself; it is
never held across I/O or callbacks.  Stored values must be immutable
(frozen Pydantic models) so that publishing the reference publishes the
whole value.
"""

from __future__ import annotations

import threading
from typing import Generic, TypeVar

T = TypeVar("T")


class AtomicReference(Generic[T]):
    """Holds one immutable value that can be swapped as a unit.

    Parameters
    ----------
    initial:
        The value readers see before the first ``set()``.
    """

    def __init__(self, initial: T) -> None:
        self._lock = threading.Lock()
        self._value = initial

    def get(self) -> T:
        """Return the currently published value."""
        with self._lock:
            return self._value

    def set(self, value: T) -> None:
        """Publish *value*, replacing the previous one."""
        with self._lock:
            self._value = value
