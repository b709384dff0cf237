"""Shared reference counter cells.

A counter cell is the one object every handle of a sharing group aliases.
Besides the live-handle count it carries the group's deleter, which is run
on the value when the count drops to zero.

Usage:
    cell = allocate_counter()
    cell.increment()
    if cell.decrement() == 0:
        ...  # last holder gone
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any

from sharedbox.config import get_settings

Deleter = Callable[[Any], None]


class RefCount:
    """Plain counter cell for single-threaded use.

    Args:
        deleter: Optional callable run on the value when the group is released.
    """

    __slots__ = ("_count", "deleter")

    def __init__(self, deleter: Deleter | None = None) -> None:
        self._count = 1
        self.deleter = deleter

    @property
    def count(self) -> int:
        """Number of live handles in the group."""
        return self._count

    def increment(self) -> int:
        """Register one more holder and return the new count."""
        self._count += 1
        return self._count

    def decrement(self) -> int:
        """Drop one holder and return the new count.

        Raises:
            RuntimeError: If the count is already zero.
        """
        if self._count <= 0:
            raise RuntimeError("Reference count underflow")
        self._count -= 1
        return self._count

    def __repr__(self) -> str:
        return f"{type(self).__name__}(count={self._count})"


class LockedRefCount(RefCount):
    """Counter cell whose updates are serialized by a lock.

    Only the count itself is protected; handles racing on the same
    SharedBox still need external synchronization.
    """

    __slots__ = ("_lock",)

    def __init__(self, deleter: Deleter | None = None) -> None:
        super().__init__(deleter)
        self._lock = threading.Lock()

    def increment(self) -> int:
        with self._lock:
            return super().increment()

    def decrement(self) -> int:
        with self._lock:
            return super().decrement()


def allocate_counter(deleter: Deleter | None = None) -> RefCount:
    """Allocate a fresh counter cell set to 1.

    The cell type follows ``SharedBoxSettings.thread_safe``.

    Args:
        deleter: Deleter attached to the new group.

    Returns:
        A new counter cell.
    """
    if get_settings().thread_safe:
        return LockedRefCount(deleter)
    return RefCount(deleter)
