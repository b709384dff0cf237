"""Reference-counted handle with copy-on-write cloning.

A SharedBox owns its value jointly with every other handle of its sharing
group. The handles of a group alias one value slot and one counter cell;
the value is released (its deleter runs) when the last handle lets go.

Usage:
    a = SharedBox([1, 2, 3])
    b = SharedBox.copy_of(a)      # a.ref_count() == b.ref_count() == 2
    b.clone()                     # b now owns a private deep copy
    b.get().append(4)             # a.get() is still [1, 2, 3]

    with SharedBox.copy_of(a) as c:
        ...                       # c is released on block exit
"""

from __future__ import annotations

import copy as cp
import logging
from collections.abc import Callable
from typing import Any, Generic, Self, TypeVar

from sharedbox.core.counter import Deleter, RefCount, allocate_counter

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SharedBoxError(Exception):
    """Base class for sharedbox errors."""

    pass


class NullAccessError(SharedBoxError):
    """Raised when the value of a null handle is accessed."""

    pass


class AllocationError(SharedBoxError, MemoryError):
    """Raised when the counter cell of a new group cannot be allocated."""

    pass


class _Slot(Generic[T]):
    """Storage for the value shared by one group."""

    __slots__ = ("value",)

    def __init__(self, value: T) -> None:
        self.value = value


class SharedBox(Generic[T]):
    """Shared, optionally null, reference-counted handle to a value.

    ``None`` is not a storable value: ``SharedBox()`` and ``SharedBox(None)``
    both build a null handle.

    Args:
        value: Value to take ownership of, or None for a null handle.
        deleter: Callable run on the value when its group is released.

    Raises:
        AllocationError: If the counter cell cannot be allocated. The value
            has already been released when this propagates.
    """

    __slots__ = ("_slot", "_count")

    def __init__(self, value: T | None = None, *, deleter: Deleter | None = None) -> None:
        self._slot: _Slot[T] | None = None
        self._count: RefCount | None = None
        if value is not None:
            self._adopt(value, deleter)

    def _adopt(self, value: T, deleter: Deleter | None) -> None:
        try:
            count = allocate_counter(deleter)
        except MemoryError as e:
            logger.warning("Counter allocation failed for %s value", type(value).__name__)
            if deleter is not None:
                deleter(value)
            raise AllocationError("Cannot allocate reference counter") from e
        self._slot = _Slot(value)
        self._count = count

    @classmethod
    def from_factory(cls, factory: Callable[[], T], *, deleter: Deleter | None = None) -> Self:
        """Build a temporary value and take ownership of it.

        Exceptions from ``factory`` propagate unchanged. If the counter cannot
        be allocated afterwards, the temporary is released before
        AllocationError propagates.

        Args:
            factory: Zero-argument callable producing the value.
            deleter: Callable run on the value when its group is released.

        Returns:
            Handle owning the new value with count 1.
        """
        return cls(factory(), deleter=deleter)

    @classmethod
    def copy_of(cls, other: SharedBox[T]) -> Self:
        """Create a new alias of other's group (count + 1), or a null handle."""
        box = cls()
        box._share(other)
        return box

    @classmethod
    def move_from(cls, other: SharedBox[T]) -> Self:
        """Create a handle that takes over other's hold; other becomes null."""
        box = cls()
        box._steal(other)
        return box

    def _share(self, other: SharedBox[T]) -> None:
        if other._count is not None:
            other._count.increment()
        self._slot = other._slot
        self._count = other._count

    def _steal(self, other: SharedBox[T]) -> None:
        self._slot, self._count = other._slot, other._count
        other._slot = None
        other._count = None

    def assign(self, other: SharedBox[T]) -> Self:
        """Make this handle an alias of other's group.

        Assigning within one group (self-assignment included) changes nothing.

        Returns:
            This handle, so assignments chain: ``c.assign(b.assign(a))``.
        """
        if self._count is not None and self._count is other._count:
            return self
        self.release()
        self._share(other)
        return self

    def move_assign(self, other: SharedBox[T]) -> Self:
        """Release this handle's group and take over other's hold.

        Moving a handle into itself is a no-op.

        Returns:
            This handle.
        """
        if other is self:
            return self
        self.release()
        self._steal(other)
        return self

    def clone(self) -> bool:
        """Fork a private deep copy if the value is shared.

        The copy is made before the old group is touched, so a failing
        deepcopy leaves every handle as it was.

        Returns:
            False if the handle is null or already exclusive (count <= 1),
            True if this handle now owns a fresh copy with count 1.
        """
        if self._slot is None or self._count is None or self._count.count <= 1:
            return False

        slot = _Slot(cp.deepcopy(self._slot.value))
        count = allocate_counter(self._count.deleter)
        remaining = self._count.decrement()
        logger.debug(
            "Forked %s value, %d holder(s) left in old group",
            type(slot.value).__name__,
            remaining,
        )
        self._slot = slot
        self._count = count
        return True

    def ref_count(self) -> int:
        """Return the number of handles sharing the value, or 0 if null."""
        return 0 if self._count is None else self._count.count

    def _checked_slot(self) -> _Slot[T]:
        if self._slot is None:
            raise NullAccessError("Access through a null SharedBox")
        return self._slot

    def get(self) -> T:
        """Return the shared value.

        Raises:
            NullAccessError: If the handle is null.
        """
        return self._checked_slot().value

    def set(self, value: T) -> None:
        """Replace the value seen by every handle of the group.

        Call clone() first to change only this handle's view.

        Raises:
            NullAccessError: If the handle is null.
        """
        self._checked_slot().value = value

    def target(self) -> T:
        """Return the pointee object for member access, e.g. ``box.target().x``.

        Raises:
            NullAccessError: If the handle is null.
        """
        return self._checked_slot().value

    def release(self) -> None:
        """Drop this handle's hold; release the value if it was the last one.

        The handle is null afterwards. Releasing a null handle does nothing.
        """
        slot, count = self._slot, self._count
        if slot is None or count is None:
            return
        self._slot = None
        self._count = None
        if count.decrement() == 0:
            value = slot.value
            del slot.value
            logger.debug("Released %s value", type(value).__name__)
            if count.deleter is not None:
                count.deleter(value)

    def is_null(self) -> bool:
        """Check whether the handle refers to nothing."""
        return self._count is None

    def shares_with(self, other: SharedBox[Any]) -> bool:
        """Check whether both handles belong to the same sharing group."""
        return self._count is not None and self._count is other._count

    def __bool__(self) -> bool:
        return self._count is not None

    def __copy__(self) -> Self:
        return self.copy_of(self)

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        box = type(self)()
        memo[id(self)] = box
        if self._slot is not None and self._count is not None:
            box._adopt(cp.deepcopy(self._slot.value, memo), self._count.deleter)
        return box

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    def __del__(self) -> None:
        # __init__ may not have run to completion
        if getattr(self, "_count", None) is not None:
            self.release()

    def __repr__(self) -> str:
        if self._slot is None or self._count is None:
            return f"{type(self).__name__}(null)"
        return f"{type(self).__name__}({self._slot.value!r}, ref_count={self._count.count})"
