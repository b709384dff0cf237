"""Core primitives: the shared handle and its counter cells."""

from sharedbox.core.box import (
    AllocationError,
    NullAccessError,
    SharedBox,
    SharedBoxError,
)
from sharedbox.core.counter import LockedRefCount, RefCount, allocate_counter

__all__ = [
    # Handle
    "SharedBox",
    # Errors
    "SharedBoxError",
    "NullAccessError",
    "AllocationError",
    # Counters
    "RefCount",
    "LockedRefCount",
    "allocate_counter",
]
