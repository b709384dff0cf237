"""sharedbox: reference-counted handles with copy-on-write cloning.

Usage:
    from sharedbox import SharedBox

    a = SharedBox(3.14)
    b = SharedBox.copy_of(a)
    c = SharedBox().assign(b)
    assert a.ref_count() == 3

    c.clone()   # c gets a private copy
    assert (a.ref_count(), c.ref_count()) == (2, 1)
"""

__version__ = "0.1.0"

# Core primitives
from sharedbox.core import (
    AllocationError,
    LockedRefCount,
    NullAccessError,
    RefCount,
    SharedBox,
    SharedBoxError,
)

# Configuration
from sharedbox.config import SharedBoxSettings, configure_logging, get_settings

__all__ = [
    # Version
    "__version__",
    # Core
    "SharedBox",
    "RefCount",
    "LockedRefCount",
    # Errors
    "SharedBoxError",
    "NullAccessError",
    "AllocationError",
    # Config
    "SharedBoxSettings",
    "get_settings",
    "configure_logging",
]
