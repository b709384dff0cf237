"""Walk through the SharedBox lifecycle, printing counts and values.

Run with ``python -m sharedbox``. Set ``SHAREDBOX_LOG_LEVEL=DEBUG`` to also
see release and fork records.
"""

from __future__ import annotations

from dataclasses import dataclass

from sharedbox.config import configure_logging
from sharedbox.core import NullAccessError, SharedBox


@dataclass
class Point:
    x: int = 2
    y: int = -5


def int_lifecycle() -> None:
    """Copy, scope exit, assignment and move of a boxed int."""
    sp1 = SharedBox(42)
    print(f"Ref count is {sp1.ref_count()}")

    with SharedBox.copy_of(sp1) as sp2:
        print(f"Ref count is {sp1.ref_count()}")
        print(f"Ref count is {sp2.ref_count()}")
    print(f"Ref count is {sp1.ref_count()}")

    sp3: SharedBox[int] = SharedBox()
    print(f"Ref count is {sp3.ref_count()}")

    sp3.assign(sp1)
    print(f"Ref count is {sp1.ref_count()}")
    print(f"Ref count is {sp3.ref_count()}")

    sp4 = SharedBox.move_from(sp1)
    print(f"{sp4.get()} {sp3.get()}")
    try:
        print(sp1.get())
    except NullAccessError as e:
        print(f"NullAccessError: {e}")


def member_access() -> None:
    """Reach the members of a boxed object."""
    sp = SharedBox(Point())
    print(f"{sp.target().x} {sp.target().y}")


def clone_on_write() -> None:
    """Chain-assign one float to three handles, then fork the first."""
    dsp1 = SharedBox(3.14)
    dsp2: SharedBox[float] = SharedBox()
    dsp3: SharedBox[float] = SharedBox()

    dsp3.assign(dsp2.assign(dsp1))
    print(f"{dsp1.ref_count()} {dsp2.ref_count()} {dsp3.ref_count()}")
    print(f"{dsp1.get()} {dsp2.get()} {dsp3.get()}")

    print(f"clone() -> {dsp1.clone()}")
    print(f"{dsp1.ref_count()} {dsp2.ref_count()} {dsp3.ref_count()}")
    print(f"{dsp1.get()} {dsp2.get()} {dsp3.get()}")


def main() -> None:
    configure_logging()
    int_lifecycle()
    member_access()
    clone_on_write()


if __name__ == "__main__":
    main()
