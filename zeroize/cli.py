"""Command that demonstrates zeroizing records in memory."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from .memory import ZeroizeError, is_zeroized, zeroize
from .record import Object


def _show(obj: Object) -> None:
    print(f"Object ID: {obj.id}")
    print(f"Object Data: {obj.data}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration; return 0 on success and 1 on failure."""
    parser = argparse.ArgumentParser(
        prog="zeroize", description="Zeroize record memory and verify it."
    )
    parser.parse_args(argv)

    print("Welcome to Zeroize MVP!")
    print("This is a simple application.")

    obj = Object()
    _show(obj)
    try:
        zeroize(obj.buffer)
    except ZeroizeError:
        print("Error zeroizing object!", file=sys.stderr)
        return 1
    if not is_zeroized(obj.buffer):
        print("Object is not zeroized!", file=sys.stderr)
        return 1

    print()

    obj1 = Object()
    _show(obj1)
    try:
        zeroize(obj1.buffer)
    except ZeroizeError:
        print("Error zeroizing object1!", file=sys.stderr)
        return 1
    if not is_zeroized(obj1.buffer):
        print("Object1 is not zeroized!", file=sys.stderr)
        return 1

    obj1.reset()
    print("Object1 reinitialized.")
    obj1.id = 99887733
    obj1.data = 11223344
    print(f"Object1 ID after reinitialization: {obj1.id}")
    print(f"Object1 Data after reinitialization: {obj1.data}")
    return 0


if __name__ == "__main__":
    sys.exit(main())