"""Command that shows the container and its traversal orders."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from typing import Any

from orderbox.container import ElementNotFoundError, OrderedContainer


def _joined(items: Iterable[Any]) -> str:
    return "".join(f"{item} " for item in items)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration and return the exit status."""
    parser = argparse.ArgumentParser(
        prog="orderbox-demo",
        description="Show a container walked in each traversal order.",
    )
    parser.parse_args(argv)

    container = OrderedContainer()
    print(f"Initial size: {len(container)}")

    print("\nAdding elements: 7, 15, 6, 1, 2")
    for value in (7, 15, 6, 1, 2):
        container.add(value)

    print(f"Container after insertions: {container}")
    print(f"Size: {len(container)}")

    print()
    print("Ascending order: " + _joined(container.ascending()))
    print("Descending order: " + _joined(container.descending()))
    print("Side-cross order: " + _joined(container.side_cross()))
    print("Reverse order: " + _joined(container.reverse()))
    print("Insertion order: " + _joined(container.insertion()))
    print("Middle-out order: " + _joined(container.middle_out()))

    print("\nRemoving element 6...")
    container.remove(6)
    print(f"After removal: {container}")

    try:
        print("Trying to remove element 100...")
        container.remove(100)
    except ElementNotFoundError as exc:
        print(f"Caught exception: {exc}")

    empty = OrderedContainer()
    print("\nTesting empty container...")
    print(f"Size: {len(empty)}")
    print(f"Elements: {empty}")
    print("Middle-out on empty: " + _joined(empty.middle_out()))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())