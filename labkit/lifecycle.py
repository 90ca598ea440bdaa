"""Demonstrations of object lifetimes: creation, containers and shared references."""

from __future__ import annotations

import copy
import sys
from collections import deque
from collections.abc import Callable
from typing import TypeVar

from labkit.clock_time import Time

_T = TypeVar("_T")

_GREEN = "\033[0;32m"
_RESET = "\033[0m"


def _echo_green(text: str) -> None:
    print(f"{_GREEN}{text}{_RESET}")


def run_task(task: Callable[[], _T], message: str) -> _T:
    """Run a task between green start and end banners; return its result."""
    _echo_green(f"Start of {message}")
    result = task()
    _echo_green(f"End of {message}")
    return result


def demo_bulk_creation() -> list[int]:
    """Create a single Time, then a batch of three, releasing each in turn.

    Returns the number of live instances above the starting count, observed
    after each creation and after each release.
    """
    baseline = Time.live_count()
    observed = []

    single = Time()
    observed.append(Time.live_count() - baseline)
    del single
    observed.append(Time.live_count() - baseline)

    batch = [Time() for _ in range(3)]
    observed.append(Time.live_count() - baseline)
    del batch
    observed.append(Time.live_count() - baseline)

    return observed


def _fill_vector() -> list[str]:
    t1 = Time(1, 2, 3)
    t2 = Time(2, 3, 4)
    print("Before creating the container")
    times: list[Time] = []
    print("Container created")
    times.append(copy.copy(t1))
    print("Element 1 added")
    times.append(copy.copy(t2))
    print("Element 2 added")
    times.append(Time(2, 2, 2))
    print("Element 3 added")
    return [str(t) for t in times]


def _fill_list() -> list[str]:
    t1 = Time(1, 2, 3)
    t2 = Time(2, 3, 4)
    print("Before creating the list")
    times: list[Time] = []
    print("List created")
    times.append(copy.copy(t1))
    print("Element 1 added")
    times.append(copy.copy(t2))
    print("Element 2 added")
    times.append(Time(3, 3, 3))
    print("Element 3 added")
    return [str(t) for t in times]


def _fill_deque() -> list[str]:
    t1 = Time(1, 2, 3)
    t2 = Time(2, 3, 4)
    print("Before creating the deque")
    times: deque[Time] = deque()
    print("Deque created")
    times.append(copy.copy(t1))
    print("Element 1 added at the back")
    times.appendleft(copy.copy(t2))
    print("Element 2 added at the front")
    times.append(Time(3, 3, 3))
    print("Element 3 added at the back")
    return [str(t) for t in times]


def demo_containers() -> dict[str, list[str]]:
    """Fill a vector-like list, a list and a deque with copies of times.

    Returns the contents of each container, in order, as 'h:m:s' strings.
    All instances are released once the containers go out of scope.
    """
    return {
        "vector": _fill_vector(),
        "list": _fill_list(),
        "deque": _fill_deque(),
    }


def _demo_shared_references() -> int:
    """Hold times through single and shared references; return how many were held."""
    owned = Time()
    shared = Time()
    also_shared = shared
    batch = [Time() for _ in range(4)]
    held = 1 + len({id(shared), id(also_shared)}) + len(batch)
    del owned, shared, also_shared, batch
    return held


def main(argv: list[str] | None = None) -> int:
    """Run every lifetime demonstration in turn."""
    run_task(demo_bulk_creation, "basic usage")
    run_task(_fill_vector, "list (vector) usage")
    run_task(_fill_list, "list usage")
    run_task(_fill_deque, "deque usage")
    run_task(_demo_shared_references, "shared references usage")
    return 0


if __name__ == "__main__":
    sys.exit(main())