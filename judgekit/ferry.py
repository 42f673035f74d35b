"""Count the river crossings a ferry makes to carry every car."""

from __future__ import annotations

import sys
from collections import deque
from typing import Iterable, Sequence, TextIO


def load_trip(queue: deque[int], capacity: int) -> int:
    """Load cars from the front of *queue* while they fit; return the length loaded."""
    loaded = 0
    while queue and loaded + queue[0] <= capacity:
        loaded += queue.popleft()
    return loaded


def count_trips(ferry_length_m: int, cars: Iterable[tuple[int, str]]) -> int:
    """Return how many crossings carry every car, starting on the left bank.

    *cars* holds (length in centimetres, bank) pairs in arrival order; any
    bank other than "right" counts as left.
    """
    capacity = ferry_length_m * 100
    left: deque[int] = deque()
    right: deque[int] = deque()
    for length, bank in cars:
        if length > capacity:
            raise ValueError(
                f"car of {length} cm never fits a ferry of {capacity} cm"
            )
        (right if bank == "right" else left).append(length)

    banks = (left, right)
    side = 0
    trips = 0
    while left or right:
        load_trip(banks[side], capacity)
        side ^= 1
        trips += 1
    return trips


def solve(stream: TextIO) -> list[int]:
    """Read every test case from *stream* and return the crossing counts."""
    tokens = iter(stream.read().split())
    try:
        case_count = int(next(tokens))
        results = []
        for _ in range(case_count):
            ferry_length = int(next(tokens))
            car_count = int(next(tokens))
            cars = [(int(next(tokens)), next(tokens)) for _ in range(car_count)]
            results.append(count_trips(ferry_length, cars))
    except StopIteration:
        raise ValueError("input ended before all cases were read") from None
    return results


def main(argv: Sequence[str] | None = None) -> int:
    """Print the crossing count for each case on standard input."""
    for trips in solve(sys.stdin):
        print(trips)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())