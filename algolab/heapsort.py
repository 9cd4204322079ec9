"""Heap sort that counts the comparisons it makes, with a random benchmark runner."""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path

MAX_LENGTH = 50
ROUNDS = 10
LOW, HIGH = 10, 1_000_000


def _violates(heap: list[int], length: int, k: int) -> bool:
    return any(c < length and heap[k] < heap[c] for c in (2 * k + 1, 2 * k + 2))


def build_max_heap(heap: list[int], length: int, count: int = 0) -> int:
    """Arrange heap[:length] in place so its maximum is at index 0.

    Returns count plus the comparisons made in this pass. When a swap breaks
    the heap order below it, the whole prefix is rebuilt; comparisons made
    during such a rebuild are not added.
    """
    for i in range(length // 2 - 1, -1, -1):
        for child in (2 * i + 1, 2 * i + 2):
            count += 1
            if child < length and heap[i] < heap[child]:
                heap[i], heap[child] = heap[child], heap[i]
                count += 1
                if _violates(heap, length, child):
                    build_max_heap(heap, length, 0)
    return count


def heap_sort(values: list[int]) -> tuple[list[int], int]:
    """Return the values sorted ascending and the number of comparisons made."""
    items = list(values)
    count = 0
    for size in range(len(items), 0, -1):
        count = build_max_heap(items, size, count)
        items[0], items[size - 1] = items[size - 1], items[0]
    return items, count


def random_values(count: int, rng: random.Random | None = None) -> list[int]:
    """Return count random integers between 10 and 1,000,000 inclusive."""
    if count < 0:
        raise ValueError("count must not be negative")
    rng = rng or random.Random()
    return [rng.randint(LOW, HIGH) for _ in range(count)]


def _join(values: list[int]) -> str:
    return "".join(f"{v} " for v in values)


def main(argv: list[str] | None = None) -> int:
    """Sort several random arrays and write a comparison report to a file."""
    parser = argparse.ArgumentParser(description="Heap sort comparison benchmark.")
    parser.add_argument("--length", type=int, help=f"array length (at most {MAX_LENGTH})")
    parser.add_argument("--output", default="tets.txt", help="report file")
    parser.add_argument("--seed", type=int, help="random seed")
    args = parser.parse_args(argv)

    length = args.length
    if length is None:
        try:
            length = int(input(f"Array length (at most {MAX_LENGTH}): "))
        except ValueError as error:
            print(f"error: {error}", file=sys.stderr)
            return 2
    if not 0 <= length <= MAX_LENGTH:
        print(f"error: length must be between 0 and {MAX_LENGTH}", file=sys.stderr)
        return 2

    rng = random.Random(args.seed)
    total = 0
    with Path(args.output).open("w", encoding="utf-8") as report:
        report.write("...results...\n")
        for _ in range(ROUNDS):
            values = random_values(length, rng)
            print(f"****generated: {_join(values)}")
            report.write(f"before: {_join(values)}\n")
            ordered, comparisons = heap_sort(values)
            print(f"total comparisons: {comparisons}")
            total += comparisons
            report.write(f"after: {_join(ordered)}\n")
            report.write(f"comparisons this round: {comparisons}\n")
            report.write("\n---------------------------------\n")
        report.write("\n--------------end-----------------\n")
        report.write(f"\naverage comparisons: {total // ROUNDS}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())