"""Sorting, string reversal, star pyramids and the Tower of Hanoi."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

__all__ = ["bubble_sort", "reverse_string", "pyramid", "hanoi_moves"]


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return a new list holding values in ascending order, sorted by bubble sort."""
    items = list(values)
    for unsorted_end in range(len(items) - 1, 0, -1):
        for j in range(unsorted_end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def reverse_string(text: str) -> str:
    """Return text with its characters in reverse order."""
    return text[::-1]


def pyramid(rows: int) -> list[str]:
    """Return the lines of a centred star pyramid with the given number of rows."""
    return ["  " * (rows - level) + "* " * (2 * level - 1) for level in range(1, rows + 1)]


def hanoi_moves(
    n: int, source: str = "S", spare: str = "H", target: str = "D"
) -> Iterator[tuple[int, str, str]]:
    """Yield (disk, from_peg, to_peg) moves that carry n disks from source to target."""
    if n < 1:
        raise ValueError("the number of disks must be at least 1")
    return _hanoi(n, source, spare, target)


def _hanoi(n: int, source: str, spare: str, target: str) -> Iterator[tuple[int, str, str]]:
    if n == 1:
        yield (1, source, target)
        return
    yield from _hanoi(n - 1, source, target, spare)
    yield (n, source, target)
    yield from _hanoi(n - 1, spare, source, target)