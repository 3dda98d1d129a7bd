"""Vector exercises: building lists and doubling their elements."""

from __future__ import annotations

from collections.abc import Iterable


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed-size tuple and a list holding the same elements."""
    fixed = (10, 20, 30, 40)
    return fixed, list(fixed)


def vec_loop(values: Iterable[int]) -> list[int]:
    """Each element multiplied by 2, written as a loop."""
    doubled = []
    for value in values:
        doubled.append(value * 2)
    return doubled


def vec_map(values: Iterable[int]) -> list[int]:
    """Each element multiplied by 2, written as a mapping."""
    factor = 2
    return [value * factor for value in values]