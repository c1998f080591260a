"""Helpers for tuples of strings."""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence


def ceil_div(i: int, j: int) -> int:
    """Return ``i / j`` rounded up, for non-negative ``i`` and positive ``j``."""
    return (i + j - 1) // j


def format_tuple(values: Iterable[str]) -> str:
    """Join the values of a tuple with tabs."""
    return "\t".join(values)


def sort_tuples(tuples: Iterable[Sequence[str]]) -> list[Sequence[str]]:
    """Return the tuples in lexicographic order."""
    return sorted(tuples, key=tuple)


def shuffle_tuples(tuples: list, rng: random.Random | None = None) -> None:
    """Shuffle the list in place."""
    rng = rng or random.Random()
    for i in range(len(tuples)):
        j = rng.randrange(i + 1)
        tuples[i], tuples[j] = tuples[j], tuples[i]


def split_folds(tuples: Sequence, n: int, rng: random.Random | None = None) -> list[list]:
    """Shuffle the tuples and split them into ``n`` folds of near-equal size."""
    if n <= 0:
        raise ValueError("number of folds must be positive")
    shuffled = list(tuples)
    shuffle_tuples(shuffled, rng)
    size = ceil_div(len(shuffled), n)
    return [shuffled[j * size:(j + 1) * size] for j in range(n)]