"""Helpers for lists of strings."""

from __future__ import annotations

import re
from collections.abc import Iterable

_INT = re.compile(r"[+-]?[0-9]+")


def _parse_int(value: str) -> int | None:
    if _INT.fullmatch(value):
        return int(value)
    return None


def to_int_set(values: Iterable[str]) -> set[int]:
    """Convert strings to a set of ints; unparsable strings become 0."""
    result = set()
    for value in values:
        number = _parse_int(value)
        result.add(0 if number is None else number)
    return result


def int_set_to_strings(values: Iterable[int]) -> list[str]:
    """Return the ints sorted numerically, as strings."""
    return [str(v) for v in sorted(values)]


def set_to_list(values: Iterable[str]) -> list[str]:
    """Return a sorted list; numerically sorted if every value is an int."""
    items = list(values)
    numbers = set()
    for item in items:
        number = _parse_int(item)
        if number is None:
            return sorted(items)
        numbers.add(number)
    return int_set_to_strings(numbers)


def trim_space(values: Iterable[str]) -> list[str]:
    """Strip surrounding whitespace from every value."""
    return [v.strip() for v in values]


def remove_empty(values: Iterable[str]) -> list[str]:
    """Drop empty strings."""
    return [v for v in values if v]


def dedupe(values: Iterable[str]) -> list[str]:
    """Drop empty strings and duplicates, sorting the rest."""
    items = remove_empty(values)
    if len(items) < 2:
        return items
    return sorted(set(items))