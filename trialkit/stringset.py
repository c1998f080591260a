"""A set of strings with counting and similarity helpers."""

from __future__ import annotations

from collections.abc import Iterable


class StringSet(set):
    """A hash set of strings."""

    def __init__(self, items: Iterable[str] = ()) -> None:
        super().__init__(items)

    def add_all(self, *args: str) -> None:
        """Add every given string to the set."""
        self.update(args)

    def remove_item(self, item: str) -> bool:
        """Remove ``item``; return True if it was present."""
        if item not in self:
            return False
        self.discard(item)
        return True

    def copy(self) -> StringSet:
        """Return a shallow copy of the set."""
        return StringSet(self)

    def get_any(self) -> str | None:
        """Return an arbitrary element, or None if the set is empty."""
        return next(iter(self), None)

    def intersection_size(self, other: set) -> int:
        """Return the number of elements shared with ``other``."""
        small, large = (self, other) if len(self) <= len(other) else (other, self)
        return sum(1 for item in small if item in large)

    def union_size(self, other: set) -> int:
        """Return the number of elements in the union with ``other``."""
        return len(self) + len(other) - self.intersection_size(other)

    def jaccard(self, other: set) -> float:
        """Return the Jaccard similarity with ``other``."""
        shared = self.intersection_size(other)
        if shared == 0:
            return 0.0
        return shared / self.union_size(other)

    def sorted_items(self) -> list[str]:
        """Return the elements in ascending order."""
        return sorted(self)

    def __str__(self) -> str:
        return ", ".join(self.sorted_items())