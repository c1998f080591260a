"""A character trie with '*' wildcards matching up to the next space."""

from __future__ import annotations

from dataclasses import dataclass, field

_WILDCARD = "*"
_SPACE = " "


@dataclass(frozen=True)
class TrieValue:
    """A value stored at a trie node: a name and the string it was keyed by."""

    name: str
    val: str


@dataclass
class _Node:
    value: TrieValue | None = None
    nodes: dict[str, _Node] = field(default_factory=dict)
    end: bool = False

    def all_values(self) -> list[TrieValue]:
        results = [self.value] if self.end and self.value is not None else []
        for child in self.nodes.values():
            results.extend(child.all_values())
        return results


class Trie:
    """A search tree over characters."""

    def __init__(self) -> None:
        self._root = _Node()

    def put(self, name: str, *args: str) -> None:
        """Store each given string under ``name``."""
        for val in args:
            node = self._root
            for ch in val:
                node = node.nodes.setdefault(ch, _Node())
            node.value = TrieValue(name, val)
            node.end = True

    def _walk(self, s: str) -> tuple[_Node | None, bool]:
        """Follow ``s``; return the final node and whether a wildcard consumed the end."""
        node = self._root
        i = 0
        while i < len(s):
            wild = node.nodes.get(_WILDCARD)
            if wild is not None:
                while i < len(s) and s[i] != _SPACE:
                    i += 1
                if i == len(s):
                    return node, True
                i -= 1
                node = wild
            else:
                child = node.nodes.get(s[i])
                if child is None:
                    return None, False
                node = child
            i += 1
        return node, False

    def get(self, s: str) -> TrieValue | None:
        """Return the value stored for ``s``, or None."""
        node, _ = self._walk(s)
        if node is None:
            return None
        if not node.end and _WILDCARD in node.nodes:
            node = node.nodes[_WILDCARD]
        return node.value if node.end else None

    def contains(self, s: str) -> bool:
        """Return True if ``s`` has a stored value."""
        return self.get(s) is not None

    def __contains__(self, s: object) -> bool:
        return isinstance(s, str) and self.contains(s)

    def match(self, s: str) -> bool:
        """Return True if ``s`` follows a path in the trie up to a word boundary."""
        node, wildcard_end = self._walk(s)
        if node is None:
            return False
        if wildcard_end or not node.nodes or node.end:
            return True
        return _SPACE in node.nodes or _WILDCARD in node.nodes

    def autocomplete(self, prefix: str) -> list[TrieValue]:
        """Return all values whose keys start with ``prefix``, sorted by name."""
        node = self._root
        for ch in prefix:
            node = node.nodes.get(ch)
            if node is None:
                return []
        return sorted(node.all_values(), key=lambda v: v.name)