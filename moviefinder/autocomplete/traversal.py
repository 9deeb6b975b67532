"""Lazy pre-order enumeration of the keys stored under a trie node."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Optional

from moviefinder.autocomplete.folding import fold_text

if TYPE_CHECKING:
    from moviefinder.autocomplete.trie import Trie


class TrieIterator:
    """
    Single-pass iterator over the terminal keys below one node.

    Keeps one child iterator per open tree level plus the path spelled so
    far, so memory stays proportional to the tree depth. The start node's
    own key comes first when it is terminal. After each step ``path``
    holds the case-folded path of the key just produced.

    The iterator holds on to the arena it started on, so a ``clear`` of
    the trie mid-iteration does not affect it.
    """

    def __init__(self, trie: "Trie", node_index: int, prefix: str = "") -> None:
        self._nodes = trie.nodes
        start = self._nodes[node_index]
        self._frames: list[Iterator[tuple[str, int]]] = [iter(start.children.items())]
        self._segments: list[str] = [fold_text(prefix)]
        self._pending: Optional[str] = start.key if start.is_terminal else None
        self.path = self._segments[0]

    def __iter__(self) -> "TrieIterator":
        return self

    def __next__(self) -> str:
        if self._pending is not None:
            key, self._pending = self._pending, None
            return key

        while self._frames:
            entry = next(self._frames[-1], None)
            if entry is None:
                self._frames.pop()
                if self._frames:
                    self._segments.pop()
                continue

            char, child_index = entry
            child = self._nodes[child_index]
            self._segments.append(char)
            self._frames.append(iter(child.children.items()))
            if child.is_terminal:
                self.path = "".join(self._segments)
                return child.key

        raise StopIteration
