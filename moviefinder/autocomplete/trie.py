"""
Character trie for title autocomplete.

Nodes live in a flat arena (``list[TrieNode]``). A node's identity is its
index in that list and child links are indices, so nodes never reference
each other directly. Two query algorithms run over the arena:

* ``prefix_search`` walks the prefix path and lazily enumerates every
  stored key underneath it (see ``TrieIterator``).
* ``search`` matches free-text fragments that need not be a clean prefix
  of any stored key.

The trie is built once and then only read. Inserting while a traversal
is in flight is not supported. ``clear`` swaps in a new arena, so running
iterators finish on the tree they started on.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

from moviefinder.autocomplete.folding import fold, fold_text
from moviefinder.autocomplete.traversal import TrieIterator

logger = logging.getLogger(__name__)

ROOT = 0


class InvalidKeyError(ValueError):
    """Raised when a missing or empty key is inserted."""


@dataclass
class TrieNode:
    """Single node in the trie."""

    index: int
    char: Optional[str] = None
    children: dict[str, int] = field(default_factory=dict)
    is_terminal: bool = False
    # Verbatim key as inserted; only set on terminal nodes
    key: Optional[str] = None


class Trie:
    """Arena-backed character trie with prefix and fragment search."""

    def __init__(self) -> None:
        self._nodes: list[TrieNode] = [TrieNode(index=ROOT)]
        self._size = 0

    @property
    def size(self) -> int:
        """Number of distinct keys stored."""
        return self._size

    @property
    def node_count(self) -> int:
        """Number of nodes in the arena, root included."""
        return len(self._nodes)

    @property
    def nodes(self) -> list[TrieNode]:
        """The current arena. Replaced, not emptied, by ``clear``."""
        return self._nodes

    def node(self, index: int) -> TrieNode:
        return self._nodes[index]

    def contains(self, key: str) -> bool:
        """True if a key folding to the same path as *key* is stored."""
        index = self.find_node(key)
        return index is not None and self._nodes[index].is_terminal

    # ---- building ----

    def insert(self, key: Optional[str]) -> None:
        """
        Insert *key*.

        Each character is case-folded to find or create the child on the
        path. The final node is marked terminal and keeps *key* verbatim.
        Re-inserting an existing key is a no-op.

        Raises:
            InvalidKeyError: if *key* is None or empty.
        """
        if not key:
            raise InvalidKeyError(f"Invalid key: {key!r}")

        node = self._nodes[ROOT]
        for ch in key:
            folded = fold(ch)
            child_index = node.children.get(folded)
            if child_index is None:
                child_index = len(self._nodes)
                self._nodes.append(TrieNode(index=child_index, char=folded))
                node.children[folded] = child_index
            node = self._nodes[child_index]

        if not node.is_terminal:
            self._size += 1
        node.is_terminal = True
        node.key = key

    def insert_all(self, keys: Iterable[Optional[str]]) -> None:
        """
        Insert every key in order.

        Stops at the first invalid key; keys inserted before it stay in
        the trie.
        """
        for key in keys:
            self.insert(key)

    def clear(self) -> None:
        """Drop the whole tree and start again from an empty root."""
        logger.debug("Clearing trie with %d keys", self._size)
        self._nodes = [TrieNode(index=ROOT)]
        self._size = 0

    # ---- prefix completion ----

    def find_node(self, prefix: str) -> Optional[int]:
        """Return the index of the node spelling *prefix*, or None."""
        index = ROOT
        for ch in prefix:
            next_index = self._nodes[index].children.get(fold(ch))
            if next_index is None:
                return None
            index = next_index
        return index

    def iter_completions(self, prefix: str) -> Iterator[str]:
        """Lazily yield every stored key that starts with *prefix*."""
        index = self.find_node(prefix)
        if index is None:
            return iter(())
        return TrieIterator(self, index, prefix)

    def prefix_search(self, prefix: str) -> list[str]:
        """
        Return all stored keys starting with *prefix* (case-insensitive),
        in pre-order traversal order.
        """
        return list(dict.fromkeys(self.iter_completions(prefix)))

    # ---- fragment search ----

    def search(self, key: Optional[str]) -> list[Optional[str]]:
        """
        Return stored keys that start with, or contain, the fragment *key*.

        Matching runs in two phases. First a frontier of nodes, seeded
        with the root, is advanced one character at a time: for each
        frontier node its whole subtree is scanned for children carrying
        the character, and those children form the next frontier. Then
        every stored key under a final frontier node is accepted if it
        starts with *key* minus its last two characters (for keys longer
        than two characters) or contains *key* anywhere.

        A None or empty *key* returns a single-element list holding the
        root's key, which is None.
        """
        if not key:
            return [self._nodes[ROOT].key]

        # dicts used as insertion-ordered sets of node indices
        frontier: dict[int, None] = {ROOT: None}
        for ch in key:
            folded = fold(ch)
            matched: dict[int, None] = {}
            for index in frontier:
                self._scan_subtree(index, folded, matched)
            frontier = matched
            if not frontier:
                return []

        needle = fold_text(key)
        short_key = fold_text(key[:-2] if len(key) > 2 else key)
        found: dict[str, None] = {}
        for index in frontier:
            for terminal in self._terminal_closure(index):
                candidate = self._nodes[terminal].key
                lowered = fold_text(candidate)
                if lowered.startswith(short_key) or needle in lowered:
                    found[candidate] = None
        return list(found)

    def _scan_subtree(self, start: int, char: str, matched: dict[int, None]) -> None:
        """
        Collect every child carrying *char* below *start*.

        A matching child is recorded and not descended into; all other
        children are searched further. Pre-order, explicit stack.
        """
        stack = [start]
        while stack:
            node = self._nodes[stack.pop()]
            hit = node.children.get(char)
            if hit is not None:
                matched[hit] = None
            rest = [i for c, i in node.children.items() if c != char]
            stack.extend(reversed(rest))

    def _terminal_closure(self, start: int) -> Iterator[int]:
        """Yield *start* if terminal, then every terminal node below it."""
        stack = [start]
        while stack:
            node = self._nodes[stack.pop()]
            if node.is_terminal:
                yield node.index
            stack.extend(reversed(list(node.children.values())))
