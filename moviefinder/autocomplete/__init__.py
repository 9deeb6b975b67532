"""Autocomplete package: character trie and the title index built on it."""

from moviefinder.autocomplete.index import IndexStats, MovieIndex
from moviefinder.autocomplete.traversal import TrieIterator
from moviefinder.autocomplete.trie import InvalidKeyError, Trie, TrieNode

__all__ = [
    "IndexStats",
    "InvalidKeyError",
    "MovieIndex",
    "Trie",
    "TrieIterator",
    "TrieNode",
]
