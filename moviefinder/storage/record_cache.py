"""Exact-match cache from a title to its full record."""

from __future__ import annotations

from typing import Optional

from moviefinder.storage.models import MovieRecord


class RecordCache:
    """
    Maps the verbatim title (the trie's terminal key) to its record.

    Entries never change once stored: a second ``put`` for a key that is
    already present is ignored. There is no eviction.
    """

    def __init__(self) -> None:
        self._records: dict[str, MovieRecord] = {}

    def __len__(self) -> int:
        return len(self._records)

    def put(self, key: str, record: MovieRecord) -> bool:
        """Store *record* under *key*. Returns False if *key* was already present."""
        if key in self._records:
            return False
        self._records[key] = record
        return True

    def get(self, key: str) -> Optional[MovieRecord]:
        return self._records.get(key)

    def contains(self, key: str) -> bool:
        return key in self._records
