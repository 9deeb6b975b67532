"""
Title index: the trie plus the record cache behind it.

The index is built in one bulk pass and then only queried. A refresh
builds a complete new snapshot off to the side and swaps it in with a
single reference assignment, so queries already running keep using the
snapshot they started on.
"""

from __future__ import annotations

import itertools
import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

from moviefinder.autocomplete.trie import InvalidKeyError, Trie
from moviefinder.config.settings import IndexSettings, get_settings
from moviefinder.storage.models import MovieRecord
from moviefinder.storage.record_cache import RecordCache
from moviefinder.storage.tsv_reader import read_title_records

logger = logging.getLogger(__name__)


@dataclass
class IndexStats:
    """Summary of the last bulk load."""

    rows_read: int = 0
    titles_indexed: int = 0
    duplicates_skipped: int = 0
    invalid_skipped: int = 0
    elapsed_seconds: float = 0.0


@dataclass(frozen=True)
class _Snapshot:
    trie: Trie = field(default_factory=Trie)
    cache: RecordCache = field(default_factory=RecordCache)
    stats: IndexStats = field(default_factory=IndexStats)


def _populate(snapshot: _Snapshot, records: Iterable[MovieRecord]) -> None:
    """
    Feed *records* into *snapshot*.

    A title already stored, in any letter case, counts as a duplicate: the
    trie keeps one key per case-folded path, so the first spelling wins in
    both the trie and the cache.
    """
    stats = snapshot.stats
    started = time.perf_counter()

    for record in records:
        stats.rows_read += 1
        title = record.title
        if title and (snapshot.cache.contains(title) or snapshot.trie.contains(title)):
            stats.duplicates_skipped += 1
            continue
        try:
            snapshot.trie.insert(title)
        except InvalidKeyError:
            stats.invalid_skipped += 1
            logger.warning("Skipping %s (row %d): empty title", record.title_id, record.id)
            continue
        snapshot.cache.put(title, record)
        stats.titles_indexed += 1

    stats.elapsed_seconds += time.perf_counter() - started


class MovieIndex:
    """Owns the active trie/cache snapshot and answers title queries."""

    def __init__(self, settings: Optional[IndexSettings] = None) -> None:
        self._settings = settings or get_settings().index
        self._snapshot = _Snapshot()

    @classmethod
    def from_file(cls, path: Path, settings: Optional[IndexSettings] = None) -> "MovieIndex":
        """Build an index from a title TSV file."""
        index = cls(settings)
        index.load(read_title_records(path))
        return index

    @property
    def size(self) -> int:
        """Number of distinct titles indexed."""
        return self._snapshot.trie.size

    @property
    def node_count(self) -> int:
        return self._snapshot.trie.node_count

    @property
    def stats(self) -> IndexStats:
        return self._snapshot.stats

    # ---- building ----

    def load(self, records: Iterable[MovieRecord]) -> IndexStats:
        """
        Add *records* to the active snapshot.

        Meant for the initial bulk load before any query is served. Use
        ``rebuild`` to refresh an index that is already serving.
        """
        _populate(self._snapshot, records)
        stats = self._snapshot.stats
        logger.info(
            "Indexed %d titles from %d rows (%d duplicates, %d invalid) in %.2fs",
            stats.titles_indexed,
            stats.rows_read,
            stats.duplicates_skipped,
            stats.invalid_skipped,
            stats.elapsed_seconds,
        )
        return stats

    def rebuild(self, records: Iterable[MovieRecord]) -> IndexStats:
        """Build a fresh snapshot from *records* and swap it in."""
        snapshot = _Snapshot()
        _populate(snapshot, records)
        self._snapshot = snapshot
        logger.info("Rebuilt index: %d titles", snapshot.trie.size)
        return snapshot.stats

    def clear(self) -> None:
        """Replace the active snapshot with an empty one."""
        self._snapshot = _Snapshot()

    # ---- queries ----

    def _limit(self, limit: Optional[int]) -> int:
        if limit is None:
            limit = self._settings.max_suggestions
        elif limit < 1:
            raise ValueError(f"limit must be positive, got {limit}")
        return min(limit, self._settings.max_suggestions_cap)

    def suggest(self, key: str, limit: Optional[int] = None) -> list[str]:
        """
        Titles matching the fragment *key* as a prefix or substring.

        The trie's placeholder answer for an empty key is dropped here, so
        an empty key gives an empty list.
        """
        matches = self._snapshot.trie.search(key)
        return [m for m in matches if m is not None][: self._limit(limit)]

    def complete(self, prefix: str, limit: Optional[int] = None) -> list[str]:
        """Titles starting with *prefix*, in traversal order."""
        completions = self._snapshot.trie.iter_completions(prefix)
        return list(itertools.islice(completions, self._limit(limit)))

    def get_movie(self, title: str) -> Optional[MovieRecord]:
        """Full record for an exact title, or None."""
        return self._snapshot.cache.get(title)
