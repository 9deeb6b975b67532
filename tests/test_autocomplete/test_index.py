"""Tests for the MovieIndex."""

from __future__ import annotations

from pathlib import Path

import pytest

from moviefinder.autocomplete.index import MovieIndex
from moviefinder.config.settings import IndexSettings
from tests.conftest import make_record

TITLES = ["Raj", "Raje", "Raja", "Rajdeep", "Rajasthan", "Rajhans"]


@pytest.fixture
def index(index_settings: IndexSettings) -> MovieIndex:
    idx = MovieIndex(index_settings)
    idx.load(make_record(t, title_id=f"tt{i:07d}", record_id=i) for i, t in enumerate(TITLES, 1))
    return idx


class TestMovieIndexLoad:
    def test_load_counts(self, index: MovieIndex):
        assert index.size == 6
        assert index.stats.rows_read == 6
        assert index.stats.titles_indexed == 6

    def test_duplicate_titles_skipped(self, index_settings: IndexSettings):
        idx = MovieIndex(index_settings)
        stats = idx.load([
            make_record("Heat", title_id="tt0113277"),
            make_record("Heat", title_id="tt0000002"),
        ])
        assert stats.duplicates_skipped == 1
        assert idx.size == 1
        assert idx.get_movie("Heat").title_id == "tt0113277"

    def test_empty_titles_skipped(self, index_settings: IndexSettings):
        idx = MovieIndex(index_settings)
        stats = idx.load([make_record(None), make_record(""), make_record("Heat")])
        assert stats.invalid_skipped == 2
        assert stats.titles_indexed == 1

    def test_case_variant_counts_as_duplicate(self, index_settings: IndexSettings):
        idx = MovieIndex(index_settings)
        stats = idx.load([
            make_record("Raj", title_id="tt0000001"),
            make_record("RAJ", title_id="tt0000002"),
        ])
        assert stats.titles_indexed == 1
        assert stats.duplicates_skipped == 1
        assert idx.size == stats.titles_indexed
        assert idx.suggest("raj") == ["Raj"]
        assert idx.get_movie("Raj").title_id == "tt0000001"
        assert idx.get_movie("RAJ") is None

    def test_from_file(self, title_file: Path, index_settings: IndexSettings):
        idx = MovieIndex.from_file(title_file, index_settings)
        assert idx.size == 5
        assert idx.stats.rows_read == 6
        assert idx.stats.duplicates_skipped == 1
        assert idx.get_movie("Poor Pierrot").region == "GB"


class TestMovieIndexQueries:
    def test_suggest(self, index: MovieIndex):
        assert set(index.suggest("an")) == {"Rajasthan", "Rajhans"}

    def test_suggest_limit(self, index: MovieIndex):
        assert len(index.suggest("aj", limit=2)) == 2

    def test_suggest_limit_capped(self):
        idx = MovieIndex(IndexSettings(max_suggestions=2, max_suggestions_cap=3))
        idx.load(make_record(t) for t in TITLES)
        assert len(idx.suggest("aj")) == 2
        assert len(idx.suggest("aj", limit=50)) == 3

    @pytest.mark.parametrize("limit", [0, -1])
    def test_non_positive_limit_rejected(self, index: MovieIndex, limit: int):
        with pytest.raises(ValueError):
            index.suggest("aj", limit=limit)
        with pytest.raises(ValueError):
            index.complete("raj", limit=limit)

    def test_suggest_empty_key(self, index: MovieIndex):
        assert index.suggest("") == []

    def test_complete(self, index: MovieIndex):
        assert index.complete("raja") == ["Raja", "Rajasthan"]

    def test_complete_limit(self, index: MovieIndex):
        assert index.complete("raj", limit=3) == ["Raj", "Raje", "Raja"]

    def test_get_movie(self, index: MovieIndex):
        record = index.get_movie("Rajdeep")
        assert record is not None
        assert record.title_id == "tt0000004"
        assert index.get_movie("rajdeep") is None


class TestMovieIndexRebuild:
    def test_rebuild_swaps_snapshot(self, index: MovieIndex):
        stats = index.rebuild([make_record("Amelie"), make_record("Alien")])
        assert stats.titles_indexed == 2
        assert index.size == 2
        assert index.suggest("aj") == []
        assert index.complete("a") == ["Amelie", "Alien"]
        assert index.get_movie("Raj") is None

    def test_rebuild_does_not_touch_running_query(self, index: MovieIndex):
        completions = index._snapshot.trie.iter_completions("raj")
        assert next(completions) == "Raj"
        index.rebuild([make_record("Amelie")])
        assert next(completions) == "Raje"

    def test_clear(self, index: MovieIndex):
        index.clear()
        assert index.size == 0
        assert index.suggest("raj") == []
