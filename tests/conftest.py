"""
Shared test fixtures for the MovieFinder test suite.

Provides settings rooted in a temporary directory, a small title TSV
file, and a record factory.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from moviefinder.config.settings import IndexSettings, Settings
from moviefinder.storage.models import MovieRecord

HEADER = "titleId\tordering\ttitle\tregion\tlanguage\ttypes\tattributes\tisOriginalTitle"

SAMPLE_ROWS = [
    "tt0000001\t1\tCarmencita\t\\N\t\\N\toriginal\t\\N\t1",
    "tt0000001\t2\tCarmencita - spanyol tánc\tHU\t\\N\timdbDisplay\t\\N\t0",
    "tt0000002\t1\tLe clown et ses chiens\t\\N\t\\N\toriginal\t\\N\t1",
    "tt0000002\t2\tLe clown et ses chiens\tFR\t\\N\timdbDisplay\t\\N\t0",
    "tt0000003\t1\tPauvre Pierrot\t\\N\t\\N\toriginal\t\\N\t1",
    "tt0000003\t2\tPoor Pierrot\tGB\ten\t\\N\t\\N\t0",
]


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings rooted in a temporary project directory."""
    s = Settings(project_root=tmp_path)
    s.ensure_dirs()
    return s


@pytest.fixture
def index_settings() -> IndexSettings:
    return IndexSettings(max_suggestions=10, max_suggestions_cap=50)


@pytest.fixture
def title_file(tmp_path: Path) -> Path:
    """Write a small title.akas-style TSV and return its path."""
    return write_title_file(tmp_path / "titles.tsv", SAMPLE_ROWS)


# ---------------------------------------------------------------------------
# Sample data factories
# ---------------------------------------------------------------------------


def write_title_file(path: Path, rows: list[str]) -> Path:
    """Write *rows* below the standard header."""
    path.write_text("\n".join([HEADER, *rows]) + "\n", encoding="utf-8")
    return path


def make_record(
    title: str | None = "Test Movie",
    title_id: str = "tt0000001",
    record_id: int = 1,
    **kwargs,
) -> MovieRecord:
    """Create a MovieRecord with sensible defaults. Override any field via kwargs."""
    defaults = dict(
        id=record_id,
        title_id=title_id,
        ordering=1,
        title=title,
        region="US",
        language="en",
        types="imdbDisplay",
        attributes=None,
        is_original_title="0",
    )
    defaults.update(kwargs)
    return MovieRecord(**defaults)
