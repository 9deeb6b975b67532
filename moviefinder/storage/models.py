"""
Data models for the MovieFinder storage layer.

Plain dataclasses. A ``MovieRecord`` is one row of the title dataset and
is what the record cache hands back once the trie has produced a title.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional


@dataclass(frozen=True)
class MovieRecord:
    """
    One alternative title of a movie, as read from a ``title.akas`` file.

    Records are immutable once loaded. Cells holding the ``\\N`` null
    marker are stored as None.
    """

    # 1-based position of the row among the file's data rows
    id: int

    # IMDb title identifier, e.g. "tt0000001"
    title_id: str

    # Position of this title among the alternatives of the same title_id
    ordering: int

    # Localized title, used verbatim as the autocomplete key
    title: Optional[str]

    region: Optional[str] = None
    language: Optional[str] = None

    # Comma-separated attribute lists, kept as the raw cell text
    types: Optional[str] = None
    attributes: Optional[str] = None

    # "1" or "0" in the source data
    is_original_title: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)
