"""Pydantic response models for the API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class SuggestionResponse(BaseModel):
    """Titles matching a typed fragment."""

    key: str
    suggestions: list[str]


class CompletionResponse(BaseModel):
    """Titles starting with a prefix."""

    prefix: str
    completions: list[str]


class MovieResponse(BaseModel):
    """Full record of one title."""

    id: int
    title_id: str
    ordering: int
    title: str
    region: Optional[str] = None
    language: Optional[str] = None
    types: Optional[str] = None
    attributes: Optional[str] = None
    is_original_title: Optional[str] = None


class MovieRowsResponse(BaseModel):
    """Grid payload wrapping the looked-up record."""

    rows: list[MovieResponse]


class StatsResponse(BaseModel):
    """Index statistics."""

    title_count: int
    node_count: int
    rows_read: int
    duplicates_skipped: int
    invalid_skipped: int
