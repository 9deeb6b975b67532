"""Title suggestion and lookup routes."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query, Request

from moviefinder.api.schemas import (
    CompletionResponse,
    MovieResponse,
    MovieRowsResponse,
    SuggestionResponse,
)

router = APIRouter(prefix="/moviefinder", tags=["movies"])


@router.get("/suggestion", response_model=SuggestionResponse)
def suggestion(
    request: Request,
    key: str = Query(..., min_length=1, max_length=200, description="Fragment typed so far"),
    limit: int | None = Query(None, ge=1, le=100, description="Max suggestions"),
) -> SuggestionResponse:
    """Titles that start with, or contain, the typed fragment."""
    index = request.app.state.index
    return SuggestionResponse(key=key, suggestions=index.suggest(key, limit=limit))


@router.get("/completion", response_model=CompletionResponse)
def completion(
    request: Request,
    prefix: str = Query(..., min_length=1, max_length=200, description="Prefix to complete"),
    limit: int | None = Query(None, ge=1, le=100, description="Max completions"),
) -> CompletionResponse:
    """Titles that start with the prefix."""
    index = request.app.state.index
    return CompletionResponse(prefix=prefix, completions=index.complete(prefix, limit=limit))


@router.get("/movie", response_model=MovieRowsResponse)
def movie(
    request: Request,
    key: str = Query(..., min_length=1, max_length=200, description="Exact title"),
) -> MovieRowsResponse:
    """Full record for an exact title."""
    record = request.app.state.index.get_movie(key)
    if record is None:
        raise HTTPException(status_code=404, detail="Movie not found")
    return MovieRowsResponse(rows=[MovieResponse(**record.to_dict())])
