"""Health and stats routes."""

from __future__ import annotations

from fastapi import APIRouter, Request

from moviefinder.api.schemas import StatsResponse

router = APIRouter(tags=["system"])


@router.get("/health")
def health(request: Request) -> dict:
    """Liveness check; also says whether any titles are loaded."""
    index = request.app.state.index
    return {"status": "ok", "index_loaded": index.size > 0}


@router.get("/stats", response_model=StatsResponse)
def stats(request: Request) -> StatsResponse:
    """Return statistics about the loaded index."""
    index = request.app.state.index
    load_stats = index.stats

    return StatsResponse(
        title_count=index.size,
        node_count=index.node_count,
        rows_read=load_stats.rows_read,
        duplicates_skipped=load_stats.duplicates_skipped,
        invalid_skipped=load_stats.invalid_skipped,
    )
