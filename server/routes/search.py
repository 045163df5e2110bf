"""
Search endpoint.

GET /api/search
    q:           search query (required)
    type:        all | blog | podcast (default: all)
    sortBy:      relevance | date (default: relevance)
    limit:       positive integer (default 10, clamped to SEARCH_MAX_LIMIT)
    suggestions: "true" routes to autocomplete suggestions (at most MAX_SUGGESTIONS)
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from content_scoring.models import SearchOptions
from content_scoring.search import get_search_suggestions, search_all
from content_scoring.search.suggestions import MAX_SUGGESTIONS

from ..models import ErrorResponse, SearchBreakdown, SearchResponse
from ..state import AppState, get_state

logger = logging.getLogger(__name__)

router = APIRouter()

SEARCH_TYPES = ("all", "blog", "podcast")
SORT_OPTIONS = ("relevance", "date")


def _error(message: str, status_code: int = 400) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(by_alias=True),
    )


def _parse_limit(raw: Optional[str], default: int, maximum: int) -> Optional[int]:
    """Positive integer clamped to maximum; None when invalid."""
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        return None
    if value < 1:
        return None
    return min(value, maximum)


@router.get("/search")
def search(
    q: Optional[str] = Query(None),
    type: str = Query("all"),
    sort_by: str = Query("relevance", alias="sortBy"),
    limit: Optional[str] = Query(None),
    suggestions: Optional[str] = Query(None),
    state: AppState = Depends(get_state),
):
    """Search across blog posts and podcast episodes."""
    config = state.config

    if q is None or not q.strip():
        return _error('Query parameter "q" is required')

    parsed_limit = _parse_limit(limit, config.search_default_limit, config.search_max_limit)
    if parsed_limit is None:
        return _error("Limit must be a positive number")

    if type not in SEARCH_TYPES:
        return _error('Type must be "all", "blog", or "podcast"')

    if sort_by not in SORT_OPTIONS:
        return _error('SortBy must be "relevance" or "date"')

    try:
        store = state.content_store
        blog_posts = store.get_blog_posts()
        podcast_episodes = store.get_podcast_episodes()

        if suggestions == "true":
            results = get_search_suggestions(
                blog_posts, podcast_episodes, q, min(parsed_limit, MAX_SUGGESTIONS)
            )
        else:
            results = search_all(
                blog_posts,
                podcast_episodes,
                SearchOptions(query=q, type=type, sort_by=sort_by, limit=parsed_limit),
            )
    except Exception:
        logger.exception("Search API error (q=%r)", q)
        return _error("Internal server error", status_code=500)

    response = SearchResponse(
        query=q,
        type=type,
        sort_by=sort_by,
        total_results=len(results),
        results=results,
        breakdown=SearchBreakdown(
            blog=sum(1 for r in results if r.type == "blog"),
            podcast=sum(1 for r in results if r.type == "podcast"),
        ),
    )
    return JSONResponse(
        status_code=200,
        content=response.model_dump(mode="json", by_alias=True),
        headers={"Cache-Control": config.search_cache_control},
    )
