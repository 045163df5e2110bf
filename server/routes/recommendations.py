"""Recommendation rails: related content, trending, and related posts."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from content_scoring.models import MixedRecommendation, RecommendationConfig
from content_scoring.recommendations import (
    get_mixed_recommendations,
    get_recommendations,
    get_related_posts,
    get_trending_content,
)

from ..models import RecommendationsResponse, RelatedPostsResponse, TrendingResponse
from ..state import AppState, get_state

router = APIRouter()


def _parse_view_history(raw: Optional[str]) -> List[str]:
    """Comma-separated ids -> list, blanks dropped."""
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


@router.get("/recommendations/{content_id}", response_model=RecommendationsResponse)
def recommendations(
    content_id: str,
    mixed: bool = Query(True),
    view_history: Optional[str] = Query(None, alias="viewHistory"),
    max_results: Optional[int] = Query(None, alias="maxResults", ge=1, le=50),
    state: AppState = Depends(get_state),
):
    """Related content for a blog post or podcast episode (by id or slug)."""
    store = state.content_store
    source = store.get_item(content_id)
    if source is None:
        raise HTTPException(status_code=404, detail="Content not found")

    overrides = {"max_results": max_results} if max_results is not None else {}
    config = RecommendationConfig.from_dict(overrides)
    history = _parse_view_history(view_history)

    if mixed:
        results = get_mixed_recommendations(
            source, store.get_blog_posts(), store.get_podcast_episodes(), history, config
        )
    else:
        pool = store.get_blog_posts() if source.kind == "blog" else store.get_podcast_episodes()
        results = [
            MixedRecommendation(
                item=rec.item, type=rec.item.kind, score=rec.score, match_factors=rec.match_factors
            )
            for rec in get_recommendations(source, pool, history, config)
        ]

    return RecommendationsResponse(
        source_id=source.id,
        mixed=mixed,
        recommendations=results,
        total=len(results),
    )


@router.get("/trending", response_model=TrendingResponse)
def trending(
    limit: Optional[int] = Query(None, ge=1, le=50),
    state: AppState = Depends(get_state),
):
    """Trending blog posts and podcast episodes, mixed by type."""
    store = state.content_store
    items = get_trending_content(
        store.get_blog_posts(),
        store.get_podcast_episodes(),
        limit or state.config.trending_default_limit,
    )
    return TrendingResponse(items=items, total=len(items))


@router.get("/related/{post_id}", response_model=RelatedPostsResponse)
def related_posts(
    post_id: str,
    limit: Optional[int] = Query(None, ge=1, le=20),
    state: AppState = Depends(get_state),
):
    """Blog posts related to a post by category and tags."""
    store = state.content_store
    post = store.get_item(post_id)
    if post is None or post.kind != "blog":
        raise HTTPException(status_code=404, detail="Blog post not found")
    posts = get_related_posts(
        post.id, store.get_blog_posts(), limit or state.config.related_default_limit
    )
    return RelatedPostsResponse(post_id=post.id, posts=posts, total=len(posts))
