"""
Search orchestration

Score blog and podcast pools, merge, sort, and truncate.

The public entry point is search_all. A blank query returns an empty list; rejecting
blank queries with an error is the HTTP layer's job.
"""

import logging
from typing import List, Sequence

from ..models.config import DEFAULT_SEARCH_WEIGHTS, SearchOptions, SearchWeights
from ..models.content import BlogPost, ContentItem, PodcastEpisode
from ..models.scoring import SearchResult
from ..utils.content import get_description
from .relevance import score_match

logger = logging.getLogger(__name__)


def _to_search_result(item: ContentItem, score: float) -> SearchResult:
    """Project a scored item onto the read-only SearchResult shape."""
    return SearchResult(
        id=item.id,
        type=item.kind,
        title=item.title,
        description=get_description(item),
        slug=item.slug,
        cover_image=item.cover_image,
        published_at=item.published_at,
        relevance_score=score,
        category=item.category.name,
        tags=[tag.name for tag in item.tags],
    )


def _search_pool(
    items: Sequence[ContentItem],
    query: str,
    weights: SearchWeights,
) -> List[SearchResult]:
    """Score every item; keep those with score > 0, in input order."""
    if not query.strip():
        return []
    results = []
    for item in items:
        score = score_match(query, item, weights)
        if score > 0:
            results.append(_to_search_result(item, score))
    return results


def search_blog_posts(
    posts: Sequence[BlogPost],
    query: str,
    weights: SearchWeights = DEFAULT_SEARCH_WEIGHTS,
) -> List[SearchResult]:
    """Matching blog posts, unsorted."""
    return _search_pool(posts, query, weights)


def search_podcast_episodes(
    episodes: Sequence[PodcastEpisode],
    query: str,
    weights: SearchWeights = DEFAULT_SEARCH_WEIGHTS,
) -> List[SearchResult]:
    """Matching podcast episodes, unsorted."""
    return _search_pool(episodes, query, weights)


def sort_results(results: List[SearchResult], sort_by: str) -> List[SearchResult]:
    """
    Return results sorted for display.

    relevance: score descending, ties broken by newer published_at.
    date: published_at descending; scores are kept for display only.
    """
    if sort_by == "date":
        return sorted(results, key=lambda r: r.published_at, reverse=True)
    return sorted(
        results,
        key=lambda r: (r.relevance_score, r.published_at),
        reverse=True,
    )


def search_all(
    blog_posts: Sequence[BlogPost],
    podcast_episodes: Sequence[PodcastEpisode],
    options: SearchOptions,
    weights: SearchWeights = DEFAULT_SEARCH_WEIGHTS,
) -> List[SearchResult]:
    """
    Search blog posts and/or podcast episodes according to options.

    Runs the relevance scorer over the selected pool(s), drops zero scores,
    sorts by options.sort_by and truncates to options.limit.
    """
    if not options.query.strip():
        return []

    results: List[SearchResult] = []
    if options.type in ("all", "blog"):
        results.extend(search_blog_posts(blog_posts, options.query, weights))
    if options.type in ("all", "podcast"):
        results.extend(search_podcast_episodes(podcast_episodes, options.query, weights))

    logger.debug(
        "search query=%r type=%s matched=%d", options.query, options.type, len(results)
    )
    return sort_results(results, options.sort_by)[: options.limit]
