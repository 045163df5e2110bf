"""
Search suggestions

A short, type-balanced slice of search results for autocomplete.
"""

import math
from typing import List, Sequence

from ..models.config import DEFAULT_SEARCH_WEIGHTS, SearchOptions, SearchWeights
from ..models.content import BlogPost, PodcastEpisode
from ..models.scoring import SearchResult
from .orchestrator import search_all

# Queries shorter than this (after trimming) carry too little signal to suggest anything.
MIN_SUGGESTION_QUERY_LENGTH = 2
# Autocomplete ceiling, applied regardless of the requested limit.
MAX_SUGGESTIONS = 10


def get_search_suggestions(
    blog_posts: Sequence[BlogPost],
    podcast_episodes: Sequence[PodcastEpisode],
    query: str,
    limit: int = 10,
    weights: SearchWeights = DEFAULT_SEARCH_WEIGHTS,
) -> List[SearchResult]:
    """
    Top matches for autocomplete, mixing blog and podcast results when both exist.

    Fetches twice the limit by relevance, reserves up to ceil(limit / 2) slots per
    type, backfills from the remaining matches, then returns the chosen results in
    their original relevance order.
    """
    limit = min(limit, MAX_SUGGESTIONS)
    if limit < 1 or len(query.strip()) < MIN_SUGGESTION_QUERY_LENGTH:
        return []

    ranked = search_all(
        blog_posts,
        podcast_episodes,
        SearchOptions(query=query, type="all", sort_by="relevance", limit=limit * 2),
        weights,
    )

    per_type = math.ceil(limit / 2)
    chosen: List[int] = []
    for content_type in ("blog", "podcast"):
        of_type = [i for i, r in enumerate(ranked) if r.type == content_type]
        chosen.extend(of_type[:per_type])
    chosen = sorted(chosen)[:limit]

    if len(chosen) < limit:
        taken = set(chosen)
        backfill = [i for i in range(len(ranked)) if i not in taken]
        chosen = sorted(chosen + backfill[: limit - len(chosen)])

    return [ranked[i] for i in chosen]
