"""
Trending content

Popularity normalized by age, boosted for recency and featured status.

score = (views or plays) / max(1, days since publish)
        * recent_boost   if published within recent_days
        * featured_boost if featured

Selection mixes types: up to ceil(max_results / 2) per type in score order, then the
remaining slots go to the highest-scoring unused items of either type, appended
after the quota picks.
"""

import math
from datetime import datetime
from typing import List, Optional, Sequence

from ..models.config import DEFAULT_TRENDING_CONFIG, TrendingConfig
from ..models.content import BlogPost, ContentItem, PodcastEpisode
from ..models.scoring import TrendingResult
from ..utils.content import get_popularity
from ..utils.dates import days_since, resolve_now, within_days


def trending_score(item: ContentItem, now: datetime, config: TrendingConfig = DEFAULT_TRENDING_CONFIG) -> float:
    """Popularity-decay score for one item (>= 0)."""
    days = max(1, days_since(item.published_at, now))
    score = get_popularity(item) / days
    if within_days(item.published_at, config.recent_days, now):
        score *= config.recent_boost
    if item.featured:
        score *= config.featured_boost
    return score


def _select_mixed_types(ranked: List[TrendingResult], max_results: int) -> List[TrendingResult]:
    """Per-type quota pass, then backfill by score. Quota picks come before backfill."""
    per_type = math.ceil(max_results / 2)
    type_count = {"blog": 0, "podcast": 0}
    chosen: List[int] = []

    for idx, result in enumerate(ranked):
        if len(chosen) >= max_results:
            break
        if type_count[result.type] < per_type:
            chosen.append(idx)
            type_count[result.type] += 1

    if len(chosen) < max_results:
        taken = set(chosen)
        for idx in range(len(ranked)):
            if len(chosen) >= max_results:
                break
            if idx not in taken:
                chosen.append(idx)

    return [ranked[idx] for idx in chosen]


def get_trending_content(
    blog_posts: Sequence[BlogPost],
    podcast_episodes: Sequence[PodcastEpisode],
    max_results: int = 6,
    config: TrendingConfig = DEFAULT_TRENDING_CONFIG,
    now: Optional[datetime] = None,
) -> List[TrendingResult]:
    """Trending blog posts and podcast episodes; empty pools give an empty list."""
    if max_results < 1:
        return []
    now = resolve_now(now)

    ranked = [
        TrendingResult(item=item, type=item.kind, score=trending_score(item, now, config))
        for item in [*blog_posts, *podcast_episodes]
    ]
    ranked.sort(key=lambda r: r.score, reverse=True)
    return _select_mixed_types(ranked, max_results)
