"""
Recommendation orchestrator

Candidate pool, similarity scoring, then author diversity.

The main entry points are get_recommendations (one pool) and
get_mixed_recommendations (blog posts and podcast episodes pooled together).
"""

import logging
from datetime import datetime
from typing import List, Optional, Sequence

from ..models.config import RecommendationConfig, resolve_config
from ..models.content import BlogPost, ContentItem, PodcastEpisode
from ..models.scoring import MixedRecommendation, RecommendationResult
from ..utils.dates import resolve_now
from .candidate_pool import get_candidate_pool
from .diversity import apply_diversity_rules
from .similarity import calculate_similarity_score

logger = logging.getLogger(__name__)


def _score_candidates(
    source: ContentItem,
    candidates: Sequence[ContentItem],
    view_history: Optional[Sequence[str]],
    config: RecommendationConfig,
    now: datetime,
) -> List[RecommendationResult]:
    """Score each candidate; returns results sorted by score (desc, stable)."""
    scored = []
    for candidate in candidates:
        score, factors = calculate_similarity_score(
            source, candidate, view_history, config, now
        )
        scored.append(
            RecommendationResult(item=candidate, score=score, match_factors=factors)
        )
    scored.sort(key=lambda r: r.score, reverse=True)
    return scored


def get_recommendations(
    source: ContentItem,
    candidates: Sequence[ContentItem],
    view_history: Optional[Sequence[str]] = None,
    config: Optional[RecommendationConfig] = None,
    now: Optional[datetime] = None,
) -> List[RecommendationResult]:
    """
    Recommend items related to source from candidates.

    1) Exclude source by id. 2) Drop candidates older than recent_months.
    3) Score. 4) Sort by score. 5) Drop scores below min_score.
    6) Author diversity (or plain truncation) to max_results.
    The source item never appears in the output.
    """
    config = resolve_config(config)
    now = resolve_now(now)

    pool = get_candidate_pool(source, candidates, now, config)
    scored = _score_candidates(source, pool, view_history, config, now)
    eligible = [r for r in scored if r.score >= config.min_score]

    results = apply_diversity_rules(eligible, config)
    logger.debug(
        "recommendations for %s: pool=%d eligible=%d returned=%d",
        source.id, len(pool), len(eligible), len(results),
    )
    return results


def get_mixed_recommendations(
    source: ContentItem,
    blog_posts: Sequence[BlogPost],
    podcast_episodes: Sequence[PodcastEpisode],
    view_history: Optional[Sequence[str]] = None,
    config: Optional[RecommendationConfig] = None,
    now: Optional[datetime] = None,
) -> List[MixedRecommendation]:
    """Recommendations over blog posts and podcast episodes pooled as one candidate list."""
    pooled: List[ContentItem] = [*blog_posts, *podcast_episodes]
    return [
        MixedRecommendation(
            item=rec.item,
            type=rec.item.kind,
            score=rec.score,
            match_factors=rec.match_factors,
        )
        for rec in get_recommendations(source, pooled, view_history, config, now)
    ]
