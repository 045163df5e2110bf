"""
Recommendation similarity

Additive multi-factor score between a source and a candidate.

Factors (weights from RecommendationWeights):
- same category (by id)
- shared tags (per tag id in both items)
- same primary author/host
- similar duration (blog/blog pairs use a tighter window than pairs involving a podcast)
- candidate published recently
- candidate previously viewed (only when view history inclusion is enabled)

Each triggered factor appends a human-readable reason; reasons are for display and
debugging only.
"""

from datetime import datetime
from typing import List, Optional, Sequence, Tuple

from ..models.config import DEFAULT_CONFIG, RecommendationConfig
from ..models.content import ContentItem
from ..utils.content import get_author_id, get_duration_minutes
from ..utils.dates import resolve_now, within_days


def _duration_window(source: ContentItem, candidate: ContentItem, config: RecommendationConfig) -> int:
    if source.kind == "blog" and candidate.kind == "blog":
        return config.blog_duration_window
    return config.podcast_duration_window


def calculate_similarity_score(
    source: ContentItem,
    candidate: ContentItem,
    view_history: Optional[Sequence[str]] = None,
    config: RecommendationConfig = DEFAULT_CONFIG,
    now: Optional[datetime] = None,
) -> Tuple[float, List[str]]:
    """Return (score, factors) for candidate relative to source."""
    now = resolve_now(now)
    weights = config.weights
    score = 0.0
    factors: List[str] = []

    # 1) Same category
    if source.category.id == candidate.category.id:
        score += weights.same_category
        factors.append(f"Same category: {source.category.name}")

    # 2) Shared tags, by id
    source_tag_ids = {tag.id for tag in source.tags}
    shared = [tag for tag in candidate.tags if tag.id in source_tag_ids]
    if shared:
        score += len(shared) * weights.shared_tag
        factors.append(f"{len(shared)} shared tag(s): {', '.join(t.name for t in shared)}")

    # 3) Same author (empty ids never match)
    source_author = get_author_id(source)
    if source_author and source_author == get_author_id(candidate):
        score += weights.same_author
        factors.append("Same author")

    # 4) Similar duration / reading time, in minutes
    candidate_minutes = get_duration_minutes(candidate)
    if abs(get_duration_minutes(source) - candidate_minutes) <= _duration_window(source, candidate, config):
        score += weights.similar_duration
        factors.append(f"Similar duration: ~{candidate_minutes} min")

    # 5) Recently published
    if within_days(candidate.published_at, config.recent_days, now):
        score += weights.recent_publish
        factors.append("Recently published")

    # 6) Previously viewed
    if config.include_view_history and view_history and candidate.id in view_history:
        score += weights.previously_viewed
        factors.append("Previously viewed")

    return score, factors
