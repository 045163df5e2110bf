"""
Candidate pool pre-selection for recommendations.

Filters: exclude the source item, drop candidates published before
now - recent_months (calendar months; 0 disables the cut-off).

The public entry point is get_candidate_pool.
"""

import logging
from datetime import datetime
from typing import List, Sequence, TypeVar

from ..models.config import DEFAULT_CONFIG, RecommendationConfig
from ..models.content import ContentItem
from ..utils.dates import months_before

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=ContentItem)


def _not_source(item: ContentItem, source_id: str) -> bool:
    """True if item is not the source item (compared by id)."""
    return item.id != source_id


def _within_recent_months(item: ContentItem, cutoff: datetime) -> bool:
    """True if item was published at or after the cut-off."""
    return item.published_at >= cutoff


def get_candidate_pool(
    source: ContentItem,
    candidates: Sequence[T],
    now: datetime,
    config: RecommendationConfig = DEFAULT_CONFIG,
) -> List[T]:
    """Return candidates eligible for scoring against source, in input order."""
    pool = [item for item in candidates if _not_source(item, source.id)]

    if config.recent_months > 0:
        cutoff = months_before(now, config.recent_months)
        pool = [item for item in pool if _within_recent_months(item, cutoff)]
        logger.debug(
            "candidate pool for %s: %d of %d within %d months",
            source.id, len(pool), len(candidates), config.recent_months,
        )
    return pool
