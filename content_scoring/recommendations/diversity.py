"""
Author diversity

Cap how many recommendations may share a primary author.

Applied after sorting by score: a greedy walk admits a candidate only while its
author's running count is below max_per_author, and stops at max_results.
"""

from typing import Dict, List, Sequence, TypeVar

from ..models.config import DEFAULT_CONFIG, RecommendationConfig
from ..models.scoring import RecommendationResult
from ..utils.content import get_author_id

R = TypeVar("R", bound=RecommendationResult)


def select_top_k_with_author_cap(
    scored_list: Sequence[R],
    k: int,
    max_per_author: int = 2,
) -> List[R]:
    """
    Select up to k results, skipping any whose author already has max_per_author picks.

    Args:
        scored_list: Results sorted by score (desc). Not mutated.
        k: Number to select.
        max_per_author: Hard cap per primary author id.

    Returns:
        Ordered list of up to k results, relative order preserved.
    """
    selected: List[R] = []
    author_count: Dict[str, int] = {}

    for scored in scored_list:
        if len(selected) >= k:
            break
        author_id = get_author_id(scored.item)
        current_count = author_count.get(author_id, 0)
        if current_count >= max_per_author:
            continue
        selected.append(scored)
        author_count[author_id] = current_count + 1

    return selected


def apply_diversity_rules(
    recommendations: Sequence[R],
    config: RecommendationConfig = DEFAULT_CONFIG,
) -> List[R]:
    """Author cap when diversity is enabled; otherwise just the first max_results."""
    if not config.diversity_enabled:
        return list(recommendations[: config.max_results])
    return select_top_k_with_author_cap(
        recommendations,
        k=config.max_results,
        max_per_author=config.max_per_author,
    )
