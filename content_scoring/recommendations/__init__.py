"""
Related-content recommendations, trending content, and related posts.

Public API: get_recommendations, get_mixed_recommendations, get_trending_content,
get_related_posts, calculate_similarity_score.
- candidate_pool: source exclusion and recency cut-off
- similarity: multi-factor score per candidate
- diversity: per-author cap on the sorted list
"""

from .candidate_pool import get_candidate_pool
from .diversity import apply_diversity_rules, select_top_k_with_author_cap
from .orchestrator import get_mixed_recommendations, get_recommendations
from .related import get_related_posts
from .similarity import calculate_similarity_score
from .trending import get_trending_content, trending_score

__all__ = [
    "apply_diversity_rules",
    "calculate_similarity_score",
    "get_candidate_pool",
    "get_mixed_recommendations",
    "get_recommendations",
    "get_related_posts",
    "get_trending_content",
    "select_top_k_with_author_cap",
    "trending_score",
]
