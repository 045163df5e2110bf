"""
Content scoring

Search relevance, related-content recommendations, and trending.

Single entry point for the scoring package:
- models/: BlogPost, PodcastEpisode (tagged on `kind`), configs, result models
- search/: relevance scoring, search orchestration, autocomplete suggestions
- recommendations/: similarity, candidate pool, author diversity, trending, related posts
- personalization/: in-memory view history and search analytics
- utils/: text normalization, date arithmetic, per-kind content helpers

All functions are pure over caller-owned, in-memory content lists.
"""

from .models import (
    DEFAULT_CONFIG,
    BlogPost,
    ContentItem,
    MixedRecommendation,
    PodcastEpisode,
    RecommendationConfig,
    RecommendationResult,
    RecommendationWeights,
    SearchOptions,
    SearchResult,
    SearchWeights,
    TrendingConfig,
    TrendingResult,
    ensure_blog_posts,
    ensure_podcast_episodes,
)
from .personalization import SearchAnalytics, ViewHistory
from .recommendations import (
    calculate_similarity_score,
    get_mixed_recommendations,
    get_recommendations,
    get_related_posts,
    get_trending_content,
)
from .search import (
    get_search_suggestions,
    score_match,
    search_all,
    search_blog_posts,
    search_podcast_episodes,
)
from .utils import normalize_text

__all__ = [
    "DEFAULT_CONFIG",
    "BlogPost",
    "ContentItem",
    "MixedRecommendation",
    "PodcastEpisode",
    "RecommendationConfig",
    "RecommendationResult",
    "RecommendationWeights",
    "SearchAnalytics",
    "SearchOptions",
    "SearchResult",
    "SearchWeights",
    "TrendingConfig",
    "TrendingResult",
    "ViewHistory",
    "calculate_similarity_score",
    "ensure_blog_posts",
    "ensure_podcast_episodes",
    "get_mixed_recommendations",
    "get_recommendations",
    "get_related_posts",
    "get_search_suggestions",
    "get_trending_content",
    "normalize_text",
    "score_match",
    "search_all",
    "search_blog_posts",
    "search_podcast_episodes",
]
