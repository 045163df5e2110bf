"""Data models for content scoring."""

from .config import (
    DEFAULT_CONFIG,
    DEFAULT_SEARCH_WEIGHTS,
    DEFAULT_TRENDING_CONFIG,
    RecommendationConfig,
    RecommendationWeights,
    SearchOptions,
    SearchWeights,
    TrendingConfig,
    resolve_config,
)
from .content import (
    Author,
    BlogPost,
    Category,
    ContentItem,
    ContentType,
    PodcastEpisode,
    PodcastGuest,
    Tag,
    ensure_blog_posts,
    ensure_podcast_episodes,
)
from .history import PopularSearch, RecentSearch, ViewHistoryItem, ViewStatistics
from .scoring import MixedRecommendation, RecommendationResult, SearchResult, TrendingResult

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_SEARCH_WEIGHTS",
    "DEFAULT_TRENDING_CONFIG",
    "Author",
    "BlogPost",
    "Category",
    "ContentItem",
    "ContentType",
    "MixedRecommendation",
    "PodcastEpisode",
    "PodcastGuest",
    "PopularSearch",
    "RecentSearch",
    "RecommendationConfig",
    "RecommendationResult",
    "RecommendationWeights",
    "SearchOptions",
    "SearchResult",
    "SearchWeights",
    "Tag",
    "TrendingConfig",
    "TrendingResult",
    "ViewHistoryItem",
    "ViewStatistics",
    "ensure_blog_posts",
    "ensure_podcast_episodes",
    "resolve_config",
]
