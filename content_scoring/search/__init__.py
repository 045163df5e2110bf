"""
Text search over blog posts and podcast episodes.

Public API: search_all, search_blog_posts, search_podcast_episodes,
get_search_suggestions, score_match.
"""

from .orchestrator import search_all, search_blog_posts, search_podcast_episodes, sort_results
from .relevance import score_match
from .suggestions import get_search_suggestions

__all__ = [
    "get_search_suggestions",
    "score_match",
    "search_all",
    "search_blog_posts",
    "search_podcast_episodes",
    "sort_results",
]
