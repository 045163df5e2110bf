"""Per-visitor, in-memory view history and search analytics."""

from .search_history import MAX_POPULAR_SEARCHES, MAX_RECENT_SEARCHES, SearchAnalytics
from .view_history import HISTORY_EXPIRATION_DAYS, MAX_HISTORY_ITEMS, ViewHistory

__all__ = [
    "HISTORY_EXPIRATION_DAYS",
    "MAX_HISTORY_ITEMS",
    "MAX_POPULAR_SEARCHES",
    "MAX_RECENT_SEARCHES",
    "SearchAnalytics",
    "ViewHistory",
]
