"""
Search analytics

Recent and popular queries, and query suggestions built from them.

In-memory only. Queries are compared case-insensitively; blank queries are ignored.
"""

from datetime import datetime
from typing import Dict, List, Optional

from ..models.history import PopularSearch, RecentSearch
from ..utils.dates import resolve_now

MAX_RECENT_SEARCHES = 10
MAX_POPULAR_SEARCHES = 20


def _key(query: str) -> str:
    return query.strip().lower()


class SearchAnalytics:
    """Recent searches (newest first) and popular searches (most searched first)."""

    def __init__(
        self,
        max_recent: int = MAX_RECENT_SEARCHES,
        max_popular: int = MAX_POPULAR_SEARCHES,
    ):
        self.max_recent = max_recent
        self.max_popular = max_popular
        self._recent: List[RecentSearch] = []
        self._popular: List[PopularSearch] = []

    def record_search(
        self,
        query: str,
        results_count: Optional[int] = None,
        now: Optional[datetime] = None,
    ) -> None:
        """Add query to recent searches and bump its popularity count."""
        if not query.strip():
            return
        now = resolve_now(now)
        key = _key(query)

        kept = [s for s in self._recent if _key(s.query) != key]
        entry = RecentSearch(query=query.strip(), searched_at=now, results_count=results_count)
        self._recent = [entry, *kept][: self.max_recent]

        self._bump_popular(query.strip(), now)

    def _bump_popular(self, query: str, now: datetime) -> None:
        key = _key(query)
        updated: List[PopularSearch] = []
        found = False
        for s in self._popular:
            if _key(s.query) == key:
                s = s.model_copy(update={"count": s.count + 1, "last_searched": now})
                found = True
            updated.append(s)
        if not found:
            updated.append(PopularSearch(query=query, count=1, last_searched=now))
        updated.sort(key=lambda s: s.count, reverse=True)
        self._popular = updated[: self.max_popular]

    def recent_searches(self) -> List[RecentSearch]:
        return list(self._recent)

    def remove_recent_search(self, query: str) -> None:
        key = _key(query)
        self._recent = [s for s in self._recent if _key(s.query) != key]

    def clear_recent_searches(self) -> None:
        self._recent = []

    def popular_searches(self) -> List[PopularSearch]:
        return list(self._popular)

    def top_popular_searches(self, limit: int = 5) -> List[PopularSearch]:
        return self._popular[:limit]

    def clear_popular_searches(self) -> None:
        self._popular = []

    def clear_all(self) -> None:
        self.clear_recent_searches()
        self.clear_popular_searches()

    def suggested_queries(self, partial_query: str, limit: int = 5) -> List[str]:
        """
        Past queries containing partial_query.

        Blank input returns the most recent queries. Matches are ranked popular-first
        (by count), then by recency for queries only in the recent list.
        """
        if not partial_query.strip():
            return [s.query for s in self._recent[:limit]]

        needle = _key(partial_query)
        popular_by_key: Dict[str, PopularSearch] = {_key(s.query): s for s in self._popular}
        recent_by_key: Dict[str, RecentSearch] = {_key(s.query): s for s in self._recent}

        candidates: Dict[str, str] = {}
        for s in [*self._recent, *self._popular]:
            candidates.setdefault(_key(s.query), s.query)
        matches = [k for k in candidates if needle in k]

        def rank(key: str):
            popular = popular_by_key.get(key)
            recent = recent_by_key.get(key)
            if popular is not None:
                return (0, -popular.count, 0.0)
            return (1, 0, -recent.searched_at.timestamp())

        matches.sort(key=rank)
        return [candidates[k] for k in matches[:limit]]
