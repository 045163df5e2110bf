"""
View history

Privacy-friendly, in-memory record of recently viewed content.

Keeps the most recent views (newest first); re-viewing an item moves it to the
front, and views older than the expiration window are dropped on read. Nothing is
persisted: the caller owns the instance (e.g. one per visitor session).
"""

import json
from datetime import datetime, timedelta
from typing import Dict, List, Optional

from ..models.content import ContentType
from ..models.history import ViewHistoryItem, ViewStatistics
from ..utils.dates import resolve_now

MAX_HISTORY_ITEMS = 20
HISTORY_EXPIRATION_DAYS = 30


class ViewHistory:
    """Recently viewed items for one visitor."""

    def __init__(
        self,
        max_items: int = MAX_HISTORY_ITEMS,
        expiration_days: int = HISTORY_EXPIRATION_DAYS,
    ):
        self.max_items = max_items
        self.expiration_days = expiration_days
        self._items: List[ViewHistoryItem] = []
        self.last_updated: Optional[datetime] = None

    def items(self, now: Optional[datetime] = None) -> List[ViewHistoryItem]:
        """Unexpired views, newest first."""
        cutoff = resolve_now(now) - timedelta(days=self.expiration_days)
        self._items = [item for item in self._items if item.viewed_at >= cutoff]
        return list(self._items)

    def add_view(
        self,
        content_id: str,
        content_type: ContentType,
        title: str,
        now: Optional[datetime] = None,
    ) -> None:
        """Record a view; an existing entry for the id is replaced and moved to the front."""
        now = resolve_now(now)
        kept = [item for item in self.items(now) if item.id != content_id]
        entry = ViewHistoryItem(id=content_id, type=content_type, title=title, viewed_at=now)
        self._items = [entry, *kept][: self.max_items]
        self.last_updated = now

    def viewed_ids(self, now: Optional[datetime] = None) -> List[str]:
        """Ids in view order (newest first); pass as view_history to get_recommendations."""
        return [item.id for item in self.items(now)]

    def recently_viewed_by_type(
        self,
        content_type: ContentType,
        limit: int = 5,
        now: Optional[datetime] = None,
    ) -> List[ViewHistoryItem]:
        return [item for item in self.items(now) if item.type == content_type][:limit]

    def has_viewed(self, content_id: str, now: Optional[datetime] = None) -> bool:
        return any(item.id == content_id for item in self.items(now))

    def clear(self) -> None:
        self._items = []
        self.last_updated = None

    def statistics(self, now: Optional[datetime] = None) -> ViewStatistics:
        items = self.items(now)
        if not items:
            return ViewStatistics()
        return ViewStatistics(
            total_views=len(items),
            blog_views=sum(1 for item in items if item.type == "blog"),
            podcast_views=sum(1 for item in items if item.type == "podcast"),
            oldest_view=items[-1].viewed_at,
            newest_view=items[0].viewed_at,
        )

    def preferences(self, now: Optional[datetime] = None) -> Dict[str, object]:
        """Viewed ids split by type."""
        items = self.items(now)
        return {
            "blog_ids": [item.id for item in items if item.type == "blog"],
            "podcast_ids": [item.id for item in items if item.type == "podcast"],
            "total_items": len(items),
        }

    def export_json(self, now: Optional[datetime] = None) -> str:
        """History as indented JSON, for a visitor's own download."""
        payload = {
            "items": [item.model_dump(mode="json", by_alias=True) for item in self.items(now)],
            "lastUpdated": self.last_updated.isoformat() if self.last_updated else None,
        }
        return json.dumps(payload, indent=2)
