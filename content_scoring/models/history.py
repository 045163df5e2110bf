"""
History models

A viewer's recently viewed content and search queries.

Used by the personalization stores; viewed ids feed the recommendation
"previously viewed" factor.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .content import ContentType


class HistoryModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ViewHistoryItem(HistoryModel):
    id: str
    type: ContentType
    title: str
    viewed_at: datetime


class ViewStatistics(HistoryModel):
    total_views: int = 0
    blog_views: int = 0
    podcast_views: int = 0
    oldest_view: Optional[datetime] = None
    newest_view: Optional[datetime] = None


class RecentSearch(HistoryModel):
    query: str
    searched_at: datetime
    results_count: Optional[int] = None


class PopularSearch(HistoryModel):
    query: str
    count: int
    last_searched: datetime
