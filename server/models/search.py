"""Search endpoint Pydantic models."""

from typing import List

from content_scoring.models import SearchResult

from .common import ApiModel


class SearchBreakdown(ApiModel):
    blog: int = 0
    podcast: int = 0


class SearchResponse(ApiModel):
    success: bool = True
    query: str
    type: str
    sort_by: str
    total_results: int
    results: List[SearchResult]
    breakdown: SearchBreakdown
