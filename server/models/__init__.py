"""Pydantic request/response models for the API."""

from .common import ApiModel, ErrorResponse
from .recommendations import RecommendationsResponse, RelatedPostsResponse, TrendingResponse
from .search import SearchBreakdown, SearchResponse

__all__ = [
    "ApiModel",
    "ErrorResponse",
    "RecommendationsResponse",
    "RelatedPostsResponse",
    "SearchBreakdown",
    "SearchResponse",
    "TrendingResponse",
]
