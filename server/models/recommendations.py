"""Recommendation, trending, and related-post response models."""

from typing import List

from content_scoring.models import (
    BlogPost,
    MixedRecommendation,
    TrendingResult,
)

from .common import ApiModel


class RecommendationsResponse(ApiModel):
    source_id: str
    mixed: bool
    recommendations: List[MixedRecommendation]
    total: int


class TrendingResponse(ApiModel):
    items: List[TrendingResult]
    total: int


class RelatedPostsResponse(ApiModel):
    post_id: str
    posts: List[BlogPost]
    total: int
