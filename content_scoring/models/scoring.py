"""
Scoring models

Ranked outputs produced by search, recommendations, and trending.

Contains:
- SearchResult: read-only projection of a content item with its relevance score
- RecommendationResult / MixedRecommendation: a candidate with its similarity score
- TrendingResult: an item with its popularity-decay score
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .content import ContentItem, ContentType


class ScoredModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class SearchResult(ScoredModel):
    """A content item matched by a query. Serialized by alias for the UI (relevanceScore)."""

    id: str
    type: ContentType
    title: str
    description: str
    slug: str
    cover_image: str = ""
    published_at: datetime
    relevance_score: float = Field(ge=0)
    # Display names; matching is done on ids upstream.
    category: str
    tags: List[str] = Field(default_factory=list)


class RecommendationResult(ScoredModel):
    """A recommended item; match_factors explains the score and is not used for ranking."""

    item: ContentItem
    score: float
    match_factors: List[str] = Field(default_factory=list)


class MixedRecommendation(RecommendationResult):
    """A recommendation drawn from the pooled blog + podcast candidates, tagged with its type."""

    type: ContentType


class TrendingResult(ScoredModel):
    item: ContentItem
    type: ContentType
    score: float
