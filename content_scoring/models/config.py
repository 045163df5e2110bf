"""
Scoring configuration — search weights, recommendation weights and limits, trending boosts.

Defaults are defined here. Callers (server, tests) may pass their own instances or a
dict; RecommendationConfig.from_dict() merges it with these defaults. Weight tables are
injected rather than read from module constants so that tests can override them.
"""

from typing import Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


def _check_non_negative(model: BaseModel, fields) -> None:
    """Raise ValueError if any of the named float fields is negative."""
    negative = [name for name in fields if getattr(model, name) < 0]
    if negative:
        raise ValueError(f"Weights must be non-negative, got negative: {', '.join(negative)}")


class ScoringModel(BaseModel):
    """Base for config models: accepts camelCase keys (maxResults) and snake_case."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class SearchWeights(ScoringModel):
    """Per-field weights for search relevance. Ordering: title > tag/category > person > body."""

    # -------------------------------------------------------------------------
    # Title
    # -------------------------------------------------------------------------

    # Per query term found in the title.
    title: float = 3.0
    # Added once when the whole title equals the whole query.
    title_exact_bonus: float = 5.0
    # Added once when the title starts with the query.
    title_prefix_bonus: float = 2.0

    # -------------------------------------------------------------------------
    # Tags and category (matched against display names, per term)
    # -------------------------------------------------------------------------

    # Term equals the whole tag/category name.
    taxonomy_exact: float = 2.5
    # Term is a substring of the tag/category name.
    taxonomy_partial: float = 1.5

    # -------------------------------------------------------------------------
    # People: blog author, podcast hosts and guests
    # -------------------------------------------------------------------------

    person: float = 1.25

    # -------------------------------------------------------------------------
    # Body: excerpt/description + content, per occurrence
    # -------------------------------------------------------------------------

    body: float = 1.0
    # Occurrences beyond this many per term are ignored.
    body_max_occurrences: int = Field(default=10, ge=0)

    @model_validator(mode="after")
    def weights_non_negative(self):
        _check_non_negative(
            self,
            ("title", "title_exact_bonus", "title_prefix_bonus", "taxonomy_exact",
             "taxonomy_partial", "person", "body"),
        )
        return self


SearchType = Literal["all", "blog", "podcast"]
SortBy = Literal["relevance", "date"]


class SearchOptions(ScoringModel):
    """Options for search_all. An empty query is allowed here and yields no results."""

    query: str
    type: SearchType = "all"
    sort_by: SortBy = "relevance"
    limit: int = Field(default=10, ge=1)


class RecommendationWeights(ScoringModel):
    """Additive weights for the recommendation similarity score."""

    same_category: float = 3.0
    # Per tag id present in both items.
    shared_tag: float = 2.0
    same_author: float = 1.5
    similar_duration: float = 1.0
    recent_publish: float = 2.0
    previously_viewed: float = 1.0

    @model_validator(mode="after")
    def weights_non_negative(self):
        _check_non_negative(self, tuple(type(self).model_fields))
        return self


class RecommendationConfig(ScoringModel):
    """Configuration for related-content recommendations."""

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    max_results: int = Field(default=6, ge=0)
    # Candidates scoring below this are dropped before the diversity pass.
    min_score: float = Field(default=0.5, ge=0)

    # -------------------------------------------------------------------------
    # Author diversity (greedy walk over the sorted list)
    # -------------------------------------------------------------------------

    diversity_enabled: bool = True
    max_per_author: int = Field(default=2, ge=1)

    # -------------------------------------------------------------------------
    # Candidate pool
    # -------------------------------------------------------------------------

    # Candidates published before now - recent_months are dropped. 0 disables the filter.
    recent_months: int = Field(default=6, ge=0)

    # -------------------------------------------------------------------------
    # Factors
    # -------------------------------------------------------------------------

    include_view_history: bool = True
    # "Recent publish" factor window.
    recent_days: int = Field(default=30, ge=0)
    # Reading-time difference (minutes) still counted as similar for blog/blog pairs.
    blog_duration_window: int = Field(default=3, ge=0)
    # Same, for any pair involving a podcast episode.
    podcast_duration_window: int = Field(default=10, ge=0)

    weights: RecommendationWeights = Field(default_factory=RecommendationWeights)

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "RecommendationConfig":
        """Create config from dictionary (e.g., query params or JSON), ignoring unknown keys."""
        flat = {k: v for k, v in config_dict.items() if k not in ("diversity", "weights")}
        if "diversity" in config_dict:
            div = config_dict["diversity"]
            if "enabled" in div:
                flat["diversity_enabled"] = div["enabled"]
            per_author = div.get("max_per_author", div.get("maxPerAuthor"))
            if per_author is not None:
                flat["max_per_author"] = per_author
        if "weights" in config_dict:
            flat["weights"] = RecommendationWeights.model_validate(config_dict["weights"])
        allowed = set(cls.model_fields) | {f.alias for f in cls.model_fields.values() if f.alias}
        filtered = {k: v for k, v in flat.items() if k in allowed}
        return cls.model_validate(filtered)


class TrendingConfig(ScoringModel):
    """Popularity-decay scoring: (views or plays) / days since publish, then boosts."""

    recent_days: int = Field(default=30, ge=0)
    recent_boost: float = Field(default=2.0, ge=0)
    featured_boost: float = Field(default=1.5, ge=0)


DEFAULT_SEARCH_WEIGHTS = SearchWeights()
DEFAULT_CONFIG = RecommendationConfig()
DEFAULT_TRENDING_CONFIG = TrendingConfig()


def resolve_config(config: Optional[RecommendationConfig]) -> RecommendationConfig:
    """Return config or DEFAULT_CONFIG when none is provided."""
    return config if config is not None else DEFAULT_CONFIG
