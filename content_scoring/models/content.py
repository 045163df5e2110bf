"""
Content models

Typed representation of blog posts and podcast episodes.

Used by search, recommendation, and trending scoring instead of raw dicts.
Built from content store / API dicts via BlogPost.model_validate(d) or
PodcastEpisode.model_validate(d). Accepts the camelCase field names used by the
CMS export (publishedAt, readingTime) as well as snake_case.

BlogPost and PodcastEpisode form a tagged union on `kind`; scoring code
dispatches on that tag.
"""

from datetime import datetime, timezone
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ContentRecord(BaseModel):
    """Base config shared by all content records: immutable, camelCase aware."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="allow",
    )


class Author(ContentRecord):
    id: str
    name: str
    role: Optional[str] = None
    avatar: Optional[str] = None
    bio: Optional[str] = None


class PodcastGuest(ContentRecord):
    id: str
    name: str
    role: Optional[str] = None
    company: Optional[str] = None


class Category(ContentRecord):
    id: str
    name: str
    slug: str = ""


class Tag(ContentRecord):
    id: str
    name: str
    slug: str = ""


class _PublishedContent(ContentRecord):
    """Fields common to every publishable item."""

    id: str
    title: str
    slug: str = ""
    cover_image: str = ""
    published_at: datetime
    category: Category
    tags: List[Tag] = Field(default_factory=list)
    featured: bool = False

    @field_validator("published_at")
    @classmethod
    def _as_utc(cls, value: datetime) -> datetime:
        """Naive timestamps are treated as UTC so comparisons never mix tz-awareness."""
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class BlogPost(_PublishedContent):
    """A blog article. reading_time is in minutes."""

    kind: Literal["blog"] = "blog"
    excerpt: str = ""
    content: str = ""
    reading_time: int = 0
    views: int = 0
    author: Optional[Author] = None


class PodcastEpisode(_PublishedContent):
    """A podcast episode. duration is in seconds; the first host is the primary author."""

    kind: Literal["podcast"] = "podcast"
    description: str = ""
    content: str = ""
    duration: int = 0
    plays: int = 0
    hosts: List[Author] = Field(default_factory=list)
    guests: List[PodcastGuest] = Field(default_factory=list)
    season: Optional[int] = None
    episode: Optional[int] = None


ContentItem = Annotated[Union[BlogPost, PodcastEpisode], Field(discriminator="kind")]

ContentType = Literal["blog", "podcast"]


def ensure_blog_posts(items: List[Union[Dict[str, Any], BlogPost]]) -> List[BlogPost]:
    """Convert list of dicts or BlogPosts to list of BlogPost models."""
    return [
        BlogPost.model_validate(i) if isinstance(i, dict) else i
        for i in items
    ]


def ensure_podcast_episodes(
    items: List[Union[Dict[str, Any], PodcastEpisode]],
) -> List[PodcastEpisode]:
    """Convert list of dicts or PodcastEpisodes to list of PodcastEpisode models."""
    return [
        PodcastEpisode.model_validate(i) if isinstance(i, dict) else i
        for i in items
    ]
