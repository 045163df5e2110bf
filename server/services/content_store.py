"""
Content Store abstraction.

Supplies blog posts and podcast episodes to the scoring functions.
Implementations: JSON file (mock content / CMS export) and in-memory (tests, embedding).
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol, Sequence, Union

from content_scoring.models import (
    BlogPost,
    ContentItem,
    PodcastEpisode,
    ensure_blog_posts,
    ensure_podcast_episodes,
)

logger = logging.getLogger(__name__)


class ContentStore(Protocol):
    """Protocol for content catalog access."""

    def get_blog_posts(self) -> List[BlogPost]:
        ...

    def get_podcast_episodes(self) -> List[PodcastEpisode]:
        ...

    def get_item(self, content_id: str) -> Optional[ContentItem]:
        """Get one blog post or episode by id or slug."""
        ...


class InMemoryContentStore:
    """Content store over lists already in memory."""

    def __init__(
        self,
        blog_posts: Sequence[Union[Dict[str, Any], BlogPost]] = (),
        podcast_episodes: Sequence[Union[Dict[str, Any], PodcastEpisode]] = (),
    ):
        self._blog_posts = ensure_blog_posts(list(blog_posts))
        self._podcast_episodes = ensure_podcast_episodes(list(podcast_episodes))
        self._by_key: Dict[str, ContentItem] = {}
        for item in [*self._blog_posts, *self._podcast_episodes]:
            self._by_key[item.id] = item
            if item.slug:
                self._by_key.setdefault(item.slug, item)

    def get_blog_posts(self) -> List[BlogPost]:
        return list(self._blog_posts)

    def get_podcast_episodes(self) -> List[PodcastEpisode]:
        return list(self._podcast_episodes)

    def get_item(self, content_id: str) -> Optional[ContentItem]:
        return self._by_key.get(content_id)


class JsonContentStore(InMemoryContentStore):
    """
    Content store backed by one JSON file: {"blogPosts": [...], "podcastEpisodes": [...]}.
    Records use the CMS camelCase shape (publishedAt, readingTime, hosts, ...).
    """

    def __init__(self, path: Union[Path, str]):
        self._path = Path(path)
        if not self._path.exists():
            raise FileNotFoundError(f"Content JSON not found: {self._path}")
        with open(self._path, encoding="utf-8") as f:
            data = json.load(f)
        super().__init__(
            data.get("blogPosts", []),
            data.get("podcastEpisodes", []),
        )
        logger.info(
            "Loaded content from %s: %d blog posts, %d podcast episodes",
            self._path, len(self._blog_posts), len(self._podcast_episodes),
        )
