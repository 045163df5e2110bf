"""
Content helpers

Author, duration, popularity, and text extraction.

Every helper dispatches on the item's `kind` tag.
"""

import logging
from typing import List

from ..models.content import ContentItem

logger = logging.getLogger(__name__)


def get_author_id(item: ContentItem) -> str:
    """Primary author id. Podcasts use the first host as author; missing -> ""."""
    if item.kind == "blog":
        return item.author.id if item.author else ""
    if not item.hosts:
        logger.warning("Podcast episode %s has no hosts; author id is empty", item.id)
        return ""
    return item.hosts[0].id


def get_duration_minutes(item: ContentItem) -> int:
    """Reading time for blog posts; podcast duration converted seconds -> minutes (half up)."""
    if item.kind == "blog":
        return item.reading_time
    return int(item.duration / 60 + 0.5)


def get_popularity(item: ContentItem) -> int:
    """Views for blog posts, plays for podcast episodes."""
    if item.kind == "blog":
        return item.views
    return item.plays


def get_description(item: ContentItem) -> str:
    """Excerpt for blog posts, description for podcast episodes."""
    if item.kind == "blog":
        return item.excerpt
    return item.description


def get_people_names(item: ContentItem) -> List[str]:
    """Author name for blog posts; host then guest names for podcast episodes."""
    if item.kind == "blog":
        return [item.author.name] if item.author else []
    return [h.name for h in item.hosts] + [g.name for g in item.guests]
