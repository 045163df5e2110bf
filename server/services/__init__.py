"""Backing logic: content stores."""

from .content_store import ContentStore, InMemoryContentStore, JsonContentStore

__all__ = [
    "ContentStore",
    "InMemoryContentStore",
    "JsonContentStore",
]
