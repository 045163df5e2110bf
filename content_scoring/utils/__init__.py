"""Shared utilities for text matching, dates, and content metadata."""

from .content import (
    get_author_id,
    get_description,
    get_duration_minutes,
    get_people_names,
    get_popularity,
)
from .dates import days_since, months_before, resolve_now, within_days
from .text import normalize_text, phrase, tokenize, words

__all__ = [
    "days_since",
    "get_author_id",
    "get_description",
    "get_duration_minutes",
    "get_people_names",
    "get_popularity",
    "months_before",
    "normalize_text",
    "phrase",
    "resolve_now",
    "tokenize",
    "within_days",
    "words",
]
