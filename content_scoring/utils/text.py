"""
Text helpers

Normalization and tokenization for search matching.
"""

import re
import unicodedata
from typing import List

_TERM_RE = re.compile(r"[^\W_]+")


def normalize_text(text: str) -> str:
    """
    Lowercase, strip diacritical marks, and trim.

    "Transformación" and "transformacion" normalize to the same string.
    """
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.lower().strip()


def tokenize(text: str) -> List[str]:
    """
    Split normalized text into unique word terms, in order of first appearance.

    Punctuation is a separator, so a punctuation-only query yields no terms.
    """
    terms: List[str] = []
    for term in _TERM_RE.findall(normalize_text(text)):
        if term not in terms:
            terms.append(term)
    return terms


def words(text: str) -> List[str]:
    """All word terms of normalized text, duplicates kept."""
    return _TERM_RE.findall(normalize_text(text))


def phrase(text: str) -> str:
    """Normalized text with punctuation collapsed to single spaces."""
    return " ".join(words(text))
