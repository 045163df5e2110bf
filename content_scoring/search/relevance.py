"""
Search relevance scoring — weighted per-field, per-term matching of a query against one item.

Fields and default weights (see SearchWeights):
- title: per matching term, plus one-off bonuses when the query covers every title
  word or the first title word
- tags and category: exact name match outweighs partial (substring) match
- people: blog author, podcast hosts and guests
- body: excerpt/description + content, per occurrence (capped per term)

Matching is case- and diacritic-insensitive. A score of 0 means "not a match".
"""

from typing import Iterable, List

from ..models.config import DEFAULT_SEARCH_WEIGHTS, SearchWeights
from ..models.content import ContentItem
from ..utils.content import get_description, get_people_names
from ..utils.text import normalize_text, tokenize, words


def _title_score(terms: List[str], title: str, weights: SearchWeights) -> float:
    """
    Per-term title hits, plus two bonuses that depend only on which terms are present:
    exact when every title word is a query term, prefix when the first title word is.
    """
    normalized = normalize_text(title)
    hits = sum(1 for term in terms if term in normalized)
    if not hits:
        return 0.0
    score = hits * weights.title
    title_words = words(title)
    if title_words and set(title_words) <= set(terms):
        score += weights.title_exact_bonus
    if title_words and title_words[0] in terms:
        score += weights.title_prefix_bonus
    return score


def _taxonomy_score(terms: List[str], names: Iterable[str], weights: SearchWeights) -> float:
    """Tag and category names: a term equal to the whole name is exact, a substring is partial."""
    score = 0.0
    for name in names:
        name_words = words(name)
        name_phrase = " ".join(name_words)
        for term in terms:
            if term == name_phrase:
                score += weights.taxonomy_exact
            elif term in name_phrase:
                score += weights.taxonomy_partial
        # Multi-word names ("Transformación Digital") with every word in the query
        if len(name_words) > 1 and set(name_words) <= set(terms):
            score += weights.taxonomy_exact
    return score


def _people_score(terms: List[str], names: Iterable[str], weights: SearchWeights) -> float:
    score = 0.0
    for name in names:
        normalized = normalize_text(name)
        score += sum(weights.person for term in terms if term in normalized)
    return score


def _body_score(terms: List[str], text: str, weights: SearchWeights) -> float:
    """Occurrence count per term, capped at body_max_occurrences."""
    normalized = normalize_text(text)
    return sum(
        min(normalized.count(term), weights.body_max_occurrences) * weights.body
        for term in terms
    )


def score_match(
    query: str,
    item: ContentItem,
    weights: SearchWeights = DEFAULT_SEARCH_WEIGHTS,
) -> float:
    """
    Relevance of item for query; 0.0 when no term matches anywhere.

    Every contribution, bonuses included, depends only on which terms are
    present, so adding a term never lowers the score.
    """
    terms = tokenize(query)
    if not terms:
        return 0.0
    taxonomy_names = [item.category.name] + [tag.name for tag in item.tags]
    body = f"{get_description(item)} {item.content}"

    return (
        _title_score(terms, item.title, weights)
        + _taxonomy_score(terms, taxonomy_names, weights)
        + _people_score(terms, get_people_names(item), weights)
        + _body_score(terms, body, weights)
    )
