"""
Search suggestion tests.

Suggestions are a short relevance-ordered slice of search results that keeps
both content types represented when both match.

Run:
----
    pytest tests/test_suggestions.py -v
"""

from content_scoring.search import get_search_suggestions

from conftest import make_episode, make_post


def _catalog(n_posts, n_episodes):
    # Posts carry the query term in the title, episodes only in the body,
    # so every post outranks every episode.
    posts = [make_post(f"p{i}", f"Estrategia {i}", category="process") for i in range(n_posts)]
    episodes = [
        make_episode(f"e{i}", f"Episodio {i}", category="process", description="estrategia")
        for i in range(n_episodes)
    ]
    return posts, episodes


class TestSearchSuggestions:

    def test_short_query_returns_empty(self):
        posts, episodes = _catalog(3, 3)
        assert get_search_suggestions(posts, episodes, "e") == []
        assert get_search_suggestions(posts, episodes, " e ") == []

    def test_punctuation_query_returns_empty(self):
        posts, episodes = _catalog(3, 3)
        assert get_search_suggestions(posts, episodes, "?!?") == []

    def test_both_types_represented(self):
        posts, episodes = _catalog(6, 6)
        results = get_search_suggestions(posts, episodes, "estrategia", limit=4)
        assert len(results) == 4
        assert sum(1 for r in results if r.type == "blog") == 2
        assert sum(1 for r in results if r.type == "podcast") == 2

    def test_backfills_when_one_type_is_short(self):
        posts, episodes = _catalog(6, 1)
        results = get_search_suggestions(posts, episodes, "estrategia", limit=4)
        assert len(results) == 4
        assert sum(1 for r in results if r.type == "podcast") == 1

    def test_keeps_relevance_order(self):
        posts, episodes = _catalog(6, 6)
        results = get_search_suggestions(posts, episodes, "estrategia", limit=4)
        scores = [r.relevance_score for r in results]
        assert scores == sorted(scores, reverse=True)

    def test_capped_at_ten(self):
        posts, episodes = _catalog(12, 12)
        assert len(get_search_suggestions(posts, episodes, "estrategia", limit=25)) == 10

    def test_fewer_matches_than_limit(self):
        posts, episodes = _catalog(1, 1)
        assert len(get_search_suggestions(posts, episodes, "estrategia", limit=5)) == 2
