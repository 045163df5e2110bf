"""
Recommendation similarity tests.

Each factor adds its configured weight and a human-readable reason:
same category, shared tags, same author, similar duration, recently
published, previously viewed.

Run:
----
    pytest tests/test_similarity.py -v
"""

import pytest

from content_scoring.models import RecommendationConfig, RecommendationWeights
from content_scoring.recommendations import calculate_similarity_score

from conftest import NOW, make_episode, make_post

# Isolates factors: nothing is "recent" and durations are never similar.
OLD = 400


class TestCalculateSimilarityScore:

    def test_unrelated_items_score_zero(self):
        source = make_post("a", author="1", category="org", reading_time=5, published_days_ago=OLD)
        candidate = make_post("b", author="2", category="process", reading_time=30, published_days_ago=OLD)
        score, factors = calculate_similarity_score(source, candidate, now=NOW)
        assert score == 0.0
        assert factors == []

    def test_same_category(self):
        source = make_post("a", author="1", category="erp", reading_time=5, published_days_ago=OLD)
        candidate = make_post("b", author="2", category="erp", reading_time=30, published_days_ago=OLD)
        score, factors = calculate_similarity_score(source, candidate, now=NOW)
        assert score == 3.0
        assert factors == ["Same category: Sistemas ERP"]

    def test_shared_tags_counted_per_tag(self):
        source = make_post("a", author="1", category="org", tags=("odoo", "erp", "pymes"),
                           reading_time=5, published_days_ago=OLD)
        candidate = make_post("b", author="2", category="process", tags=("erp", "pymes", "lean"),
                              reading_time=30, published_days_ago=OLD)
        score, factors = calculate_similarity_score(source, candidate, now=NOW)
        assert score == 4.0
        assert factors == ["2 shared tag(s): ERP, PYMES"]

    def test_same_author(self):
        source = make_post("a", author="3", category="org", reading_time=5, published_days_ago=OLD)
        candidate = make_post("b", author="3", category="process", reading_time=30, published_days_ago=OLD)
        score, factors = calculate_similarity_score(source, candidate, now=NOW)
        assert score == 1.5
        assert factors == ["Same author"]

    def test_missing_authors_never_match(self):
        source = make_post("a", author=None, category="org", reading_time=5, published_days_ago=OLD)
        candidate = make_post("b", author=None, category="process", reading_time=30, published_days_ago=OLD)
        score, _ = calculate_similarity_score(source, candidate, now=NOW)
        assert score == 0.0

    def test_podcast_host_is_author(self):
        source = make_post("a", author="2", category="org", reading_time=5, published_days_ago=OLD)
        candidate = make_episode("e", hosts=("2", "1"), category="process", duration=3600,
                                 published_days_ago=OLD)
        _, factors = calculate_similarity_score(source, candidate, now=NOW)
        assert "Same author" in factors

    def test_blog_pair_duration_window(self):
        source = make_post("a", author="1", category="org", reading_time=10, published_days_ago=OLD)
        close = make_post("b", author="2", category="process", reading_time=13, published_days_ago=OLD)
        far = make_post("c", author="2", category="process", reading_time=14, published_days_ago=OLD)
        assert calculate_similarity_score(source, close, now=NOW) == (1.0, ["Similar duration: ~13 min"])
        assert calculate_similarity_score(source, far, now=NOW) == (0.0, [])

    def test_podcast_pair_duration_window(self):
        source = make_episode("e1", hosts=("1",), category="org", duration=30 * 60, published_days_ago=OLD)
        close = make_episode("e2", hosts=("2",), category="process", duration=40 * 60, published_days_ago=OLD)
        far = make_episode("e3", hosts=("2",), category="process", duration=41 * 60, published_days_ago=OLD)
        assert calculate_similarity_score(source, close, now=NOW)[0] == 1.0
        assert calculate_similarity_score(source, far, now=NOW)[0] == 0.0

    def test_podcast_duration_rounds_half_up(self):
        source = make_post("a", author="1", category="org", reading_time=20, published_days_ago=OLD)
        # 29.5 minutes rounds to 30, within 10 of 20
        episode = make_episode("e", hosts=("2",), category="process", duration=1770, published_days_ago=OLD)
        _, factors = calculate_similarity_score(source, episode, now=NOW)
        assert factors == ["Similar duration: ~30 min"]

    def test_recently_published(self):
        source = make_post("a", author="1", category="org", reading_time=5, published_days_ago=OLD)
        candidate = make_post("b", author="2", category="process", reading_time=30, published_days_ago=10)
        score, factors = calculate_similarity_score(source, candidate, now=NOW)
        assert score == 2.0
        assert factors == ["Recently published"]

    def test_previously_viewed(self):
        source = make_post("a", author="1", category="org", reading_time=5, published_days_ago=OLD)
        candidate = make_post("b", author="2", category="process", reading_time=30, published_days_ago=OLD)
        score, factors = calculate_similarity_score(source, candidate, ["x", "b"], now=NOW)
        assert score == 1.0
        assert factors == ["Previously viewed"]

    def test_view_history_ignored_when_disabled(self):
        source = make_post("a", author="1", category="org", reading_time=5, published_days_ago=OLD)
        candidate = make_post("b", author="2", category="process", reading_time=30, published_days_ago=OLD)
        config = RecommendationConfig(include_view_history=False)
        assert calculate_similarity_score(source, candidate, ["b"], config, now=NOW) == (0.0, [])

    def test_all_factors_add_up(self):
        source = make_post("a", author="1", category="org", tags=("cultura",), reading_time=10)
        candidate = make_post("b", author="1", category="org", tags=("cultura",), reading_time=11)
        score, factors = calculate_similarity_score(source, candidate, ["b"], now=NOW)
        assert score == pytest.approx(3.0 + 2.0 + 1.5 + 1.0 + 2.0 + 1.0)
        assert len(factors) == 6

    def test_injected_weights(self):
        source = make_post("a", author="1", category="erp", reading_time=5, published_days_ago=OLD)
        candidate = make_post("b", author="2", category="erp", reading_time=30, published_days_ago=OLD)
        config = RecommendationConfig(weights=RecommendationWeights(same_category=7.5))
        assert calculate_similarity_score(source, candidate, config=config, now=NOW)[0] == 7.5

    def test_idempotent(self, blog_posts):
        first = calculate_similarity_score(blog_posts[0], blog_posts[1], ["2"], now=NOW)
        second = calculate_similarity_score(blog_posts[0], blog_posts[1], ["2"], now=NOW)
        assert first == second
