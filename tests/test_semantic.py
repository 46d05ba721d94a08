"""Tests for the async semantic layer."""

import asyncio
import logging

from answer_checker.checker.semantic import (
    SemanticScorerError,
    calculate_points_async,
    check_answer_async,
    is_partial_answer,
)


def fixed_scorer(value, calls=None):
    async def scorer(text1, text2):
        if calls is not None:
            calls.append((text1, text2))
        return value
    return scorer


def run(coro):
    return asyncio.run(coro)


class TestPartialAnswer:
    def test_subset(self):
        assert is_partial_answer("salt lake", "salt lake city")
        assert is_partial_answer("canterbury", "the canterbury tales")

    def test_not_subset(self):
        assert not is_partial_answer("big apple", "new york city")
        assert not is_partial_answer("salt lake city", "salt lake city")


class TestCheckAnswerAsync:
    def test_rule_match_skips_scorer(self):
        calls = []
        assert run(check_answer_async("what is Paris", "Paris", scorer=fixed_scorer(0.0, calls)))
        assert calls == []

    def test_no_scorer_uses_rules(self):
        assert not run(check_answer_async("Big Apple", "New York City"))

    def test_scorer_accepts(self):
        calls = []
        scorer = fixed_scorer(0.9, calls)
        assert run(check_answer_async("what is the Big Apple", "New York City", scorer=scorer,
                                      threshold=0.82))
        assert calls == [("the big apple", "new york city")]

    def test_scorer_below_threshold(self):
        assert not run(check_answer_async("Big Apple", "New York City",
                                          scorer=fixed_scorer(0.5), threshold=0.82))

    def test_partial_answer_needs_near_identity(self):
        assert not run(check_answer_async("Salt Lake", "Salt Lake City",
                                          scorer=fixed_scorer(0.9), threshold=0.82))
        assert run(check_answer_async("Salt Lake", "Salt Lake City",
                                      scorer=fixed_scorer(0.97), threshold=0.82))

    def test_empty_answers_never_scored(self):
        calls = []
        scorer = fixed_scorer(1.0, calls)
        assert not run(check_answer_async("what is", "Paris", scorer=scorer))
        assert not run(check_answer_async("Paris", "", scorer=scorer))
        assert calls == []

    def test_scorer_error_falls_back(self, caplog):
        async def broken(text1, text2):
            raise SemanticScorerError("model not loaded")

        with caplog.at_level(logging.WARNING):
            assert not run(check_answer_async("Big Apple", "New York City", scorer=broken))
        assert "Semantic scorer unavailable" in caplog.text

    def test_scorer_timeout_falls_back(self):
        async def slow(text1, text2):
            await asyncio.sleep(1)
            return 1.0

        assert not run(check_answer_async("Big Apple", "New York City", scorer=slow, timeout=0.01))

    def test_negative_similarity_means_no_opinion(self):
        assert not run(check_answer_async("Big Apple", "New York City",
                                          scorer=fixed_scorer(-1.0), threshold=0.0))

    def test_override_similarity(self):
        async def scorer(text1, text2):
            return 0.9 if text2 == "gotham" else 0.1

        assert run(check_answer_async("Big Apple", "New York City", ["Gotham"],
                                      scorer=scorer, threshold=0.82))

    def test_threshold_from_environment(self, clean_env):
        clean_env.setenv("ANSWER_CHECKER_SEMANTIC_THRESHOLD", "0.95")
        assert not run(check_answer_async("Big Apple", "New York City", scorer=fixed_scorer(0.9)))
        clean_env.setenv("ANSWER_CHECKER_SEMANTIC_THRESHOLD", "0.5")
        assert run(check_answer_async("Big Apple", "New York City", scorer=fixed_scorer(0.9)))


class TestCalculatePointsAsync:
    def test_exact(self):
        assert run(calculate_points_async("what is Paris", "Paris", 400)) == 400

    def test_semantic_match_reduced(self):
        assert run(calculate_points_async("Big Apple", "New York City", 400,
                                          scorer=fixed_scorer(0.9), threshold=0.82)) == 320

    def test_rejected(self):
        assert run(calculate_points_async("Big Apple", "New York City", 400)) == 0
