"""
Optional semantic-similarity layer on top of the rule-based checker.

The scorer is any coroutine function taking two texts and returning a
cosine-style similarity (negative when it has no opinion). It is only
consulted when the rules reject an answer, and any failure falls back to
the rule-based verdict.
"""

import asyncio
from typing import Awaitable, Callable, Iterable, Optional

from ..config import get_semantic_threshold, get_semantic_timeout
from ..utils.logger import get_logger
from .engine import check_answer
from .normalize import normalize, strip_articles, strip_question_phrase
from .scoring import is_exact_match, points_for

logger = get_logger(__name__)

SemanticScorer = Callable[[str, str], Awaitable[float]]

PARTIAL_ANSWER_THRESHOLD = 0.95
SIGNIFICANT_WORD_LENGTH = 2


class SemanticScorerError(Exception):
    """Raised by a scorer that cannot produce a similarity."""
    pass


def is_partial_answer(user: str, correct: str) -> bool:
    """
    True when the user's words are a strict subset of the correct words,
    e.g. "Canterbury" for "Canterbury Tales".
    """
    user_words = [w for w in strip_articles(user).split() if len(w) > SIGNIFICANT_WORD_LENGTH]
    correct_words = [w for w in strip_articles(correct).split() if len(w) > SIGNIFICANT_WORD_LENGTH]
    if not user_words or len(correct_words) <= len(user_words):
        return False
    return all(word in correct_words for word in user_words)


async def _similarity(scorer: SemanticScorer, text1: str, text2: str, timeout: float) -> float:
    return await asyncio.wait_for(scorer(text1, text2), timeout=timeout)


async def check_answer_async(user_answer: str, correct_answer: str,
                             override_answers: Optional[Iterable[str]] = None,
                             scorer: Optional[SemanticScorer] = None,
                             threshold: Optional[float] = None,
                             timeout: Optional[float] = None) -> bool:
    """
    Check an answer, consulting a semantic scorer when the rules reject it.

    Args:
        user_answer: Text submitted by the player
        correct_answer: Canonical answer for the clue
        override_answers: Extra answers accepted after dispute review
        scorer: Optional async similarity function
        threshold: Similarity needed to accept (default from config)
        timeout: Seconds to wait for each scorer call (default from config)

    Returns:
        The semantic verdict, or the rule-based verdict if the scorer is
        missing or fails
    """
    if not isinstance(user_answer, str) or not isinstance(correct_answer, str):
        return False

    user = strip_question_phrase(normalize(user_answer))
    correct = normalize(correct_answer)
    if not user or not correct:
        return False

    overrides = [o for o in (override_answers or ()) if isinstance(o, str)]
    if check_answer(user_answer, correct_answer, overrides):
        return True

    if scorer is None:
        return False

    threshold = get_semantic_threshold() if threshold is None else threshold
    timeout = get_semantic_timeout() if timeout is None else timeout

    try:
        similarity = await _similarity(scorer, user, correct, timeout)
        if similarity < 0:
            logger.debug("Semantic scorer returned no similarity, using rule-based verdict")
            return False

        logger.debug(f"Semantic similarity for '{user}' vs '{correct}': {similarity:.3f}")

        if is_partial_answer(user, correct):
            return similarity >= PARTIAL_ANSWER_THRESHOLD

        if similarity >= threshold:
            return True

        for override in overrides:
            override_similarity = await _similarity(scorer, user, normalize(override), timeout)
            if override_similarity >= threshold:
                return True
    except Exception as e:
        logger.warning(f"Semantic scorer unavailable, using rule-based verdict: {e!r}")

    return False


async def calculate_points_async(user_answer: str, correct_answer: str, base_points: int,
                                 scorer: Optional[SemanticScorer] = None,
                                 threshold: Optional[float] = None,
                                 timeout: Optional[float] = None) -> int:
    """Calculate points using the semantic verdict for lenient matches."""
    if is_exact_match(user_answer, correct_answer):
        return points_for(True, True, base_points)
    verdict = await check_answer_async(user_answer, correct_answer, scorer=scorer,
                                       threshold=threshold, timeout=timeout)
    return points_for(verdict, False, base_points)
