"""
Point values for answered clues.
"""

import math

from .engine import check_answer
from .normalize import correct_forms_for, normalize, strip_articles, strip_question_phrase

FUZZY_POINTS_RATIO = 0.8


def is_exact_match(user_answer: str, correct_answer: str) -> bool:
    """
    True if both answers reduce to the same canonical form.
    Only normalization, question phrasing and articles are forgiven.
    """
    if not isinstance(user_answer, str) or not isinstance(correct_answer, str):
        return False
    normalized_user = normalize(user_answer)
    user = strip_question_phrase(normalized_user)
    if not user:
        return False
    correct_texts = correct_forms_for(normalize(correct_answer), user != normalized_user)
    user = strip_articles(user)
    return any(user == strip_articles(text) for text in correct_texts if text)


def points_for(verdict: bool, exact: bool, base_points: int) -> int:
    """Map a verdict to full, reduced or zero points."""
    base_points = max(base_points, 0)
    if exact:
        return base_points
    if verdict:
        return math.floor(base_points * FUZZY_POINTS_RATIO)
    return 0


def calculate_points(user_answer: str, correct_answer: str, base_points: int) -> int:
    """
    Calculate points for an answer.

    Args:
        user_answer: Text submitted by the player
        correct_answer: Canonical answer for the clue
        base_points: Clue value

    Returns:
        base_points for an exact match, 80% (floored) for a lenient match,
        otherwise 0
    """
    if is_exact_match(user_answer, correct_answer):
        return points_for(True, True, base_points)
    return points_for(check_answer(user_answer, correct_answer), False, base_points)
