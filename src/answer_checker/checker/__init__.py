"""
Answer checking for Jeopardy-style clues.
"""

from .engine import MATCH_THRESHOLD, check_answer
from .lists import is_list, is_proper_noun, lists_match
from .normalize import normalize, normalize_override, strip_articles, strip_question_phrase
from .phonetic import are_similar, numbers_to_digits, phonetic_code
from .scoring import FUZZY_POINTS_RATIO, calculate_points, is_exact_match
from .semantic import SemanticScorerError, calculate_points_async, check_answer_async
from .variants import expand_parenthetical, title_prefix_variants

__all__ = [
    'MATCH_THRESHOLD', 'check_answer',
    'is_list', 'is_proper_noun', 'lists_match',
    'normalize', 'normalize_override', 'strip_articles', 'strip_question_phrase',
    'are_similar', 'numbers_to_digits', 'phonetic_code',
    'FUZZY_POINTS_RATIO', 'calculate_points', 'is_exact_match',
    'SemanticScorerError', 'calculate_points_async', 'check_answer_async',
    'expand_parenthetical', 'title_prefix_variants',
]
