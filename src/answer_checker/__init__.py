"""
Answer equivalence checking for a Jeopardy-style trivia game.
"""

from .checker import (
    SemanticScorerError,
    calculate_points,
    calculate_points_async,
    check_answer,
    check_answer_async,
    normalize,
)

__version__ = "0.1.0"

__all__ = [
    'SemanticScorerError',
    'calculate_points',
    'calculate_points_async',
    'check_answer',
    'check_answer_async',
    'normalize',
]
