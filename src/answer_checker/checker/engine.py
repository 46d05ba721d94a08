"""
Rule-based answer checking for Jeopardy-style clues.
"""

from typing import Iterable, List, Optional

from ..utils.logger import get_logger
from .lists import is_list, is_proper_noun, lists_match
from .normalize import (
    compact,
    correct_forms_for,
    normalize,
    strip_articles,
    strip_question_phrase,
)
from .phonetic import (
    LOOSE_TYPO_LENGTH_RATIO,
    LOOSE_TYPO_SIMILARITY,
    are_similar,
    is_typo,
    phrases_similar,
)
from .variants import expand_parenthetical, title_prefix_variants

logger = get_logger(__name__)

MATCH_THRESHOLD = 0.8
SHORT_ANSWER_WORDS = 2
MIN_SURNAME_LENGTH = 4

# Leading words of place names; "Orleans" is not "New Orleans"
GEOGRAPHIC_QUALIFIERS = frozenset([
    'new', 'san', 'santa', 'los', 'las', 'saint', 'st', 'north', 'south',
    'east', 'west', 'fort', 'port', 'lake', 'cape', 'el', 'la', 'le',
    'great', 'upper', 'lower',
])


def _unique(values: Iterable[str]) -> List[str]:
    seen = []
    for value in values:
        if value and value not in seen:
            seen.append(value)
    return seen


def _surname_match(user_words: List[str], correct_words: List[str]) -> bool:
    if len(user_words) != 1 or len(correct_words) != 2:
        return False
    if correct_words[0] in GEOGRAPHIC_QUALIFIERS:
        return False
    surname = correct_words[-1]
    return len(surname) >= MIN_SURNAME_LENGTH and user_words[0] == surname


def _words_match(user: str, correct: str) -> bool:
    """
    Compare normalized answers word by word.
    Short answers need every word to agree; longer ones need 80% of the
    correct words to be found in the user's answer.
    """
    user_words = user.split()
    correct_words = correct.split()

    if len(correct_words) <= SHORT_ANSWER_WORDS:
        if phrases_similar(user, correct):
            return True
        if is_typo(compact(user), compact(correct), LOOSE_TYPO_SIMILARITY, LOOSE_TYPO_LENGTH_RATIO):
            logger.debug(f"Typo match: '{user}' ~ '{correct}'")
            return True
        return _surname_match(user_words, correct_words)

    matches = sum(
        1 for correct_word in correct_words
        if any(are_similar(user_word, correct_word) for user_word in user_words)
    )
    match_ratio = matches / len(correct_words)
    logger.debug(f"Match ratio for '{user}' vs '{correct}': {match_ratio:.2f} (need {MATCH_THRESHOLD})")
    return match_ratio >= MATCH_THRESHOLD


def _matches(user_answer: str, correct_answer: str) -> bool:
    normalized_user = normalize(user_answer)
    user = strip_question_phrase(normalized_user)
    if not user:
        return False
    if not normalize(correct_answer):
        return False
    user_was_asked = user != normalized_user

    user_forms = _unique(title_prefix_variants(strip_articles(user)))

    for variant in expand_parenthetical(correct_answer):
        normalized = normalize(variant)
        if not normalized:
            continue
        correct_forms = _unique(
            strip_articles(form)
            for text in correct_forms_for(normalized, user_was_asked)
            for form in title_prefix_variants(text)
        )

        for correct in correct_forms:
            for user_form in user_forms:
                if user_form == correct or compact(user_form) == compact(correct):
                    logger.debug(f"Exact match: '{user_form}' == '{correct}'")
                    return True
                if is_typo(compact(user_form), compact(correct)):
                    logger.debug(f"Typo match: '{user_form}' ~ '{correct}'")
                    return True

        if is_list(variant) and not is_proper_noun(variant):
            if lists_match(user_answer, variant):
                logger.debug(f"List match: '{user_answer}' covers '{variant}'")
                return True
            continue

        for correct in correct_forms:
            for user_form in user_forms:
                if _words_match(user_form, correct):
                    return True

    return False


def check_answer(user_answer: str, correct_answer: str,
                 override_answers: Optional[Iterable[str]] = None) -> bool:
    """
    Check if the user's answer matches the correct answer.
    Tolerates question phrasing, articles, accents, punctuation, typos
    and parenthetical alternatives, but rejects partial answers.

    Args:
        user_answer: Text submitted by the player
        correct_answer: Canonical answer for the clue
        override_answers: Extra answers accepted after dispute review

    Returns:
        True if the canonical answer or any override accepts the user text
    """
    if not isinstance(user_answer, str) or not isinstance(correct_answer, str):
        return False

    if _matches(user_answer, correct_answer):
        return True

    for override in override_answers or ():
        if isinstance(override, str) and _matches(user_answer, override):
            logger.debug(f"Accepted '{user_answer}' via override '{override}'")
            return True

    return False
