"""
Text normalization for answer comparison.
Folds case, accents, dashes and punctuation so that answers can be
compared as plain lowercase words.
"""

import re
import unicodedata
from typing import List

ARTICLES = frozenset(['a', 'an', 'the'])

# Latin letters that survive NFD decomposition
LETTER_FOLDS = {
    'ß': 'ss',
    'æ': 'ae',
    'œ': 'oe',
    'ø': 'o',
    'ł': 'l',
    'đ': 'd',
    'ð': 'd',
    'þ': 'th',
    'ı': 'i',
}

DASH_PATTERN = re.compile(r'[\u2010-\u2015\u2212\ufe58\ufe63\uff0d-]')
STRIP_PATTERN = re.compile(r'[^a-z0-9\s&]')
SPACE_PATTERN = re.compile(r'\s+')

QUESTION_PHRASE_PATTERN = re.compile(r'^(what|who|where|when)\s+(is|are|was|were)(\s+|$)')
# Apostrophes are gone after normalization, so "what's" arrives as "whats"
CONTRACTION_PATTERN = re.compile(r'^(what|who|where|when)s(\s+|$)')


def fold_accents(text: str) -> str:
    """
    Remove diacritics from Latin-script text.

    Args:
        text: Raw text

    Returns:
        Text with combining marks dropped and ligatures expanded
    """
    decomposed = unicodedata.normalize('NFD', text.lower())
    stripped = ''.join(ch for ch in decomposed if not unicodedata.combining(ch))
    return ''.join(LETTER_FOLDS.get(ch, ch) for ch in stripped)


def normalize(text: str) -> str:
    """
    Normalize text for comparison.
    Lowercases, folds accents, turns dashes into spaces and drops every
    character other than letters, digits, whitespace and '&'.
    """
    if not isinstance(text, str):
        return ''
    text = fold_accents(text)
    text = DASH_PATTERN.sub(' ', text)
    text = STRIP_PATTERN.sub('', text)
    return SPACE_PATTERN.sub(' ', text).strip()


def normalize_override(text: str) -> str:
    """Normalize an alternate answer before it is stored as an override."""
    return normalize(text)


def strip_question_phrase(text: str) -> str:
    """
    Remove a single leading "what is" / "who was" style clause.
    Expects normalized text and only strips at the very start.
    """
    text = text.strip()
    match = CONTRACTION_PATTERN.match(text) or QUESTION_PHRASE_PATTERN.match(text)
    if match:
        text = text[match.end():]
    return text.strip()


def correct_forms_for(normalized_correct: str, user_was_asked: bool) -> List[str]:
    """
    Forms of the normalized correct answer to compare against.
    When the player phrased a question, a correct answer that is itself
    phrased as one ("What Is Love") is compared without it too.
    """
    forms = [normalized_correct]
    if user_was_asked:
        stripped = strip_question_phrase(normalized_correct)
        if stripped and stripped != normalized_correct:
            forms.append(stripped)
    return forms


def strip_articles(text: str) -> str:
    """
    Drop 'a', 'an' and 'the' wherever they occur.
    Single-word text is returned unchanged so a bare article survives.
    """
    words = text.split()
    if len(words) <= 1:
        return text
    kept = [word for word in words if word not in ARTICLES]
    if not kept:
        return text
    return ' '.join(kept)


def compact(text: str) -> str:
    """Remove all whitespace, for hyphen/space insensitive comparison."""
    return SPACE_PATTERN.sub('', text)


def canonical_form(text: str, is_user_answer: bool = False) -> str:
    """
    Reduce an answer to the form used for exact comparison.

    Args:
        text: Raw answer text
        is_user_answer: Strip a leading question phrase (player side only)

    Returns:
        Normalized text with articles removed, or '' if nothing remains
    """
    normalized = normalize(text)
    if is_user_answer:
        normalized = strip_question_phrase(normalized)
    if not normalized:
        return ''
    return strip_articles(normalized)
