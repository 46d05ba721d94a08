"""
Fuzzy comparison: phonetic folding, number words, simple plural/tense
variants and whole-answer typo tolerance.
"""

from typing import List

from rapidfuzz.distance import JaroWinkler

PHONETIC_MIN_LENGTH = 4
# Stems shorter than this ("is" -> "i") are not plural/tense variants
MIN_STEM_LENGTH = 3

# Whole-answer typo tolerance (transpositions such as "beethvoen")
TYPO_SIMILARITY = 0.93
TYPO_LENGTH_RATIO = 0.85
LOOSE_TYPO_SIMILARITY = 0.90
LOOSE_TYPO_LENGTH_RATIO = 0.8

# Order matters: digraphs are rewritten before single letters
DIGRAPH_RULES = [
    ('ph', 'f'),
    ('th', 't'),
    ('sh', 's'),
    ('ch', 's'),
    ('x', 'ks'),
]

CHARACTER_CLASSES = {
    'aeiouy': 'a',  # vowels
    'bpfv': 'b',    # labials
    'cgkqj': 'k',   # velars
    'dt': 't',      # dentals
    'mn': 'm',      # nasals
    'w': 'w',       # semivowels
    'sz': 's',      # sibilants
    'lr': 'r',      # liquids
    'h': '',        # silent
}

PHONETIC_MAP = {
    letter: code
    for letters, code in CHARACTER_CLASSES.items()
    for letter in letters
}

NUMBER_WORDS = {
    'zero': '0', 'one': '1', 'two': '2', 'three': '3', 'four': '4',
    'five': '5', 'six': '6', 'seven': '7', 'eight': '8', 'nine': '9',
    'ten': '10', 'eleven': '11', 'twelve': '12', 'thirteen': '13',
    'fourteen': '14', 'fifteen': '15', 'sixteen': '16', 'seventeen': '17',
    'eighteen': '18', 'nineteen': '19', 'twenty': '20', 'thirty': '30',
    'forty': '40', 'fifty': '50', 'sixty': '60', 'seventy': '70',
    'eighty': '80', 'ninety': '90', 'hundred': '100', 'thousand': '1000',
    'million': '1000000', 'billion': '1000000000',
    'first': '1st', 'second': '2nd', 'third': '3rd', 'fourth': '4th',
    'fifth': '5th', 'sixth': '6th', 'seventh': '7th', 'eighth': '8th',
    'ninth': '9th', 'tenth': '10th',
}

CONJUNCTIONS = frozenset(['&', 'and'])

MORPHOLOGICAL_SUFFIXES = ('es', 's', 'ing', 'ed')


def _word_code(word: str) -> str:
    for digraph, replacement in DIGRAPH_RULES:
        word = word.replace(digraph, replacement)

    code: List[str] = []
    previous = None
    for ch in word:
        if ch not in PHONETIC_MAP:
            code.append(ch)
            previous = None
            continue
        folded = PHONETIC_MAP[ch]
        # Collapse runs of the same sound class
        if folded and folded != previous:
            code.append(folded)
            previous = folded
    return ''.join(code)


def phonetic_code(text: str) -> str:
    """
    Build the coarse phonetic key of normalized text, word by word.
    Digits and '&' pass through unchanged.
    """
    return ' '.join(_word_code(word) for word in text.split())


def numbers_to_digits(text: str) -> str:
    """Replace number words ('seven', 'third') with digits ('7', '3rd')."""
    return ' '.join(NUMBER_WORDS.get(word, word) for word in text.split())


def _is_morphological_variant(word: str, other: str) -> bool:
    for suffix in MORPHOLOGICAL_SUFFIXES:
        if word.endswith(suffix):
            stem = word[:-len(suffix)]
            if len(stem) >= MIN_STEM_LENGTH and stem == other:
                return True
    return False


def are_similar(word1: str, word2: str) -> bool:
    """
    Decide whether two normalized words denote the same thing.

    Args:
        word1: First word
        word2: Second word

    Returns:
        True on exact, conjunction, numeric, phonetic or plural/tense equality
    """
    if word1 == word2:
        return True
    if not word1 or not word2:
        return False

    if word1 in CONJUNCTIONS and word2 in CONJUNCTIONS:
        return True

    digits1 = numbers_to_digits(word1)
    digits2 = numbers_to_digits(word2)
    if (digits1 != word1 or digits2 != word2) and digits1 == digits2:
        return True

    # Short words fold together too easily ("dog"/"dig")
    if len(word1) >= PHONETIC_MIN_LENGTH and len(word2) >= PHONETIC_MIN_LENGTH:
        if _word_code(word1) == _word_code(word2):
            return True

    return _is_morphological_variant(word1, word2) or _is_morphological_variant(word2, word1)


def phrases_similar(phrase1: str, phrase2: str) -> bool:
    """Compare two normalized phrases word by word, in order."""
    words1 = phrase1.split()
    words2 = phrase2.split()
    if not words1 or len(words1) != len(words2):
        return False
    return all(are_similar(a, b) for a, b in zip(words1, words2))


def is_typo(text1: str, text2: str, min_similarity: float = TYPO_SIMILARITY,
            min_length_ratio: float = TYPO_LENGTH_RATIO) -> bool:
    """
    Decide whether two compacted answers differ only by a typo.

    Args:
        text1: First answer, whitespace removed
        text2: Second answer, whitespace removed
        min_similarity: Jaro-Winkler similarity needed
        min_length_ratio: Shorter length over longer length needed

    Returns:
        True if both start with the same character, have similar lengths
        and are Jaro-Winkler similar
    """
    if not text1 or not text2 or text1[0] != text2[0]:
        return False
    length_ratio = min(len(text1), len(text2)) / max(len(text1), len(text2))
    if length_ratio < min_length_ratio:
        return False
    return JaroWinkler.similarity(text1, text2) >= min_similarity
