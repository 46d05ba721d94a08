"""
Alternate forms of a correct answer: parenthetical expansions and
optional title prefixes.
"""

import re
from collections import deque
from typing import List

PARENTHETICAL_PATTERN = re.compile(r'\(([^()]*)\)')
ALTERNATIVE_PATTERN = re.compile(r'^or\s+', re.IGNORECASE)

# Each variant runs the whole matching pipeline
MAX_VARIANTS = 16

TITLE_PREFIXES = frozenset([
    'mr', 'mrs', 'ms', 'miss', 'dr', 'doctor', 'prof', 'professor',
    'mt', 'mount', 'st', 'saint', 'sir', 'dame', 'lord', 'lady',
])


def _join(*parts: str) -> str:
    return ' '.join(' '.join(parts).split())


def expand_parenthetical(answer: str) -> List[str]:
    """
    Produce the textual variants of an answer containing "(...)" groups.

    "the (Cincinnati) Reds" yields the original, "the Cincinnati Reds" and
    "the Reds". "Abraham Lincoln (or Honest Abe)" also yields "Honest Abe".
    Every group kept and every group dropped come first, then groups are
    expanded one at a time until MAX_VARIANTS is reached.

    Args:
        answer: Raw correct answer

    Returns:
        Distinct variants, the original first
    """
    variants = [answer]
    seen = {answer}

    def add(candidate: str) -> bool:
        if not candidate or candidate in seen or len(variants) >= MAX_VARIANTS:
            return False
        seen.add(candidate)
        variants.append(candidate)
        return True

    add(_join(PARENTHETICAL_PATTERN.sub(lambda m: f' {m.group(1)} ', answer)))
    add(_join(PARENTHETICAL_PATTERN.sub(' ', answer)))
    for match in PARENTHETICAL_PATTERN.finditer(answer):
        if len(variants) >= MAX_VARIANTS:
            break
        inner = match.group(1).strip()
        alternative = ALTERNATIVE_PATTERN.match(inner)
        if alternative:
            add(inner[alternative.end():].strip())

    pending = deque([answer])
    while pending and len(variants) < MAX_VARIANTS:
        current = pending.popleft()
        match = PARENTHETICAL_PATTERN.search(current)
        if not match:
            continue

        before = current[:match.start()]
        inner = match.group(1).strip()
        after = current[match.end():]

        for candidate in (_join(before, inner, after), _join(before, after)):
            if add(candidate):
                pending.append(candidate)

    return variants


def title_prefix_variants(text: str) -> List[str]:
    """
    Return normalized text with and without a leading honorific or
    geographic prefix ("dr", "mount", "saint").
    """
    words = text.split()
    if len(words) > 1 and words[0] in TITLE_PREFIXES:
        return [text, ' '.join(words[1:])]
    return [text]
