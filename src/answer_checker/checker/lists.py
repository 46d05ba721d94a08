"""
List answers: "salt, pepper & thyme" is matched item by item in any order.
"""

import re
from typing import List

from .normalize import canonical_form, compact
from .phonetic import phrases_similar

# Items split on commas, "&" and the word "and", so "bread and butter, jam"
# is three items
ITEM_SEPARATOR_PATTERN = re.compile(r'\s*(?:,|&|\band\b)\s*', re.IGNORECASE)
WORD_PATTERN = re.compile(r'[^\s,&]+')


def is_list(answer: str) -> bool:
    """True if the raw answer contains '&' or ','."""
    return '&' in answer or ',' in answer


def is_proper_noun(answer: str) -> bool:
    """
    Capitalization heuristic for multi-word names.
    True when the answer has more than one word and every word starts
    with an uppercase letter, so "Earth, Wind & Fire" is a name, not a list.
    """
    words = [word.lstrip('("\'') for word in WORD_PATTERN.findall(answer)]
    words = [word for word in words if word and word[0].isalpha()]
    if len(words) < 2:
        return False
    return all(word[0].isupper() for word in words)


def split_items(answer: str, is_user_answer: bool = False) -> List[str]:
    """
    Split a list answer into normalized items, dropping empty ones.
    On the player side the question phrase is stripped from the first item.
    """
    items = []
    for index, raw_item in enumerate(ITEM_SEPARATOR_PATTERN.split(answer)):
        item = canonical_form(raw_item, is_user_answer=is_user_answer and index == 0)
        if item:
            items.append(item)
    return items


def _items_match(user_item: str, correct_item: str) -> bool:
    if user_item == correct_item or compact(user_item) == compact(correct_item):
        return True
    return phrases_similar(user_item, correct_item)


def lists_match(user_answer: str, correct_answer: str) -> bool:
    """
    Accept when every correct item is covered by some user item.
    Order is ignored and one user item may cover several correct items.
    """
    correct_items = split_items(correct_answer)
    user_items = split_items(user_answer, is_user_answer=True)
    if not correct_items or not user_items:
        return False

    return all(
        any(_items_match(user_item, correct_item) for user_item in user_items)
        for correct_item in correct_items
    )
