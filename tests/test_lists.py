"""Tests for list answers."""

from answer_checker.checker.lists import is_list, is_proper_noun, lists_match, split_items


class TestClassification:
    def test_is_list(self):
        assert is_list("salt, pepper")
        assert is_list("salt & pepper")
        assert not is_list("salt and pepper")
        assert not is_list("Paris")

    def test_is_proper_noun(self):
        assert is_proper_noun("Earth, Wind & Fire")
        assert is_proper_noun("Simon & Garfunkel")
        assert is_proper_noun("Paris, France")
        assert not is_proper_noun("salt & pepper")
        assert not is_proper_noun("Paris")


class TestSplitItems:
    def test_splits_and_normalizes(self):
        assert split_items("Salt, the Pepper & Thyme") == ["salt", "pepper", "thyme"]

    def test_splits_on_and(self):
        assert split_items("salt and pepper") == ["salt", "pepper"]

    def test_and_inside_an_item_splits(self):
        assert split_items("bread and butter, jam") == ["bread", "butter", "jam"]

    def test_drops_empty_items(self):
        assert split_items("salt,, pepper,") == ["salt", "pepper"]

    def test_user_question_phrase(self):
        assert split_items("what are salt & pepper", is_user_answer=True) == ["salt", "pepper"]


class TestListsMatch:
    def test_any_order(self):
        assert lists_match("pepper, salt", "salt, pepper")

    def test_mixed_separators(self):
        assert lists_match("salt and pepper", "salt & pepper")

    def test_missing_item_rejected(self):
        assert not lists_match("salt", "salt, pepper")

    def test_extra_items_allowed(self):
        assert lists_match("thyme, salts, pepper", "salt, pepper")

    def test_fuzzy_items(self):
        assert lists_match("recieve, abby", "abbey, receive")

    def test_duplicate_correct_items(self):
        assert lists_match("salt, pepper", "salt, salt, pepper")

    def test_empty_user(self):
        assert not lists_match("what are", "salt, pepper")
