"""Tests for the fuzzy word matcher."""

from answer_checker.checker.phonetic import (
    LOOSE_TYPO_LENGTH_RATIO,
    LOOSE_TYPO_SIMILARITY,
    are_similar,
    is_typo,
    numbers_to_digits,
    phonetic_code,
    phrases_similar,
)


class TestPhoneticCode:
    def test_folds_sound_classes(self):
        assert phonetic_code("kolor") == "karar"
        assert phonetic_code("color") == "karar"

    def test_digraphs(self):
        assert phonetic_code("phone") == phonetic_code("fone")
        assert phonetic_code("thomas") == phonetic_code("tomas")
        assert phonetic_code("fox") == "baks"

    def test_collapses_repeats(self):
        assert phonetic_code("abbey") == "aba"
        assert phonetic_code("baybay") == phonetic_code("bebe")

    def test_word_by_word(self):
        assert phonetic_code("westminster abby") == phonetic_code("westminster abbey")
        assert phonetic_code("apollo 11") == "abara 11"


class TestNumbers:
    def test_number_words(self):
        assert numbers_to_digits("world war two") == "world war 2"
        assert numbers_to_digits("the third man") == "the 3rd man"
        assert numbers_to_digits("ninety nine") == "90 9"


class TestAreSimilar:
    def test_exact(self):
        assert are_similar("paris", "paris")

    def test_phonetic(self):
        assert are_similar("abby", "abbey")
        assert are_similar("recieve", "receive")
        assert are_similar("foto", "photo")

    def test_short_words_need_more_than_phonetics(self):
        assert not are_similar("dog", "dig")
        assert not are_similar("oki", "iko")
        assert not are_similar("cat", "car")

    def test_numbers(self):
        assert are_similar("two", "2")
        assert are_similar("2", "two")
        assert are_similar("first", "1st")
        assert not are_similar("two", "3")

    def test_morphology(self):
        assert are_similar("cats", "cat")
        assert are_similar("cat", "cats")
        assert are_similar("boxes", "box")
        assert are_similar("jumping", "jump")
        assert are_similar("walked", "walk")

    def test_short_stems_are_not_variants(self):
        assert not are_similar("is", "i")
        assert not are_similar("bus", "bu")
        assert are_similar("bugs", "bug")

    def test_conjunctions(self):
        assert are_similar("&", "and")

    def test_unrelated(self):
        assert not are_similar("paris", "london")
        assert not are_similar("", "paris")


class TestPhrasesSimilar:
    def test_word_by_word(self):
        assert phrases_similar("westminster abby", "westminster abbey")
        assert phrases_similar("7 samurai", "seven samurai")

    def test_word_count_must_match(self):
        assert not phrases_similar("orleans", "new orleans")
        assert not phrases_similar("", "")


class TestIsTypo:
    def test_transposition(self):
        assert is_typo("beethvoen", "beethoven")
        assert is_typo("mozrat", "mozart")

    def test_short_words_differ(self):
        assert not is_typo("cat", "car")

    def test_first_letter_must_agree(self):
        assert not is_typo("ebethoven", "beethoven")

    def test_lengths_must_be_close(self):
        assert not is_typo("saltlake", "saltlakecity")

    def test_loose_thresholds(self):
        assert is_typo("jimihedrix", "jimihendrix", LOOSE_TYPO_SIMILARITY, LOOSE_TYPO_LENGTH_RATIO)

    def test_empty(self):
        assert not is_typo("", "paris")
        assert not is_typo("", "")
