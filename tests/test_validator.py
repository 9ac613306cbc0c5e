"""Tests for the Word Finder validation rules."""

from unittest.mock import Mock

import pytest

from wordfinder.dictionary import Dictionary, WordListDictionary
from wordfinder.validator import (
    Accepted,
    Rejected,
    RejectionReason,
    RoundValidator,
    is_original,
    is_possible,
    normalize,
)

ROOT = "silkworm"
KNOWN_WORDS = ["worm", "silk", "milk", "slow", "mow", "owl", "i", "silkworm", "works", "skim"]


class TestNormalize:
    """Test cases for submission normalization."""

    def test_lowercases_and_trims(self):
        assert normalize("  Worm \n") == "worm"

    def test_blank_becomes_empty(self):
        assert normalize(" \t\n ") == ""

    def test_inner_whitespace_kept(self):
        assert normalize(" silk worm ") == "silk worm"


class TestIsPossible:
    """Test cases for the letter-pool constructibility check."""

    def test_subset_of_letters(self):
        assert is_possible("worm", ROOT) is True

    def test_letter_missing_from_root(self):
        assert is_possible("zzz", ROOT) is False

    def test_letter_used_too_often(self):
        # 'm' appears once in silkworm
        assert is_possible("wormm", ROOT) is False

    def test_repeated_letter_available_twice(self):
        assert is_possible("moon", "monsoon") is True
        assert is_possible("noon", "monsoon") is True
        assert is_possible("nnn", "monsoon") is False

    def test_whole_root_is_possible(self):
        assert is_possible(ROOT, ROOT) is True

    def test_anagram_of_root_is_possible(self):
        assert is_possible("mrowklis", ROOT) is True

    def test_root_is_not_consumed(self):
        root = ROOT
        is_possible("silk", root)
        assert root == "silkworm"


class TestIsOriginal:
    """Test cases for the originality check."""

    def test_new_word(self):
        assert is_original("worm", ["silk"]) is True

    def test_used_word(self):
        assert is_original("worm", ["silk", "worm"]) is False

    def test_used_entries_are_normalized(self):
        assert is_original("worm", [" Worm"]) is False


class TestRoundValidator:
    """Test cases for RoundValidator.evaluate."""

    def setup_method(self):
        """Setup for each test."""
        self.dictionary = WordListDictionary(KNOWN_WORDS)
        self.validator = RoundValidator(self.dictionary, language="en")

    def test_accepts_valid_word(self):
        result = self.validator.evaluate("worm", ROOT, [])
        assert result == Accepted(word="worm", score_delta=4)

    def test_accepted_word_is_normalized(self):
        result = self.validator.evaluate("  SILK\n", ROOT, [])
        assert isinstance(result, Accepted)
        assert result.word == "silk"
        assert result.score_delta == 4

    def test_already_used(self):
        result = self.validator.evaluate("Worm ", ROOT, ["worm"])
        assert isinstance(result, Rejected)
        assert result.reason is RejectionReason.ALREADY_USED
        assert result.word == "worm"

    def test_not_possible_extra_letter(self):
        result = self.validator.evaluate("wormm", ROOT, [])
        assert isinstance(result, Rejected)
        assert result.reason is RejectionReason.NOT_POSSIBLE

    def test_not_possible_foreign_letter(self):
        result = self.validator.evaluate("zzz", ROOT, [])
        assert isinstance(result, Rejected)
        assert result.reason is RejectionReason.NOT_POSSIBLE

    def test_not_recognized(self):
        # "wilk" is spellable from silkworm but not in the dictionary
        result = self.validator.evaluate("wilk", ROOT, [])
        assert isinstance(result, Rejected)
        assert result.reason is RejectionReason.NOT_RECOGNIZED

    @pytest.mark.parametrize("blank", ["", "   ", "\n", " \t "])
    def test_blank_submission_is_ignored(self, blank):
        assert self.validator.evaluate(blank, ROOT, []) is None

    def test_root_word_itself_is_accepted(self):
        result = self.validator.evaluate("silkworm", ROOT, [])
        assert result == Accepted(word="silkworm", score_delta=8)

    def test_single_letter_is_accepted(self):
        result = self.validator.evaluate("I", ROOT, [])
        assert result == Accepted(word="i", score_delta=1)

    def test_originality_checked_before_constructibility(self):
        # A used word that also cannot be spelled reports ALREADY_USED
        result = self.validator.evaluate("zzz", ROOT, ["zzz"])
        assert result.reason is RejectionReason.ALREADY_USED

    def test_dictionary_not_consulted_after_earlier_failure(self):
        dictionary = Mock(spec=Dictionary)
        validator = RoundValidator(dictionary)

        validator.evaluate("zzz", ROOT, [])
        validator.evaluate("worm", ROOT, ["worm"])

        dictionary.is_dictionary_word.assert_not_called()

    def test_dictionary_called_with_language(self):
        dictionary = Mock(spec=Dictionary)
        dictionary.is_dictionary_word.return_value = True
        validator = RoundValidator(dictionary, language="fr")

        validator.evaluate("Worm", ROOT, [])

        dictionary.is_dictionary_word.assert_called_once_with("worm", "fr")

    def test_score_delta_equals_length(self):
        for word in ["mow", "silk", "works", "silkworm"]:
            result = self.validator.evaluate(word, ROOT, [])
            assert isinstance(result, Accepted), word
            assert result.score_delta == len(word)

    def test_used_list_not_mutated(self):
        used = ["silk"]
        self.validator.evaluate("worm", ROOT, used)
        self.validator.evaluate("silk", ROOT, used)
        assert used == ["silk"]

    def test_root_word_is_normalized(self):
        result = self.validator.evaluate("worm", " SilkWorm ", [])
        assert isinstance(result, Accepted)


class TestRejectionMessages:
    """Test cases for the alerts carried by rejections."""

    def test_already_used_alert(self):
        rejection = Rejected(word="worm", reason=RejectionReason.ALREADY_USED, root=ROOT)
        assert rejection.title == "Word used already"
        assert rejection.message == "Be more original!"

    def test_not_possible_alert_names_root(self):
        rejection = Rejected(word="zzz", reason=RejectionReason.NOT_POSSIBLE, root=ROOT)
        assert rejection.title == "Word not possible"
        assert rejection.message == "You can't spell that word from 'silkworm'!"

    def test_not_recognized_alert(self):
        rejection = Rejected(word="wilk", reason=RejectionReason.NOT_RECOGNIZED, root=ROOT)
        assert rejection.title == "Word not recognized"
        assert rejection.message == "You can't just make them up, you know!"
