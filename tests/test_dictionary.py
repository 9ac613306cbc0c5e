"""Tests for dictionary backends."""

from unittest.mock import patch

import pytest

from wordfinder.config import DictionarySettings, Settings
from wordfinder.dictionary import (
    WordfreqDictionary,
    WordListDictionary,
    build_dictionary,
)
from wordfinder.errors import ConfigError


class TestWordListDictionary:
    """Test cases for the in-memory word list dictionary."""

    def setup_method(self):
        """Setup for each test."""
        self.dictionary = WordListDictionary(["Worm", " silk ", ""], language="en")

    def test_known_word(self):
        assert self.dictionary.is_dictionary_word("worm", "en") is True

    def test_lookup_is_case_insensitive(self):
        assert self.dictionary.is_dictionary_word("SILK", "en") is True

    def test_unknown_word(self):
        assert self.dictionary.is_dictionary_word("wilk", "en") is False

    def test_other_language_not_recognized(self):
        assert self.dictionary.is_dictionary_word("worm", "de") is False

    def test_blank_entries_dropped(self):
        assert len(self.dictionary) == 2

    def test_from_file(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("worm\nsilk\n\nmilk\n")
        dictionary = WordListDictionary.from_file(str(path))
        assert len(dictionary) == 3
        assert dictionary.is_dictionary_word("milk", "en")

    def test_from_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            WordListDictionary.from_file(str(tmp_path / "missing.txt"))


class TestWordfreqDictionary:
    """Test cases for the wordfreq-backed dictionary."""

    def test_frequent_word_is_real(self):
        with patch("wordfinder.dictionary.zipf_frequency", return_value=3.7) as mock_zipf:
            assert WordfreqDictionary(min_zipf=2.0).is_dictionary_word("worm", "en") is True
            mock_zipf.assert_called_once_with("worm", "en")

    def test_rare_word_is_not_real(self):
        with patch("wordfinder.dictionary.zipf_frequency", return_value=0.0):
            assert WordfreqDictionary(min_zipf=2.0).is_dictionary_word("wilk", "en") is False

    def test_threshold_is_inclusive(self):
        with patch("wordfinder.dictionary.zipf_frequency", return_value=2.0):
            assert WordfreqDictionary(min_zipf=2.0).is_dictionary_word("mow", "en") is True


class TestBuildDictionary:
    """Test cases for choosing a backend from settings."""

    def test_wordfreq_backend(self):
        settings = Settings(dictionary=DictionarySettings(backend="wordfreq", min_zipf=3.5))
        dictionary = build_dictionary(settings)
        assert isinstance(dictionary, WordfreqDictionary)
        assert dictionary.min_zipf == 3.5

    def test_wordlist_backend(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("worm\n")
        settings = Settings(
            language="en",
            dictionary=DictionarySettings(backend="wordlist", words_file=str(path)),
        )
        dictionary = build_dictionary(settings)
        assert isinstance(dictionary, WordListDictionary)
        assert dictionary.is_dictionary_word("worm", "en")

    def test_wordlist_backend_requires_file(self):
        settings = Settings(dictionary=DictionarySettings(backend="wordlist"))
        with pytest.raises(ConfigError, match="words_file"):
            build_dictionary(settings)

    def test_unknown_backend(self):
        settings = Settings(dictionary=DictionarySettings(backend="hunspell"))
        with pytest.raises(ConfigError, match="Unknown dictionary backend"):
            build_dictionary(settings)
