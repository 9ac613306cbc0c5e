"""Dictionary backends that decide whether a word is real.

The validator only depends on ``Dictionary.is_dictionary_word``; any lookup
(word frequency data, an in-memory word list, a remote service) can be
plugged in.
"""

import logging
from abc import ABC, abstractmethod
from typing import Iterable, Optional

from wordfreq import zipf_frequency

from wordfinder.config import Settings
from wordfinder.errors import ConfigError

logger = logging.getLogger(__name__)


class Dictionary(ABC):
    """Abstract base class for dictionary lookups."""

    @abstractmethod
    def is_dictionary_word(self, word: str, language: str) -> bool:
        """Return True if ``word`` is a real word in ``language``."""
        pass


class WordfreqDictionary(Dictionary):
    """Dictionary backed by wordfreq frequency data.

    A word counts as real when its Zipf frequency (log10 of occurrences per
    billion words) is at least ``min_zipf``. Unknown words have frequency 0.
    """

    def __init__(self, min_zipf: float = 2.0):
        self.min_zipf = min_zipf

    def is_dictionary_word(self, word: str, language: str) -> bool:
        frequency = zipf_frequency(word, language)
        logger.debug(f"zipf_frequency({word!r}, {language!r}) = {frequency}")
        return frequency >= self.min_zipf


class WordListDictionary(Dictionary):
    """Dictionary backed by an in-memory word set for a single language."""

    def __init__(self, words: Iterable[str], language: str = "en"):
        self.language = language
        self.words = {w.strip().lower() for w in words if w.strip()}

    @classmethod
    def from_file(cls, path: str, language: str = "en") -> "WordListDictionary":
        """Load a newline-delimited word list."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                words = f.read().splitlines()
        except OSError as e:
            raise ConfigError(f"Could not read dictionary word list {path}: {e}")
        logger.info(f"Loaded {len(words)} dictionary words from {path}")
        return cls(words, language=language)

    def is_dictionary_word(self, word: str, language: str) -> bool:
        if language != self.language:
            return False
        return word.lower() in self.words

    def __len__(self) -> int:
        return len(self.words)


BACKENDS = ("wordfreq", "wordlist")


def build_dictionary(settings: Settings) -> Dictionary:
    """Create the dictionary backend named in the settings.

    Raises:
        ConfigError: For an unknown backend, or a word list backend without
            a readable word list.
    """
    backend = settings.dictionary.backend.lower()

    if backend == "wordfreq":
        return WordfreqDictionary(min_zipf=settings.dictionary.min_zipf)

    if backend == "wordlist":
        words_file: Optional[str] = settings.dictionary.words_file
        if not words_file:
            raise ConfigError("dictionary.words_file is required for the wordlist backend")
        return WordListDictionary.from_file(words_file, language=settings.language)

    raise ConfigError(
        f"Unknown dictionary backend '{settings.dictionary.backend}'. "
        f"Choose one of: {', '.join(BACKENDS)}"
    )
