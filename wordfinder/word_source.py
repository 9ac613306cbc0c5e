"""Root word loading and selection.

The word list is a plain text file with one candidate root word per line.
It is read once per path and cached for the life of the process.

Usage:
    source = WordSource()                 # bundled inputs/start.txt
    root = source.select_root(seed=42)    # reproducible pick

    root = select_root(["silkworm", "absolute"])
"""

import logging
import random
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from wordfinder.config import DEFAULT_WORDS_FILE
from wordfinder.errors import WordSourceError

logger = logging.getLogger(__name__)

# Cache for loaded word lists (keyed by resolved file path)
_WORDS_CACHE: Dict[str, List[str]] = {}


def select_root(candidates: Iterable[str], rng: Optional[random.Random] = None) -> str:
    """Pick one candidate uniformly at random.

    Raises:
        WordSourceError: If there are no candidates.
    """
    pool = list(candidates)
    if not pool:
        raise WordSourceError("No candidate root words available")
    chooser = rng or random
    return chooser.choice(pool)


def parse_word_list(text: str) -> List[str]:
    """Split a newline-delimited word list into normalized candidates.

    Blank lines are skipped. Lines that are not a single alphabetic word
    (e.g. "new york", "r2d2") cannot be root words and are skipped with a
    warning.
    """
    words = []
    for line in text.splitlines():
        word = line.strip().lower()
        if not word:
            continue
        if not word.isalpha():
            logger.warning(f"Skipping invalid root word {word!r}: not alphabetic")
            continue
        words.append(word)
    return words


class WordSource:
    """Supplies candidate root words and draws one per round."""

    def __init__(self, words_file: Optional[str] = None):
        self.words_file = str(words_file or DEFAULT_WORDS_FILE)

    def load_words(self) -> List[str]:
        """Load candidates from the word list (cached for performance).

        Raises:
            WordSourceError: If the file is missing, unreadable or has no words.
        """
        cache_key = str(Path(self.words_file).resolve())
        if cache_key in _WORDS_CACHE:
            return _WORDS_CACHE[cache_key]

        try:
            with open(self.words_file, "r", encoding="utf-8") as f:
                words = parse_word_list(f.read())
        except FileNotFoundError:
            logger.error(f"Words file not found: {self.words_file}")
            raise WordSourceError(f"Could not load word list: {self.words_file} not found")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error reading words file {self.words_file}: {e}")
            raise WordSourceError(f"Could not load word list {self.words_file}: {e}")

        if not words:
            logger.error(f"Words file is empty: {self.words_file}")
            raise WordSourceError(f"Word list {self.words_file} contains no words")

        _WORDS_CACHE[cache_key] = words
        logger.debug(f"Loaded and cached {len(words)} root words from {self.words_file}")
        return words

    def candidate_count(self) -> int:
        return len(self.load_words())

    def select_root(self, seed: Optional[int] = None) -> str:
        """Draw a root word for a new round.

        Args:
            seed: Random seed for a reproducible pick. Uses the global
                random state when omitted.
        """
        rng = random.Random(seed) if seed is not None else None
        root = select_root(self.load_words(), rng)
        logger.info(f"Selected root word: {root}")
        return root

    def sample(self, count: int, seed: Optional[int] = None) -> List[str]:
        """Return up to ``count`` distinct candidates in random order."""
        words = self.load_words()
        rng = random.Random(seed) if seed is not None else random
        return rng.sample(words, min(count, len(words)))


def clear_cache() -> None:
    """Forget every cached word list."""
    _WORDS_CACHE.clear()
