"""Word validation and scoring for Word Finder.

This module is the single source of truth for the rules:
- The game (game.py) uses it to decide every submission in a round
- The CLI ``check`` command uses it to judge one word in isolation

A submission is normalized (lowercased, trimmed) and then checked in order:
1. Originality: not already used this round
2. Constructibility: spellable from the root word's letters
3. Realness: confirmed by the dictionary

The first failing check decides the rejection; later checks are skipped.
Accepted words score one point per character.

Two behaviors are intentional: a submission equal to the root word itself
is allowed, and there is no minimum word length.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Union

from wordfinder.dictionary import Dictionary


class RejectionReason(Enum):
    """Why a submission was rejected, with the alert shown to the player."""
    ALREADY_USED = ("Word used already", "Be more original!")
    NOT_POSSIBLE = ("Word not possible", "You can't spell that word from '{root}'!")
    NOT_RECOGNIZED = ("Word not recognized", "You can't just make them up, you know!")

    @property
    def title(self) -> str:
        return self.value[0]

    def message(self, root: str) -> str:
        return self.value[1].format(root=root)


@dataclass(frozen=True)
class Accepted:
    """A submission that passed every check."""
    word: str
    score_delta: int


@dataclass(frozen=True)
class Rejected:
    """A submission that failed a check. Carries the alert to display."""
    word: str
    reason: RejectionReason
    root: str

    @property
    def title(self) -> str:
        return self.reason.title

    @property
    def message(self) -> str:
        return self.reason.message(self.root)


Evaluation = Union[Accepted, Rejected]


def normalize(word: str) -> str:
    """Lowercase and strip surrounding whitespace (including newlines)."""
    return word.lower().strip()


def is_original(word: str, used: Iterable[str]) -> bool:
    """True unless ``word`` is already among the used words."""
    return word not in {normalize(u) for u in used}


def is_possible(word: str, root: str) -> bool:
    """True if every letter of ``word`` can be taken from ``root``.

    Consumes one matching letter from a copy of the root's letters per
    character, so repeated letters need repeated occurrences in the root.
    """
    pool = list(root)
    for letter in word:
        if letter in pool:
            pool.remove(letter)
        else:
            return False
    return True


class RoundValidator:
    """Applies the submission checks for a round.

    The dictionary is injected so any lookup can be used without touching
    the rules.
    """

    def __init__(self, dictionary: Dictionary, language: str = "en"):
        self.dictionary = dictionary
        self.language = language

    def is_real(self, word: str) -> bool:
        return self.dictionary.is_dictionary_word(word, self.language)

    def evaluate(self, submission: str, root: str, used: Iterable[str]) -> Optional[Evaluation]:
        """Decide a submission.

        Args:
            submission: Raw player input
            root: The round's root word
            used: Words already accepted this round

        Returns:
            Accepted or Rejected; None if the submission is empty after
            normalization (nothing to judge).
        """
        word = normalize(submission)
        if not word:
            return None

        root = normalize(root)

        if not is_original(word, used):
            return Rejected(word=word, reason=RejectionReason.ALREADY_USED, root=root)

        if not is_possible(word, root):
            return Rejected(word=word, reason=RejectionReason.NOT_POSSIBLE, root=root)

        if not self.is_real(word):
            return Rejected(word=word, reason=RejectionReason.NOT_RECOGNIZED, root=root)

        return Accepted(word=word, score_delta=len(word))
