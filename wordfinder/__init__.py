"""Word Finder: build words from the letters of a random root word.

A round shows one root word. Each submission must be
- new this round,
- spellable from the root word's letters (each letter used at most as often
  as it appears in the root),
- a real dictionary word.

Accepted words score one point per letter.
"""

from wordfinder.game import WordFinderGame
from wordfinder.validator import Accepted, Rejected, RejectionReason, RoundValidator

__version__ = "0.1.0"

__all__ = [
    "WordFinderGame",
    "RoundValidator",
    "Accepted",
    "Rejected",
    "RejectionReason",
]
