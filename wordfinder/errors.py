"""Exceptions raised by Word Finder.

Rejected submissions are not exceptions; they are returned as
``Rejected`` results by the validator.
"""


class WordFinderError(Exception):
    """Base class for Word Finder errors."""


class WordSourceError(WordFinderError):
    """The root word list is missing, unreadable or empty.

    Raised during initialization; a round cannot start without a root word.
    """


class ConfigError(WordFinderError):
    """Settings could not be loaded or name an unknown option."""
