"""Word Finder - Shared infrastructure.

Common utilities used by the game and its command-line interface:
- controllog: Structured JSONL event log with balanced postings
- utils: Logging setup and timing helpers
"""

__version__ = "0.1.0"
