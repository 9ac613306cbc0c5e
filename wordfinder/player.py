"""Player classes for Word Finder."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from rich.console import Console

logger = logging.getLogger(__name__)

QUIT_COMMANDS = {":q", ":quit"}


class Player(ABC):
    """Abstract base class for all players."""

    @abstractmethod
    def get_next_word(self, round_state: Dict[str, Any]) -> Optional[str]:
        """Return the next submission, or None to stop playing."""
        pass


class HumanPlayer(Player):
    """Human player typing submissions into the terminal."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def get_next_word(self, round_state: Dict[str, Any]) -> Optional[str]:
        try:
            text = self.console.input("[bold]Enter your word[/bold] [dim](:q to quit)[/dim]: ")
        except (EOFError, KeyboardInterrupt):
            logger.info("Input closed, ending session")
            return None

        if text.strip().lower() in QUIT_COMMANDS:
            return None
        return text
