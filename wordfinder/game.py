"""Core game logic for Word Finder."""

import logging
import uuid
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from shared import controllog as cl
from shared.utils import Timer
from wordfinder.player import Player
from wordfinder.validator import Accepted, Evaluation, Rejected, RoundValidator
from wordfinder.word_source import WordSource

console = Console()
logger = logging.getLogger(__name__)


class WordFinderGame:
    """The main game class for Word Finder.

    One round at a time:
    - A root word is drawn from the word source
    - Each submission is judged by the validator
    - Accepted words go to the top of the used-word list and add their
      length to the score
    - Rejected words leave the round untouched and raise an alert
    The round never ends on its own; ``start_round`` begins a new one.
    """

    TITLE = "Word Finder"

    def __init__(
        self,
        word_source: WordSource,
        validator: RoundValidator,
        quiet: bool = False,
        seed: Optional[int] = None,
    ):
        self.word_source = word_source
        self.validator = validator
        self.quiet = quiet
        self.seed = seed

        # Round state
        self.root_word: str = ""
        self.used_words: List[str] = []
        self.score: int = 0
        self.accepted_count: int = 0
        self.rejected_count: int = 0

        # Alert for the last rejected submission
        self.error_title: str = ""
        self.error_message: str = ""
        self.showing_error: bool = False

        self.game_id = str(uuid.uuid4())[:8]
        self.round_number = 0

        # Controllog state
        self._controllog_initialized = False
        self._run_id: Optional[str] = None

    @property
    def _task_id(self) -> str:
        return f"round:{self.game_id}:{self.round_number}"

    def _print(self, *args, **kwargs):
        """Print to console unless in quiet mode."""
        if not self.quiet:
            console.print(*args, **kwargs)

    def init_controllog(self, log_path: Path, run_id: str) -> None:
        """Initialize controllog SDK so rounds are recorded as events."""
        try:
            cl.init(project_id="wordfinder", log_dir=log_path)
            self._controllog_initialized = True
            self._run_id = run_id
            logger.info(f"Controllog initialized for game {self.game_id}")
        except Exception as e:
            logger.warning(f"Failed to initialize controllog: {e}")
            self._controllog_initialized = False

    def _emit_round_start(self) -> None:
        if not self._controllog_initialized:
            return
        try:
            cl.state_move(
                task_id=self._task_id,
                from_="NEW",
                to="ACTIVE",
                project_id="wordfinder",
                agent_id="agent:wordfinder",
                run_id=self._run_id,
                payload={"game_id": self.game_id},
            )
            cl.round_start(
                task_id=self._task_id,
                project_id="wordfinder",
                root_word=self.root_word,
                candidate_count=self.word_source.candidate_count(),
                run_id=self._run_id,
                seed=self.seed,
            )
        except Exception as e:
            logger.debug(f"Failed to emit round start: {e}")

    def _emit_submission(self, result: Evaluation, wall_ms: int) -> None:
        if not self._controllog_initialized:
            return
        try:
            if isinstance(result, Accepted):
                cl.word_submitted(
                    task_id=self._task_id,
                    project_id="wordfinder",
                    root_word=self.root_word,
                    submission=result.word,
                    outcome="accepted",
                    score_delta=result.score_delta,
                    wall_ms=wall_ms,
                    run_id=self._run_id,
                )
            else:
                cl.word_submitted(
                    task_id=self._task_id,
                    project_id="wordfinder",
                    root_word=self.root_word,
                    submission=result.word,
                    outcome="rejected",
                    reason=result.reason.name,
                    wall_ms=wall_ms,
                    run_id=self._run_id,
                )
        except Exception as e:
            logger.debug(f"Failed to emit submission event: {e}")

    def start_round(self) -> str:
        """Draw a new root word and reset the score and used words.

        Raises:
            WordSourceError: If no root word can be loaded.
        """
        seed = self.seed + self.round_number if self.seed is not None else None
        self.root_word = self.word_source.select_root(seed=seed)
        self.round_number += 1

        self.used_words = []
        self.score = 0
        self.accepted_count = 0
        self.rejected_count = 0
        self.dismiss_error()

        logger.info(f"Round {self.round_number} started with root word '{self.root_word}'")
        self._emit_round_start()
        return self.root_word

    def submit(self, text: str) -> Optional[Evaluation]:
        """Judge a submission and apply it to the round.

        Returns:
            The validator's verdict, or None if the submission was blank.
        """
        if not self.root_word:
            raise RuntimeError("start_round() must be called before submitting words")

        with Timer() as timer:
            result = self.validator.evaluate(text, self.root_word, self.used_words)

        if result is None:
            return None

        if isinstance(result, Accepted):
            self.used_words.insert(0, result.word)
            self.score += result.score_delta
            self.accepted_count += 1
            self.dismiss_error()
            logger.info(f"Accepted '{result.word}' (+{result.score_delta}, score {self.score})")
        else:
            self.rejected_count += 1
            self._word_error(result)
            logger.info(f"Rejected '{result.word}': {result.reason.name}")

        self._emit_submission(result, timer.elapsed_ms)
        return result

    def _word_error(self, rejection: Rejected) -> None:
        self.error_title = rejection.title
        self.error_message = rejection.message
        self.showing_error = True

    def dismiss_error(self) -> None:
        self.error_title = ""
        self.error_message = ""
        self.showing_error = False

    def get_round_state(self) -> Dict[str, Any]:
        """Snapshot of the round for display or players."""
        return {
            "root_word": self.root_word,
            "used_words": self.used_words.copy(),
            "score": self.score,
            "accepted_count": self.accepted_count,
            "rejected_count": self.rejected_count,
        }

    def display_round(self):
        """Display the root word, the words found so far and the score."""
        self._print(f"\n[bold]{self.TITLE}[/bold]")
        self._print(f"[bold black on white] {escape(self.root_word)} [/bold black on white]\n")

        if self.used_words:
            table = Table(show_header=False, show_lines=False, box=None)
            table.add_column(justify="right", style="blue")
            table.add_column(style="bold")
            for word in self.used_words:
                table.add_row(f"({len(word)})", escape(word))
            self._print(table)

        self._print(f"\n[bold green]Score: {self.score}[/bold green]")

    def display_result(self, result: Optional[Evaluation]):
        """Display the outcome of one submission."""
        if result is None:
            return
        if isinstance(result, Accepted):
            self._print(f"[green]✓ {escape(result.word)}[/green] [dim]+{result.score_delta}[/dim]")
        else:
            self._print(f"[red]✗ {self.error_title}[/red]: {escape(self.error_message)}")

    def play(self, player: Player) -> Dict[str, Any]:
        """Run an interactive session until the player stops.

        Starts a round first if none is active.

        Returns:
            Final round state.
        """
        if not self.root_word:
            self.start_round()

        self.display_round()

        while True:
            text = player.get_next_word(self.get_round_state())
            if text is None:
                break

            result = self.submit(text)
            self.display_result(result)
            if isinstance(result, Accepted):
                self.display_round()

        logger.info(
            f"Session ended: root '{self.root_word}', {self.accepted_count} accepted, "
            f"{self.rejected_count} rejected, score {self.score}"
        )
        return self.get_round_state()
