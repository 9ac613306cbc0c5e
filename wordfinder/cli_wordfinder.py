"""CLI subcommand for Word Finder."""

import logging
import uuid
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from shared.utils.logging import setup_logging
from wordfinder.config import Settings, load_settings
from wordfinder.dictionary import build_dictionary
from wordfinder.errors import WordFinderError
from wordfinder.game import WordFinderGame
from wordfinder.player import HumanPlayer
from wordfinder.validator import Accepted, RoundValidator
from wordfinder.word_source import WordSource

app = typer.Typer(help="Play Word Finder: make words from a root word's letters")
console = Console()

# Exit codes for `check`
EXIT_ACCEPTED = 0
EXIT_REJECTED = 1
EXIT_IGNORED = 2


def _load_settings_or_exit(config: Optional[str], **overrides) -> Settings:
    """Load settings and apply CLI overrides, exiting on configuration errors."""
    try:
        return load_settings(config).with_overrides(**overrides)
    except WordFinderError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)


def _build_validator_or_exit(settings: Settings) -> RoundValidator:
    try:
        dictionary = build_dictionary(settings)
    except WordFinderError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    return RoundValidator(dictionary, language=settings.language)


@app.command()
def play(
    seed: Optional[int] = typer.Option(None, help="Random seed for a reproducible root word"),
    words_file: Optional[str] = typer.Option(None, help="Path to the root word list"),
    dictionary: Optional[str] = typer.Option(
        None, help="Dictionary backend: 'wordfreq' or 'wordlist'"
    ),
    language: Optional[str] = typer.Option(None, help="Dictionary language code"),
    log_path: Optional[str] = typer.Option(None, help="Directory for log files"),
    config: Optional[str] = typer.Option(None, help="Path to a settings YAML file"),
    verbose: bool = typer.Option(False, help="Enable verbose logging"),
):
    """Play an interactive round in the terminal.

    Type words built from the root word's letters. Each accepted word scores
    one point per letter. Enter :q (or press Ctrl-D) to stop.
    """
    settings = _load_settings_or_exit(
        config,
        words_file=words_file,
        dictionary=dictionary,
        language=language,
        log_path=log_path,
    )

    log_dir = Path(settings.log_path)
    setup_logging(log_dir, verbose)
    logger = logging.getLogger(__name__)
    if seed is not None:
        logger.info(f"Random seed set to: {seed}")

    validator = _build_validator_or_exit(settings)
    game = WordFinderGame(
        word_source=WordSource(settings.words_file),
        validator=validator,
        seed=seed,
    )
    game.init_controllog(log_dir, run_id=str(uuid.uuid4())[:8])

    try:
        game.start_round()
    except WordFinderError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    state = game.play(HumanPlayer(console))

    console.print(
        f"\n[bold]Final score: {state['score']}[/bold] "
        f"[dim]({len(state['used_words'])} words from '{escape(state['root_word'])}')[/dim]"
    )


@app.command()
def check(
    word: str = typer.Argument(..., help="Submission to judge"),
    root: str = typer.Option(..., "--root", "-r", help="Root word of the round"),
    used: Optional[List[str]] = typer.Option(
        None, "--used", "-u", help="Word already used this round (repeatable)"
    ),
    dictionary: Optional[str] = typer.Option(
        None, help="Dictionary backend: 'wordfreq' or 'wordlist'"
    ),
    language: Optional[str] = typer.Option(None, help="Dictionary language code"),
    config: Optional[str] = typer.Option(None, help="Path to a settings YAML file"),
):
    """Judge a single submission against a root word.

    Exit code 0 if accepted, 1 if rejected, 2 if the submission is blank.
    """
    settings = _load_settings_or_exit(config, dictionary=dictionary, language=language)
    validator = _build_validator_or_exit(settings)

    result = validator.evaluate(word, root, used or [])

    if result is None:
        console.print("[yellow]Nothing to check: submission is blank[/yellow]")
        raise typer.Exit(EXIT_IGNORED)

    if isinstance(result, Accepted):
        console.print(f"[green]✓ Accepted:[/green] {escape(result.word)} [dim]+{result.score_delta}[/dim]")
        raise typer.Exit(EXIT_ACCEPTED)

    console.print(f"[red]✗ {result.title}[/red] ({result.reason.name}): {escape(result.message)}")
    raise typer.Exit(EXIT_REJECTED)


@app.command()
def roots(
    words_file: Optional[str] = typer.Option(None, help="Path to the root word list"),
    sample: int = typer.Option(10, help="Number of root words to show"),
    seed: Optional[int] = typer.Option(None, help="Random seed for the sample"),
    config: Optional[str] = typer.Option(None, help="Path to a settings YAML file"),
):
    """Show how many root words are available and a random sample."""
    settings = _load_settings_or_exit(config, words_file=words_file)
    source = WordSource(settings.words_file)

    try:
        words = source.sample(sample, seed=seed)
        total = source.candidate_count()
    except WordFinderError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    console.print(f"[bold]{total}[/bold] root words in {escape(settings.words_file)}")

    table = Table(title="Sample root words")
    table.add_column("Word", style="cyan")
    table.add_column("Letters", justify="right")
    for w in words:
        table.add_row(w, str(len(w)))
    console.print(table)
