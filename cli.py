"""Command-line interface for Word Finder.

Unified CLI entry point:
- `wordfinder play` - Play an interactive round
- `wordfinder check` - Judge a single word against a root word
- `wordfinder roots` - Inspect the root word list
"""

import typer
from rich.console import Console

from wordfinder.cli_wordfinder import app as wordfinder_app

# Main application
app = typer.Typer(
    help="Word Finder - make as many words as you can from a root word",
    no_args_is_help=True,
)
console = Console()

# Register game commands at the top level
app.registered_commands.extend(wordfinder_app.registered_commands)


@app.callback()
def main():
    """Word Finder - make as many words as you can from a root word.

    Examples:

        # Play a round
        uv run wordfinder play

        # Play a reproducible round against a custom word list
        uv run wordfinder play --seed 42 --words-file my_roots.txt

        # Judge a word without playing
        uv run wordfinder check worm --root silkworm --used silk
    """
    pass


@app.command()
def version():
    """Show version information."""
    from wordfinder import __version__ as wordfinder_version
    from shared import __version__ as shared_version

    console.print("[bold]Word Finder[/bold]")
    console.print(f"  wordfinder: {wordfinder_version}")
    console.print(f"  shared: {shared_version}")


if __name__ == "__main__":
    app()
