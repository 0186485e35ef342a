"""Daily Labyrinth.

Usage::

    daily-labyrinth                     # today's puzzle, resumed if saved
    daily-labyrinth --practice -d hard  # random practice puzzle
    daily-labyrinth -s my-seed --show   # print a seeded puzzle and exit
"""

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo

import typer

from labyrinth.cli import app as rich_app
from labyrinth.engine.gameplay import GamePlay
from labyrinth.logging_config import configure_logging
from labyrinth.models.puzzle import Difficulty
from labyrinth.models.snapshot import SnapshotStore

REFERENCE_TZ = ZoneInfo("Europe/Stockholm")
DATA_DIR = Path.home() / ".daily-labyrinth"


def today() -> date:
    """Calendar day in the game's reference timezone."""
    return datetime.now(REFERENCE_TZ).date()


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    seed: Optional[str] = typer.Option(
        None, "-s", "--seed",
        help="Play a specific seed instead of today's puzzle.",
    ),
    practice: bool = typer.Option(
        False, "--practice",
        help="Play a random practice puzzle.",
    ),
    difficulty: Difficulty = typer.Option(
        Difficulty.MEDIUM, "-d", "--difficulty",
        help="Tier for seeded and practice puzzles.",
    ),
    day: Optional[datetime] = typer.Option(
        None, "--day", formats=["%Y-%m-%d"],
        help="Play the daily puzzle of another day.",
    ),
    show: bool = typer.Option(
        False, "--show",
        help="Print the puzzle and exit.",
    ),
    data_dir: Path = typer.Option(
        DATA_DIR, "--data-dir",
        help="Where daily progress is stored.",
    ),
    verbose: int = typer.Option(
        0, "-v", "--verbose", count=True,
        help="-v for generation info, -vv for search details.",
    ),
) -> None:
    """Daily Labyrinth: swap tiles until the start connects to the goal."""
    configure_logging(("WARNING", "INFO", "DEBUG")[min(verbose, 2)])

    if seed is not None or practice:
        game = GamePlay(seed, difficulty)
        store = None
    else:
        store = None if show else SnapshotStore(data_dir / "daily.json")
        game = GamePlay.for_day(day.date() if day else today(), store)

    if show:
        rich_app.show_puzzle(game)
        return

    rich_app.play(game, store)


if __name__ == "__main__":
    app()
