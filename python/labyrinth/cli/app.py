"""Rich terminal frontend: board tables, HUD and a prompt-driven play loop.

Cells are addressed chess-style, column letter then row number, so ``b3``
is the second column of the third row.
"""

from __future__ import annotations

import string
from datetime import date

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from labyrinth.engine.gameplay import GamePlay
from labyrinth.engine.generator.daily import puzzle_number
from labyrinth.engine.scoring import next_star_hint
from labyrinth.models.board import GOAL_ID, START_ID, Board, Direction, Position, Special
from labyrinth.models.snapshot import SnapshotStore

console = Console()

_GLYPHS: dict[frozenset[Direction], str] = {
    frozenset(): "□",
    frozenset({Direction.NORTH}): "╵",
    frozenset({Direction.SOUTH}): "╷",
    frozenset({Direction.EAST}): "╶",
    frozenset({Direction.WEST}): "╴",
    frozenset({Direction.NORTH, Direction.SOUTH}): "│",
    frozenset({Direction.EAST, Direction.WEST}): "─",
    frozenset({Direction.NORTH, Direction.EAST}): "└",
    frozenset({Direction.NORTH, Direction.WEST}): "┘",
    frozenset({Direction.SOUTH, Direction.EAST}): "┌",
    frozenset({Direction.SOUTH, Direction.WEST}): "┐",
    frozenset({Direction.NORTH, Direction.SOUTH, Direction.EAST}): "├",
    frozenset({Direction.NORTH, Direction.SOUTH, Direction.WEST}): "┤",
    frozenset({Direction.NORTH, Direction.EAST, Direction.WEST}): "┴",
    frozenset({Direction.SOUTH, Direction.EAST, Direction.WEST}): "┬",
    frozenset(Direction): "┼",
}


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


def glyph(directions: tuple[Direction, ...] | frozenset[Direction]) -> str:
    return _GLYPHS[frozenset(directions)]


def cell_name(pos: Position) -> str:
    return f"{string.ascii_lowercase[pos.x]}{pos.y + 1}"


def parse_cell(token: str) -> Position | None:
    """``"b3"`` -> ``Position(1, 2)``; ``None`` if the token is not a cell."""
    token = token.strip().lower()
    if len(token) < 2 or token[0] not in string.ascii_lowercase or not token[1:].isdigit():
        return None
    return Position(string.ascii_lowercase.index(token[0]), int(token[1:]) - 1)


# -- board rendering ----------------------------------------------------------


def render_board(board: Board, highlight: tuple[Position, ...] = ()) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    lit = set(highlight)
    table = Table(
        show_header=True,
        show_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    table.add_column("", style="dim", justify="right")
    for x in range(board.cols):
        table.add_column(string.ascii_lowercase[x], justify="center")

    for y, row in enumerate(board.tiles):
        cells: list[str] = [str(y + 1)]
        for x, tile in enumerate(row):
            pos = Position(x, y)
            if not tile.is_path:
                cells.append("[dim]·[/dim]")
                continue
            mark = glyph(tile.open_directions)
            if tile.id == START_ID:
                mark = f"[bold cyan]{mark}S[/bold cyan]"
            elif tile.id == GOAL_ID:
                mark = f"[bold magenta]{mark}G[/bold magenta]"
            elif tile.special == Special.GEM:
                mark = f"[bold yellow]{mark}◆[/bold yellow]"
            elif pos in lit:
                mark = f"[bold green]{mark}[/bold green]"
            elif tile.locked:
                mark = f"[dim]{mark}[/dim]"
            else:
                mark = f"[bold white]{mark}[/bold white]"
            cells.append(mark)
        table.add_row(*cells)

    return table


def _stats(game: GamePlay) -> Text:
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.state.moves), style="bold yellow")
    stats.append("    Gems: ", style="dim")
    stats.append(f"{game.gems_collected}/{len(game.puzzle.gems)}", style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(game.state.elapsed_time), style="bold yellow")
    return stats


def _title(game: GamePlay) -> str:
    template = game.puzzle.template
    label = "Practice"
    if game.day_key is not None:
        label = f"Puzzle #{puzzle_number(date.fromisoformat(game.day_key)):02d}"
    return (
        f"[bold cyan]{label}  {template.rows}×{template.cols}  "
        f"({template.difficulty.value})[/bold cyan]"
    )


def show_puzzle(game: GamePlay) -> None:
    """Print the board once (used by ``--show``)."""
    panel = Panel(
        Align.center(render_board(game.state.board, game.connection.path)),
        title=_title(game),
        subtitle=f"seed {game.puzzle.seed}",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print(Align.center(panel))
    console.print(Align.center(_stats(game)))


# -- game screens -------------------------------------------------------------


def _draw_game(game: GamePlay, status: str = "") -> None:
    console.clear()

    controls = Text()
    controls.append("  a1 b2", style="bold cyan")
    controls.append("  swap   ", style="dim")
    controls.append("U", style="bold cyan")
    controls.append("  undo   ", style="dim")
    controls.append("N", style="bold cyan")
    controls.append("  new puzzle   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    panel = Panel(
        Align.center(render_board(game.state.board, game.connection.path)),
        title=_title(game),
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(_stats(game)))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def _draw_win(game: GamePlay) -> None:
    console.clear()
    rating = game.rating

    stars = Text()
    stars.append("\n  ")
    stars.append("★" * rating.stars, style="bold yellow")
    stars.append("☆" * (3 - rating.stars), style="dim")
    stars.append("  Connected!\n", style="bold green")

    hint = Text(
        "  " + next_star_hint(rating, game.state.moves, game.gems_collected),
        style="dim",
    )

    group = Group(
        Align.center(render_board(game.state.board, game.connection.path)),
        Align.center(stars),
        Align.center(_stats(game)),
        Align.center(hint),
    )
    console.print()
    console.print(
        Align.center(Panel(group, title=_title(game), border_style="bold green", padding=(1, 2)))
    )


def _apply(game: GamePlay, command: str) -> str:
    """Run one typed command; returns a status line."""
    tokens = command.split()
    if len(tokens) != 2:
        return "[yellow]Type two cells, e.g. 'a1 b2'.[/yellow]"
    a, b = parse_cell(tokens[0]), parse_cell(tokens[1])
    if a is None or b is None:
        return "[yellow]Cells look like 'b3' (column letter, row number).[/yellow]"
    if not game.swap(a, b):
        return f"[red]Can't swap {tokens[0]} and {tokens[1]}.[/red]"
    return f"[cyan]Swapped[/cyan] {cell_name(a)} ↔ {cell_name(b)}"


# -- game loop ----------------------------------------------------------------


def play(game: GamePlay, store: SnapshotStore | None = None) -> None:
    """Prompt-driven loop until the player quits."""
    status = ""
    while True:
        if game.is_won:
            _draw_win(game)
        else:
            _draw_game(game, status)
        status = ""
        if store is not None and game.day_key is not None:
            store.save(game.snapshot())

        command = Prompt.ask("  >", console=console, default="").strip().lower()
        if command in ("q", "quit"):
            return
        if command in ("u", "undo"):
            status = "[cyan]Undone.[/cyan]" if game.undo() else "[yellow]Nothing to undo.[/yellow]"
        elif command in ("n", "new"):
            game.new_puzzle()
            status = "[yellow]New practice puzzle![/yellow]"
        elif command and not game.is_won:
            status = _apply(game, command)

