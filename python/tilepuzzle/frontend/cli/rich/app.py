"""Rich terminal frontend: the puzzle as a coloured table.

Tiles are drawn as their labels rather than picture crops.  Includes a
built-in menu for size selection, a play screen, and a completion panel.
"""

from __future__ import annotations

import logging
import random

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from tilepuzzle.backend.engine.gameplay import PuzzleEngine
from tilepuzzle.backend.models.arrangement import EMPTY, MIN_SIZE
from tilepuzzle.backend.models.config import MAX_SIZE, PuzzleConfig
from tilepuzzle.frontend.cli.input_handler import get_key
from tilepuzzle.frontend.input_adapter import Direction, move_direction

logger = logging.getLogger(__name__)

console = Console()

_DIRECTIONS: dict[str, Direction] = {d.value: d for d in Direction}


# -- board rendering ----------------------------------------------------------


def tile_label(identity: int) -> str:
    """Human-facing label of a tile (1-based, like a printed 15-puzzle)."""
    return str(identity + 1)


def render_board(engine: PuzzleEngine) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    size = engine.size
    width = len(tile_label(size * size - 2))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(size):
        table.add_column(width=width + 1, justify="center")

    cells = engine.cells
    for r in range(size):
        row: list[str] = []
        for c in range(size):
            cell = r * size + c
            val = cells[cell]
            if val is EMPTY:
                row.append("[dim]·[/dim]")
            elif engine.is_tile_correct(cell):
                row.append(f"[bold green]{tile_label(val):>{width}}[/bold green]")
            else:
                row.append(f"[bold white]{tile_label(val):>{width}}[/bold white]")
        table.add_row(*row)

    return table


def board_panel(engine: PuzzleEngine, title: str, style: str = "bright_blue") -> Panel:
    size = engine.size
    return Panel(
        Align.center(render_board(engine)),
        title=f"[bold]{title}  {size}×{size}[/bold]",
        border_style=style,
        padding=(1, 2),
    )


# -- menu screen --------------------------------------------------------------


def _draw_menu(sel_size: int) -> None:
    console.clear()

    sizes = Text()
    for s in range(MIN_SIZE, MAX_SIZE + 1):
        if s > MIN_SIZE:
            sizes.append("  ")
        if s == sel_size:
            sizes.append(f" {s}×{s} ", style="bold green on #313244")
        else:
            sizes.append(f" {s}×{s} ", style="dim")

    nav = Text("  ← →  change size", style="dim")

    opts = Text()
    opts.append("  Enter", style="bold cyan")
    opts.append("  Play    ")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    body = Group(
        Text(""),
        Align.center(sizes),
        Align.center(nav),
        Text(""),
        Align.center(opts),
        Text(""),
    )

    panel = Panel(
        body,
        title="[bold]T I L E   P U Z Z L E[/bold]",
        border_style="bright_blue",
        padding=(1, 4),
    )

    console.print()
    console.print(Align.center(panel))


# -- game screens -------------------------------------------------------------


def _draw_game(engine: PuzzleEngine, status: str = "") -> None:
    console.clear()

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("R", style="bold yellow")
    controls.append("  scramble   ", style="dim")
    controls.append("X", style="bold cyan")
    controls.append("  solution   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  back", style="dim")

    console.print()
    console.print(Align.center(board_panel(engine, "Tile Puzzle")))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def _draw_win(engine: PuzzleEngine) -> None:
    console.clear()

    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("CONGRATULATIONS!", style="bold green")
    congrats.append("  You solved it!  ", style="green")
    congrats.append("★\n", style="bold yellow")

    size = engine.size
    panel = Panel(
        Group(Align.center(render_board(engine)), Align.center(congrats)),
        title=f"[bold green]Tile Puzzle  {size}×{size}[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(
        Align.center(Text("\n  Press R to play again, Q to go back.\n", style="dim"))
    )


# -- game loop ----------------------------------------------------------------


def _play_game(
    size: int,
    rng: random.Random | None,
    moves: int | None,
) -> None:
    engine = PuzzleEngine.scrambled(size, rng, moves)
    status = ""

    while True:
        _draw_game(engine, status)
        status = ""
        key = get_key()

        if key in _DIRECTIONS:
            if move_direction(engine, _DIRECTIONS[key]) and engine.is_solved():
                logger.info("Solved %dx%d puzzle", size, size)
                _draw_win(engine)
                if not _play_again():
                    return
                engine.scramble(moves)
        elif key == "scramble":
            engine.scramble(moves)
            status = "[yellow]Scrambled![/yellow]"
        elif key == "solution":
            engine.reset()
            status = "[cyan]Solution shown. Press R to scramble.[/cyan]"
        elif key == "quit":
            return


def _play_again() -> bool:
    while True:
        key = get_key()
        if key in ("scramble", "enter"):
            return True
        if key == "quit":
            return False


# -- menu loop ----------------------------------------------------------------


def _menu_loop(config: PuzzleConfig, rng: random.Random | None, moves: int | None) -> None:
    sel_size = config.size

    while True:
        _draw_menu(sel_size)
        key = get_key()

        if key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
        elif key == "left":
            sel_size = max(MIN_SIZE, sel_size - 1)
        elif key == "right":
            sel_size = min(MAX_SIZE, sel_size + 1)
        elif key in ("enter", "1"):
            _play_game(sel_size, rng, moves)


# -- public entry points ------------------------------------------------------


def preview(engine: PuzzleEngine, out: Console | None = None) -> None:
    """Print the board once, without entering the interactive loop."""
    (out or console).print(board_panel(engine, "Tile Puzzle"))


def run(
    config: PuzzleConfig,
    rng: random.Random | None = None,
    moves: int | None = None,
) -> None:
    """Launch the Rich CLI with interactive menu."""
    _menu_loop(config, rng, moves)
