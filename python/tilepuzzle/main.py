"""Tile Puzzle.

Usage::

    tile-puzzle                       # Rich terminal, 4×4
    tile-puzzle -f rich -s 3          # Rich terminal, 3×3
    tile-puzzle -f pygame -i nature   # Pygame picture puzzle
    tile-puzzle --preview --seed 7    # print one scrambled board and exit
"""

from __future__ import annotations

import importlib
import logging
import random
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

from tilepuzzle.backend.engine.gameplay import PuzzleEngine
from tilepuzzle.backend.models.arrangement import MIN_SIZE
from tilepuzzle.backend.models.config import (
    DEFAULT_IMAGE,
    DEFAULT_SIZE,
    MAX_SIZE,
    PuzzleConfig,
)

ROOT = Path(__file__).resolve().parent  # python/tilepuzzle/
IMAGES_DIR = ROOT / "assets" / "images"

logger = logging.getLogger(__name__)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    rich = "rich"
    pygame = "pygame"


_RUNNERS = {
    Frontend.rich: "tilepuzzle.frontend.cli.rich.app",
    Frontend.pygame: "tilepuzzle.frontend.gui.pygame.app",
}


# -- helpers ------------------------------------------------------------------


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="Frontend to launch.",
    ),
    size: int = typer.Option(
        DEFAULT_SIZE, "-s", "--size",
        min=MIN_SIZE, max=MAX_SIZE,
        help=f"Grid size ({MIN_SIZE}-{MAX_SIZE}).",
    ),
    image: str = typer.Option(
        DEFAULT_IMAGE, "-i", "--image",
        help="Picture name (book, library, nature) or path to an image file.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for reproducible scrambles.",
    ),
    moves: Optional[int] = typer.Option(
        None, "--moves",
        min=0,
        help="Random moves per scramble (default scales with grid size).",
    ),
    preview: bool = typer.Option(
        False, "--preview",
        help="Print one scrambled board and exit.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log engine activity.",
    ),
) -> None:
    """Tile Puzzle."""
    _setup_logging(verbose)
    config = PuzzleConfig(size=size, image=image)
    rng = random.Random(seed)

    if preview:
        from tilepuzzle.frontend.cli.rich.app import preview as print_board

        engine = PuzzleEngine.scrambled(config.size, rng, moves)
        print_board(engine)
        return

    logger.debug("Launching %s frontend with %dx%d grid", frontend.value, size, size)
    mod = importlib.import_module(_RUNNERS[frontend])
    if frontend is Frontend.pygame:
        mod.run(config, IMAGES_DIR, rng=rng, moves=moves)
    else:
        mod.run(config, rng=rng, moves=moves)


if __name__ == "__main__":
    app()
