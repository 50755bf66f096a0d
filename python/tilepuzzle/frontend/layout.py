"""Board geometry shared by the frontends.

Maps cells to pixel placements and tile identities to crops of the source
picture.  Nothing here holds state; views are rebuilt from the engine on
every redraw.
"""

from __future__ import annotations

from dataclasses import dataclass

from tilepuzzle.backend.engine.gameplay import PuzzleEngine
from tilepuzzle.backend.models.arrangement import EMPTY


@dataclass(frozen=True)
class TileView:
    identity: int
    cell: int
    x: int
    y: int
    crop_dx: int
    crop_dy: int
    correct: bool


def cell_origin(cell: int, size: int, tile_px: int, gap: int = 0) -> tuple[int, int]:
    """Top-left pixel of *cell*, relative to the board origin."""
    row, col = divmod(cell, size)
    return col * (tile_px + gap), row * (tile_px + gap)


def cell_at(x: float, y: float, size: int, tile_px: int, gap: int = 0) -> int | None:
    """Return the cell under board-relative point (x, y), or ``None``.

    Points in the gap between tiles or outside the board hit nothing.
    """
    if x < 0 or y < 0:
        return None
    step = tile_px + gap
    col, dx = divmod(int(x), step)
    row, dy = divmod(int(y), step)
    if col >= size or row >= size or dx >= tile_px or dy >= tile_px:
        return None
    return row * size + col


def background_offset(identity: int, size: int, tile_px: int) -> tuple[int, int]:
    """Offset of the source picture that shows tile *identity* in one tile.

    The tile shows the piece of the picture at its solved cell, so the
    picture is shifted left and up by that cell's position.
    """
    row, col = divmod(identity, size)
    return -col * tile_px, -row * tile_px


def tile_views(engine: PuzzleEngine, tile_px: int, gap: int = 0) -> list[TileView]:
    """Build one view per tile in the engine's current arrangement."""
    size = engine.size
    views: list[TileView] = []
    for cell, identity in enumerate(engine.cells):
        if identity is EMPTY:
            continue
        x, y = cell_origin(cell, size, tile_px, gap)
        dx, dy = background_offset(identity, size, tile_px)
        views.append(
            TileView(
                identity=identity,
                cell=cell,
                x=x,
                y=y,
                crop_dx=dx,
                crop_dy=dy,
                correct=identity == cell,
            )
        )
    return views
