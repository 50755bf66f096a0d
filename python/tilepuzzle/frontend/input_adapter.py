"""Turns key presses and pointer gestures into engine move requests."""

from __future__ import annotations

from enum import StrEnum

from tilepuzzle.backend.engine.gameplay import PuzzleEngine
from tilepuzzle.frontend.layout import cell_at


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# The offset points from the empty slot to the tile that will slide into it.
# UP   → tile below the empty slot moves up
# DOWN → tile above moves down
# LEFT → tile to the right moves left
# RIGHT→ tile to the left moves right
_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}


def direction_target(engine: PuzzleEngine, direction: Direction) -> int | None:
    """Return the cell whose tile would slide in *direction*, or ``None``."""
    size = engine.size
    er, ec = divmod(engine.empty_cell, size)
    dr, dc = _OFFSETS[direction]
    tr, tc = er + dr, ec + dc
    if not (0 <= tr < size and 0 <= tc < size):
        return None
    return tr * size + tc


def move_direction(engine: PuzzleEngine, direction: Direction) -> bool:
    """Request the move a direction key stands for."""
    target = direction_target(engine, direction)
    if target is None:
        return False
    return engine.request_move(target)


class PointerAdapter:
    """Click and drag handling for a board drawn at ``origin``.

    A press on a tile starts a gesture.  Dragging that tile into the empty
    cell moves it straight away; releasing on the pressed cell without such
    a drag counts as a click.  Either way a gesture issues at most one
    ``request_move``.
    """

    def __init__(
        self,
        engine: PuzzleEngine,
        tile_px: int,
        gap: int = 0,
        origin: tuple[int, int] = (0, 0),
    ) -> None:
        self.engine = engine
        self.tile_px = tile_px
        self.gap = gap
        self.origin = origin
        self._pressed: int | None = None
        self._spent = False

    @property
    def active(self) -> bool:
        return self._pressed is not None

    def cell_at(self, x: float, y: float) -> int | None:
        ox, oy = self.origin
        return cell_at(x - ox, y - oy, self.engine.size, self.tile_px, self.gap)

    def press(self, x: float, y: float) -> None:
        cell = self.cell_at(x, y)
        if cell is None or cell == self.engine.empty_cell:
            self._pressed = None
            return
        self._pressed = cell
        self._spent = False

    def motion(self, x: float, y: float) -> bool:
        """Move the pressed tile once the pointer reaches the empty cell."""
        if self._pressed is None or self._spent:
            return False
        if self.cell_at(x, y) != self.engine.empty_cell:
            return False
        self._spent = True
        return self.engine.request_move(self._pressed)

    def release(self, x: float, y: float) -> bool:
        """End the gesture; a release on the pressed cell is a click."""
        pressed, spent = self._pressed, self._spent
        self._pressed = None
        self._spent = False
        if pressed is None or spent:
            return False
        if self.cell_at(x, y) != pressed:
            return False
        return self.engine.request_move(pressed)
