"""Puzzle state engine: move validation, scrambling, and win detection."""

from __future__ import annotations

import logging
import random

from tilepuzzle.backend.engine.gamegenerator import Scrambler
from tilepuzzle.backend.models.arrangement import Arrangement

logger = logging.getLogger(__name__)


class PuzzleEngine:
    """Owns the arrangement of one puzzle and every change made to it.

    Collaborators read the grid through ``size``, ``cells``, ``tile_at`` and
    ``empty_cell`` and change it only through ``request_move``,
    ``scramble`` and ``reset``.  The engine is not thread-safe; a threaded
    host must serialize calls on one instance.
    """

    def __init__(self, size: int, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()
        self.initialize(size)

    @classmethod
    def scrambled(
        cls,
        size: int,
        rng: random.Random | None = None,
        moves: int | None = None,
    ) -> PuzzleEngine:
        """Create an engine for a fresh, scrambled puzzle."""
        engine = cls(size, rng)
        engine.scramble(moves)
        return engine

    @classmethod
    def from_arrangement(
        cls,
        arrangement: Arrangement,
        rng: random.Random | None = None,
    ) -> PuzzleEngine:
        """Create an engine around an existing arrangement (e.g. in tests)."""
        if not arrangement.is_valid():
            raise ValueError("Arrangement is not a valid permutation.")
        engine = cls(arrangement.size, rng)
        engine._arrangement = arrangement.copy()
        return engine

    # -- lifecycle ------------------------------------------------------------

    def initialize(self, size: int) -> None:
        """Replace any prior state with the solved arrangement for *size*."""
        self._arrangement = Arrangement.solved(size)

    def reset(self) -> None:
        """Restore the solved arrangement without scrambling."""
        self._arrangement = Arrangement.solved(self.size)

    def scramble(self, moves: int | None = None) -> list[int]:
        """Randomize the arrangement by a walk of legal moves.

        Returns the cells the empty slot moved into, in order; replaying the
        preceding empty cells backwards through ``request_move`` undoes it.
        """
        return Scrambler.scramble(self._arrangement, moves, self._rng)

    # -- queries --------------------------------------------------------------

    @property
    def size(self) -> int:
        return self._arrangement.size

    @property
    def empty_cell(self) -> int:
        return self._arrangement.empty_cell

    @property
    def cells(self) -> tuple[int | None, ...]:
        """Snapshot of the arrangement in row-major order."""
        return tuple(self._arrangement.cells)

    @property
    def arrangement(self) -> Arrangement:
        """Copy of the current arrangement."""
        return self._arrangement.copy()

    def tile_at(self, cell: int) -> int | None:
        return self._arrangement.tile_at(cell)

    def is_tile_correct(self, cell: int) -> bool:
        return self._arrangement.is_tile_correct(cell)

    def is_solved(self) -> bool:
        return self._arrangement.is_solved()

    def adjacent(self, cell_a: int, cell_b: int) -> bool:
        """True iff the cells share an edge (never diagonally)."""
        arr = self._arrangement
        if not (arr.in_range(cell_a) and arr.in_range(cell_b)):
            return False
        ra, ca = arr.row_col(cell_a)
        rb, cb = arr.row_col(cell_b)
        return (ra == rb and abs(ca - cb) == 1) or (ca == cb and abs(ra - rb) == 1)

    def neighbors_of(self, cell: int) -> list[int]:
        """Cells adjacent to *cell*, ordered up, down, left, right."""
        if not self._arrangement.in_range(cell):
            raise ValueError(
                f"Cell {cell} is outside a {self.size}×{self.size} grid."
            )
        return Scrambler.neighbors(self.size, cell)

    # -- movement -------------------------------------------------------------

    def request_move(self, cell: int) -> bool:
        """Slide the tile at *cell* into the adjacent empty slot.

        Returns True if the move was applied.  Requests for cells that are
        not next to the empty slot (including the empty cell itself and
        out-of-range or non-integer values) change nothing and return False.
        """
        if isinstance(cell, bool) or not isinstance(cell, int):
            logger.debug("Rejected move request for non-cell %r", cell)
            return False
        if not self.adjacent(cell, self.empty_cell):
            logger.debug(
                "Rejected move from cell %d (empty at %d)", cell, self.empty_cell
            )
            return False

        self._arrangement.swap_with_empty(cell)
        return True

    def move_tile(self, identity: int) -> bool:
        """Slide tile *identity*, wherever it currently is, into the empty slot."""
        if isinstance(identity, bool) or not isinstance(identity, int):
            return False
        try:
            cell = self._arrangement.cells.index(identity)
        except ValueError:
            return False
        return self.request_move(cell)
