"""Scrambles arrangements by random walks of the empty slot."""

from __future__ import annotations

import logging
import random

from tilepuzzle.backend.models.arrangement import Arrangement

logger = logging.getLogger(__name__)

MIN_SCRAMBLE_MOVES = 100
MOVES_PER_CELL = 10


class Scrambler:
    """Creates solvable puzzles by walking the empty slot from a given state.

    Every step swaps the empty slot with one of its neighbors, so the result
    is always reachable from (and back to) the starting arrangement.
    """

    @staticmethod
    def default_moves(size: int) -> int:
        return max(MIN_SCRAMBLE_MOVES, size * size * MOVES_PER_CELL)

    @staticmethod
    def neighbors(size: int, cell: int) -> list[int]:
        """Cells orthogonally next to *cell*, ordered up, down, left, right."""
        row, col = divmod(cell, size)
        found: list[int] = []
        if row > 0:
            found.append(cell - size)
        if row < size - 1:
            found.append(cell + size)
        if col > 0:
            found.append(cell - 1)
        if col < size - 1:
            found.append(cell + 1)
        return found

    @staticmethod
    def walk(
        arrangement: Arrangement,
        moves: int,
        rng: random.Random | None = None,
    ) -> list[int]:
        """Perform *moves* random swaps in-place.

        Returns the cells the empty slot moved into, in order.
        """
        choose = (rng or random).choice
        path: list[int] = []
        for _ in range(moves):
            target = choose(Scrambler.neighbors(arrangement.size, arrangement.empty_cell))
            arrangement.swap_with_empty(target)
            path.append(target)
        return path

    @staticmethod
    def scramble(
        arrangement: Arrangement,
        moves: int | None = None,
        rng: random.Random | None = None,
    ) -> list[int]:
        """Scramble *arrangement* in-place and return the walk taken.

        If the walk happens to end on the solved arrangement it is extended
        with further batches until it does not, unless *moves* is ``0``.
        """
        if moves is None:
            moves = Scrambler.default_moves(arrangement.size)
        if moves < 0:
            raise ValueError(f"Scramble moves must be non-negative, got {moves}.")

        path = Scrambler.walk(arrangement, moves, rng)
        while moves and arrangement.is_solved():
            logger.debug("Scramble ended solved, extending walk")
            path.extend(Scrambler.walk(arrangement, moves, rng))

        logger.debug(
            "Scrambled %dx%d grid with %d moves",
            arrangement.size,
            arrangement.size,
            len(path),
        )
        return path
