"""Scramble test suite.

The walk returned by ``scramble()`` is replayed backwards through the real
``request_move`` API to show every scrambled board is solvable.
"""

from __future__ import annotations

import random

import pytest

from tilepuzzle.backend.engine.gamegenerator import Scrambler
from tilepuzzle.backend.engine.gameplay import PuzzleEngine
from tilepuzzle.backend.models.arrangement import Arrangement

SIZES = [2, 3, 4, 5, 6]
SEEDS = range(10)


# -- helpers ------------------------------------------------------------------


def _undo_walk(engine: PuzzleEngine, start_empty: int, path: list[int]) -> None:
    """Replay *path* backwards, moving each previous empty cell's tile back."""
    empties = [start_empty, *path]
    for i in reversed(range(len(path))):
        assert engine.request_move(empties[i]), (
            f"Undo step {i} rejected: cell {empties[i]} not next to "
            f"empty cell {engine.empty_cell}"
        )


# -- reachability -------------------------------------------------------------


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("size", SIZES)
def test_scramble_is_reachable_from_solved(size: int, seed: int) -> None:
    engine = PuzzleEngine(size, random.Random(seed))
    start_empty = engine.empty_cell

    path = engine.scramble()

    assert engine.arrangement.is_valid()
    _undo_walk(engine, start_empty, path)
    assert engine.is_solved()


@pytest.mark.parametrize("size", SIZES)
def test_walk_only_takes_legal_steps(size: int) -> None:
    engine = PuzzleEngine(size, random.Random(size))
    previous = engine.empty_cell

    for cell in engine.scramble():
        assert engine.adjacent(previous, cell)
        previous = cell

    assert previous == engine.empty_cell


def test_scramble_starts_from_current_arrangement() -> None:
    engine = PuzzleEngine.scrambled(4, random.Random(5))
    before = engine.cells
    start_empty = engine.empty_cell

    path = engine.scramble(moves=50)
    _undo_walk(engine, start_empty, path)

    assert engine.cells == before


# -- quality ------------------------------------------------------------------


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("size", SIZES)
def test_scramble_leaves_puzzle_unsolved(size: int, seed: int) -> None:
    engine = PuzzleEngine.scrambled(size, random.Random(seed))
    assert not engine.is_solved()


@pytest.mark.parametrize("seed", range(50))
def test_short_walks_are_rerolled_when_solved(seed: int) -> None:
    # Two steps from solved return to solved half the time on a 2×2 grid.
    engine = PuzzleEngine.scrambled(2, random.Random(seed), moves=2)

    assert not engine.is_solved()
    assert engine.arrangement.is_valid()


@pytest.mark.parametrize("size", SIZES)
def test_default_walk_length(size: int) -> None:
    engine = PuzzleEngine(size, random.Random(0))
    expected = Scrambler.default_moves(size)

    path = engine.scramble()

    assert expected >= 4 * size * size
    assert len(path) >= expected
    assert len(path) % expected == 0


def test_same_seed_same_scramble() -> None:
    first = PuzzleEngine.scrambled(4, random.Random(42))
    second = PuzzleEngine.scrambled(4, random.Random(42))

    assert first.cells == second.cells


# -- step counts --------------------------------------------------------------


def test_zero_moves_is_a_no_op() -> None:
    engine = PuzzleEngine(3, random.Random(0))

    assert engine.scramble(moves=0) == []
    assert engine.is_solved()


def test_single_move_from_solved() -> None:
    engine = PuzzleEngine(3, random.Random(0))

    path = engine.scramble(moves=1)

    assert len(path) == 1
    assert path[0] in engine.neighbors_of(8)
    assert not engine.is_solved()


def test_negative_moves_rejected() -> None:
    engine = PuzzleEngine(3)
    with pytest.raises(ValueError):
        engine.scramble(moves=-1)
    assert engine.is_solved()


# -- Scrambler helpers --------------------------------------------------------


@pytest.mark.parametrize("size", SIZES)
def test_neighbor_counts(size: int) -> None:
    last = size - 1
    for cell in range(size * size):
        row, col = divmod(cell, size)
        on_edge = (row in (0, last)) + (col in (0, last))
        expected = {0: 4, 1: 3, 2: 2}[on_edge]
        assert len(Scrambler.neighbors(size, cell)) == expected, cell


def test_walk_mutates_in_place() -> None:
    arr = Arrangement.solved(3)

    path = Scrambler.walk(arr, 20, random.Random(3))

    assert len(path) == 20
    assert arr.empty_cell == path[-1]
    assert arr.is_valid()
