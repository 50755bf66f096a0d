"""Input adapter tests: keys, clicks, and drags become single move requests."""

from __future__ import annotations

import pytest

from tilepuzzle.backend.engine.gameplay import PuzzleEngine
from tilepuzzle.frontend.input_adapter import (
    Direction,
    PointerAdapter,
    direction_target,
    move_direction,
)

TILE = 100


class _CountingEngine(PuzzleEngine):
    """Engine that records every move request it receives."""

    def __init__(self, size: int) -> None:
        super().__init__(size)
        self.requests: list[int] = []

    def request_move(self, cell: int) -> bool:
        self.requests.append(cell)
        return super().request_move(cell)


def _center(cell: int, size: int = 3) -> tuple[int, int]:
    row, col = divmod(cell, size)
    return col * TILE + TILE // 2, row * TILE + TILE // 2


# -- keys ---------------------------------------------------------------------


@pytest.mark.parametrize(
    "direction, expected",
    [
        (Direction.UP, None),
        (Direction.DOWN, 5),
        (Direction.LEFT, None),
        (Direction.RIGHT, 7),
    ],
)
def test_direction_target_on_solved(direction: Direction, expected: int | None) -> None:
    assert direction_target(PuzzleEngine(3), direction) == expected


def test_direction_keys_move_tiles() -> None:
    engine = PuzzleEngine(3)

    assert move_direction(engine, Direction.DOWN)
    assert engine.empty_cell == 5
    assert engine.tile_at(8) == 5

    assert move_direction(engine, Direction.UP)
    assert engine.is_solved()


def test_direction_off_board_is_ignored() -> None:
    engine = _CountingEngine(3)

    assert not move_direction(engine, Direction.UP)
    assert engine.requests == []
    assert engine.is_solved()


# -- clicks -------------------------------------------------------------------


def test_click_adjacent_tile() -> None:
    engine = _CountingEngine(3)
    pointer = PointerAdapter(engine, TILE)

    pointer.press(*_center(5))
    assert pointer.release(*_center(5))

    assert engine.requests == [5]
    assert engine.empty_cell == 5


def test_click_distant_tile_is_rejected() -> None:
    engine = _CountingEngine(3)
    pointer = PointerAdapter(engine, TILE)

    pointer.press(*_center(0))
    assert not pointer.release(*_center(0))

    assert engine.requests == [0]
    assert engine.is_solved()


def test_release_elsewhere_is_not_a_click() -> None:
    engine = _CountingEngine(3)
    pointer = PointerAdapter(engine, TILE)

    pointer.press(*_center(5))
    assert not pointer.release(*_center(4))

    assert engine.requests == []


def test_press_on_empty_cell_starts_nothing() -> None:
    engine = _CountingEngine(3)
    pointer = PointerAdapter(engine, TILE)

    pointer.press(*_center(8))

    assert not pointer.active
    assert not pointer.motion(*_center(7))
    assert not pointer.release(*_center(8))
    assert engine.requests == []


def test_origin_offsets_hit_testing() -> None:
    engine = PuzzleEngine(3)
    pointer = PointerAdapter(engine, TILE, origin=(20, 60))
    x, y = _center(7)

    pointer.press(x + 20, y + 60)
    assert pointer.release(x + 20, y + 60)
    assert engine.empty_cell == 7


# -- drags --------------------------------------------------------------------


def test_drag_into_empty_slot_moves_once() -> None:
    engine = _CountingEngine(3)
    pointer = PointerAdapter(engine, TILE)

    pointer.press(150, 250)  # cell 7
    assert not pointer.motion(180, 250)
    assert pointer.motion(250, 250)  # enters cell 8
    assert not pointer.motion(260, 250)
    assert not pointer.motion(150, 250)  # back over the new empty slot
    assert not pointer.release(150, 250)

    assert engine.requests == [7]
    assert engine.tile_at(8) == 7
    assert engine.empty_cell == 7


def test_drag_from_distant_tile_is_rejected_once() -> None:
    engine = _CountingEngine(3)
    pointer = PointerAdapter(engine, TILE)

    pointer.press(*_center(4))
    assert not pointer.motion(*_center(8))
    assert not pointer.motion(*_center(8))
    assert not pointer.release(*_center(4))

    assert engine.requests == [4]
    assert engine.is_solved()


def test_gestures_are_independent() -> None:
    engine = _CountingEngine(3)
    pointer = PointerAdapter(engine, TILE)

    pointer.press(*_center(7))
    pointer.motion(*_center(8))
    pointer.release(*_center(8))

    pointer.press(*_center(8))
    pointer.motion(*_center(7))
    pointer.release(*_center(7))

    assert engine.requests == [7, 8]
    assert engine.is_solved()
