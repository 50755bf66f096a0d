"""Arrangement model tests."""

from __future__ import annotations

import pytest

from tilepuzzle.backend.models.arrangement import EMPTY, Arrangement


def test_solved_layout() -> None:
    arr = Arrangement.solved(3)

    assert arr.cells == [0, 1, 2, 3, 4, 5, 6, 7, EMPTY]
    assert arr.empty_cell == 8
    assert arr.cell_count == 9
    assert arr.is_solved()
    assert arr.is_valid()


def test_from_flat_finds_empty_cell() -> None:
    arr = Arrangement.from_flat(2, [2, EMPTY, 0, 1])

    assert arr.empty_cell == 1
    assert arr.tile_at(0) == 2
    assert not arr.is_solved()


@pytest.mark.parametrize(
    "size, flat",
    [
        (2, [0, 1, 2]),
        (2, [0, 1, 2, EMPTY, EMPTY]),
        (2, [0, 1, EMPTY, EMPTY]),
        (2, [0, 1, 2, 3]),
        (2, [0, 0, 1, EMPTY]),
        (2, [0, 1, 3, EMPTY]),
        (1, [EMPTY]),
        (2, [0, "a", EMPTY, 1]),
        (2, [0, 1.0, EMPTY, 2]),
        (2, [0, True, EMPTY, 2]),
    ],
    ids=[
        "short", "long", "two-empty", "no-empty", "duplicate", "gap", "size-1",
        "str-tile", "float-tile", "bool-tile",
    ],
)
def test_from_flat_rejects_invalid(size: int, flat: list[int | None]) -> None:
    with pytest.raises(ValueError):
        Arrangement.from_flat(size, flat)


def test_swap_with_empty_moves_tile_and_marker() -> None:
    arr = Arrangement.solved(2)

    arr.swap_with_empty(1)

    assert arr.cells == [0, EMPTY, 2, 1]
    assert arr.empty_cell == 1
    assert arr.is_valid()


def test_row_col_is_row_major() -> None:
    arr = Arrangement.solved(4)

    assert arr.row_col(0) == (0, 0)
    assert arr.row_col(5) == (1, 1)
    assert arr.row_col(11) == (2, 3)
    assert arr.row_col(15) == (3, 3)


def test_is_valid_detects_stale_empty_cell() -> None:
    arr = Arrangement.solved(2)
    arr.empty_cell = 0

    assert not arr.is_valid()


def test_copy_is_independent() -> None:
    arr = Arrangement.solved(3)
    dup = arr.copy()

    dup.swap_with_empty(5)

    assert arr.is_solved()
    assert dup.empty_cell == 5
    assert arr.empty_cell == 8


def test_is_valid_rejects_non_integer_tile() -> None:
    arr = Arrangement(size=2, cells=[0, "a", 1, EMPTY], empty_cell=3)

    assert not arr.is_valid()
