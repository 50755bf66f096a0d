"""Arrangement model for the tile puzzle."""

from __future__ import annotations

from dataclasses import dataclass

# Marker for the one cell that holds no tile.
EMPTY = None

MIN_SIZE = 2


@dataclass
class Arrangement:
    """Assignment of tile identities to the cells of a ``size``×``size`` grid.

    Cells are stored as a flat row-major list.  Tile identity ``i`` belongs at
    cell ``i``; the empty slot is ``EMPTY`` and its cell is cached in
    ``empty_cell``.
    """

    size: int
    cells: list[int | None]
    empty_cell: int

    # -- construction helpers -------------------------------------------------

    @classmethod
    def solved(cls, size: int) -> Arrangement:
        """Return the goal arrangement (tile ``i`` at cell ``i``, empty last)."""
        if size < MIN_SIZE:
            raise ValueError(f"Grid size must be at least {MIN_SIZE}, got {size}.")
        count = size * size
        cells: list[int | None] = list(range(count - 1))
        cells.append(EMPTY)
        return cls(size=size, cells=cells, empty_cell=count - 1)

    @classmethod
    def from_flat(cls, size: int, flat: list[int | None]) -> Arrangement:
        """Create an arrangement from a flat row-major list.

        Example::

            Arrangement.from_flat(2, [0, 1, None, 2])
        """
        if size < MIN_SIZE:
            raise ValueError(f"Grid size must be at least {MIN_SIZE}, got {size}.")
        count = size * size
        if len(flat) != count:
            raise ValueError(
                f"Expected {count} cells for a {size}×{size} grid, "
                f"got {len(flat)}."
            )
        empties = [i for i, v in enumerate(flat) if v is EMPTY]
        if len(empties) != 1:
            raise ValueError(
                f"Expected exactly one empty cell, found {len(empties)}."
            )
        tiles = [v for v in flat if v is not EMPTY]
        if any(isinstance(v, bool) or not isinstance(v, int) for v in tiles):
            raise ValueError("Tile identities must be integers.")
        if sorted(tiles) != list(range(count - 1)):
            raise ValueError(
                f"Tile identities must be 0..{count - 2}, each exactly once."
            )
        return cls(size=size, cells=list(flat), empty_cell=empties[0])

    # -- queries --------------------------------------------------------------

    @property
    def cell_count(self) -> int:
        return self.size * self.size

    def in_range(self, cell: int) -> bool:
        return 0 <= cell < self.cell_count

    def row_col(self, cell: int) -> tuple[int, int]:
        return divmod(cell, self.size)

    def tile_at(self, cell: int) -> int | None:
        return self.cells[cell]

    def is_solved(self) -> bool:
        """Check if every tile identity sits at its own cell.

        The empty slot needs no separate check: the arrangement is a
        permutation, so it is left with the last cell.
        """
        return all(self.cells[i] == i for i in range(self.cell_count - 1))

    def is_tile_correct(self, cell: int) -> bool:
        """Check if the tile at *cell* is in its goal position."""
        val = self.cells[cell]
        if val is EMPTY:
            return cell == self.cell_count - 1
        return val == cell

    def is_valid(self) -> bool:
        """Check the permutation invariants (one empty, every identity once)."""
        if len(self.cells) != self.cell_count:
            return False
        if not self.in_range(self.empty_cell) or self.cells[self.empty_cell] is not EMPTY:
            return False
        tiles = [v for v in self.cells if v is not EMPTY]
        if any(isinstance(v, bool) or not isinstance(v, int) for v in tiles):
            return False
        return sorted(tiles) == list(range(self.cell_count - 1))

    # -- mutation -------------------------------------------------------------

    def swap_with_empty(self, cell: int) -> None:
        """Slide the tile at *cell* into the empty slot.  No adjacency check."""
        self.cells[self.empty_cell] = self.cells[cell]
        self.cells[cell] = EMPTY
        self.empty_cell = cell

    def copy(self) -> Arrangement:
        return Arrangement(
            size=self.size,
            cells=self.cells[:],
            empty_cell=self.empty_cell,
        )
