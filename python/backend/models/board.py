"""Square grid geometry: cells, directions, and 1-based board lookups."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    def reversed(self) -> Direction:
        return _REVERSED[self]


_REVERSED: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


@dataclass(frozen=True)
class Cell:
    """A 1-based (row, column) coordinate on a square board."""

    row: int
    column: int

    def __str__(self) -> str:
        return f"({self.row}, {self.column})"


class SquareBoard:
    """Immutable ``width`` × ``width`` grid of cells.

    Cells are created once, in row-major order, and shared by every
    lookup.  All public coordinates are 1-based.
    """

    def __init__(self, width: int) -> None:
        if width <= 0:
            raise ValueError(f"Board width must be positive, got {width}.")
        self._width = width
        self._cells: list[Cell] = [
            Cell(r, c) for r in range(1, width + 1) for c in range(1, width + 1)
        ]

    @property
    def width(self) -> int:
        return self._width

    # -- indexing -------------------------------------------------------------

    def _index(self, row: int, col: int) -> int:
        if row < 1:
            raise ValueError(f"row must be a 1-based index, was: {row}")
        if col < 1:
            raise ValueError(f"col must be a 1-based index, was: {col}")
        return (row - 1) * self._width + (col - 1)

    def _cell_index(self, cell: Cell) -> int:
        if cell.row > self._width or cell.column > self._width:
            raise ValueError(
                f"Cell {cell} is outside the {self._width}×{self._width} board."
            )
        return self._index(cell.row, cell.column)

    # -- lookups --------------------------------------------------------------

    def get_cell_or_none(self, row: int, col: int) -> Cell | None:
        """Return the cell at (*row*, *col*), or ``None`` past the far edge.

        Coordinates below 1 are not "off the board" here; they are
        rejected by the index computation with ``ValueError``.
        """
        if row > self._width or col > self._width:
            return None
        return self._cells[self._index(row, col)]

    def get_cell(self, row: int, col: int) -> Cell:
        cell = self.get_cell_or_none(row, col)
        if cell is None:
            raise ValueError(
                f"Cell ({row}, {col}) is outside the "
                f"{self._width}×{self._width} board."
            )
        return cell

    def get_all_cells(self) -> list[Cell]:
        return list(self._cells)

    def get_row(self, row: int, col_range: range) -> list[Cell]:
        """Cells of *row* for the columns in *col_range*, clipped to the board.

        Example::

            SquareBoard(5).get_row(3, range(2, 11, 2))  # (3, 2), (3, 4)
        """
        return [
            self._cells[self._index(row, col)]
            for col in self._clip(row, col_range)
        ]

    def get_column(self, row_range: range, col: int) -> list[Cell]:
        """Cells of column *col* for the rows in *row_range*, clipped."""
        return [
            self._cells[self._index(row, col)]
            for row in self._clip(col, row_range)
        ]

    def _clip(self, fixed: int, coords: range) -> range:
        if not 1 <= fixed <= self._width:
            raise ValueError(
                f"Coordinate {fixed} is outside 1..{self._width}."
            )
        if not coords:
            return range(0)

        first, last, step = coords[0], coords[-1], coords.step
        if step > 0:
            start, end = max(first, 1), min(last, self._width)
            return range(start, end + 1, step)
        start, end = min(first, self._width), max(last, 1)
        return range(start, end - 1, step)

    # -- neighbours -----------------------------------------------------------

    def neighbor(self, cell: Cell, direction: Direction) -> Cell | None:
        """Return the cell adjacent to *cell* in *direction*, if on the board."""
        self._cell_index(cell)
        r, c = cell.row, cell.column
        if direction is Direction.UP:
            return self._cells[self._index(r - 1, c)] if r > 1 else None
        if direction is Direction.DOWN:
            return self._cells[self._index(r + 1, c)] if r < self._width else None
        if direction is Direction.LEFT:
            return self._cells[self._index(r, c - 1)] if c > 1 else None
        return self._cells[self._index(r, c + 1)] if c < self._width else None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(width={self._width})"


def create_square_board(width: int) -> SquareBoard:
    return SquareBoard(width)
