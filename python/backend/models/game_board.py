"""Mutable per-cell values layered over a ``SquareBoard``."""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

from backend.models.board import Cell, SquareBoard

T = TypeVar("T")


class GameBoard(SquareBoard, Generic[T]):
    """A square board holding an optional value of type ``T`` in every cell.

    Values live in a flat list addressed by the cell's row-major index.
    Every cell starts empty (``None``) and only ``set`` changes it.
    """

    def __init__(self, width: int) -> None:
        super().__init__(width)
        self._values: list[T | None] = [None] * (width * width)

    # -- access ---------------------------------------------------------------

    def get(self, cell: Cell) -> T | None:
        return self._values[self._cell_index(cell)]

    def set(self, cell: Cell, value: T | None) -> None:
        self._values[self._cell_index(cell)] = value

    def __getitem__(self, cell: Cell) -> T | None:
        return self.get(cell)

    def __setitem__(self, cell: Cell, value: T | None) -> None:
        self.set(cell, value)

    # -- queries --------------------------------------------------------------

    def filter(self, predicate: Callable[[T | None], bool]) -> list[Cell]:
        """Return every cell whose value satisfies *predicate*."""
        return [
            cell
            for cell, value in zip(self._cells, self._values)
            if predicate(value)
        ]

    def find(self, predicate: Callable[[T | None], bool]) -> Cell | None:
        """Return the first cell (row-major) matching *predicate*, or ``None``."""
        for cell, value in zip(self._cells, self._values):
            if predicate(value):
                return cell
        return None

    def any(self, predicate: Callable[[T | None], bool]) -> bool:
        return any(predicate(self.get(cell)) for cell in self._cells)

    def all(self, predicate: Callable[[T | None], bool]) -> bool:
        return all(predicate(self.get(cell)) for cell in self._cells)


def create_game_board(width: int) -> GameBoard:
    return GameBoard(width)
