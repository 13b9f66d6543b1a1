"""Core gameplay logic — processes moves and checks win condition."""

from __future__ import annotations

import itertools
import logging
from abc import ABC, abstractmethod

from backend.engine.gamegenerator import (
    FIFTEEN_WIDTH,
    GameOfFifteenInitializer,
    RandomGameInitializer,
)
from backend.models.board import Direction
from backend.models.game_board import GameBoard

logger = logging.getLogger(__name__)


class Game(ABC):
    """What a frontend needs to drive a board game turn by turn."""

    @property
    @abstractmethod
    def width(self) -> int: ...

    @abstractmethod
    def initialize(self) -> None: ...

    @abstractmethod
    def can_move(self) -> bool: ...

    @abstractmethod
    def has_won(self) -> bool: ...

    @abstractmethod
    def process_move(self, direction: Direction) -> bool: ...

    @abstractmethod
    def get(self, row: int, col: int) -> int | None: ...


class GameOfFifteen(Game):
    """The 4×4 sliding-tile puzzle.

    ``None`` marks the blank.  Directions name where a *tile* slides:
    ``Direction.LEFT`` moves the tile right of the blank to the left.
    """

    def __init__(self, initializer: GameOfFifteenInitializer) -> None:
        self._initializer = initializer
        self._board: GameBoard[int] = GameBoard(FIFTEEN_WIDTH)
        self._initialized = False

    @property
    def width(self) -> int:
        return self._board.width

    def initialize(self) -> None:
        board = self._board
        for index, value in enumerate(self._initializer.initial_permutation):
            row = index // board.width + 1
            col = index % board.width + 1
            board[board.get_cell(row, col)] = value
        self._initialized = True
        logger.debug("Initialized board: %s", self._snapshot())

    # -- queries --------------------------------------------------------------

    def can_move(self) -> bool:
        self._check_initialized()
        return True

    def has_won(self) -> bool:
        """True when the tiles read 1, 2, 3, ... in row-major order.

        The blank is skipped wherever it sits.
        """
        self._check_initialized()
        expected = 1
        for cell in self._board.get_all_cells():
            value = self._board[cell]
            if value is None:
                continue
            if value != expected:
                return False
            expected += 1
        return True

    def get(self, row: int, col: int) -> int | None:
        self._check_initialized()
        return self._board[self._board.get_cell(row, col)]

    # -- movement -------------------------------------------------------------

    def process_move(self, direction: Direction) -> bool:
        """Slide the tile opposite *direction* from the blank into it.

        Returns False, leaving the board untouched, when no such tile
        exists.
        """
        self._check_initialized()
        board = self._board
        blank = board.find(lambda v: v is None)
        if blank is None:
            logger.debug("Move %s ignored: board has no blank", direction.value)
            return False

        neighbour = board.neighbor(blank, direction.reversed())
        if neighbour is None:
            logger.debug("Move %s ignored: blank at %s", direction.value, blank)
            return False

        board[blank] = board[neighbour]
        board[neighbour] = None
        logger.debug("Moved tile %s %s into %s", board[blank], direction.value, blank)
        return True

    # -- helpers --------------------------------------------------------------

    def _check_initialized(self) -> None:
        if not self._initialized:
            raise RuntimeError("initialize() must be called before playing.")

    def _snapshot(self) -> list[int | None]:
        return [self._board[cell] for cell in self._board.get_all_cells()]


def new_game_of_fifteen(
    initializer: GameOfFifteenInitializer | None = None,
) -> GameOfFifteen:
    return GameOfFifteen(initializer or RandomGameInitializer())
