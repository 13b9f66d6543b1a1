"""A game in progress: the engine plus its move count and clock."""

from __future__ import annotations

import time

from backend.engine.gameplay import Game
from backend.models.board import Direction


class GameState:
    """Wraps a ``Game`` with a move counter and a pausable clock."""

    def __init__(self, game: Game) -> None:
        self.game = game
        self.moves: int = 0
        self._banked: float = 0.0
        self._resumed_at: float | None = time.monotonic()

    @property
    def elapsed_time(self) -> float:
        if self._resumed_at is None:
            return self._banked
        return self._banked + (time.monotonic() - self._resumed_at)

    def pause(self) -> None:
        if self._resumed_at is not None:
            self._banked = self.elapsed_time
            self._resumed_at = None

    def resume(self) -> None:
        if self._resumed_at is None:
            self._resumed_at = time.monotonic()

    def move(self, direction: Direction) -> bool:
        """Apply *direction*; only moves that shifted a tile are counted."""
        moved = self.game.process_move(direction)
        if moved:
            self.moves += 1
        return moved

    @property
    def is_solved(self) -> bool:
        return self.game.has_won()
