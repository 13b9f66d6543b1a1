"""Starting permutations for the Game of Fifteen."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from collections.abc import Sequence

FIFTEEN_WIDTH = 4
TILE_COUNT = FIFTEEN_WIDTH * FIFTEEN_WIDTH - 1


def solved_permutation() -> list[int | None]:
    """Return the goal layout in row-major order (blank bottom-right)."""
    return [*range(1, TILE_COUNT + 1), None]


def is_even_permutation(values: Sequence[int | None]) -> bool:
    """Return True if the tiles (blank ignored) have an even inversion count."""
    tiles = [v for v in values if v is not None]
    inversions = 0
    for i, a in enumerate(tiles):
        for b in tiles[i + 1 :]:
            if a > b:
                inversions += 1
    return inversions % 2 == 0


class GameOfFifteenInitializer(ABC):
    """Supplies the 16 row-major values a new game starts from."""

    @property
    @abstractmethod
    def initial_permutation(self) -> list[int | None]: ...


class RandomGameInitializer(GameOfFifteenInitializer):
    """Shuffles the tiles into a solvable layout with the blank last.

    With the blank fixed in the bottom-right corner a layout is solvable
    exactly when the tile permutation is even, so an odd shuffle is
    repaired by swapping its first two tiles.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        rng = rng or random.Random()
        tiles: list[int | None] = list(range(1, TILE_COUNT + 1))
        rng.shuffle(tiles)
        if not is_even_permutation(tiles):
            tiles[0], tiles[1] = tiles[1], tiles[0]
        self._permutation = [*tiles, None]

    @property
    def initial_permutation(self) -> list[int | None]:
        return list(self._permutation)


class FixedGameInitializer(GameOfFifteenInitializer):
    """Replays a given row-major layout.

    Example::

        FixedGameInitializer([1, 2, 3, 4, 5, 6, 7, 8,
                              9, 10, 11, 12, 13, 14, None, 15])
    """

    def __init__(self, permutation: Sequence[int | None]) -> None:
        expected = FIFTEEN_WIDTH * FIFTEEN_WIDTH
        if len(permutation) != expected:
            raise ValueError(
                f"Expected {expected} values for a "
                f"{FIFTEEN_WIDTH}×{FIFTEEN_WIDTH} board, got {len(permutation)}."
            )
        self._permutation = list(permutation)

    @property
    def initial_permutation(self) -> list[int | None]:
        return list(self._permutation)
