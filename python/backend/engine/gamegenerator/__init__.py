from backend.engine.gamegenerator.generator import (
    FIFTEEN_WIDTH,
    FixedGameInitializer,
    GameOfFifteenInitializer,
    RandomGameInitializer,
    is_even_permutation,
    solved_permutation,
)

__all__ = [
    "FIFTEEN_WIDTH",
    "FixedGameInitializer",
    "GameOfFifteenInitializer",
    "RandomGameInitializer",
    "is_even_permutation",
    "solved_permutation",
]
