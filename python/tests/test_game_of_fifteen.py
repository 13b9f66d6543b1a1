"""Game of Fifteen engine: initialization, win detection, move handling."""

from __future__ import annotations

import logging

import pytest

from backend.engine.gamegenerator import FixedGameInitializer, solved_permutation
from backend.engine.gameplay import GameOfFifteen, new_game_of_fifteen
from backend.models.board import Direction


# -- helpers ------------------------------------------------------------------


def _game(permutation: list[int | None]) -> GameOfFifteen:
    game = GameOfFifteen(FixedGameInitializer(permutation))
    game.initialize()
    return game


def _layout(game: GameOfFifteen) -> list[int | None]:
    return [game.get(r, c) for r in range(1, 5) for c in range(1, 5)]


def _blank_at(row: int, col: int) -> list[int | None]:
    """A layout with the blank at (row, col) and tiles 1..15 around it."""
    values: list[int | None] = list(range(1, 16))
    values.insert((row - 1) * 4 + (col - 1), None)
    return values


# -- initialize / get ---------------------------------------------------------


def test_initialize_writes_row_major() -> None:
    permutation = [5, 1, 2, 3, 4, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, None]
    game = _game(permutation)

    assert game.width == 4
    assert game.get(1, 1) == 5
    assert game.get(2, 1) == 4
    assert game.get(4, 4) is None
    assert _layout(game) == permutation


@pytest.mark.parametrize("row, col", [(5, 1), (1, 5), (0, 1), (1, 0)])
def test_get_outside_board_raises(row: int, col: int) -> None:
    game = _game(solved_permutation())
    with pytest.raises(ValueError):
        game.get(row, col)


def test_use_before_initialize_raises() -> None:
    game = GameOfFifteen(FixedGameInitializer(solved_permutation()))
    with pytest.raises(RuntimeError):
        game.has_won()
    with pytest.raises(RuntimeError):
        game.process_move(Direction.UP)
    with pytest.raises(RuntimeError):
        game.get(1, 1)
    with pytest.raises(RuntimeError):
        game.can_move()


def test_can_move_is_always_true() -> None:
    assert _game(solved_permutation()).can_move()


def test_factory_defaults_to_random_initializer() -> None:
    game = new_game_of_fifteen()
    game.initialize()
    assert sorted(v for v in _layout(game) if v is not None) == list(range(1, 16))
    assert game.get(4, 4) is None


# -- has_won ------------------------------------------------------------------


def test_solved_layout_has_won() -> None:
    assert _game(solved_permutation()).has_won()


def test_blank_anywhere_with_tiles_in_order_has_won() -> None:
    game = _game([1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, None, 15])
    assert game.has_won()
    assert _game(_blank_at(1, 1)).has_won()


def test_out_of_order_tiles_have_not_won() -> None:
    game = _game([2, 1, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15, None])
    assert not game.has_won()


def test_has_won_is_a_pure_query() -> None:
    game = _game(solved_permutation())
    before = _layout(game)
    game.has_won()
    game.has_won()
    assert _layout(game) == before


# -- process_move -------------------------------------------------------------


def test_move_left_pulls_tile_from_the_right() -> None:
    game = _game(_blank_at(2, 2))
    tile = game.get(2, 3)

    assert game.process_move(Direction.LEFT)
    assert game.get(2, 2) == tile
    assert game.get(2, 3) is None


@pytest.mark.parametrize(
    "direction, source",
    [
        (Direction.UP, (3, 2)),
        (Direction.DOWN, (1, 2)),
        (Direction.LEFT, (2, 3)),
        (Direction.RIGHT, (2, 1)),
    ],
)
def test_move_takes_tile_from_reversed_direction(
    direction: Direction, source: tuple[int, int]
) -> None:
    game = _game(_blank_at(2, 2))
    tile = game.get(*source)

    game.process_move(direction)

    assert game.get(2, 2) == tile
    assert game.get(*source) is None


@pytest.mark.parametrize("direction", [Direction.RIGHT, Direction.DOWN])
def test_move_at_edge_is_a_no_op(direction: Direction) -> None:
    game = _game(_blank_at(1, 1))
    before = _layout(game)

    assert not game.process_move(direction)
    assert _layout(game) == before


def test_moves_then_reverse_restore_solved() -> None:
    game = _game(solved_permutation())

    game.process_move(Direction.DOWN)
    game.process_move(Direction.RIGHT)
    assert not game.has_won()

    game.process_move(Direction.LEFT)
    game.process_move(Direction.UP)
    assert game.has_won()
    assert _layout(game) == solved_permutation()


def test_exactly_one_blank_after_moves() -> None:
    game = _game(_blank_at(3, 3))
    for direction in (Direction.UP, Direction.LEFT, Direction.DOWN, Direction.RIGHT):
        game.process_move(direction)
        assert _layout(game).count(None) == 1


def test_move_without_blank_is_logged_no_op(caplog: pytest.LogCaptureFixture) -> None:
    game = _game([*range(1, 17)])
    before = _layout(game)

    with caplog.at_level(logging.DEBUG, logger="backend.engine.gameplay.game"):
        assert not game.process_move(Direction.UP)

    assert _layout(game) == before
    assert "no blank" in caplog.text
