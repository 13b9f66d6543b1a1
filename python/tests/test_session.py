"""The shared terminal loop, driven by scripted keys and a recording screen."""

from __future__ import annotations

import random
from collections.abc import Iterable

from backend.engine.gamegenerator import FixedGameInitializer
from backend.engine.gameplay import GameOfFifteen
from backend.engine.gamestate import GameState
from frontend.cli import session

# Solved once tile 15 slides left into the blank.
_ONE_MOVE_LEFT = [*range(1, 15), None, 15]


# -- helpers ------------------------------------------------------------------


class RecordingScreen:
    def __init__(self) -> None:
        self.events: list[str] = []
        self.states: list[GameState] = []

    def menu(self) -> None:
        self.events.append("menu")

    def game(self, state: GameState) -> None:
        self.events.append("game")
        self.states.append(state)

    def tick(self, state: GameState) -> None:
        self.events.append("tick")

    def won(self, state: GameState) -> None:
        self.events.append("won")
        self.states.append(state)

    def goodbye(self) -> None:
        self.events.append("goodbye")


def _keys(script: Iterable[str | None]):
    pending = iter(script)

    def read(timeout: float | None = None) -> str | None:
        return next(pending)

    return read


def _start_near_solved() -> GameState:
    game = GameOfFifteen(FixedGameInitializer(_ONE_MOVE_LEFT))
    game.initialize()
    return GameState(game)


# -- tests --------------------------------------------------------------------


def test_new_session_is_initialized_and_fresh() -> None:
    state = session.new_session(random.Random(5))
    assert state.moves == 0
    assert state.game.get(4, 4) is None


def test_winning_move_shows_win_screen() -> None:
    screen = RecordingScreen()
    session.play(screen, _start_near_solved, _keys(["left", "quit"]))

    assert screen.events == ["game", "won"]
    assert screen.states[-1].moves == 1
    assert screen.states[-1].is_solved


def test_idle_wait_ticks_the_clock() -> None:
    screen = RecordingScreen()
    session.play(screen, _start_near_solved, _keys([None, None, "quit"]))

    assert screen.events == ["game", "tick", "tick"]


def test_blocked_and_unknown_keys_keep_playing() -> None:
    screen = RecordingScreen()
    session.play(screen, _start_near_solved, _keys(["up", "x", "quit"]))

    assert screen.events == ["game", "game", "game"]
    assert screen.states[-1].moves == 0


def test_restart_starts_a_new_game() -> None:
    screen = RecordingScreen()
    session.play(screen, _start_near_solved, _keys(["restart", "quit"]))

    assert screen.states[0] is not screen.states[1]


def test_play_again_after_win() -> None:
    screen = RecordingScreen()
    session.play(
        screen, _start_near_solved, _keys(["left", "x", "restart", "quit"])
    )

    assert screen.events == ["game", "won", "game"]
    assert screen.states[-1].moves == 0


def test_menu_play_then_quit() -> None:
    screen = RecordingScreen()
    session.run(screen, seed=1, keys=_keys(["1", "quit", "quit"]))

    assert screen.events == ["menu", "game", "menu", "goodbye"]
