"""The terminal game loop shared by every frontend.

A frontend only supplies a ``Screen``; this module owns the menu, the
read-board / check-win / move cycle, restarts, and the win prompt.
"""

from __future__ import annotations

import random
from collections.abc import Callable
from functools import partial
from typing import Protocol

from backend.engine.gamegenerator import RandomGameInitializer
from backend.engine.gameplay import new_game_of_fifteen
from backend.engine.gamestate import GameState
from frontend.cli.input_handler import read_key, to_direction

# Seconds between clock repaints while waiting for a key.
TICK_SECONDS = 0.5

KeyReader = Callable[..., "str | None"]


class Screen(Protocol):
    def menu(self) -> None: ...

    def game(self, state: GameState) -> None: ...

    def tick(self, state: GameState) -> None: ...

    def won(self, state: GameState) -> None: ...

    def goodbye(self) -> None: ...


def new_session(rng: random.Random) -> GameState:
    game = new_game_of_fifteen(RandomGameInitializer(rng))
    game.initialize()
    return GameState(game)


def _next_action(screen: Screen, state: GameState, keys: KeyReader) -> str:
    while True:
        key = keys(TICK_SECONDS)
        if key is not None:
            return key
        screen.tick(state)


def play(
    screen: Screen,
    start: Callable[[], GameState],
    keys: KeyReader = read_key,
) -> None:
    """Run games from *start* until the player quits back to the menu."""
    state = start()
    while True:
        while not state.is_solved:
            screen.game(state)
            action = _next_action(screen, state, keys)

            direction = to_direction(action)
            if direction is not None:
                state.move(direction)
            elif action == "restart":
                state = start()
            elif action == "quit":
                return

        state.pause()
        screen.won(state)
        action = keys()
        while action not in ("restart", "quit"):
            action = keys()
        if action == "quit":
            return
        state = start()


def run(screen: Screen, seed: int | None = None, keys: KeyReader = read_key) -> None:
    """Show the menu on *screen* until the player quits."""
    start = partial(new_session, random.Random(seed))
    while True:
        screen.menu()
        action = keys()
        if action == "quit":
            screen.goodbye()
            return
        if action in ("1", "enter"):
            play(screen, start, keys)
