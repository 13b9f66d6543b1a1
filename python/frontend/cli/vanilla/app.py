"""Vanilla terminal frontend — print and ANSI escape codes only."""

from __future__ import annotations

import sys

from backend.engine.gameplay import Game
from backend.engine.gamestate import GameState
from frontend.cli import session

GREEN = "\033[32;1m"
YELLOW = "\033[33;1m"
CYAN = "\033[36;1m"
DIM = "\033[2m"
BOLD = "\033[1m"
RESET = "\033[0m"


def render_board(game: Game) -> str:
    """Return the board as a boxed grid; tiles already home are green."""
    size = game.width
    pad = len(str(size * size - 1))
    rule = "+" + ("-" * (pad + 2) + "+") * size

    lines = [rule]
    for r in range(1, size + 1):
        row = []
        for c in range(1, size + 1):
            tile = game.get(r, c)
            if tile is None:
                row.append(f"{DIM} {'·':>{pad}} {RESET}")
            elif tile == (r - 1) * size + c:
                row.append(f"{GREEN} {tile:>{pad}} {RESET}")
            else:
                row.append(f" {tile:>{pad}} ")
        lines += ["|" + "|".join(row) + "|", rule]
    return "\n".join(lines)


def _clock(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m}:{s:02d}" if m else f"{s}s"


def _stats(state: GameState) -> str:
    return (
        f"  Moves: {YELLOW}{state.moves}{RESET}  |  "
        f"Time: {YELLOW}{_clock(state.elapsed_time)}{RESET}"
    )


class AnsiScreen:
    """Redraws the whole terminal for every screen of the session."""

    def __init__(self, out=sys.stdout) -> None:
        self.out = out

    def _show(self, *lines: str, end: str = "\n") -> None:
        self.out.write("\033[2J\033[H" + "\n".join(lines) + end)
        self.out.flush()

    def menu(self) -> None:
        self._show(
            "",
            f"  {BOLD}G A M E   O F   F I F T E E N{RESET}",
            "",
            f"    {CYAN}1{RESET}  Play",
            f"    {DIM}Q{RESET}  Quit",
        )

    def game(self, state: GameState) -> None:
        # Stats go last without a newline so tick() can rewrite them.
        self._show(
            f"  {CYAN}Game of Fifteen{RESET}",
            "",
            render_board(state.game),
            "",
            f"  {CYAN}WASD{RESET}/{CYAN}Arrows{RESET}: move  |  "
            f"{CYAN}R{RESET}: restart  |  {CYAN}Q{RESET}: back",
            "",
            _stats(state),
            end="",
        )

    def tick(self, state: GameState) -> None:
        self.out.write(f"\r\033[K{_stats(state)}")
        self.out.flush()

    def won(self, state: GameState) -> None:
        self._show(
            f"  {GREEN}Game of Fifteen{RESET}",
            "",
            render_board(state.game),
            "",
            f"  {GREEN}★ Solved! ★{RESET}",
            _stats(state),
            "",
            f"  Press {CYAN}R{RESET} to play again, {CYAN}Q{RESET} to go back.",
        )

    def goodbye(self) -> None:
        self._show("  Goodbye!", "")


def run(seed: int | None = None) -> None:
    session.run(AnsiScreen(), seed)
