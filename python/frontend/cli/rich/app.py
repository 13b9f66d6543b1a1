"""Rich terminal frontend — the board as a table inside panels."""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import Game
from backend.engine.gamestate import GameState
from frontend.cli import session


def render_board(game: Game) -> Table:
    """Return the puzzle grid as a Rich table; tiles already home are green."""
    size = game.width
    pad = len(str(size * size - 1))
    table = Table(
        show_header=False,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(size):
        table.add_column(width=pad + 1, justify="center")

    for r in range(1, size + 1):
        row = []
        for c in range(1, size + 1):
            tile = game.get(r, c)
            if tile is None:
                row.append(Text("·", style="dim"))
            elif tile == (r - 1) * size + c:
                row.append(Text(str(tile), style="bold green"))
            else:
                row.append(Text(str(tile), style="bold white"))
        table.add_row(*row)
    return table


def _stats(state: GameState) -> Text:
    m, s = divmod(int(state.elapsed_time), 60)
    return Text.assemble(
        ("Moves: ", "dim"),
        (str(state.moves), "bold yellow"),
        ("    Time: ", "dim"),
        (f"{m:02d}:{s:02d}", "bold yellow"),
    )


def _keys_hint(*pairs: tuple[str, str]) -> Text:
    hint = Text()
    for key, label in pairs:
        hint.append(f"  {key}", style="bold cyan")
        hint.append(f" {label} ", style="dim")
    return hint


class RichScreen:
    """Draws each session screen as a centred panel."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def _show(self, body: RenderableType, title: str, style: str) -> None:
        self.console.clear()
        self.console.print()
        self.console.print(
            Align.center(
                Panel(body, title=f"[{style}]{title}[/]", border_style=style, padding=(1, 2))
            )
        )

    def menu(self) -> None:
        self._show(
            _keys_hint(("1", "play"), ("Q", "quit")),
            "G A M E   O F   F I F T E E N",
            "bright_blue",
        )

    def game(self, state: GameState) -> None:
        self._show(
            Group(
                Align.center(render_board(state.game)),
                Text(""),
                Align.center(_stats(state)),
                Align.center(
                    _keys_hint(("↑↓←→/WASD", "move"), ("R", "restart"), ("Q", "back"))
                ),
            ),
            "Game of Fifteen",
            "bright_blue",
        )

    def tick(self, state: GameState) -> None:
        self.game(state)

    def won(self, state: GameState) -> None:
        self._show(
            Group(
                Align.center(render_board(state.game)),
                Align.center(Text("\n★ Solved! ★\n", style="bold green")),
                Align.center(_stats(state)),
                Align.center(_keys_hint(("R", "play again"), ("Q", "back"))),
            ),
            "Game of Fifteen",
            "bold green",
        )

    def goodbye(self) -> None:
        self.console.clear()
        self.console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))


def run(seed: int | None = None) -> None:
    session.run(RichScreen(), seed)
