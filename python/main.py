#!/usr/bin/env python3
"""Play the Game of Fifteen in a terminal.

Usage::

    python main.py                  # plain ANSI screen
    python main.py -f rich          # Rich panels
    python main.py --seed 7         # same shuffles every run
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

# Allow ``python main.py`` from a checkout without installing.
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


class LogLevel(StrEnum):
    debug = "DEBUG"
    info = "INFO"
    warning = "WARNING"
    error = "ERROR"


app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend", help="Screen to draw the game on."
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed", help="Seed for the tile shuffle."
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.warning, "--log-level", help="Logging threshold."
    ),
) -> None:
    """Game of Fifteen."""
    logging.basicConfig(
        level=log_level.value,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )
    logging.getLogger(__name__).info("Starting %s frontend", frontend.value)

    module = importlib.import_module(f"frontend.cli.{frontend.value}.app")
    module.run(seed=seed)


if __name__ == "__main__":
    app()
