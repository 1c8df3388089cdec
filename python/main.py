#!/usr/bin/env python3
"""Breadth-first puzzle solver.

Usage::

    python main.py clock 12 1 3          # 12-hour clock, hand 1 -> 3
    python main.py water 4 5 3           # reach 4 with buckets of 5 and 3
    python main.py -f rich water 4 5 3   # Rich terminal output
    python main.py --log-level debug clock 12 1 3
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.puzzlesolver import Solver  # noqa: E402
from backend.engine.puzzlestate import Configuration  # noqa: E402
from backend.models import ClockConfig, WaterConfig  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


class LogLevel(StrEnum):
    debug = "debug"
    info = "info"
    warning = "warning"
    error = "error"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}

DEFAULT_FRONTEND = Frontend.vanilla
DEFAULT_LOG_LEVEL = LogLevel.warning
LOG_FORMAT = "%(name)s: %(message)s"


# -- helpers ------------------------------------------------------------------


def _configure_logging(level: LogLevel) -> None:
    """Route ``backend`` log records through a single Rich handler on stderr."""
    logger = logging.getLogger("backend")
    if logger.hasHandlers():
        logger.handlers.clear()

    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level.upper())


def _show(ctx: typer.Context, title: str, start: Configuration) -> None:
    result = Solver.solve(start)
    mod = importlib.import_module(_RUNNERS[ctx.obj["frontend"]])
    mod.run(title, result)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.callback()
def main(
    ctx: typer.Context,
    frontend: Frontend = typer.Option(
        DEFAULT_FRONTEND, "-f", "--frontend",
        help="How to print the solution.",
    ),
    log_level: LogLevel = typer.Option(
        DEFAULT_LOG_LEVEL, "--log-level",
        help="Verbosity of solver logging.",
    ),
) -> None:
    """Breadth-first puzzle solver."""
    _configure_logging(log_level)
    ctx.obj = {"frontend": frontend}


@app.command()
def clock(
    ctx: typer.Context,
    hours: int = typer.Argument(..., help="Number of hours on the clock."),
    start: int = typer.Argument(..., help="Starting hour."),
    finish: int = typer.Argument(..., help="Hour to reach."),
) -> None:
    """Turn a clock hand to the FINISH hour in as few moves as possible."""
    try:
        config = ClockConfig(hours=hours, hand=start, goal=finish)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    _show(ctx, f"Hours: {hours}, Start: {start}, End: {finish}", config)


@app.command()
def water(
    ctx: typer.Context,
    amount: int = typer.Argument(..., help="Amount of water to collect."),
    buckets: list[int] = typer.Argument(..., help="Capacity of each bucket."),
) -> None:
    """Fill, dump and pour buckets until one holds AMOUNT."""
    try:
        config = WaterConfig.initial(buckets, amount)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    _show(ctx, f"Amount: {amount}, Buckets: {buckets}", config)


if __name__ == "__main__":
    app()
