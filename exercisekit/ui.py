"""Coloured status messages for the terminal."""

from __future__ import annotations

import os

from rich.console import Console
from rich.text import Text


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _emit(symbol: str, message: str, colour: str) -> None:
    line = Text(f"{symbol} {message}", style=colour)
    Console(highlight=False, soft_wrap=True).print(line)


def warn(message: str) -> None:
    """Print a warning line in red."""
    _emit("!" if no_emoji() else "⚠️ ", message, "red")


def success(message: str) -> None:
    """Print a success line in green."""
    _emit("✓" if no_emoji() else "✅", message, "green")