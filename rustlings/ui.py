"""Coloured status lines printed while checking exercises."""

from __future__ import annotations

import os

from rich.console import Console
from rich.text import Text


def _no_emoji() -> bool:
    return "NO_EMOJI" in os.environ


def _emit(symbol: str, fallback: str, message: str, colour: str) -> None:
    marker = fallback if _no_emoji() else symbol
    console = Console(highlight=False, soft_wrap=True)
    console.print(Text(marker, style=colour), Text(message, style=colour))


def warn(message: str) -> None:
    """Print a warning line in red."""
    _emit("⚠️ ", "!", message, "red")


def success(message: str) -> None:
    """Print a success line in green."""
    _emit("✅", "✓", message, "green")