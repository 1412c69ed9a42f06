"""ASCII art banners and a console loading spinner."""

from __future__ import annotations

import sys
import time
from typing import TextIO

BOMB_ART = (
    "\n\n"
    "\t\t           *          \n"
    "\t\t          /|          \n"
    "\t\t         / |          \n"
    "\t\t         | |          \n"
    "\t\t       *  *  *        \n"
    "\t\t    *           *     \n"
    "\t\t  *               *   \n"
    "\t\t *      BOOM!      *  \n"
    "\t\t *    GAME OVER!   *  \n"
    "\t\t  *               *   \n"
    "\t\t    *           *     \n"
    "\t\t       *  *  *        \n"
    "\n\n"
)

WIN_ART = (
    "\n\n"
    "  **    **  *******   **     **     **     **  ******  ***    **   *****  \n"
    "   **  **  **     **  **     **     ** *** **    **    ****   **    ***   \n"
    "    ****   **     **  **     **     **** ****    **    ** **  **     *    \n"
    "     **    **     **  **     **     ***   ***    **    **  ** **          \n"
    "     **     *******    *******      **     **  ******  **   ****     *    \n"
    "\n\n"
)

TITLE_ART = (
    "\n\n"
    "        ________     ______ ______       ________           \n"
    "       |\\   ____\\   |\\   _ \\  _   \\     |\\   ___ \\          \n"
    "       \\ \\  \\___|   \\ \\  \\\\ __\\ \\  \\    \\ \\  \\_|\\ \\         \n"
    "        \\ \\  \\       \\ \\  \\\\|__| \\  \\    \\ \\  \\ \\\\ \\        \n"
    "         \\ \\  \\_____  \\ \\  \\\\   \\ \\  \\    \\ \\  \\_\\\\ \\       \n"
    "          \\ \\_______\\  \\ \\__\\\\   \\ \\__\\    \\ \\_______\\      \n"
    "           \\|_______|   \\|__|/    \\|__|     \\|_______|      \n"
    '\n                     "CODE MINE DIGGER"                    \n'
    "\n\n"
)

SPINNER_FRAMES = ("|", "\\", "-", "/")


def _out(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def bomb_ascii(stream: TextIO | None = None) -> None:
    """Print the game-over explosion."""
    _out(stream).write(BOMB_ART)


def win_ascii(stream: TextIO | None = None) -> None:
    """Print the victory banner."""
    _out(stream).write(WIN_ART)


def game_title(stream: TextIO | None = None) -> None:
    """Print the game title."""
    _out(stream).write(TITLE_ART)


def loading_animation(
    stream: TextIO | None = None, iterations: int = 20, delay: float = 0.2
) -> None:
    """Show a spinning 'Loading' indicator on a single console line."""
    out = _out(stream)
    for step in range(iterations):
        out.write(f"Loading {SPINNER_FRAMES[step % len(SPINNER_FRAMES)]}\r")
        out.flush()
        if delay > 0:
            time.sleep(delay)