"""Interactive console game: menus, game modes and the play loop."""

from __future__ import annotations

import argparse
import enum
import os
import random
import subprocess
import sys
import time
from pathlib import Path
from typing import Callable, TextIO

from .assets import bomb_ascii, game_title, win_ascii
from .board import Board, valid_mine_count
from .rankings import INFINITE_FILE, Leaderboard, format_time

EASY = "easy"
MEDIUM = "medium"
HARD = "hard"
CUSTOM = "custom_game"
INFINITE = "infinite_roulette"

_LEVELS = {
    1: (5, 5, 10, EASY),
    2: (7, 7, 17, MEDIUM),
    3: (9, 12, 50, HARD),
}

_LEADERBOARD_FILES = {
    EASY: "easyLeaderboard.txt",
    MEDIUM: "mediumLeaderboard.txt",
    HARD: "hardLeaderboard.txt",
}

_LEADERBOARD_TITLES = {
    "easyLeaderboard.txt": "Easy Difficulty Leaderboard",
    "mediumLeaderboard.txt": "Medium Difficulty Leaderboard",
    "hardLeaderboard.txt": "Hard Difficulty Leaderboard",
    INFINITE_FILE: "Infinite Roulette LeaderBoard",
}

_INVALID_NUMBER = "Invalid Input! Please Enter A Positive Number...\n\n"
_INVALID_DIGIT = "Invalid Input! Please Enter A Single Positive Digit Number...\n\n"
_NO_OPTION = "\nOption doesn't exist!"

_LEGEND = (
    "\nLegend:\n"
    "'*' -> mines\n"
    "'?' -> unrevealed cell\n"
    "'F' -> flag\n"
)


class Outcome(enum.Enum):
    """How a single game ended."""

    QUIT = "quit"
    LOST = "lost"
    WON = "won"


def parse_number(text: str) -> int | None:
    """Parse a one- or two-digit non-negative number; None if the text is not one."""
    if not 1 <= len(text) <= 2:
        return None
    if not all(ch in "0123456789" for ch in text):
        return None
    return int(text)


def is_valid_name(name: str) -> bool:
    """Whether a player name is at most 10 characters of letters and spaces."""
    if len(name) > 10:
        return False
    return all(ch.isascii() and (ch.isalpha() or ch.isspace()) for ch in name)


def format_duration(seconds: int) -> str:
    """Format a play time as unpadded hours:minutes:seconds."""
    return format_time(seconds)


def roulette_size(rng) -> tuple[int, int, int]:
    """Pick a random board for infinite roulette: rows, columns and mines."""
    while True:
        rows = rng.randrange(9)
        cols = rng.randrange(20)
        if rows < 3 or cols < 3:
            continue
        mines = rng.randrange((rows * cols) // 2)
        if mines < 1:
            mines += 1
        return rows, cols, mines


def leaderboard_file(difficulty: str) -> str | None:
    """Leaderboard file of a difficulty level, or None for other modes."""
    return _LEADERBOARD_FILES.get(difficulty)


def _system_clear() -> None:
    command = "cls" if os.name == "nt" else "clear"
    try:
        subprocess.run(command, shell=True, check=False)
    except OSError:
        pass


class App:
    """The console application with its menus and game modes."""

    def __init__(
        self,
        input_fn: Callable[[], str] | None = None,
        stream: TextIO | None = None,
        data_dir: str | Path = "data",
        rng=None,
        clock: Callable[[], float] | None = None,
        clear: Callable[[], None] | None = None,
    ) -> None:
        self._input = input_fn if input_fn is not None else input
        self._out = stream if stream is not None else sys.stdout
        self._data_dir = Path(data_dir)
        self._rng = rng if rng is not None else random.Random()
        self._clock = clock if clock is not None else time.monotonic
        self._clear = clear if clear is not None else _system_clear

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _read(self, prompt: str) -> str:
        self._out.write(prompt)
        self._out.flush()
        return self._input()

    def _complain(self, message: str) -> None:
        self._write(message + "\n")
        self.pause()

    def pause(self) -> None:
        """Wait until the player presses Enter."""
        self._read("Press Enter to continue . . . ")

    def clear_screen(self) -> None:
        """Clear the console."""
        self._clear()

    def ask_coordinate(self, axis: str, limit: int) -> int:
        """Ask for a coordinate on the given axis until one below the limit is entered."""
        while True:
            value = parse_number(self._read(f"Enter the cell {axis}-coordinate: "))
            if value is not None and value < limit:
                return value
            if value is None:
                self._write(_INVALID_DIGIT)
            else:
                self._write(f"Invalid {axis}-coordinate!\n\n")

    def ask_move(self) -> int:
        """Ask for a move: 1 reveal, 2 flag or unflag, 0 quit."""
        while True:
            self._write(
                "Move Options \n"
                "[1] Reveal Tile\n"
                "[2] Flag/Unflag A Tile\n"
                "[0] Quit\n"
            )
            value = parse_number(self._read("MOVE: "))
            if value is None:
                self._write("Invalid Input! Please Enter A Positive Number...\n\n")
            elif value <= 2:
                return value
            else:
                self._write("Option doesn't exist!\n\n")

    def ask_player_name(self) -> str:
        """Ask for the player's name until it is acceptable."""
        while True:
            name = self._read("\nEnter your name: ")
            if len(name) > 10:
                self._write("Name should be less than 10 characters\n")
                continue
            if not is_valid_name(name):
                self._write("Name should only contains letters\n")
                continue
            return name

    def _time_played(self, start: float) -> int:
        elapsed = int(self._clock() - start)
        self._write(f"Time Played: {format_duration(elapsed)}\n")
        return elapsed

    def play(
        self, rows: int, cols: int, mines: int, mode: str = "", player_name: str = ""
    ) -> Outcome:
        """Play one game on a fresh board and report how it ended."""
        board = Board(rows, cols, mines)
        if not player_name and mode != CUSTOM:
            player_name = self.ask_player_name()

        start = self._clock()
        while True:
            self.clear_screen()
            self._write(board.render())
            self._write("\n")
            self._write(f"MOVES LEFT: {board.moves_left}\n")

            move = self.ask_move()
            if move == 0:
                return Outcome.QUIT

            if move == 2:
                self._write("\nFlag/Unflag At: \n")
                col = self.ask_coordinate("X", cols)
                row = self.ask_coordinate("Y", rows)
                if board.toggle_flag(row, col):
                    self._write(f"Flag At: x -> {col}, y -> {row}\n")
                else:
                    self._write(f"Unflag At: x -> {col}, y -> {row}\n")
                self.pause()
                continue

            self._write("\nReveal cell at: \n")
            col = self.ask_coordinate("X", cols)
            row = self.ask_coordinate("Y", rows)
            if not board.mines_planted:
                board.plant_mines(row, col, self._rng)
            if board.is_flagged(row, col):
                self._write("\nUnflag the tile before you can reveal it!\n")
                self.pause()
                continue

            board.reveal(row, col)

            if board.is_mine(row, col):
                self.clear_screen()
                self._time_played(start)
                bomb_ascii(self._out)
                self.pause()
                self.clear_screen()
                self._write("\nFINAL_BOARD:\n")
                self._write(board.render_final())
                self._write(f"You dig the cell at x -> {col} ,Y -> {row}\n")
                self._write("You Lose!, you detonated the bomb\n")
                self._write(_LEGEND)
                self._write(
                    "The number's (1-8) -> represents the number of bombs "
                    "adjacent to that cell/tile\n"
                )
                self.pause()
                return Outcome.LOST

            if board.moves_left == 0:
                self.clear_screen()
                elapsed = int(self._clock() - start)
                filename = leaderboard_file(mode)
                if filename is not None:
                    Leaderboard(filename, self._data_dir).append(player_name, elapsed)
                self._write(f"Time Played: {format_duration(elapsed)}\n")
                win_ascii(self._out)
                self.pause()
                self.clear_screen()
                self._write("\nFINAL_BOARD:\n")
                self._write(board.render_final())
                self._write("Eeeey...! You Win! Let's Go!\n")
                self._write(_LEGEND)
                self._write(
                    "The number's (1-8) -> represents the number of bombs "
                    "adjacent to that cell\n"
                )
                self.pause()
                return Outcome.WON

    def difficulty_levels(self) -> None:
        """Menu of the preset difficulty levels."""
        while True:
            self.clear_screen()
            self._write(
                "Pick The Level of Difficulty\n"
                "[1] Easy\n"
                "[2] Medium\n"
                "[3] Hard\n"
                "[0] Back to Menu\n"
            )
            choice = parse_number(self._read("CHOICE: "))
            if choice is None:
                self._complain(_INVALID_NUMBER)
            elif choice == 0:
                return
            elif choice in _LEVELS:
                rows, cols, mines, mode = _LEVELS[choice]
                self.play(rows, cols, mines, mode)
            else:
                self._complain(_NO_OPTION)

    def custom_game(self) -> Outcome:
        """Ask for the board size and mine count, then play a game on it."""
        header = "PLease Enter The Values of Rows, Columns and Mines For The Custom Game\n"
        rows_limits = "Rows: minimum = 3, maximum = 9\n"
        cols_limits = "Columns: minimum = 3, maximum = 20\n"

        while True:
            self.clear_screen()
            self._write(header + rows_limits + "\n")
            rows = parse_number(self._read("Enter ROWS: "))
            if rows is not None and 3 <= rows <= 9:
                break
            self._write("\nInvalid value for rows\n")
            self.pause()

        while True:
            self.clear_screen()
            self._write(header + rows_limits + cols_limits + "\n")
            cols = parse_number(self._read("Enter COLUMNS: "))
            if cols is not None and 3 <= cols <= 20:
                break
            self._write("\nInvalid value for columns\n")
            self.pause()

        while True:
            self.clear_screen()
            self._write(
                header
                + rows_limits
                + cols_limits
                + f"Mines: minimum = 1, maximum = {rows * cols - 1}\n\n"
            )
            words = self._read("Enter MINES: ").split()
            mines = parse_number(words[0] if words else "")
            if mines is not None and valid_mine_count(rows, cols, mines):
                break
            self._write("\nInvalid value for mines\n")
            self.pause()

        return self.play(rows, cols, mines, CUSTOM)

    def infinite_roulette(self) -> int:
        """Play random boards until the player loses or quits; record and return the streak."""
        player_name = self.ask_player_name()
        streak = 0
        while True:
            rows, cols, mines = roulette_size(self._rng)
            if self.play(rows, cols, mines, INFINITE, player_name) is not Outcome.WON:
                break
            streak += 1
        Leaderboard(INFINITE_FILE, self._data_dir).append(player_name, streak)
        return streak

    def game_modes(self) -> None:
        """Menu of the gameplay modes."""
        while True:
            self.clear_screen()
            game_title(self._out)
            self._write(
                "GAMEPLAY MODES:\n"
                "[1] Difficulty Levels\n"
                "[2] Custom Game\n"
                "[3] Infinite Roulette\n"
                "[0] Back\n"
            )
            choice = parse_number(self._read("CHOICE: "))
            if choice is None:
                self._complain(_INVALID_NUMBER)
            elif choice == 0:
                return
            elif choice == 1:
                self.difficulty_levels()
            elif choice == 2:
                self.custom_game()
            elif choice == 3:
                self.infinite_roulette()
            else:
                self._complain(_NO_OPTION)

    def show_leaderboard(self, filename: str) -> None:
        """Print one leaderboard under its title."""
        self.clear_screen()
        title = _LEADERBOARD_TITLES.get(filename, "")
        self._write(f"\n\t\t\t  {title}\n\n")
        Leaderboard(filename, self._data_dir).display(self._out)
        self.pause()

    def view_leaderboards(self) -> None:
        """Menu of the leaderboards."""
        files = {
            1: "easyLeaderboard.txt",
            2: "mediumLeaderboard.txt",
            3: "hardLeaderboard.txt",
            4: INFINITE_FILE,
        }
        while True:
            self.clear_screen()
            self._write(
                "Leaderboards: \n"
                "[1] Easy Leaderboard\n"
                "[2] Meduim Leaderboard\n"
                "[3] Hard Leaderboard\n"
                "[4] Infinite Roulette Leaderboard\n"
                "[0] Back\n"
            )
            choice = parse_number(self._read("CHOICE: "))
            if choice is None:
                self._complain(_INVALID_NUMBER)
            elif choice == 0:
                return
            elif choice in files:
                self.show_leaderboard(files[choice])
            else:
                self._complain("\nOption doesn't exist")

    def start_menu(self) -> None:
        """The top-level menu."""
        while True:
            self.clear_screen()
            game_title(self._out)
            self._write(
                "Start Menu: \n"
                "[1] Start Game\n"
                "[2] LeaderBoards\n"
                "[0] Exit\n"
            )
            choice = parse_number(self._read("CHOICE: "))
            if choice is None:
                self._complain(_INVALID_NUMBER)
            elif choice == 0:
                self._write("\nThank You For Checking The Game!!!\n")
                return
            elif choice == 1:
                self.game_modes()
            elif choice == 2:
                self.view_leaderboards()
            else:
                self._complain(_NO_OPTION)


def main(argv: list[str] | None = None) -> int:
    """Run the game from the start menu."""
    parser = argparse.ArgumentParser(
        prog="minedigger", description="Play Code Mine Digger in the terminal."
    )
    parser.add_argument(
        "--data-dir", default="data", help="directory holding the leaderboard files"
    )
    args = parser.parse_args(argv)
    try:
        App(data_dir=args.data_dir).start_menu()
    except (EOFError, KeyboardInterrupt):
        sys.stdout.write("\n")
    return 0