"""Leaderboard storage, ordering and table rendering."""

from __future__ import annotations

import itertools
import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, TextIO

SEPARATOR = "\t+--------------+-------------------------+--------------------+\n"
_SCORE = re.compile(r"\s*([+-]?\d+)")

DIFFICULTY_FILES = ("easyLeaderboard.txt", "mediumLeaderboard.txt", "hardLeaderboard.txt")
INFINITE_FILE = "infinite.txt"


@dataclass
class LeaderboardEntry:
    """One player's record: a completion time in seconds or a win streak."""

    player_name: str
    score: int


def format_time(seconds: int) -> str:
    """Format seconds as unpadded hours:minutes:seconds."""
    return f"{seconds // 3600}:{(seconds % 3600) // 60}:{seconds % 60}"


def selection_sort(entries: Iterable[LeaderboardEntry]) -> list[LeaderboardEntry]:
    """Return the entries ordered by descending score, using selection sort."""
    result = list(entries)
    for i in range(len(result) - 1):
        best = max(range(i, len(result)), key=lambda j: result[j].score)
        result[i], result[best] = result[best], result[i]
    return result


def bubble_sort(entries: Iterable[LeaderboardEntry]) -> list[LeaderboardEntry]:
    """Return the entries ordered by ascending score, using bubble sort."""
    result = list(entries)
    for end in range(len(result) - 1, 0, -1):
        for j in range(end):
            if result[j].score > result[j + 1].score:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def insertion_sort(entries: Iterable[LeaderboardEntry]) -> list[LeaderboardEntry]:
    """Return the entries ordered by ascending score, using insertion sort."""
    result: list[LeaderboardEntry] = []
    for entry in entries:
        pos = len(result)
        while pos > 0 and result[pos - 1].score > entry.score:
            pos -= 1
        result.insert(pos, entry)
    return result


def drop_adjacent_duplicates(entries: Iterable[LeaderboardEntry]) -> list[LeaderboardEntry]:
    """Keep only the first of each run of consecutive entries with the same name."""
    return [
        next(group)
        for _, group in itertools.groupby(entries, key=lambda e: e.player_name)
    ]


class Leaderboard:
    """A leaderboard kept as 'name,score' records in a file under a data directory."""

    def __init__(self, filename: str, data_dir: str | Path = "data") -> None:
        self.filename = filename
        self.path = Path(data_dir) / filename
        self.entries: list[LeaderboardEntry] = []

    def has_data(self) -> bool:
        """Whether the backing file exists and is not empty."""
        return self.path.is_file() and self.path.stat().st_size > 0

    def read(self) -> list[LeaderboardEntry]:
        """Load the records from the file, replacing those held in memory."""
        self.entries = []
        try:
            text = self.path.read_text()
        except FileNotFoundError:
            return self.entries
        pos = 0
        while True:
            comma = text.find(",", pos)
            if comma < 0:
                break
            match = _SCORE.match(text, comma + 1)
            if match is None:
                break
            self.entries.append(LeaderboardEntry(text[pos:comma], int(match.group(1))))
            # one separator character follows each record
            pos = match.end() + 1
        return self.entries

    def write(self) -> None:
        """Overwrite the file with the records held in memory, one per line."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            "".join(f"{e.player_name},{e.score}\n" for e in self.entries)
        )

    def append(self, name: str, score: int) -> None:
        """Add a record to the end of the file."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a") as handle:
            handle.write(f"{name},{score}")

    def ranked(self) -> list[LeaderboardEntry]:
        """The held records ordered for this board, with adjacent repeats removed."""
        if self.filename in ("easyLeaderboard.txt", "mediumLeaderboard.txt"):
            ordered = bubble_sort(self.entries)
        elif self.filename == "hardLeaderboard.txt":
            ordered = insertion_sort(self.entries)
        else:
            ordered = selection_sort(self.entries)
        return drop_adjacent_duplicates(ordered)

    @staticmethod
    def _render(column: str, rows: Iterable[tuple[str, str]]) -> str:
        parts = [
            SEPARATOR,
            "\t|     Rank     |",
            "       Player Name       |",
            column,
            SEPARATOR,
        ]
        for rank, (name, value) in enumerate(rows, start=1):
            parts.append(f"\t|      {rank}       |")
            parts.append(f"  {name:<12}           |")
            parts.append(f"  {value:<12}      |\n")
            parts.append(SEPARATOR)
        return "".join(parts)

    def render_difficulty_levels(self, entries: Iterable[LeaderboardEntry]) -> str:
        """Table of completion times."""
        return self._render(
            "        Time        |\n",
            ((e.player_name, format_time(e.score)) for e in entries),
        )

    def render_infinite_roulette(self, entries: Iterable[LeaderboardEntry]) -> str:
        """Table of win streaks."""
        return self._render(
            "     Win Streak     |\n",
            ((e.player_name, str(e.score)) for e in entries),
        )

    def display(self, stream: TextIO | None = None) -> bool:
        """Normalise the file, print the ranked table and report whether there was data."""
        out = sys.stdout if stream is None else stream
        if not self.has_data():
            out.write("The Leaderboard is empty!\n\n\n")
            return False
        self.read()
        self.write()
        entries = self.ranked()
        if self.filename in DIFFICULTY_FILES:
            out.write(self.render_difficulty_levels(entries))
        if self.filename == INFINITE_FILE:
            out.write(self.render_infinite_roulette(entries))
        out.write("\n\n")
        return True