"""The minefield: mine placement, flood reveal, flags and board rendering."""

from __future__ import annotations

import random
from typing import Iterator, Protocol

UNREVEALED = "?"
FLAG = "F"
MINE = "*"
EMPTY = " "

_NEIGHBOUR_OFFSETS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


def valid_mine_count(rows: int, cols: int, mines: int) -> bool:
    """Whether a board of this size can hold this many mines with a free cell left."""
    return rows * cols > mines > 0


class Board:
    """A minesweeper board with the player's view and the hidden mine layout."""

    def __init__(self, rows: int, cols: int, mines: int) -> None:
        if rows < 1 or cols < 1:
            raise ValueError(f"board size must be positive, got {rows}x{cols}")
        if not valid_mine_count(rows, cols, mines):
            raise ValueError(
                f"mine count {mines} is invalid for a {rows}x{cols} board"
            )
        self.rows = rows
        self.cols = cols
        self.mines = mines
        self.cells: list[list[str]] = [[UNREVEALED] * cols for _ in range(rows)]
        self.mine_positions: set[tuple[int, int]] = set()
        self.moves_left = rows * cols - mines

    @property
    def mines_planted(self) -> bool:
        """Whether the mines have been laid."""
        return bool(self.mine_positions)

    def in_bounds(self, row: int, col: int) -> bool:
        """Whether the coordinates lie on the board."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def _check(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise IndexError(f"cell ({row}, {col}) is outside the board")

    def _neighbours(self, row: int, col: int) -> Iterator[tuple[int, int]]:
        for dr, dc in _NEIGHBOUR_OFFSETS:
            r, c = row + dr, col + dc
            if self.in_bounds(r, c):
                yield r, c

    def plant_mines(
        self, safe_row: int, safe_col: int, rng: _RandomSource | None = None
    ) -> None:
        """Lay the mines at random, never on the given safe cell."""
        self._check(safe_row, safe_col)
        source = rng if rng is not None else random.Random()
        while len(self.mine_positions) < self.mines:
            row = source.randrange(self.rows)
            col = source.randrange(self.cols)
            if (row, col) == (safe_row, safe_col):
                continue
            self.mine_positions.add((row, col))

    def is_mine(self, row: int, col: int) -> bool:
        """Whether a mine lies under the cell."""
        self._check(row, col)
        return (row, col) in self.mine_positions

    def adjacent_mines(self, row: int, col: int) -> int:
        """Number of mines in the eight surrounding cells."""
        self._check(row, col)
        return sum(1 for pos in self._neighbours(row, col) if pos in self.mine_positions)

    def is_flagged(self, row: int, col: int) -> bool:
        """Whether the player has flagged the cell."""
        self._check(row, col)
        return self.cells[row][col] == FLAG

    def toggle_flag(self, row: int, col: int) -> bool:
        """Flag or unflag the cell; return whether it is flagged afterwards."""
        self._check(row, col)
        if self.cells[row][col] == FLAG:
            self.cells[row][col] = UNREVEALED
            return False
        self.cells[row][col] = FLAG
        return True

    def _open(self, row: int, col: int) -> int | None:
        """Reveal one cell; return its mine count, or None if already revealed."""
        if self.cells[row][col] == FLAG:
            self.cells[row][col] = UNREVEALED
        if self.cells[row][col] != UNREVEALED:
            return None
        count = self.adjacent_mines(row, col)
        self.cells[row][col] = str(count) if count else EMPTY
        self.moves_left -= 1
        return count

    def reveal(self, row: int, col: int) -> None:
        """Reveal the cell, spreading over every neighbour of cells with no adjacent mines.

        Flags met while spreading are cleared and their cells revealed.
        """
        self._check(row, col)
        pending = [(row, col)]
        while pending:
            r, c = pending.pop()
            count = self._open(r, c)
            if count != 0:
                continue
            pending.extend(
                (nr, nc)
                for nr, nc in reversed(list(self._neighbours(r, c)))
                if self.cells[nr][nc] in (FLAG, UNREVEALED)
            )

    def _render_with(self, symbol) -> str:
        lines = ["\t   " + "".join(f"{i:<6}" for i in range(self.cols)) + "-> X"]
        lines.append(f"{'Y ':>8}" + " _____" * self.cols)
        for row in range(self.rows):
            lines.append("\t|" + "     |" * self.cols)
            lines.append(
                f"      {row} |"
                + "".join(f"  {symbol(row, col)}  |" for col in range(self.cols))
            )
            lines.append("\t|" + "_____|" * self.cols)
        return "\n".join(lines) + "\n"

    def render(self) -> str:
        """The board as the player sees it."""
        return self._render_with(lambda r, c: self.cells[r][c])

    def render_final(self) -> str:
        """The board with every mine shown."""
        return self._render_with(
            lambda r, c: MINE if (r, c) in self.mine_positions else self.cells[r][c]
        )