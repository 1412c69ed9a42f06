# minedigger

Minesweeper in your terminal, titled "Code Mine Digger".

## Installing

```
pip install .
```

## Playing

```
minedigger
minedigger --data-dir path/to/scores
```

`--data-dir` sets the directory that holds the leaderboard files. The default
is `data`, relative to the current directory. The directory is created the
first time a score is recorded.

The start menu lets you start a game, view the leaderboards or exit. You type
every menu choice and coordinate as a number of one or two digits. The screen
is cleared between steps with the system `clear` command (`cls` on Windows).
Where the game pauses, press Enter to continue. Ctrl+C or end of input leaves
the game.

### Game modes

- **Difficulty Levels**: Easy is a 5×5 board with 10 mines. Medium is 7×7 with
  17 mines. Hard is 9 rows by 12 columns with 50 mines. A win records your
  completion time in seconds on that level's leaderboard.
- **Custom Game**: you choose 3–9 rows, 3–20 columns and between 1 and
  rows×columns−1 mines. Custom games are not ranked, and you are not asked
  for a name.
- **Infinite Roulette**: you enter your name once and then play randomly
  sized boards one after another. The run ends when you hit a mine or quit.
  The number of boards you won is recorded on the roulette leaderboard.

### Moves

On each turn you can reveal a tile, flag or unflag a tile, or quit. X is the
column and Y is the row.

- Your first reveal is always safe, because the mines are placed only after it.
- Revealing a tile with no neighbouring mines also opens the tiles around it.
  This spreads on through any further empty tiles and clears any flags it
  reaches.
- You cannot reveal a flagged tile until you unflag it.

The game ends when you reveal a mine or when every safe tile is open. The
final board shows every mine.

Board legend:

- `?` is an unrevealed tile.
- `F` is a flag.
- `*` is a mine, shown on the final board.
- A digit gives the number of adjacent mines.
- A blank tile has no adjacent mines.

### Names

A player name may contain only ASCII letters and spaces, and no more than 10
characters.

## Leaderboards

Scores are kept in these files under the data directory:

- `easyLeaderboard.txt`
- `mediumLeaderboard.txt`
- `hardLeaderboard.txt`
- `infinite.txt`

Each result is appended as a `name,score` record. When you display a
leaderboard, its file is read and then rewritten with one `name,score` record
per line. If the file is missing or empty, the game prints "The Leaderboard is
empty!".

Ranking:

- Difficulty boards are ranked by shortest time, shown as `h:m:s`.
- The roulette board is ranked by longest streak.
- When the same name appears in consecutive entries after sorting, only the
  first of those entries is shown.

## Using it as a library

```python
import random
from minedigger.board import Board
from minedigger.rankings import Leaderboard

board = Board(5, 5, 10)
board.plant_mines(0, 0, random.Random(1))
board.reveal(0, 0)
print(board.render())
print(board.moves_left)

scores = Leaderboard("easyLeaderboard.txt", "data")
scores.append("Ada", 42)
scores.display()
```

### Modules

- `minedigger.board`:
  - `Board(rows, cols, mines)` holds the player's view and the mine layout.
    Its methods are `plant_mines`, `reveal`, `toggle_flag`, `is_flagged`,
    `is_mine`, `adjacent_mines`, `render` and `render_final`.
  - `valid_mine_count(rows, cols, mines)` reports whether a mine count is
    allowed for a board of that size.
- `minedigger.rankings`:
  - `Leaderboard(filename, data_dir)` gives the methods `has_data`, `read`,
    `write`, `append`, `ranked` and `display`.
  - The sorting helpers are `bubble_sort`, `insertion_sort` and
    `selection_sort`. Each returns a new list.
  - `drop_adjacent_duplicates` removes consecutive entries with the same name.
  - `format_time` formats a number of seconds as `h:m:s`.
- `minedigger.game`:
  - `App` is the menu-driven game. It takes an input function, an output
    stream, a data directory, a random source, a clock and a screen-clearing
    function, so it can be driven without a terminal.
  - `App.play(rows, cols, mines, mode, player_name)` plays one game and
    returns an `Outcome` (`QUIT`, `LOST` or `WON`).
  - `main(argv)` is the command entry point.
- `minedigger.assets`: the ASCII banners `game_title`, `bomb_ascii` and
  `win_ascii`, and a `loading_animation` spinner.

## Running the tests

```
pip install .[test]
pytest
```