[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minedigger"
version = "1.0.0"
description = "A terminal minesweeper game with difficulty levels, custom boards, an endless roulette mode and leaderboards"
requires-python = ">=3.10"
dependencies = []
keywords = ["minesweeper", "game", "terminal", "puzzle", "leaderboard"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minedigger = "minedigger.game:main"

[tool.hatch.build.targets.wheel]
packages = ["minedigger"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
