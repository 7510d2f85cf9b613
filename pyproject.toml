[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dialpuzzles"
version = "0.1.0"
description = "Solvers for five daily input-file puzzles: dial rotations, repeated-pattern IDs, battery banks, paper-roll grids and fresh ID ranges."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "solver", "grid", "ranges", "input-files"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
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
dialpuzzles-day1 = "dialpuzzles.day1:main"
dialpuzzles-day2 = "dialpuzzles.day2:main"
dialpuzzles-day3 = "dialpuzzles.day3:main"
dialpuzzles-day4 = "dialpuzzles.day4:main"
dialpuzzles-day5 = "dialpuzzles.day5:main"

[tool.hatch.build.targets.wheel]
packages = ["dialpuzzles"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
