"""Paper rolls on a grid: find and remove rolls that a forklift can reach."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field

from dialpuzzles.lineio import read_lines

__all__ = ["Grid", "count_accessible", "remove_all", "solve", "main"]

DEBUG_FAST_IO = True
ROLL = "@"
MAX_NEIGHBORS = 4

_OFFSETS = ((-1, 0), (-1, 1), (0, 1), (1, 1), (1, 0), (1, -1), (0, -1), (-1, -1))


@dataclass
class Grid:
    """A rectangular grid of cells that either hold a roll or are empty."""

    width: int = 0
    height: int = 0
    cells: list[bool] = field(default_factory=list)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> Grid:
        """Build a grid; the first line fixes the width."""
        grid = cls()
        for line in lines:
            if grid.width == 0:
                grid.width = len(line)
            grid.height += 1
            grid.cells.extend(char == ROLL for char in line)
        return grid

    def coord_to_index(self, x: int, y: int) -> int:
        return x + self.width * y

    def index_to_coord(self, index: int) -> tuple[int, int]:
        y, x = divmod(index, self.width)
        return x, y

    def is_valid(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def neighbors(self, index: int) -> Iterator[int]:
        """Yield the indices of the up to eight cells around ``index``."""
        if not 0 <= index < self.width * self.height:
            return
        x, y = self.index_to_coord(index)
        for dx, dy in _OFFSETS:
            if self.is_valid(x + dx, y + dy):
                yield self.coord_to_index(x + dx, y + dy)

    def count_neighbors(self, index: int) -> int:
        """Count the rolls around ``index``."""
        return sum(1 for neighbor in self.neighbors(index) if self.cells[neighbor])


def count_accessible(grid: Grid) -> int:
    """Count rolls with fewer than four neighbouring rolls."""
    return sum(
        1
        for index, filled in enumerate(grid.cells)
        if filled and grid.count_neighbors(index) < MAX_NEIGHBORS
    )


def _sweep(grid: Grid) -> int:
    removed = 0
    for index, filled in enumerate(grid.cells):
        if filled and grid.count_neighbors(index) < MAX_NEIGHBORS:
            grid.cells[index] = False
            removed += 1
    return removed


def remove_all(grid: Grid) -> int:
    """Remove accessible rolls in place until none are left; return how many went."""
    total = 0
    while removed := _sweep(grid):
        total += removed
    return total


def solve(lines: Iterable[str]) -> tuple[int, int]:
    """Return (rolls accessible now, rolls removable in total)."""
    grid = Grid.from_lines(lines)
    accessible = count_accessible(grid)
    return accessible, remove_all(grid)


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the puzzle for the file named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        path = args[0]
        print(f"Using supplied data file: {path}")
    else:
        path = "./data.txt"
        print("Using default data file: ./data.txt")

    try:
        lines, _ = read_lines(path, DEBUG_FAST_IO)
    except OSError:
        print(f"Can't open file: {path}", file=sys.stderr)
        return 1

    grid = Grid.from_lines(lines)
    print(count_accessible(grid))
    print(remove_all(grid))
    return 0


if __name__ == "__main__":
    sys.exit(main())