"""Cafeteria inventory: check ingredient ids against fresh id ranges."""

from __future__ import annotations

import sys
from bisect import bisect_right
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from operator import attrgetter

from dialpuzzles.lineio import parse_int, read_lines

__all__ = [
    "IdRange",
    "parse_pair",
    "is_blank_line",
    "merge_ranges",
    "is_fresh",
    "solve",
    "main",
]

DEBUG_FAST_IO = True


@dataclass(frozen=True, order=True)
class IdRange:
    """An inclusive range of ids."""

    first: int = 0
    last: int = 0

    def contains(self, id_: int) -> bool:
        return self.first <= id_ <= self.last

    def size(self) -> int:
        return self.last - self.first + 1


def parse_pair(text: str, delimiter: str = "-") -> tuple[int, int]:
    """Parse ``"first<delimiter>second"`` into two integers."""
    first, _, second = text.partition(delimiter)
    try:
        return (
            int(first) if first.strip() else 0,
            int(second) if second.strip() else 0,
        )
    except ValueError as exc:
        raise ValueError(f"invalid pair: {text!r}") from exc


def is_blank_line(line: str) -> bool:
    """True for lines made only of spaces and tabs, or empty."""
    return all(char in " \t" for char in line)


def merge_ranges(ranges: Iterable[IdRange]) -> list[IdRange]:
    """Sort ranges and merge those that overlap or touch."""
    merged: list[IdRange] = []
    for current in sorted(ranges, key=attrgetter("first")):
        if not merged or merged[-1].last + 1 < current.first:
            merged.append(current)
        else:
            previous = merged[-1]
            merged[-1] = IdRange(previous.first, max(previous.last, current.last))
    return merged


def is_fresh(ranges: Sequence[IdRange], id_: int) -> bool:
    """Check ``id_`` against ranges already sorted and merged."""
    position = bisect_right(ranges, id_, key=attrgetter("first"))
    return position > 0 and id_ <= ranges[position - 1].last


def _parse(lines: Iterable[str]) -> tuple[list[IdRange], list[int]]:
    ranges: list[IdRange] = []
    ids: list[int] = []
    for line in lines:
        if "-" in line:
            ranges.append(IdRange(*parse_pair(line)))
        else:
            ids.append(parse_int(line))
    return ranges, ids


def _count(ranges: list[IdRange], ids: list[int]) -> tuple[int, int]:
    fresh_count = sum(1 for id_ in ids if is_fresh(ranges, id_))
    total = sum(id_range.size() for id_range in ranges)
    return fresh_count, total


def solve(lines: Iterable[str]) -> tuple[int, int]:
    """Return (fresh ids available, ids covered by the fresh ranges)."""
    ranges, ids = _parse(lines)
    return _count(merge_ranges(ranges), ids)


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

    ranges, ids = _parse(lines)
    print(f"fresh id ranges (pre merge): {len(ranges)}")
    ranges = merge_ranges(ranges)
    print(f"fresh id ranges (post merge): {len(ranges)}")
    print(f"number of active ids: {len(ids)}")

    fresh_count, total = _count(ranges, ids)
    print(f"fresh ingredients :{fresh_count}")
    print(f"total range size: {total}")
    return 0


if __name__ == "__main__":
    sys.exit(main())