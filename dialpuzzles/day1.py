"""Safe dial: count landings on and passes over position zero."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from dialpuzzles.lineio import parse_int, read_lines

__all__ = ["floor_div_100", "count_zeros_passed", "solve", "main"]

DIAL_START_POSITION = 50
DIAL_SIZE = 100
DEBUG_FAST_IO = True

_DIRECTIONS = {"R": 1, "L": -1}


def floor_div_100(value: int) -> int:
    """Divide by 100, rounding towards negative infinity."""
    return value // DIAL_SIZE


def count_zeros_passed(dial_position: int, instruction: int) -> int:
    """Count how many times a rotation from ``dial_position`` touches zero."""
    if instruction > 0:
        return floor_div_100(dial_position + instruction) - floor_div_100(dial_position)
    if instruction < 0:
        return floor_div_100(dial_position - 1) - floor_div_100(
            dial_position + instruction - 1
        )
    return 0


def solve(lines: Iterable[str]) -> tuple[int, int]:
    """Return (rotations ending on zero, times zero was passed or reached)."""
    zero_stops = 0
    zeros_passed = 0
    position = DIAL_START_POSITION
    for line in lines:
        if len(line) < 2:
            continue
        multiplier = _DIRECTIONS.get(line[0])
        if multiplier is None:
            continue
        instruction = parse_int(line[1:]) * multiplier
        zeros_passed += count_zeros_passed(position, instruction)
        position = (position + instruction) % DIAL_SIZE
        if position == 0:
            zero_stops += 1
    return zero_stops, zeros_passed


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

    zero_stops, zeros_passed = solve(lines)
    print(f"zeros: {zero_stops}")
    print(f"wraps: {zeros_passed}")
    return 0


if __name__ == "__main__":
    sys.exit(main())