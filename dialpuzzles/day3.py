"""Escalator batteries: pick the digits that give the largest joltage."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from dialpuzzles.lineio import read_lines

__all__ = ["Bank", "parse_bank", "solve", "main"]

SAMPLE_BANK_SIZE = 15
FULL_BANK_SIZE = 100
BANK_SIZE = SAMPLE_BANK_SIZE
DEBUG_FAST_IO = True


@dataclass
class Bank:
    """A bank of batteries, each holding a single-digit joltage."""

    capacity: int = BANK_SIZE
    batteries: list[int] = field(default_factory=list)

    def add_battery(self, joltage: int) -> bool:
        """Append a battery; return False if the bank is already full."""
        if len(self.batteries) >= self.capacity:
            return False
        self.batteries.append(joltage)
        return True

    def max_joltage(self, active_battery_count: int) -> int:
        """Largest number formed by picking batteries in order."""
        count = len(self.batteries)
        if active_battery_count < 0 or active_battery_count > count:
            raise ValueError(
                f"cannot activate {active_battery_count} of {count} batteries"
            )
        joltage = 0
        search_from = 0
        for remaining in range(active_battery_count - 1, -1, -1):
            search_until = count - 1 - remaining
            best = max(
                range(search_from, search_until + 1),
                key=self.batteries.__getitem__,
            )
            joltage = joltage * 10 + self.batteries[best]
            search_from = best + 1
        return joltage

    def __str__(self) -> str:
        return "".join(str(value) for value in self.batteries)


def parse_bank(line: str) -> Bank:
    """Build a bank from a line of digits; digits beyond its capacity are dropped."""
    bank = Bank()
    for char in line:
        if not "0" <= char <= "9":
            raise ValueError(f"invalid battery joltage {char!r} in {line!r}")
        bank.add_battery(ord(char) - ord("0"))
    return bank


def _banks(lines: Iterable[str]) -> list[Bank]:
    return [parse_bank(line) for line in lines if len(line) >= 2]


def solve(lines: Iterable[str]) -> tuple[int, int]:
    """Return the summed joltage using 2 and using 12 batteries per bank."""
    banks = _banks(lines)
    return (
        sum(bank.max_joltage(2) for bank in banks),
        sum(bank.max_joltage(12) for bank in banks),
    )


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

    joltage_one = 0
    joltage_two = 0
    for bank in _banks(lines):
        print(bank)
        joltage_one += bank.max_joltage(2)
        joltage_two += bank.max_joltage(12)
    print(joltage_one)
    print(joltage_two)
    return 0


if __name__ == "__main__":
    sys.exit(main())