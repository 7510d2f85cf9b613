"""Gift shop: find product ids made of a repeated digit pattern."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from dialpuzzles.lineio import read_csv

__all__ = ["IntRange", "is_valid_id", "parse_range", "invalid_ids", "solve", "main"]

DEBUG_FAST_IO = True


@dataclass(frozen=True)
class IntRange:
    """An inclusive range of integers, walked downwards when first > last."""

    first: int
    last: int

    def __iter__(self) -> Iterator[int]:
        step = 1 if self.first <= self.last else -1
        return iter(range(self.first, self.last + step, step))

    def __len__(self) -> int:
        return abs(self.last - self.first) + 1

    def __str__(self) -> str:
        return f"{self.first}-{self.last}"


def is_valid_id(id_: int) -> bool:
    """Return False if the id's digits are one pattern repeated at least twice."""
    digits = str(id_) if id_ > 0 else ""
    length = len(digits)
    for pattern_len in range(1, length // 2 + 1):
        if length % pattern_len:
            continue
        if digits[:pattern_len] * (length // pattern_len) == digits:
            return False
    return True


def parse_range(text: str) -> IntRange:
    """Parse ``"first-last"`` into an :class:`IntRange`."""
    first, _, last = text.partition("-")
    try:
        return IntRange(int(first) if first.strip() else 0, int(last) if last.strip() else 0)
    except ValueError as exc:
        raise ValueError(f"invalid range: {text!r}") from exc


def invalid_ids(tokens: Iterable[str]) -> Iterator[tuple[int, IntRange]]:
    """Yield each invalid id together with the range it came from."""
    for token in tokens:
        int_range = parse_range(token)
        for id_ in int_range:
            if not is_valid_id(id_):
                yield id_, int_range


def solve(tokens: Iterable[str]) -> int:
    """Sum the invalid ids in all ranges."""
    return sum(id_ for id_, _ in invalid_ids(tokens))


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
        tokens, _ = read_csv(path, DEBUG_FAST_IO)
    except OSError:
        print(f"Can't open file: {path}", file=sys.stderr)
        return 1

    total = 0
    for id_, int_range in invalid_ids(tokens):
        print(f"invalid index: {id_} from range: {int_range}")
        total += id_
    print(total)
    return 0


if __name__ == "__main__":
    sys.exit(main())