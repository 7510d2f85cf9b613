"""Reading puzzle input files as lines or delimited tokens."""

from __future__ import annotations

import re
import sys
import time
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

__all__ = [
    "ReadStats",
    "iter_lines",
    "iter_tokens",
    "read_lines",
    "read_delimited",
    "read_csv",
    "parse_int",
]

_LINE_BREAK = re.compile(r"[\r\n]")


@dataclass
class ReadStats:
    """Statistics gathered while reading an input file."""

    file_size: int = 0
    line_count: int = 0
    parse_time_ms: float = 0.0


def iter_lines(text: str) -> Iterator[str]:
    """Yield the non-empty lines of ``text``, accepting LF, CR and CRLF breaks."""
    return (line for line in _LINE_BREAK.split(text) if line)


def iter_tokens(text: str, delimiter: str) -> Iterator[str]:
    """Yield non-empty tokens separated by ``delimiter`` or any line break."""
    if len(delimiter) != 1:
        raise ValueError(f"delimiter must be a single character, got {delimiter!r}")
    pattern = re.compile(f"[{re.escape(delimiter)}\r\n]")
    return (token for token in pattern.split(text) if token)


def _read(
    path: str | Path,
    splitter: Callable[[str], Iterable[str]],
    unit: str,
    debug: bool,
) -> tuple[list[str], ReadStats]:
    start = time.perf_counter()
    try:
        data = Path(path).read_bytes()
    except OSError:
        if debug:
            print(f"[fast_io] Failed to open: {path}", file=sys.stderr)
        raise

    stats = ReadStats(file_size=len(data))
    if not data:
        if debug:
            print("[fast_io] Empty file")
        return [], stats

    items = list(splitter(data.decode("utf-8", errors="surrogateescape")))
    stats.line_count = len(items)
    stats.parse_time_ms = (time.perf_counter() - start) * 1000.0

    if debug:
        print(f"[fast_io] File: {path}")
        print(f"[fast_io] Size: {stats.file_size} bytes")
        print(f"[fast_io] {unit}: {stats.line_count}")
        print(f"[fast_io] Time: {stats.parse_time_ms} ms")
    return items, stats


def read_lines(path: str | Path, debug: bool = False) -> tuple[list[str], ReadStats]:
    """Read the non-empty lines of a file.

    Raises ``OSError`` if the file cannot be read.
    """
    return _read(path, iter_lines, "Lines", debug)


def read_delimited(
    path: str | Path, delimiter: str, debug: bool = False
) -> tuple[list[str], ReadStats]:
    """Read the non-empty tokens of a file split on ``delimiter`` and line breaks."""
    return _read(path, lambda text: iter_tokens(text, delimiter), "Tokens", debug)


def read_csv(path: str | Path, debug: bool = False) -> tuple[list[str], ReadStats]:
    """Read comma separated tokens from a file."""
    return read_delimited(path, ",", debug)


def parse_int(text: str) -> int:
    """Build an integer from the decimal digits in ``text``, ignoring anything else."""
    value = 0
    for char in text:
        if "0" <= char <= "9":
            value = value * 10 + (ord(char) - ord("0"))
    return value