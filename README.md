# dialpuzzles

This package has solvers for five daily puzzles. Each solver reads a plain-text input file and prints its answers. If you give no argument, a solver reads `./data.txt` from the current directory. Otherwise it reads the file you name.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install .[test]
```

## Commands

| Command | Input | Output |
|---|---|---|
| `dialpuzzles-day1 [FILE]` | One rotation per line, such as `R12` or `L7`. The dial has 100 positions and starts at 50. | `zeros: N` is the number of rotations that end on zero. `wraps: N` is the number of times zero is reached or passed. |
| `dialpuzzles-day2 [FILE]` | Ranges such as `11-22,95-115`, separated by commas or line breaks | One `invalid index: ... from range: ...` line for each ID whose digits are one pattern repeated, then the sum of those IDs |
| `dialpuzzles-day3 [FILE]` | One bank of digit batteries per line | Each bank as it was read, then the summed largest joltage using 2 batteries and using 12 batteries |
| `dialpuzzles-day4 [FILE]` | A grid of `@` rolls. Any other character is an empty cell. | The number of rolls with fewer than four neighbouring rolls, then the total number removed by repeated sweeps |
| `dialpuzzles-day5 [FILE]` | Lines that contain `-` are fresh ID ranges (`a-b`). All other lines are single IDs. | The range counts before and after merging, the number of IDs, how many of them are fresh, and the total size of the merged ranges |

Every command first prints which data file it uses. It then prints a short report on reading the file, which gives the file size, the line or token count and the read time. An empty file gives only an "Empty file" note. If the file cannot be opened, the command prints `Can't open file: ...` on stderr and exits with status 1.

Blank lines are ignored. Lines may end in LF, CR or CRLF.

## Library use

Each solver module has a `solve` function. It takes the lines or tokens directly and returns the answers:

```python
from dialpuzzles import day1, day5
from dialpuzzles.lineio import iter_lines

text = "L68\nL30\nR48\nL5\nR60\nL55\nL1\nL99\nR14\nL82\n"
stops, passes = day1.solve(iter_lines(text))

ranges = day5.merge_ranges([day5.IdRange(3, 5), day5.IdRange(4, 8)])
day5.is_fresh(ranges, 7)  # True
```

Each module also exposes the pieces that `solve` uses:

- `day1`:
  - `count_zeros_passed(dial_position, instruction)`
  - `floor_div_100(value)`
- `day2`:
  - `IntRange`, which is iterable and sized. A range with `first > last` is walked downwards.
  - `parse_range(text)`
  - `is_valid_id(id_)`
  - `invalid_ids(tokens)`, which yields `(id, range)` pairs.
- `day3`:
  - `Bank`, with `add_battery(joltage)` and `max_joltage(active_battery_count)`.
  - `parse_bank(line)`
- `day4`:
  - `Grid`, with `from_lines`, `neighbors` and `count_neighbors`.
  - `count_accessible(grid)`
  - `remove_all(grid)`, which changes the grid in place.
- `day5`:
  - `IdRange`
  - `parse_pair(text, delimiter="-")`
  - `is_blank_line(line)`
  - `merge_ranges(ranges)`
  - `is_fresh(ranges, id_)`, which expects merged ranges.

`dialpuzzles.lineio` holds the shared input helpers:

- `iter_lines(text)` yields the non-empty lines of a text.
- `iter_tokens(text, delimiter)` yields the non-empty tokens of a text.
- `read_lines`, `read_delimited` and `read_csv` read the same from a file. Each returns the items together with a `ReadStats` record. They raise `OSError` if the file cannot be read.
- `parse_int(text)` builds an integer from the decimal digits in a text and skips any other characters.

## Limits

- A battery bank holds at most 15 batteries, and `parse_bank` drops any digits after the fifteenth.
- `max_joltage` raises `ValueError` if it is asked for more batteries than the bank holds.
- `parse_bank` raises `ValueError` for any character that is not a digit.
- `parse_range` and `parse_pair` raise `ValueError` for text that is not a number.