import pytest

from dialpuzzles.day4 import Grid, count_accessible, main, remove_all, solve

SAMPLE = [
    "..@@.@@@@.",
    "@@@.@.@.@@",
    "@@@@@.@.@@",
    "@.@@@@..@.",
    "@@.@@@@.@@",
    ".@@@@@@@.@",
    ".@.@.@.@@@",
    "@.@@@.@@@@",
    ".@@@@@@@@.",
    "@.@.@@@.@.",
]


def test_from_lines_dimensions_and_cells():
    grid = Grid.from_lines(["@.@", "..@"])
    assert (grid.width, grid.height) == (3, 2)
    assert grid.cells == [True, False, True, False, False, True]


@pytest.mark.parametrize("index", range(12))
def test_coord_index_round_trip(index):
    grid = Grid.from_lines(["...."] * 3)
    x, y = grid.index_to_coord(index)
    assert grid.is_valid(x, y)
    assert grid.coord_to_index(x, y) == index


def test_is_valid_bounds():
    grid = Grid.from_lines(["...", "..."])
    assert grid.is_valid(2, 1)
    assert not grid.is_valid(3, 0)
    assert not grid.is_valid(0, 2)
    assert not grid.is_valid(-1, 0)


def test_neighbors_of_center_are_all_others():
    grid = Grid.from_lines(["@@@"] * 3)
    assert set(grid.neighbors(4)) == set(range(9)) - {4}


def test_neighbors_of_corner():
    grid = Grid.from_lines(["@@@"] * 3)
    assert sorted(grid.neighbors(0)) == [1, 3, 4]


def test_neighbors_of_invalid_index_is_empty():
    grid = Grid.from_lines(["@@@"] * 3)
    assert list(grid.neighbors(9)) == []
    assert list(grid.neighbors(-1)) == []


def test_count_neighbors_counts_only_rolls():
    grid = Grid.from_lines(["@.@", "...", "@.@"])
    assert grid.count_neighbors(4) == sum(grid.cells)


def test_isolated_rolls_all_accessible():
    lines = ["@.@", "...", ".@."]
    assert count_accessible(Grid.from_lines(lines)) == "".join(lines).count("@")


def test_empty_grid():
    assert count_accessible(Grid.from_lines(["...", "..."])) == 0
    assert remove_all(Grid.from_lines(["...", "..."])) == 0


def test_full_block_corners_accessible():
    assert count_accessible(Grid.from_lines(["@@@"] * 3)) == 4


def test_remove_all_leaves_no_accessible_roll():
    grid = Grid.from_lines(SAMPLE)
    before = sum(grid.cells)
    removed = remove_all(grid)
    assert removed + sum(grid.cells) == before
    assert count_accessible(grid) == 0


def test_solve_part_two_at_least_part_one():
    first, second = solve(SAMPLE)
    assert first == count_accessible(Grid.from_lines(SAMPLE))
    assert second >= first


def test_main_reads_file(tmp_path, capsys):
    data = tmp_path / "data.txt"
    data.write_text("\n".join(SAMPLE) + "\n")
    assert main([str(data)]) == 0
    out = capsys.readouterr().out.splitlines()
    first, second = solve(SAMPLE)
    assert out[-2:] == [str(first), str(second)]


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "absent.txt")]) == 1