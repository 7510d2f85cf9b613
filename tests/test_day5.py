import pytest

from dialpuzzles.day5 import (
    IdRange,
    is_blank_line,
    is_fresh,
    main,
    merge_ranges,
    parse_pair,
    solve,
)

SAMPLE = ["3-5", "10-14", "16-20", "12-18", "1", "5", "8", "11", "17", "32"]


def test_id_range_contains_endpoints():
    id_range = IdRange(3, 5)
    assert id_range.contains(3)
    assert id_range.contains(5)
    assert not id_range.contains(2)
    assert not id_range.contains(6)


def test_id_range_size_matches_members():
    id_range = IdRange(10, 14)
    assert id_range.size() == sum(1 for i in range(30) if id_range.contains(i))


def test_id_range_ordering_by_first():
    assert sorted([IdRange(7, 8), IdRange(2, 9)]) == [IdRange(2, 9), IdRange(7, 8)]


def test_parse_pair():
    assert parse_pair("3-5") == (3, 5)
    assert parse_pair("12:345", ":") == (12, 345)


def test_parse_pair_invalid():
    with pytest.raises(ValueError):
        parse_pair("x-5")


@pytest.mark.parametrize(
    ("line", "expected"),
    [("", True), ("   \t", True), (" x", False), ("12", False)],
)
def test_is_blank_line(line, expected):
    assert is_blank_line(line) is expected


def test_merge_overlapping_ranges():
    ranges = [IdRange(10, 14), IdRange(3, 5), IdRange(16, 20), IdRange(12, 18)]
    assert merge_ranges(ranges) == [IdRange(3, 5), IdRange(10, 20)]


def test_merge_adjacent_ranges():
    assert merge_ranges([IdRange(3, 4), IdRange(1, 2)]) == [IdRange(1, 4)]


def test_merged_ranges_sorted_and_separated():
    ranges = [IdRange(5, 9), IdRange(1, 1), IdRange(30, 31), IdRange(8, 12), IdRange(14, 20)]
    merged = merge_ranges(ranges)
    for left, right in zip(merged, merged[1:]):
        assert left.last + 1 < right.first
    covered = {i for r in ranges for i in range(r.first, r.last + 1)}
    assert covered == {i for r in merged for i in range(r.first, r.last + 1)}


def test_is_fresh_matches_containment():
    ranges = [IdRange(10, 14), IdRange(3, 5), IdRange(16, 20), IdRange(12, 18)]
    merged = merge_ranges(ranges)
    for id_ in range(25):
        assert is_fresh(merged, id_) == any(r.contains(id_) for r in ranges)


def test_is_fresh_empty_ranges():
    assert not is_fresh([], 5)


def test_solve_worked_example():
    assert solve(SAMPLE) == (3, 14)


def test_main_reads_file(tmp_path, capsys):
    data = tmp_path / "data.txt"
    data.write_text("\n".join(SAMPLE[:4]) + "\n\n" + "\n".join(SAMPLE[4:]) + "\n")
    assert main([str(data)]) == 0
    out = capsys.readouterr().out
    fresh, total = solve(SAMPLE)
    assert "fresh id ranges (pre merge): 4" in out
    assert f"fresh ingredients :{fresh}" in out
    assert f"total range size: {total}" in out


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "absent.txt")]) == 1