import pytest

from fdfview.fdfmap import HeightMap, MapError, count_words, parse_map, read_map


def test_parse_simple_grid():
    height_map = parse_map("0 0 0\n0 10 0\n")
    assert height_map.rows == 2
    assert height_map.cols == 3
    assert height_map.matrix == [[0, 0, 0], [0, 10, 0]]


def test_range_includes_negative_values():
    height_map = parse_map("1 -5\n3 2\n")
    assert height_map.min_z == -5
    assert height_map.max_z == 3


def test_range_starts_from_zero():
    height_map = parse_map("4 5\n6 7\n")
    assert height_map.min_z == 0
    assert height_map.max_z == 7


def test_colour_suffix_is_ignored():
    height_map = parse_map("10,0xFF 3\n")
    assert height_map.matrix == [[10, 3]]


def test_blank_lines_are_skipped():
    assert parse_map("1 2\n\n3 4\n\n").matrix == [[1, 2], [3, 4]]


def test_non_numeric_value_reads_as_zero():
    assert parse_map("abc 7\n").matrix == [[0, 7]]


def test_extra_spaces_between_values():
    assert parse_map("  1   2 \n3 4\n").matrix == [[1, 2], [3, 4]]


def test_ragged_rows_raise():
    with pytest.raises(MapError):
        parse_map("1 2 3\n4 5\n")


def test_empty_text_raises():
    with pytest.raises(MapError):
        parse_map("")


def test_whitespace_only_first_row_raises():
    with pytest.raises(MapError):
        parse_map("   \n1 2\n")


def test_height_map_rejects_ragged_matrix():
    with pytest.raises(MapError):
        HeightMap([[1, 2], [3]])


def test_height_map_rejects_empty_matrix():
    with pytest.raises(MapError):
        HeightMap([])


@pytest.mark.parametrize(
    ("text", "expected"),
    [("", 0), ("one", 1), ("  12  -3\t7 ", 3), ("1\n", 1)],
)
def test_count_words(text, expected):
    assert count_words(text) == expected


def test_read_map_matches_parse(tmp_path):
    text = "0 1 2\n3 4 5\n"
    path = tmp_path / "map.fdf"
    path.write_text(text)
    assert read_map(path) == parse_map(text)


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_map(tmp_path / "absent.fdf")