import pytest

from fdfview.colors import lookup_color
from fdfview.xpm import (
    XpmError,
    parse_xpm,
    strip_comments,
    text_rgb,
    xpm_file_to_image,
    xpm_to_image,
)


def test_strip_block_comment_keeps_length():
    text = "/* c */ x"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert result.strip() == "x"
    assert "/*" not in result


def test_strip_line_comment_blanks_newline():
    text = "// line\nfoo"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert result.endswith("foo")
    assert "//" not in result
    assert "\n" not in result


def test_comment_inside_quotes_is_kept():
    text = '"/* a */"'
    assert strip_comments(text) == text


def test_text_rgb_hex():
    assert text_rgb("#FF0000", None) == 0xFF0000


def test_text_rgb_named_and_case():
    assert text_rgb("red", None) == lookup_color("red")
    assert text_rgb("RED", None) == lookup_color("red")


def test_text_rgb_joins_two_words():
    assert text_rgb("dark", "orange") == lookup_color("dark orange")


def test_text_rgb_none_and_unknown():
    assert text_rgb("None", None) == -1
    assert text_rgb("nosuchcolour", None) == 0


def test_parse_xpm_pixels():
    image = parse_xpm(["2 2 2 1", "a c #FF0000", "b c blue", "ab", "ba"])
    assert (image.width, image.height) == (2, 2)
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 0) == lookup_color("blue")
    assert image.get_pixel(0, 1) == lookup_color("blue")
    assert image.get_pixel(1, 1) == 0xFF0000


def test_transparent_colour():
    image = xpm_to_image(["1 1 1 1", "a c None", "a"])
    assert image.get_pixel(0, 0) == 0xFF000000


def test_unknown_pixel_key_is_zero():
    image = xpm_to_image(["2 1 1 1", "a c #FFFFFF", "az"])
    assert image.get_pixel(0, 0) == 0xFFFFFF
    assert image.get_pixel(1, 0) == 0


def test_duplicate_keys_small_cpp_last_wins():
    image = parse_xpm(["1 1 2 1", "a c red", "a c blue", "a"])
    assert image.get_pixel(0, 0) == lookup_color("blue")


def test_duplicate_keys_large_cpp_first_wins():
    image = parse_xpm(["1 1 2 3", "abc c red", "abc c blue", "abc"])
    assert image.get_pixel(0, 0) == lookup_color("red")


@pytest.mark.parametrize(
    "data",
    [
        [],
        ["0 2 1 1", "a c red", "a", "a"],
        ["1 1"],
        ["1 1 1 1", "a x red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c red", "a"],
    ],
)
def test_invalid_data_raises(data):
    with pytest.raises(XpmError):
        parse_xpm(data)


def test_file_with_comments(tmp_path):
    path = tmp_path / "img.xpm"
    path.write_text(
        "/* XPM */\n"
        "static char *img[] = {\n"
        "/* columns rows colors chars-per-pixel */\n"
        '"2 1 2 1",\n'
        '"a c white",\n'
        '"b c None",\n'
        '"ab"\n'
        "};\n"
    )
    image = xpm_file_to_image(path)
    assert (image.width, image.height) == (2, 1)
    assert image.get_pixel(0, 0) == lookup_color("white")
    assert image.get_pixel(1, 0) == 0xFF000000


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        xpm_file_to_image(tmp_path / "absent.xpm")