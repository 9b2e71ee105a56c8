import pytest

from fdfview.colors import lookup_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xFFFAFA),
        ("red", 0xFF0000),
        ("white", 0xFFFFFF),
        ("black", 0x0),
        ("navy", 0x80),
        ("lightgreen", 0x90EE90),
    ],
)
def test_known_names(name, expected):
    assert lookup_color(name) == expected


def test_none_is_transparent():
    assert lookup_color("none") == -1


def test_lookup_ignores_case():
    assert lookup_color("RED") == lookup_color("red")
    assert lookup_color("Ghost White") == lookup_color("ghost white")


def test_first_duplicate_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


@pytest.mark.parametrize("level", range(101))
def test_gray_and_grey_agree(level):
    assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


def test_gray_extremes_match_black_and_white():
    assert lookup_color("gray0") == lookup_color("black")
    assert lookup_color("gray100") == lookup_color("white")


@pytest.mark.parametrize(
    "spaced, joined",
    [
        ("ghost white", "ghostwhite"),
        ("alice blue", "aliceblue"),
        ("dark red", "darkred"),
        ("hot pink", "hotpink"),
    ],
)
def test_spaced_and_joined_names_agree(spaced, joined):
    assert lookup_color(spaced) == lookup_color(joined)


def test_numbered_first_variant_matches_base():
    assert lookup_color("snow1") == lookup_color("snow")
    assert lookup_color("red1") == lookup_color("red")


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        lookup_color("not a colour")


def test_empty_name_raises():
    with pytest.raises(KeyError):
        lookup_color("")