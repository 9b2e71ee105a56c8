import pytest

from fdfview.pixelformat import good_color, rgb_shifts


def test_rgb_shifts_truecolor_24():
    assert rgb_shifts(0xFF0000, 0xFF00, 0xFF) == (16, 8, 8, 8, 0, 8)


def test_rgb_shifts_565():
    assert rgb_shifts(0xF800, 0x07E0, 0x001F) == (11, 5, 5, 6, 0, 5)


@pytest.mark.parametrize("masks", [(0, 0xFF00, 0xFF), (0xFF0000, 0, 0xFF), (0xFF0000, 0xFF00, 0)])
def test_rgb_shifts_zero_mask_raises(masks):
    with pytest.raises(ValueError):
        rgb_shifts(*masks)


@pytest.mark.parametrize("color", [0x000000, 0xFF99FF, 0x00FFFF, 0x123456])
def test_deep_visual_keeps_colour(color):
    shifts = rgb_shifts(0xF800, 0x07E0, 0x001F)
    assert good_color(color, 24, shifts) == color
    assert good_color(color, 32, shifts) == color


@pytest.mark.parametrize("color", [0x000000, 0xFF99FF, 0x00FFFF, 0x123456, 0xFFFFFF])
def test_888_layout_round_trips_at_low_depth(color):
    shifts = rgb_shifts(0xFF0000, 0xFF00, 0xFF)
    assert good_color(color, 16, shifts) == color


def test_565_white_fills_all_bits():
    shifts = rgb_shifts(0xF800, 0x07E0, 0x001F)
    assert good_color(0xFFFFFF, 16, shifts) == 0xFFFF


def test_565_black_is_zero():
    shifts = rgb_shifts(0xF800, 0x07E0, 0x001F)
    assert good_color(0, 16, shifts) == 0


def test_565_channels_stay_in_their_fields():
    shifts = rgb_shifts(0xF800, 0x07E0, 0x001F)
    assert good_color(0xFF0000, 16, shifts) & ~0xF800 == 0
    assert good_color(0x00FF00, 16, shifts) & ~0x07E0 == 0
    assert good_color(0x0000FF, 16, shifts) & ~0x001F == 0