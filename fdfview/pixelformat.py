"""Conversion of 0xRRGGBB colours to a visual's native pixel value."""

from __future__ import annotations


def _shift_and_bits(mask: int, channel: str) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError(f"{channel} mask must be a positive bit mask")
    shift = (mask & -mask).bit_length() - 1
    mask >>= shift
    bits = 0
    while mask & 1:
        mask >>= 1
        bits += 1
    return shift, bits


def rgb_shifts(red_mask: int, green_mask: int, blue_mask: int) -> tuple[int, ...]:
    """Return (red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits).

    Each shift is the position of the lowest set bit of the mask and each
    bit count is the length of the run of ones starting there.
    """
    return (
        *_shift_and_bits(red_mask, "red"),
        *_shift_and_bits(green_mask, "green"),
        *_shift_and_bits(blue_mask, "blue"),
    )


def good_color(color: int, depth: int, shifts: tuple[int, ...]) -> int:
    """Return the pixel value for ``color`` on a visual of the given depth.

    Visuals of 24 bits or more take the colour unchanged; shallower ones
    pack each 8-bit channel into the field described by ``shifts``.
    """
    if depth >= 24:
        return color
    red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits = shifts
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - red_bits)) << red_shift)
        + ((green >> (16 - green_bits)) << green_shift)
        + ((blue >> (16 - blue_bits)) << blue_shift)
    )