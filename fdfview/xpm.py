"""Reader for XPM pixmaps, from a file or from a list of strings."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from pathlib import Path

from .colors import lookup_color
from .image import Image, new_image
from .wordtab import find_unquoted, split_words

_QUOTED = re.compile(r'"([^"]*)"')
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_HEX_PREFIX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")
_TRANSPARENT_PIXEL = 0xFF000000
_NAME_BUFFER = 63


class XpmError(ValueError):
    """Raised when XPM data cannot be decoded."""


def _blank(text: str, start: int, stop: int) -> str:
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace C-style comments outside quoted strings with spaces.

    ``/* ... */`` blocks are blanked including their delimiters, and
    ``// ...`` comments are blanked up to and including the newline.
    The length of the text is kept.
    """
    while (start := find_unquoted(text, "/*", len(text))) != -1:
        end = text.find("*/", start + 2)
        text = _blank(text, start, len(text) if end == -1 else end + 2)
    while (start := find_unquoted(text, "//", len(text))) != -1:
        end = text.find("\n", start + 2)
        text = _blank(text, start, len(text) if end == -1 else end + 1)
    return text


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _parse_hex(text: str) -> int:
    match = _HEX_PREFIX.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits, 16)
    return _to_int32(-value if sign == "-" else value)


def text_rgb(name: str, end: str | None) -> int:
    """Resolve an XPM colour specification to 0xRRGGBB.

    ``#`` introduces a hexadecimal value.  Otherwise ``name`` (joined with
    ``end`` when given) is looked up in the colour table, ignoring case;
    ``none`` gives -1 and unknown names give 0.
    """
    if name.startswith("#"):
        return _parse_hex(name[1:])
    if end is not None:
        name = f"{name} {end}"[:_NAME_BUFFER]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def _parse_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"malformed header: {line!r}")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if width <= 0 or height <= 0 or ncolors <= 0 or cpp <= 0:
        raise XpmError(f"invalid header values: {line!r}")
    return width, height, ncolors, cpp


def _parse_color(line: str, cpp: int) -> tuple[str, int]:
    words = split_words(line[cpp:])
    try:
        index = words.index("c")
    except ValueError:
        raise XpmError(f"colour line has no 'c' key: {line!r}") from None
    if index + 1 >= len(words):
        raise XpmError(f"colour line has no colour value: {line!r}")
    end = words[index + 2] if index + 2 < len(words) else None
    return line[:cpp], text_rgb(words[index + 1], end)


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from the strings of an XPM: header, colours, rows."""
    source = iter(lines)
    width, height, ncolors, cpp = _parse_header(_next_line(source, "header"))
    direct = cpp <= 2
    colors: dict[str, int] = {}
    for _ in range(ncolors):
        key, value = _parse_color(_next_line(source, "colour line"), cpp)
        if direct:
            colors[key] = value
        else:
            colors.setdefault(key, value)

    image = new_image(width, height)
    for y in range(height):
        row = _next_line(source, "pixel row")
        for x in range(width):
            color = colors.get(row[cpp * x:cpp * (x + 1)], 0)
            if color == -1:
                color = _TRANSPARENT_PIXEL
            image.put_pixel(x, y, color)
    return image


def xpm_file_to_image(path: str | Path) -> Image:
    """Read an XPM file, ignoring comments, and return its image."""
    text = Path(path).read_text(encoding="latin-1")
    strings = (match.group(1) for match in _QUOTED.finditer(strip_comments(text)))
    return parse_xpm(strings)


def xpm_to_image(data: Iterable[str]) -> Image:
    """Return the image described by XPM data given as a list of strings."""
    return parse_xpm(data)