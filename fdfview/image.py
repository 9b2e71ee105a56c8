"""Off-screen 32-bit pixel images."""

from __future__ import annotations

from dataclasses import dataclass, field

_PAD_PIXELS = 32


@dataclass
class Image:
    """A ZPixmap-style image of 32-bit pixels stored in a byte buffer.

    ``endian`` is 0 for least-significant byte first, 1 for most
    significant byte first.  Rows are ``size_line`` bytes apart.
    """

    width: int
    height: int
    endian: int = 0
    bpp: int = field(default=32, init=False)
    data: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("image dimensions must be positive")
        if self.endian not in (0, 1):
            raise ValueError("endian must be 0 or 1")
        self.data = bytearray((self.width + _PAD_PIXELS) * self.height * 4)

    @property
    def size_line(self) -> int:
        """Number of bytes from the start of one row to the next."""
        return self.width * (self.bpp // 8)

    @property
    def _byteorder(self) -> str:
        return "big" if self.endian else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * (self.bpp // 8)

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` at (x, y); the origin is the top-left corner."""
        offset = self._offset(x, y)
        self.data[offset:offset + 4] = (color & 0xFFFFFFFF).to_bytes(4, self._byteorder)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the 32-bit pixel value stored at (x, y)."""
        offset = self._offset(x, y)
        return int.from_bytes(self.data[offset:offset + 4], self._byteorder)

    def clear(self) -> None:
        """Set every byte of the image to zero."""
        self.data[:] = bytes(len(self.data))

    def to_rgb_bytes(self) -> bytes:
        """Return the visible pixels as packed RGB triples, row by row."""
        red, green, blue = (1, 2, 3) if self.endian else (2, 1, 0)
        out = bytearray(self.width * self.height * 3)
        row_bytes = self.width * 3
        for row in range(self.height):
            start = row * self.size_line
            pixels = self.data[start:start + self.width * 4]
            target = out[row * row_bytes:(row + 1) * row_bytes]
            target[0::3] = pixels[red::4]
            target[1::3] = pixels[green::4]
            target[2::3] = pixels[blue::4]
            out[row * row_bytes:(row + 1) * row_bytes] = target
        return bytes(out)


def new_image(width: int, height: int) -> Image:
    """Create a zero-filled 32-bit image of the given size."""
    return Image(width, height)