"""Reading height maps: rows of whitespace-separated altitudes."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


class MapError(ValueError):
    """Raised when a height map cannot be read."""


def count_words(text: str) -> int:
    """Return the number of whitespace-separated words in ``text``."""
    return len(text.split())


def _atoi(token: str) -> int:
    match = _INT_PREFIX.match(token)
    return int(match.group(1)) if match else 0


@dataclass
class HeightMap:
    """A rectangular grid of altitudes, indexed as ``matrix[row][col]``.

    ``min_z`` and ``max_z`` start from zero, so a map with only positive
    heights has ``min_z == 0`` and one with only negative heights has
    ``max_z == 0``.
    """

    matrix: list[list[int]]
    min_z: int = field(init=False, default=0)
    max_z: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        if not self.matrix or not self.matrix[0]:
            raise MapError("height map is empty")
        width = len(self.matrix[0])
        for number, row in enumerate(self.matrix, start=1):
            if len(row) != width:
                raise MapError(
                    f"row {number} has {len(row)} values, expected {width}"
                )
        values = [value for row in self.matrix for value in row]
        self.min_z = min(0, min(values))
        self.max_z = max(0, max(values))

    @property
    def rows(self) -> int:
        """Number of rows in the grid."""
        return len(self.matrix)

    @property
    def cols(self) -> int:
        """Number of values in each row."""
        return len(self.matrix[0])


def parse_map(text: str) -> HeightMap:
    """Build a height map from the text of a map file.

    Empty lines are skipped.  Values are separated by spaces; each one is
    read as a leading integer, so ``10,0xFF`` gives 10.  The first line
    fixes the number of columns.
    """
    lines = [line for line in text.split("\n") if line]
    if not lines:
        raise MapError("height map is empty")
    cols = count_words(lines[0])
    if cols == 0:
        raise MapError("first row holds no values")
    matrix = []
    for number, line in enumerate(lines, start=1):
        tokens = [token for token in line.split(" ") if token]
        if len(tokens) != cols:
            raise MapError(f"row {number} has {len(tokens)} values, expected {cols}")
        matrix.append([_atoi(token) for token in tokens])
    return HeightMap(matrix)


def read_map(path: str | Path) -> HeightMap:
    """Read and parse the height map stored at ``path``."""
    return parse_map(Path(path).read_text(encoding="utf-8"))