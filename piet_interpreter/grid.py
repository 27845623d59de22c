"""
Normalized codel grid

Immutable rectangle of Colors, one per codel, addressed as (x, y) with
(0, 0) at the top-left.
"""

from typing import Iterator, Sequence, Tuple

from .colors import Color
from .errors import ProgramError


Position = Tuple[int, int]


class ColorGrid:
    """Rectangular grid of Piet colors. Fixed once built."""

    def __init__(self, rows: Sequence[Sequence[Color]]):
        rows = [tuple(row) for row in rows]

        if not rows or not rows[0]:
            raise ProgramError("Empty program grid")

        width = len(rows[0])
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ProgramError(
                    f"Ragged program grid: row {y} has {len(row)} codels, expected {width}"
                )
            for x, color in enumerate(row):
                if not isinstance(color, Color):
                    raise ProgramError(f"Codel ({x}, {y}) is not a color: {color!r}")

        self._rows = tuple(rows)
        self.width = width
        self.height = len(rows)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def color_at(self, x: int, y: int) -> Color:
        return self._rows[y][x]

    def __getitem__(self, pos: Position) -> Color:
        x, y = pos
        return self._rows[y][x]

    def rows(self) -> Iterator[Tuple[Color, ...]]:
        return iter(self._rows)

    def positions(self) -> Iterator[Position]:
        """All codel positions in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield x, y

    def neighbors(self, x: int, y: int) -> Iterator[Position]:
        """In-bounds orthogonal neighbors."""
        for dx, dy in ((1, 0), (0, 1), (-1, 0), (0, -1)):
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                yield nx, ny

    def __eq__(self, other):
        if not isinstance(other, ColorGrid):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self):
        return hash(self._rows)

    def __repr__(self):
        return f"ColorGrid({self.width}x{self.height})"
