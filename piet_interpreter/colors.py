"""
Piet color palette

18 chromatic colors (6 hues x 3 lightness levels) plus white and black.
Hue and lightness deltas between two chromatic colors select an instruction.
"""

from enum import Enum
from typing import Optional, Tuple

from .errors import ProgramError


HUES = ('red', 'yellow', 'green', 'cyan', 'blue', 'magenta')
LIGHTNESS = ('light', 'normal', 'dark')

N_HUES = len(HUES)
N_LIGHTNESS = len(LIGHTNESS)

# Policies for RGB values outside the palette
UNKNOWN_WHITE = 'white'
UNKNOWN_BLACK = 'black'
UNKNOWN_ERROR = 'error'
UNKNOWN_POLICIES = (UNKNOWN_WHITE, UNKNOWN_BLACK, UNKNOWN_ERROR)


class Color(Enum):
    """A codel color. Value is (hue, lightness) for chromatic colors."""

    LIGHT_RED = (0, 0)
    RED = (0, 1)
    DARK_RED = (0, 2)
    LIGHT_YELLOW = (1, 0)
    YELLOW = (1, 1)
    DARK_YELLOW = (1, 2)
    LIGHT_GREEN = (2, 0)
    GREEN = (2, 1)
    DARK_GREEN = (2, 2)
    LIGHT_CYAN = (3, 0)
    CYAN = (3, 1)
    DARK_CYAN = (3, 2)
    LIGHT_BLUE = (4, 0)
    BLUE = (4, 1)
    DARK_BLUE = (4, 2)
    LIGHT_MAGENTA = (5, 0)
    MAGENTA = (5, 1)
    DARK_MAGENTA = (5, 2)
    WHITE = 'white'
    BLACK = 'black'

    @property
    def is_chromatic(self) -> bool:
        return isinstance(self.value, tuple)

    @property
    def hue(self) -> Optional[int]:
        return self.value[0] if self.is_chromatic else None

    @property
    def lightness(self) -> Optional[int]:
        return self.value[1] if self.is_chromatic else None

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return COLOR_TO_RGB[self]

    @property
    def label(self) -> str:
        """Human readable name, e.g. 'dark blue'."""
        return self.name.lower().replace('_', ' ')

    def hue_delta(self, other: 'Color') -> Optional[int]:
        """Hue steps from self to other (mod 6), None unless both chromatic."""
        if not (self.is_chromatic and other.is_chromatic):
            return None
        return (other.hue - self.hue) % N_HUES

    def lightness_delta(self, other: 'Color') -> Optional[int]:
        """Darkening steps from self to other (mod 3), None unless both chromatic."""
        if not (self.is_chromatic and other.is_chromatic):
            return None
        return (other.lightness - self.lightness) % N_LIGHTNESS


# Canonical RGB values
COLOR_TO_RGB = {
    Color.LIGHT_RED: (255, 192, 192),
    Color.RED: (255, 0, 0),
    Color.DARK_RED: (192, 0, 0),
    Color.LIGHT_YELLOW: (255, 255, 192),
    Color.YELLOW: (255, 255, 0),
    Color.DARK_YELLOW: (192, 192, 0),
    Color.LIGHT_GREEN: (192, 255, 192),
    Color.GREEN: (0, 255, 0),
    Color.DARK_GREEN: (0, 192, 0),
    Color.LIGHT_CYAN: (192, 255, 255),
    Color.CYAN: (0, 255, 255),
    Color.DARK_CYAN: (0, 192, 192),
    Color.LIGHT_BLUE: (192, 192, 255),
    Color.BLUE: (0, 0, 255),
    Color.DARK_BLUE: (0, 0, 192),
    Color.LIGHT_MAGENTA: (255, 192, 255),
    Color.MAGENTA: (255, 0, 255),
    Color.DARK_MAGENTA: (192, 0, 192),
    Color.WHITE: (255, 255, 255),
    Color.BLACK: (0, 0, 0),
}

PIET_PALETTE = {rgb: color for color, rgb in COLOR_TO_RGB.items()}


def from_hue_lightness(hue: int, lightness: int) -> Color:
    """Chromatic color at the given hue/lightness (both wrapped)."""
    return Color((hue % N_HUES, lightness % N_LIGHTNESS))


def from_rgb(rgb: Tuple[int, int, int], unknown: str = UNKNOWN_WHITE) -> Color:
    """
    Map an RGB triple to a palette color.

    Args:
        rgb: (r, g, b) with 0-255 channels
        unknown: policy for colors outside the palette ('white', 'black', 'error')

    Returns:
        Matching Color
    """
    color = PIET_PALETTE.get(tuple(int(c) for c in rgb[:3]))
    if color is not None:
        return color

    if unknown == UNKNOWN_WHITE:
        return Color.WHITE
    if unknown == UNKNOWN_BLACK:
        return Color.BLACK
    if unknown == UNKNOWN_ERROR:
        raise ProgramError('unknown color: #%02X%02X%02X' % tuple(rgb[:3]))
    raise ValueError(f"Invalid unknown-color policy: {unknown!r}")
