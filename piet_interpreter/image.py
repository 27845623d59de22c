"""
Image <-> codel grid conversion

Decodes any image Pillow can read, splits it into codel_size x codel_size
pixel blocks and gives each codel the majority color of its block, so a
few stray pixels (e.g. compression artifacts) do not change the program.
"""

import os
from typing import Optional

import numpy as np
from PIL import Image

from .colors import Color, PIET_PALETTE, UNKNOWN_ERROR, UNKNOWN_POLICIES, UNKNOWN_WHITE, from_rgb
from .errors import ProgramError
from .grid import ColorGrid


COLOR_ORDER = list(Color)
UNKNOWN_INDEX = len(COLOR_ORDER)


# Pixel helpers

def load_image(path: str) -> Image.Image:
    """Load and convert image to RGB."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"Image file not found: {path}")

    try:
        return Image.open(path).convert('RGB')
    except Exception as e:
        raise ProgramError(f"Failed to open image: {e}")


def pack_rgb(pixels: np.ndarray) -> np.ndarray:
    """(h, w, 3) uint8 -> (h, w) int64 with 0xRRGGBB per pixel."""
    arr = pixels[:, :, :3].astype(np.int64)
    return (arr[:, :, 0] << 16) | (arr[:, :, 1] << 8) | arr[:, :, 2]


def unpack_rgb(value: int):
    value = int(value)
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def color_indices(pixels: np.ndarray, unknown: str = UNKNOWN_WHITE) -> np.ndarray:
    """
    Map every pixel to an index into COLOR_ORDER.

    Under the 'error' policy unknown pixels get UNKNOWN_INDEX so they can
    still be outvoted by the codel's majority color.
    """
    packed = pack_rgb(pixels)
    values, inverse = np.unique(packed, return_inverse=True)

    table = np.empty(len(values), dtype=np.int64)
    for i, value in enumerate(values):
        rgb = unpack_rgb(value)
        if rgb in PIET_PALETTE:
            table[i] = COLOR_ORDER.index(PIET_PALETTE[rgb])
        elif unknown == UNKNOWN_ERROR:
            table[i] = UNKNOWN_INDEX
        else:
            table[i] = COLOR_ORDER.index(from_rgb(rgb, unknown))

    return table[inverse].reshape(packed.shape)


# Codel size

def guess_codel_size(pixels: np.ndarray) -> int:
    """Codel size as the gcd of every same-color run along rows and columns."""
    packed = pack_rgb(pixels)
    size = 0

    for arr in (packed, packed.T):
        for line in arr:
            cuts = np.flatnonzero(line[1:] != line[:-1]) + 1
            bounds = np.concatenate(([0], cuts, [len(line)]))
            size = int(np.gcd.reduce(np.append(np.diff(bounds), size)))
            if size == 1:
                return 1

    return size or 1


# Grid conversion

def grid_from_image(img: Image.Image, codel_size: Optional[int] = None,
                    unknown: str = UNKNOWN_WHITE) -> ColorGrid:
    """
    Normalize a decoded image into a ColorGrid.

    Args:
        img: Pillow image (any mode, converted to RGB)
        codel_size: pixels per codel side, guessed when None
        unknown: policy for colors outside the palette

    Returns:
        ColorGrid with one color per codel
    """
    if unknown not in UNKNOWN_POLICIES:
        raise ValueError(f"Invalid unknown-color policy: {unknown!r}")

    pixels = np.asarray(img.convert('RGB'))
    h, w = pixels.shape[:2]
    if h == 0 or w == 0:
        raise ProgramError("Image has no pixels")

    if codel_size is None:
        codel_size = guess_codel_size(pixels)
    if codel_size <= 0:
        raise ProgramError(f"Invalid codel size: {codel_size}")
    if w % codel_size:
        raise ProgramError(f"Codel size {codel_size} does not match width of {w} pixels")
    if h % codel_size:
        raise ProgramError(f"Codel size {codel_size} does not match height of {h} pixels")

    indices = color_indices(pixels, unknown)
    rows, cols = h // codel_size, w // codel_size

    if codel_size > 1:
        # (rows, cs, cols, cs) -> one vote per pixel of each codel
        blocks = indices.reshape(rows, codel_size, cols, codel_size).swapaxes(1, 2)
        votes = blocks.reshape(rows, cols, codel_size * codel_size)
        winners = np.empty((rows, cols), dtype=np.int64)
        for r in range(rows):
            for c in range(cols):
                counts = np.bincount(votes[r, c], minlength=UNKNOWN_INDEX + 1)
                winners[r, c] = int(np.argmax(counts))
    else:
        winners = indices

    grid_rows = []
    for r in range(rows):
        row = []
        for c in range(cols):
            index = int(winners[r, c])
            if index == UNKNOWN_INDEX:
                raise ProgramError(f"Unknown color in codel ({c}, {r})")
            row.append(COLOR_ORDER[index])
        grid_rows.append(row)

    return ColorGrid(grid_rows)


def load_grid(path: str, codel_size: Optional[int] = None,
              unknown: str = UNKNOWN_WHITE) -> ColorGrid:
    """Load a Piet program image from disk."""
    return grid_from_image(load_image(path), codel_size, unknown)


def grid_to_image(grid: ColorGrid, codel_size: int = 1) -> Image.Image:
    """Render a grid, each codel as a codel_size x codel_size square."""
    if codel_size < 1:
        raise ValueError(f"Invalid codel size: {codel_size}")

    arr = np.array([[color.rgb for color in row] for row in grid.rows()], dtype=np.uint8)
    img = Image.fromarray(arr)

    if codel_size > 1:
        img = img.resize((grid.width * codel_size, grid.height * codel_size), Image.NEAREST)
    return img


def save_grid(grid: ColorGrid, path: str, codel_size: int = 1) -> None:
    grid_to_image(grid, codel_size).save(path)
