"""
Color blocks

Partition of a ColorGrid into maximal 4-connected same-color regions.
"""

from collections import deque
from typing import Dict, List, Tuple

from .colors import Color
from .grid import ColorGrid, Position


class Block:
    """One color block. `exits` caches the exit codel per (direction, chooser)."""

    def __init__(self, block_id: int, color: Color, cells: List[Position]):
        self.id = block_id
        self.color = color
        self.cells = tuple(cells)
        self._cell_set = frozenset(self.cells)
        self.exits: Dict[tuple, Position] = {}

    @property
    def size(self) -> int:
        return len(self.cells)

    def __contains__(self, pos: Position) -> bool:
        return pos in self._cell_set

    def __repr__(self):
        return f"Block(id={self.id}, color={self.color.label}, size={self.size})"


class BlockIndex:
    """Block labeling of a grid; every codel maps to exactly one Block."""

    def __init__(self, grid: ColorGrid):
        self.grid = grid
        self.blocks, self.block_id = self._build_blocks()

    def _build_blocks(self) -> Tuple[List[Block], List[List[int]]]:
        """Label blocks with a worklist flood fill."""
        grid = self.grid
        block_id = [[-1] * grid.width for _ in range(grid.height)]
        blocks = []

        for x, y in grid.positions():
            if block_id[y][x] != -1:
                continue

            color = grid.color_at(x, y)
            rid = len(blocks)
            queue = deque([(x, y)])
            block_id[y][x] = rid
            cells = []

            while queue:
                cx, cy = queue.popleft()
                cells.append((cx, cy))

                for nx, ny in grid.neighbors(cx, cy):
                    if block_id[ny][nx] == -1 and grid.color_at(nx, ny) == color:
                        block_id[ny][nx] = rid
                        queue.append((nx, ny))

            blocks.append(Block(rid, color, cells))

        return blocks, block_id

    def block_at(self, x: int, y: int) -> Block:
        return self.blocks[self.block_id[y][x]]

    def same_block(self, a: Position, b: Position) -> bool:
        return self.block_id[a[1]][a[0]] == self.block_id[b[1]][b[0]]

    def __len__(self):
        return len(self.blocks)

    def __iter__(self):
        return iter(self.blocks)
