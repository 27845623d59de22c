"""
Pointer movement between color blocks

Chooses the exit codel of a block, detects blocked moves, applies the
8-attempt retry cycle and slides through white regions.
"""

from enum import Enum
from typing import NamedTuple, Optional, Sequence

from .blocks import Block, BlockIndex
from .colors import Color
from .grid import Position
from .pointer import Chooser, Direction, PointerState


# Consecutive blocked attempts before the program halts
MAX_ATTEMPTS = 8


class MoveKind(Enum):
    ENTER = 'enter'          # into a different chromatic block
    SLIDE = 'slide'          # across white onto a chromatic codel
    BLOCKED = 'blocked'      # edge or black hit, pointer adjusted
    EXHAUSTED = 'exhausted'  # 8th consecutive blocked attempt
    DEADLOCK = 'deadlock'    # white slide revisited a state

    def __str__(self):
        return self.value


class Move(NamedTuple):
    kind: MoveKind
    exit: Position             # codel the pointer stepped from
    target: Optional[Position]  # codel reached, None unless ENTER/SLIDE
    attempts: int              # blocked counter after this move


class Navigator:
    """Computes where the pointer goes next. Mutates the PointerState it is given."""

    def __init__(self, blocks: BlockIndex):
        self.blocks = blocks
        self.grid = blocks.grid

    def exit_codel(self, block: Block, direction: Direction, chooser: Chooser) -> Position:
        """Codel of `block` the pointer leaves from for this DP/CC (cached per block)."""
        key = (direction, chooser)
        if key not in block.exits:
            block.exits[key] = choose_exit_codel(block.cells, direction, chooser)
        return block.exits[key]

    def is_blocked(self, pos: Position) -> bool:
        """Off the grid or black."""
        x, y = pos
        return not self.grid.in_bounds(x, y) or self.grid.color_at(x, y) is Color.BLACK

    def navigate(self, position: Position, pointer: PointerState, attempts: int = 0) -> Move:
        """
        Make one movement attempt from `position`.

        Args:
            position: current codel (chromatic or white)
            pointer: DP/CC, adjusted in place on blocked moves and inside white
            attempts: consecutive blocked attempts so far

        Returns:
            Move describing the outcome
        """
        if self.grid[position] is Color.WHITE:
            return self.slide(position, pointer)

        block = self.blocks.block_at(*position)
        exit_pos = self.exit_codel(block, pointer.direction, pointer.chooser)
        candidate = pointer.direction.step(exit_pos)

        if self.is_blocked(candidate):
            return self.retry(exit_pos, pointer, attempts)

        if self.grid[candidate] is Color.WHITE:
            return self.slide(candidate, pointer)

        return Move(MoveKind.ENTER, exit_pos, candidate, 0)

    def retry(self, exit_pos: Position, pointer: PointerState, attempts: int) -> Move:
        """Count a blocked attempt; odd counts toggle CC, even counts rotate DP."""
        attempts += 1
        if attempts >= MAX_ATTEMPTS:
            return Move(MoveKind.EXHAUSTED, exit_pos, None, attempts)

        if attempts % 2:
            pointer.toggle()
        else:
            pointer.rotate(1)
        return Move(MoveKind.BLOCKED, exit_pos, None, attempts)

    def slide(self, start: Position, pointer: PointerState) -> Move:
        """
        Travel straight through white from `start` until a chromatic codel.

        A restriction inside white toggles CC and rotates DP together.
        Seeing the same (position, DP, CC) twice means the slide can never end.
        """
        pos = start
        seen = set()

        while True:
            state = (pos, pointer.direction, pointer.chooser)
            if state in seen:
                return Move(MoveKind.DEADLOCK, pos, None, 0)
            seen.add(state)

            nxt = pointer.direction.step(pos)
            if self.is_blocked(nxt):
                pointer.toggle()
                pointer.rotate(1)
                continue

            if self.grid[nxt] is Color.WHITE:
                pos = nxt
                continue

            return Move(MoveKind.SLIDE, pos, nxt, 0)


def choose_exit_codel(cells: Sequence[Position], direction: Direction, chooser: Chooser) -> Position:
    """
    Select the exit codel among `cells`.

    The edge is the set of cells furthest along DP. Among those, CC left
    takes the one furthest 90 degrees anticlockwise of DP and CC right the
    one furthest 90 degrees clockwise (DP right, CC left -> topmost).
    """
    dx, dy = direction.value
    furthest = max(x * dx + y * dy for x, y in cells)
    edge = [(x, y) for x, y in cells if x * dx + y * dy == furthest]

    side = direction.rotate(-1 if chooser is Chooser.LEFT else 1)
    sx, sy = side.value
    return max(edge, key=lambda c: c[0] * sx + c[1] * sy)
