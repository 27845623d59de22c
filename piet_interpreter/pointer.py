"""
Direction pointer (DP) and codel chooser (CC)
"""

from enum import Enum
from typing import Tuple


class Direction(Enum):
    """DP values in clockwise order; value is the (dx, dy) step."""

    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    UP = (0, -1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    def rotate(self, steps: int = 1) -> 'Direction':
        """Turn clockwise by `steps` (negative turns anticlockwise)."""
        order = list(Direction)
        return order[(order.index(self) + steps) % len(order)]

    def step(self, pos: Tuple[int, int]) -> Tuple[int, int]:
        return pos[0] + self.dx, pos[1] + self.dy

    def __str__(self):
        return self.name.lower()


class Chooser(Enum):
    LEFT = 'left'
    RIGHT = 'right'

    def toggle(self, times: int = 1) -> 'Chooser':
        """Flip iff `times` is odd."""
        if times % 2 == 0:
            return self
        return Chooser.RIGHT if self is Chooser.LEFT else Chooser.LEFT

    def __str__(self):
        return self.value


class PointerState:
    """Mutable DP/CC pair. Starts at DP=right, CC=left."""

    def __init__(self, direction: Direction = Direction.RIGHT, chooser: Chooser = Chooser.LEFT):
        self._direction = direction
        self._chooser = chooser

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def chooser(self) -> Chooser:
        return self._chooser

    def rotate(self, steps: int = 1) -> None:
        self._direction = self._direction.rotate(steps)

    def toggle(self, times: int = 1) -> None:
        self._chooser = self._chooser.toggle(times)

    def as_tuple(self) -> Tuple[Direction, Chooser]:
        return self._direction, self._chooser

    def __eq__(self, other):
        if not isinstance(other, PointerState):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __repr__(self):
        return f"PointerState({self._direction}|{self._chooser})"
