"""
Piet interpreter loop

Drives the Navigator and StackMachine one step at a time, reports every
step to an optional trace sink and decides when the program halts.
"""

from enum import Enum
from typing import Callable, NamedTuple, Optional, Tuple

from .blocks import Block, BlockIndex
from .colors import Color
from .grid import ColorGrid, Position
from .instructions import Instruction, decode
from .machine import Outcome, StackMachine
from .navigator import MoveKind, Navigator
from .pointer import Chooser, Direction, PointerState


class Termination(Enum):
    NO_LEGAL_MOVE = 'halted: no legal move'
    WHITE_DEADLOCK = 'halted: deadlocked in white region'
    CANCELLED = 'halted: cancelled'

    def __str__(self):
        return self.value


class StepEvent(NamedTuple):
    """What happened during one step. DP/CC and stack are as left by the step."""
    step: int
    position: Position
    exit: Position
    target: Optional[Position]
    move: MoveKind
    direction: Direction
    chooser: Chooser
    instruction: Optional[Instruction]
    outcome: Optional[Outcome]
    stack: Tuple[int, ...]

    @property
    def blocked(self) -> bool:
        return self.move in (MoveKind.BLOCKED, MoveKind.EXHAUSTED)


class ExecutionState:
    """Position, pointer, blocked counter and termination of a run."""

    def __init__(self, position: Position = (0, 0)):
        self.position = position
        self.pointer = PointerState()
        self.attempts = 0
        self.steps = 0
        self.termination: Optional[Termination] = None

    @property
    def terminated(self) -> bool:
        return self.termination is not None


# Stop signals

class StepLimit:
    """Stop signal that trips after `max_steps` checks."""

    def __init__(self, max_steps: int):
        if max_steps < 0:
            raise ValueError(f"max_steps must be >= 0, got {max_steps}")
        self.max_steps = max_steps
        self.checks = 0

    def is_set(self) -> bool:
        if self.checks >= self.max_steps:
            return True
        self.checks += 1
        return False

    @property
    def exhausted(self) -> bool:
        return self.checks >= self.max_steps


class AnyStop:
    """Set as soon as any of the wrapped signals is set."""

    def __init__(self, *signals):
        self.signals = [s for s in signals if s is not None]

    def is_set(self) -> bool:
        return any(s.is_set() for s in self.signals)


class Interpreter:
    """
    Runs a Piet program held in a ColorGrid.

    Execution starts on the top-left codel with DP=right, CC=left and an
    empty stack. A program whose top-left codel is black never moves.
    """

    def __init__(self, grid: ColorGrid, stdin=None, stdout=None,
                 sink: Optional[Callable[[StepEvent], None]] = None):
        self.grid = grid
        self.blocks = BlockIndex(grid)
        self.navigator = Navigator(self.blocks)
        self.state = ExecutionState()
        self.machine = StackMachine(self.state.pointer, stdin, stdout)
        self.sink = sink

        if grid.color_at(0, 0) is Color.BLACK:
            self.state.termination = Termination.NO_LEGAL_MOVE

    @property
    def current_block(self) -> Block:
        return self.blocks.block_at(*self.state.position)

    @property
    def pointer(self) -> PointerState:
        return self.state.pointer

    @property
    def stack(self) -> Tuple[int, ...]:
        return self.machine.snapshot()

    def step(self) -> Optional[StepEvent]:
        """Perform one step. Returns None once the program has halted."""
        state = self.state
        if state.terminated:
            return None

        origin = state.position
        block = self.current_block
        move = self.navigator.navigate(origin, state.pointer, state.attempts)
        state.attempts = move.attempts

        instruction = None
        outcome = None

        if move.kind is MoveKind.ENTER:
            instruction = decode(block.color, self.grid[move.target])
            outcome = self.machine.execute(instruction, block.size)
            state.position = move.target
        elif move.kind is MoveKind.SLIDE:
            state.position = move.target
        elif move.kind is MoveKind.EXHAUSTED:
            state.termination = Termination.NO_LEGAL_MOVE
        elif move.kind is MoveKind.DEADLOCK:
            state.termination = Termination.WHITE_DEADLOCK

        state.steps += 1
        event = StepEvent(
            step=state.steps,
            position=origin,
            exit=move.exit,
            target=move.target,
            move=move.kind,
            direction=state.pointer.direction,
            chooser=state.pointer.chooser,
            instruction=instruction,
            outcome=outcome,
            stack=self.machine.snapshot(),
        )

        if self.sink is not None:
            self.sink(event)
        return event

    def run(self, stop=None) -> Termination:
        """
        Step until the program halts.

        Args:
            stop: optional object with is_set(), checked once before every step

        Returns:
            How the run ended
        """
        while not self.state.terminated:
            if stop is not None and stop.is_set():
                self.state.termination = Termination.CANCELLED
                break
            self.step()

        return self.state.termination


def run_grid(grid: ColorGrid, stdin=None, stdout=None, sink=None, stop=None) -> Tuple[Termination, Interpreter]:
    """Build an Interpreter for `grid` and run it to completion."""
    interpreter = Interpreter(grid, stdin=stdin, stdout=stdout, sink=sink)
    return interpreter.run(stop), interpreter
