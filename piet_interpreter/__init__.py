"""
Piet interpreter

    >>> from piet_interpreter import load_grid, Interpreter
    >>> interpreter = Interpreter(load_grid('hello.png'))
    >>> interpreter.run()
"""

from .blocks import Block, BlockIndex
from .colors import Color
from .errors import ProgramError
from .grid import ColorGrid
from .image import grid_from_image, load_grid, save_grid
from .instructions import Instruction, decode
from .interpreter import (
    AnyStop, ExecutionState, Interpreter, StepEvent, StepLimit, Termination, run_grid,
)
from .machine import Outcome, StackMachine
from .navigator import Move, MoveKind, Navigator
from .pointer import Chooser, Direction, PointerState
from .streams import BufferedOutput, NullInput, StreamInput, StreamOutput

__version__ = '1.0.0'
