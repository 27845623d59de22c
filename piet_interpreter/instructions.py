"""
Piet instruction decoding

    Hue change   None        1 Darker      2 Darker
    None                     push          pop
    1 Step       add         subtract      multiply
    2 Steps      divide      mod           not
    3 Steps      greater     pointer       switch
    4 Steps      duplicate   roll          in(number)
    5 Steps      in(char)    out(number)   out(char)
"""

from enum import Enum
from typing import Optional

from .colors import Color, N_HUES, N_LIGHTNESS


class Instruction(Enum):
    NOP = 'none'
    PUSH = 'push'
    POP = 'pop'
    ADD = 'add'
    SUBTRACT = 'subtract'
    MULTIPLY = 'multiply'
    DIVIDE = 'divide'
    MOD = 'mod'
    NOT = 'not'
    GREATER = 'greater'
    POINTER = 'pointer'
    SWITCH = 'switch'
    DUPLICATE = 'duplicate'
    ROLL = 'roll'
    IN_NUMBER = 'in(number)'
    IN_CHAR = 'in(char)'
    OUT_NUMBER = 'out(number)'
    OUT_CHAR = 'out(char)'

    def __str__(self):
        return self.value


# Rows indexed by hue delta, columns by lightness delta
INSTRUCTION_TABLE = (
    (Instruction.NOP, Instruction.PUSH, Instruction.POP),
    (Instruction.ADD, Instruction.SUBTRACT, Instruction.MULTIPLY),
    (Instruction.DIVIDE, Instruction.MOD, Instruction.NOT),
    (Instruction.GREATER, Instruction.POINTER, Instruction.SWITCH),
    (Instruction.DUPLICATE, Instruction.ROLL, Instruction.IN_NUMBER),
    (Instruction.IN_CHAR, Instruction.OUT_NUMBER, Instruction.OUT_CHAR),
)


def lookup(hue_delta: int, lightness_delta: int) -> Instruction:
    """Instruction for a (hue delta, lightness delta) pair."""
    if not (0 <= hue_delta < N_HUES and 0 <= lightness_delta < N_LIGHTNESS):
        raise ValueError(
            f"Unknown hue/lightness change: (hue:{hue_delta}, lightness:{lightness_delta})"
        )
    return INSTRUCTION_TABLE[hue_delta][lightness_delta]


def decode(from_color: Color, to_color: Color) -> Optional[Instruction]:
    """Instruction fired when moving from one color to another, None if white/black is involved."""
    hue_delta = from_color.hue_delta(to_color)
    lightness_delta = from_color.lightness_delta(to_color)

    if hue_delta is None or lightness_delta is None:
        return None
    return lookup(hue_delta, lightness_delta)
