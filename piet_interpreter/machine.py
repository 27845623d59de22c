"""
Piet stack machine

Executes decoded instructions against an unbounded integer stack. An
instruction that cannot run (underflow, division by zero, bad roll, failed
read, bad character code) is a no-op: the stack is left exactly as it was
and the reason is reported through the returned Outcome.
"""

from typing import NamedTuple, Optional, Tuple

from .instructions import Instruction
from .pointer import PointerState
from .streams import NullInput, StreamOutput

MAX_CODE_POINT = 0x10FFFF
SURROGATES = range(0xD800, 0xE000)


class Outcome(NamedTuple):
    executed: bool
    reason: Optional[str] = None

    def __str__(self):
        return 'ok' if self.executed else f"no-op ({self.reason})"


OK = Outcome(True)


def noop(reason: str) -> Outcome:
    return Outcome(False, reason)


def is_valid_code_point(value: int) -> bool:
    return 0 <= value <= MAX_CODE_POINT and value not in SURROGATES


class StackMachine:
    """Owns the stack; touches the PointerState only for pointer/switch."""

    def __init__(self, pointer: PointerState, stdin=None, stdout=None):
        self.pointer = pointer
        self.stdin = stdin if stdin is not None else NullInput()
        self.stdout = stdout if stdout is not None else StreamOutput()
        self._stack = []

        self._ops = {
            Instruction.NOP: self._nop,
            Instruction.POP: self._pop,
            Instruction.ADD: self._add,
            Instruction.SUBTRACT: self._subtract,
            Instruction.MULTIPLY: self._multiply,
            Instruction.DIVIDE: self._divide,
            Instruction.MOD: self._mod,
            Instruction.NOT: self._not,
            Instruction.GREATER: self._greater,
            Instruction.POINTER: self._pointer,
            Instruction.SWITCH: self._switch,
            Instruction.DUPLICATE: self._duplicate,
            Instruction.ROLL: self._roll,
            Instruction.IN_NUMBER: self._in_number,
            Instruction.IN_CHAR: self._in_char,
            Instruction.OUT_NUMBER: self._out_number,
            Instruction.OUT_CHAR: self._out_char,
        }

    def execute(self, instruction: Instruction, block_size: int = 0) -> Outcome:
        """Run one instruction. `block_size` is the push operand (size of the block left)."""
        if instruction is Instruction.PUSH:
            return self._push(block_size)
        return self._ops[instruction]()

    def snapshot(self) -> Tuple[int, ...]:
        """Stack contents, bottom first."""
        return tuple(self._stack)

    def __len__(self):
        return len(self._stack)

    # Helpers

    def _binary(self, name: str, func) -> Outcome:
        if len(self._stack) < 2:
            return noop(f"{name} failed: stack underflow")
        b = self._stack.pop()
        a = self._stack.pop()
        self._stack.append(func(a, b))
        return OK

    # Instructions

    def _nop(self) -> Outcome:
        return OK

    def _push(self, value: int) -> Outcome:
        self._stack.append(int(value))
        return OK

    def _pop(self) -> Outcome:
        if not self._stack:
            return noop("pop failed: stack underflow")
        self._stack.pop()
        return OK

    def _add(self) -> Outcome:
        return self._binary('add', lambda a, b: a + b)

    def _subtract(self) -> Outcome:
        return self._binary('subtract', lambda a, b: a - b)

    def _multiply(self) -> Outcome:
        return self._binary('multiply', lambda a, b: a * b)

    def _divide(self) -> Outcome:
        if len(self._stack) >= 2 and self._stack[-1] == 0:
            return noop("divide failed: division by zero")
        return self._binary('divide', lambda a, b: a // b)

    def _mod(self) -> Outcome:
        if len(self._stack) >= 2 and self._stack[-1] == 0:
            return noop("mod failed: division by zero")
        return self._binary('mod', lambda a, b: a % b)

    def _not(self) -> Outcome:
        if not self._stack:
            return noop("not failed: stack underflow")
        self._stack.append(1 if self._stack.pop() == 0 else 0)
        return OK

    def _greater(self) -> Outcome:
        return self._binary('greater', lambda a, b: 1 if a > b else 0)

    def _pointer(self) -> Outcome:
        if not self._stack:
            return noop("pointer failed: stack underflow")
        self.pointer.rotate(self._stack.pop())
        return OK

    def _switch(self) -> Outcome:
        if not self._stack:
            return noop("switch failed: stack underflow")
        self.pointer.toggle(self._stack.pop())
        return OK

    def _duplicate(self) -> Outcome:
        if not self._stack:
            return noop("duplicate failed: stack underflow")
        self._stack.append(self._stack[-1])
        return OK

    def _roll(self) -> Outcome:
        """Roll the top `depth` values; a positive count buries the top value `count` times."""
        if len(self._stack) < 2:
            return noop("roll failed: stack underflow")

        count, depth = self._stack[-1], self._stack[-2]
        remaining = len(self._stack) - 2
        if depth <= 0:
            return noop("roll failed: depth must be positive")
        if depth > remaining:
            return noop("roll failed: depth exceeds stack size")

        del self._stack[-2:]
        shift = count % depth
        if shift:
            section = self._stack[-depth:]
            self._stack[-depth:] = section[-shift:] + section[:-shift]
        return OK

    def _in_number(self) -> Outcome:
        value = self.stdin.read_integer()
        if value is None:
            return noop("in(number) failed: input was not a valid number")
        self._stack.append(value)
        return OK

    def _in_char(self) -> Outcome:
        char = self.stdin.read_char()
        if not char:
            return noop("in(char) failed: input contained no characters")
        self._stack.append(ord(char))
        return OK

    def _out_number(self) -> Outcome:
        if not self._stack:
            return noop("out(number) failed: stack underflow")
        self.stdout.write_text(str(self._stack.pop()))
        return OK

    def _out_char(self) -> Outcome:
        if not self._stack:
            return noop("out(char) failed: stack underflow")
        if not is_valid_code_point(self._stack[-1]):
            return noop("out(char) failed: value is not a valid character")
        self.stdout.write_char(chr(self._stack.pop()))
        return OK
