"""
Step trace formatting

Turns StepEvents into one-line text records on stderr.
"""

import sys
from typing import Optional, TextIO

from .interpreter import StepEvent
from .navigator import MoveKind


# Stack entries shown before eliding the bottom of the stack
STACK_PREVIEW = 16


def format_stack(stack, limit: int = STACK_PREVIEW) -> str:
    if len(stack) <= limit:
        return '[' + ', '.join(str(v) for v in stack) + ']'
    hidden = len(stack) - limit
    return f"[...{hidden} more, " + ', '.join(str(v) for v in stack[-limit:]) + ']'


def format_event(event: StepEvent) -> str:
    """e.g. 'step 3  (2, 0) -> (3, 0) right|left push ok stack=[2]'."""
    pointer = f"{event.direction}|{event.chooser}"

    if event.blocked:
        return f"step {event.step}  {event.exit} {event.move} -> {pointer}"

    if event.move is MoveKind.DEADLOCK:
        return f"step {event.step}  {event.exit} white deadlock {pointer}"

    line = f"step {event.step}  {event.exit} -> {event.target} {pointer}"
    if event.move is MoveKind.SLIDE:
        line += " (white)"
    if event.instruction is not None:
        line += f" {event.instruction} {event.outcome}"
    return f"{line} stack={format_stack(event.stack)}"


class TraceWriter:
    """Trace sink: prints each event, or only no-op reasons when quiet."""

    def __init__(self, stream: Optional[TextIO] = None, steps: bool = True, noops: bool = True):
        self.stream = stream if stream is not None else sys.stderr
        self.steps = steps
        self.noops = noops

    def __call__(self, event: StepEvent) -> None:
        if self.steps:
            print(format_event(event), file=self.stream)
        elif self.noops and event.outcome is not None and not event.outcome.executed:
            print(f"step {event.step}: {event.outcome.reason}", file=self.stream)
