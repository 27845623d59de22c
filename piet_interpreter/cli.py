#!/usr/bin/env python3
"""
Piet Programming Language Interpreter

Runs a Piet program image. Program output goes to stdout; errors,
warnings and traces go to stderr.

Examples:
    # Run a program, guessing the codel size
    piet-interpreter hello.png

    # Codels drawn as 10x10 pixel squares, unknown colors as black
    piet-interpreter -c 10 --unknown black program.gif

    # Trace every step, stop after 1000 steps
    piet-interpreter -t -m 1000 program.png

    # Feed program input from a file
    piet-interpreter -i numbers.txt adder.png

    # Save the normalized program, one pixel per codel
    piet-interpreter -c 10 --dump-codels codels.png program.png
"""

import argparse
import signal
import sys
import threading
from typing import Optional

from .colors import UNKNOWN_POLICIES, UNKNOWN_WHITE
from .errors import ProgramError
from .image import load_grid, save_grid
from .interpreter import AnyStop, Interpreter, StepLimit, Termination
from .streams import StreamInput, StreamOutput
from .trace import TraceWriter, format_stack


def open_input(path: Optional[str]) -> StreamInput:
    """Program input from a file, or stdin (with a prompt when interactive)."""
    if path is None or path == '-':
        interactive = getattr(sys.stdin, 'isatty', lambda: False)()
        prompt = '? ' if interactive else None
        return StreamInput(sys.stdin, prompt=prompt, prompt_stream=sys.stderr)

    try:
        return StreamInput(open(path, 'r', encoding='utf-8'))
    except FileNotFoundError:
        raise FileNotFoundError(f"Input file not found: {path}")


def run_program(
    image_path: str,
    codel_size: Optional[int] = None,
    unknown: str = UNKNOWN_WHITE,
    max_steps: Optional[int] = None,
    input_path: Optional[str] = None,
    trace: bool = False,
    verbose: bool = False,
    dump_codels: Optional[str] = None
) -> int:
    """Load, run and report. Returns the process exit status."""
    grid = load_grid(image_path, codel_size, unknown)

    if verbose:
        print(f"Loaded: {image_path} ({grid.width}x{grid.height} codels)", file=sys.stderr)

    if dump_codels:
        save_grid(grid, dump_codels)
        print(f"Saved codels: {dump_codels}", file=sys.stderr)

    stdin = None
    stdout = StreamOutput(sys.stdout)
    sink = TraceWriter(sys.stderr, steps=trace, noops=verbose) if (trace or verbose) else None

    # Ctrl-C stops the run between steps, or at once while waiting for input
    interrupted = threading.Event()
    limit = StepLimit(max_steps) if max_steps is not None else None

    def on_interrupt(signum, frame):
        interrupted.set()
        if stdin is not None and stdin.waiting:
            raise KeyboardInterrupt

    in_main_thread = threading.current_thread() is threading.main_thread()
    if in_main_thread:
        previous = signal.signal(signal.SIGINT, on_interrupt)

    try:
        stdin = open_input(input_path)
        interpreter = Interpreter(grid, stdin=stdin, stdout=stdout, sink=sink)
        try:
            result = interpreter.run(AnyStop(interrupted, limit))
        except KeyboardInterrupt:
            interrupted.set()
            result = interpreter.state.termination = Termination.CANCELLED
    finally:
        if in_main_thread:
            signal.signal(signal.SIGINT, previous)
        if stdin is not None and stdin.stream is not sys.stdin:
            stdin.stream.close()

    if stdout.written:
        print()  # Final newline

    if verbose:
        print(f"{result} after {interpreter.state.steps} steps, "
              f"stack={format_stack(interpreter.stack)}", file=sys.stderr)

    if result is Termination.CANCELLED:
        if interrupted.is_set():
            print("[Interrupted]", file=sys.stderr)
            return 130
        print(f"Warning: stopped after reaching maximum of {max_steps} steps", file=sys.stderr)
    elif result is Termination.WHITE_DEADLOCK:
        print("Warning: program deadlocked in a white region", file=sys.stderr)

    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='piet-interpreter',
        description='Interpreter for the Piet graphical programming language',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    parser.add_argument('image',
                        help='Piet program image')
    parser.add_argument('-c', '--codel-size', type=int,
                        help='Pixels per codel side (default: guess)')
    parser.add_argument('--unknown', choices=UNKNOWN_POLICIES, default=UNKNOWN_WHITE,
                        help='Treat colors outside the palette as white, black, or an error '
                             '(default: white)')
    parser.add_argument('-m', '--max-steps', type=int,
                        help='Stop after this many steps')
    parser.add_argument('-i', '--input',
                        help='Program input file (default: stdin)')
    parser.add_argument('-t', '--trace', action='store_true',
                        help='Print every step to stderr')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Report failed instructions and a final summary')
    parser.add_argument('--dump-codels',
                        help='Save the normalized program, one pixel per codel')

    args = parser.parse_args(argv)

    # Validation
    if args.codel_size is not None and args.codel_size < 1:
        parser.error('Codel size must be >= 1')

    if args.max_steps is not None and args.max_steps < 0:
        parser.error('Max steps must be >= 0')

    try:
        return run_program(
            args.image,
            args.codel_size,
            args.unknown,
            args.max_steps,
            args.input,
            args.trace,
            args.verbose,
            args.dump_codels
        )
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ProgramError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n[Interrupted]", file=sys.stderr)
        return 130


if __name__ == '__main__':
    sys.exit(main())
