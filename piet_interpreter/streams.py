"""
Program input/output over text streams

The stack machine only calls read_integer/read_char and
write_text/write_char; these classes bind them to file-like objects.
"""

import re
import sys
from typing import List, Optional, TextIO


# Whole token only: ASCII digits ending at whitespace or end of input
INTEGER_TOKEN = re.compile(r'[+-]?[0-9]+(?=\s|\Z)')


class StreamInput:
    """
    Line-buffered reader for in(number) and in(char).

    A malformed integer token is not consumed, so a later in(char) still
    sees it. Both reads return None on EOF or bad input.
    """

    def __init__(self, stream: Optional[TextIO] = None, prompt: Optional[str] = None,
                 prompt_stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdin
        self.prompt = prompt
        self.prompt_stream = prompt_stream if prompt_stream is not None else sys.stdout
        self._buffer = ''
        self._eof = False
        self.waiting = False  # blocked in readline()

    def _fill(self) -> bool:
        """Append the next line to the buffer. False on EOF."""
        if self._eof:
            return False

        if self.prompt:
            self.prompt_stream.write(self.prompt)
            self.prompt_stream.flush()

        self.waiting = True
        try:
            line = self.stream.readline()
        finally:
            self.waiting = False

        if not line:
            self._eof = True
            return False

        self._buffer += line
        return True

    def read_integer(self) -> Optional[int]:
        """Next integer token (leading whitespace skipped), or None."""
        while True:
            self._buffer = self._buffer.lstrip()
            if self._buffer or not self._fill():
                break

        match = INTEGER_TOKEN.match(self._buffer)
        if not match:
            return None

        self._buffer = self._buffer[match.end():]
        return int(match.group())

    def read_char(self) -> Optional[str]:
        """Next character (newlines included), or None on EOF."""
        if not self._buffer and not self._fill():
            return None

        char, self._buffer = self._buffer[0], self._buffer[1:]
        return char


class StreamOutput:
    """Writes program output to a text stream, flushing after each write."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout
        self.written = False

    def write_text(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()
        self.written = True

    def write_char(self, char: str) -> None:
        self.write_text(char)


class BufferedOutput:
    """Collects output in memory (used by tests and embedding callers)."""

    def __init__(self):
        self.parts: List[str] = []

    def write_text(self, text: str) -> None:
        self.parts.append(text)

    def write_char(self, char: str) -> None:
        self.parts.append(char)

    def getvalue(self) -> str:
        return ''.join(self.parts)


class NullInput:
    """Input source that is always at EOF."""

    def read_integer(self) -> Optional[int]:
        return None

    def read_char(self) -> Optional[str]:
        return None
