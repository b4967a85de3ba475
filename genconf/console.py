"""Line-oriented prompt/response channel used by the collectors."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from .errors import InputReadError, InputShapeError


class Console:
    """Writes prompts to one text stream and reads answers from another."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout

    def show(self, text: str) -> None:
        """Write text without a trailing newline and flush it to the operator."""
        self._stdout.write(text)
        self._stdout.flush()

    def read_line(self) -> Optional[str]:
        """Return the next input line without its line ending, or None at end of input."""
        try:
            line = self._stdin.readline()
        except OSError as exc:
            raise InputReadError(f"read input: {exc}") from exc
        if not line:
            return None
        if line.endswith("\n"):
            line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
        return line

    def read_token(self, prompt: str) -> str:
        """Prompt for and return exactly one whitespace-free token."""
        self.show(prompt)
        line = self.read_line()
        if line is None:
            raise InputReadError("unexpected end of input")
        tokens = line.split()
        if not tokens:
            raise InputShapeError("unexpected newline")
        if len(tokens) != 1:
            raise InputShapeError(f"wrong number of tokens: {len(tokens)}")
        return tokens[0]


__all__ = ["Console"]
