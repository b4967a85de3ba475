"""Exception types raised while collecting and writing configuration."""

from __future__ import annotations


class CollectionError(RuntimeError):
    """Raised when a collection stage cannot complete; aborts the whole run."""


class InputShapeError(CollectionError):
    """Raised when an input line does not have the expected token layout."""


class InputReadError(CollectionError):
    """Raised when the input stream fails or ends while an answer is required."""


class OutputError(RuntimeError):
    """Raised when the assembled document cannot be serialized or written."""


__all__ = ["CollectionError", "InputReadError", "InputShapeError", "OutputError"]
