"""Scalar type inference for operator-supplied value tokens."""

from __future__ import annotations

import math
import re
from typing import Callable, Optional, Sequence, Union

Value = Union[bool, int, float, str]

_TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)
_HEX_FLOAT_PATTERN = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+"
)
# Only infinities take a sign; a signed "nan" stays a string.
_SPECIAL_FLOAT_PATTERN = re.compile(r"[+-]?inf(?:inity)?|nan", re.IGNORECASE)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def parse_bool(token: str) -> Optional[bool]:
    """Return the boolean meaning of a canonical literal, or None."""
    if token in _TRUE_LITERALS:
        return True
    if token in _FALSE_LITERALS:
        return False
    return None


def parse_int(token: str) -> Optional[int]:
    """Return a base-10 integer within the signed 64-bit range, or None."""
    if not _INT_PATTERN.fullmatch(token):
        return None
    value = int(token)
    if value < INT64_MIN or value > INT64_MAX:
        return None
    return value


def parse_float(token: str) -> Optional[float]:
    """Return a decimal, hexadecimal, or special float value, or None.

    Literals that overflow double precision are rejected rather than
    collapsed to infinity; only the spelled-out ``inf``/``infinity``
    forms produce infinite values. Hexadecimal literals need a binary
    ``p`` exponent.
    """
    if _SPECIAL_FLOAT_PATTERN.fullmatch(token):
        return float(token)
    if _HEX_FLOAT_PATTERN.fullmatch(token):
        return _parse_hex_float(token)
    if not _FLOAT_PATTERN.fullmatch(token):
        return None
    value = float(token)
    if math.isinf(value):
        return None
    return value


def _parse_hex_float(token: str) -> Optional[float]:
    try:
        value = float.fromhex(token)
    except OverflowError:
        return None
    if math.isinf(value):
        return None
    return value


_PARSERS: Sequence[Callable[[str], Optional[Value]]] = (
    parse_bool,
    parse_int,
    parse_float,
)


def infer_value(token: str) -> Value:
    """Convert a token to bool, int, float, or leave it as a string, in that order."""
    for parser in _PARSERS:
        value = parser(token)
        if value is not None:
            return value
    return token


__all__ = [
    "INT64_MAX",
    "INT64_MIN",
    "Value",
    "infer_value",
    "parse_bool",
    "parse_float",
    "parse_int",
]
