"""Operator parsing, typed comparison and value validation for table cells."""

from __future__ import annotations

import math
import operator as _op
import re
import struct
from collections.abc import Callable

OPERATORS = ("=", "!=", "<", ">", "<=", ">=")
"""Comparison operators understood in conditions."""

_ORDERING: dict[str, Callable[[object, object], bool]] = {
    "=": _op.eq,
    "!=": _op.ne,
    "<": _op.lt,
    ">": _op.gt,
    "<=": _op.le,
    ">=": _op.ge,
}

_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|[+-]?(?:inf(?:inity)?|nan))",
    re.IGNORECASE,
)


class QueryError(ValueError):
    """Raised when a query names a missing table or column or holds a bad value."""


def _leading_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _leading_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if not match:
        return 0.0
    number = float(match.group(1))
    try:
        return struct.unpack("f", struct.pack("f", number))[0]
    except OverflowError:
        return math.copysign(math.inf, number)


def split_operator(condition: str) -> tuple[str, str]:
    """Split a leading operator off ``condition``; without one the operator is ``=``.

    An operator is only recognised when the condition is at least two characters long.
    """
    if len(condition) >= 2:
        for prefix in (">=", "<=", "!="):
            if condition.startswith(prefix):
                return prefix, condition[2:]
        if condition[0] in "<>=":
            return condition[0], condition[1:]
    return "=", condition


def compare(cell: str, value: str, column_type: str, operator: str) -> bool:
    """Return whether ``cell <operator> value`` holds for a column of ``column_type``.

    INT and BOOL columns compare the leading integers of both sides, FLOAT columns
    their leading single-precision numbers; any other type compares the text and
    supports only ``=`` and ``!=``. An unknown operator never matches.
    """
    test = _ORDERING.get(operator)
    if test is None:
        return False
    kind = column_type.upper()
    if kind in ("INT", "BOOL"):
        return test(_leading_int(cell), _leading_int(value))
    if kind == "FLOAT":
        return test(_leading_float(cell), _leading_float(value))
    if operator in ("=", "!="):
        return test(cell, value)
    return False


def _is_int_text(value: str) -> bool:
    return all(c in "0123456789" or (i == 0 and c == "-") for i, c in enumerate(value))


def _is_float_text(value: str) -> bool:
    dot_seen = False
    for i, c in enumerate(value):
        if c == ".":
            if dot_seen:
                return False
            dot_seen = True
        elif not (c in "0123456789" or (i == 0 and c == "-")):
            return False
    return True


def validate_value(value: str, column_type: str) -> str:
    """Return ``value`` if it is valid text for ``column_type``; raise QueryError otherwise."""
    kind = column_type.upper()
    if kind == "INT":
        if not _is_int_text(value):
            raise QueryError(f"Type error: '{value}' is not a valid INT.")
    elif kind == "FLOAT":
        if not _is_float_text(value):
            raise QueryError(f"Type error: '{value}' is not a valid FLOAT.")
    elif kind == "BOOL":
        if value not in ("true", "false", "1", "0"):
            raise QueryError(
                f"Type error: '{value}' is not a valid BOOL (true/false/1/0)."
            )
    elif kind != "STRING":
        raise QueryError(f"Unknown data type: {kind}")
    return value