"""Canonical textual rendering of TALE expressions.

Lists print with a comma between items and no spaces: `(+,1,2)`. Numbers
print in positional notation with the shortest digits that round-trip, and
without a fractional part when they are integral.
"""

from __future__ import annotations

import math

import numpy as np

from tale import LispValue
from tale.types.symbol import Symbol
from tale.types.closure import Closure
from tale.types.primitive import Primitive


def format_number(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    # trim='-' drops trailing zeros and a trailing decimal point: 3.0 -> "3"
    return np.format_float_positional(value, unique=True, trim="-")


def to_string(expr: LispValue) -> str:
    if isinstance(expr, bool):
        return "true" if expr else "false"
    if isinstance(expr, Symbol):
        return expr.id
    if isinstance(expr, float):
        return format_number(expr)
    if isinstance(expr, list):
        return "(" + ",".join(to_string(x) for x in expr) + ")"
    if isinstance(expr, (Primitive, Closure)):
        return str(expr)
    return str(expr)
