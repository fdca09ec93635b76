"""Built-in primitives for the TALE root environment.

Arithmetic (`+`, `-`) and chainable numeric comparisons (`=`, `>`, `>=`,
`<`, `<=`). Every primitive receives already-evaluated arguments.
"""

from __future__ import annotations

import logging
import operator
from typing import Callable

from tale import LispValue
from tale.errors import TaleArityError
from tale.evaluation.coerce import parse_list_of_floats
from tale.types.environment import Environment
from tale.types.primitive import Primitive, PrimitiveFn

logger = logging.getLogger(__name__)


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: list[LispValue]) -> float:
    """Sum of all arguments, 0 when there are none."""
    total = 0.0
    for x in parse_list_of_floats(args):
        total += x
    return total


def sub(args: list[LispValue]) -> float:
    """First argument minus the sum of the rest."""
    floats = parse_list_of_floats(args)
    if not floats:
        raise TaleArityError("expected at least one number")
    rest = 0.0
    for x in floats[1:]:
        rest += x
    return floats[0] - rest


# -------------------------------
# Comparison
# -------------------------------
def ensure_tonicity(check: Callable[[float, float], bool]) -> PrimitiveFn:
    """Build a primitive that holds when `check` holds for every adjacent pair."""

    def compare(args: list[LispValue]) -> bool:
        floats = parse_list_of_floats(args)
        if not floats:
            raise TaleArityError("Expected at least one number")
        return all(check(a, b) for a, b in zip(floats, floats[1:]))

    return compare


# -------------------------------
# Registration
# -------------------------------
PRIMITIVES: dict[str, Primitive] = {
    p.name: p
    for p in (
        Primitive("+", add),
        Primitive("-", sub),
        Primitive("=", ensure_tonicity(operator.eq)),
        Primitive(">", ensure_tonicity(operator.gt)),
        Primitive(">=", ensure_tonicity(operator.ge)),
        Primitive("<", ensure_tonicity(operator.lt)),
        Primitive("<=", ensure_tonicity(operator.le)),
    )
}


def register(env: Environment) -> None:
    """Bind every primitive into `env`."""
    for name, prim in PRIMITIVES.items():
        env.define(name, prim)


def default_environment() -> Environment:
    """Root environment holding the primitive library, with no parent."""
    env = Environment()
    register(env)
    logger.debug("default environment created with %d primitives", len(PRIMITIVES))
    return env
