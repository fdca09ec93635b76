"""Core evaluator for the TALE interpreter.

Plain recursive evaluation over the host call stack: there is no trampoline
and no tail-call elimination, so very deep recursion in user programs ends in
Python's RecursionError, which is not a TaleError.
"""

from __future__ import annotations

from tale import SExpression, LispValue
from tale.errors import TaleGenericError, TaleUnboundSymbol
from tale.evaluation.apply import apply
from tale.evaluation.special_forms import SPECIAL_FORMS
from tale.types.environment import Environment
from tale.types.symbol import Symbol


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Reduce `expr` to a value in `env`. `def` forms mutate `env`."""
    match expr:
        case Symbol():
            value = env.lookup(expr)
            if value is None:
                raise TaleUnboundSymbol(expr.id)
            return value

        case bool() | float():
            return expr

        case []:
            raise TaleGenericError("expected a non-empty list")

        case [head, *arg_forms]:
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](arg_forms, env, evaluate)
            return apply(evaluate(head, env), arg_forms, env, evaluate)

    # Primitives and closures are only valid in call position
    raise TaleGenericError("unexpected form")
