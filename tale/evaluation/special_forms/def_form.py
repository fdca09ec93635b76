from tale import EvaluatorFn
from tale import SExpression, LispValue
from tale.errors import TaleArityError, TaleTypeError
from tale.types.environment import Environment
from tale.types.symbol import Symbol


def def_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (def name value)
    Binds in the current frame only and returns the name symbol, not the value.
    """
    if not tail:
        raise TaleArityError("expected first form")
    name = tail[0]
    if not isinstance(name, Symbol):
        raise TaleTypeError("expected first form to be a symbol")
    if len(tail) < 2:
        raise TaleArityError("expected second form")
    if len(tail) > 2:
        raise TaleArityError("def can only have two forms ")

    value = evaluate_fn(tail[1], env)
    env.define(name, value)
    return name
