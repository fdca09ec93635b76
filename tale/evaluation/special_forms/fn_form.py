from tale import EvaluatorFn
from tale import SExpression, LispValue
from tale.errors import TaleArityError
from tale.types.closure import Closure
from tale.types.environment import Environment


def fn_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # Neither form is evaluated or validated here; the parameter list is
    # checked when the closure is called.
    if not tail:
        raise TaleArityError("expected args form")
    if len(tail) < 2:
        raise TaleArityError("expected second form")
    if len(tail) > 2:
        raise TaleArityError("fn definition can only have two forms ")

    params, body = tail
    return Closure(params, body)
