from tale import EvaluatorFn
from tale import SExpression, LispValue
from tale.errors import TaleArityError, TaleTypeError
from tale.printer import to_string
from tale.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (if test then else)
    The test must evaluate to a boolean. Only the chosen branch is evaluated.
    """
    if not tail:
        raise TaleArityError("expected test form")

    test_form = tail[0]
    test = evaluate_fn(test_form, env)
    if not isinstance(test, bool):
        raise TaleTypeError(f"unexpected test form='{to_string(test_form)}'")

    idx = 1 if test else 2
    if idx >= len(tail):
        raise TaleArityError(f"expected form idx={idx}")
    return evaluate_fn(tail[idx], env)
