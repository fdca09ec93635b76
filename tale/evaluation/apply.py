"""Application engine for TALE.

Centralizes function application for the evaluator:
- Primitives receive the already-evaluated argument values.
- Closures get a fresh call frame whose parent is the caller's environment;
  arguments are evaluated left to right in the caller's environment and
  bound by position, with an exact arity check.
"""

from __future__ import annotations

from tale import EvaluatorFn, LispValue, SExpression
from tale.errors import TaleArityError, TaleTypeError
from tale.evaluation.coerce import parse_list_of_symbol_strings
from tale.types.closure import Closure
from tale.types.environment import Environment
from tale.types.primitive import Primitive


def eval_forms(
    arg_forms: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> list[LispValue]:
    return [evaluate_fn(form, env) for form in arg_forms]


def env_for_lambda(
    params: SExpression,
    arg_forms: list[SExpression],
    caller_env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Environment:
    """Build the call frame for a closure invocation.

    Raises TaleTypeError if `params` is not a list of symbols and
    TaleArityError if the argument count differs from the parameter count.
    """
    names = parse_list_of_symbol_strings(params)
    if len(names) != len(arg_forms):
        raise TaleArityError(
            f"expected {len(names)} arguments, got {len(arg_forms)}"
        )
    values = eval_forms(arg_forms, caller_env, evaluate_fn)
    return Environment(dict(zip(names, values)), outer=caller_env)


def apply(
    head: LispValue,
    arg_forms: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply an evaluated head to unevaluated argument forms."""
    if isinstance(head, Primitive):
        return head(eval_forms(arg_forms, env, evaluate_fn))
    if isinstance(head, Closure):
        frame = env_for_lambda(head.params, arg_forms, env, evaluate_fn)
        return evaluate_fn(head.body, frame)
    raise TaleTypeError("first form must be a function")
