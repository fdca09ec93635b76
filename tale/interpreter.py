from __future__ import annotations

import logging

from tale import LispValue
from tale.builtins import default_environment
from tale.evaluation.evaluator import evaluate
from tale.reader.lexer import tokenize
from tale.reader.parser import parse, parse_all
from tale.types.environment import Environment

logger = logging.getLogger(__name__)


def parse_eval(text: str, env: Environment) -> LispValue:
    """Tokenize `text`, read its first form and evaluate it in `env`.

    Any forms after the first one are ignored.
    """
    expr, _ = parse(tokenize(text))
    return evaluate(expr, env)


class Interpreter:
    """
    A TALE session: a root environment that persists across evaluations,
    so `def` bindings made by one call are visible to the next.
    """

    def __init__(self, env: Environment | None = None):
        self.env: Environment = env if env is not None else default_environment()
        logger.debug("interpreter session started")

    def eval(self, code: str) -> LispValue:
        return parse_eval(code, self.env)

    def eval_all(self, code: str) -> list[LispValue]:
        """Evaluate every top-level form in `code`, in order."""
        results: list[LispValue] = []
        for expr in parse_all(tokenize(code)):
            results.append(evaluate(expr, self.env))
        return results
