"""Interactive line-oriented front-end for TALE."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from tale.errors import TaleError
from tale.interpreter import Interpreter
from tale.printer import to_string

logger = logging.getLogger(__name__)

BANNER = "Welcome to the TALE repl. Trying some lisp expressions."
PROMPT = "\nTALE >"


def eval_line(interp: Interpreter, line: str) -> str:
    """Evaluate one input line and render the outcome as the REPL prints it."""
    try:
        result = interp.eval(line)
    except TaleError as ex:
        logger.info("evaluation failed: %s", ex)
        return f"// Error: {ex}"
    except RecursionError:
        logger.warning("evaluation exhausted the host stack")
        return "// Error: maximum recursion depth exceeded"
    return f"// 🔥 => {to_string(result)}"


def repl(
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    interp: Interpreter | None = None,
) -> None:
    """Read lines until EOF, printing each result or error."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    interp = interp if interp is not None else Interpreter()

    print(BANNER, file=stdout)
    while True:
        print(PROMPT, file=stdout, flush=True)
        line = stdin.readline()
        if not line:
            break
        if not line.strip():
            continue
        print(eval_line(interp, line), file=stdout)
