# Core type aliases for TALE's data model.
# Expressions are plain Python values, used for both code (forms) and runtime values:
#
# - symbols   -> tale.types.symbol.Symbol
# - numbers   -> float (the only numeric type)
# - booleans  -> bool
# - lists     -> Python list
# - functions -> tale.types.primitive.Primitive (built-in operations)
# - closures  -> tale.types.closure.Closure (user-defined, non-capturing)
#
# Naming guidance:
# - SExpression: use in reader/parser code to denote syntactic forms.
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both resolve to `Any` and are interchangeable.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Evaluator function type passed into special forms and call-frame construction
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
