"""Error taxonomy for TALE.

Every failure produced by the reader, the environment and the evaluator is a
TaleGenericError (or one of its refinements). TaleUnbalancedParens and
TaleSyntaxError are part of the taxonomy but nothing raises them yet; callers
should still treat them as legitimate outcomes.
"""


class TaleError(Exception):
    """ Base class for all TALE errors"""

    @property
    def message(self) -> str:
        return str(self)


class TaleUnbalancedParens(TaleError):
    """ Unbalanced parens, carrying how many closing parens are missing"""

    def __init__(self, count: int):
        super().__init__(f"Unbalanced parens, need {count} more")
        self.count = count


class TaleSyntaxError(TaleError):
    """ Syntax error at a line and column"""

    def __init__(self, line: int, column: int):
        super().__init__(f"Syntax error at line {line}, column {column}")
        self.line = line
        self.column = column


class TaleGenericError(TaleError):
    """ Generic message-carrying error, raised at every validation point"""


class TaleReaderError(TaleGenericError):
    """ Raised when the token stream cannot be read into an expression"""


class TaleUnboundSymbol(TaleGenericError):
    """ Raised when a symbol is not bound anywhere in the environment chain"""

    def __init__(self, name: str):
        super().__init__(f"Unexpected symbol '{name}'")
        self.name = name


class TaleArityError(TaleGenericError):
    """ Raised when a form or function receives the wrong number of arguments"""


class TaleTypeError(TaleGenericError):
    """ Raised when a value has the wrong type for where it is used"""
