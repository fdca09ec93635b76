"""User-defined function values created by the `fn` special form."""

from __future__ import annotations

from tale import SExpression


class Closure:
    """A parameter form and a body form, with no captured environment.

    The body is evaluated in a fresh frame whose parent is the *caller's*
    environment, so free variables resolve against the call site, not the
    definition site. `params` is kept as the raw form; it is only checked to
    be a list of symbols when the closure is invoked.
    """

    __slots__ = ("params", "body")

    def __init__(self, params: SExpression, body: SExpression):
        self.params: SExpression = params
        self.body: SExpression = body

    def __str__(self) -> str:
        return "Lambda {}"

    def __repr__(self) -> str:
        return f"Closure(params={self.params!r}, body={self.body!r})"
