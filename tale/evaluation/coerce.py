"""Helpers extracting floats and symbol names from evaluated values."""

from __future__ import annotations

from typing import Iterable

from tale import LispValue, SExpression
from tale.errors import TaleTypeError
from tale.types.symbol import Symbol


def parse_single_float(value: LispValue) -> float:
    # bool is an int subclass, never a number here
    if isinstance(value, float):
        return value
    raise TaleTypeError("expected a number")


def parse_list_of_floats(values: Iterable[LispValue]) -> list[float]:
    return [parse_single_float(v) for v in values]


def parse_list_of_symbol_strings(form: SExpression) -> list[str]:
    if not isinstance(form, list):
        raise TaleTypeError("expected args form to be a list")
    names: list[str] = []
    for x in form:
        if not isinstance(x, Symbol):
            raise TaleTypeError("expected symbols in the argument list")
        names.append(x.id)
    return names
