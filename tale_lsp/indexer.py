from __future__ import annotations

"""
Lightweight indexer for TALE source without evaluating code.

We scan the buffer once and record:
- definitions: (def name value), kind "function" when value is an (fn ...) form
- the parenthesis balance, the first unexpected `)` and the last unclosed `(`
- the first error the TALE reader raises for the buffer, if any

Only enough structure is kept to power the language server (document symbols,
hover, completion and diagnostics).
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional, Tuple
import re

from tale.errors import TaleError
from tale.reader.lexer import tokenize
from tale.reader.parser import parse_all

TOKEN_REGEX = re.compile(r"\(|\)|[^\s()]+")


@dataclass
class SymbolDef:
    name: str
    kind: str  # "var" | "function"
    line: int
    col: int


@dataclass
class DocumentIndex:
    symbols: Dict[str, SymbolDef] = field(default_factory=dict)
    paren_balance: int = 0
    unexpected_close: Optional[Tuple[int, int]] = None
    unclosed_open: Optional[Tuple[int, int]] = None
    reader_error: Optional[str] = None


def _iter_tokens(text: str):
    for m in TOKEN_REGEX.finditer(text):
        yield m.group(0), m.start()


def _position_from_offset(text: str, offset: int) -> Tuple[int, int]:
    # Return (line, col), 0-based
    line = text.count("\n", 0, offset)
    last_nl = text.rfind("\n", 0, offset)
    col = offset if last_nl == -1 else offset - last_nl - 1
    return line, col


def _reader_error(text: str) -> Optional[str]:
    try:
        for _ in parse_all(tokenize(text)):
            pass
    except TaleError as ex:
        return str(ex)
    return None


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex()
    tokens = list(_iter_tokens(text))
    open_stack: List[int] = []

    for i, (tok, start) in enumerate(tokens):
        if tok == "(":
            idx.paren_balance += 1
            open_stack.append(start)
            # (def name value)
            if i + 2 < len(tokens) and tokens[i + 1][0] == "def":
                name, name_start = tokens[i + 2]
                if name not in ("(", ")"):
                    kind = "var"
                    if i + 4 < len(tokens) and tokens[i + 3][0] == "(" and tokens[i + 4][0] == "fn":
                        kind = "function"
                    line, col = _position_from_offset(text, name_start)
                    idx.symbols[name] = SymbolDef(name=name, kind=kind, line=line, col=col)
        elif tok == ")":
            idx.paren_balance -= 1
            if open_stack:
                open_stack.pop()
            elif idx.unexpected_close is None:
                idx.unexpected_close = _position_from_offset(text, start)

    if open_stack:
        idx.unclosed_open = _position_from_offset(text, open_stack[-1])
    idx.reader_error = _reader_error(text)
    return idx


# Signatures for hover/signature help without eval
BUILTIN_SIGNATURES: Dict[str, str] = {
    "+": "(+ nums...)",
    "-": "(- x nums...)",
    "=": "(= x nums...)",
    ">": "(> x nums...)",
    ">=": "(>= x nums...)",
    "<": "(< x nums...)",
    "<=": "(<= x nums...)",
}

SPECIAL_FORM_SIGNATURES: Dict[str, str] = {
    "if": "(if test then else)",
    "def": "(def name value)",
    "fn": "(fn (params) body)",
}
