from tale.reader.lexer import tokenize
from tale.reader.parser import parse, parse_all, parse_atom, read_seq, TokenStream

__all__ = ["tokenize", "parse", "parse_all", "parse_atom", "read_seq", "TokenStream"]
