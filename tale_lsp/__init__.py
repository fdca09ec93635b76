"""TALE Language Server and REPL integration package.

This package provides:
- A pygls-based Language Server for TALE source buffers.
- A lightweight indexer that scans documents for `def` forms without evaluation.
- A simple TCP REPL server evaluating code in one shared Interpreter session.

Note: The language server does not evaluate user buffers; it only reads them.
"""

__all__ = [
    "server",
    "indexer",
    "repl_server",
]
