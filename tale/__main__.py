from __future__ import annotations

import logging
import sys

from tale import config


def run(query: str) -> None:
    if query == "repl":
        from tale.repl import repl
        repl()
    elif query == "--serve":
        from tale_lsp.repl_server import ReplServer
        host, port = config.get_repl_address()
        ReplServer(host, port).serve_forever()
    elif query == "--lsp":
        from tale_lsp.server import main as lsp_main
        lsp_main()
    else:
        # Running script files is not supported yet
        print(f"Doing file: {query}")


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=config.get_log_level())
    limit = config.get_recursion_limit()
    if limit is not None:
        sys.setrecursionlimit(limit)

    if not args:
        run("repl")
    elif len(args) == 1:
        run(args[0])
    else:
        print("Confusing number of params...")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
