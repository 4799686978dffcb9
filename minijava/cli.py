"""Command-line entry point: check a MiniJava source file."""

from __future__ import annotations

import os
import sys

from .parser import ParseError, parse
from .scanner import LexicalError

SUCCESS_MESSAGE = "Compilação concluida!"


def main(argv: list[str] | None = None) -> int:
    """Check the file named by the first argument; return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "minijava"
        print(f"Erro: Arquivo não fornecido.{prog}")
        return 1

    file_name = argv[0]
    try:
        with open(file_name, encoding="utf-8", errors="replace") as handle:
            source = handle.read()
    except OSError:
        print(f"Erro: Nao foi possivel abrir o arquivo '{file_name}'.")
        return 1

    try:
        parse(source)
    except LexicalError as error:
        print(error, file=sys.stderr)
        return 1
    except ParseError as error:
        print(error)
        return 1

    print(SUCCESS_MESSAGE)
    return 0


if __name__ == "__main__":
    sys.exit(main())