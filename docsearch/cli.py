"""Command-line entry point dispatching to the document commands."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from docsearch.command_load import command_load
from docsearch.command_search import command_search
from docsearch.config import ArgumentError, HelpRequested, parse_arguments, usage_text

PROGRAM_NAME = "docsearch"
_UNAVAILABLE_COMMANDS = frozenset({"index", "analyze"})


def _print_intro(program: str) -> None:
    print(" SISTEMA AVANZADO DE ANÁLISIS DE DOCUMENTOS  ")
    print("Desarrollado para análisis de texto y búsqueda de patrones")
    print("Versión 1.0 - Algoritmos de Texto\n")
    print(f"Use '{program} help' para ver los comandos disponibles.")
    print(f"Ejemplo: {program} help")


def main(argv: Sequence[str] | None = None) -> int:
    """Run one command; ``argv`` holds the arguments after the program name."""
    args = list(sys.argv[1:] if argv is None else argv)
    program = PROGRAM_NAME

    if not args:
        _print_intro(program)
        return 0

    command, options = args[0], args[1:]
    try:
        config = parse_arguments(options)
    except HelpRequested:
        print(usage_text(program), end="")
        return 0
    except ArgumentError as exc:
        print(f"{program}: {exc}", file=sys.stderr)
        print("Error en los argumentos. Use --help para ver la ayuda.")
        return 1

    result = 0
    if command == "load":
        result = command_load(config)
    elif command == "search":
        result = command_search(config)
    elif command == "benchmark":
        pass
    elif command in _UNAVAILABLE_COMMANDS:
        print(f"Comando no disponible: {command}")
        result = 1
    elif command == "help":
        print(usage_text(program), end="")
    else:
        print(f"Comando desconocido: {command}")
        print(f"Use '{program} help' para ver los comandos disponibles.")
        result = 1

    if result == 0:
        print("\n¡Operación completada exitosamente!")
    else:
        print("\nLa operación terminó con errores.")
    return result


if __name__ == "__main__":
    raise SystemExit(main())