"""Program options and command-line parsing."""

from __future__ import annotations

import re
from dataclasses import dataclass


class HelpRequested(Exception):
    """Raised when the command line asks for the usage text."""


class ArgumentError(ValueError):
    """Raised for an unknown option or a missing option argument."""


@dataclass
class ProgramConfig:
    """Everything the commands need to know about one run."""

    corpus_path: str | None = None
    output_file: str | None = None
    search_pattern: str | None = None
    index_file: str | None = None
    recursive: bool = False
    txt_only: bool = False
    html_only: bool = False
    show_stats: bool = False
    process_docs: bool = True
    build_index: bool = False
    search_mode: bool = False
    benchmark_mode: bool = False
    approximate_search: bool = False
    export_csv: bool = False
    export_json: bool = False
    limit: int = -1
    max_distance: int = 2
    output_format: str = "text"


# Long option name -> whether it takes an argument.
_LONG_OPTIONS: dict[str, bool] = {
    "input": True,
    "output": True,
    "format": True,
    "pattern": True,
    "algorithm": True,
    "limit": True,
    "max-distance": True,
    "index-file": True,
    "top-words": True,
    "min-size": True,
    "max-size": True,
    "recursive": False,
    "txt-only": False,
    "html-only": False,
    "stats": False,
    "verbose": False,
    "approximate": False,
    "case-sensitive": False,
    "rebuild-index": False,
    "trie": False,
    "hash": False,
    "word-freq": False,
    "similarity": False,
    "help": False,
}

_SHORT_OPTIONS: dict[str, str] = {
    "i": "input",
    "o": "output",
    "f": "format",
    "p": "pattern",
    "a": "algorithm",
    "l": "limit",
    "r": "recursive",
    "t": "txt-only",
    "h": "html-only",
    "s": "stats",
    "v": "verbose",
}

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _resolve_long(name: str) -> str:
    if name in _LONG_OPTIONS:
        return name
    candidates = [option for option in _LONG_OPTIONS if option.startswith(name)]
    if len(candidates) == 1:
        return candidates[0]
    if not candidates:
        raise ArgumentError(f"unrecognized option '--{name}'")
    raise ArgumentError(f"option '--{name}' is ambiguous")


def _apply(config: ProgramConfig, name: str, value: str | None) -> None:
    match name:
        case "input":
            config.corpus_path = value
        case "output":
            config.output_file = value
        case "format":
            config.output_format = value
            if value == "csv":
                config.export_csv = True
            elif value == "json":
                config.export_json = True
        case "pattern":
            config.search_pattern = value
        case "limit":
            config.limit = _atoi(value)
        case "recursive":
            config.recursive = True
        case "txt-only":
            config.txt_only = True
        case "html-only":
            config.html_only = True
        case "stats":
            config.show_stats = True
        case "max-distance":
            config.max_distance = _atoi(value)
        case "index-file":
            config.index_file = value
        case "approximate":
            config.approximate_search = True
        case "help":
            raise HelpRequested()
        case _:
            # Accepted for compatibility; these options have no effect.
            pass


def parse_arguments(argv: list[str]) -> ProgramConfig:
    """Build a configuration from the options that follow the command name.

    Options are handled in order; arguments that are not options are
    skipped, and ``--`` ends option processing. Long options may be given
    by any unambiguous prefix. Raises HelpRequested for ``--help`` and
    ArgumentError for an unknown option or a missing argument.
    """
    config = ProgramConfig()
    args = iter(argv)
    for arg in args:
        if arg == "--":
            break
        if arg.startswith("--"):
            given, has_value, value = arg[2:].partition("=")
            name = _resolve_long(given)
            if _LONG_OPTIONS[name]:
                if not has_value:
                    value = next(args, None)
                    if value is None:
                        raise ArgumentError(f"option '--{name}' requires an argument")
                _apply(config, name, value)
            else:
                if has_value:
                    raise ArgumentError(f"option '--{name}' doesn't allow an argument")
                _apply(config, name, None)
        elif arg.startswith("-") and arg != "-":
            body = arg[1:]
            for pos, letter in enumerate(body):
                name = _SHORT_OPTIONS.get(letter)
                if name is None:
                    raise ArgumentError(f"invalid option -- '{letter}'")
                if _LONG_OPTIONS[name]:
                    value = body[pos + 1 :] or next(args, None)
                    if value is None:
                        raise ArgumentError(
                            f"option requires an argument -- '{letter}'"
                        )
                    _apply(config, name, value)
                    break
                _apply(config, name, None)
    return config


def usage_text(program_name: str) -> str:
    """Return the full help text for ``program_name``."""
    p = program_name
    return (
        "\n=== SISTEMA AVANZADO DE ANÁLISIS DE DOCUMENTOS ===\n\n"
        f"Uso: {p} [COMANDO] [OPCIONES]\n\n"
        "COMANDOS:\n"
        "  load        Cargar y procesar documentos desde un directorio\n"
        "  index       Construir índice de documentos para búsqueda rápida\n"
        "  search      Buscar patrones en documentos indexados\n"
        "  benchmark   Ejecutar pruebas de rendimiento de algoritmos\n"
        "  analyze     Analizar estadísticas de documentos\n"
        "  help        Mostrar esta ayuda\n\n"
        "OPCIONES GENERALES:\n"
        "  -i, --input DIR         Directorio de documentos (obligatorio)\n"
        "  -o, --output FILE       Archivo de salida para resultados\n"
        "  -f, --format FORMAT     Formato de salida: text, csv, json (default: text)\n"
        "  -r, --recursive         Buscar archivos recursivamente\n"
        "  -l, --limit N           Limitar a N documentos\n"
        "  -v, --verbose           Mostrar información detallada\n"
        "  --help                  Mostrar esta ayuda\n\n"
        "OPCIONES DE FILTRADO:\n"
        "  -t, --txt-only          Cargar solo archivos de texto\n"
        "  -h, --html-only         Cargar solo archivos HTML\n"
        "  --min-size SIZE         Tamaño mínimo de archivo en bytes\n"
        "  --max-size SIZE         Tamaño máximo de archivo en bytes\n\n"
        "OPCIONES DE BÚSQUEDA:\n"
        "  -p, --pattern PATTERN   Patrón a buscar (obligatorio para search)\n"
        "  -a, --algorithm ALG     Algoritmo: kmp, shift-and, shift-or (default: kmp)\n"
        "  --approximate           Búsqueda aproximada con tolerancia a errores\n"
        "  --max-distance N        Distancia máxima para búsqueda aproximada (default: 2)\n"
        "  --case-sensitive        Búsqueda sensible a mayúsculas/minúsculas\n\n"
        "OPCIONES DE INDEXACIÓN:\n"
        "  --index-file FILE       Archivo donde guardar/cargar el índice\n"
        "  --rebuild-index         Forzar reconstrucción del índice\n"
        "  --trie                  Usar estructura Trie para indexación\n"
        "  --hash                  Usar tabla hash para indexación\n\n"
        "OPCIONES DE ANÁLISIS:\n"
        "  -s, --stats             Mostrar estadísticas detalladas\n"
        "  --top-words N           Mostrar las N palabras más frecuentes\n"
        "  --word-freq             Generar análisis de frecuencia de palabras\n"
        "  --similarity            Calcular similitud entre documentos\n\n"
        "EJEMPLOS DE USO:\n"
        "  # Cargar documentos y mostrar estadísticas\n"
        f"  {p} load -i corpus/ -r -s\n\n"
        "  # Construir índice de documentos\n"
        f"  {p} index -i corpus/ -r --index-file corpus.idx --trie\n\n"
        "  # Buscar patrón usando KMP\n"
        f"  {p} search -i corpus/ -p \"algoritmo\" -a kmp --index-file corpus.idx\n\n"
        "  # Búsqueda aproximada con máximo 2 errores\n"
        f"  {p} search -i corpus/ -p \"algortimo\" --approximate --max-distance 2\n\n"
        "  # Benchmark de algoritmos\n"
        f"  {p} benchmark -i corpus/ -p \"patrón\" -o results.csv -f csv\n\n"
        "  # Análisis de texto con palabras frecuentes\n"
        f"  {p} analyze -i corpus/ -s --top-words 20 --word-freq\n\n"
        "FORMATOS DE SALIDA:\n"
        "  text        Formato de texto legible (default)\n"
        "  csv         Valores separados por comas\n"
        "  json        Formato JSON estructurado\n\n"
    )