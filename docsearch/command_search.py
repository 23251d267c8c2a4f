"""The ``search`` command: find a pattern in every document of a corpus."""

from __future__ import annotations

import contextlib
import sys
import time
from typing import TextIO

from docsearch.config import ProgramConfig
from docsearch.documents import (
    Document,
    DocumentCollection,
    load_documents_from_directory,
)
from docsearch.kmp import kmp_search

_PROGRESS_EVERY = 50
_CONTEXT_WIDTH = 30
_SHOWN_MATCHES = 10


def _find_positions(content: bytes, pattern: bytes) -> list[int]:
    """Byte offsets of every match; an empty pattern matches nothing."""
    try:
        return kmp_search(content, pattern).positions
    except ValueError:
        return []


def _context(content: bytes, position: int, pattern_len: int) -> str:
    start = max(position - _CONTEXT_WIDTH, 0)
    end = min(position + pattern_len + _CONTEXT_WIDTH, len(content))
    snippet = content[start:end].decode("utf-8", errors="replace")
    return snippet.replace("\n", " ").replace("\r", " ")


def _write_csv_row(output: TextIO, doc: Document, positions: list[int]) -> None:
    joined = ",".join(str(p) for p in positions)
    output.write(f'"{doc.metadata.filename}",{len(positions)},"{joined}"\n')


def _write_json_entry(
    output: TextIO, doc: Document, positions: list[int], is_last: bool
) -> None:
    output.write("      {\n")
    output.write(f"        \"document\": \"{doc.metadata.filename}\",\n")
    output.write(f"        \"matches\": {len(positions)},\n")
    output.write("        \"positions\": [" + ", ".join(str(p) for p in positions) + "]\n")
    output.write("      }" + ("" if is_last else ",") + "\n")


def _write_text_entry(
    output: TextIO, doc: Document, content: bytes, positions: list[int], pattern_len: int
) -> None:
    output.write(f"\n=== {doc.metadata.filename} ===\n")
    output.write(f"Coincidencias encontradas: {len(positions)}\n")
    for pos in positions[:_SHOWN_MATCHES]:
        output.write(f"  Posición {pos}: ...{_context(content, pos, pattern_len)}...\n")
    if len(positions) > _SHOWN_MATCHES:
        output.write(
            f"  ... y {len(positions) - _SHOWN_MATCHES} coincidencias más\n"
        )


def command_search(config: ProgramConfig) -> int:
    """Search ``config.search_pattern`` in every document of the corpus.

    Positions are byte offsets into each document's cleaned text. Results go
    to ``config.output_file`` when given (as CSV, JSON or text), otherwise to
    standard output as text. Returns 0 on success and 1 when the corpus or
    the pattern is missing or no document could be loaded.
    """
    print("\n=== BÚSQUEDA DE PATRONES ===")

    if config.corpus_path is None or config.search_pattern is None:
        print("Error: Debe especificar directorio (-i) y patrón (-p)")
        return 1

    print(f"Buscando patrón: \"{config.search_pattern}\"")
    print(f"Directorio: {config.corpus_path}")

    collection = DocumentCollection()
    load_documents_from_directory(collection, config.corpus_path, config.recursive)
    if len(collection) == 0:
        print("Error: No se pudieron cargar documentos")
        return 1

    total_docs = len(collection)
    print(f"Documentos cargados: {total_docs}")

    start = time.process_time()
    total_matches = 0
    documents_with_matches = 0
    pattern = config.search_pattern.encode("utf-8")

    print("\nBuscando en documentos...")

    to_file = False
    with contextlib.ExitStack() as stack:
        output: TextIO = sys.stdout
        if config.output_file:
            try:
                output = stack.enter_context(
                    open(config.output_file, "w", encoding="utf-8")
                )
                to_file = True
            except OSError:
                print("Error: No se pudo abrir archivo de salida")

        as_csv = config.export_csv and to_file
        as_json = config.export_json and to_file and not as_csv

        if as_csv:
            output.write("document,matches,positions\n")
        elif as_json:
            output.write("{\n  \"search_results\": {\n")
            output.write(f"    \"pattern\": \"{config.search_pattern}\",\n")
            output.write("    \"documents\": [\n")

        for index, doc in enumerate(collection):
            if index % _PROGRESS_EVERY == 0:
                print(
                    f"  Progreso: {index + 1}/{total_docs} documentos",
                    end="\r",
                    flush=True,
                )
            content = doc.clean_content.encode("utf-8")
            positions = _find_positions(content, pattern)
            if not positions:
                continue

            documents_with_matches += 1
            total_matches += len(positions)
            if as_csv:
                _write_csv_row(output, doc, positions)
            elif as_json:
                _write_json_entry(output, doc, positions, index == total_docs - 1)
            else:
                _write_text_entry(output, doc, content, positions, len(pattern))

        if as_json:
            output.write("    ],\n")
            output.write("    \"summary\": {\n")
            output.write(f"      \"total_matches\": {total_matches},\n")
            output.write(
                f"      \"documents_with_matches\": {documents_with_matches},\n"
            )
            output.write(f"      \"total_documents\": {total_docs}\n")
            output.write("    }\n")
            output.write("  }\n}\n")

        search_time = time.process_time() - start
        speed = total_docs / search_time if search_time > 0 else float("inf")

        print("\n\nRESULTADOS DE BÚSQUEDA:")
        print(f"  - Patrón buscado: \"{config.search_pattern}\"")
        print(f"  - Documentos analizados: {total_docs}")
        print(f"  - Documentos con coincidencias: {documents_with_matches}")
        print(f"  - Total de coincidencias: {total_matches}")
        print(f"  - Tiempo de búsqueda: {search_time:.3f} segundos")
        print(f"  - Velocidad: {speed:.2f} docs/segundo")

    if to_file:
        print(f"  - Resultados guardados en: {config.output_file}")

    return 0