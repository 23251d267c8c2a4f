"""The ``load`` command: read a corpus, report on it and export a summary."""

from __future__ import annotations

import os
import time

from docsearch.config import ProgramConfig
from docsearch.document_process import DocumentType
from docsearch.documents import (
    DocumentCollection,
    filter_html_files_only,
    filter_text_files_only,
    format_collection_summary,
    format_loading_stats,
    load_documents_from_directory,
    load_documents_with_filter,
)

_MIB = 1024.0 * 1024.0
_SAMPLE_COUNT = 5

_SAMPLE_TYPE_NAMES = {
    DocumentType.TXT: "TXT",
    DocumentType.HTML: "HTML",
    DocumentType.CSV: "CSV",
}


def _export_type(doc_type: DocumentType) -> str:
    if doc_type is DocumentType.TXT:
        return "TXT"
    if doc_type is DocumentType.HTML:
        return "HTML"
    return "OTHER"


def _print_samples(collection: DocumentCollection) -> None:
    print("\n=== MUESTRA DE DOCUMENTOS ===")
    for number, doc in enumerate(collection.documents[:_SAMPLE_COUNT], start=1):
        meta = doc.metadata
        print(f"\nDocumento {number}:")
        print(f"  Archivo: {meta.filename}")
        print(f"  Tamaño: {meta.file_size} bytes")
        print(f"  Tipo: {_SAMPLE_TYPE_NAMES.get(meta.type, 'Desconocido')}")
        if doc.clean_content:
            preview = doc.clean_content[:199].replace("\n", " ").replace("\r", " ")
            suffix = "..." if len(doc.clean_content) > 150 else ""
            print(f'  Vista previa: "{preview[:150]}{suffix}"')


def _write_csv(out, collection: DocumentCollection) -> None:
    out.write("filename,type,size,words_estimated\n")
    for doc in collection:
        meta = doc.metadata
        words = len(doc.clean_content.encode("utf-8")) // 5
        out.write(
            f'"{meta.filename}",{_export_type(meta.type)},{meta.file_size},{words}\n'
        )


def _write_json(out, collection, loading_time, total_bytes) -> None:
    out.write("{\n  \"collection\": {\n")
    out.write(f"    \"total_documents\": {len(collection)},\n")
    out.write(f"    \"loading_time\": {loading_time:.2f},\n")
    out.write(f"    \"total_bytes\": {total_bytes},\n")
    out.write("    \"documents\": [\n")
    last = len(collection) - 1
    for index, doc in enumerate(collection):
        meta = doc.metadata
        out.write("      {\n")
        out.write(f"        \"filename\": \"{meta.filename}\",\n")
        out.write(f"        \"type\": \"{_export_type(meta.type)}\",\n")
        out.write(f"        \"size\": {meta.file_size}\n")
        out.write("      }" + ("," if index < last else "") + "\n")
    out.write("    ]\n  }\n}\n")


def _write_text(out, config, collection, loading_time, total_bytes) -> None:
    out.write("REPORTE DE CARGA DE DOCUMENTOS\n")
    out.write("==============================\n\n")
    out.write(f"Directorio: {config.corpus_path}\n")
    out.write(f"Documentos cargados: {len(collection)}\n")
    out.write(f"Tiempo de carga: {loading_time:.2f} segundos\n")
    out.write(f"Bytes totales: {total_bytes}\n\n")
    for doc in collection:
        meta = doc.metadata
        out.write(f"{meta.filename}\t{meta.file_size}\t{_export_type(meta.type)}\n")


def command_load(config: ProgramConfig) -> int:
    """Load the corpus named by ``config`` and report on it.

    Returns 0 on success and 1 when the corpus directory is missing.
    """
    print("\n=== CARGANDO DOCUMENTOS ===")

    if not config.corpus_path:
        print("Error: Debe especificar un directorio con -i/--input")
        return 1
    if not os.path.isdir(config.corpus_path):
        print(
            f"Error: El directorio '{config.corpus_path}' no existe o no es accesible"
        )
        return 1

    collection = DocumentCollection()
    start = time.process_time()
    if config.txt_only:
        stats = load_documents_with_filter(
            collection, config.corpus_path, filter_text_files_only, config.recursive
        )
    elif config.html_only:
        stats = load_documents_with_filter(
            collection, config.corpus_path, filter_html_files_only, config.recursive
        )
    else:
        stats = load_documents_from_directory(
            collection, config.corpus_path, config.recursive
        )
    loading_time = time.process_time() - start

    if config.limit > 0 and len(collection) > config.limit:
        print(f"Aplicando límite de {config.limit} documentos...")
        del collection.documents[config.limit :]

    print("\nRESULTADOS DE CARGA:")
    print(f"  - Documentos cargados: {len(collection)}")
    print(f"  - Tiempo de carga: {loading_time:.2f} segundos")
    print(f"  - Archivos procesados exitosamente: {stats.files_loaded}")
    print(f"  - Archivos con errores: {stats.files_failed}")
    print(
        f"  - Bytes totales cargados: {stats.total_bytes_loaded} "
        f"({stats.total_bytes_loaded / _MIB:.2f} MB)"
    )

    if config.show_stats:
        print("\nESTADÍSTICAS DETALLADAS:")
        print(format_loading_stats(stats), end="")
        print(format_collection_summary(collection), end="")
        _print_samples(collection)

    if config.output_file:
        print(f"\nExportando resultados a {config.output_file}...")
        try:
            with open(config.output_file, "w", encoding="utf-8") as out:
                if config.export_csv:
                    _write_csv(out, collection)
                elif config.export_json:
                    _write_json(out, collection, loading_time, stats.total_bytes_loaded)
                else:
                    _write_text(
                        out, config, collection, loading_time, stats.total_bytes_loaded
                    )
        except OSError:
            print("Error: No se pudo crear el archivo de salida.")
        else:
            print("Resultados exportados exitosamente.")

    return 0