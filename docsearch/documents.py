"""Loading documents from disk into a collection, with filters and reports."""

from __future__ import annotations

import os
import time
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

from docsearch.document_process import (
    DocumentType,
    clean_text_content,
    detect_document_type,
    detect_language_simple,
)

DocumentFilter = Callable[[str, "os.stat_result | None"], bool]

_MIB = 1024.0 * 1024.0


@dataclass
class DocumentMetadata:
    """Descriptive information about a loaded document."""

    filename: str
    full_path: str
    file_size: int
    type: DocumentType
    last_modified: float
    title: str
    language: str = "unknown"


@dataclass
class Document:
    """A document with its raw and cleaned text."""

    metadata: DocumentMetadata
    raw_content: str
    clean_content: str
    content_length: int
    is_loaded: bool = True


@dataclass
class DocumentCollection:
    """An ordered set of loaded documents."""

    documents: list[Document] = field(default_factory=list)
    collection_path: str | None = None

    def add(self, doc: Document) -> None:
        """Append ``doc`` to the collection."""
        self.documents.append(doc)

    def __len__(self) -> int:
        return len(self.documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(self.documents)

    def __getitem__(self, index: int) -> Document:
        return self.documents[index]


@dataclass
class LoadingStats:
    """Counters gathered while loading a set of files."""

    total_files_found: int = 0
    files_loaded: int = 0
    files_failed: int = 0
    total_bytes_loaded: int = 0
    loading_time: float = 0.0
    txt_files: int = 0
    html_files: int = 0
    other_files: int = 0

    def _count_type(self, doc_type: DocumentType) -> None:
        if doc_type is DocumentType.TXT:
            self.txt_files += 1
        elif doc_type is DocumentType.HTML:
            self.html_files += 1
        else:
            self.other_files += 1


def _extension(filepath: str) -> str | None:
    """Text from the last dot onwards, lowercased, or None without a dot."""
    pos = filepath.rfind(".")
    return None if pos < 0 else filepath[pos:].lower()


def _basename(filepath: str) -> str:
    return filepath.rsplit("/", 1)[-1]


def _build_document(
    raw_content: str,
    content_length: int,
    metadata: DocumentMetadata,
) -> Document:
    # Text past an embedded NUL never reaches the cleaned content.
    searchable = raw_content.partition("\0")[0]
    clean = clean_text_content(searchable, metadata.type)
    metadata.language = detect_language_simple(clean)
    return Document(
        metadata=metadata,
        raw_content=raw_content,
        clean_content=clean,
        content_length=content_length,
        is_loaded=True,
    )


def read_file_content(filepath: str) -> bytes:
    """Return the whole content of ``filepath``. Raises OSError on failure."""
    with open(filepath, "rb") as handle:
        return handle.read()


def get_file_size(filepath: str) -> int:
    """Return the size of ``filepath`` in bytes, or 0 if it cannot be read."""
    try:
        return os.stat(filepath).st_size
    except OSError:
        return 0


def is_supported_file_type(filepath: str) -> bool:
    """Tell whether ``filepath`` has an extension the loader understands."""
    return detect_document_type(filepath) is not DocumentType.UNKNOWN


def load_document_from_file(filepath: str) -> Document:
    """Load and clean one file. Raises OSError if it cannot be read."""
    file_stat = os.stat(filepath)
    data = read_file_content(filepath)
    filename = _basename(filepath)
    metadata = DocumentMetadata(
        filename=filename,
        full_path=filepath,
        file_size=file_stat.st_size,
        type=detect_document_type(filepath),
        last_modified=file_stat.st_mtime,
        title=filename,
    )
    raw = data.decode("utf-8", errors="replace")
    return _build_document(raw, len(data), metadata)


def load_document_from_string(content: str, filename: str) -> Document:
    """Build a document from in-memory ``content`` named ``filename``."""
    size = len(content.encode("utf-8"))
    metadata = DocumentMetadata(
        filename=filename,
        full_path=filename,
        file_size=size,
        type=detect_document_type(filename),
        last_modified=time.time(),
        title=filename,
    )
    return _build_document(content, size, metadata)


def filter_html_files_only(filepath: str, file_stat: os.stat_result | None) -> bool:
    """Accept files ending in .html or .htm, in any case."""
    return _extension(filepath) in (".html", ".htm")


def filter_text_files_only(filepath: str, file_stat: os.stat_result | None) -> bool:
    """Accept files ending in .txt, in any case."""
    return _extension(filepath) == ".txt"


def filter_by_size_range(filepath: str, file_stat: os.stat_result | None) -> bool:
    """Accept files between 1 KiB and 10 MiB inclusive."""
    if file_stat is None:
        return False
    return 1024 <= file_stat.st_size <= 10 * 1024 * 1024


def _filter_all_supported(filepath: str, file_stat: os.stat_result | None) -> bool:
    return is_supported_file_type(filepath)


def _process_directory(
    dir_path: str,
    collection: DocumentCollection,
    file_filter: DocumentFilter,
    stats: LoadingStats,
    recursive: bool,
) -> None:
    try:
        names = sorted(entry.name for entry in os.scandir(dir_path))
    except OSError as exc:
        print(f"Advertencia: No se puede abrir directorio {dir_path}: {exc.strerror}")
        return

    for name in names:
        full_path = f"{dir_path}/{name}"
        try:
            file_stat = os.stat(full_path)
        except OSError as exc:
            print(
                f"Advertencia: No se puede obtener información de {full_path}: "
                f"{exc.strerror}"
            )
            continue

        if os.path.isdir(full_path):
            if recursive:
                _process_directory(full_path, collection, file_filter, stats, recursive)
            continue
        if not os.path.isfile(full_path):
            continue

        stats.total_files_found += 1
        if not file_filter(full_path, file_stat):
            continue
        try:
            doc = load_document_from_file(full_path)
        except OSError:
            stats.files_failed += 1
            continue
        collection.add(doc)
        stats.files_loaded += 1
        stats.total_bytes_loaded += file_stat.st_size
        stats._count_type(doc.metadata.type)


def load_documents_with_filter(
    collection: DocumentCollection,
    directory_path: str,
    file_filter: DocumentFilter,
    recursive: bool,
) -> LoadingStats:
    """Load every file under ``directory_path`` that ``file_filter`` accepts.

    Entries are visited in name order; unreadable directories and entries
    produce a warning on standard output and are skipped.
    """
    stats = LoadingStats()
    start = time.process_time()
    _process_directory(directory_path, collection, file_filter, stats, recursive)
    stats.loading_time = time.process_time() - start
    return stats


def load_documents_from_directory(
    collection: DocumentCollection, directory_path: str, recursive: bool
) -> LoadingStats:
    """Load every supported file under ``directory_path``."""
    return load_documents_with_filter(
        collection, directory_path, _filter_all_supported, recursive
    )


def load_documents_from_file_list(
    collection: DocumentCollection, file_list_path: str
) -> LoadingStats:
    """Load the files named one per line in ``file_list_path``.

    Blank lines are skipped; unsupported or unreadable files count as
    failures. Raises OSError if the list itself cannot be opened.
    """
    stats = LoadingStats()
    start = time.process_time()
    with open(file_list_path, encoding="utf-8", errors="replace") as file_list:
        for line in file_list:
            filepath = line.split("\n", 1)[0]
            if not filepath:
                continue
            stats.total_files_found += 1
            if not is_supported_file_type(filepath):
                stats.files_failed += 1
                continue
            try:
                doc = load_document_from_file(filepath)
            except OSError:
                stats.files_failed += 1
                continue
            collection.add(doc)
            stats.files_loaded += 1
            stats.total_bytes_loaded += doc.metadata.file_size
            stats._count_type(doc.metadata.type)
    stats.loading_time = time.process_time() - start
    return stats


def format_loading_stats(stats: LoadingStats) -> str:
    """Render loading counters as a report."""
    mib = stats.total_bytes_loaded / _MIB
    out = [
        "\n=== ESTADÍSTICAS DE CARGA ===\n",
        f"Archivos encontrados: {stats.total_files_found}\n",
        f"Archivos cargados: {stats.files_loaded}\n",
        f"Archivos fallidos: {stats.files_failed}\n",
        f"Bytes totales cargados: {stats.total_bytes_loaded} ({mib:.2f} MB)\n",
        f"Tiempo de carga: {stats.loading_time:.2f} segundos\n",
        "\nDesglose por tipo:\n",
        f"  Archivos TXT: {stats.txt_files}\n",
        f"  Archivos HTML: {stats.html_files}\n",
        f"  Otros archivos: {stats.other_files}\n",
    ]
    if stats.loading_time > 0:
        out.append(f"Velocidad: {mib / stats.loading_time:.2f} MB/s\n")
    return "".join(out)


_TYPE_NAMES = {
    DocumentType.TXT: "Texto plano",
    DocumentType.HTML: "HTML",
    DocumentType.CSV: "CSV",
}


def format_document_info(doc: Document) -> str:
    """Render the metadata of one document."""
    meta = doc.metadata
    return (
        "\n=== INFORMACIÓN DEL DOCUMENTO ===\n"
        f"Archivo: {meta.filename}\n"
        f"Ruta: {meta.full_path}\n"
        f"Tipo: {_TYPE_NAMES.get(meta.type, 'Desconocido')}\n"
        f"Tamaño: {meta.file_size} bytes\n"
        f"Contenido limpio: {len(doc.clean_content.encode('utf-8'))} caracteres\n"
        f"Idioma: {meta.language}\n"
        f"Título: {meta.title}\n"
    )


def format_collection_summary(collection: DocumentCollection) -> str:
    """Render counts by type and total size of a collection."""
    out = [
        "\n=== RESUMEN DE LA COLECCIÓN ===\n",
        f"Documentos cargados: {len(collection)}\n",
    ]
    if collection.collection_path:
        out.append(f"Ruta base: {collection.collection_path}\n")

    txt_count = html_count = other_count = total_size = 0
    for doc in collection:
        total_size += doc.metadata.file_size
        if doc.metadata.type is DocumentType.TXT:
            txt_count += 1
        elif doc.metadata.type is DocumentType.HTML:
            html_count += 1
        else:
            other_count += 1

    out.extend(
        [
            "\nDesglose por tipo:\n",
            f"  TXT: {txt_count}\n",
            f"  HTML: {html_count}\n",
            f"  Otros: {other_count}\n",
            f"\nTamaño total: {total_size} bytes ({total_size / _MIB:.2f} MB)\n",
        ]
    )
    return "".join(out)