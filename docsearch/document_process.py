"""Document type detection, HTML text extraction and language guessing."""

from __future__ import annotations

import enum
import string

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

_ENTITIES = (
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&nbsp;", " "),
)

_SPANISH_MARKERS = ("ñ", "Ñ", "á", "é", "í", "ó", "ú", "ü")


class DocumentType(enum.Enum):
    """Kinds of documents the loader understands."""

    UNKNOWN = "unknown"
    TXT = "txt"
    HTML = "html"
    CSV = "csv"


def _lower(text: str) -> str:
    return text.translate(_ASCII_LOWER)


def detect_document_type(filepath: str) -> DocumentType:
    """Classify ``filepath`` by the text after its last dot."""
    head, dot, ext = filepath.rpartition(".")
    if not dot:
        return DocumentType.UNKNOWN
    ext = _lower(ext)
    if ext == "txt":
        return DocumentType.TXT
    if ext in ("html", "htm"):
        return DocumentType.HTML
    if ext == "csv":
        return DocumentType.CSV
    return DocumentType.UNKNOWN


def _starts_before_end(text: str, pos: int, marker: str) -> bool:
    """Case-insensitive match of ``marker`` at ``pos`` with text left after it."""
    end = pos + len(marker)
    return end < len(text) and _lower(text[pos:end]) == marker


def extract_text_from_html(html_content: str) -> str:
    """Strip tags, script and style blocks and decode a few basic entities."""
    out: list[str] = []
    inside_tag = inside_script = inside_style = False
    length = len(html_content)
    i = 0
    while i < length:
        c = html_content[i]
        if not inside_tag and _starts_before_end(html_content, i, "<script"):
            inside_script = inside_tag = True
        elif not inside_tag and _starts_before_end(html_content, i, "<style"):
            inside_style = inside_tag = True
        elif inside_script and _starts_before_end(html_content, i, "</script>"):
            inside_script = False
            i += len("</script>") - 1
        elif inside_style and _starts_before_end(html_content, i, "</style>"):
            inside_style = False
            i += len("</style>") - 1
        elif c == "<":
            inside_tag = True
        elif c == ">":
            inside_tag = False
        elif not (inside_tag or inside_script or inside_style):
            if c == "&":
                for entity, replacement in _ENTITIES:
                    if html_content.startswith(entity, i):
                        out.append(replacement)
                        i += len(entity) - 1
                        break
                else:
                    out.append(c)
            else:
                out.append(c)
        i += 1
    return "".join(out)


def clean_text_content(raw_content: str, doc_type: DocumentType) -> str:
    """Return the searchable text of a document of the given type."""
    if doc_type is DocumentType.HTML:
        return extract_text_from_html(raw_content)
    return raw_content


def detect_language_simple(content: str | None) -> str:
    """Guess "es" when Spanish letters appear, "en" otherwise."""
    if content is None:
        return "unknown"
    if any(marker in content for marker in _SPANISH_MARKERS):
        return "es"
    return "en"