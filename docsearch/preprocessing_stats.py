"""Statistics describing how much a text changed during preprocessing."""

from __future__ import annotations

import string
from collections.abc import Sequence
from dataclasses import dataclass

_ALNUM = frozenset(string.ascii_letters + string.digits)
_SPACE = frozenset(" \t\n\v\f\r")
_PUNCTUATION = frozenset(string.punctuation)
_ORDINARY_MARKS = frozenset(".,!?:;-_")


@dataclass(frozen=True)
class Token:
    """A piece of text cut out by a tokenizer."""

    text: str
    position: int = 0
    is_word: bool = True

    @property
    def length(self) -> int:
        return len(self.text)


@dataclass
class PreprocessingStats:
    """Counts gathered by comparing an input text with its processed form."""

    original_length: int = 0
    processed_length: int = 0
    tokens_count: int = 0
    words_count: int = 0
    punctuation_count: int = 0
    stopwords_removed: int = 0
    special_chars_removed: int = 0
    compression_ratio: float = 0.0


def _count_special_chars(text: str) -> int:
    return sum(
        1
        for c in text
        if c not in _ALNUM and c not in _SPACE and c not in _ORDINARY_MARKS
    )


def _count_punctuation(text: str) -> int:
    return sum(1 for c in text if c in _PUNCTUATION)


def _count_words(tokens: Sequence[Token]) -> int:
    return sum(1 for token in tokens if token.is_word)


def _count_alnum_runs(text: str) -> int:
    runs = 0
    in_word = False
    for c in text:
        if c in _ALNUM:
            if not in_word:
                runs += 1
                in_word = True
        else:
            in_word = False
    return runs


def calculate_preprocessing_stats(
    original_text: str,
    tokens: Sequence[Token] | None,
    normalized: str | None,
) -> PreprocessingStats:
    """Compare an input text with its tokens and normalised form.

    Removed stopwords are estimated as the alphanumeric runs of the input
    text that are not matched by word tokens.
    """
    stats = PreprocessingStats()
    stats.original_length = len(original_text)
    stats.punctuation_count = _count_punctuation(original_text)
    input_special = _count_special_chars(original_text)

    if normalized is not None:
        stats.processed_length = len(normalized)
        stats.special_chars_removed = max(
            input_special - _count_special_chars(normalized), 0
        )
    else:
        stats.processed_length = stats.original_length
        stats.special_chars_removed = 0

    if tokens is not None:
        stats.tokens_count = len(tokens)
        stats.words_count = _count_words(tokens)
        stats.stopwords_removed = max(
            _count_alnum_runs(original_text) - stats.words_count, 0
        )

    if stats.original_length > 0:
        stats.compression_ratio = stats.processed_length / stats.original_length
    else:
        stats.compression_ratio = 1.0
    return stats


def format_preprocessing_stats(stats: PreprocessingStats) -> str:
    """Render ``stats`` as a detailed report."""
    out = [
        "=== ESTADÍSTICAS DE PREPROCESAMIENTO ===\n\n",
        "LONGITUDES\n",
        f"Texto original:      {stats.original_length:8d} caracteres\n",
        f"Texto procesado:     {stats.processed_length:8d} caracteres\n",
        "Reducción:           "
        f"{stats.original_length - stats.processed_length:8d} caracteres\n",
        f"Ratio de compresión: {stats.compression_ratio * 100.0:11.2f}%\n\n",
        "TOKENIZACIÓN\n",
        f"Total de tokens:     {stats.tokens_count:8d}\n",
        f"Palabras:            {stats.words_count:8d}\n",
        f"Puntuación:          {stats.punctuation_count:8d}\n\n",
        "FILTRADO\n",
        f"Stopwords removidas: {stats.stopwords_removed:8d}\n",
        f"Caract. especiales:  {stats.special_chars_removed:8d}\n\n",
    ]

    if stats.tokens_count > 0:
        avg_token_length = stats.processed_length / stats.tokens_count
        out.append("=== ESTADÍSTICAS ADICIONALES ===\n")
        out.append(f"Longitud promedio por token: {avg_token_length:.2f} caracteres\n")
        if stats.words_count > 0:
            word_ratio = stats.words_count / stats.tokens_count * 100.0
            out.append(f"Porcentaje de tokens que son palabras: {word_ratio:.2f}%\n")
        if stats.original_length > 0:
            density = stats.tokens_count / stats.original_length * 100.0
            out.append(f"Densidad de tokens: {density:.2f} tokens por 100 caracteres\n")

    out.append("\n=== ANÁLISIS DE EFICIENCIA ===\n")
    if stats.compression_ratio < 0.8:
        out.append("Buena compresión de texto (reducción > 20%)\n")
    elif stats.compression_ratio < 0.95:
        out.append("Compresión moderada de texto\n")
    else:
        out.append("Poca compresión de texto\n")

    if stats.stopwords_removed > 0:
        out.append(f"Se removieron {stats.stopwords_removed} stopwords\n")
    else:
        out.append("No se removieron stopwords\n")

    if stats.special_chars_removed > 0:
        out.append(
            f"Se removieron {stats.special_chars_removed} caracteres especiales\n"
        )
    else:
        out.append("No se removieron caracteres especiales\n")

    out.append("\n")
    return "".join(out)