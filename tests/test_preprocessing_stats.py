import pytest

from docsearch.preprocessing_stats import (
    PreprocessingStats,
    Token,
    calculate_preprocessing_stats,
    format_preprocessing_stats,
)


def test_token_length_follows_text():
    assert Token("hola", 3, True).length == len("hola")


def test_empty_text_has_unit_ratio():
    stats = calculate_preprocessing_stats("", None, None)
    assert stats.original_length == 0
    assert stats.compression_ratio == 1.0


def test_without_normalized_text_lengths_match():
    text = "Un texto @ cualquiera"
    stats = calculate_preprocessing_stats(text, None, None)
    assert stats.original_length == len(text)
    assert stats.processed_length == stats.original_length
    assert stats.special_chars_removed == 0
    assert stats.compression_ratio == 1.0


def test_without_tokens_token_counts_stay_zero():
    stats = calculate_preprocessing_stats("uno dos", None, "uno dos")
    assert stats.tokens_count == 0
    assert stats.words_count == 0
    assert stats.stopwords_removed == 0


def test_compression_ratio_is_processed_over_original():
    text = "El   perro   corre"
    normalized = "el perro corre"
    stats = calculate_preprocessing_stats(text, None, normalized)
    assert stats.processed_length == len(normalized)
    assert stats.compression_ratio == pytest.approx(
        stats.processed_length / stats.original_length
    )


def test_punctuation_counted_in_original():
    text = "!?.,;"
    stats = calculate_preprocessing_stats(text, None, None)
    assert stats.punctuation_count == len(text)


def test_special_chars_removed_by_normalization():
    text = "@#$"
    stats = calculate_preprocessing_stats(text, None, "")
    assert stats.special_chars_removed == len(text)


def test_ordinary_marks_are_not_special():
    stats = calculate_preprocessing_stats("a.b,c!d?e:f;g-h_i", None, "")
    assert stats.special_chars_removed == 0


def test_tokens_counts_and_stopword_estimate():
    tokens = [
        Token("perro", 3, True),
        Token(",", 8, False),
        Token("gato", 10, True),
    ]
    stats = calculate_preprocessing_stats("el perro, el gato", tokens, None)
    assert stats.tokens_count == len(tokens)
    assert stats.words_count == sum(1 for t in tokens if t.is_word)
    assert stats.stopwords_removed == 2


def test_stopword_estimate_never_negative():
    tokens = [Token("a"), Token("b"), Token("c")]
    stats = calculate_preprocessing_stats("abc", tokens, None)
    assert stats.stopwords_removed == 0


def test_format_good_compression_report():
    stats = PreprocessingStats(
        original_length=100,
        processed_length=50,
        tokens_count=10,
        words_count=8,
        stopwords_removed=3,
        special_chars_removed=0,
        compression_ratio=0.5,
    )
    report = format_preprocessing_stats(stats)
    assert report.startswith("=== ESTADÍSTICAS DE PREPROCESAMIENTO ===")
    assert "50.00%" in report
    assert "Buena compresión de texto (reducción > 20%)" in report
    assert "=== ESTADÍSTICAS ADICIONALES ===" in report
    assert "Se removieron 3 stopwords" in report
    assert "No se removieron caracteres especiales" in report


def test_format_poor_compression_without_tokens():
    stats = PreprocessingStats(
        original_length=10, processed_length=10, compression_ratio=1.0
    )
    report = format_preprocessing_stats(stats)
    assert "Poca compresión de texto" in report
    assert "No se removieron stopwords" in report
    assert "ESTADÍSTICAS ADICIONALES" not in report


def test_format_moderate_compression():
    stats = PreprocessingStats(compression_ratio=0.9, special_chars_removed=4)
    report = format_preprocessing_stats(stats)
    assert "Compresión moderada de texto" in report
    assert "Se removieron 4 caracteres especiales" in report