import math

import pytest

from docsearch.benchmark import (
    AlgorithmStats,
    ComparisonReport,
    calculate_algorithm_stats,
    format_comparison_report,
    generate_comparison_report,
    measure_algorithm_time,
)
from docsearch.kmp import kmp_search
from docsearch.shift_and import shift_and_search
from docsearch.shift_or import shift_or_search


def test_measure_algorithm_time_is_non_negative():
    elapsed = measure_algorithm_time(kmp_search, "hello world" * 10, "world")
    assert elapsed >= 0.0


def test_measure_time_with_rejected_pattern():
    elapsed = measure_algorithm_time(shift_and_search, "abc", "")
    assert elapsed >= 0.0


def test_stats_match_search_results():
    text = "the cat sat on the mat with the hat"
    stats = calculate_algorithm_stats(kmp_search, text, "the")
    results = kmp_search(text, "the")
    assert stats.matches_found == len(results)
    assert stats.total_comparisons == results.total_comparisons()


def test_stats_for_rejected_pattern_are_zero():
    stats = calculate_algorithm_stats(shift_or_search, "abc", "x" * 64)
    assert stats.matches_found == 0
    assert stats.total_comparisons == 0
    assert stats.memory_used == 0


def test_throughput_consistent_with_time():
    text = "abcabc" * 1000
    stats = calculate_algorithm_stats(shift_and_search, text, "cab")
    if stats.execution_time > 0:
        expected = (len(text) / (1024.0 * 1024.0)) / stats.execution_time
        assert math.isclose(stats.throughput_mbps, expected)
    else:
        assert stats.throughput_mbps == 0.0


def test_memory_grows_with_many_matches():
    few = calculate_algorithm_stats(kmp_search, "aaaa", "a")
    many = calculate_algorithm_stats(kmp_search, "a" * 200, "a")
    assert many.memory_used > few.memory_used


def test_report_algorithms_agree():
    report = generate_comparison_report("abababab", "abab", "overlap")
    assert report.kmp_stats.matches_found == report.shift_and_stats.matches_found
    assert report.shift_and_stats.matches_found == report.shift_or_stats.matches_found
    assert report.kmp_stats.matches_found == len(kmp_search("abababab", "abab"))
    assert report.kmp_stats.memory_used == report.shift_or_stats.memory_used


def test_report_lengths_and_description():
    report = generate_comparison_report("some text", "text", "desc")
    assert report.text_length == len("some text")
    assert report.pattern_length == len("text")
    assert report.test_description == "desc"
    assert report.pattern == "text"


def test_report_long_pattern_only_kmp_finds():
    pattern = "a" * 64
    report = generate_comparison_report("a" * 70, pattern, None)
    assert report.kmp_stats.matches_found == len(kmp_search("a" * 70, pattern))
    assert report.shift_and_stats.matches_found == 0
    assert report.shift_or_stats.matches_found == 0


def _report(kmp, sand, sor, description="prueba"):
    return ComparisonReport(
        kmp_stats=kmp,
        shift_and_stats=sand,
        shift_or_stats=sor,
        test_description=description,
        text_length=100,
        pattern_length=5,
    )


def test_format_picks_fastest_and_leanest():
    report = _report(
        AlgorithmStats(execution_time=0.5, total_comparisons=30),
        AlgorithmStats(execution_time=0.25, total_comparisons=10),
        AlgorithmStats(execution_time=0.125, total_comparisons=20),
    )
    text = format_comparison_report(report)
    assert "Algoritmo más rápido: Shift-Or (0.125000 segundos)" in text
    assert "Menos comparaciones: Shift-And (10 comparaciones)" in text
    assert "Descripción: prueba" in text


def test_format_ties_keep_kmp():
    same = AlgorithmStats(execution_time=0.5, total_comparisons=7)
    text = format_comparison_report(_report(same, same, same, None))
    assert "Algoritmo más rápido: KMP" in text
    assert "Menos comparaciones: KMP (7 comparaciones)" in text
    assert "Descripción" not in text


def test_format_table_rows():
    report = generate_comparison_report("abcabc", "abc", "t")
    lines = format_comparison_report(report).splitlines()
    names = [line.split()[0] for line in lines if line.startswith(("KMP", "Shift-"))]
    assert names == ["KMP", "Shift-And", "Shift-Or"]
    assert "REPORTE DE COMPARACIÓN DE ALGORITMOS" in lines


@pytest.mark.parametrize("algorithm", [kmp_search, shift_and_search, shift_or_search])
def test_stats_no_match(algorithm):
    stats = calculate_algorithm_stats(algorithm, "aaaa", "b")
    assert stats.matches_found == 0
    assert stats.total_comparisons == 0