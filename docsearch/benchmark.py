"""Timing and comparison of the exact pattern-search algorithms."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Union

from docsearch.kmp import kmp_search
from docsearch.results import SearchResults
from docsearch.shift_and import shift_and_search
from docsearch.shift_or import shift_or_search

Text = Union[str, bytes]
SearchAlgorithm = Callable[[Text, Text], SearchResults]

_MIB = 1024.0 * 1024.0
_DEFAULT_RESULTS_CAPACITY = 10
_RESULTS_HEADER_SIZE = 16
_RESULT_ENTRY_SIZE = 8


@dataclass
class AlgorithmStats:
    """Measurements of one algorithm run on one text."""

    execution_time: float = 0.0
    total_comparisons: int = 0
    matches_found: int = 0
    memory_used: int = 0
    throughput_mbps: float = 0.0


@dataclass
class ComparisonReport:
    """Side-by-side measurements of KMP, Shift-And and Shift-Or."""

    kmp_stats: AlgorithmStats
    shift_and_stats: AlgorithmStats
    shift_or_stats: AlgorithmStats
    test_description: str | None
    text_length: int
    pattern_length: int
    document_name: str | None = None
    pattern: Text | None = None
    timestamp: float = field(default_factory=time.time)


def _byte_length(value: Text) -> int:
    return len(value) if isinstance(value, bytes) else len(value.encode("utf-8"))


def _results_capacity(count: int) -> int:
    """Capacity a result buffer growing by half its size would reach."""
    capacity = _DEFAULT_RESULTS_CAPACITY
    while count > capacity:
        grown = capacity + (capacity >> 1)
        capacity = grown if grown > capacity else capacity + 1
    return capacity


def _run(
    algorithm: SearchAlgorithm, text: Text, pattern: Text
) -> tuple[SearchResults | None, float]:
    start = time.perf_counter()
    try:
        results: SearchResults | None = algorithm(text, pattern)
    except ValueError:
        results = None
    return results, time.perf_counter() - start


def measure_algorithm_time(
    algorithm: SearchAlgorithm, text: Text, pattern: Text
) -> float:
    """Return the wall-clock seconds one call of ``algorithm`` took.

    A pattern the algorithm rejects is still timed.
    """
    return _run(algorithm, text, pattern)[1]


def calculate_algorithm_stats(
    algorithm: SearchAlgorithm, text: Text, pattern: Text
) -> AlgorithmStats:
    """Run ``algorithm`` once and collect its measurements.

    When the algorithm rejects the pattern only the time is filled in.
    """
    results, elapsed = _run(algorithm, text, pattern)
    stats = AlgorithmStats(execution_time=elapsed)
    if results is None:
        return stats
    stats.matches_found = len(results)
    stats.total_comparisons = results.total_comparisons()
    if elapsed > 0:
        stats.throughput_mbps = (_byte_length(text) / _MIB) / elapsed
    stats.memory_used = (
        _RESULTS_HEADER_SIZE + _results_capacity(len(results)) * _RESULT_ENTRY_SIZE
    )
    return stats


def generate_comparison_report(
    text: Text, pattern: Text, description: str | None
) -> ComparisonReport:
    """Measure all three algorithms on ``text`` and ``pattern``."""
    return ComparisonReport(
        kmp_stats=calculate_algorithm_stats(kmp_search, text, pattern),
        shift_and_stats=calculate_algorithm_stats(shift_and_search, text, pattern),
        shift_or_stats=calculate_algorithm_stats(shift_or_search, text, pattern),
        test_description=description,
        text_length=_byte_length(text),
        pattern_length=_byte_length(pattern),
        pattern=pattern,
    )


def _row(name: str, stats: AlgorithmStats) -> str:
    return (
        f"{name:<12} {stats.execution_time:<12.6f} {stats.matches_found:<12d} "
        f"{stats.total_comparisons:<12d} {stats.memory_used:<12d} "
        f"{stats.throughput_mbps:<12.2f}\n"
    )


def format_comparison_report(report: ComparisonReport) -> str:
    """Render a comparison report as a table followed by a short analysis."""
    entries = [
        ("KMP", report.kmp_stats),
        ("Shift-And", report.shift_and_stats),
        ("Shift-Or", report.shift_or_stats),
    ]
    out = ["\n", "=" * 80, "\n", "REPORTE DE COMPARACIÓN DE ALGORITMOS\n", "=" * 80, "\n"]
    if report.test_description:
        out.append(f"Descripción: {report.test_description}\n")
    out.append(f"Longitud del texto: {report.text_length} caracteres\n")
    out.append(f"Longitud del patrón: {report.pattern_length} caracteres\n")
    out.append("\n")
    out.append(
        f"{'Algoritmo':<12} {'Tiempo(s)':<12} {'Coincid.':<12} "
        f"{'Comparac.':<12} {'Memoria(B)':<12} {'Thrput(MB/s)':<12}\n"
    )
    out.append("-" * 80 + "\n")
    out.extend(_row(name, stats) for name, stats in entries)
    out.append("\n")

    out.append("ANÁLISIS DE RENDIMIENTO:\n")
    out.append("-" * 40 + "\n")

    fastest, fastest_stats = entries[0]
    for name, stats in entries[1:]:
        if stats.execution_time < fastest_stats.execution_time:
            fastest, fastest_stats = name, stats
    out.append(
        f"Algoritmo más rápido: {fastest} "
        f"({fastest_stats.execution_time:.6f} segundos)\n"
    )

    leanest, leanest_stats = entries[0]
    for name, stats in entries[1:]:
        if stats.total_comparisons < leanest_stats.total_comparisons:
            leanest, leanest_stats = name, stats
    out.append(
        f"Menos comparaciones: {leanest} "
        f"({leanest_stats.total_comparisons} comparaciones)\n"
    )
    out.append("\n")
    return "".join(out)