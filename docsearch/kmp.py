"""Knuth-Morris-Pratt substring search."""

from __future__ import annotations

from typing import Union

from docsearch.results import SearchResults

Text = Union[str, bytes]


def failure_function(pattern: Text) -> list[int]:
    """Return the KMP failure table for ``pattern``.

    Raises ValueError for an empty pattern.
    """
    if not pattern:
        raise ValueError("pattern must not be empty")
    table = [0] * len(pattern)
    j = 0
    for i in range(1, len(pattern)):
        while j > 0 and pattern[i] != pattern[j]:
            j = table[j - 1]
        if pattern[i] == pattern[j]:
            j += 1
        table[i] = j
    return table


def kmp_search(text: Text, pattern: Text) -> SearchResults:
    """Find every (possibly overlapping) occurrence of ``pattern`` in ``text``."""
    table = failure_function(pattern)
    results = SearchResults()
    pattern_len = len(pattern)
    comparisons = 0
    j = 0
    for i, ch in enumerate(text):
        while j > 0 and ch != pattern[j]:
            j = table[j - 1]
            comparisons += 1
        comparisons += 1
        if ch == pattern[j]:
            j += 1
        if j == pattern_len:
            results.add(i - pattern_len + 1, comparisons)
            j = table[j - 1]
    return results