"""Shift-And (bit-parallel) substring search."""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from typing import Union

from docsearch.results import SearchResults

Text = Union[str, bytes]

MAX_PATTERN_LENGTH = 63
MAX_PARALLEL_PATTERNS = 64


def shift_and_masks(pattern: Text) -> dict[Hashable, int]:
    """Return, for each symbol in ``pattern``, the bitmask of its positions.

    Raises ValueError if the pattern is empty or longer than 63 symbols.
    """
    if not pattern or len(pattern) > MAX_PATTERN_LENGTH:
        raise ValueError(
            f"pattern length must be between 1 and {MAX_PATTERN_LENGTH}"
        )
    masks: dict[Hashable, int] = {}
    for i, ch in enumerate(pattern):
        masks[ch] = masks.get(ch, 0) | (1 << i)
    return masks


def shift_and_search(text: Text, pattern: Text) -> SearchResults:
    """Find every occurrence of ``pattern`` in ``text`` with Shift-And."""
    masks = shift_and_masks(pattern)
    pattern_len = len(pattern)
    match_bit = 1 << (pattern_len - 1)
    results = SearchResults()
    state = 0
    for i, ch in enumerate(text):
        state = ((state << 1) | 1) & masks.get(ch, 0)
        if state & match_bit:
            results.add(i - pattern_len + 1, i + 1)
    return results


def multi_pattern_shift_and_search(
    text: Text, patterns: Sequence[Text]
) -> SearchResults:
    """Search several patterns in one pass over ``text``.

    Matches of all patterns are merged in the order they are found. Only the
    first 64 patterns take part in the scan, but every pattern must be valid.
    """
    if not patterns:
        raise ValueError("at least one pattern is required")
    tables = [(shift_and_masks(p), len(p)) for p in patterns]
    active = tables[:MAX_PARALLEL_PATTERNS]
    states = [0] * len(active)
    results = SearchResults()
    comparisons = 0
    for i, ch in enumerate(text):
        for p, (masks, pattern_len) in enumerate(active):
            states[p] = ((states[p] << 1) | 1) & masks.get(ch, 0)
            comparisons += 1
            if states[p] & (1 << (pattern_len - 1)):
                results.add(i - pattern_len + 1, comparisons)
    return results