"""Shift-Or (bit-parallel, inverted) substring search."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Union

from docsearch.results import SearchResults

Text = Union[str, bytes]

MAX_PATTERN_LENGTH = 63
WORD_MASK = (1 << 64) - 1


def shift_or_masks(pattern: Text) -> dict[Hashable, int]:
    """Return the 64-bit Shift-Or mask for each symbol in ``pattern``.

    Symbols absent from the result have the all-ones mask. Raises ValueError
    if the pattern is empty or longer than 63 symbols.
    """
    if not pattern or len(pattern) > MAX_PATTERN_LENGTH:
        raise ValueError(
            f"pattern length must be between 1 and {MAX_PATTERN_LENGTH}"
        )
    masks: dict[Hashable, int] = {}
    for i, ch in enumerate(pattern):
        masks[ch] = masks.get(ch, WORD_MASK) & ~(1 << i) & WORD_MASK
    return masks


def shift_or_search(text: Text, pattern: Text) -> SearchResults:
    """Find every occurrence of ``pattern`` in ``text`` with Shift-Or."""
    masks = shift_or_masks(pattern)
    pattern_len = len(pattern)
    match_mask = ~(1 << (pattern_len - 1)) & WORD_MASK
    results = SearchResults()
    state = WORD_MASK
    for i, ch in enumerate(text):
        state = ((state << 1) | masks.get(ch, WORD_MASK)) & WORD_MASK
        if state <= match_mask:
            results.add(i - pattern_len + 1, i + 1)
    return results