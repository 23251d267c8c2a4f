"""Containers for the matches produced by the pattern-search algorithms."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True)
class SearchResult:
    """A single match: where it starts and how many comparisons had been made."""

    position: int
    comparisons: int


@dataclass
class SearchResults:
    """An ordered collection of matches found by one search."""

    results: list[SearchResult] = field(default_factory=list)

    def add(self, position: int, comparisons: int) -> None:
        """Record a match at ``position`` after ``comparisons`` comparisons."""
        self.results.append(SearchResult(position, comparisons))

    def total_comparisons(self) -> int:
        """Comparisons counted up to the last match, or 0 with no matches."""
        return self.results[-1].comparisons if self.results else 0

    @property
    def positions(self) -> list[int]:
        return [result.position for result in self.results]

    def __len__(self) -> int:
        return len(self.results)

    def __iter__(self) -> Iterator[SearchResult]:
        return iter(self.results)

    def __getitem__(self, index: int) -> SearchResult:
        return self.results[index]


def format_search_results(results: SearchResults, algorithm_name: str) -> str:
    """Render the results of one algorithm as a human-readable report."""
    lines = [
        "",
        f"Resultados de {algorithm_name}:",
        f"Coincidencias encontradas: {len(results)}",
    ]
    if len(results):
        lines.append("Posiciones: " + ", ".join(str(p) for p in results.positions))
        lines.append(f"Comparaciones totales: {results.total_comparisons()}")
    return "\n".join(lines) + "\n\n"