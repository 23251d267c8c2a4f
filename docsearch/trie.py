"""A byte-level prefix tree that counts word frequencies."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass
class _Node:
    children: dict[int, _Node] = field(default_factory=dict)
    is_end_of_word: bool = False
    frequency: int = 0
    prefix_count: int = 0


def _encode(word: str | bytes) -> bytes:
    return word if isinstance(word, bytes) else word.encode("utf-8")


def _decode(raw: bytes) -> str:
    return raw.decode("utf-8", errors="replace")


class Trie:
    """Stores words over their UTF-8 bytes, one node per byte."""

    def __init__(self) -> None:
        self._root = _Node()
        self.word_count = 0
        self.node_count = 1

    def insert(self, word: str | bytes) -> None:
        """Add one occurrence of ``word``; empty words are ignored."""
        raw = _encode(word)
        if not raw:
            return
        current = self._root
        for byte in raw:
            child = current.children.get(byte)
            if child is None:
                child = current.children[byte] = _Node()
                self.node_count += 1
            current = child
            current.prefix_count += 1
        if not current.is_end_of_word:
            current.is_end_of_word = True
            self.word_count += 1
        current.frequency += 1

    def _find(self, key: str | bytes) -> _Node | None:
        current = self._root
        for byte in _encode(key):
            current = current.children.get(byte)
            if current is None:
                return None
        return current

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, (str, bytes)):
            return False
        node = self._find(word)
        return node is not None and node.is_end_of_word

    def frequency(self, word: str | bytes) -> int:
        """Return how many times ``word`` was inserted."""
        node = self._find(word)
        return node.frequency if node is not None and node.is_end_of_word else 0

    def starts_with(self, prefix: str | bytes) -> bool:
        """Tell whether some inserted word extends ``prefix``.

        The empty prefix is never reported as present.
        """
        node = self._find(prefix)
        return node is not None and node.prefix_count > 0

    def _collect(self, node: _Node, path: bytearray) -> Iterator[tuple[str, int]]:
        if node.is_end_of_word:
            yield _decode(bytes(path)), node.frequency
        for byte in sorted(node.children):
            path.append(byte)
            yield from self._collect(node.children[byte], path)
            path.pop()

    def words_with_prefix(self, prefix: str | bytes) -> list[tuple[str, int]]:
        """Return ``(word, frequency)`` pairs under ``prefix`` in byte order."""
        node = self._find(prefix)
        if node is None:
            return []
        return list(self._collect(node, bytearray(_encode(prefix))))

    def depth(self) -> int:
        """Return the length in bytes of the deepest path from the root."""

        def walk(node: _Node, level: int) -> int:
            return max(
                (walk(child, level + 1) for child in node.children.values()),
                default=level,
            )

        return walk(self._root, 0)

    def format_stats(self) -> str:
        """Render the word and node counts as a short report."""
        ratio = (
            100.0 * self.node_count / self.word_count if self.word_count > 0 else 0.0
        )
        return (
            "\n=== ESTADÍSTICAS DEL TRIE ===\n"
            f"Palabras únicas: {self.word_count}\n"
            f"Nodos totales: {self.node_count}\n"
            f"Factor de compresión: {ratio:.2f}%\n"
            "============================\n\n"
        )

    def format_all_words(self) -> str:
        """Render every stored word with its frequency."""
        lines = ["", "=== TODAS LAS PALABRAS EN EL TRIE ==="]
        lines.extend(
            f"  {word:<20} (frecuencia: {freq})"
            for word, freq in self._collect(self._root, bytearray())
        )
        lines.append("====================================")
        return "\n".join(lines) + "\n\n\n"


def format_prefix_result(words: list[tuple[str, int]], prefix: str) -> str:
    """Render the result of a prefix search."""
    lines = [
        "",
        f"Palabras que comienzan con '{prefix}' ({len(words)} encontradas):",
        "=================================================",
    ]
    if not words:
        lines.append("No se encontraron palabras con este prefijo.")
        return "\n".join(lines) + "\n"
    lines.extend(f"  {word:<20} (frecuencia: {freq})" for word, freq in words)
    return "\n".join(lines) + "\n\n"