"""A fixed-capacity hash table with separate chaining and DJB2 hashing."""

from __future__ import annotations

from dataclasses import dataclass

_HASH_MASK = (1 << 64) - 1


def djb2_hash(key: str, capacity: int) -> int:
    """Return the DJB2 hash of ``key`` reduced to a bucket index."""
    value = 5381
    for byte in key.encode("utf-8"):
        signed = byte - 256 if byte >= 128 else byte
        value = (((value << 5) + value) + signed) & _HASH_MASK
    return value % capacity


@dataclass
class _Entry:
    key: str
    value: int


class HashTable:
    """Maps string keys to integer counts; inserting an existing key adds to it."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("hash table capacity must be positive")
        self.capacity = capacity
        self._buckets: list[list[_Entry]] = [[] for _ in range(capacity)]
        self._size = 0

    def _bucket(self, key: str) -> list[_Entry]:
        return self._buckets[djb2_hash(key, self.capacity)]

    def insert(self, key: str, value: int) -> None:
        """Add ``value`` to ``key``'s count, creating the key if needed."""
        bucket = self._bucket(key)
        for entry in bucket:
            if entry.key == key:
                entry.value += value
                return
        bucket.append(_Entry(key, value))
        self._size += 1

    def search(self, key: str) -> int | None:
        """Return the value stored for ``key``, or None if it is absent."""
        for entry in self._bucket(key):
            if entry.key == key:
                return entry.value
        return None

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.search(key) is not None