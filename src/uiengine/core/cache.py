"""Bounded LRU memo keyed by a fast hash of the input text.

Used to skip re-decoding and re-validating identical document text, which an
editor host submits on every keystroke.
"""

from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import xxhash

T = TypeVar("T")


def text_key(text: str | bytes) -> str:
    """xxhash64 hex digest of text."""
    data = text.encode("utf-8") if isinstance(text, str) else text
    return xxhash.xxh64(data).hexdigest()


@dataclass
class Stats:
    """Cache statistics."""

    size: int = 0
    max_size: int = 0
    hits: int = 0
    misses: int = 0
    evictions: int = 0

    @property
    def hit_rate(self) -> float:
        """Hit rate (0.0 to 1.0)."""
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "size": self.size,
            "max_size": self.max_size,
            "hits": self.hits,
            "misses": self.misses,
            "evictions": self.evictions,
            "hit_rate": self.hit_rate,
        }


class LRUCache(Generic[T]):
    """
    Least-recently-used cache with hit/miss statistics.

    Examples:
        >>> cache = LRUCache[int](max_size=2)
        >>> cache.set("a", 1)
        >>> cache.get("a")
        1
    """

    def __init__(self, max_size: int = 64):
        if max_size <= 0:
            raise ValueError("max_size must be positive")

        self.max_size = max_size
        self._entries: OrderedDict[str, T] = OrderedDict()
        self._stats = Stats(max_size=max_size)

    def get(self, key: str | bytes) -> T | None:
        """Return the cached value, or None on a miss."""
        digest = text_key(key)
        if digest in self._entries:
            self._entries.move_to_end(digest)
            self._stats.hits += 1
            return self._entries[digest]

        self._stats.misses += 1
        return None

    def set(self, key: str | bytes, value: T) -> None:
        """Cache value, evicting the least recently used entry when full."""
        digest = text_key(key)
        self._entries[digest] = value
        self._entries.move_to_end(digest)

        if len(self._entries) > self.max_size:
            self._entries.popitem(last=False)
            self._stats.evictions += 1

        self._stats.size = len(self._entries)

    def clear(self) -> None:
        self._entries.clear()
        self._stats.size = 0

    @property
    def stats(self) -> Stats:
        return self._stats

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str | bytes) -> bool:
        """Membership test; does not touch LRU order or stats."""
        return text_key(key) in self._entries


__all__ = ["LRUCache", "Stats", "text_key"]
