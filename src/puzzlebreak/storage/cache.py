"""
Synonym Cache

In-memory TTL cache of synonym sets keyed by normalized answer word.
Entries live for the lifetime of the process only.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Dict, FrozenSet, Iterable, Optional, Any

from puzzlebreak.core.exceptions import CacheError
from puzzlebreak.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class SynonymCacheEntry:
    """Cached synonym set with metadata."""
    word: str
    synonyms: FrozenSet[str]
    fetched_at: datetime
    ttl: float  # Time to live in seconds
    access_count: int = 0
    last_accessed: Optional[datetime] = None

    def is_expired(self, now: datetime) -> bool:
        """Check if cache entry is expired."""
        return now - self.fetched_at >= timedelta(seconds=self.ttl)

    def access(self, now: datetime) -> None:
        """Mark entry as accessed."""
        self.access_count += 1
        self.last_accessed = now


class SynonymCache:
    """
    Process-local synonym cache with TTL expiry and LRU eviction.

    Writes are last-writer-wins; concurrent misses for the same word may
    each store their own fetch result.
    """

    def __init__(self, ttl: float = 86400, max_size: int = 1000,
                 clock: Callable[[], datetime] = datetime.now):
        if ttl <= 0:
            raise CacheError("Cache ttl must be positive")
        if max_size <= 0:
            raise CacheError("Cache max_size must be positive")

        self.ttl = ttl
        self.max_size = max_size
        self._clock = clock
        self._entries: Dict[str, SynonymCacheEntry] = {}
        self._hits = 0
        self._misses = 0

    def get(self, word: str) -> Optional[FrozenSet[str]]:
        """
        Get the cached synonym set for a word.

        Args:
            word: Normalized answer word

        Returns:
            Cached synonyms or None if not found/expired
        """
        entry = self._entries.get(word)
        now = self._clock()

        if entry is None:
            self._misses += 1
            return None

        if entry.is_expired(now):
            logger.debug(f"Synonym cache entry for '{word}' expired")
            self._entries.pop(word, None)
            self._misses += 1
            return None

        entry.access(now)
        self._hits += 1
        return entry.synonyms

    def set(self, word: str, synonyms: Iterable[str]) -> FrozenSet[str]:
        """
        Store a synonym set for a word with a fresh timestamp.

        Args:
            word: Normalized answer word
            synonyms: Normalized synonyms

        Returns:
            The frozen synonym set as stored
        """
        if word not in self._entries and len(self._entries) >= self.max_size:
            self._cleanup_expired()
            if len(self._entries) >= self.max_size:
                self._evict_lru()

        frozen = frozenset(synonyms)
        self._entries[word] = SynonymCacheEntry(
            word=word,
            synonyms=frozen,
            fetched_at=self._clock(),
            ttl=self.ttl,
        )
        return frozen

    def delete(self, word: str) -> bool:
        """Delete entry from cache; True if an entry was removed."""
        return self._entries.pop(word, None) is not None

    def clear(self) -> None:
        """Clear all cache entries."""
        self._entries.clear()
        self._hits = 0
        self._misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, word: str) -> bool:
        entry = self._entries.get(word)
        return entry is not None and not entry.is_expired(self._clock())

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        now = self._clock()
        expired = sum(1 for entry in self._entries.values() if entry.is_expired(now))
        lookups = self._hits + self._misses

        return {
            "total_entries": len(self._entries),
            "expired_entries": expired,
            "active_entries": len(self._entries) - expired,
            "hits": self._hits,
            "misses": self._misses,
            "max_size": self.max_size,
            "hit_rate": self._hits / lookups if lookups else 0.0,
        }

    def _cleanup_expired(self) -> None:
        """Remove expired entries."""
        now = self._clock()
        expired_keys = [key for key, entry in self._entries.items() if entry.is_expired(now)]
        for key in expired_keys:
            del self._entries[key]

    def _evict_lru(self) -> None:
        """Evict the least recently used entry."""
        if not self._entries:
            return

        lru_key = min(
            self._entries,
            key=lambda k: self._entries[k].last_accessed or self._entries[k].fetched_at
        )
        logger.debug(f"Evicting synonym cache entry for '{lru_key}'")
        del self._entries[lru_key]
