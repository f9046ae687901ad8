"""
Synonym Matching

Best-effort fallback tier: accepts a guess that the synonym lookup service
lists as a synonym of the canonical answer. Lookup failures degrade to
"no match" and never reach the caller.
"""

import asyncio
from typing import FrozenSet, Iterable, Optional

from .normalizer import normalize
from puzzlebreak.core.exceptions import SynonymLookupError
from puzzlebreak.storage.cache import SynonymCache
from puzzlebreak.synonyms.base import SynonymLookup
from puzzlebreak.utils.logging import get_logger

logger = get_logger(__name__)


class SynonymMatcher:
    """Checks guesses against cached synonym sets of canonical answers."""

    def __init__(self, lookup: SynonymLookup, cache: Optional[SynonymCache] = None,
                 timeout: float = 3.0):
        """
        Initialize the synonym matcher.

        Args:
            lookup: Synonym lookup service
            cache: Synonym cache (a private one is created if omitted)
            timeout: Maximum seconds to wait on the lookup service
        """
        if timeout <= 0:
            raise ValueError("timeout must be positive")

        self.lookup = lookup
        self.cache = cache if cache is not None else SynonymCache()
        self.timeout = timeout

    async def is_synonym_match(self, normalized_input: str, canonical_answer: str) -> bool:
        """True when the guess is a known synonym of the canonical answer."""
        if not normalized_input:
            return False

        word = normalize(canonical_answer)
        if not word:
            return False

        synonyms = await self.get_synonyms(word)
        return normalized_input in synonyms

    async def get_synonyms(self, word: str) -> FrozenSet[str]:
        """
        Return the normalized synonym set for a normalized word.

        Served from cache when fresh; otherwise fetched and cached. A failed
        fetch returns an empty set and leaves the cache untouched.
        """
        cached = self.cache.get(word)
        if cached is not None:
            return cached

        try:
            raw = await asyncio.wait_for(self.lookup.lookup_synonyms(word), timeout=self.timeout)
            synonyms = self._normalize_synonyms(raw, word)
        except asyncio.TimeoutError:
            logger.warning(f"Synonym lookup for '{word}' timed out after {self.timeout}s")
            return frozenset()
        except Exception as e:
            logger.warning(f"Synonym lookup for '{word}' failed: {str(e)}")
            return frozenset()

        return self.cache.set(word, synonyms)

    @staticmethod
    def _normalize_synonyms(raw: Iterable[str], word: str) -> FrozenSet[str]:
        if raw is None or isinstance(raw, (str, bytes)):
            raise SynonymLookupError("Malformed synonym response", word=word)

        synonyms = set()
        for entry in raw:
            if not isinstance(entry, str):
                raise SynonymLookupError(
                    f"Malformed synonym entry of type {type(entry).__name__}",
                    word=word
                )
            normalized = normalize(entry)
            if normalized:
                synonyms.add(normalized)

        return frozenset(synonyms)
