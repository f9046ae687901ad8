"""
Synonym Lookup Interface

Abstract base class for synonym providers. The synonym matcher only
depends on this interface so providers can be swapped or faked.
"""

from abc import ABC, abstractmethod
from typing import Set


class SynonymLookup(ABC):
    """Abstract base class for synonym lookup services."""

    name: str = "base"

    @abstractmethod
    async def lookup_synonyms(self, word: str) -> Set[str]:
        """
        Return candidate synonyms for a word.

        Args:
            word: Query word (already normalized)

        Returns:
            Set of synonym strings, in no particular order

        Raises:
            SynonymLookupError: If the service is unreachable or the response is malformed
        """
        pass

    async def close(self) -> None:
        """Release any held resources."""
        return None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
