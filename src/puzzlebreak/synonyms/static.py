"""
Static Synonym Lookup

Mapping-backed provider for offline use and tests.
"""

from typing import Dict, Iterable, Mapping, Set

from .base import SynonymLookup
from puzzlebreak.evaluation.normalizer import normalize


class StaticSynonymLookup(SynonymLookup):
    """Serves synonyms from an in-memory mapping."""

    name = "static"

    def __init__(self, mapping: Mapping[str, Iterable[str]] = None):
        self.mapping: Dict[str, Set[str]] = {
            normalize(word): set(synonyms) for word, synonyms in (mapping or {}).items()
        }
        self.lookup_count = 0

    async def lookup_synonyms(self, word: str) -> Set[str]:
        self.lookup_count += 1
        return set(self.mapping.get(normalize(word), set()))
