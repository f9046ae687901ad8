"""
WordNet Synonym Lookup

Offline synonym provider backed by the NLTK WordNet corpus. Corpus reads
are blocking, so they run in the default executor.
"""

import asyncio
import threading
from typing import Set

import nltk
from nltk.corpus import wordnet

from .base import SynonymLookup
from puzzlebreak.core.exceptions import SynonymLookupError
from puzzlebreak.utils.logging import get_logger

logger = get_logger(__name__)


class WordNetSynonymLookup(SynonymLookup):
    """Synonyms from WordNet lemma names across all synsets of a word."""

    name = "wordnet"

    def __init__(self, download_if_missing: bool = True):
        self.download_if_missing = download_if_missing
        self._corpus_ready = False
        self._corpus_lock = threading.Lock()

    async def lookup_synonyms(self, word: str) -> Set[str]:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._lookup_blocking, word)

    def _lookup_blocking(self, word: str) -> Set[str]:
        self._ensure_corpus()

        try:
            synsets = wordnet.synsets(word.replace(' ', '_'))
        except LookupError as e:
            raise SynonymLookupError(f"WordNet corpus unavailable: {str(e)}", word=word) from e

        synonyms = set()
        for synset in synsets:
            for lemma in synset.lemma_names():
                synonyms.add(lemma.replace('_', ' '))

        synonyms.discard(word)
        return synonyms

    def _ensure_corpus(self) -> None:
        """Download the WordNet corpus once if it is not installed."""
        if self._corpus_ready:
            return

        with self._corpus_lock:
            if self._corpus_ready:
                return
            try:
                nltk.data.find('corpora/wordnet')
            except LookupError:
                if not self.download_if_missing:
                    raise SynonymLookupError("WordNet corpus is not installed")
                logger.info("Downloading NLTK WordNet corpus")
                if not nltk.download('wordnet', quiet=True):
                    raise SynonymLookupError("Failed to download WordNet corpus")
            self._corpus_ready = True
