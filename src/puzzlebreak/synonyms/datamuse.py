"""
Datamuse Synonym Client

Async HTTP client for the Datamuse words API (``rel_syn`` relation) with
session reuse and retry logic.
"""

import json
from typing import Any, Dict, List, Optional, Set
import aiohttp

from .base import SynonymLookup
from puzzlebreak.core.config import SynonymServiceConfig
from puzzlebreak.core.exceptions import SynonymLookupError
from puzzlebreak.utils.logging import get_logger
from puzzlebreak.utils.async_helpers import retry_with_backoff

logger = get_logger(__name__)


class DatamuseSynonymClient(SynonymLookup):
    """Datamuse API client returning synonym sets."""

    name = "datamuse"

    def __init__(self, config: Optional[SynonymServiceConfig] = None,
                 timeout_seconds: float = 10.0):
        """
        Initialize Datamuse client.

        Args:
            config: Synonym service configuration
            timeout_seconds: Total per-request timeout for the HTTP session
        """
        if config is None:
            config = SynonymServiceConfig()

        self.base_url = config.base_url.rstrip('/')
        self.max_results = config.max_results
        self.timeout_seconds = timeout_seconds
        self.session: Optional[aiohttp.ClientSession] = None

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure aiohttp session exists."""
        if self.session is None or self.session.closed:
            timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)
            self.session = aiohttp.ClientSession(timeout=timeout)
        return self.session

    async def lookup_synonyms(self, word: str) -> Set[str]:
        """
        Query Datamuse for synonyms of a word.

        Raises:
            SynonymLookupError: If the request fails or the payload is malformed
        """
        session = await self._ensure_session()
        params = {"rel_syn": word, "max": str(self.max_results)}

        payload = await self._make_request_with_retry(session, params, word)
        synonyms = self._parse_words(payload, word)

        logger.debug(f"Datamuse returned {len(synonyms)} synonyms for '{word}'")
        return synonyms

    @retry_with_backoff(max_retries=2, base_delay=0.25, max_delay=2.0)
    async def _make_request_with_retry(self, session: aiohttp.ClientSession,
                                       params: Dict[str, str], word: str) -> Any:
        """Make HTTP request with retry logic."""
        try:
            async with session.get(f"{self.base_url}/words", params=params) as response:
                response_text = await response.text()

                if response.status != 200:
                    raise SynonymLookupError(
                        f"Synonym request failed with status {response.status}",
                        word=word,
                        status_code=response.status,
                        response_body=response_text
                    )

                try:
                    return json.loads(response_text)
                except json.JSONDecodeError as e:
                    raise SynonymLookupError(
                        f"Invalid JSON response: {str(e)}",
                        word=word,
                        response_body=response_text
                    ) from e

        except aiohttp.ClientError as e:
            raise SynonymLookupError(
                f"HTTP client error: {str(e)}",
                word=word
            ) from e

    @staticmethod
    def _parse_words(payload: Any, word: str) -> Set[str]:
        """Extract the ``word`` field of each result entry."""
        if not isinstance(payload, list):
            raise SynonymLookupError(
                "Invalid response format: expected a list of results",
                word=word,
                response_body=str(payload)[:500]
            )

        words: List[str] = []
        for entry in payload:
            if not isinstance(entry, dict) or not isinstance(entry.get('word'), str):
                raise SynonymLookupError(
                    "Invalid response format: result entry without a word",
                    word=word,
                    response_body=str(entry)[:500]
                )
            words.append(entry['word'])

        return set(words)

    async def close(self) -> None:
        """Close the HTTP session."""
        if self.session is not None and not self.session.closed:
            await self.session.close()
        self.session = None
