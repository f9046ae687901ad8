"""
Synonym Providers

Pluggable synonym lookup services used by the synonym matching tier.
"""

from typing import Optional

from .base import SynonymLookup
from .static import StaticSynonymLookup
from puzzlebreak.core.config import AppConfig, get_config
from puzzlebreak.core.exceptions import ConfigurationError

PROVIDERS = ("datamuse", "wordnet", "static", "none")


def create_synonym_lookup(config: Optional[AppConfig] = None) -> SynonymLookup:
    """
    Build the synonym provider named by ``synonyms.provider``.

    ``none`` yields an empty static provider, so the synonym tier never matches.
    """
    if config is None:
        config = get_config()

    provider = config.synonyms.provider.lower()

    if provider == "datamuse":
        from .datamuse import DatamuseSynonymClient
        return DatamuseSynonymClient(
            config.synonyms,
            timeout_seconds=config.validation.synonym_lookup_timeout
        )
    if provider == "wordnet":
        from .wordnet import WordNetSynonymLookup
        return WordNetSynonymLookup()
    if provider == "static":
        return StaticSynonymLookup(config.synonyms.static)
    if provider == "none":
        return StaticSynonymLookup()

    raise ConfigurationError(
        f"Unknown synonym provider '{config.synonyms.provider}'",
        {"supported": list(PROVIDERS)}
    )


__all__ = [
    "SynonymLookup",
    "StaticSynonymLookup",
    "create_synonym_lookup",
    "PROVIDERS",
]
