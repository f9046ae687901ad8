"""
Pytest Configuration

Global test configuration and fixtures for the answer validation test suite.
"""

import pytest
import tempfile
from pathlib import Path
from typing import Set
from unittest.mock import AsyncMock

# Add src to Python path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from puzzlebreak.core.config import AppConfig, ValidationConfig, DatabaseConfig, LoggingConfig, set_config
from puzzlebreak.core.database import close_connections, create_tables
from puzzlebreak.evaluation.engine import AnswerValidationEngine
from puzzlebreak.evaluation.synonym_matcher import SynonymMatcher
from puzzlebreak.storage.cache import SynonymCache
from puzzlebreak.storage.memory import InMemoryAnswerStore
from puzzlebreak.synonyms.base import SynonymLookup
from puzzlebreak.synonyms.static import StaticSynonymLookup


class FailingSynonymLookup(SynonymLookup):
    """Synonym lookup that always raises the given exception."""

    name = "failing"

    def __init__(self, error: Exception):
        self.error = error
        self.lookup_count = 0

    async def lookup_synonyms(self, word: str) -> Set[str]:
        self.lookup_count += 1
        raise self.error


@pytest.fixture
def temp_dir():
    """Provide a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def test_config(temp_dir):
    """Provide test configuration backed by a temporary SQLite database."""
    return AppConfig(
        name="Test PuzzleBreak",
        version="test",
        debug=True,
        validation=ValidationConfig(fuzzy_threshold=2, synonym_lookup_timeout=0.5),
        database=DatabaseConfig(url=f"sqlite:///{temp_dir}/test.db"),
        logging=LoggingConfig(level="DEBUG", file=str(temp_dir / "test.log")),
    )


@pytest.fixture
def test_database(test_config):
    """Install the test configuration globally and create the schema."""
    close_connections()
    set_config(test_config)
    create_tables()
    yield test_config
    close_connections()
    set_config(None)


@pytest.fixture
def answer_store():
    """Answer store holding the sample 'round' puzzle."""
    store = InMemoryAnswerStore()
    store.add("q1", "round", {"circular", "spherical"})
    store.add("q2", "Ice Cream", {"gelato"})
    return store


@pytest.fixture
def static_lookup():
    """Synonym lookup with a small fixed vocabulary."""
    return StaticSynonymLookup({
        "round": ["Globular", "rotund", "orbicular"],
        "ice cream": ["frozen custard"],
    })


@pytest.fixture
def synonym_cache():
    """Isolated synonym cache."""
    return SynonymCache(ttl=60, max_size=10)


@pytest.fixture
def engine(answer_store, static_lookup, synonym_cache):
    """Validation engine using the in-memory store and static synonyms."""
    matcher = SynonymMatcher(static_lookup, cache=synonym_cache, timeout=1.0)
    return AnswerValidationEngine(answer_store, synonym_matcher=matcher)


@pytest.fixture
def mock_lookup():
    """SynonymLookup double whose lookup_synonyms is an AsyncMock."""
    lookup = AsyncMock(spec=SynonymLookup)
    lookup.lookup_synonyms.return_value = set()
    return lookup


@pytest.fixture
def failing_lookup():
    """Factory for synonym lookups that always raise."""
    return FailingSynonymLookup
