"""
Unit tests for InMemoryAnswerStore.
"""

import pytest

from puzzlebreak.core.exceptions import AnswerNotFoundError, ConfigurationError
from puzzlebreak.storage.base import StoredAnswer
from puzzlebreak.storage.memory import InMemoryAnswerStore


class TestInMemoryAnswerStore:
    """Test cases for InMemoryAnswerStore."""

    def test_add_and_get(self):
        """Test stored answers round-trip as StoredAnswer values."""
        store = InMemoryAnswerStore()
        store.add("q1", "round", ["circular", "circular"])

        answer = store.get_answer("q1")

        assert answer == StoredAnswer("q1", "round", frozenset({"circular"}))

    def test_initial_answers(self):
        """Test answers passed at construction are available."""
        store = InMemoryAnswerStore([StoredAnswer("q9", "gelato")])

        assert store.get_answer("q9").canonical_answer == "gelato"
        assert len(store) == 1

    def test_bare_string_variants_rejected(self):
        """Test a single string is not split into per-character variants."""
        store = InMemoryAnswerStore()

        with pytest.raises(ConfigurationError):
            store.add("q1", "round", "circular")

        assert len(store) == 0

    def test_missing_question(self):
        """Test unknown ids raise AnswerNotFoundError."""
        with pytest.raises(AnswerNotFoundError, match="q404"):
            InMemoryAnswerStore().get_answer("q404")
