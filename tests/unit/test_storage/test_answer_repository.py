"""
Unit tests for AnswerRepository.
"""

import pytest

from puzzlebreak.core.database import get_db_session
from puzzlebreak.core.exceptions import AnswerNotFoundError, ConfigurationError
from puzzlebreak.storage.models import Answer
from puzzlebreak.storage.repositories import AnswerRepository


class TestAnswerRepository:
    """Test cases for AnswerRepository."""

    def test_add_and_get_answer(self, test_database):
        """Test a stored question resolves to its answer."""
        with get_db_session() as session:
            AnswerRepository(session).add_question(
                "q1", "round", variants=["circular", "spherical"], items=["ball", "globe", "wheel"]
            )

        with get_db_session() as session:
            repo = AnswerRepository(session)
            answer = repo.get_answer("q1")
            question = repo.get_question("q1")

            assert answer.canonical_answer == "round"
            assert answer.variants == frozenset({"circular", "spherical"})
            assert question.items == ["ball", "globe", "wheel"]

    def test_missing_answer(self, test_database):
        """Test unknown ids raise AnswerNotFoundError through the session."""
        with pytest.raises(AnswerNotFoundError):
            with get_db_session() as session:
                AnswerRepository(session).get_answer("missing")

    def test_duplicate_variants_collapsed(self, test_database):
        """Test variants that normalize identically are stored once."""
        with get_db_session() as session:
            AnswerRepository(session).add_question("q1", "round", variants=["Circular", "circular "])

        with get_db_session() as session:
            assert AnswerRepository(session).get_answer("q1").variants == frozenset({"Circular"})

    def test_readding_replaces_answer(self, test_database):
        """Test adding an existing question replaces its answer row."""
        with get_db_session() as session:
            repo = AnswerRepository(session)
            repo.add_question("q1", "round", items=["ball"])
            repo.add_question("q1", "circle")

        with get_db_session() as session:
            repo = AnswerRepository(session)
            assert repo.get_answer("q1").canonical_answer == "circle"
            assert repo.get_question("q1").items == ["ball"]
            assert session.query(Answer).count() == 1

    def test_first_answer_row_is_used(self, test_database):
        """Test the lowest-id answer wins when several rows exist."""
        with get_db_session() as session:
            repo = AnswerRepository(session)
            repo.add_question("q1", "round")
            session.add(Answer(question_id="q1", canonical_answer="square", variants=[]))

        with get_db_session() as session:
            assert AnswerRepository(session).get_answer("q1").canonical_answer == "round"

    @pytest.mark.parametrize("canonical,variants", [("   ", []), ("round", ["circular", "  "])])
    def test_blank_answers_rejected(self, test_database, canonical, variants):
        """Test answers or variants that normalize to empty are refused."""
        with pytest.raises(ConfigurationError):
            with get_db_session() as session:
                AnswerRepository(session).add_question("q1", canonical, variants=variants)

    @pytest.mark.parametrize("field", ["variants", "items"])
    def test_bare_string_lists_rejected(self, test_database, field):
        """Test a single string is not split into one entry per character."""
        with pytest.raises(ConfigurationError, match=field):
            with get_db_session() as session:
                AnswerRepository(session).add_question("q1", "round", **{field: "circular"})

        with get_db_session() as session:
            assert AnswerRepository(session).get_question("q1") is None

    def test_list_questions(self, test_database):
        """Test questions are listed in id order."""
        with get_db_session() as session:
            repo = AnswerRepository(session)
            repo.add_question("b", "beta")
            repo.add_question("a", "alpha")

        with get_db_session() as session:
            assert [q.id for q in AnswerRepository(session).list_questions()] == ["a", "b"]
