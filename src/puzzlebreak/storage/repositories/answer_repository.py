"""
Answer Repository

SQLAlchemy-backed answer store and question/answer write paths.
"""

from typing import Iterable, List, Optional
from sqlalchemy import select
from sqlalchemy.orm import Session

from puzzlebreak.core.exceptions import AnswerNotFoundError, ConfigurationError, DatabaseError
from puzzlebreak.evaluation.normalizer import normalize
from puzzlebreak.storage.base import AnswerStore, StoredAnswer, require_string_list
from puzzlebreak.storage.models import Question, Answer
from puzzlebreak.utils.logging import get_logger

logger = get_logger(__name__)


class AnswerRepository(AnswerStore):
    """Repository for questions and their stored answers."""

    def __init__(self, session: Session):
        """Initialize repository with a session."""
        self.session = session

    def get_answer(self, question_id: str) -> StoredAnswer:
        """Resolve the first answer row stored for a question."""
        try:
            answer = self.session.execute(
                select(Answer)
                .where(Answer.question_id == question_id)
                .order_by(Answer.id)
                .limit(1)
            ).scalar_one_or_none()
        except Exception as e:
            raise DatabaseError(
                f"Failed to get answer for question {question_id}: {str(e)}",
                operation="get",
                table="answers"
            ) from e

        if answer is None:
            raise AnswerNotFoundError(question_id)

        return StoredAnswer(
            question_id=answer.question_id,
            canonical_answer=answer.canonical_answer,
            variants=frozenset(answer.variants or [])
        )

    def get_question(self, question_id: str) -> Optional[Question]:
        """Get question by ID."""
        try:
            return self.session.get(Question, question_id)
        except Exception as e:
            raise DatabaseError(
                f"Failed to get question {question_id}: {str(e)}",
                operation="get",
                table="questions"
            ) from e

    def list_questions(self, limit: Optional[int] = None) -> List[Question]:
        """List questions ordered by ID."""
        try:
            query = select(Question).order_by(Question.id)
            if limit:
                query = query.limit(limit)
            return list(self.session.execute(query).scalars())
        except Exception as e:
            raise DatabaseError(
                f"Failed to list questions: {str(e)}",
                operation="query",
                table="questions"
            ) from e

    def add_question(self, question_id: str, canonical_answer: str,
                     variants: Iterable[str] = (), items: Iterable[str] = ()) -> Question:
        """
        Create or replace a question together with its answer.

        Raises:
            ConfigurationError: If the answer or a variant normalizes to empty,
                or variants/items is a bare string instead of a list of strings
        """
        require_string_list(question_id, "variants", variants)
        require_string_list(question_id, "items", items)
        variant_list = self._validated_variants(question_id, canonical_answer, variants)

        try:
            question = self.session.get(Question, question_id)
            if question is None:
                question = Question(id=question_id, items=list(items))
                self.session.add(question)
            else:
                question.items = list(items) or question.items
                question.answers.clear()

            question.answers.append(Answer(canonical_answer=canonical_answer, variants=variant_list))
            self.session.flush()
            logger.info(f"Stored question {question_id} with {len(variant_list)} variants")
            return question

        except Exception as e:
            self.session.rollback()
            raise DatabaseError(
                f"Failed to save question {question_id}: {str(e)}",
                operation="insert",
                table="questions"
            ) from e

    @staticmethod
    def _validated_variants(question_id: str, canonical_answer: str,
                            variants: Iterable[str]) -> List[str]:
        if not normalize(canonical_answer):
            raise ConfigurationError(
                "Canonical answer is empty after normalization",
                {"question_id": question_id}
            )

        unique = []
        seen = set()
        for variant in variants:
            key = normalize(variant)
            if not key:
                raise ConfigurationError(
                    "Variant is empty after normalization",
                    {"question_id": question_id, "variant": variant}
                )
            if key not in seen:
                seen.add(key)
                unique.append(variant)
        return unique
