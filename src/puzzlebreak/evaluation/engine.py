"""
Answer Validation Engine

Runs a guess through a fixed, ordered pipeline of match attempts and
returns the verdict of the first tier that accepts it:

    exact/variant -> fuzzy (canonical) -> fuzzy (each variant) -> synonym

A later tier is never evaluated once an earlier one accepts, so the
synonym service is only contacted for guesses that failed every local tier.
"""

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable, Iterable, List, Optional, Sequence, Tuple

from .distance import bounded_edit_distance
from .matcher import match_exact_or_variant
from .normalizer import normalize
from .synonym_matcher import SynonymMatcher
from .types import MatchResult, MatchTier
from puzzlebreak.core.config import AppConfig, ValidationConfig, get_config
from puzzlebreak.core.exceptions import ConfigurationError, InvalidInputError
from puzzlebreak.storage.base import AnswerStore, StoredAnswer
from puzzlebreak.storage.cache import SynonymCache
from puzzlebreak.utils.logging import get_logger, get_validation_logger, PerformanceTimer

logger = get_logger(__name__)


@dataclass(frozen=True)
class ValidationContext:
    """Inputs shared by every match attempt of one validation call."""
    normalized_input: str
    answer: StoredAnswer
    canonical: str
    variants: Tuple[str, ...]


MatchAttempt = Callable[[ValidationContext], Awaitable[Optional[MatchResult]]]


class AnswerValidationEngine:
    """Validates free-text guesses against stored answers."""

    def __init__(self, store: AnswerStore, synonym_matcher: Optional[SynonymMatcher] = None,
                 config: Optional[ValidationConfig] = None):
        """
        Initialize the engine.

        Args:
            store: Source of canonical answers and variants
            synonym_matcher: Synonym tier; omitted or None disables it
            config: Validation settings (defaults apply if None)
        """
        self.config = config or ValidationConfig()
        self.config.validate()

        self.store = store
        self.synonym_matcher = synonym_matcher
        self._owns_lookup = False
        self._owns_cache = False
        self.fuzzy_threshold = self.config.fuzzy_threshold

        self.pipeline: List[Tuple[str, MatchAttempt]] = [
            ("exact_or_variant", self._attempt_exact_or_variant),
            ("fuzzy_canonical", self._attempt_fuzzy_canonical),
            ("fuzzy_variants", self._attempt_fuzzy_variants),
        ]
        if self.synonym_matcher is not None and self.config.synonyms_enabled:
            self.pipeline.append(("synonym", self._attempt_synonym))

    @classmethod
    def from_config(cls, store: AnswerStore, config: Optional[AppConfig] = None,
                    cache: Optional[SynonymCache] = None) -> "AnswerValidationEngine":
        """
        Build an engine with the configured synonym provider and a fresh cache.

        The engine owns the lookup client it creates here (and the cache, unless
        one is passed in) and releases them on close().
        """
        from puzzlebreak.synonyms import create_synonym_lookup

        if config is None:
            config = get_config()

        validation = config.validation
        validation.validate()

        synonym_matcher = None
        if validation.synonyms_enabled:
            owns_cache = cache is None
            if owns_cache:
                cache = SynonymCache(
                    ttl=validation.synonym_cache_ttl,
                    max_size=validation.synonym_cache_max_size
                )
            synonym_matcher = SynonymMatcher(
                create_synonym_lookup(config),
                cache=cache,
                timeout=validation.synonym_lookup_timeout
            )

        engine = cls(store, synonym_matcher=synonym_matcher, config=validation)
        if synonym_matcher is not None:
            engine._owns_lookup = True
            engine._owns_cache = owns_cache
        return engine

    async def validate(self, question_id: str, raw_input: str) -> MatchResult:
        """
        Validate a raw guess for a question.

        Raises:
            InvalidInputError: If raw_input is not a string
            AnswerNotFoundError: If no answer is stored for question_id
            ConfigurationError: If the stored canonical answer is empty
        """
        if not isinstance(raw_input, str):
            raise InvalidInputError(
                f"Guess must be a string, got {type(raw_input).__name__}",
                field_name="raw_input",
                invalid_value=raw_input
            )

        log = get_validation_logger(question_id)
        with PerformanceTimer(f"validation of question {question_id}", log):
            answer = self.store.get_answer(question_id)

            normalized_input = normalize(raw_input)
            if not normalized_input:
                log.debug("Empty guess rejected")
                return MatchResult.rejected()

            context = self._build_context(normalized_input, answer)

            for name, attempt in self.pipeline:
                result = await attempt(context)
                if result is not None:
                    log.debug(f"Guess accepted by {name} tier", extra={'tier': result.tier.value})
                    return result

            log.debug("Guess rejected by all tiers", extra={'tier': MatchTier.NONE.value})
            return MatchResult.rejected(normalized_input)

    async def validate_many(self, guesses: Iterable[Tuple[str, str]]) -> List[MatchResult]:
        """Validate several (question_id, raw_input) pairs concurrently, preserving order."""
        return list(await asyncio.gather(
            *(self.validate(question_id, raw_input) for question_id, raw_input in guesses)
        ))

    def _build_context(self, normalized_input: str, answer: StoredAnswer) -> ValidationContext:
        canonical = normalize(answer.canonical_answer)
        if not canonical:
            raise ConfigurationError(
                "Stored canonical answer is empty after normalization",
                {"question_id": answer.question_id}
            )

        variants = set()
        for variant in answer.variants:
            normalized = normalize(variant)
            if normalized:
                variants.add(normalized)
            else:
                logger.warning(f"Ignoring empty variant stored for question {answer.question_id}")

        return ValidationContext(
            normalized_input=normalized_input,
            answer=answer,
            canonical=canonical,
            variants=tuple(sorted(variants)),
        )

    async def _attempt_exact_or_variant(self, context: ValidationContext) -> Optional[MatchResult]:
        tier = match_exact_or_variant(context.normalized_input, context.canonical, context.variants)
        if tier is None:
            return None
        return MatchResult(
            accepted=True,
            tier=tier,
            matched_against=context.normalized_input,
            normalized_input=context.normalized_input
        )

    async def _attempt_fuzzy_canonical(self, context: ValidationContext) -> Optional[MatchResult]:
        return self._fuzzy_against(context, (context.canonical,))

    async def _attempt_fuzzy_variants(self, context: ValidationContext) -> Optional[MatchResult]:
        return self._fuzzy_against(context, context.variants)

    def _fuzzy_against(self, context: ValidationContext,
                       targets: Sequence[str]) -> Optional[MatchResult]:
        for target in targets:
            distance = bounded_edit_distance(context.normalized_input, target, self.fuzzy_threshold)
            if distance <= self.fuzzy_threshold:
                return MatchResult(
                    accepted=True,
                    tier=MatchTier.FUZZY,
                    distance=distance,
                    matched_against=target,
                    normalized_input=context.normalized_input
                )
        return None

    async def _attempt_synonym(self, context: ValidationContext) -> Optional[MatchResult]:
        if not await self.synonym_matcher.is_synonym_match(context.normalized_input, context.canonical):
            return None
        return MatchResult(
            accepted=True,
            tier=MatchTier.SYNONYM,
            matched_against=context.canonical,
            normalized_input=context.normalized_input
        )

    async def close(self) -> None:
        """Release the lookup client and cache built by from_config(); injected ones are left open."""
        if self._owns_lookup:
            await self.synonym_matcher.lookup.close()
        if self._owns_cache:
            self.synonym_matcher.cache.clear()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
