"""
Exact and Variant Matching

Equality checks of a normalized guess against the canonical answer and
its stored variants.
"""

from typing import Iterable, Optional

from .normalizer import normalize
from .types import MatchTier


def match_exact_or_variant(normalized_input: str, canonical_answer: str,
                           variants: Iterable[str]) -> Optional[MatchTier]:
    """
    Return EXACT when the guess equals the canonical answer, VARIANT when it
    equals one of the variants, otherwise None.

    The empty guess never matches, even against data that normalizes to "".
    """
    if not normalized_input:
        return None
    if normalized_input == normalize(canonical_answer):
        return MatchTier.EXACT
    if any(normalized_input == normalize(variant) for variant in variants):
        return MatchTier.VARIANT
    return None


def matches_exact_or_variant(normalized_input: str, canonical_answer: str,
                             variants: Iterable[str]) -> bool:
    """True iff the guess equals the canonical answer or any variant."""
    return match_exact_or_variant(normalized_input, canonical_answer, variants) is not None
