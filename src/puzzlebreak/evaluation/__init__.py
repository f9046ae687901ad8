"""
Evaluation Module

Answer validation: normalization, edit distance, exact/variant and
synonym matching, and the tiered validation engine.
"""

from .normalizer import normalize
from .distance import edit_distance, bounded_edit_distance, is_fuzzy_match
from .matcher import match_exact_or_variant, matches_exact_or_variant
from .synonym_matcher import SynonymMatcher
from .types import MatchResult, MatchTier
from .engine import AnswerValidationEngine

__all__ = [
    "normalize",
    "edit_distance",
    "bounded_edit_distance",
    "is_fuzzy_match",
    "match_exact_or_variant",
    "matches_exact_or_variant",
    "SynonymMatcher",
    "MatchResult",
    "MatchTier",
    "AnswerValidationEngine",
]
