"""
Validation Result Types

Tier enumeration and the verdict returned for each validated guess.
"""

from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, Optional


class MatchTier(str, Enum):
    """Validation tiers, in the order the engine evaluates them."""
    EXACT = "exact"
    VARIANT = "variant"
    FUZZY = "fuzzy"
    SYNONYM = "synonym"
    NONE = "none"


@dataclass(frozen=True)
class MatchResult:
    """Verdict for a single guess."""
    accepted: bool
    tier: MatchTier
    distance: Optional[int] = None
    matched_against: Optional[str] = None
    normalized_input: str = ""

    @classmethod
    def rejected(cls, normalized_input: str = "") -> "MatchResult":
        return cls(accepted=False, tier=MatchTier.NONE, normalized_input=normalized_input)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['tier'] = self.tier.value
        return data
