"""
Edit Distance

Levenshtein distance over Unicode code points with unit costs for
insertion, deletion and substitution.
"""

from Levenshtein import distance as levenshtein_distance


def edit_distance(a: str, b: str) -> int:
    """Return the Levenshtein distance between two normalized strings."""
    return levenshtein_distance(a, b)


def bounded_edit_distance(a: str, b: str, limit: int) -> int:
    """
    Return the edit distance, or ``limit + 1`` once it is known to exceed ``limit``.

    Used on the hot path where only "within threshold or not" matters.
    """
    if limit < 0:
        raise ValueError("limit must be >= 0")
    return levenshtein_distance(a, b, score_cutoff=limit)


def is_fuzzy_match(a: str, b: str, threshold: int) -> bool:
    """True when ``a`` and ``b`` are within ``threshold`` edits of each other."""
    if threshold < 0:
        raise ValueError("threshold must be >= 0")
    return bounded_edit_distance(a, b, threshold) <= threshold
