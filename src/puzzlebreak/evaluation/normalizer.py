"""
Text Normalization

Canonical form applied to guesses and stored answers before any comparison.
"""


def normalize(text: str) -> str:
    """
    Normalize text for comparison.

    Strips surrounding whitespace, case-folds, and collapses internal
    whitespace runs to a single space. Whitespace-only input becomes "".
    """
    return " ".join(text.casefold().split())
