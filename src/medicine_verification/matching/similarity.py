# ============================================================================
# src/medicine_verification/matching/similarity.py
# ============================================================================
"""
String similarity primitives for registry matching.

Edit-distance based scores used to rate partial and suffix matches
between an extracted medicine name and a registered name.
"""

import math
from typing import Optional

DEFAULT_SUFFIX_LENGTH = 5
DEFAULT_SUFFIX_WEIGHT = 0.7


def edit_distance(a: str, b: str) -> int:
    """Calculate Levenshtein edit distance between two strings."""
    if len(a) < len(b):
        return edit_distance(b, a)

    if len(b) == 0:
        return len(a)

    previous_row = list(range(len(b) + 1))
    for i, c1 in enumerate(a):
        current_row = [i + 1]
        for j, c2 in enumerate(b):
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (c1 != c2)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row

    return previous_row[-1]


def similarity(a: str, b: str) -> float:
    """
    Normalized similarity in [0, 1].

    Callers lower-case both strings first; comparison here is
    case-sensitive.
    """
    if len(a) > len(b):
        longer, shorter = a, b
    else:
        longer, shorter = b, a

    if len(longer) == 0:
        return 1.0

    return (len(longer) - edit_distance(longer, shorter)) / len(longer)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def match_confidence(extracted: str, registered: Optional[str]) -> int:
    """Confidence (0-100) for a partial match on the full names."""
    if not registered:
        return 0
    return _round_half_up(similarity(extracted.lower(), registered.lower()) * 100)


def suffix_match_confidence(
    extracted: str,
    registered: Optional[str],
    suffix_length: int = DEFAULT_SUFFIX_LENGTH,
    suffix_weight: float = DEFAULT_SUFFIX_WEIGHT
) -> int:
    """
    Confidence (0-100) for a suffix match.

    Blends similarity of the trailing characters (weighted by
    suffix_weight) with similarity of the full names.

    Args:
        extracted: Name as read off the prescription
        registered: Name from the registry
        suffix_length: Maximum trailing characters compared
        suffix_weight: Share of the score given to the suffix

    Returns:
        Integer confidence, 0 when either name is empty
    """
    if not registered or not extracted:
        return 0

    extracted_lower = extracted.lower()
    registered_lower = registered.lower()

    length = min(suffix_length, len(extracted_lower), len(registered_lower))
    suffix_sim = similarity(extracted_lower[-length:], registered_lower[-length:])
    overall_sim = similarity(extracted_lower, registered_lower)

    return _round_half_up((suffix_sim * suffix_weight + overall_sim * (1 - suffix_weight)) * 100)
