# ============================================================================
# src/medicine_verification/matching/__init__.py
# ============================================================================
"""
Registry matching: similarity scores and the strategy cascade.
"""

from .similarity import edit_distance, similarity, match_confidence, suffix_match_confidence
from .matcher import MedicineMatcher, EXACT_MATCH_CONFIDENCE

__all__ = [
    'edit_distance',
    'similarity',
    'match_confidence',
    'suffix_match_confidence',
    'MedicineMatcher',
    'EXACT_MATCH_CONFIDENCE',
]
