# ============================================================================
# src/medicine_verification/core/__init__.py
# ============================================================================
"""
Core data model for medicine verification.
"""

from .context import (
    MatchType,
    VerificationStatus,
    RegistryField,
    ExtractedMedicine,
    RegistryRecord,
    MatchedRecord,
    MatchVerdict,
)
