# ============================================================================
# src/medicine_verification/__init__.py
# ============================================================================
"""
Medicine Verification

Checks medicine names read off prescription images against an approved
medicine registry using a prioritised cascade of exact, partial and
suffix matching.
"""

__version__ = "0.1.0"

from .core.context import (
    MatchType,
    VerificationStatus,
    RegistryField,
    ExtractedMedicine,
    RegistryRecord,
    MatchedRecord,
    MatchVerdict,
)
from .constants import MedicineRegistry, InMemoryRegistry, SQLiteRegistry
from .matching import MedicineMatcher
from .processors.prescription import (
    PrescriptionVerifier,
    PrescriptionVerification,
    VerificationSummary,
    summarize_verification,
)

__all__ = [
    'MatchType',
    'VerificationStatus',
    'RegistryField',
    'ExtractedMedicine',
    'RegistryRecord',
    'MatchedRecord',
    'MatchVerdict',
    'MedicineRegistry',
    'InMemoryRegistry',
    'SQLiteRegistry',
    'MedicineMatcher',
    'PrescriptionVerifier',
    'PrescriptionVerification',
    'VerificationSummary',
    'summarize_verification',
]
