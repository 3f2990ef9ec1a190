# ============================================================================
# src/medicine_verification/core/context/__init__.py
# ============================================================================

from .enums import MatchType, VerificationStatus, RegistryField
from .extracted_medicine import ExtractedMedicine
from .registry_record import RegistryRecord
from .match_verdict import MatchedRecord, MatchVerdict

__all__ = [
    'MatchType',
    'VerificationStatus',
    'RegistryField',
    'ExtractedMedicine',
    'RegistryRecord',
    'MatchedRecord',
    'MatchVerdict',
]
