# ============================================================================
# src/medicine_verification/processors/prescription/__init__.py
# ============================================================================
"""
Prescription verification module.
"""

from .aggregation import (
    VerificationSummary,
    summarize_verification,
    parse_prescription_date,
    INVALID_DATE_NOTE,
)
from .processor import PrescriptionVerifier, PrescriptionVerification

__all__ = [
    'VerificationSummary',
    'summarize_verification',
    'parse_prescription_date',
    'INVALID_DATE_NOTE',
    'PrescriptionVerifier',
    'PrescriptionVerification',
]
