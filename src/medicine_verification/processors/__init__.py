# ============================================================================
# src/medicine_verification/processors/__init__.py
# ============================================================================
"""
Document-level processors built on the matcher.
"""

from .prescription import PrescriptionVerifier, PrescriptionVerification

__all__ = ['PrescriptionVerifier', 'PrescriptionVerification']
