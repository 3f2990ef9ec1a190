# ============================================================================
# src/medicine_verification/core/context/enums.py
# ============================================================================
"""
Verification Enums
- Cascade match types
- Prescription verification status
- Registry name fields
"""

from enum import Enum


class MatchType(str, Enum):
    BRANDNAME_EXACT = "brandname_exact"
    GENERICNAME_EXACT = "genericname_exact"
    BRANDNAME_PARTIAL = "brandname_partial"
    GENERICNAME_PARTIAL = "genericname_partial"
    BRANDNAME_SUFFIX = "brandname_suffix"
    GENERICNAME_SUFFIX = "genericname_suffix"
    NONE = "none"


class VerificationStatus(str, Enum):
    PENDING = "pending"
    VERIFIED = "verified"     # every medicine matched
    FAILED = "failed"         # nothing detected or nothing matched
    MANUAL = "manual"         # partial match, pharmacist must inspect
    COMPLETED = "completed"


class RegistryField(str, Enum):
    BRAND = "brand"
    GENERIC = "generic"

    @property
    def attribute(self) -> str:
        """RegistryRecord attribute holding this name."""
        return f"{self.value}_name"
