# ============================================================================
# src/medicine_verification/core/context/registry_record.py
# ============================================================================
"""
Reference entry from the approved medicine registry.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class RegistryRecord:
    id: Any
    generic_name: Optional[str]
    brand_name: Optional[str]
    dosage_code: Optional[str] = None
