# ============================================================================
# src/medicine_verification/core/context/extracted_medicine.py
# ============================================================================
"""
One medicine line item as read off a prescription by the upstream
OCR/LLM step. Only `name` takes part in matching; the other fields are
carried through to the verdict untouched.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ExtractedMedicine:
    name: Optional[str]
    dosage: Optional[str] = None
    frequency: Optional[str] = None
    duration: Optional[str] = None
    instructions: Optional[str] = None
    quantity: Optional[Any] = None  # upstream sends "10" or 10

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExtractedMedicine":
        return cls(
            name=data.get('name'),
            dosage=data.get('dosage'),
            frequency=data.get('frequency'),
            duration=data.get('duration'),
            instructions=data.get('instructions'),
            quantity=data.get('quantity'),
        )

    @property
    def has_name(self) -> bool:
        return isinstance(self.name, str) and bool(self.name.strip())
