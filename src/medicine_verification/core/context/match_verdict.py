# ============================================================================
# src/medicine_verification/core/context/match_verdict.py
# ============================================================================
"""
Per-medicine verification outcome
- Whether the medicine was found in the registry
- Which record and strategy produced the hit
- Pass-through prescription details
- Lookup error, if the registry failed for this medicine
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .enums import MatchType
from .extracted_medicine import ExtractedMedicine
from .registry_record import RegistryRecord


@dataclass(frozen=True)
class MatchedRecord:
    id: Any
    brand_name: Optional[str]
    generic_name: Optional[str]
    dosage_code: Optional[str]
    match_type: MatchType

    @classmethod
    def from_record(cls, record: RegistryRecord, match_type: MatchType) -> "MatchedRecord":
        return cls(
            id=record.id,
            brand_name=record.brand_name,
            generic_name=record.generic_name,
            dosage_code=record.dosage_code,
            match_type=match_type,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'brand_name': self.brand_name,
            'generic_name': self.generic_name,
            'dosage_code': self.dosage_code,
            'match_type': self.match_type.value,
        }


@dataclass(frozen=True)
class MatchVerdict:
    extracted_name: Optional[str]
    is_approved: bool
    match_type: MatchType = MatchType.NONE
    match_confidence: int = 0
    matched_record: Optional[MatchedRecord] = None

    # Pass-through from the extracted medicine
    dosage: Optional[str] = None
    frequency: Optional[str] = None
    duration: Optional[str] = None
    instructions: Optional[str] = None
    quantity: Optional[Any] = None

    # Set only when the registry lookup failed for this medicine
    error: Optional[str] = None

    @classmethod
    def approved(
        cls,
        medicine: ExtractedMedicine,
        record: RegistryRecord,
        match_type: MatchType,
        confidence: int
    ) -> "MatchVerdict":
        return cls(
            extracted_name=medicine.name,
            is_approved=True,
            match_type=match_type,
            match_confidence=confidence,
            matched_record=MatchedRecord.from_record(record, match_type),
            **_pass_through(medicine),
        )

    @classmethod
    def unmatched(cls, medicine: ExtractedMedicine) -> "MatchVerdict":
        return cls(
            extracted_name=medicine.name,
            is_approved=False,
            **_pass_through(medicine),
        )

    @classmethod
    def failed(cls, medicine: ExtractedMedicine, error: str) -> "MatchVerdict":
        return cls(
            extracted_name=medicine.name,
            is_approved=False,
            error=error,
            **_pass_through(medicine),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'extracted_name': self.extracted_name,
            'is_approved': self.is_approved,
            'matched_record': self.matched_record.to_dict() if self.matched_record else None,
            'match_type': self.match_type.value,
            'match_confidence': self.match_confidence,
            'dosage': self.dosage,
            'frequency': self.frequency,
            'duration': self.duration,
            'instructions': self.instructions,
            'quantity': self.quantity,
        }
        if self.error is not None:
            data['error'] = self.error
        return data

    def to_prescription_entry(self) -> Dict[str, Any]:
        """
        Shape stored on the prescription for this medicine.

        Unmatched medicines still get a registry_match block so downstream
        readers never have to branch on its presence.
        """
        record = self.matched_record
        return {
            'original_text': self.extracted_name,
            'name': self.extracted_name or None,
            'dosage': self.dosage or None,
            'frequency': self.frequency or None,
            'instructions': self.instructions or None,
            'verified': self.is_approved,
            'registry_match': {
                'matched': record is not None,
                'matched_record': {
                    'generic_name': record.generic_name if record else None,
                    'brand_name': record.brand_name if record else None,
                    'dosage_code': record.dosage_code if record else None,
                },
                'confidence': self.match_confidence if record else 0,
            },
        }


def _pass_through(medicine: ExtractedMedicine) -> Dict[str, Any]:
    return {
        'dosage': medicine.dosage,
        'frequency': medicine.frequency,
        'duration': medicine.duration,
        'instructions': medicine.instructions,
        'quantity': medicine.quantity,
    }
