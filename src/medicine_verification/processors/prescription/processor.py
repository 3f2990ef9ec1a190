# ============================================================================
# src/medicine_verification/processors/prescription/processor.py
# ============================================================================
"""
Prescription Verifier

Takes the structured output of the prescription extraction step:

    {
        "medicines": [{"name": ..., "dosage": ..., ...}, ...],
        "prescription_date": "YYYY-MM-DD" | null,
        ...
    }

checks every medicine against the registry and returns the verdicts, the
entries to store on the prescription, and the overall status.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional

from ...core.context.match_verdict import MatchVerdict
from ...matching.matcher import MedicineMatcher
from .aggregation import VerificationSummary, parse_prescription_date, summarize_verification

logger = logging.getLogger(__name__)


@dataclass
class PrescriptionVerification:
    verdicts: List[MatchVerdict]
    summary: VerificationSummary
    prescription_date: Optional[date] = None
    verified_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def entries(self) -> List[Dict[str, Any]]:
        return [verdict.to_prescription_entry() for verdict in self.verdicts]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'verification_status': self.summary.status.value,
            'verification_notes': self.summary.notes,
            'verified_count': self.summary.verified_count,
            'total_medicines': self.summary.total,
            'prescription_date': self.prescription_date.isoformat() if self.prescription_date else None,
            'verified_at': self.verified_at.isoformat(),
            'verification_results': [verdict.to_dict() for verdict in self.verdicts],
            'extracted_medicines': self.entries,
        }


class PrescriptionVerifier:
    """Verifies a whole extracted prescription against the registry."""

    def __init__(self, matcher: MedicineMatcher):
        self.matcher = matcher

    def verify(self, extracted_data: Dict[str, Any]) -> PrescriptionVerification:
        """
        Verify an extracted prescription.

        Args:
            extracted_data: Extraction JSON with "medicines" and
                optional "prescription_date"

        Returns:
            PrescriptionVerification
        """
        medicines = extracted_data.get('medicines') or []
        verdicts = self.matcher.verify(medicines)
        return self._build(extracted_data, verdicts)

    async def verify_async(
        self,
        extracted_data: Dict[str, Any],
        max_concurrent: Optional[int] = None
    ) -> PrescriptionVerification:
        """Same as verify(), looking medicines up concurrently."""
        medicines = extracted_data.get('medicines') or []
        verdicts = await self.matcher.verify_async(medicines, max_concurrent=max_concurrent)
        return self._build(extracted_data, verdicts)

    def _build(self, extracted_data: Dict[str, Any], verdicts: List[MatchVerdict]) -> PrescriptionVerification:
        prescription_date, date_note = parse_prescription_date(extracted_data.get('prescription_date'))
        summary = summarize_verification(verdicts, date_note=date_note)

        logger.info(
            f"Prescription verification: {summary.status.value.upper()} "
            f"({summary.verified_count}/{summary.total} medicines verified)"
        )

        return PrescriptionVerification(
            verdicts=verdicts,
            summary=summary,
            prescription_date=prescription_date,
        )
