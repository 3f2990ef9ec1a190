# ============================================================================
# src/medicine_verification/processors/prescription/aggregation.py
# ============================================================================
"""
Prescription-level verification status.

Rolls per-medicine verdicts up into the status a pharmacist sees:
verified (nothing to check), manual (some medicines need inspection)
or failed.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Optional, Sequence, Tuple

from ...core.context.enums import VerificationStatus
from ...core.context.match_verdict import MatchVerdict

logger = logging.getLogger(__name__)

INVALID_DATE_NOTE = "Invalid prescription date format detected; set to null"


@dataclass(frozen=True)
class VerificationSummary:
    status: VerificationStatus
    notes: str
    total: int
    verified_count: int

    @property
    def requires_manual_review(self) -> bool:
        return self.status != VerificationStatus.VERIFIED

    def to_dict(self) -> Dict[str, Any]:
        return {
            'status': self.status.value,
            'notes': self.notes,
            'total': self.total,
            'verified_count': self.verified_count,
        }


def summarize_verification(
    verdicts: Sequence[MatchVerdict],
    date_note: Optional[str] = None
) -> VerificationSummary:
    """
    Derive the prescription status from its medicine verdicts.

    Args:
        verdicts: One verdict per extracted medicine
        date_note: Extra note (e.g. invalid prescription date) appended
            to the status note

    Returns:
        VerificationSummary
    """
    total = len(verdicts)
    verified_count = sum(1 for v in verdicts if v.is_approved)

    if total == 0:
        status = VerificationStatus.FAILED
        notes = "No medicines detected in prescription"
    elif verified_count == total:
        status = VerificationStatus.VERIFIED
        notes = "All medicines verified successfully"
    elif verified_count > 0:
        status = VerificationStatus.MANUAL
        notes = (
            f"Partial verification: {verified_count} out of {total} medicines verified; "
            "manual inspection required"
        )
    else:
        status = VerificationStatus.FAILED
        notes = "No medicines verified; manual inspection required"

    if date_note:
        notes = "; ".join(note for note in (notes, date_note) if note)

    return VerificationSummary(
        status=status,
        notes=notes,
        total=total,
        verified_count=verified_count,
    )


def parse_prescription_date(value: Any) -> Tuple[Optional[date], str]:
    """
    Parse the prescription date reported by the extraction step.

    Returns:
        (date or None, note). The note is empty unless the value was
        present but unparseable.
    """
    if value is None or value == "":
        return None, ""

    if isinstance(value, datetime):
        return value.date(), ""
    if isinstance(value, date):
        return value, ""

    try:
        return datetime.strptime(str(value).strip(), "%Y-%m-%d").date(), ""
    except ValueError:
        logger.warning(f"Invalid prescription_date received: {value}")
        return None, INVALID_DATE_NOTE
