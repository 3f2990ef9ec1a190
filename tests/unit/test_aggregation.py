# ============================================================================
# FILE: tests/unit/test_aggregation.py
# ============================================================================
"""
Unit tests for prescription-level status aggregation
"""

from datetime import date, datetime

import pytest

from medicine_verification.core.context.enums import MatchType, VerificationStatus
from medicine_verification.core.context.extracted_medicine import ExtractedMedicine
from medicine_verification.core.context.match_verdict import MatchVerdict
from medicine_verification.core.context.registry_record import RegistryRecord
from medicine_verification.processors.prescription.aggregation import (
    INVALID_DATE_NOTE,
    parse_prescription_date,
    summarize_verification,
)


def _approved(name="Panadol"):
    record = RegistryRecord(id=1, generic_name="paracetamol", brand_name="Panadol")
    return MatchVerdict.approved(ExtractedMedicine(name=name), record, MatchType.BRANDNAME_EXACT, 100)


def _unmatched(name="Unknownium"):
    return MatchVerdict.unmatched(ExtractedMedicine(name=name))


class TestSummarizeVerification:
    """Test status rules"""

    def test_no_medicines(self):
        summary = summarize_verification([])

        assert summary.status == VerificationStatus.FAILED
        assert summary.notes == "No medicines detected in prescription"
        assert summary.total == 0

    def test_all_verified(self):
        summary = summarize_verification([_approved(), _approved("Zyrtec")])

        assert summary.status == VerificationStatus.VERIFIED
        assert summary.notes == "All medicines verified successfully"
        assert summary.verified_count == 2
        assert summary.requires_manual_review is False

    def test_partial(self):
        summary = summarize_verification([_approved(), _unmatched(), _unmatched("Other")])

        assert summary.status == VerificationStatus.MANUAL
        assert summary.notes == (
            "Partial verification: 1 out of 3 medicines verified; manual inspection required"
        )
        assert summary.requires_manual_review is True

    def test_none_verified(self):
        summary = summarize_verification([_unmatched()])

        assert summary.status == VerificationStatus.FAILED
        assert summary.notes == "No medicines verified; manual inspection required"

    def test_lookup_error_counts_as_unverified(self):
        failed = MatchVerdict.failed(ExtractedMedicine(name="Boom"), "timeout")
        summary = summarize_verification([_approved(), failed])

        assert summary.status == VerificationStatus.MANUAL

    def test_date_note_appended(self):
        summary = summarize_verification([_approved()], date_note=INVALID_DATE_NOTE)

        assert summary.status == VerificationStatus.VERIFIED
        assert summary.notes == f"All medicines verified successfully; {INVALID_DATE_NOTE}"

    def test_to_dict(self):
        assert summarize_verification([_unmatched()]).to_dict() == {
            'status': 'failed',
            'notes': "No medicines verified; manual inspection required",
            'total': 1,
            'verified_count': 0,
        }


class TestParsePrescriptionDate:
    """Test prescription date handling"""

    @pytest.mark.parametrize("value", [None, ""])
    def test_missing(self, value):
        assert parse_prescription_date(value) == (None, "")

    def test_iso_string(self):
        assert parse_prescription_date("2024-03-18") == (date(2024, 3, 18), "")

    def test_date_and_datetime(self):
        assert parse_prescription_date(date(2024, 1, 2)) == (date(2024, 1, 2), "")
        assert parse_prescription_date(datetime(2024, 1, 2, 9, 30)) == (date(2024, 1, 2), "")

    @pytest.mark.parametrize("value", ["18/03/2024", "2024-02-30", "yesterday", "20240318", "2024-03-18T10:00:00"])
    def test_invalid(self, value):
        assert parse_prescription_date(value) == (None, INVALID_DATE_NOTE)
