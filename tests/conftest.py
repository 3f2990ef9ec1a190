# ============================================================================
# FILE: tests/conftest.py
# ============================================================================
"""
Pytest configuration and shared fixtures for testing.
"""

import pytest

from medicine_verification.constants.registry import InMemoryRegistry
from medicine_verification.constants.registry_db import SQLiteRegistry
from medicine_verification.core.context.extracted_medicine import ExtractedMedicine
from medicine_verification.core.context.registry_record import RegistryRecord
from medicine_verification.matching.matcher import MedicineMatcher

from tests.fakes import FailingRegistry, RecordingRegistry, UnavailableRegistry


@pytest.fixture
def registry_records():
    """Small approved-medicine list"""
    return [
        RegistryRecord(id=1, generic_name="paracetamol", brand_name="Panadol", dosage_code="T500"),
        RegistryRecord(id=2, generic_name="cetirizine", brand_name="Zyrtec", dosage_code="T10"),
        RegistryRecord(id=3, generic_name="amoxicillin", brand_name="Amoxil", dosage_code="C250"),
        RegistryRecord(id=4, generic_name="amoxicillin and clavulanate", brand_name="Augmentin", dosage_code=None),
        RegistryRecord(id=5, generic_name="ibuprofen", brand_name="Brufen", dosage_code="T400"),
    ]


@pytest.fixture
def registry(registry_records):
    return InMemoryRegistry(registry_records)


@pytest.fixture
def recording_registry(registry_records):
    return RecordingRegistry(registry_records)


@pytest.fixture
def failing_registry(registry_records):
    return FailingRegistry(registry_records, failing_names=["Boom"])


@pytest.fixture
def unavailable_registry(registry_records):
    return UnavailableRegistry(registry_records)


@pytest.fixture
def sqlite_registry(registry_records):
    db = SQLiteRegistry(":memory:")
    db.add_records(registry_records)
    yield db
    db.close()


@pytest.fixture
def matcher(registry):
    return MedicineMatcher(registry)


@pytest.fixture
def sample_medicines():
    """Medicines as read off a prescription"""
    return [
        ExtractedMedicine(
            name="Panadol",
            dosage="500mg",
            frequency="three times daily",
            duration="5 days",
            instructions="after meals",
            quantity="15",
        ),
        ExtractedMedicine(name="Cetirizine", dosage="10mg", frequency="once daily"),
        ExtractedMedicine(name="Unknownium", dosage="1 tablet"),
    ]


@pytest.fixture
def sample_extraction():
    """Extraction JSON as produced by the prescription reading step"""
    return {
        "medicines": [
            {
                "name": "Panadol",
                "dosage": "500mg",
                "frequency": "twice daily",
                "duration": "3 days",
                "instructions": None,
                "quantity": 6,
            },
            {
                "name": "Unknownium",
                "dosage": "5ml",
                "frequency": "once daily",
                "duration": None,
                "instructions": "before bed",
                "quantity": None,
            },
        ],
        "patient_info": {"name": "Jane Perera", "age": "34", "gender": "F"},
        "doctor_info": {"name": "Dr. Silva", "license_number": "SLMC 12345"},
        "prescription_date": "2024-03-18",
        "pharmacy_info": None,
    }

