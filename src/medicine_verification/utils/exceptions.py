# ============================================================================
# src/medicine_verification/utils/exceptions.py
# ============================================================================
"""
Custom exceptions for medicine verification.
"""

from typing import Any, Dict, List, Optional


class MedicineVerificationError(Exception):
    """Base exception for all medicine verification errors."""
    pass


class RegistryError(MedicineVerificationError):
    """Error talking to the medicine registry."""
    pass


class RegistryQueryError(RegistryError):
    """A single registry lookup failed."""
    def __init__(self, message: str, field: Optional[str] = None, term: Optional[str] = None):
        super().__init__(message)
        self.field = field
        self.term = term


class RegistryUnavailableError(RegistryError):
    """Registry cannot be reached at all; no lookup was attempted."""
    pass


class RegistryImportError(MedicineVerificationError):
    """Registry spreadsheet could not be imported."""
    def __init__(self, message: str, invalid_records: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.invalid_records = invalid_records or []


class ConfigurationError(MedicineVerificationError):
    """Invalid configuration."""
    pass


class InvalidFileFormatError(MedicineVerificationError):
    """Invalid file format."""
    pass
