# ============================================================================
# src/medicine_verification/utils/__init__.py
# ============================================================================
"""
Utility modules for medicine verification.
"""

from .exceptions import (
    MedicineVerificationError,
    RegistryError,
    RegistryQueryError,
    RegistryUnavailableError,
    RegistryImportError,
    ConfigurationError,
    InvalidFileFormatError,
)

from .logging import (
    setup_logging,
    get_logger,
    JsonFormatter,
    log_performance,
)

__all__ = [
    # Exceptions
    'MedicineVerificationError',
    'RegistryError',
    'RegistryQueryError',
    'RegistryUnavailableError',
    'RegistryImportError',
    'ConfigurationError',
    'InvalidFileFormatError',
    # Logging
    'setup_logging',
    'get_logger',
    'JsonFormatter',
    'log_performance',
]
