# ============================================================================
# src/medicine_verification/importers/__init__.py
# ============================================================================
"""
Registry data loaders.
"""

from .registry_importer import (
    ImportReport,
    read_registry_sheet,
    normalize_row,
    import_registry,
    HEADER_ALIASES,
)

__all__ = [
    'ImportReport',
    'read_registry_sheet',
    'normalize_row',
    'import_registry',
    'HEADER_ALIASES',
]
