# ============================================================================
# src/medicine_verification/constants/__init__.py
# ============================================================================
"""
Registry lookups used by the matcher.
"""

from .registry import MedicineRegistry, InMemoryRegistry
from .registry_db import SQLiteRegistry, escape_like

__all__ = [
    'MedicineRegistry',
    'InMemoryRegistry',
    'SQLiteRegistry',
    'escape_like',
]
