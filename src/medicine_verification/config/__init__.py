# ============================================================================
# src/medicine_verification/config/__init__.py
# ============================================================================
"""
Convenient imports for all settings
"""

from .matching_config import MatchingSettings, matching_settings
from .registry_config import RegistrySettings, registry_settings
from .logging_config import LoggingSettings, logging_settings
