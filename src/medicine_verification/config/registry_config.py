# ============================================================================
# src/medicine_verification/config/registry_config.py
# ============================================================================
"""
Registry Settings
- SQLite registry location
- Import batch size
"""

from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings


class RegistrySettings(BaseSettings):
    REGISTRY_DB_PATH: Path = Field(
        default=Path("data/registry.db"),
        description="SQLite database holding the approved medicine registry"
    )
    REGISTRY_IMPORT_BATCH_SIZE: int = Field(
        default=1000,
        ge=1,
        description="Rows inserted per transaction when importing a registry sheet"
    )


registry_settings = RegistrySettings()
