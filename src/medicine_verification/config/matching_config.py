# ============================================================================
# src/medicine_verification/config/matching_config.py
# ============================================================================
"""
Matching Settings
- Suffix window for the suffix strategies
- Suffix vs overall similarity weighting
- Lookup concurrency for the async verifier
"""

from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings


class MatchingSettings(BaseSettings):
    MATCH_SUFFIX_LENGTH: int = Field(
        default=5,
        ge=1,
        description="Trailing characters compared by the suffix strategies"
    )
    MATCH_MIN_SUFFIX_LENGTH: Optional[int] = Field(
        default=None,
        ge=1,
        description="Shortest suffix tried when the full suffix finds no candidates. Unset means a single full-suffix lookup."
    )
    MATCH_SUFFIX_WEIGHT: float = Field(
        default=0.7,
        ge=0.0, le=1.0,
        description="Weight of suffix similarity in suffix confidence (rest goes to overall similarity)"
    )
    MATCH_MAX_CONCURRENT_LOOKUPS: int = Field(
        default=5,
        ge=1,
        description="Maximum mentions looked up simultaneously by verify_async"
    )

    @model_validator(mode="after")
    def _check_suffix_window(self):
        if self.MATCH_MIN_SUFFIX_LENGTH is not None and self.MATCH_MIN_SUFFIX_LENGTH > self.MATCH_SUFFIX_LENGTH:
            raise ValueError("MATCH_MIN_SUFFIX_LENGTH cannot exceed MATCH_SUFFIX_LENGTH")
        return self


matching_settings = MatchingSettings()
