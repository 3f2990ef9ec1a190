# ============================================================================
# src/medicine_verification/matching/matcher.py
# ============================================================================
"""
Medicine Matcher

Decides, for each medicine name read off a prescription, whether it is a
registered medicine. Each name runs through a fixed cascade of registry
lookups and the first strategy that finds a record wins:

1. Exact brand name          (confidence 100)
2. Exact generic name        (confidence 100)
3. Brand name contains it    (full-name similarity)
4. Generic name contains it  (full-name similarity)
5. Brand name shares suffix  (suffix-weighted similarity, best candidate)
6. Generic name shares suffix

Later strategies never run once an earlier one hits, even if they would
score higher. Lookup failures are confined to the medicine that caused
them.
"""

import asyncio
import logging
from functools import partial
from typing import Any, Callable, Iterable, List, Mapping, Optional, Tuple, Union

from ..config.matching_config import MatchingSettings, matching_settings
from ..constants.registry import MedicineRegistry
from ..core.context.enums import MatchType, RegistryField
from ..core.context.extracted_medicine import ExtractedMedicine
from ..core.context.match_verdict import MatchVerdict
from ..core.context.registry_record import RegistryRecord
from ..utils.exceptions import RegistryUnavailableError
from ..utils.logging import log_performance
from .similarity import match_confidence, suffix_match_confidence

logger = logging.getLogger(__name__)

EXACT_MATCH_CONFIDENCE = 100

Mention = Union[ExtractedMedicine, Mapping[str, Any]]
StrategyResult = Optional[Tuple[RegistryRecord, int]]


class MedicineMatcher:
    """
    Verifies extracted medicine names against a medicine registry.

    The registry is injected, so any MedicineRegistry implementation
    (SQLite, in-memory, a document store adapter) can back the matcher.
    """

    def __init__(self, registry: MedicineRegistry, settings: Optional[MatchingSettings] = None):
        self.registry = registry
        self.settings = settings or matching_settings

        self._cascade: List[Tuple[MatchType, Callable[[str], StrategyResult]]] = [
            (MatchType.BRANDNAME_EXACT, partial(self._match_exact, field=RegistryField.BRAND)),
            (MatchType.GENERICNAME_EXACT, partial(self._match_exact, field=RegistryField.GENERIC)),
            (MatchType.BRANDNAME_PARTIAL, partial(self._match_partial, field=RegistryField.BRAND)),
            (MatchType.GENERICNAME_PARTIAL, partial(self._match_partial, field=RegistryField.GENERIC)),
            (MatchType.BRANDNAME_SUFFIX, partial(self._match_suffix, field=RegistryField.BRAND)),
            (MatchType.GENERICNAME_SUFFIX, partial(self._match_suffix, field=RegistryField.GENERIC)),
        ]

    @log_performance(logger, "Medicine verification")
    def verify(self, mentions: Iterable[Mention]) -> List[MatchVerdict]:
        """
        Verify every mention, one at a time, in input order.

        Args:
            mentions: ExtractedMedicine objects or upstream extraction dicts

        Returns:
            One MatchVerdict per mention, same order as the input

        Raises:
            RegistryUnavailableError: registry is down before any lookup
        """
        medicines = [_as_medicine(m) for m in mentions]
        if not medicines:
            return []

        self._ensure_available()
        verdicts = [self.verify_one(medicine) for medicine in medicines]
        self._log_summary(verdicts)
        return verdicts

    async def verify_async(
        self,
        mentions: Iterable[Mention],
        max_concurrent: Optional[int] = None
    ) -> List[MatchVerdict]:
        """
        Verify mentions concurrently, preserving input order.

        Lookups run in the default executor, at most max_concurrent at a
        time (MATCH_MAX_CONCURRENT_LOOKUPS when not given).

        Raises:
            ValueError: max_concurrent below 1
            RegistryUnavailableError: registry is down before any lookup
        """
        if max_concurrent is None:
            max_concurrent = self.settings.MATCH_MAX_CONCURRENT_LOOKUPS
        elif max_concurrent < 1:
            raise ValueError(f"max_concurrent must be at least 1, got {max_concurrent}")

        medicines = [_as_medicine(m) for m in mentions]
        if not medicines:
            return []

        self._ensure_available()

        semaphore = asyncio.Semaphore(max_concurrent)
        loop = asyncio.get_running_loop()

        async def bounded_verify(medicine: ExtractedMedicine) -> MatchVerdict:
            async with semaphore:
                return await loop.run_in_executor(None, self.verify_one, medicine)

        results = await asyncio.gather(
            *(bounded_verify(medicine) for medicine in medicines),
            return_exceptions=True
        )

        verdicts = [
            result if isinstance(result, MatchVerdict) else MatchVerdict.failed(medicine, str(result))
            for medicine, result in zip(medicines, results)
        ]
        self._log_summary(verdicts)
        return verdicts

    def verify_one(self, medicine: ExtractedMedicine) -> MatchVerdict:
        """Run the cascade for a single medicine. Never raises."""
        try:
            if not medicine.has_name:
                logger.warning(f"Skipping registry lookup for missing medicine name: {medicine.name!r}")
                return MatchVerdict.unmatched(medicine)
            return self._run_cascade(medicine)
        except Exception as e:
            logger.error(f"Error verifying medicine {medicine.name}: {e}")
            return MatchVerdict.failed(medicine, str(e))

    def _run_cascade(self, medicine: ExtractedMedicine) -> MatchVerdict:
        name = medicine.name.strip()

        for match_type, strategy in self._cascade:
            result = strategy(name)
            if result is None:
                continue

            record, confidence = result
            logger.debug(
                f"'{name}' matched registry record {record.id} "
                f"({match_type.value}, confidence {confidence})"
            )
            return MatchVerdict.approved(medicine, record, match_type, confidence)

        logger.warning(f"No registry match for '{name}'")
        return MatchVerdict.unmatched(medicine)

    def _match_exact(self, name: str, field: RegistryField) -> StrategyResult:
        record = self.registry.find_exact(name, field)
        if record is None:
            return None
        return record, EXACT_MATCH_CONFIDENCE

    def _match_partial(self, name: str, field: RegistryField) -> StrategyResult:
        record = self.registry.find_partial(name, field)
        if record is None:
            return None
        return record, match_confidence(name, getattr(record, field.attribute))

    def _match_suffix(self, name: str, field: RegistryField) -> StrategyResult:
        candidates = self._suffix_candidates(name, field)
        if not candidates:
            return None

        # Strict comparison keeps the earliest candidate on ties
        best_record = candidates[0]
        best_confidence = self._suffix_confidence(name, best_record, field)
        for record in candidates[1:]:
            confidence = self._suffix_confidence(name, record, field)
            if confidence > best_confidence:
                best_record, best_confidence = record, confidence

        return best_record, best_confidence

    def _suffix_candidates(self, name: str, field: RegistryField) -> List[RegistryRecord]:
        """
        Records whose field ends with the trailing characters of name.

        Uses the full suffix window. When MATCH_MIN_SUFFIX_LENGTH is set,
        shortens it one character at a time down to that floor until
        something matches.
        """
        longest = min(self.settings.MATCH_SUFFIX_LENGTH, len(name))
        floor = self.settings.MATCH_MIN_SUFFIX_LENGTH or longest
        shortest = min(floor, longest)

        for length in range(longest, shortest - 1, -1):
            suffix = name[-length:].lower()
            candidates = self.registry.find_by_suffix(suffix, field)
            if candidates:
                if length < longest:
                    logger.debug(f"Suffix lookup for '{name}' widened to '{suffix}'")
                return candidates

        return []

    def _suffix_confidence(self, name: str, record: RegistryRecord, field: RegistryField) -> int:
        return suffix_match_confidence(
            name,
            getattr(record, field.attribute),
            suffix_length=self.settings.MATCH_SUFFIX_LENGTH,
            suffix_weight=self.settings.MATCH_SUFFIX_WEIGHT,
        )

    def _ensure_available(self):
        if not self.registry.is_available:
            raise RegistryUnavailableError("Medicine registry is not available")

    def _log_summary(self, verdicts: List[MatchVerdict]):
        approved = sum(1 for v in verdicts if v.is_approved)
        errors = sum(1 for v in verdicts if v.error)
        logger.info(
            f"Registry verification: {approved}/{len(verdicts)} approved"
            + (f", {errors} lookup errors" if errors else "")
        )


def _as_medicine(mention: Optional[Mention]) -> ExtractedMedicine:
    if isinstance(mention, ExtractedMedicine):
        return mention
    if isinstance(mention, Mapping):
        return ExtractedMedicine.from_dict(mention)
    # null or garbled items from the extraction step
    return ExtractedMedicine(name=None)
