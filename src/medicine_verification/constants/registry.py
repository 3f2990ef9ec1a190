# ============================================================================
# src/medicine_verification/constants/registry.py
# ============================================================================
"""
Medicine Registry Lookup Interface.

The matcher only ever reads the registry through this narrow query
surface, so the storage behind it (SQLite, a document store, a list
in memory) can change without touching matching policy.

All lookups are case-insensitive and return records in registry order,
which is what "first match" means everywhere in the cascade.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from ..core.context.enums import RegistryField
from ..core.context.registry_record import RegistryRecord


class MedicineRegistry(ABC):
    """Read-only query capability over the approved medicine registry."""

    @property
    def is_available(self) -> bool:
        """False when the registry cannot serve any lookup."""
        return True

    @abstractmethod
    def find_exact(self, name: str, field: RegistryField) -> Optional[RegistryRecord]:
        """First record whose field equals name (case-insensitive)."""
        pass

    @abstractmethod
    def find_partial(self, substring: str, field: RegistryField) -> Optional[RegistryRecord]:
        """First record whose field contains substring (case-insensitive)."""
        pass

    @abstractmethod
    def find_by_suffix(self, suffix: str, field: RegistryField) -> List[RegistryRecord]:
        """All records whose field ends with suffix (case-insensitive)."""
        pass

    def find_exact_brand(self, name: str) -> Optional[RegistryRecord]:
        return self.find_exact(name, RegistryField.BRAND)

    def find_exact_generic(self, name: str) -> Optional[RegistryRecord]:
        return self.find_exact(name, RegistryField.GENERIC)

    def find_partial_brand(self, substring: str) -> Optional[RegistryRecord]:
        return self.find_partial(substring, RegistryField.BRAND)

    def find_partial_generic(self, substring: str) -> Optional[RegistryRecord]:
        return self.find_partial(substring, RegistryField.GENERIC)


class InMemoryRegistry(MedicineRegistry):
    """
    List-backed registry.

    Uses plain string comparison, so characters that are special in
    regular expressions or LIKE patterns are matched literally.
    """

    def __init__(self, records: Iterable[RegistryRecord] = ()):
        self._records: List[RegistryRecord] = []
        self.extend(records)

    def __len__(self) -> int:
        return len(self._records)

    def add(self, record: RegistryRecord) -> RegistryRecord:
        if record.id is None:
            record = RegistryRecord(
                id=len(self._records) + 1,
                generic_name=record.generic_name,
                brand_name=record.brand_name,
                dosage_code=record.dosage_code,
            )
        self._records.append(record)
        return record

    def extend(self, records: Iterable[RegistryRecord]) -> None:
        for record in records:
            self.add(record)

    def _values(self, field: RegistryField):
        for record in self._records:
            value = getattr(record, field.attribute)
            if value:
                yield record, value.lower()

    def find_exact(self, name: str, field: RegistryField) -> Optional[RegistryRecord]:
        target = name.lower()
        for record, value in self._values(field):
            if value == target:
                return record
        return None

    def find_partial(self, substring: str, field: RegistryField) -> Optional[RegistryRecord]:
        target = substring.lower()
        for record, value in self._values(field):
            if target in value:
                return record
        return None

    def find_by_suffix(self, suffix: str, field: RegistryField) -> List[RegistryRecord]:
        target = suffix.lower()
        return [record for record, value in self._values(field) if value.endswith(target)]
