# ============================================================================
# FILE: tests/fakes.py
# ============================================================================
"""
Registry doubles used across the unit tests.
"""

from medicine_verification.constants.registry import InMemoryRegistry
from medicine_verification.utils.exceptions import RegistryQueryError


class RecordingRegistry(InMemoryRegistry):
    """In-memory registry that remembers every lookup made against it."""

    def __init__(self, records=()):
        super().__init__(records)
        self.calls = []

    def find_exact(self, name, field):
        self.calls.append(("exact", field, name))
        return super().find_exact(name, field)

    def find_partial(self, substring, field):
        self.calls.append(("partial", field, substring))
        return super().find_partial(substring, field)

    def find_by_suffix(self, suffix, field):
        self.calls.append(("suffix", field, suffix))
        return super().find_by_suffix(suffix, field)


class FailingRegistry(InMemoryRegistry):
    """In-memory registry whose lookups fail for selected names."""

    def __init__(self, records=(), failing_names=()):
        super().__init__(records)
        self.failing_names = {n.lower() for n in failing_names}

    def find_exact(self, name, field):
        if name.lower() in self.failing_names:
            raise RegistryQueryError("connection reset by registry", field=field.value, term=name)
        return super().find_exact(name, field)


class UnavailableRegistry(InMemoryRegistry):
    """Registry that reports itself down before any lookup."""

    @property
    def is_available(self):
        return False
