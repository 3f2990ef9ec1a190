# ============================================================================
# src/medicine_verification/constants/registry_db.py
# ============================================================================
"""
SQLite-backed medicine registry.

Stores the approved medicine list (generic name, brand name, dosage code)
and answers the cascade's exact, contains and ends-with lookups.
Extracted names come straight from OCR/LLM output, so every LIKE pattern
is built from escaped text.
"""

import sqlite3
import logging
import threading
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .registry import MedicineRegistry
from ..core.context.enums import RegistryField
from ..core.context.registry_record import RegistryRecord
from ..utils.exceptions import RegistryQueryError

logger = logging.getLogger(__name__)

MEMORY_DB = ":memory:"

_COLUMNS = {
    RegistryField.BRAND: "brand_name_lower",
    RegistryField.GENERIC: "generic_name_lower",
}

_SCHEMA = """
CREATE TABLE IF NOT EXISTS registry_medicines (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    generic_name TEXT,
    brand_name TEXT,
    dosage_code TEXT,
    generic_name_lower TEXT,
    brand_name_lower TEXT
);
CREATE INDEX IF NOT EXISTS idx_generic_name_lower ON registry_medicines(generic_name_lower);
CREATE INDEX IF NOT EXISTS idx_brand_name_lower ON registry_medicines(brand_name_lower);
"""


def escape_like(text: str, escape_char: str = "\\") -> str:
    """Escape LIKE wildcards so text matches literally."""
    return (
        text.replace(escape_char, escape_char * 2)
        .replace("%", escape_char + "%")
        .replace("_", escape_char + "_")
    )


class SQLiteRegistry(MedicineRegistry):
    """
    SQLite implementation of the registry query capability.

    Provides:
    - Exact / partial / suffix lookup on brand or generic name
    - Batch insertion for registry imports
    """

    def __init__(self, db_path: Union[str, Path], create: bool = False):
        """
        Args:
            db_path: Database file, or ":memory:"
            create: Create the file and schema when missing
        """
        self.db_path = db_path
        self._conn: Optional[sqlite3.Connection] = None
        self._available = False
        self._lock = threading.Lock()
        self._connect(create)

    def _connect(self, create: bool):
        """Establish database connection."""
        in_memory = str(self.db_path) == MEMORY_DB
        path = Path(self.db_path)

        if not in_memory and not create and not path.exists():
            logger.warning(
                f"Registry database not found at {path}. "
                "Run 'python scripts/import_registry.py' to create it."
            )
            return

        if not in_memory:
            path.parent.mkdir(parents=True, exist_ok=True)

        try:
            self._conn = sqlite3.connect(str(self.db_path), check_same_thread=False)
            self._conn.row_factory = sqlite3.Row
            self._conn.executescript(_SCHEMA)
            self._available = True
            logger.info(f"Connected to registry database: {self.db_path}")
        except sqlite3.Error as e:
            logger.error(f"Failed to connect to registry database: {e}")
            self._available = False

    @property
    def is_available(self) -> bool:
        return self._available

    def _query(self, sql: str, params: tuple, field: RegistryField, term: str) -> List[RegistryRecord]:
        if not self._available:
            raise RegistryQueryError(
                f"Registry database {self.db_path} is not available",
                field=field.value,
                term=term,
            )
        try:
            with self._lock:
                rows = self._conn.execute(sql, params).fetchall()
        except sqlite3.Error as e:
            raise RegistryQueryError(
                f"Registry lookup on {field.value} name failed: {e}",
                field=field.value,
                term=term,
            ) from e
        return [_to_record(row) for row in rows]

    def find_exact(self, name: str, field: RegistryField) -> Optional[RegistryRecord]:
        column = _COLUMNS[field]
        rows = self._query(
            f"SELECT id, generic_name, brand_name, dosage_code FROM registry_medicines "
            f"WHERE {column} = ? ORDER BY id LIMIT 1",
            (name.lower(),),
            field,
            name,
        )
        return rows[0] if rows else None

    def find_partial(self, substring: str, field: RegistryField) -> Optional[RegistryRecord]:
        column = _COLUMNS[field]
        rows = self._query(
            f"SELECT id, generic_name, brand_name, dosage_code FROM registry_medicines "
            f"WHERE {column} LIKE ? ESCAPE '\\' ORDER BY id LIMIT 1",
            ('%' + escape_like(substring.lower()) + '%',),
            field,
            substring,
        )
        return rows[0] if rows else None

    def find_by_suffix(self, suffix: str, field: RegistryField) -> List[RegistryRecord]:
        column = _COLUMNS[field]
        return self._query(
            f"SELECT id, generic_name, brand_name, dosage_code FROM registry_medicines "
            f"WHERE {column} LIKE ? ESCAPE '\\' ORDER BY id",
            ('%' + escape_like(suffix.lower()),),
            field,
            suffix,
        )

    def add_records(self, records: Iterable[RegistryRecord]) -> int:
        """
        Insert records in a single transaction.

        Record ids are assigned by the database; any id on the input is
        ignored.

        Returns:
            Number of rows inserted
        """
        if not self._available:
            raise RegistryQueryError(f"Registry database {self.db_path} is not available")

        rows = [
            (
                r.generic_name,
                r.brand_name,
                r.dosage_code,
                r.generic_name.lower() if r.generic_name else None,
                r.brand_name.lower() if r.brand_name else None,
            )
            for r in records
        ]
        try:
            with self._lock, self._conn:
                self._conn.executemany(
                    "INSERT INTO registry_medicines "
                    "(generic_name, brand_name, dosage_code, generic_name_lower, brand_name_lower) "
                    "VALUES (?, ?, ?, ?, ?)",
                    rows,
                )
        except sqlite3.Error as e:
            raise RegistryQueryError(f"Registry insert failed: {e}") from e
        return len(rows)

    def count(self) -> int:
        if not self._available:
            return 0
        with self._lock:
            return self._conn.execute("SELECT COUNT(*) FROM registry_medicines").fetchone()[0]

    def close(self):
        """Close database connection."""
        if self._conn:
            self._conn.close()
            self._conn = None
            self._available = False


def _to_record(row: sqlite3.Row) -> RegistryRecord:
    return RegistryRecord(
        id=row['id'],
        generic_name=row['generic_name'],
        brand_name=row['brand_name'],
        dosage_code=row['dosage_code'],
    )
