# ============================================================================
# src/medicine_verification/importers/registry_importer.py
# ============================================================================
"""
Registry Spreadsheet Importer

Loads the official medicine list (one row per registered product) into
the SQLite registry.

- Accepts .xlsx (first sheet) or .csv
- Tolerates the header spellings seen in published lists
- Rejects rows without a generic or brand name, reporting the sheet row
- Reports repeated generic names but still imports them (one generic
  name legitimately has many brands)
- Inserts in batches; a failing batch does not stop the import
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

import pandas as pd

from ..config.registry_config import registry_settings
from ..constants.registry_db import SQLiteRegistry
from ..core.context.registry_record import RegistryRecord
from ..utils.exceptions import InvalidFileFormatError, RegistryImportError, RegistryQueryError

logger = logging.getLogger(__name__)

HEADER_ALIASES = {
    'generic_name': ['genericname', 'GenericName', 'Genericname', 'Generic Name'],
    'brand_name': ['brandname', 'BrandName', 'Brandname', 'Brand Name'],
    'dosage_code': ['dosagecode', 'DosageCode', 'Dosagecode', 'Dosage Code'],
}

EXCEL_SUFFIXES = {'.xlsx'}
CSV_SUFFIXES = {'.csv'}

# Data row i sits on sheet row i + 2 (1-based, after the header)
FIRST_DATA_ROW = 2

DETAIL_LIMIT = 10


@dataclass
class ImportReport:
    total_records: int
    inserted: int = 0
    initial_count: int = 0
    final_count: int = 0
    invalid_records: List[Dict[str, Any]] = field(default_factory=list)
    failed_records: List[Dict[str, Any]] = field(default_factory=list)
    duplicate_records: List[Dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'total_records': self.total_records,
            'inserted': self.inserted,
            'failed_records': len(self.failed_records),
            'invalid_records': len(self.invalid_records),
            'duplicate_records': len(self.duplicate_records),
            'initial_count': self.initial_count,
            'final_count': self.final_count,
            'details': {
                'invalid_records': self.invalid_records[:DETAIL_LIMIT],
                'failed_records': self.failed_records[:DETAIL_LIMIT],
                'duplicate_records': self.duplicate_records[:DETAIL_LIMIT],
            },
        }


def read_registry_sheet(path: Union[str, Path]) -> List[Dict[str, Any]]:
    """
    Read registry rows from a spreadsheet.

    Args:
        path: .xlsx or .csv file

    Returns:
        One dict per data row, keyed by the sheet's headers
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix in EXCEL_SUFFIXES:
        df = pd.read_excel(path, sheet_name=0, dtype=str)
    elif suffix in CSV_SUFFIXES:
        df = pd.read_csv(path, dtype=str)
    else:
        raise InvalidFileFormatError(
            f"Unsupported registry file type '{path.suffix}' (expected .xlsx or .csv)"
        )

    df = df.fillna("")
    rows = df.to_dict(orient="records")
    logger.info(f"Read {len(rows)} registry rows from {path.name}")
    return rows


def _pick(row: Dict[str, Any], key: str) -> str:
    """First non-empty value among the header aliases for key."""
    for alias in HEADER_ALIASES[key]:
        value = row.get(alias)
        if value is not None and str(value).strip():
            return str(value)
    return ""


def normalize_row(row: Dict[str, Any]) -> Dict[str, Optional[str]]:
    """Map a sheet row onto registry fields."""
    return {
        'generic_name': _pick(row, 'generic_name').lower().strip(),
        'brand_name': _pick(row, 'brand_name').strip(),
        'dosage_code': _pick(row, 'dosage_code').strip() or None,
    }


def import_registry(
    source: Union[str, Path, Iterable[Dict[str, Any]]],
    registry: SQLiteRegistry,
    batch_size: Optional[int] = None
) -> ImportReport:
    """
    Import registry rows into the SQLite registry.

    Args:
        source: Spreadsheet path, or already-read row dicts
        registry: Target registry
        batch_size: Rows per insert transaction
            (REGISTRY_IMPORT_BATCH_SIZE when not given)

    Returns:
        ImportReport

    Raises:
        RegistryImportError: no row had both a generic and a brand name
    """
    if isinstance(source, (str, Path)):
        rows = read_registry_sheet(source)
    else:
        rows = list(source)

    batch_size = batch_size or registry_settings.REGISTRY_IMPORT_BATCH_SIZE
    report = ImportReport(total_records=len(rows))

    valid: List[RegistryRecord] = []
    generic_counts: Dict[str, int] = {}

    for index, row in enumerate(rows):
        sheet_row = index + FIRST_DATA_ROW
        med = normalize_row(row)

        generic = med['generic_name']
        generic_counts[generic] = generic_counts.get(generic, 0) + 1
        if generic_counts[generic] > 1:
            report.duplicate_records.append({'row': sheet_row, 'generic_name': generic, 'data': med})

        if generic and med['brand_name']:
            valid.append(RegistryRecord(id=None, **med))
        else:
            report.invalid_records.append({
                'row': sheet_row,
                'data': med,
                'reason': 'Missing required fields (generic_name or brand_name)',
            })

    if report.duplicate_records:
        logger.info(f"{len(report.duplicate_records)} repeated generic names in registry sheet")
    if report.invalid_records:
        logger.warning(f"{len(report.invalid_records)} registry rows skipped for missing names")

    if not valid:
        raise RegistryImportError("No valid data found in the registry file", report.invalid_records)

    report.initial_count = registry.count()

    for start in range(0, len(valid), batch_size):
        batch = valid[start:start + batch_size]
        batch_number = start // batch_size + 1
        try:
            inserted = registry.add_records(batch)
            report.inserted += inserted
            logger.debug(f"Batch {batch_number}: inserted {inserted}")
        except RegistryQueryError as e:
            logger.error(f"Batch {batch_number} error: {e}")
            report.failed_records.extend(
                {'generic_name': record.generic_name, 'reason': f"Insert error: {e}"}
                for record in batch
            )

    report.final_count = registry.count()
    logger.info(
        f"Registry import complete: {report.inserted} inserted, "
        f"{len(report.failed_records)} failed, {len(report.invalid_records)} invalid "
        f"({report.initial_count} -> {report.final_count} records)"
    )
    return report
