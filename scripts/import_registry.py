#!/usr/bin/env python3
"""
Registry Import Script

Loads an official medicine list spreadsheet into the SQLite registry
used for prescription verification.

Usage:
    python scripts/import_registry.py medicines.xlsx
    python scripts/import_registry.py medicines.csv --db data/registry.db
    python scripts/import_registry.py medicines.xlsx --report import_report.json
"""

import argparse
import json
import sys
from pathlib import Path

from medicine_verification.config import logging_settings, registry_settings
from medicine_verification.constants.registry_db import SQLiteRegistry
from medicine_verification.importers import import_registry
from medicine_verification.utils.exceptions import ConfigurationError, MedicineVerificationError, RegistryImportError
from medicine_verification.utils.logging import setup_logging


def main(argv=None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Import a medicine registry spreadsheet")
    parser.add_argument("file", type=Path, help="Registry spreadsheet (.xlsx or .csv)")
    parser.add_argument("--db", type=Path, default=registry_settings.REGISTRY_DB_PATH,
                        help="SQLite registry database")
    parser.add_argument("--batch-size", type=int, default=registry_settings.REGISTRY_IMPORT_BATCH_SIZE,
                        help="Rows inserted per transaction")
    parser.add_argument("--report", type=Path, help="Write the full import report to this JSON file")
    args = parser.parse_args(argv)

    try:
        setup_logging(
            level=logging_settings.LOG_LEVEL,
            log_file=logging_settings.LOG_FILE,
            format_json=logging_settings.LOG_FORMAT_JSON,
        )
    except ConfigurationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if not args.file.exists():
        print(f"ERROR: registry file not found: {args.file}", file=sys.stderr)
        return 1

    registry = SQLiteRegistry(args.db, create=True)
    try:
        report = import_registry(args.file, registry, batch_size=args.batch_size)
    except RegistryImportError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        print(json.dumps({'invalid_records': e.invalid_records[:10]}, indent=2), file=sys.stderr)
        return 1
    except MedicineVerificationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    finally:
        registry.close()

    result = report.to_dict()
    if args.report:
        args.report.parent.mkdir(parents=True, exist_ok=True)
        args.report.write_text(json.dumps({
            **result,
            'details': {
                'invalid_records': report.invalid_records,
                'failed_records': report.failed_records,
                'duplicate_records': report.duplicate_records,
            },
        }, indent=2))

    print(json.dumps(result, indent=2))
    return 0 if not report.failed_records else 2


if __name__ == "__main__":
    sys.exit(main())
