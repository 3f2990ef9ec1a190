#!/usr/bin/env python3
"""
Prescription Verification Script

Runs the registry matcher over the JSON produced by the prescription
extraction step and prints the verification result.

Usage:
    python scripts/verify_prescription.py extracted.json
    python scripts/verify_prescription.py extracted.json --db data/registry.db --parallel
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

from medicine_verification.config import logging_settings, registry_settings
from medicine_verification.constants.registry_db import SQLiteRegistry
from medicine_verification.matching import MedicineMatcher
from medicine_verification.processors.prescription import PrescriptionVerifier
from medicine_verification.utils.exceptions import ConfigurationError, RegistryUnavailableError
from medicine_verification.utils.logging import setup_logging


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def main(argv=None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Verify extracted prescription medicines against the registry")
    parser.add_argument("extracted", type=Path, help="Extraction JSON with a 'medicines' list")
    parser.add_argument("--db", type=Path, default=registry_settings.REGISTRY_DB_PATH,
                        help="SQLite registry database")
    parser.add_argument("--parallel", action="store_true", help="Look medicines up concurrently")
    parser.add_argument("--max-concurrent", type=_positive_int, help="Concurrent lookups with --parallel")
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

    try:
        extracted_data = json.loads(args.extracted.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        print(f"ERROR: cannot read extraction JSON: {e}", file=sys.stderr)
        return 1

    registry = SQLiteRegistry(args.db)
    verifier = PrescriptionVerifier(MedicineMatcher(registry))
    try:
        if args.parallel:
            result = asyncio.run(verifier.verify_async(extracted_data, max_concurrent=args.max_concurrent))
        else:
            result = verifier.verify(extracted_data)
    except RegistryUnavailableError as e:
        print(f"ERROR: {e} ({args.db})", file=sys.stderr)
        return 1
    finally:
        registry.close()

    print(json.dumps(result.to_dict(), indent=2, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
