#!/usr/bin/env python3
"""
Simple CLI for parsing an already-decoded GS1 Data Matrix payload.

Usage:
    python parse_barcode.py "010034928158905817131028100U42275AA"

Output:
    Clean JSON with human-readable field names
"""

import sys
import json
from pathlib import Path

# Add parent directory to path to import pharma_datamatrix
sys.path.insert(0, str(Path(__file__).parent.parent))

from pharma_datamatrix import parse_gs1, record_to_json


def main():
    """Main CLI entry point."""
    if len(sys.argv) < 2:
        print("Usage: python parse_barcode.py <barcode_data>", file=sys.stderr)
        print("\nExample:", file=sys.stderr)
        print('  python parse_barcode.py "010034928158905817131028100U42275AA"', file=sys.stderr)
        sys.exit(1)

    barcode_data = sys.argv[1]
    record = parse_gs1(barcode_data)

    if record.errors and record.gtin is None and record.lot_number is None:
        # Nothing usable: output error as JSON for consistency
        error_output = {
            "error": record.errors[0].message,
            "input": barcode_data
        }
        print(json.dumps(error_output, ensure_ascii=False, indent=2))
        sys.exit(1)

    print(record_to_json(record, include_issues=True))


if __name__ == "__main__":
    main()
