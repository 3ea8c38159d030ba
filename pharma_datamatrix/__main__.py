"""
CLI interface for the Data Matrix reader.

Usage:
    python -m pharma_datamatrix <image> [options]

Options:
    --parse              Print the parsed GS1 record as JSON
    --lookup             With --parse, add the OpenFDA drug match
    --settings PATH      JSON settings file
    -v, --verbose        Debug logging on stderr

Exit codes:
    0  payload decoded
    1  usage error (missing argument, --lookup without --parse, image not found)
    2  no valid symbol found, or the image could not be processed
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from .core.dates import expiry_status, resolve_expiration
from .core.parser import ParseOptions, parse_gs1
from .decode.pipeline import decode_image
from .errors import InvalidDate, ProcessingError, UsageError
from .formatters.json_formatter import record_to_dict
from .lookup import lookup_ndc
from .settings import load_settings

logger = logging.getLogger("pharma_datamatrix")

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_DECODE = 2

# OpenFDA fields copied into --lookup output
DRUG_FIELDS = (
    "product_ndc",
    "generic_name",
    "brand_name",
    "labeler_name",
    "dosage_form",
    "route",
    "product_type",
    "marketing_category",
)


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports bad invocations as UsageError."""

    def error(self, message):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog='pharma_datamatrix',
        description='Decode a GS1 Data Matrix from a photograph'
    )

    parser.add_argument(
        'image',
        help='Image file containing the Data Matrix symbol'
    )

    parser.add_argument(
        '--parse',
        action='store_true',
        help='Print the parsed GS1 record as JSON instead of the raw payload'
    )

    parser.add_argument(
        '--lookup',
        action='store_true',
        help='Look up the derived NDC in OpenFDA (requires --parse)'
    )

    parser.add_argument(
        '--strip-symbology',
        action='store_true',
        help='Drop a leading ]d2 symbology identifier before parsing'
    )

    parser.add_argument(
        '--settings',
        default=None,
        help='Path to a JSON settings file'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    return parser


def build_record_output(
    payload: str,
    settings: Dict[str, Any],
    strip_symbology: bool = False,
    lookup: bool = False,
) -> Dict[str, Any]:
    """Parse a payload and build the JSON-ready output dict."""
    record = parse_gs1(payload, ParseOptions(strip_symbology=strip_symbology))
    output = record_to_dict(record, include_raw=True, include_issues=True)

    if record.expiration_date_raw:
        try:
            expiration = resolve_expiration(record.expiration_date_raw)
        except InvalidDate:
            expiration = None
        output["Expiry Status"] = expiry_status(
            expiration, near_months=settings["near_expiry_months"]
        )

    if lookup:
        if not record.ndc:
            output["_lookup_error"] = "NDC not found in parsed result"
        else:
            found = lookup_ndc(record.ndc, settings=settings)
            if found.success:
                output["Lookup Query"] = found.search_query
                output["Drug"] = {
                    k: found.result[k] for k in DRUG_FIELDS if k in found.result
                }
            else:
                output["_lookup_error"] = found.error

    return output


def main(argv: Optional[list] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        if args.lookup and not args.parse:
            parser.error("--lookup requires --parse")
    except UsageError as exc:
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    image_path = Path(args.image)
    if not image_path.is_file():
        print(f"Usage: {parser.prog} <image>", file=sys.stderr)
        print(f"Error: file not found: {image_path}", file=sys.stderr)
        return EXIT_USAGE

    try:
        settings = load_settings(Path(args.settings) if args.settings else None)
    except (OSError, ValueError) as exc:
        print(f"Error: cannot load settings: {exc}", file=sys.stderr)
        return EXIT_USAGE

    try:
        outcome = decode_image(image_path)
    except ProcessingError as exc:
        print(f"Processing error: {exc}", file=sys.stderr)
        return EXIT_DECODE

    if not outcome.succeeded:
        logger.debug("Strategies tried: %s", ", ".join(outcome.attempts_tried))
        print("Decode failed", file=sys.stderr)
        return EXIT_DECODE

    if args.parse:
        output = build_record_output(
            outcome.text,
            settings,
            strip_symbology=args.strip_symbology,
            lookup=args.lookup,
        )
        print(json.dumps(output, indent=2, ensure_ascii=False))
    else:
        print(outcome.text)

    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
