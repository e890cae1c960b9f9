#!/usr/bin/env python3
"""Decode Greek morphological parsing codes from the command line.

Run with: python3 -m scripts.decode_parsing V-AIA-3S N-AFP
      or: python3 -m scripts.decode_parsing --file bsb_tables.tsv
"""
import argparse
import json
import sys

from core.config import settings
from core.errors import Err, Ok
from core.logging import cli_logger, configure_logging
from ingest.parsing_codes import ParsingCodeIngester
from languages.greek import ParsingResponse, parse

log = cli_logger()


def _print_parsing(code: str, parsing, as_json: bool) -> None:
    if as_json:
        print(ParsingResponse.from_parsing(code, parsing).model_dump_json())
    else:
        print(f"{code}\t{parsing.describe()}")


def _print_error(code: str, error, as_json: bool) -> None:
    if as_json:
        print(json.dumps({"code": code, **error.to_dict()}))
    else:
        print(f"{code}\tERROR: {error.message}")


def decode_codes(codes: list[str], as_json: bool) -> int:
    """Decode codes given on the command line. Returns the number of failures."""
    failures = 0
    for code in codes:
        match parse(code):
            case Ok(parsing):
                _print_parsing(code, parsing, as_json)
            case Err(error):
                failures += 1
                _print_error(code, error, as_json)
    return failures


def decode_file(path: str, as_json: bool, abort: bool) -> int:
    """Decode the parsing column of a table. Returns the number of failures."""
    ingester = ParsingCodeIngester(on_error="abort" if abort else None)

    match ingester.ingest_file(path):
        case Ok(report):
            for entry in report.entries:
                _print_parsing(entry.code, entry.parsing, as_json)
            for message in report.errors:
                print(f"ERROR: {message}")
            print(
                f"Decoded {report.records_decoded} of {report.records_processed} rows "
                f"({report.records_skipped} skipped, {report.records_failed} failed)",
                file=sys.stderr,
            )
            return report.records_failed
        case Err(error):
            print(f"ERROR: {error.message}")
            return 1


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Decode Greek morphological parsing codes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python3 -m scripts.decode_parsing V-AIA-3S           # One code
  python3 -m scripts.decode_parsing --json N-AFP Adj   # JSON lines
  python3 -m scripts.decode_parsing --file table.tsv   # Parsing column of a table
        """
    )
    parser.add_argument("codes", nargs="*", help="Parsing codes to decode")
    parser.add_argument("--file", help="Delimited table with a parsing column")
    parser.add_argument("--json", action="store_true", help="Print one JSON object per code")
    parser.add_argument("--abort", action="store_true", help="Stop at the first undecodable row")

    args = parser.parse_args(argv)

    if not args.codes and not args.file:
        parser.print_help()
        return 2

    configure_logging(level=settings.LOG_LEVEL, json_logs=settings.LOG_JSON)

    failures = 0
    if args.codes:
        failures += decode_codes(args.codes, args.json)
    if args.file:
        failures += decode_file(args.file, args.json, args.abort)

    log.debug("decode_finished", failures=failures)
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
