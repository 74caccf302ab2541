#!/usr/bin/env python3
"""Command line interface for the ATS message validator."""
import argparse
import json
import logging
import sys
from typing import List, Optional

from atsmsg.config import Config
from atsmsg.models.finding import Severity
from atsmsg.notam_client import get_notam_client
from atsmsg.notam_parser import decode_notam
from atsmsg.reports import format_findings, format_notam, format_validation
from atsmsg.validator import validate_field18, validate_flight_plan

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s.%(msecs)03d | %(levelname)-8s | %(name)-20s | %(filename)-15s | %(funcName)-15s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

EXIT_READY = 0
EXIT_ERRORS = 1
EXIT_BAD_INPUT = 2


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )


def _read_source(source: str) -> str:
    """Read message text from a file path, or stdin for "-"."""
    if source == '-':
        return sys.stdin.read()
    with open(source, 'r', encoding='utf-8') as f:
        return f.read()


def _print_json(data) -> None:
    print(json.dumps(data, indent=2))


def _cmd_fpl(args) -> int:
    result = validate_flight_plan(_read_source(args.source))

    if args.json:
        _print_json(result.to_dict())
    else:
        print(format_validation(result))

    if result.parsed is None:
        return EXIT_BAD_INPUT
    return EXIT_READY if result.ready_for_filing else EXIT_ERRORS


def _cmd_field18(args) -> int:
    findings = validate_field18(' '.join(args.text))

    if args.json:
        _print_json([finding.to_dict() for finding in findings])
    else:
        print(format_findings(findings))

    has_errors = any(finding.severity == Severity.ERROR for finding in findings)
    return EXIT_ERRORS if has_errors else EXIT_READY


def _cmd_notam(args) -> int:
    notam = decode_notam(_read_source(args.source))

    if args.json:
        _print_json(notam.to_dict())
    else:
        print(format_notam(notam))

    if not notam.id and not notam.raw_text:
        logger.warning("Input does not look like a NOTAM")
        return EXIT_BAD_INPUT
    return EXIT_READY


def _cmd_fetch(args) -> int:
    if not args.all and not args.icao:
        logger.error("Give an ICAO location indicator or --all")
        return EXIT_BAD_INPUT

    client = get_notam_client()
    if args.all:
        by_airport = client.fetch_all_notams()
        notams = [raw for raws in by_airport.values() for raw in raws]
    else:
        notams = client.fetch_notams_for_airport(args.icao)

    if args.decode:
        decoded = [decode_notam(raw) for raw in notams]
        if args.json:
            _print_json([notam.to_dict() for notam in decoded])
        else:
            print("\n\n".join(format_notam(notam) for notam in decoded))
    elif args.json:
        _print_json(notams)
    else:
        print("\n\n".join(notams))

    logger.info(f"{len(notams)} NOTAM(s) retrieved")
    return EXIT_READY


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='atsmsg',
        description='Decode and validate ICAO flight plan and NOTAM messages',
    )
    parser.add_argument('--json', action='store_true',
                        help='Print results as JSON')
    parser.add_argument('--log-level', default=Config.LOG_LEVEL,
                        help='Logging level (default: %(default)s)')
    parser.add_argument('--version', action='version', version=Config.VERSION)

    subparsers = parser.add_subparsers(dest='command', required=True)

    fpl = subparsers.add_parser('fpl', help='Validate a full FPL message')
    fpl.add_argument('source', help='File containing the message, or - for stdin')
    fpl.set_defaults(handler=_cmd_fpl)

    field18 = subparsers.add_parser('field18', help='Validate a Field 18 fragment')
    field18.add_argument('text', nargs='+', help='Field 18 text, e.g. PBN/A1B2 DOF/260215')
    field18.set_defaults(handler=_cmd_field18)

    notam = subparsers.add_parser('notam', help='Decode a NOTAM message')
    notam.add_argument('source', help='File containing the NOTAM, or - for stdin')
    notam.set_defaults(handler=_cmd_notam)

    fetch = subparsers.add_parser('fetch', help='Fetch NOTAMs for an aerodrome')
    fetch.add_argument('icao', nargs='?', help='ICAO location indicator, e.g. OOSA')
    fetch.add_argument('--all', action='store_true',
                       help='Fetch every aerodrome in AIRPORTS')
    fetch.add_argument('--decode', action='store_true',
                       help='Decode each NOTAM instead of printing raw text')
    fetch.set_defaults(handler=_cmd_fetch)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        Config.validate()
        return args.handler(args)
    except OSError as e:
        logger.error(f"Cannot read input: {e}")
        return EXIT_BAD_INPUT
    except ValueError as e:
        logger.error(str(e))
        return EXIT_BAD_INPUT


if __name__ == '__main__':
    sys.exit(main())
