#!/usr/bin/env python3
"""
Command line front end for url-otpauth

    url-otpauth parse URI [URI ...]
    url-otpauth import FILE
    url-otpauth scan IMAGE
"""

import argparse
import json
import logging
import sys

from .config import load_settings
from .models.errors import OtpauthInvalidURL
from .utils.file_io import write_json
from .utils.importers.uri_list import parse_uri_list
from .utils.otpauth_parser import parse

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2


def build_parser():
    parser = argparse.ArgumentParser(prog="url-otpauth", description="Validate otpauth:// URIs")
    parser.add_argument("--config", help="Path to a JSON settings file")
    parser.add_argument("--strict-issuer", action="store_true", default=None,
                        help="Reject URIs whose label issuer and issuer parameter differ")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)")
    parser.add_argument("--output", help="Also write the JSON results to this file")

    subparsers = parser.add_subparsers(dest="command")

    parse_cmd = subparsers.add_parser("parse", help="Parse one or more URIs")
    parse_cmd.add_argument("uris", nargs="+", metavar="URI")

    import_cmd = subparsers.add_parser("import", help="Parse a file with one URI per line")
    import_cmd.add_argument("file")

    scan_cmd = subparsers.add_parser("scan", help="Parse the otpauth URI in a QR code image")
    scan_cmd.add_argument("image")

    return parser


def _report_error(error, uri):
    print(f"error: {error.error_type.name}: {uri}", file=sys.stderr)


def _emit(results, output_path):
    print(json.dumps(results, indent=2))
    if output_path and not write_json(output_path, results):
        print(f"error: could not write {output_path}", file=sys.stderr)
        return False
    return True


def _run_parse(args, strict_issuer):
    results = []
    exit_code = EXIT_OK
    for uri in args.uris:
        try:
            results.append(parse(uri, strict_issuer=strict_issuer).to_dict())
        except OtpauthInvalidURL as e:
            _report_error(e, uri)
            exit_code = EXIT_INVALID
    return results, exit_code


def _run_import(args, strict_issuer):
    try:
        with open(args.file, 'r', encoding='utf-8') as f:
            content = f.read()
    except OSError as e:
        print(f"error: could not read {args.file}: {e}", file=sys.stderr)
        return None, EXIT_USAGE

    result = parse_uri_list(content, strict_issuer=strict_issuer)
    for failure in result["errors"]:
        print(f"error: {failure['error']}: {failure['uri']}", file=sys.stderr)

    summary = dict(result)
    summary["valid_tokens"] = [token.to_dict() for token in result["valid_tokens"]]
    exit_code = EXIT_INVALID if result["failed_validation"] else EXIT_OK
    return summary, exit_code


def _run_scan(args, strict_issuer):
    # Imported lazily so parse/import work without the zbar shared library
    from .utils.qr_scanner import read_qr_payload

    payload = read_qr_payload(args.image)
    if payload is None:
        print(f"error: no QR code found in {args.image}", file=sys.stderr)
        return None, EXIT_INVALID
    try:
        return parse(payload, strict_issuer=strict_issuer).to_dict(), EXIT_OK
    except OtpauthInvalidURL as e:
        _report_error(e, payload)
        return None, EXIT_INVALID


COMMANDS = {
    "parse": _run_parse,
    "import": _run_import,
    "scan": _run_scan,
}


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_usage(sys.stderr)
        return EXIT_USAGE

    settings = load_settings(args.config)
    log_level = (args.log_level or settings["log_level"]).upper()
    logging.basicConfig(level=getattr(logging, log_level, logging.WARNING),
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")

    strict_issuer = args.strict_issuer if args.strict_issuer is not None else bool(settings["strict_issuer"])
    logger.debug(f"Running '{args.command}' (strict_issuer={strict_issuer})")

    results, exit_code = COMMANDS[args.command](args, strict_issuer)
    if results is not None and not _emit(results, args.output):
        return EXIT_INVALID
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
