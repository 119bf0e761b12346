#!/usr/bin/env python
from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from trusttxt import __version__


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # Request-level chatter from the HTTP stack is noise here
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("trusttxt").setLevel(logging.DEBUG if verbose else logging.INFO)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trusttxt",
        description="Validate a site's trust.txt declaration",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    validate_p = subparsers.add_parser("validate", help="Validate the trust.txt of a site")
    validate_p.add_argument("url", help="Any URL on the site (e.g. https://www.example.com/)")
    validate_p.add_argument(
        "--full",
        action="store_true",
        help="Also check member/customer, social, contact, disclosure and consent entries",
    )
    validate_p.add_argument("--json", action="store_true", help="Output JSON")
    validate_p.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")

    subparsers.add_parser("version", help="Show version")
    return parser


async def run_validate(url: str, full: bool, json_output: bool) -> int:
    """Run the validate command."""
    from trusttxt.cli.formatting.output import ConsoleOutput
    from trusttxt.validation import Status, TrustTxtValidator

    console = ConsoleOutput()
    report = await TrustTxtValidator().validate_report(url, full=full)

    if json_output:
        console.print_json(report)
    elif not report.found:
        console.print_error(report.results[0].message)
    else:
        console.print_report(report)

    if not report.found:
        return 2
    failed = report.count(Status.ERROR) + report.count(Status.NOT_FOUND)
    return 1 if failed else 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    load_dotenv(Path.cwd() / ".env")

    if args.command == "version":
        print(f"trusttxt v{__version__}")
        return 0
    if args.command != "validate":
        parser.print_help()
        return 0

    _configure_logging(args.verbose)
    try:
        return asyncio.run(run_validate(args.url, args.full, args.json))
    except ValueError as e:
        # Bad TRUSTTXT_* timeout values
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
