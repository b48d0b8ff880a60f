"""
Command-line interface for checking listing copy.

Usage:
    listing-ai compliance --text "Perfect for bachelors"
    listing-ai seo --title "Nice Home" --location Austin --file listing.txt
    echo "..." | listing-ai compliance --listing-id 42
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from . import __version__
from .compliance.analyzer import analyze_compliance
from .errors import InvalidInputError
from .seo.analyzer import analyze_seo
from .service import ListingAnalysisService
from .types.records import AnalysisOutcome
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="listing-ai",
        description="Check real-estate listing copy for fair-housing compliance and SEO",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_common(subparser: argparse.ArgumentParser) -> None:
        source = subparser.add_mutually_exclusive_group()
        source.add_argument("--text", help="Listing text to analyze")
        source.add_argument("--file", help="Read listing text from a file")
        subparser.add_argument(
            "--listing-id",
            help="Save the result for this listing",
        )
        subparser.add_argument(
            "--indent", help="JSON indentation", type=int, default=2
        )

    compliance = subparsers.add_parser(
        "compliance", help="Check text for fair-housing risk terms"
    )
    add_common(compliance)

    seo = subparsers.add_parser("seo", help="Score a title and description for SEO")
    add_common(seo)
    seo.add_argument("--title", help="Listing title", required=True)
    seo.add_argument("--location", help="Listing location", required=True)

    return parser


def _read_text(args: argparse.Namespace) -> str:
    if args.text is not None:
        return args.text
    if args.file:
        with open(args.file, "r", encoding="utf-8") as f:
            return f.read()
    return sys.stdin.read()


def _outcome_to_dict(outcome: AnalysisOutcome) -> Dict[str, Any]:
    data: Dict[str, Any] = {"result": outcome.result.to_dict()}
    if outcome.record is not None:
        data["record"] = {
            "id": outcome.record.id,
            "listingId": outcome.record.listing_id,
            "createdAt": outcome.record.created_at,
        }
    if outcome.storage_error is not None:
        data["storageError"] = outcome.storage_error
    return data


async def _run_with_storage(args: argparse.Namespace, text: str) -> AnalysisOutcome:
    service = ListingAnalysisService()
    if args.command == "compliance":
        return await service.check_compliance(args.listing_id, text)
    return await service.analyze_seo(args.listing_id, text, args.title, args.location)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function for the listing-ai command line.

    Returns:
        Process exit code: 0 on success, 1 if the input file cannot be
        read, 2 on invalid input.
    """
    args = _build_parser().parse_args(argv)
    setup_logging()

    try:
        text = _read_text(args)
        if args.listing_id:
            payload = _outcome_to_dict(asyncio.run(_run_with_storage(args, text)))
        elif args.command == "compliance":
            payload = analyze_compliance(text).to_dict()
        else:
            payload = analyze_seo(text, args.title, args.location).to_dict()
    except InvalidInputError as e:
        logger.error(f"Invalid input: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        logger.error(f"Could not read listing text: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(payload, indent=args.indent, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
