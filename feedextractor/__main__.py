"""
Command line entry point: prints a normalized feed as JSON.
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, Dict, List, Optional

import requests

from feedextractor.errors import FeedExtractorError
from feedextractor.extractor import extract, extract_from_json, extract_from_xml
from feedextractor.models import ExtractOptions

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="feedextractor", description="Extract and normalize a web feed"
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("url", nargs="?", help="Feed URL")
    source.add_argument("--file", help="Read the feed from a local file instead")
    parser.add_argument(
        "--no-normalization",
        action="store_true",
        help="Return the dialect-native structure",
    )
    parser.add_argument(
        "--iso-dates", action="store_true", help="Format dates as ISO-8601"
    )
    parser.add_argument("--base-url", help="Base URL for relative links")
    parser.add_argument("--proxy-target", help="Proxy endpoint the URL is appended to")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser


def run(args: argparse.Namespace) -> Dict[str, Any]:
    """Extracts the feed described by parsed arguments."""
    options = ExtractOptions(
        normalization=not args.no_normalization,
        use_iso_date_format=args.iso_dates,
        base_url=args.base_url,
    )

    if args.file:
        with open(args.file, "r", encoding="utf-8") as f:
            content = f.read()
        if args.file.endswith(".json"):
            return extract_from_json(content, options)
        return extract_from_xml(content, options)

    retriever_options: Dict[str, Any] = {}
    if args.proxy_target:
        retriever_options["proxy"] = {"target": args.proxy_target}
    if args.timeout:
        retriever_options["timeout"] = args.timeout
    return asyncio.run(extract(args.url, options, retriever_options))


def main(argv: Optional[List[str]] = None) -> int:
    """Main execution entry point."""
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        result = run(args)
    except (FeedExtractorError, requests.RequestException, OSError) as e:
        logger.error("Extraction failed: %s", e)
        return 1

    json.dump(result, sys.stdout, indent=2, ensure_ascii=False, default=str)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
