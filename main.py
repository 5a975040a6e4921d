"""CLI entry point: fetch a website's OpenSearch descriptor and print it as Nix."""

import argparse
import sys

import httpx

from opensearch2nix import __version__
from opensearch2nix.errors import OpenSearchError
from opensearch2nix.pipeline import build_graph, generate_nix
from opensearch2nix.utils.logger import get_logger, set_log_level

log = get_logger(__name__)


def _absolute_url(value: str) -> str:
    try:
        url = httpx.URL(value)
    except httpx.InvalidURL as exc:
        raise argparse.ArgumentTypeError(f"invalid URL: {exc}") from exc
    if not url.is_absolute_url:
        raise argparse.ArgumentTypeError(f"not an absolute URL: {value}")
    return str(url)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="opensearch2nix",
        description="Fetches a html webpage and extracts the open-search protocol information.",
    )
    parser.add_argument("website", type=_absolute_url, help="The website url to convert.")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Print progress while fetching and parsing")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        set_log_level("DEBUG")

    try:
        nix = generate_nix(args.website, build_graph())
    except OpenSearchError as exc:
        log.debug("Conversion failed", exc_info=True)
        print(f"error: {type(exc).__name__}: {exc}", file=sys.stderr)
        return 1

    print(nix)
    return 0


if __name__ == "__main__":
    sys.exit(main())
