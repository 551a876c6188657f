"""CLI entry point for SkillsMP skill search."""

import argparse
import logging
import sys

from . import __version__
from .client import SkillsMPClient
from .errors import SkillsMPError
from .models import DEFAULT_LIMIT, DEFAULT_PAGE, DEFAULT_SORT, SORT_MODES, SearchQuery
from .project import project, render
from .settings import get_settings

logger = logging.getLogger(__name__)


def _unsigned_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid unsigned integer: {value!r}")
    if n < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value!r}")
    return n


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def build_parser(default_api_key: str | None = None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sks",
        description="SkillsMP Semantic Search",
        epilog="Examples:\n  sks python\n  sks rust --limit 5 --sort stars",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "query",
        help="Search keywords",
    )
    parser.add_argument(
        "-l",
        "--limit",
        type=_unsigned_int,
        default=DEFAULT_LIMIT,
        help=f"Number of results to return (default: {DEFAULT_LIMIT})",
    )
    parser.add_argument(
        "-p",
        "--page",
        type=_unsigned_int,
        default=DEFAULT_PAGE,
        help=f"Page number (default: {DEFAULT_PAGE})",
    )
    parser.add_argument(
        "-s",
        "--sort",
        default=DEFAULT_SORT,
        metavar="|".join(SORT_MODES),
        help=f"Sort order (default: {DEFAULT_SORT})",
    )
    parser.add_argument(
        "--api-key",
        default=default_api_key,
        help="API key (default: SKILLSMP_API_KEY from the environment or .env)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log request details to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main():
    settings = get_settings()
    parser = build_parser(default_api_key=settings.skillsmp_api_key)
    args = parser.parse_args()

    if not args.api_key:
        parser.error("--api-key is required unless SKILLSMP_API_KEY is set")

    _configure_logging(args.verbose)

    query = SearchQuery(
        query=args.query,
        api_key=args.api_key,
        limit=args.limit,
        page=args.page,
        sort=args.sort,
    )

    try:
        with SkillsMPClient(
            base_url=settings.skillsmp_base_url, timeout=settings.skillsmp_timeout
        ) as client:
            response = client.search(query)
        output = project(response, query.query)
    except SkillsMPError as e:
        logger.debug("search failed", exc_info=True)
        sys.stderr.write(f"Error: {e}\n")
        sys.exit(1)

    sys.stdout.write(render(output))
    sys.stdout.write("\n")


if __name__ == "__main__":
    main()
