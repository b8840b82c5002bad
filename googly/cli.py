#!/usr/bin/env python3
"""
googly command line

Search using various search engines from the comfort of your terminal.
"""

import argparse
import asyncio
import sys
from datetime import date, datetime
from typing import Optional, Sequence

from googly.core.config import settings
from googly.core.exceptions import GooglyException
from googly.core.logging import logger, set_verbose
from googly.crawlers.http_client import shutdown_shared_http_client
from googly.engine import SearchOptions, SearchOrchestrator, SearchResponse, TIMERANGE_CHOICES
from googly.engines import engine_names
from googly.output import OUTPUT_FORMATS, format_results


def parse_date(value: str) -> date:
    """YYYY-MM-DD -> date (argparse type)"""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date '{value}', expected YYYY-MM-DD") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="googly",
        description="Search using various search engines from the comfort of your terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Two pages of Google results
  googly -q "rust ownership" -p 2

  # Merge DuckDuckGo and Startpage, last week only, as JSON
  googly -q "rust ownership" -e ddg -e startpage -t week -f json

  # Explicit date range (Google)
  googly -q "rust ownership" --from 2019-01-01 --to 2019-12-31
        """
    )
    parser.add_argument("-q", "--query", required=True, help="String to query search engine for")
    parser.add_argument("-l", "--lang", default=settings.default_lang, help="Search result language")
    parser.add_argument(
        "-p", "--pages", type=int, default=settings.default_pages,
        help="The amount of pages to scrape per engine (-1 for all)",
    )
    parser.add_argument("-f", "--format", choices=OUTPUT_FORMATS, default="cli", help="Output format")
    parser.add_argument(
        "-e", "--engine", action="append", choices=engine_names(), dest="engines",
        help="Search engine to use (repeat to merge several engines)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Print more request infos")
    parser.add_argument("--from", dest="date_from", type=parse_date, help="Start date for the search (YYYY-MM-DD)")
    parser.add_argument("--to", dest="date_to", type=parse_date, help="End date for the search (YYYY-MM-DD)")
    parser.add_argument(
        "-t", "--time-range", choices=TIMERANGE_CHOICES, default="any",
        help="Time range in which to search",
    )
    parser.add_argument("-u", "--user-agent", default="", help="Use this user agent instead of a generated one")
    return parser


def exit_code_for(response: SearchResponse) -> int:
    """모든 엔진이 실패한 경우에만 0이 아닌 종료 코드 (첫 실패의 상태 코드, 1..255)"""
    if not response.all_failed:
        return 0
    code = response.outcomes[0].status_code or 1
    return min(max(code, 1), 255)


async def run(args: argparse.Namespace) -> SearchResponse:
    options = SearchOptions(
        lang=args.lang,
        pages=args.pages,
        date_from=args.date_from,
        date_to=args.date_to,
        timerange=args.time_range,
        user_agent=args.user_agent,
        verbose=args.verbose,
    )
    orchestrator = SearchOrchestrator()
    try:
        return await orchestrator.search(args.query, options, args.engines or settings.default_engine_list)
    finally:
        await shutdown_shared_http_client()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    set_verbose(args.verbose)

    try:
        response = asyncio.run(run(args))
    except GooglyException as e:
        logger.error(f"Search aborted: {e}")
        print(str(e), file=sys.stderr)
        return 2

    for outcome in response.failed_engines:
        print(
            f"{outcome.engine}: {outcome.status.value} (status {outcome.status_code}): {outcome.error_message}",
            file=sys.stderr,
        )

    output = format_results(response.results, args.format)
    if output:
        print(output)
    return exit_code_for(response)


if __name__ == "__main__":
    sys.exit(main())
