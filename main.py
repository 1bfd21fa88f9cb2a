"""Bath rugby fixtures and events calendar scraper.

Downloads Bath Rugby home fixture results for one or more seasons, or the
number of events advertised on bath.co.uk for every day in a date range, and
writes the result as a CSV table ready to be joined against car-park
occupancy records.

Usage
-----
python main.py rugby 2015 2016 --output rugby.csv
python main.py events 2014-10-01 2015-07-17 --output events.csv
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

import pandas as pd

from bathscrape.aggregator import get_events, get_rugby
from bathscrape.errors import ScrapeError
from bathscrape.scraper import DEFAULT_TIMEOUT, EVENTS_URL, RUGBY_RESULTS_URL

logger = logging.getLogger(__name__)

DEFAULT_RUGBY_OUTPUT = Path("rugby.csv")
DEFAULT_EVENTS_OUTPUT = Path("events.csv")


def run_rugby(
    seasons: List[int],
    output_path: Path,
    *,
    base_url: str = RUGBY_RESULTS_URL,
    timeout: float = DEFAULT_TIMEOUT,
) -> pd.DataFrame:
    frame = get_rugby(seasons, base_url=base_url, timeout=timeout)
    frame.to_csv(output_path, index=False)
    logger.info("Wrote %d fixtures to %s", len(frame), output_path.resolve())
    return frame


def run_events(
    start: str,
    end: str,
    output_path: Path,
    *,
    base_url: str = EVENTS_URL,
    timeout: float = DEFAULT_TIMEOUT,
) -> pd.DataFrame:
    frame = get_events(start, end, base_url=base_url, timeout=timeout)
    frame.to_csv(output_path, index=False)
    logger.info("Wrote %d daily counts to %s", len(frame), output_path.resolve())
    return frame


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help=f"Per-request timeout in seconds (default: {DEFAULT_TIMEOUT:g})",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging for detailed progress information.",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress informational output, showing only warnings and errors.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    rugby = commands.add_parser("rugby", help="Home fixture kick-offs and results.")
    rugby.add_argument("seasons", nargs="+", type=int, help="Season-ending years, e.g. 2015 2016")
    rugby.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_RUGBY_OUTPUT,
        help="CSV file to write (default: rugby.csv)",
    )
    rugby.add_argument(
        "--rugby-url",
        default=RUGBY_RESULTS_URL,
        help="Results page; ?seasonEnding=<year> is appended.",
    )

    events = commands.add_parser("events", help="Daily advertised event counts.")
    events.add_argument("start", help="First day, YYYY-MM-DD")
    events.add_argument("end", help="Last day, YYYY-MM-DD")
    events.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_EVENTS_OUTPUT,
        help="CSV file to write (default: events.csv)",
    )
    events.add_argument(
        "--events-url",
        default=EVENTS_URL,
        help="Events calendar root; /YYYY-MM is appended.",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose and args.quiet:
        parser.error("--verbose and --quiet are mutually exclusive")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING if args.quiet else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        if args.command == "rugby":
            run_rugby(args.seasons, args.output, base_url=args.rugby_url, timeout=args.timeout)
        else:
            run_events(
                args.start, args.end, args.output, base_url=args.events_url, timeout=args.timeout
            )
    except ScrapeError as exc:
        print(f"Failed to scrape {args.command}: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
