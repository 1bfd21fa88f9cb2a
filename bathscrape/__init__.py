"""Scrape Bath Rugby home results and bath.co.uk daily event counts."""

from .models import DailyEventCount, FixtureRecord, MonthBlock
from .errors import (
    ExtractionMismatchError,
    FetchError,
    FetchTimeoutError,
    FormatError,
    InvalidRangeError,
    RangeMismatchError,
    ScrapeError,
)
from .parser import (
    parse_fixture_date,
    parse_home_win,
    parse_kickoff_offset,
    parse_overflow_count,
)
from .selector import NodeSelector, SoupSelector
from .scraper import extract_match_results, extract_month_counts
from .aggregator import get_event_counts, get_events, get_match_results, get_rugby

__all__ = [
    "DailyEventCount",
    "ExtractionMismatchError",
    "FetchError",
    "FetchTimeoutError",
    "FixtureRecord",
    "FormatError",
    "InvalidRangeError",
    "MonthBlock",
    "NodeSelector",
    "RangeMismatchError",
    "ScrapeError",
    "SoupSelector",
    "extract_match_results",
    "extract_month_counts",
    "get_event_counts",
    "get_events",
    "get_match_results",
    "get_rugby",
    "parse_fixture_date",
    "parse_home_win",
    "parse_kickoff_offset",
    "parse_overflow_count",
]
