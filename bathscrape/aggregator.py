"""Assemble per-page extractions into season and date-range tables."""
from __future__ import annotations

import logging
from datetime import date, timedelta
from itertools import chain
from typing import Iterable, List, Optional

import pandas as pd

from .errors import InvalidRangeError, RangeMismatchError, ScrapeError
from .models import DailyEventCount, FixtureRecord, MonthBlock
from .parser import coerce_date
from .scraper import (
    DEFAULT_TIMEOUT,
    EVENTS_URL,
    RUGBY_RESULTS_URL,
    Fetcher,
    extract_match_results,
    extract_month_counts,
    month_url,
    season_url,
    session_fetcher,
)
from .selector import SoupSelector

logger = logging.getLogger(__name__)


def months_between(start: date, end: date) -> List[str]:
    """Return ``YYYY-MM`` identifiers of every month overlapping [start, end]."""

    months = []
    year, month = start.year, start.month
    while (year, month) <= (end.year, end.month):
        months.append(f"{year:04d}-{month:02d}")
        year, month = (year + 1, 1) if month == 12 else (year, month + 1)
    return months


def days_between(start: date, end: date) -> List[date]:
    return [start + timedelta(days=offset) for offset in range((end - start).days + 1)]


def trim_blocks(blocks: List[MonthBlock], start: date, end: date) -> List[MonthBlock]:
    """Cut the last block after ``end`` and the first block before ``start``.

    When both dates fall in the same month the single block is first cut to
    ``end.day`` entries and then loses its first ``start.day - 1`` entries.
    """

    if not blocks:
        return []
    trimmed = list(blocks)
    trimmed[-1] = trimmed[-1].head(end.day)
    trimmed[0] = trimmed[0].drop(start.day - 1)
    return trimmed


def get_match_results(
    seasons: Iterable[int],
    *,
    fetcher: Optional[Fetcher] = None,
    base_url: str = RUGBY_RESULTS_URL,
    timeout: float = DEFAULT_TIMEOUT,
) -> List[FixtureRecord]:
    """Return home fixtures of every requested season, sorted by kick-off."""

    fetch = fetcher or session_fetcher(timeout)
    records: List[FixtureRecord] = []
    for season in seasons:
        url = season_url(season, base_url)
        logger.info("Fetching season %s: %s", season, url)
        try:
            selector = SoupSelector.from_html(fetch(url))
            records.extend(extract_match_results(season, selector))
        except ScrapeError as exc:
            exc.context.setdefault("url", url)
            logger.error("Failed to scrape season %s: %s", season, exc)
            raise
    return sorted(records, key=lambda record: record.kickoff)


def get_event_counts(
    start,
    end,
    *,
    fetcher: Optional[Fetcher] = None,
    base_url: str = EVENTS_URL,
    timeout: float = DEFAULT_TIMEOUT,
) -> List[DailyEventCount]:
    """Return one event count per day from *start* to *end* inclusive.

    Both bounds accept a date, a datetime or a ``YYYY-MM-DD`` string.
    """

    start, end = coerce_date(start), coerce_date(end)
    if start > end:
        raise InvalidRangeError(f"Range start {start} is after range end {end}")

    fetch = fetcher or session_fetcher(timeout)
    blocks: List[MonthBlock] = []
    for year_month in months_between(start, end):
        url = month_url(year_month, base_url)
        logger.info("Fetching events for %s: %s", year_month, url)
        try:
            selector = SoupSelector.from_html(fetch(url))
            blocks.append(extract_month_counts(year_month, selector))
        except ScrapeError as exc:
            exc.context.setdefault("url", url)
            logger.error("Failed to scrape events for %s: %s", year_month, exc)
            raise

    counts = list(chain.from_iterable(block.counts for block in trim_blocks(blocks, start, end)))
    days = days_between(start, end)
    if len(counts) != len(days):
        sizes = ", ".join(f"{block.year_month}={len(block)}" for block in blocks)
        raise RangeMismatchError(
            f"Scraped {len(counts)} daily counts for {len(days)} days "
            f"from {start} to {end} (month blocks: {sizes})",
            expected=len(days),
            actual=len(counts),
        )
    return [DailyEventCount(date=day, count=count) for day, count in zip(days, counts)]


# -------------------------
# Output helpers
# -------------------------

def match_results_to_frame(records: Iterable[FixtureRecord]) -> pd.DataFrame:
    frame = pd.DataFrame.from_records(
        [{"GMT": record.kickoff, "HomeWin": record.home_win} for record in records],
        columns=["GMT", "HomeWin"],
    )
    frame["GMT"] = pd.to_datetime(frame["GMT"], utc=True)
    frame["HomeWin"] = frame["HomeWin"].astype(bool)
    return frame


def event_counts_to_frame(series: Iterable[DailyEventCount]) -> pd.DataFrame:
    frame = pd.DataFrame.from_records(
        [{"Date": item.date, "count": item.count} for item in series],
        columns=["Date", "count"],
    )
    frame["Date"] = pd.to_datetime(frame["Date"])
    frame["count"] = frame["count"].astype(int)
    return frame


def get_rugby(seasons: Iterable[int], **kwargs) -> pd.DataFrame:
    """Home fixture kick-offs (``GMT``) and outcomes (``HomeWin``) as a data frame."""

    return match_results_to_frame(get_match_results(seasons, **kwargs))


def get_events(start, end, **kwargs) -> pd.DataFrame:
    """Daily event counts (``Date``, ``count``) as a data frame."""

    return event_counts_to_frame(get_event_counts(start, end, **kwargs))
