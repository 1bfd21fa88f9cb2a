"""Download and extract Bath Rugby results and bath.co.uk event calendars."""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, List, Optional
from urllib.parse import unquote, urlparse

import requests

from .errors import ExtractionMismatchError, FetchError, FetchTimeoutError, ScrapeError
from .models import FixtureRecord, MonthBlock
from .parser import (
    parse_fixture_date,
    parse_home_win,
    parse_kickoff_offset,
    parse_overflow_count,
)
from .selector import NodeSelector

logger = logging.getLogger(__name__)

# -------------------------
# Configuration defaults
# -------------------------

RUGBY_RESULTS_URL = (
    "http://www.bathrugby.com/fixtures-results/results-tables/results-match-reports/"
)
EVENTS_URL = "http://www.bath.co.uk/events/"
DEFAULT_TIMEOUT = 20.0
USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 14_0) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/124.0 Safari/537.36"
)

# -------------------------
# Selectors
# -------------------------
FIXTURE_DATE_QUERY = "dd.fixture.homeFixture > span.fixtureDate"
FIXTURE_TIME_QUERY = "dd.fixture.homeFixture > span.fixtureTime"
FIXTURE_RESULT_QUERY = "dd.fixture.homeFixture > span.fixtureResult"
DAY_CELL_QUERY = "td.tribe-events-thismonth"
VIEW_MORE_QUERY = "> div.tribe-events-viewmore"
DAY_DIV_QUERY = "> div"

Fetcher = Callable[[str], str]


# -------------------------
# HTTP helpers
# -------------------------

def build_session() -> requests.Session:
    """Return a basic requests session with a browser-like user agent."""

    session = requests.Session()
    session.headers.update({"User-Agent": USER_AGENT})
    return session


def default_fetch(
    url: str,
    *,
    session: Optional[requests.Session] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> str:
    """Return the HTML at *url*; ``file://`` URLs are read from disk."""

    parsed = urlparse(url)
    if parsed.scheme == "file":
        try:
            return Path(unquote(parsed.path)).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise FetchError(f"Failed to read {url}: {exc}", url=url) from exc

    session = session or build_session()
    try:
        response = session.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.Timeout as exc:
        raise FetchTimeoutError(f"Timed out after {timeout}s fetching {url}", url=url) from exc
    except requests.RequestException as exc:
        raise FetchError(f"Failed to fetch {url}: {exc}", url=url) from exc
    return response.text


def session_fetcher(timeout: float = DEFAULT_TIMEOUT) -> Fetcher:
    """Return a fetcher reusing one session for every page it downloads."""

    session = build_session()

    def fetch(url: str) -> str:
        return default_fetch(url, session=session, timeout=timeout)

    return fetch


def season_url(season: int, base: str = RUGBY_RESULTS_URL) -> str:
    return f"{base}?seasonEnding={int(season)}"


def month_url(year_month: str, base: str = EVENTS_URL) -> str:
    return f"{base.rstrip('/')}/{year_month}"


# -------------------------
# Extraction
# -------------------------

def extract_match_results(season: int, selector: NodeSelector) -> List[FixtureRecord]:
    """Return the home fixtures of one season in chronological order.

    The results page lists matches newest-first, with dates, kick-off labels
    and result labels in three separate spans per fixture.  Each column is
    reversed on its own before the columns are combined, and the three columns
    must have the same length.
    """

    dates = selector.select_text(FIXTURE_DATE_QUERY)
    times = selector.select_text(FIXTURE_TIME_QUERY)
    results = selector.select_text(FIXTURE_RESULT_QUERY)
    if not len(dates) == len(times) == len(results):
        raise ExtractionMismatchError(
            f"Season {season}: found {len(dates)} dates, {len(times)} kick-off times "
            f"and {len(results)} results for home fixtures",
            context={"season": season},
        )
    if not dates:
        logger.warning("No home fixtures found for season %s", season)
        return []

    days = [parse_fixture_date(raw) for raw in reversed(dates)]
    offsets = [parse_kickoff_offset(raw) for raw in reversed(times)]
    home_wins = [parse_home_win(raw) for raw in reversed(results)]

    kickoffs = [
        datetime(day.year, day.month, day.day, tzinfo=timezone.utc) + offset
        for day, offset in zip(days, offsets)
    ]
    records = [
        FixtureRecord(kickoff=kickoff, home_win=home_win)
        for kickoff, home_win in zip(kickoffs, home_wins)
    ]
    logger.debug("Parsed %d home fixtures for season %s", len(records), season)
    return records


def count_day_events(cell: NodeSelector) -> int:
    """Return the number of events advertised in one calendar day-cell."""

    view_more = cell.select_text(VIEW_MORE_QUERY)
    if view_more:
        # "View all N events"
        return parse_overflow_count(view_more[0])

    # One div holds the day number; every other div is an event.
    count = cell.count(DAY_DIV_QUERY) - 1
    if count < 0:
        raise ExtractionMismatchError("Day-cell has no day-number div")
    return count


def extract_month_counts(year_month: str, selector: NodeSelector) -> MonthBlock:
    """Return the event count of every "this month" day-cell on a calendar page."""

    counts = []
    for index, cell in enumerate(selector.select(DAY_CELL_QUERY), start=1):
        try:
            counts.append(count_day_events(cell))
        except ScrapeError as exc:
            exc.context.setdefault("month", year_month)
            exc.context.setdefault("cell", index)
            raise
    logger.debug("Parsed %d day-cells for %s", len(counts), year_month)
    return MonthBlock(year_month=year_month, counts=tuple(counts))
