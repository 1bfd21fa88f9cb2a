"""Data models for fixture results and daily event counts."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Tuple


@dataclass(frozen=True)
class FixtureRecord:
    """Kick-off time of one home fixture and whether the home side won."""

    kickoff: datetime
    home_win: bool


@dataclass(frozen=True)
class DailyEventCount:
    """Number of advertised events on a single day."""

    date: date
    count: int

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(f"Event count for {self.date} cannot be negative: {self.count}")


@dataclass(frozen=True)
class MonthBlock:
    """Per-day event counts scraped from one month page, in document order."""

    year_month: str
    counts: Tuple[int, ...]

    def __len__(self) -> int:
        return len(self.counts)

    def head(self, n: int) -> "MonthBlock":
        return MonthBlock(self.year_month, self.counts[: max(n, 0)])

    def drop(self, n: int) -> "MonthBlock":
        return MonthBlock(self.year_month, self.counts[max(n, 0):])
