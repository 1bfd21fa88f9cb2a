import calendar
import subprocess
import sys
from pathlib import Path

import pandas as pd

from main import main, run_events, run_rugby

ROOT = Path(__file__).resolve().parent.parent


def write_month(events_dir: Path, year_month: str, count: int = 2) -> None:
    year, month = (int(part) for part in year_month.split("-"))
    days = calendar.monthrange(year, month)[1]
    events = "".join(f"<div>Event {i}</div>" for i in range(count))
    cells = "".join(
        f'<td class="tribe-events-thismonth"><div>{day}</div>{events}</td>'
        for day in range(1, days + 1)
    )
    (events_dir / year_month).write_text(f"<table><tr>{cells}</tr></table>", encoding="utf-8")


def test_run_events_writes_csv(tmp_path: Path):
    events_dir = tmp_path / "events"
    events_dir.mkdir()
    write_month(events_dir, "2015-02", count=1)
    write_month(events_dir, "2015-03", count=4)
    output_path = tmp_path / "events.csv"

    frame = run_events("2015-02-27", "2015-03-02", output_path, base_url=events_dir.resolve().as_uri())

    written = pd.read_csv(output_path)
    assert list(written.columns) == ["Date", "count"]
    assert written["Date"].tolist() == ["2015-02-27", "2015-02-28", "2015-03-01", "2015-03-02"]
    assert written["count"].tolist() == [1, 1, 4, 4]
    assert len(frame) == 4


def test_run_rugby_writes_csv(tmp_path: Path):
    page = tmp_path / "results.html"
    page.write_text(
        '<dl><dd class="fixture homeFixture">'
        '<span class="fixtureDate"> 6 Sep 2014</span>'
        '<span class="fixtureTime">Kick Off 19:45</span>'
        '<span class="fixtureResult">Bath won 24-10</span>'
        "</dd></dl>",
        encoding="utf-8",
    )
    output_path = tmp_path / "rugby.csv"

    run_rugby([2015], output_path, base_url=page.resolve().as_uri())

    written = pd.read_csv(output_path)
    assert list(written.columns) == ["GMT", "HomeWin"]
    assert written["HomeWin"].tolist() == [True]
    assert pd.Timestamp(written["GMT"].iloc[0]) == pd.Timestamp("2014-09-06 19:45", tz="UTC")


def test_main_events_subcommand(tmp_path: Path):
    events_dir = tmp_path / "events"
    events_dir.mkdir()
    write_month(events_dir, "2015-03")
    output_path = tmp_path / "out.csv"

    main(
        [
            "--quiet",
            "events",
            "2015-03-10",
            "2015-03-20",
            "--output",
            str(output_path),
            "--events-url",
            events_dir.resolve().as_uri(),
        ]
    )

    assert len(pd.read_csv(output_path)) == 11


def test_cli_exit_on_reversed_range(tmp_path: Path):
    output_path = tmp_path / "out.csv"

    process = subprocess.run(
        [sys.executable, "main.py", "events", "2015-03-20", "2015-03-10", "--output", str(output_path)],
        capture_output=True,
        text=True,
        cwd=ROOT,
    )

    assert process.returncode != 0
    assert "Failed to scrape events" in process.stderr
    assert not output_path.exists()


def test_cli_exit_on_missing_page(tmp_path: Path):
    output_path = tmp_path / "out.csv"

    process = subprocess.run(
        [
            sys.executable,
            "main.py",
            "events",
            "2015-03-01",
            "2015-03-02",
            "--output",
            str(output_path),
            "--events-url",
            (tmp_path / "nowhere").resolve().as_uri(),
        ],
        capture_output=True,
        text=True,
        cwd=ROOT,
    )

    assert process.returncode != 0
    assert "Failed to scrape events" in process.stderr
    assert not output_path.exists()
