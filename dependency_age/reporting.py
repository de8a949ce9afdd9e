"""
Progress display, report printing and export utilities.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import tzinfo
from pathlib import Path
from typing import Iterable, List, Optional, TextIO

import pandas as pd
from tqdm import tqdm

from .models import ReleaseRecord
from .time_utils import format_release_date


REPORT_HEADER = "Dependencies sorted by release date:"
PROGRESS_BAR_WIDTH = 40
PROGRESS_BAR_FORMAT = "[{bar:%d}] {percentage_floor}%% {n_fmt}/{total_fmt}" % PROGRESS_BAR_WIDTH
REPORT_COLUMNS = ["package", "version", "released_at", "days_ago"]


class ReleaseProgress(tqdm):
    """tqdm bar whose percentage is truncated rather than rounded."""

    @property
    def format_dict(self):
        d = super().format_dict
        total = d.get("total")
        d["percentage_floor"] = int(d["n"] * 100 / total) if total else 0
        return d


def progress_bar(total: int, file: Optional[TextIO] = None, disable: bool = False) -> tqdm:
    """Single-line progress bar: ``[====    ] 50% 2/4``, redrawn on every update."""
    return ReleaseProgress(
        total=total,
        file=file if file is not None else sys.stdout,
        bar_format=PROGRESS_BAR_FORMAT,
        ascii=" =",
        disable=disable or total == 0,
        leave=True,
        mininterval=0,
        miniters=1,
    )


def sort_records(records: Iterable[ReleaseRecord]) -> List[ReleaseRecord]:
    """Newest release first; equal dates keep their input order."""
    return sorted(records, key=lambda record: record.released_at, reverse=True)


def format_record(record: ReleaseRecord, tz: Optional[tzinfo] = None) -> str:
    return (
        f"{record.name}@{record.version} was released {record.days_ago} days ago "
        f"({format_release_date(record.released_at, tz)})"
    )


def print_report(
    records: Iterable[ReleaseRecord],
    file: Optional[TextIO] = None,
    tz: Optional[tzinfo] = None,
) -> None:
    out = file if file is not None else sys.stdout
    print(REPORT_HEADER, file=out)
    for record in sort_records(records):
        print(format_record(record, tz), file=out)


def records_to_dataframe(records: Iterable[ReleaseRecord]) -> pd.DataFrame:
    rows = [
        {
            "package": record.name,
            "version": record.version,
            "released_at": record.released_at,
            "days_ago": record.days_ago,
        }
        for record in sort_records(records)
    ]
    return pd.DataFrame(rows, columns=REPORT_COLUMNS)


def save_results_json(records: Iterable[ReleaseRecord], output_dir: Path, project: str) -> Path:
    output_dir.mkdir(parents=True, exist_ok=True)
    results_file = output_dir / f"{project}_release_dates.json"
    rows = [
        {
            "package": record.name,
            "version": record.version,
            "released_at": record.released_at.isoformat(),
            "days_ago": record.days_ago,
        }
        for record in sort_records(records)
    ]
    with open(results_file, 'w', encoding='utf-8') as f:
        json.dump(rows, f, indent=2)
    logger.debug("Saved JSON results to %s", results_file)
    return results_file


def export_csv(records: Iterable[ReleaseRecord], output_dir: Path, project: str) -> Path:
    output_dir.mkdir(parents=True, exist_ok=True)
    csv_file = output_dir / f"{project}_release_dates.csv"
    records_to_dataframe(records).to_csv(csv_file, index=False)
    logger.debug("Saved CSV results to %s", csv_file)
    return csv_file


def export_worksheet(records: Iterable[ReleaseRecord], output_dir: Path, project: str) -> Path:
    output_dir.mkdir(parents=True, exist_ok=True)
    excel_file = output_dir / f"{project}_release_dates.xlsx"
    df = records_to_dataframe(records)
    # Excel cannot store timezone-aware datetimes
    if len(df) > 0:
        df["released_at"] = (
            pd.to_datetime(df["released_at"], utc=True).dt.tz_convert("UTC").dt.tz_localize(None)
        )
    with pd.ExcelWriter(excel_file, engine='openpyxl') as writer:
        df.to_excel(writer, sheet_name="release_dates", index=False)
    logger.debug("Saved worksheet to %s", excel_file)
    return excel_file


logger = logging.getLogger(__name__)
